"""Scanner states for the code-block scanner."""

from __future__ import annotations

from enum import Enum, auto


class CodeScanState(Enum):
    """Code-block scanner states.

    The scanner only ever moves forward through these:
    - SCANNING_HEADERS: Reading ``key: value`` lines at the top of the block
    - SCANNING_SOURCE: Reading the remaining lines as literal source

    """

    SCANNING_HEADERS = auto()
    SCANNING_SOURCE = auto()
