"""Logger lookup for the markscan scanners.

Scanners log at DEBUG only (mode switches, sub-tokenization handoffs).
All loggers hang off the ``markscan`` logger, which carries a NullHandler
so an application that never configures logging sees no output.

Example:
    >>> import logging
    >>> logging.basicConfig(level=logging.DEBUG)
    >>> from markscan import tokenize
    >>> tokens = tokenize("lang: py\\nprint(1)")  # logs the header/source switch
"""

from __future__ import annotations

import logging

_ROOT = "markscan"

logging.getLogger(_ROOT).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` under the ``markscan`` namespace.

    Module names inside the package are used as-is; anything else is
    nested below ``markscan.``.

    Example:
        >>> get_logger("markscan.lexer.code").name
        'markscan.lexer.code'
        >>> get_logger("plugins").name
        'markscan.plugins'
    """
    if name != _ROOT and not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
