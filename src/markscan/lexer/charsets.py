"""Character classes shared by the scanners.

Match arguments accepted by the scanner primitives are a single string,
an iterable of strings, or None. The constants below are written in that
shape so they can be passed straight through, e.g.
``self.advance_until(*EOL)`` or ``self.next_is(SPACE)``.

Usage:
    from markscan.lexer.charsets import EOF, EOL, SPACE

    if self.next_is(EOL):
        ...
"""

from __future__ import annotations

from collections.abc import Iterable

# End-of-input sentinel returned by every out-of-bounds read
EOF = "\0"

BR = "\n"
EOL: tuple[str, ...] = (BR, EOF)
SPACE: tuple[str, ...] = (" ", "\t")
DASH: tuple[str, ...] = ("-", "–", "—")  # hyphen, en dash, em dash

Match = str | Iterable[str] | None


def flatten_matches(matches: Iterable[Match]) -> list[str]:
    """Flatten match arguments into a flat list of candidate strings.

    None entries are dropped. Strings are kept whole, never split into
    characters.

    Example:
        >>> flatten_matches([":", EOL, None])
        [':', '\\n', '\\x00']
    """
    flat: list[str] = []
    for match in matches:
        if match is None:
            continue
        if isinstance(match, str):
            flat.append(match)
        else:
            flat.extend(match)
    return flat


def is_space(c: str | None) -> bool:
    """Return True if the character is a space or tab."""
    return c == " " or c == "\t"


def is_alpha(c: str | None) -> bool:
    """Return True if the character is an ASCII letter.

    Dashes and underscores are not letters.
    """
    return c is not None and len(c) == 1 and ("a" <= c <= "z" or "A" <= c <= "Z")


def is_number(c: str | None) -> bool:
    """Return True if the character is an ASCII digit.

    Signs are not digits.
    """
    return c is not None and len(c) == 1 and "0" <= c <= "9"


def is_alphanumeric(c: str | None) -> bool:
    """Return True for letters, digits and the word punctuation ``.``, ``+``, ``-``."""
    return is_alpha(c) or is_number(c) or c in (".", "+", "-")


def nl(*lines: str) -> str:
    """Join lines with newlines.

    Example:
        >>> nl("title: demo", "print(1)")
        'title: demo\\nprint(1)'
    """
    return BR.join(lines)
