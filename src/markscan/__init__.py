"""
markscan: cursor-based scanners for a lightweight markup language

Turns raw source text into an ordered list of typed tokens for a
downstream parser. Ships the scanning engine and the code-block scanner;
scanners for other constructs plug in through ``ScannerBase``.

Quick Start:
    >>> from markscan import tokenize
    >>> tokens = tokenize("lang: python\\nprint('hi')")
    >>> [(t.type.name, t.lexeme) for t in tokens if t.type.name.startswith("CODE")]
    [('CODE_KEY', 'lang'), ('CODE_VALUE', 'python'), ('CODE_SOURCE', "print('hi')")]

Custom scanners:
    >>> from markscan import EOF, SPACE, ScannerBase, TokenType
    >>> class Words(ScannerBase):
    ...     def tokenize(self):
    ...         while not self.current_is(EOF):
    ...             self.advance_on_line_until(SPACE)
    ...             self.add(TokenType.TEXT)
    ...             self.scan_spaces()
    ...             self.scan_brs()
    ...         return self.tokens
"""

from dataclasses import replace

from markscan.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from markscan.errors import CursorMovementError, MarkscanError
from markscan.lexer import (
    CodeScanState,
    CodeTokenizer,
    ScannerBase,
    Tokenizer,
    TokenizerFactory,
)
from markscan.lexer.charsets import BR, EOF, EOL, SPACE
from markscan.location import SourceLocation
from markscan.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: str,
    tokenizer: TokenizerFactory = CodeTokenizer,
    *,
    source_file: str | None = None,
) -> list[Token]:
    """Tokenize source with a fresh scanner.

    NUL (``"\\0"``) is the end-of-input sentinel. Scanning stops at the first
    NUL in ``source`` without raising, so any text after it produces no
    tokens. Strip or replace NUL characters first if that text matters.

    Args:
        source: Text to scan
        tokenizer: Scanner class (or any factory taking the source text);
            defaults to CodeTokenizer
        source_file: Optional path stamped on every token that does not
            already carry one

    Returns:
        Tokens in source order.
    """
    tokens = tokenizer(source).tokenize()
    if source_file is None:
        return tokens
    return [replace(t, source_file=t.source_file or source_file) for t in tokens]


__all__ = [
    "BR",
    "EOF",
    "EOL",
    "SPACE",
    "CodeScanState",
    "CodeTokenizer",
    "CursorMovementError",
    "MarkscanError",
    "ScanConfig",
    "ScannerBase",
    "SourceLocation",
    "Token",
    "TokenType",
    "Tokenizer",
    "TokenizerFactory",
    "__version__",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    "tokenize",
]
