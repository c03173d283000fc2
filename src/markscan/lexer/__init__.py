"""Cursor-based scanners for markscan.

Architecture:
lexer/
├── __init__.py          # Re-exports
├── base.py              # ScannerBase engine + Tokenizer protocol
├── charsets.py          # EOF sentinel, line/space classes, helpers
├── code.py              # CodeTokenizer (code-block headers + source)
└── modes.py             # CodeScanState enum

Usage:
    >>> from markscan.lexer import CodeTokenizer
    >>> for token in CodeTokenizer("a: b\\nprint(a)").tokenize():
    ...     print(token)
    Token(CODE_KEY, 'a', 0:0)
    Token(COLON, ':', 0:1)
    Token(SPACE, ' ', 1, 0:2)
    Token(CODE_VALUE, 'b', 0:3)
    Token(BR, '\\n', 1, 0:4)
    Token(CODE_SOURCE, 'print(a)', 1:0)

"""

from markscan.lexer.base import ScannerBase, Tokenizer, TokenizerFactory
from markscan.lexer.code import CodeTokenizer
from markscan.lexer.modes import CodeScanState

__all__ = [
    "CodeScanState",
    "CodeTokenizer",
    "ScannerBase",
    "Tokenizer",
    "TokenizerFactory",
]
