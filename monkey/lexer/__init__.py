"""
Monkey Lexer Package

Implements the lexical analyzer (tokenizer) for the Monkey language.

Key Features:
- Pull-based scanning: one token per call, no buffering of the whole stream
- One character of lookahead for == and !=
- Fixed keyword table (fn, let, true, false, if, else, return)
- ILLEGAL tokens for unrecognized input, with diagnostics
- Integer overflow reported instead of aborting the scan

Author: xwest
"""

from .tokens import Token, TokenType, KEYWORDS
from .lexer import Lexer, LexerConfig, tokenize_string, tokenize_file
from .errors import LexerError, LexerWarning

__all__ = [
    "Lexer",
    "LexerConfig",
    "Token",
    "TokenType",
    "KEYWORDS",
    "LexerError",
    "LexerWarning",
    "tokenize_string",
    "tokenize_file",
]
