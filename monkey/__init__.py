"""
Monkey Language Front End

Lexical analysis for the Monkey scripting language: a small C-like language
with let bindings, first-class functions, integers and booleans.

Architecture:
    monkey/
    ├── lexer/           # Tokenization and lexical analysis
    ├── utils/           # Logging helpers
    └── cli.py           # monkey-lex command-line driver

Author: xwest
License: MIT
"""

__version__ = "0.1.0"
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Lexer, LexerConfig, Token, TokenType

__all__ = [
    # Core classes
    "Lexer",
    "LexerConfig",
    "Token",
    "TokenType",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
