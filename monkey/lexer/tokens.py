"""
Token definitions for the Monkey lexer.

This module defines every token type the Monkey language knows about:
- Special tokens (end of input, illegal characters)
- Operators and punctuation
- Keywords
- Identifiers and integer literals

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenType(Enum):
    """
    Enumeration of all token types in Monkey.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input (only emitted by tokenize())
    ILLEGAL = auto()                # Unrecognized character or bad literal

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENTIFIER = auto()             # add, foo_bar
    INTEGER = auto()                # 42 (unsigned 32-bit)

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # =
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    ASTERISK = auto()               # *
    SLASH = auto()                  # /

    GREATER_THAN = auto()           # >
    LESS_THAN = auto()              # <
    EQUAL = auto()                  # ==
    NOT_EQUAL = auto()              # !=

    # ========================================================================
    # Punctuation and Delimiters
    # ========================================================================
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }

    # ========================================================================
    # Keywords
    # ========================================================================
    FUNCTION = auto()               # fn
    LET = auto()                    # let
    TRUE = auto()                   # true
    FALSE = auto()                  # false
    IF = auto()                     # if
    ELSE = auto()                   # else
    RETURN = auto()                 # return


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Monkey language.

    Carries the token type, the raw text it was scanned from and, for
    identifiers and integers, the semantic value.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    value: Any = None               # str for IDENTIFIER, int for INTEGER

    def __str__(self) -> str:
        if self.value is not None and self.value != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, {self.value!r})"

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator."""
        return self.type in OPERATOR_TYPES

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER

    @property
    def is_illegal(self) -> bool:
        return self.type == TokenType.ILLEGAL


# Lookup tables for keyword and operator recognition

KEYWORDS = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}

# Tokens that are always exactly one character long.
# '=' and '!' are absent: they need a character of lookahead.
SINGLE_CHAR_TOKENS = {
    ";": TokenType.SEMICOLON,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    ",": TokenType.COMMA,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    ">": TokenType.GREATER_THAN,
    "<": TokenType.LESS_THAN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
}

# Full operator spelling table, used for diagnostics and suggestions
OPERATORS = {
    **SINGLE_CHAR_TOKENS,
    "=": TokenType.ASSIGN,
    "==": TokenType.EQUAL,
    "!=": TokenType.NOT_EQUAL,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())

OPERATOR_TYPES = frozenset({
    TokenType.ASSIGN, TokenType.PLUS, TokenType.MINUS,
    TokenType.ASTERISK, TokenType.SLASH,
    TokenType.GREATER_THAN, TokenType.LESS_THAN,
    TokenType.EQUAL, TokenType.NOT_EQUAL,
})

# Largest value an INTEGER token may carry (unsigned 32-bit)
U32_MAX = 2 ** 32 - 1


def lookup_identifier(word: str) -> TokenType:
    """Return the keyword type for `word`, or IDENTIFIER if it isn't one."""
    return KEYWORDS.get(word, TokenType.IDENTIFIER)

