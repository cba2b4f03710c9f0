"""
Monkey Lexer - turns source text into tokens, one token per call.

The scanner is a single pass over the source with one character of
lookahead. Identifiers and integers are read with maximal munch; the only
two-character operators (== and !=) are handled by explicit peeks.

xwest
"""

import string
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Union

from .tokens import Token, TokenType, SINGLE_CHAR_TOKENS, U32_MAX, lookup_identifier
from .errors import (
    LexerError, LexerWarning, create_invalid_character_warning,
    create_integer_overflow_error
)
from ..utils.logger import get_logger

logger = get_logger(__name__)

LETTERS = frozenset(string.ascii_letters + "_")
DIGITS = frozenset(string.digits)

# Unicode White_Space property. str.isspace also accepts U+001C..U+001F
# (information separators), which are not whitespace in Monkey source.
WHITESPACE = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def is_letter(char: str) -> bool:
    """ASCII letters and underscore. Digits never continue an identifier."""
    return char in LETTERS


def is_digit(char: str) -> bool:
    return char in DIGITS


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE


@dataclass
class LexerConfig:
    """Scanner settings."""
    strict: bool = False            # Raise LexerError on integer overflow
    max_integer: int = U32_MAX      # Largest value an INTEGER token may hold
    filename: str = "<string>"      # Name reported in diagnostics


class Lexer:
    """
    Monkey lexical analyzer.

    Produces tokens on demand: each call to `next_token()` skips whitespace,
    scans exactly one token and returns it, or returns None once only
    whitespace remains. The lexer is also an iterator over the same stream.

    Unrecognized characters come back as ILLEGAL tokens rather than
    exceptions, and are recorded in `warnings`. Integer literals that do not
    fit in `config.max_integer` are returned as ILLEGAL tokens and recorded
    in `errors`, or raised as `LexerError` in strict mode.
    """

    def __init__(self, source: str, config: Optional[LexerConfig] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            config: Scanner settings, defaults to LexerConfig()
        """
        self.source = source
        self.config = config or LexerConfig()
        self.pos = 0
        self.errors: List[LexerError] = []
        self.warnings: List[LexerWarning] = []

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self) -> Optional[Token]:
        """
        Scan the next token.

        Returns:
            The next token, or None when the input is exhausted

        Raises:
            LexerError: On integer overflow when config.strict is set
        """
        self._skip_whitespace()
        if self._at_end():
            return None

        start_pos = self.pos
        current_char = self._advance()

        token_type = SINGLE_CHAR_TOKENS.get(current_char)
        if token_type is not None:
            return Token(token_type, current_char)

        if current_char == '=':
            if self._peek() == '=':
                self._advance()
                return Token(TokenType.EQUAL, '==')
            return Token(TokenType.ASSIGN, '=')

        if current_char == '!':
            if self._peek() == '=':
                self._advance()
                return Token(TokenType.NOT_EQUAL, '!=')
            # Bare '!' is not an operator in Monkey
            return self._illegal(current_char, start_pos)

        if is_letter(current_char):
            return self._tokenize_identifier_or_keyword(start_pos)

        if is_digit(current_char):
            return self._tokenize_integer(start_pos)

        return self._illegal(current_char, start_pos)

    def tokenize(self) -> List[Token]:
        """
        Drain the remaining input.

        Returns:
            List of tokens, terminated by exactly one EOF token
        """
        tokens = list(self)
        tokens.append(Token(TokenType.EOF, ""))
        return tokens

    def _tokenize_identifier_or_keyword(self, start_pos: int) -> Token:
        """Read the rest of an identifier and resolve it against the keyword table."""
        self._advance_while(is_letter)
        lexeme = self.source[start_pos:self.pos]

        token_type = lookup_identifier(lexeme)
        value = lexeme if token_type == TokenType.IDENTIFIER else None
        return Token(token_type, lexeme, value)

    def _tokenize_integer(self, start_pos: int) -> Token:
        """Read the rest of a decimal integer literal."""
        self._advance_while(is_digit)
        lexeme = self.source[start_pos:self.pos]

        value = int(lexeme)
        if value > self.config.max_integer:
            error = create_integer_overflow_error(
                lexeme, start_pos, self.config.max_integer, self.config.filename
            )
            if self.config.strict:
                raise error
            logger.debug("integer literal %s at offset %d overflows", lexeme, start_pos)
            self.errors.append(error)
            return Token(TokenType.ILLEGAL, lexeme)

        return Token(TokenType.INTEGER, lexeme, value)

    def _illegal(self, char: str, offset: int) -> Token:
        logger.debug("illegal character %r at offset %d", char, offset)
        self.warnings.append(
            create_invalid_character_warning(char, offset, self.config.filename)
        )
        return Token(TokenType.ILLEGAL, char)

    def _skip_whitespace(self) -> None:
        while not self._at_end() and is_whitespace(self.source[self.pos]):
            self.pos += 1

    def _advance_while(self, test: Callable[[str], bool]) -> None:
        """Consume characters for as long as `test` accepts the next one."""
        while not self._at_end() and test(self.source[self.pos]):
            self.pos += 1

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self.source[self.pos]
        self.pos += 1
        return char

    def _peek(self) -> str:
        """Look at the current character without consuming it."""
        if self.pos < len(self.source):
            return self.source[self.pos]
        return '\0'

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if lexer encountered any warnings."""
        return len(self.warnings) > 0

    def get_diagnostics(self) -> List[Union[LexerError, LexerWarning]]:
        """Get all diagnostics (errors and warnings)."""
        return self.errors + self.warnings


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens ending in EOF

    Raises:
        LexerError: If an integer literal overflowed
    """
    lexer = Lexer(source, LexerConfig(filename=filename))
    tokens = lexer.tokenize()

    if lexer.has_errors():
        # Raise the first error encountered
        raise lexer.errors[0]

    return tokens


def tokenize_file(filepath: str) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file

    Returns:
        List of tokens ending in EOF

    Raises:
        LexerError: If an integer literal overflowed
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath)
