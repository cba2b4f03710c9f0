"""
Error handling for the Monkey lexer.

Provides diagnostic records with the offending source offset, operator
suggestions, and helpers for building the common lexer errors.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """Base class for lexer diagnostics (errors, warnings, info)."""
    message: str
    offset: int  # Character index of the offending token in the source
    severity: str  # "error", "warning", "info", "hint"
    filename: str = "<string>"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix = f"{severity_prefix}[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.filename}@{self.offset}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer encounters an error.

    In the default (lenient) mode these are collected on the lexer rather
    than raised; strict mode raises integer overflow errors directly.
    """

    def __init__(
        self,
        message: str,
        offset: int,
        filename: str = "<string>",
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            offset=offset,
            severity="error",
            filename=filename,
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def offset(self) -> int:
        return self.diagnostic.offset

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerWarning:
    """
    Represents a lexer warning that doesn't stop scanning.
    """

    def __init__(
        self,
        message: str,
        offset: int,
        filename: str = "<string>",
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            offset=offset,
            severity="warning",
            filename=filename,
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


class ErrorRecovery:
    """
    Suggestion helpers used when reporting lexer diagnostics.
    """

    @staticmethod
    def suggest_operator_corrections(invalid_op: str) -> List[str]:
        """Suggest operators that extend an incomplete operator (e.g. '!' -> '!=')."""
        from .tokens import OPERATORS

        suggestions = []
        for operator in OPERATORS.keys():
            if operator != invalid_op and operator.startswith(invalid_op):
                suggestions.append(operator)

        return suggestions[:3]


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L007": "Number literal overflow",
}


def create_invalid_character_warning(char: str, offset: int, filename: str = "<string>") -> LexerWarning:
    """Create a warning for a character that starts no Monkey token."""
    suggestions = ErrorRecovery.suggest_operator_corrections(char)

    if suggestions:
        help_text = f"Did you mean: {', '.join(suggestions)}?"
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in Monkey source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerWarning(
        message=f"Invalid character: {char!r}",
        offset=offset,
        filename=filename,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )


def create_integer_overflow_error(lexeme: str, offset: int, max_value: int,
                                  filename: str = "<string>") -> LexerError:
    """Create an error for an integer literal that doesn't fit the integer type."""
    return LexerError(
        message=f"Integer literal out of range: '{lexeme}'",
        offset=offset,
        filename=filename,
        code="L007",
        help_text=f"Integer literals must be between 0 and {max_value}.",
    )
