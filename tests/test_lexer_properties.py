"""Property-based and table-driven tests for lexer invariants.

Uses Hypothesis to check that whitespace is transparent, that every
non-whitespace character ends up in exactly one token, and that the batch
API always terminates with a single EOF.
"""

import string

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from monkey.lexer import KEYWORDS, Lexer, Token, TokenType
from monkey.lexer.lexer import is_whitespace
from monkey.lexer.tokens import SINGLE_CHAR_TOKENS, U32_MAX


WORDS = st.one_of(
    st.sampled_from(sorted(SINGLE_CHAR_TOKENS) + ["=", "==", "!=", "!"]),
    st.sampled_from(sorted(KEYWORDS)),
    st.text(alphabet=string.ascii_letters + "_", min_size=1, max_size=8),
    st.integers(min_value=0, max_value=U32_MAX).map(str),
)

WHITESPACE = st.text(alphabet=" \t\n\r\x0b\x0c", min_size=1, max_size=6)


@pytest.mark.parametrize("char,token_type", sorted(SINGLE_CHAR_TOKENS.items()))
def test_single_char_operator(char, token_type):
    lexer = Lexer(char)
    assert lexer.next_token() == Token(token_type, char)
    assert lexer.next_token() is None


@pytest.mark.parametrize("source,expected", [
    ("==", [Token(TokenType.EQUAL, "==")]),
    ("=", [Token(TokenType.ASSIGN, "=")]),
    ("!=", [Token(TokenType.NOT_EQUAL, "!=")]),
    ("!", [Token(TokenType.ILLEGAL, "!")]),
    ("=!", [Token(TokenType.ASSIGN, "="), Token(TokenType.ILLEGAL, "!")]),
    ("!==", [Token(TokenType.NOT_EQUAL, "!="), Token(TokenType.ASSIGN, "=")]),
    ("a==b", [
        Token(TokenType.IDENTIFIER, "a", "a"),
        Token(TokenType.EQUAL, "=="),
        Token(TokenType.IDENTIFIER, "b", "b"),
    ]),
])
def test_lookahead_operators(source, expected):
    assert list(Lexer(source)) == expected


class TestWhitespaceTransparency:

    @given(st.data())
    @settings(max_examples=200)
    def test_padding_does_not_change_tokens(self, data) -> None:
        """Any whitespace run between tokens scans the same as a single space."""
        words = data.draw(st.lists(WORDS, max_size=25))
        gaps = data.draw(st.lists(WHITESPACE, min_size=len(words) + 1, max_size=len(words) + 1))

        plain = " ".join(words)
        padded = gaps[0] + "".join(word + gap for word, gap in zip(words, gaps[1:]))

        assert list(Lexer(padded)) == list(Lexer(plain))

    @given(st.lists(WORDS, max_size=25))
    def test_one_token_per_word(self, words) -> None:
        tokens = list(Lexer(" ".join(words)))
        assert len(tokens) == len(words)
        assert [t.lexeme for t in tokens] == words


class TestScannerInvariants:

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_always_ends_with_single_eof(self, source: str) -> None:
        tokens = Lexer(source).tokenize()
        assert tokens[-1] == Token(TokenType.EOF, "")
        assert sum(1 for t in tokens if t.type == TokenType.EOF) == 1

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_lexemes_cover_all_non_whitespace(self, source: str) -> None:
        """Every non-whitespace character lands in exactly one token, in order."""
        tokens = list(Lexer(source))
        assert "".join(t.lexeme for t in tokens) == "".join(c for c in source if not is_whitespace(c))
        assert all(t.lexeme for t in tokens)

    @given(st.text(alphabet=string.ascii_letters + string.digits + "_ =!", max_size=200))
    def test_identifiers_never_spell_keywords(self, source: str) -> None:
        for token in Lexer(source):
            if token.type == TokenType.IDENTIFIER:
                assert token.value not in KEYWORDS
                assert token.value == token.lexeme
            elif token.type == TokenType.INTEGER:
                assert 0 <= token.value <= U32_MAX
                assert token.lexeme.isdigit()

    @given(st.integers(min_value=U32_MAX + 1, max_value=10 ** 30))
    def test_overflow_is_reported_not_raised(self, value: int) -> None:
        lexer = Lexer(str(value))
        assert list(lexer) == [Token(TokenType.ILLEGAL, str(value))]
        assert [e.code for e in lexer.errors] == ["L007"]

    @given(st.text(max_size=100))
    def test_reconstruction_restarts_the_stream(self, source: str) -> None:
        assert list(Lexer(source)) == list(Lexer(source))
