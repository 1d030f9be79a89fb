"""
Tests for the token model and token rendering.
"""

import dataclasses

import pytest

from vcl_lexer.errors import Location
from vcl_lexer.tokens import (
    PAYLOAD_TYPES,
    PUNCTUATION,
    Token,
    TokenType,
    format_token,
    token_type_name,
)


LOC = Location("main.vcl", 0, 0)


# =============================================================================
# Token Construction
# =============================================================================

class TestTokenPayloads:
    """The payload kind is fixed by the token type."""

    def test_identity_carries_text(self):
        token = Token.identity("server", LOC)
        assert token.type == TokenType.IDENTITY
        assert token.text == "server"
        assert token.number is None

    def test_string_carries_text(self):
        token = Token.string_literal("hello", LOC)
        assert token.text == "hello"
        assert token.number is None

    def test_number_carries_int(self):
        token = Token.number_literal(42, LOC)
        assert token.number == 42
        assert token.text is None

    def test_punctuation_carries_nothing(self):
        token = Token.punctuation(TokenType.SEMICOLON, LOC)
        assert token.payload is None
        assert token.text is None
        assert token.number is None

    def test_number_rejects_text(self):
        with pytest.raises(ValueError, match="payload of type int"):
            Token(TokenType.NUMBER, LOC, "42")

    def test_number_rejects_bool(self):
        with pytest.raises(ValueError):
            Token(TokenType.NUMBER, LOC, True)

    def test_identity_requires_text(self):
        with pytest.raises(ValueError):
            Token(TokenType.IDENTITY, LOC)

    def test_punctuation_rejects_payload(self):
        with pytest.raises(ValueError, match="takes no payload"):
            Token(TokenType.OPEN_PAREN, LOC, "(")

    def test_return_takes_no_payload(self):
        """RETURN is reserved and carries nothing."""
        assert Token(TokenType.RETURN, LOC).payload is None
        with pytest.raises(ValueError):
            Token(TokenType.RETURN, LOC, "return")

    def test_tokens_are_immutable(self):
        token = Token.identity("x", LOC)
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.payload = "y"

    def test_payload_table_covers_value_kinds(self):
        assert set(PAYLOAD_TYPES) == {TokenType.IDENTITY, TokenType.STRING, TokenType.NUMBER}

    def test_punctuation_table(self):
        assert PUNCTUATION == {
            "(": TokenType.OPEN_PAREN,
            ")": TokenType.CLOSE_PAREN,
            "{": TokenType.OPEN_CURLY,
            "}": TokenType.CLOSE_CURLY,
            ";": TokenType.SEMICOLON,
        }

    def test_repr(self):
        assert repr(Token.identity("x", LOC)) == "Token(IDENTITY, 'x', main.vcl:1:1)"
        assert repr(Token.punctuation(TokenType.OPEN_CURLY, LOC)) == "Token(OPEN_CURLY, main.vcl:1:1)"


# =============================================================================
# Display Names
# =============================================================================

class TestTokenTypeNames:
    """Every token type has an explicit display name."""

    @pytest.mark.parametrize("token_type", list(TokenType))
    def test_every_type_is_named(self, token_type):
        assert token_type_name(token_type) == token_type.name

    def test_unknown_type_raises(self):
        with pytest.raises(ValueError, match="unknown token type"):
            token_type_name("IDENTITY")


# =============================================================================
# Rendering
# =============================================================================

class TestFormatToken:
    """One driver output line per token, 1-based positions."""

    def test_identity(self):
        token = Token.identity("server", Location("main.vcl", 0, 0))
        assert format_token(token) == "main.vcl:1:1 (IDENTITY, server)"

    def test_string_is_quoted(self):
        token = Token.string_literal("hello world", Location("main.vcl", 2, 9))
        assert format_token(token) == 'main.vcl:3:10 (STRING, "hello world")'

    def test_empty_string(self):
        token = Token.string_literal("", Location("a.vcl", 0, 0))
        assert format_token(token) == 'a.vcl:1:1 (STRING, "")'

    def test_number(self):
        token = Token.number_literal(8080, Location("main.vcl", 1, 7))
        assert format_token(token) == "main.vcl:2:8 (NUMBER, 8080)"

    def test_zero_is_rendered(self):
        token = Token.number_literal(0, Location("a.vcl", 0, 0))
        assert format_token(token) == "a.vcl:1:1 (NUMBER, 0)"

    @pytest.mark.parametrize("char,name", [
        ("(", "OPEN_PAREN"),
        (")", "CLOSE_PAREN"),
        ("{", "OPEN_CURLY"),
        ("}", "CLOSE_CURLY"),
        (";", "SEMICOLON"),
    ])
    def test_punctuation(self, char, name):
        token = Token.punctuation(PUNCTUATION[char], Location("a.vcl", 4, 2))
        assert format_token(token) == f"a.vcl:5:3 ({name})"

    def test_return(self):
        token = Token(TokenType.RETURN, Location("a.vcl", 0, 0))
        assert format_token(token) == "a.vcl:1:1 (RETURN)"
