"""
VCL Token Model
===============

Token kinds, the token value type, and the one-line rendering shared with
the ``vclex`` driver.

Token Types
-----------
- IDENTITY: Bare words (letter followed by letters/digits)
- NUMBER: Unsigned decimal integers
- STRING: Double-quoted text, no escape sequences
- OPEN_PAREN, CLOSE_PAREN, OPEN_CURLY, CLOSE_CURLY, SEMICOLON: punctuation
- RETURN: reserved, never produced by the scanner

Payloads
--------
A token carries a single payload slot whose kind is fixed by its type:

| Type            | Payload | Rendered as        |
|-----------------|---------|--------------------|
| IDENTITY        | str     | raw text           |
| STRING          | str     | text in quotes     |
| NUMBER          | int     | decimal integer    |
| everything else | None    | omitted            |

Example
-------
>>> from vcl_lexer.errors import Location
>>> token = Token.number_literal(42, Location("a.vcl", 0, 4))
>>> format_token(token)
'a.vcl:1:5 (NUMBER, 42)'
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from vcl_lexer.errors import Location


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Lexical categories of the VCL language."""

    # Values
    IDENTITY = auto()     # Bare word
    NUMBER = auto()       # Decimal integer
    STRING = auto()       # "..."

    # Delimiters
    OPEN_PAREN = auto()   # (
    CLOSE_PAREN = auto()  # )
    OPEN_CURLY = auto()   # {
    CLOSE_CURLY = auto()  # }
    SEMICOLON = auto()    # ;

    # Reserved
    RETURN = auto()


# Payload kind required by each token type; types not listed carry nothing.
PAYLOAD_TYPES: dict[TokenType, type] = {
    TokenType.IDENTITY: str,
    TokenType.STRING: str,
    TokenType.NUMBER: int,
}

# Single-byte punctuation recognised by the scanner
PUNCTUATION: dict[str, TokenType] = {
    "(": TokenType.OPEN_PAREN,
    ")": TokenType.CLOSE_PAREN,
    "{": TokenType.OPEN_CURLY,
    "}": TokenType.CLOSE_CURLY,
    ";": TokenType.SEMICOLON,
}


def token_type_name(token_type: TokenType) -> str:
    """
    Return the display name of a token type.

    Every variant is listed explicitly, so a new kind has to be given a
    name here before it can be rendered.
    """
    match token_type:
        case TokenType.IDENTITY:
            return "IDENTITY"
        case TokenType.OPEN_PAREN:
            return "OPEN_PAREN"
        case TokenType.CLOSE_PAREN:
            return "CLOSE_PAREN"
        case TokenType.OPEN_CURLY:
            return "OPEN_CURLY"
        case TokenType.CLOSE_CURLY:
            return "CLOSE_CURLY"
        case TokenType.SEMICOLON:
            return "SEMICOLON"
        case TokenType.NUMBER:
            return "NUMBER"
        case TokenType.STRING:
            return "STRING"
        case TokenType.RETURN:
            return "RETURN"
    raise ValueError(f"unknown token type: {token_type!r}")


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A classified, located unit of source text.

    The payload kind is checked against ``PAYLOAD_TYPES`` on construction,
    so a token can never hold both text and a number, and punctuation can
    never hold either.

    Attributes:
        type: The TokenType classification
        location: Position of the token's first character
        payload: str for IDENTITY/STRING, int for NUMBER, otherwise None
    """
    type: TokenType
    location: Location
    payload: str | int | None = None

    def __post_init__(self) -> None:
        expected = PAYLOAD_TYPES.get(self.type)
        if expected is None:
            if self.payload is not None:
                raise ValueError(f"{self.type.name} token takes no payload")
        elif type(self.payload) is not expected:
            raise ValueError(
                f"{self.type.name} token requires a payload of type {expected.__name__}, "
                f"got {type(self.payload).__name__}"
            )

    def __repr__(self) -> str:
        if self.payload is not None:
            return f"Token({self.type.name}, {self.payload!r}, {self.location})"
        return f"Token({self.type.name}, {self.location})"

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def identity(cls, text: str, location: Location) -> "Token":
        return cls(TokenType.IDENTITY, location, text)

    @classmethod
    def string_literal(cls, text: str, location: Location) -> "Token":
        return cls(TokenType.STRING, location, text)

    @classmethod
    def number_literal(cls, number: int, location: Location) -> "Token":
        return cls(TokenType.NUMBER, location, number)

    @classmethod
    def punctuation(cls, token_type: TokenType, location: Location) -> "Token":
        return cls(token_type, location)

    # -------------------------------------------------------------------------
    # Payload views
    # -------------------------------------------------------------------------

    @property
    def text(self) -> Optional[str]:
        """Text payload of IDENTITY and STRING tokens, else None."""
        return self.payload if isinstance(self.payload, str) else None

    @property
    def number(self) -> Optional[int]:
        """Integer payload of NUMBER tokens, else None."""
        return self.payload if isinstance(self.payload, int) else None


# =============================================================================
# Rendering
# =============================================================================

def format_token(token: Token) -> str:
    """
    Render a token as one driver output line.

    Format: ``<file_path>:<row+1>:<col+1> (<TYPE_NAME>[, <payload>])``

    Examples:
        main.vcl:1:1 (IDENTITY, server)
        main.vcl:1:8 (OPEN_CURLY)
        main.vcl:2:10 (STRING, "localhost")
        main.vcl:3:8 (NUMBER, 8080)
    """
    line = f"{token.location} ({token_type_name(token.type)}"
    if token.type == TokenType.STRING:
        line += f', "{token.payload}"'
    elif token.payload is not None:
        line += f", {token.payload}"
    return line + ")"
