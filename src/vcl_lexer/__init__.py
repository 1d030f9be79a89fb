"""
VCL Lexer - Streaming Tokenizer for VCL Definition Files
========================================================

This package provides the lexical scanner for VCL, a small
configuration/definition language. It turns a source file into a sequence
of classified tokens, each tagged with the file, row and column of its
first character, for a downstream parser to consume.

Main Components
---------------
- **lexer**: The streaming ``Lexer`` (one token per ``next_token()`` call)
- **tokens**: ``TokenType``, ``Token`` and the one-line token rendering
- **errors**: ``Location`` and the exception hierarchy
- **config**: ``LexerConfig`` (payload decoding, log level)
- **cli**: The ``vclex`` command-line driver

Quick Start
-----------
Tokenize a file:
    >>> from vcl_lexer import Lexer, format_token
    >>> with Lexer("server.vcl") as lexer:
    ...     if lexer.good():
    ...         for token in lexer:
    ...             print(format_token(token))

Or use the command-line tool:
    $ vclex server.vcl
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from vcl_lexer.config import LexerConfig
from vcl_lexer.errors import (
    VclError,
    Location,
    LexerError,
    UnclassifiableCharacterError,
    UnterminatedStringError,
    NumberTooLongError,
    PayloadDecodeError,
    LexerStateError,
)
from vcl_lexer.lexer import Lexer, LexerState
from vcl_lexer.tokens import Token, TokenType, format_token, token_type_name

__all__ = [
    # Version info
    "__version__",
    # Lexer
    "Lexer",
    "LexerState",
    "LexerConfig",
    # Tokens
    "Token",
    "TokenType",
    "format_token",
    "token_type_name",
    # Exception hierarchy
    "VclError",
    "Location",
    "LexerError",
    "UnclassifiableCharacterError",
    "UnterminatedStringError",
    "NumberTooLongError",
    "PayloadDecodeError",
    "LexerStateError",
]
