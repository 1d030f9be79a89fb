"""
VCL Lexer Error Hierarchy
=========================

This module defines the exception hierarchy for the VCL lexer.
All exceptions inherit from VclError, allowing callers to catch every
lexer-related failure with a single except clause if desired.

Exception Hierarchy
-------------------
VclError (base)
└── LexerError (scanning-related)
    ├── UnclassifiableCharacterError - character matches no token class
    ├── UnterminatedStringError - end of input before the closing quote
    ├── NumberTooLongError - digit run longer than the integer limit
    ├── PayloadDecodeError - token text invalid in the configured encoding
    └── LexerStateError - scan requested on a closed lexer

A source file that cannot be opened is not an exception: the Lexer reports
it through its liveness check (``Lexer.good()``) and the driver decides what
to tell the user.

Error messages follow this format:
    filename:row:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class VclError(Exception):
    """
    Base exception for all VCL lexer errors.

        try:
            for token in lexer:
                ...
        except VclError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class Location:
    """
    Position of a token's first character in a source file.

    Both coordinates are stored 0-based: ``row`` counts newlines consumed
    before the token, ``col`` is the byte distance from the start of the
    current line. They are only shifted to 1-based when rendered.

    Attributes:
        file_path: Path of the source file, as given to the Lexer
        row: Line index (0-based)
        col: Byte offset within the line (0-based)
    """
    file_path: str
    row: int
    col: int

    def __str__(self) -> str:
        """Format as 'file_path:row:col' (1-based) for messages."""
        return f"{self.file_path}:{self.row + 1}:{self.col + 1}"


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexerError(VclError):
    """
    Base exception for errors raised while scanning.

    Every lexer error is fatal to the scanning session; none of them are
    retried or recovered from.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
        caret_prefix: Text of source_line before the error column (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[Location] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
        caret_prefix: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        self.caret_prefix = caret_prefix
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            config.vcl:3:7: error: not implemented: unexpected character '%'
                value % 2;
                      ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            parts.append(f"    {self._caret_padding()}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)

    def _caret_padding(self) -> str:
        """
        Blank out the text before the error column.

        Tabs are kept so the caret lines up under the same tab stops as the
        source line; without a decoded prefix the byte column is used.
        """
        if self.caret_prefix is None:
            return " " * self.location.col
        return "".join("\t" if c == "\t" else " " for c in self.caret_prefix)


class UnclassifiableCharacterError(LexerError):
    """
    A character that starts no known token class.

    The scanner has no rule for the character, so classification cannot
    proceed. The failure is reported as "not implemented" for that
    character, which is exposed as ``character``.
    """

    def __init__(
        self,
        character: str,
        location: Optional[Location] = None,
        source_line: Optional[str] = None,
        caret_prefix: Optional[str] = None,
    ):
        self.character = character
        super().__init__(
            f"not implemented: unexpected character {character!r}",
            location,
            hint="tokens start with a letter, a digit, '\"' or one of ( ) { } ;",
            source_line=source_line,
            caret_prefix=caret_prefix,
        )


class UnterminatedStringError(LexerError):
    """String literal with no closing quote before end of input."""

    def __init__(
        self,
        location: Optional[Location] = None,
        source_line: Optional[str] = None,
        caret_prefix: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            location,
            hint='add a closing \'"\'',
            source_line=source_line,
            caret_prefix=caret_prefix,
        )


class NumberTooLongError(LexerError):
    """
    Digit run too long to convert to an integer.

    The limit (``digit_limit``) counts significant digits, so leading zeros
    do not count against it.
    """

    def __init__(
        self,
        digit_count: int,
        digit_limit: int,
        location: Optional[Location] = None,
        source_line: Optional[str] = None,
        caret_prefix: Optional[str] = None,
    ):
        self.digit_count = digit_count
        self.digit_limit = digit_limit
        super().__init__(
            f"number literal has {digit_count} digits, more than the {digit_limit} allowed",
            location,
            source_line=source_line,
            caret_prefix=caret_prefix,
        )

class PayloadDecodeError(LexerError):
    """
    Identifier or string bytes that the configured encoding rejects.

    Only raised when the codec error handler is ``strict``.
    """

    def __init__(
        self,
        encoding: str,
        location: Optional[Location] = None,
        source_line: Optional[str] = None,
        caret_prefix: Optional[str] = None,
    ):
        self.encoding = encoding
        super().__init__(
            f"token text is not valid {encoding}",
            location,
            hint="pass --encoding, or set VCL_ENCODING_ERRORS=replace",
            source_line=source_line,
            caret_prefix=caret_prefix,
        )


class LexerStateError(LexerError):
    """
    Scan requested on a lexer that can no longer produce tokens.

    Raised when the source never opened, after ``close()``, or after a
    fatal scanning error aborted the session.
    """
    pass
