"""
VCL Streaming Lexer
===================

This module implements the lexer (tokenizer) for VCL source files.
It reads a file as a byte stream and hands out one classified, located
token per call, for a downstream parser to consume.

Scanning Rules
--------------
After skipping whitespace and comments, the next byte decides the token:

| First byte      | Token       | Run                                  |
|-----------------|-------------|--------------------------------------|
| letter          | IDENTITY    | letters and digits                   |
| digit           | NUMBER      | digits, parsed as base-10            |
| "               | STRING      | everything up to the next "          |
| ( ) { } ;       | punctuation | that byte alone                      |
| anything else   | error       | UnclassifiableCharacterError         |

Comments start with '#' and run to the end of the line. Strings have no
escape sequences and may span lines. Classes follow the C locale: letters
are ASCII only and '_' is not an identifier character.

Positions
---------
Every token records the row and column of its first byte, both 0-based.
The row advances once per newline consumed; the column is the byte
distance from the start of the current line.

Example
-------
>>> from vcl_lexer.lexer import Lexer
>>> with Lexer("server.vcl") as lexer:
...     for token in lexer:
...         print(token)
Token(IDENTITY, 'server', server.vcl:1:1)
Token(OPEN_CURLY, server.vcl:1:8)
Token(IDENTITY, 'port', server.vcl:2:5)
Token(NUMBER, 8080, server.vcl:2:10)
Token(SEMICOLON, server.vcl:2:14)
Token(CLOSE_CURLY, server.vcl:3:1)
"""

from enum import Enum, auto
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Union
import logging
import string

from vcl_lexer.config import LexerConfig
from vcl_lexer.errors import (
    Location,
    LexerError,
    LexerStateError,
    NumberTooLongError,
    PayloadDecodeError,
    UnclassifiableCharacterError,
    UnterminatedStringError,
)
from vcl_lexer.tokens import PUNCTUATION, Token

# Logger for this module
logger = logging.getLogger(__name__)


# =============================================================================
# Character Classes
# =============================================================================

WHITESPACE = b" \t\n\v\f\r"
LETTERS = string.ascii_letters.encode("ascii")
DIGITS = string.digits.encode("ascii")
IDENT_CHARS = LETTERS + DIGITS

COMMENT = b"#"
QUOTE = b'"'
NEWLINE = b"\n"

# Significant digits in a NUMBER; matches the interpreter's default
# int/str conversion limit, so the value can also be printed back.
MAX_NUMBER_DIGITS = 4300


class LexerState(Enum):
    """Lifecycle of a Lexer. There is no transition back to LIVE."""

    LIVE = auto()       # Source open, tokens may remain
    EXHAUSTED = auto()  # End of input reached
    CLOSED = auto()     # Never opened, closed, or aborted by a fatal error


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes one VCL source file, one token per call.

    The lexer owns the file handle and all cursor state. It opens the file
    eagerly; callers must check ``good()`` before scanning, since a file
    that cannot be opened leaves the lexer unusable rather than raising.

    Usage:
        with Lexer("main.vcl") as lexer:
            if not lexer.good():
                ...
            token = lexer.next_token()
            while token is not None:
                ...
                token = lexer.next_token()

    Attributes:
        source_path: Path of the file being scanned
        config: Decoding settings for text payloads
    """

    def __init__(
        self,
        source_path: Union[str, Path],
        config: Optional[LexerConfig] = None,
    ):
        """
        Open the source file for scanning.

        Args:
            source_path: The file to tokenize
            config: Payload decoding settings (defaults to LexerConfig())
        """
        self.source_path = str(source_path)
        self.config = config or LexerConfig()

        self._stream: Optional[BinaryIO] = None
        self._lookahead: Optional[bytes] = None

        # Absolute offset of the next unconsumed byte
        self._offset = 0
        # Offset of the first byte of the current line
        self._line_begin = 0
        self._row = 0
        # Bytes consumed so far on the current line, for diagnostics
        self._line_bytes = bytearray()

        self._token_count = 0

        try:
            self._stream = open(self.source_path, "rb")
        except OSError as e:
            logger.warning(f"Cannot open source file {self.source_path}: {e.strerror or e}")
            self._state = LexerState.CLOSED
        else:
            logger.debug(f"Opened {self.source_path} for scanning")
            self._state = LexerState.LIVE

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def good(self) -> bool:
        """Check whether the source is open and scanning may proceed."""
        return self._state is LexerState.LIVE

    @property
    def is_live(self) -> bool:
        return self.good()

    @property
    def state(self) -> LexerState:
        return self._state

    @property
    def token_count(self) -> int:
        """Number of tokens produced so far."""
        return self._token_count

    def close(self) -> None:
        """
        Release the source file.

        Safe to call more than once; the handle is only closed the first time.
        """
        if self._stream is not None:
            self._stream.close()
            self._stream = None
            logger.debug(f"Closed {self.source_path} after {self._token_count} tokens")
        self._state = LexerState.CLOSED

    def __enter__(self) -> "Lexer":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __iter__(self) -> Iterator[Token]:
        return self.tokenize()

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens until the input is exhausted.

        Raises:
            LexerError: On the first unscannable input
        """
        token = self.next_token()
        while token is not None:
            yield token
            token = self.next_token()

    # =========================================================================
    # Scanning
    # =========================================================================

    def next_token(self) -> Optional[Token]:
        """
        Scan the next token.

        Returns:
            The next Token, or None once the input is exhausted

        Raises:
            UnclassifiableCharacterError: No token starts with the next byte
            UnterminatedStringError: End of input inside a string literal
            PayloadDecodeError: Token text invalid in a strict encoding
            NumberTooLongError: Digit run over MAX_NUMBER_DIGITS significant digits
            LexerStateError: The lexer is closed
        """
        if self._state is LexerState.CLOSED:
            raise LexerStateError(
                f"cannot scan {self.source_path}: lexer is closed",
                hint="check Lexer.good() before scanning",
            )
        if self._state is LexerState.EXHAUSTED:
            return None

        self._skip_whitespace()
        while self._peek() == COMMENT:
            self._drop_line()
            self._skip_whitespace()

        char = self._peek()
        if not char:
            logger.debug(f"Reached end of {self.source_path} after {self._token_count} tokens")
            self._state = LexerState.EXHAUSTED
            return None

        location = self._location()
        try:
            token = self._scan_token(char, location)
        except LexerError:
            self.close()
            raise

        self._token_count += 1
        return token

    def _scan_token(self, char: bytes, location: Location) -> Token:
        """Dispatch on the class of the token's first byte."""
        if char in LETTERS:
            return self._scan_identity(location)

        punctuation = PUNCTUATION.get(char.decode("latin-1"))
        if punctuation is not None:
            self._advance()
            return Token.punctuation(punctuation, location)

        if char in DIGITS:
            return self._scan_number(location)

        if char == QUOTE:
            return self._scan_string(location)

        source_line, caret_prefix = self._line_context(location)
        raise UnclassifiableCharacterError(
            char.decode("latin-1"),
            location,
            source_line=source_line,
            caret_prefix=caret_prefix,
        )

    def _scan_identity(self, location: Location) -> Token:
        """Scan a letter followed by letters and digits."""
        text = self._scan_run(IDENT_CHARS)
        return Token.identity(self._decode(text, location), location)

    def _scan_number(self, location: Location) -> Token:
        """
        Scan a run of digits as a base-10 integer.

        Leading zeros are dropped before the digit limit is checked, so
        "007" is 7 and a long run of zeros is still 0.
        """
        digits = self._scan_run(DIGITS).lstrip(b"0") or b"0"
        if len(digits) > MAX_NUMBER_DIGITS:
            source_line, caret_prefix = self._line_context(location)
            raise NumberTooLongError(
                len(digits),
                MAX_NUMBER_DIGITS,
                location,
                source_line=source_line,
                caret_prefix=caret_prefix,
            )
        return Token.number_literal(int(digits.decode("ascii")), location)

    def _scan_string(self, location: Location) -> Token:
        """
        Scan a double-quoted string.

        The quotes are dropped and the contents kept verbatim: a backslash
        has no special meaning and newlines are part of the text.
        """
        self._advance()  # consume opening "

        text = bytearray()
        while True:
            char = self._peek()
            if not char:
                source_line, caret_prefix = self._line_context(location)
                raise UnterminatedStringError(
                    location, source_line=source_line, caret_prefix=caret_prefix
                )
            if char == QUOTE:
                self._advance()  # consume closing "
                return Token.string_literal(self._decode(bytes(text), location), location)
            text += self._advance()

    def _decode(self, data: bytes, location: Location) -> str:
        """Decode a payload run with the configured encoding."""
        try:
            return self.config.decode(data)
        except UnicodeDecodeError:
            source_line, caret_prefix = self._line_context(location)
            raise PayloadDecodeError(
                self.config.encoding,
                location,
                source_line=source_line,
                caret_prefix=caret_prefix,
            )

    def _scan_run(self, allowed: bytes) -> bytes:
        """Consume the maximal run of bytes from ``allowed``."""
        run = bytearray()
        # Note: '' in b"..." is True, so the empty end-of-input read must be
        # checked first
        while self._peek() and self._peek() in allowed:
            run += self._advance()
        return bytes(run)

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace(self) -> None:
        """Skip spaces, tabs, newlines and the other C-locale blanks."""
        while self._peek() and self._peek() in WHITESPACE:
            self._advance()

    def _drop_line(self) -> None:
        """Skip to the end of the line, newline included."""
        while self._peek() and self._peek() != NEWLINE:
            self._advance()
        self._advance()

    # =========================================================================
    # Cursor Methods
    # =========================================================================

    def _peek(self) -> bytes:
        """
        Look at the next unconsumed byte without advancing.

        Returns b"" at end of input.
        """
        if self._lookahead is None:
            self._lookahead = self._stream.read(1)
        return self._lookahead

    def _advance(self) -> bytes:
        """
        Consume and return the next byte, updating row tracking.

        Returns b"" at end of input without moving.
        """
        char = self._peek()
        if not char:
            return char

        self._lookahead = None
        self._offset += 1

        if char == NEWLINE:
            self._row += 1
            self._line_begin = self._offset
            self._line_bytes.clear()
        else:
            self._line_bytes += char

        return char

    def _location(self) -> Location:
        """Location of the next unconsumed byte."""
        return Location(self.source_path, self._row, self._offset - self._line_begin)

    def _line_context(self, location: Location) -> tuple[Optional[str], Optional[str]]:
        """
        Return the text of the line holding ``location`` and the text before it.

        Consumes the rest of the line, so it is only used once scanning has
        failed and the session is over. Returns (None, None) when the cursor
        has already left that line.
        """
        if location.row != self._row:
            return None, None
        while self._peek() and self._peek() != NEWLINE:
            self._advance()
        encoding = self.config.encoding
        line = self._line_bytes.decode(encoding, "replace").rstrip("\r")
        prefix = self._line_bytes[:location.col].decode(encoding, "replace")
        return line, prefix
