"""
VCL Lexer - Configuration
=========================

Lexer and driver settings. Configuration can come from:
- Default values (defined here)
- Environment variables
- Command-line options (applied by the driver on top of the environment)

Scanning itself is byte-oriented; the encoding only governs how the bytes
of IDENTITY and STRING payloads are turned into text.
"""

from dataclasses import dataclass
import codecs
import logging
import os


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

ENCODING_ERROR_HANDLERS = ("strict", "replace", "ignore", "backslashreplace")


@dataclass
class LexerConfig:
    """
    Configuration for a scanning session.

    Attributes:
        encoding: Codec used to decode identifier and string payloads
        encoding_errors: Codec error handler for undecodable bytes
        log_level: Default logging level name for the driver
    """

    encoding: str = "utf-8"
    encoding_errors: str = "replace"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "LexerConfig":
        """
        Create LexerConfig from environment variables.

        Environment variables (all optional):
            VCL_ENCODING: Payload encoding (any codec name Python knows)
            VCL_ENCODING_ERRORS: strict, replace, ignore or backslashreplace
            VCL_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL

        Unknown values are ignored and the defaults kept.
        """
        config = cls()

        if encoding := os.environ.get("VCL_ENCODING"):
            if is_known_encoding(encoding):
                config.encoding = encoding

        if errors := os.environ.get("VCL_ENCODING_ERRORS"):
            if errors in ENCODING_ERROR_HANDLERS:
                config.encoding_errors = errors

        if level := os.environ.get("VCL_LOG_LEVEL"):
            if level.upper() in LOG_LEVELS:
                config.log_level = level.upper()

        return config

    def decode(self, data: bytes) -> str:
        """Decode a scanned byte run into payload text."""
        return data.decode(self.encoding, self.encoding_errors)

    @property
    def logging_level(self) -> int:
        """Numeric logging level for ``log_level``."""
        return getattr(logging, self.log_level)


def is_known_encoding(name: str) -> bool:
    """Check whether ``name`` is a codec Python can decode with."""
    try:
        codecs.lookup(name)
    except LookupError:
        return False
    return True
