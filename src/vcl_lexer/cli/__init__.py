"""
VCL Lexer Command-Line Interface
================================

This package provides the command-line tools for the VCL lexer:

- **vclex**: Tokenize a VCL source file and print one line per token

Each tool is implemented as a Click-based CLI application with
help output and consistent exit codes.
"""

__all__ = ["vclex"]
