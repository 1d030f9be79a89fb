"""
VCL Lexer - Test Configuration
==============================

Shared fixtures for the lexer test suite.
"""

from pathlib import Path
from typing import Callable, Union
import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logging():
    """
    Fixture: Undo the driver's logging.basicConfig after each test.

    The driver binds a stderr handler to whatever stream CliRunner swapped in.
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[..., Path]:
    """
    Fixture: Factory that writes a VCL source file under tmp_path.

    Accepts str (encoded as UTF-8) or raw bytes, so tests can control
    every byte the lexer sees.
    """
    def _write(content: Union[str, bytes], name: str = "test.vcl") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
        return path

    return _write
