"""Shared fixtures for fields tests.

Provides factory fixtures for invoking the CLI entry point with in-memory
streams and for writing YAML configuration files.
"""

from __future__ import annotations

import io
import logging
import textwrap
from pathlib import Path

import pytest

from fields.cli import main

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def run_fields():
    """Factory fixture: invoke ``fields.cli.main()`` and return ``(exit_code, stdout_text)``."""

    def _factory(args: list[str], input_text: str = "") -> tuple[int, str]:
        stdout = io.StringIO()
        exit_code = main(args, stdin=io.StringIO(input_text, newline="\n"), stdout=stdout)
        return exit_code, stdout.getvalue()

    return _factory


@pytest.fixture
def make_config(tmp_path: Path):
    """Factory fixture: write a YAML configuration file into tmp_path."""

    def _factory(yaml_text: str, name: str = "fields.yaml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(yaml_text))
        return path

    return _factory


@pytest.fixture(autouse=True)
def reset_root_logger_level():
    """``main()`` sets the root logger level from ``-v``; restore it after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
