"""Shared fixtures for color_space_tools tests."""

from __future__ import annotations

import io
import logging
import textwrap
from pathlib import Path

import pytest

from color_space_tools.core import set_verbosity


@pytest.fixture(autouse=True)
def reset_log_level():
    """Restore the default logger level around each test."""
    yield
    set_verbosity()


@pytest.fixture
def make_workspace(tmp_path: Path):
    """Factory that creates a temp Expo project directory.

    Usage::

        ws = make_workspace(files={"app.json": '{"expo": {}}'})
    """
    _counter = 0

    def _make(
        files: dict[str, str] | None = None,
        config_yaml: str | None = None,
    ) -> Path:
        nonlocal _counter
        ws = tmp_path / f"workspace_{_counter}"
        ws.mkdir()
        _counter += 1

        for filename, content in (files or {}).items():
            (ws / filename).write_bytes(content.encode("utf-8"))

        if config_yaml is not None:
            (ws / ".expo-color-space.yaml").write_text(
                textwrap.dedent(config_yaml), encoding="utf-8",
            )

        return ws

    return _make


@pytest.fixture
def capture_logs():
    """Capture color_space_tools logger output into a StringIO buffer.

    The logger has propagate=False and its own StreamHandler that points
    at the original sys.stderr, so capsys/caplog cannot see it.
    """
    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger("color_space_tools")
    logger.addHandler(handler)
    yield buf
    logger.removeHandler(handler)
