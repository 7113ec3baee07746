"""Shared fixtures for unit tests."""

import io
import subprocess
from collections.abc import Callable
from typing import Any

import pytest
from rich.console import Console


@pytest.fixture
def stream() -> io.StringIO:
    """Buffer standing in for the terminal shared by pidprobe and the tool."""
    return io.StringIO()


@pytest.fixture
def out(stream: io.StringIO) -> Console:
    """A plain stdout-style console writing into ``stream``."""
    return Console(file=stream, no_color=True, width=120)


@pytest.fixture
def fake_tool(stream: io.StringIO) -> Callable[..., Callable[..., subprocess.CompletedProcess]]:
    """Factory for subprocess.run side effects that behave like the tool.

    The fake writes one line to the shared stream, as a child inheriting the
    terminal would, and exits with the status configured for its PID argument.
    """

    def _factory(
        exit_codes: dict[str, int] | None = None,
    ) -> Callable[..., subprocess.CompletedProcess]:
        codes = exit_codes or {}

        def _side_effect(argv: list[str], **kwargs: Any) -> subprocess.CompletedProcess:
            stream.write(f"tool output for {argv[-1]}\n")
            return subprocess.CompletedProcess(argv, codes.get(argv[-1], 0))

        return _side_effect

    return _factory
