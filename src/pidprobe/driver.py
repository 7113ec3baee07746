"""Sequential batch driver for the external analysis tool.

Each identifier gets a banner on stdout, one blocking run of the tool with
the identifier as its only argument, and a trailing blank line. The tool
inherits the terminal, so its output lands verbatim between the banner and
the trailer. Exit statuses are logged and never acted upon.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

import click
from rich.console import Console
from rich.markup import escape

from pidprobe import console as term
from pidprobe.config import FIREFOX_PIDS, get_settings
from pidprobe.exceptions import InvalidIdentifierError, ToolLaunchError
from pidprobe.logging import get_logger

LOG = get_logger(__name__)

__all__ = ["FIREFOX_PIDS", "format_identifier", "invoke_tool", "run"]


def format_identifier(pid: int) -> str:
    """Return the decimal form of ``pid`` as passed to the tool.

    Raises:
        InvalidIdentifierError: If ``pid`` is not a positive integer.
    """
    if isinstance(pid, bool) or not isinstance(pid, int):
        raise InvalidIdentifierError(f"PID must be an integer, got {pid!r}")
    if pid <= 0:
        raise InvalidIdentifierError(f"PID must be positive, got {pid}")
    return str(pid)


def invoke_tool(
    command: Sequence[str],
    pid: int,
    *,
    fail_fast: bool = False,
) -> int | None:
    """Run the tool for one PID and wait for it to exit.

    Args:
        command: Argument vector of the tool; the PID is appended as the last argument.
        pid: Process identifier under test.
        fail_fast: Raise instead of continuing when the tool cannot be started.

    Returns:
        The tool's exit status, or None if it could not be launched.

    Raises:
        ToolLaunchError: If the tool cannot be launched and fail_fast is set.
    """
    argv = [*command, format_identifier(pid)]
    LOG.info("tool_invocation_started", pid=pid, argv=argv)
    try:
        result = subprocess.run(argv, check=False)  # noqa: S603
    except OSError as exc:
        LOG.error("tool_launch_failed", pid=pid, argv=argv, error=str(exc))
        if fail_fast:
            raise ToolLaunchError(pid, argv, str(exc)) from exc
        term.error(escape(f"Could not launch {argv[0]} for PID {pid}: {exc}"))
        return None

    if result.returncode != 0:
        LOG.info("tool_exit_nonzero", pid=pid, returncode=result.returncode)
    else:
        LOG.info("tool_invocation_finished", pid=pid, returncode=result.returncode)
    return result.returncode


def run(
    identifiers: Sequence[int],
    *,
    command: Sequence[str] | None = None,
    label: str | None = None,
    console: Console | None = None,
    acknowledge: bool = True,
    fail_fast: bool | None = None,
) -> None:
    """Test every identifier in order, then wait for the operator.

    Duplicates are tested again; nothing is reordered. Every identifier is
    validated before the first invocation so a bad list never half-runs.

    Args:
        identifiers: PIDs to test, in order.
        command: Tool argument vector. Defaults to the configured tool command.
        label: Process label for banners. Defaults to the configured label.
        console: Console for banners. Defaults to stdout.
        acknowledge: Block for a keypress after the completion message.
        fail_fast: Abort on a launch failure. Defaults to the configured value.

    Raises:
        InvalidIdentifierError: If any identifier is not a positive integer.
        ToolLaunchError: If the tool cannot be launched and fail_fast is set.
    """
    settings = get_settings()
    command = list(command) if command is not None else settings.tool_command
    label = label if label is not None else settings.label
    fail_fast = settings.fail_fast if fail_fast is None else fail_fast
    out = console or term.out_console

    pids = list(identifiers)
    for pid in pids:
        format_identifier(pid)

    for pid in pids:
        term.print_banner(
            pid,
            label,
            char=settings.separator_char,
            width=settings.separator_width,
            console=out,
        )
        invoke_tool(command, pid, fail_fast=fail_fast)
        term.plain(console=out)

    LOG.info("run_completed", count=len(pids))
    term.plain(f"All {label} processes tested!", console=out)
    out.file.flush()
    if acknowledge:
        click.pause()
