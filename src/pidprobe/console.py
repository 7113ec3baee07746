"""Centralized terminal output for pidprobe.

All user-facing output should go through this module.

Key principle: stderr for status/progress, stdout for data. The banners
framing each tool invocation are data: they interleave with the tool's own
stdout and must reach the terminal before the tool starts writing.
"""

from __future__ import annotations

from rich.console import Console

SEPARATOR_CHAR = "="
SEPARATOR_WIDTH = 40
DEFAULT_LABEL = "Firefox"

# stderr console for status messages (success/error)
err_console = Console(stderr=True)

# stdout console for data output (banners, completion message)
out_console = Console()


def success(message: str, *, console: Console | None = None) -> None:
    """Print a success message (green checkmark) to stderr."""
    c = console or err_console
    c.print(f"[green]  ✓ {message}[/green]")


def error(message: str, *, console: Console | None = None) -> None:
    """Print an error message (red X) to stderr."""
    c = console or err_console
    c.print(f"[red]  ✗ {message}[/red]")


def warn(message: str, *, console: Console | None = None) -> None:
    """Print a warning message (yellow) to stderr."""
    c = console or err_console
    c.print(f"[yellow]  ⚠ {message}[/yellow]")


def info(message: str, *, console: Console | None = None) -> None:
    """Print an info message (dim) to stderr."""
    c = console or err_console
    c.print(f"[dim]  {message}[/dim]")


def separator(char: str = SEPARATOR_CHAR, width: int = SEPARATOR_WIDTH) -> str:
    """Return a rule line made of ``char`` repeated ``width`` times."""
    return char * width


def format_banner(
    pid: int | str,
    label: str = DEFAULT_LABEL,
    *,
    char: str = SEPARATOR_CHAR,
    width: int = SEPARATOR_WIDTH,
) -> list[str]:
    """Build the separator/header/separator triple announcing one test."""
    rule = separator(char, width)
    return [rule, f"Testing {label} PID: {pid}", rule]


def plain(line: str = "", *, console: Console | None = None) -> None:
    """Print a line verbatim to stdout: no markup, highlighting or wrapping."""
    c = console or out_console
    c.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_banner(
    pid: int | str,
    label: str = DEFAULT_LABEL,
    *,
    char: str = SEPARATOR_CHAR,
    width: int = SEPARATOR_WIDTH,
    console: Console | None = None,
) -> None:
    """Print a blank line followed by the banner for ``pid``, then flush."""
    c = console or out_console
    plain(console=c)
    for line in format_banner(pid, label, char=char, width=width):
        plain(line, console=c)
    c.file.flush()
