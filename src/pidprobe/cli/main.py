"""pidprobe CLI - test a batch of processes with an external analysis tool."""

import os
import shlex
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

import pidprobe
from pidprobe import console as term
from pidprobe.config import PidprobeSettings, get_settings
from pidprobe.discovery import find_pids_by_name
from pidprobe.driver import run as run_driver
from pidprobe.exceptions import DiscoveryError, InvalidIdentifierError, ToolLaunchError
from pidprobe.logging import configure_logging, get_logger

# Configure logging early using env vars directly; -v/-vv and --log-format
# in main_callback() may reconfigure later.
configure_logging(
    level=os.environ.get("PIDPROBE_LOG_LEVEL", "WARNING"),
    json_output=os.environ.get("PIDPROBE_LOG_FORMAT", "console") == "json",
)

LOG = get_logger(__name__)

app = typer.Typer(
    name="pidprobe",
    help="""
    🔍 pidprobe - run an analysis tool against a batch of PIDs

    \b
    Quick start:
      pidprobe run                  Test the configured Firefox PIDs
      pidprobe run 100 200          Test specific PIDs
      pidprobe run -d firefox       Test every running firefox process
      pidprobe discover firefox     List PIDs for a process name
      pidprobe config               Show current configuration
    """,
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


def _load_settings() -> PidprobeSettings:
    """Load settings, or report invalid PIDPROBE_* values and exit."""
    try:
        return get_settings()
    except ValidationError as exc:
        term.error(escape(f"Invalid configuration: {exc}"))
        raise typer.Exit(1) from exc


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Increase verbosity (-v for info, -vv for debug)",
        ),
    ] = 0,
    log_format: Annotated[
        str | None,
        typer.Option(
            "--log-format",
            help="Log output format: console (human-readable) or json (structured)",
        ),
    ] = None,
) -> None:
    """pidprobe - run an analysis tool against a batch of PIDs."""
    settings = _load_settings()
    json_output = (log_format or settings.log_format) == "json"

    # Reconfigure logging if -v flags or --log-format override the settings default
    if verbose >= 2:
        configure_logging(level="DEBUG", json_output=json_output)
    elif verbose >= 1:
        configure_logging(level="INFO", json_output=json_output)
    elif log_format is not None:
        configure_logging(level=settings.log_level, json_output=json_output)


@app.command("run")
def run_cmd(
    pids: Annotated[
        list[int] | None,
        typer.Argument(
            help="PIDs to test, in order (default: configured list)",
            metavar="PID...",
            show_default=False,
        ),
    ] = None,
    discover: Annotated[
        str | None,
        typer.Option(
            "--discover",
            "-d",
            help="Test every running process with this executable name",
        ),
    ] = None,
    tool: Annotated[
        str | None,
        typer.Option(
            "--tool",
            "-t",
            help='Tool command line, PID is appended (e.g. "cargo run --")',
        ),
    ] = None,
    label: Annotated[
        str | None,
        typer.Option("--label", "-l", help="Process label shown in banners"),
    ] = None,
    no_pause: Annotated[
        bool,
        typer.Option("--no-pause", help="Exit without waiting for a keypress"),
    ] = False,
    fail_fast: Annotated[
        bool,
        typer.Option("--fail-fast", help="Abort when the tool cannot be launched"),
    ] = False,
) -> None:
    """Run the analysis tool once per PID, framing each run with a banner.

    PIDs given as arguments take precedence over --discover, which takes
    precedence over PIDPROBE_PIDS. The exit code does not reflect the
    tool's own exit statuses.

    \b
    Examples:
        pidprobe run
        pidprobe run 23664 18420 --no-pause
        pidprobe run --discover firefox --tool "./target/release/sup_mtracker"
    """
    settings = _load_settings()

    if pids:
        source = "arguments"
        identifiers = list(pids)
    elif discover:
        source = "discovery"
        try:
            identifiers = find_pids_by_name(discover)
        except DiscoveryError as exc:
            term.error(escape(str(exc)))
            raise typer.Exit(1) from exc
        if not identifiers:
            term.warn(f"No running processes named '{escape(discover)}'")
    else:
        source = "settings"
        identifiers = list(settings.pids)
    LOG.debug("pids_resolved", source=source, count=len(identifiers))

    command = shlex.split(tool) if tool is not None else None
    if command is not None and not command:
        term.error("--tool must name an executable")
        raise typer.Exit(1)

    try:
        run_driver(
            identifiers,
            command=command,
            label=label,
            acknowledge=settings.pause_on_exit and not no_pause,
            fail_fast=True if fail_fast else None,
        )
    except (InvalidIdentifierError, ToolLaunchError) as exc:
        term.error(escape(str(exc)))
        raise typer.Exit(1) from exc


@app.command("discover")
def discover_cmd(
    name: Annotated[str, typer.Argument(help="Executable name, e.g. firefox")],
) -> None:
    """List the PIDs of running processes with the given name."""
    try:
        pids = find_pids_by_name(name)
    except DiscoveryError as exc:
        term.error(escape(str(exc)))
        raise typer.Exit(1) from exc

    if not pids:
        console.print(f"[dim]No running processes named '{escape(name)}'.[/dim]")
        return

    table = Table(
        title=f"Processes: {escape(name)}",
        title_style="bold",
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("PID", style="cyan", justify="right")
    for pid in pids:
        table.add_row(str(pid))

    console.print(table)
    console.print(f"\n[dim]{len(pids)} process(es)[/dim]")


@app.command("version")
def version() -> None:
    """Show pidprobe version."""
    console.print(
        Panel(
            f"[bold cyan]pidprobe[/bold cyan] v{pidprobe.__version__}",
            title="Batch process testing",
            border_style="cyan",
        )
    )


@app.command("config")
def config() -> None:
    """Show current pidprobe configuration."""
    settings = _load_settings()

    pids_display = ", ".join(str(pid) for pid in settings.pids) or "[dim](none)[/dim]"
    info = f"""
[dim]Tool command:[/dim]   {escape(shlex.join(settings.tool_command))}
[dim]Label:[/dim]          {escape(settings.label)}
[dim]PIDs:[/dim]           {pids_display}
[dim]Banner rule:[/dim]    {escape(settings.separator_char)} x {settings.separator_width}
[dim]Pause on exit:[/dim]  {settings.pause_on_exit}
[dim]Fail fast:[/dim]      {settings.fail_fast}
[dim]Log level:[/dim]      {settings.log_level}
[dim]Log format:[/dim]     {settings.log_format}"""

    console.print(Panel(info.strip(), title="⚙ Configuration", border_style="cyan"))


if __name__ == "__main__":
    app()
