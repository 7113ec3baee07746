"""pidprobe - run an analysis tool against a batch of process IDs.

For every PID in an ordered list, pidprobe prints a labeled banner, runs the
external tool with the PID as its only argument, waits for it to finish and
moves on, so each block of tool output can be matched to the process under
test.

Example:
    >>> from pidprobe import run
    >>> run([23664, 18420], command=["./target/release/sup_mtracker"])
"""

from pidprobe.config import FIREFOX_PIDS, PidprobeSettings, get_settings
from pidprobe.discovery import find_pids_by_name
from pidprobe.driver import format_identifier, invoke_tool, run
from pidprobe.exceptions import (
    DiscoveryError,
    InvalidIdentifierError,
    PidprobeError,
    ToolLaunchError,
)

__version__ = "0.3.0"

__all__ = [
    # Version
    "__version__",
    # Driver
    "FIREFOX_PIDS",
    "format_identifier",
    "invoke_tool",
    "run",
    "find_pids_by_name",
    # Configuration
    "PidprobeSettings",
    "get_settings",
    # Exceptions
    "PidprobeError",
    "InvalidIdentifierError",
    "ToolLaunchError",
    "DiscoveryError",
]
