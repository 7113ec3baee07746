"""Custom exceptions for pidprobe package."""


class PidprobeError(Exception):
    """Base exception class for all pidprobe errors."""


class InvalidIdentifierError(PidprobeError, ValueError):
    """Raised when a process identifier is not a positive integer."""


class DiscoveryError(PidprobeError):
    """Raised when process discovery cannot enumerate running processes."""


class ToolLaunchError(PidprobeError):
    """The external analysis tool could not be started.

    Only raised when fail-fast mode is enabled; by default a launch failure
    is reported and the run continues with the next identifier.

    Attributes:
        pid: Identifier the tool was being launched for.
        command: Full argument vector that failed to launch.
    """

    def __init__(self, pid: int, command: list[str], reason: str) -> None:
        super().__init__(f"Failed to launch {command[0]!r} for PID {pid}: {reason}")
        self.pid = pid
        self.command = command
