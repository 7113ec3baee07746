"""Find running processes by executable name."""

from __future__ import annotations

import psutil

from pidprobe.exceptions import DiscoveryError
from pidprobe.logging import get_logger

LOG = get_logger(__name__)


def _normalize(name: str) -> str:
    name = name.strip().lower()
    if name.endswith(".exe"):
        name = name[: -len(".exe")]
    return name


def find_pids_by_name(name: str) -> list[int]:
    """Return the PIDs of all running processes called ``name``, ascending.

    Matching is case-insensitive and ignores a trailing ``.exe`` on either
    side, so ``firefox`` finds ``firefox.exe`` and ``Firefox``. Processes
    that exit or deny access while being inspected are skipped.

    Raises:
        DiscoveryError: If ``name`` is empty or the process table can't be read.
    """
    wanted = _normalize(name)
    if not wanted:
        raise DiscoveryError("Process name must not be empty")

    pids: list[int] = []
    try:
        for proc in psutil.process_iter(["pid", "name"]):
            proc_name = proc.info.get("name")
            if proc_name and _normalize(proc_name) == wanted:
                pids.append(proc.info["pid"])
    except psutil.Error as exc:
        raise DiscoveryError(f"Unable to enumerate processes: {exc}") from exc

    pids.sort()
    LOG.debug("processes_discovered", name=name, count=len(pids))
    return pids
