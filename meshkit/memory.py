"""Resident memory usage of the current process."""

from __future__ import annotations

import logging
import os
import sys

try:
    import resource
except ImportError:  # not available on Windows
    resource = None  # type: ignore[assignment]

_log = logging.getLogger(__name__)

_STATM_PATH = "/proc/self/statm"


def max_size() -> int:
    """Peak resident set size in bytes, or 0 where it cannot be measured."""
    if resource is None:
        return 0
    usage = resource.getrusage(resource.RUSAGE_SELF)
    if sys.platform == "darwin":
        return int(usage.ru_maxrss)
    return int(usage.ru_maxrss) * 1024


def current_size() -> int:
    """Current resident set size in bytes, or 0 where it cannot be measured."""
    if not sys.platform.startswith("linux"):
        return 0
    try:
        with open(_STATM_PATH) as fp:
            fields = fp.read().split()
    except OSError:
        _log.error("Failed to read process information file")
        return 0
    try:
        rss = int(fields[1])
    except (IndexError, ValueError):
        _log.error("Failed to retrieve RSS information")
        return 0
    return rss * os.sysconf("SC_PAGESIZE")