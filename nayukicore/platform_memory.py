"""Cache line and page sizes of the machine."""

from __future__ import annotations

import mmap
import os
import sys
from pathlib import Path

__all__ = ["cache_line_size", "page_size"]

_DEFAULT_CACHE_LINE = 64
_DARWIN_PAGE_SIZE = 4096
_SYSFS_LINE_SIZE = Path("/sys/devices/system/cpu/cpu0/cache/index0/coherency_line_size")


def _sysconf(name: str) -> int:
    if not hasattr(os, "sysconf") or name not in getattr(os, "sysconf_names", {}):
        return 0
    try:
        return max(os.sysconf(name), 0)
    except (OSError, ValueError):
        return 0


def _linux_cache_line_size() -> int:
    size = _sysconf("SC_LEVEL1_DCACHE_LINESIZE")
    if size > 0:
        return size
    try:
        size = int(_SYSFS_LINE_SIZE.read_text().strip())
    except (OSError, ValueError):
        return _DEFAULT_CACHE_LINE
    return size if size > 0 else _DEFAULT_CACHE_LINE


def cache_line_size() -> int:
    """Size in bytes of a data cache line."""
    if sys.platform.startswith("linux"):
        return _linux_cache_line_size()
    return _DEFAULT_CACHE_LINE


def page_size() -> int:
    """Size in bytes of a memory page."""
    if sys.platform == "darwin":
        return _DARWIN_PAGE_SIZE
    return mmap.PAGESIZE