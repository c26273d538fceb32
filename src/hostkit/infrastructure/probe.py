"""Platform directory probes.

A probe answers one question: does a path name a real directory, not a
symlink, junction, or other reparse point that resolves to one? The
final path component is never followed.

The implementation is chosen once, at import time, by
:func:`default_probe`. Callers that need another behavior pass their own
probe to :func:`hostkit.infrastructure.filesystem.directory_exists`.
"""

from __future__ import annotations

import os
import stat
from typing import Protocol

# stat.FILE_ATTRIBUTE_REPARSE_POINT only exists on Windows builds.
FILE_ATTRIBUTE_REPARSE_POINT = 0x400


class DirectoryProbe(Protocol):
    """Capability interface for the strict directory check."""

    def is_real_directory(self, path: str) -> bool: ...


class PosixDirectoryProbe:
    """``lstat``-based check; symlinks report as non-directories."""

    def is_real_directory(self, path: str) -> bool:
        try:
            st = os.lstat(path)
        except (OSError, ValueError):
            return False
        return stat.S_ISDIR(st.st_mode)


class WindowsDirectoryProbe:
    """``lstat``-based check that also rejects junctions.

    Junctions report ``S_IFDIR`` from ``lstat`` but carry the reparse
    point attribute, as do directory symlinks.
    """

    def is_real_directory(self, path: str) -> bool:
        try:
            st = os.lstat(path)
        except (OSError, ValueError):
            return False
        if not stat.S_ISDIR(st.st_mode):
            return False
        attributes = getattr(st, "st_file_attributes", 0)
        return not attributes & FILE_ATTRIBUTE_REPARSE_POINT


def default_probe() -> DirectoryProbe:
    """Return the probe for the running platform."""
    if os.name == "nt":
        return WindowsDirectoryProbe()
    return PosixDirectoryProbe()


PLATFORM_PROBE: DirectoryProbe = default_probe()
