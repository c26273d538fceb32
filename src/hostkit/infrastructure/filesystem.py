"""Filesystem helpers used before writing files on the host.

INVARIANT: ``mkdirs`` never descends through a non-directory. A path
component that exists but is not a directory fails the whole call.

Failures are reported as ``False`` and logged at DEBUG with the
underlying errno. Directories created before a failure are left in place.
"""

from __future__ import annotations

import errno
import logging
import os
import stat

from hostkit.infrastructure.probe import PLATFORM_PROBE, DirectoryProbe

logger = logging.getLogger(__name__)

DEFAULT_DIR_MODE = 0o775
DEFAULT_FILE_MODE = 0o600

_SEPARATORS = os.sep + (os.altsep or "")


# ---------------------------------------------------------------------------
# Path components
# ---------------------------------------------------------------------------


def _strip_trailing_separators(path: str) -> str:
    stripped = path.rstrip(_SEPARATORS)
    # A path made only of separators is the root.
    return stripped or path[:1]


def dirname(path: str | os.PathLike[str]) -> str:
    """Return the parent of *path* the way POSIX ``dirname`` does.

    Trailing separators are ignored and a bare name's parent is ``.``.
    """
    parent = os.path.dirname(_strip_trailing_separators(os.fspath(path)))
    return parent or os.curdir


def basename(path: str | os.PathLike[str]) -> str:
    """Return the final component of *path* the way POSIX ``basename`` does."""
    stripped = _strip_trailing_separators(os.fspath(path))
    return os.path.basename(stripped) or stripped


# ---------------------------------------------------------------------------
# Existence
# ---------------------------------------------------------------------------


def directory_exists(
    path: str | os.PathLike[str],
    *,
    probe: DirectoryProbe | None = None,
) -> bool:
    """Check whether *path* is a directory and not a link to one.

    Never raises; unreadable, missing, or malformed paths report ``False``.
    """
    return (probe or PLATFORM_PROBE).is_real_directory(os.fspath(path))


# ---------------------------------------------------------------------------
# Creation
# ---------------------------------------------------------------------------


def mkdirs(
    path: str | os.PathLike[str],
    *,
    mode: int = DEFAULT_DIR_MODE,
    probe: DirectoryProbe | None = None,
) -> bool:
    """Create every directory above the final component of *path*.

    The final component is treated as a leaf (usually a file name) and is
    not created. Returns ``True`` when all parents exist afterwards.
    """
    current = os.fspath(path)
    missing: list[str] = []  # leaf-most first
    while True:
        parent = dirname(current)
        if parent == current:
            logger.debug("mkdirs: reached %r without finding an existing directory", current)
            return False
        if directory_exists(parent, probe=probe):
            break
        try:
            st = os.stat(parent)
        except FileNotFoundError:
            missing.append(parent)
            current = parent
            continue
        except (OSError, ValueError) as exc:
            logger.debug("mkdirs: cannot stat %r: %s", parent, exc)
            return False
        # Follows symlinks: a link to a directory is an acceptable parent.
        if stat.S_ISDIR(st.st_mode):
            break
        logger.debug("mkdirs: %r exists and is not a directory", parent)
        return False

    # Directories created before a failure are left in place.
    for directory in reversed(missing):
        try:
            os.mkdir(directory, mode)
        except OSError as exc:
            if exc.errno == errno.EEXIST and os.path.isdir(directory):
                continue
            logger.debug("mkdirs: cannot create %r: %s", directory, exc)
            return False
        logger.debug("mkdirs: created %s", directory)
    return True


def create_file(path: str | os.PathLike[str], mode: int = DEFAULT_FILE_MODE) -> None:
    """Create *path* (truncating any existing file) with permission *mode*.

    Raises:
        OSError: If the file cannot be opened for writing.
    """
    fd = os.open(os.fspath(path), os.O_CREAT | os.O_WRONLY | os.O_TRUNC, mode)
    os.close(fd)


def prepare_file(
    path: str | os.PathLike[str],
    *,
    dir_mode: int = DEFAULT_DIR_MODE,
    file_mode: int = DEFAULT_FILE_MODE,
) -> bool:
    """Make the parents of *path*, then create it empty.

    Returns ``False`` if either step fails.
    """
    if not mkdirs(path, mode=dir_mode):
        return False
    try:
        create_file(path, file_mode)
    except OSError as exc:
        logger.debug("prepare_file: cannot create %r: %s", os.fspath(path), exc)
        return False
    return True
