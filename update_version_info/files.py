"""Helpers shared by the file patchers."""

from __future__ import annotations

import logging
import os
import pathlib
import stat

log = logging.getLogger(__name__)


def is_patchable_file(path: str | os.PathLike[str]) -> bool:
    """Return True if ``path`` is an existing regular file with its owner-write bit set.

    The permission bits are checked instead of ``os.access`` so that a file
    marked read-only is skipped even when running as a privileged user.
    """
    target = pathlib.Path(path)
    try:
        if not target.is_file():
            log.debug("skip: %s (not found)", target)
            return False
        mode = target.stat().st_mode
    except OSError as exc:
        log.debug("skip: %s (%s)", target, exc)
        return False
    if not mode & stat.S_IWUSR:
        log.debug("skip: %s (read-only)", target)
        return False
    return True


def read_text(path: str | os.PathLike[str]) -> str:
    # utf-8-sig accepts a leading BOM; newline="" keeps CRLF endings intact
    with open(path, "r", encoding="utf-8-sig", newline="") as handle:
        return handle.read()


def write_text(path: str | os.PathLike[str], text: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(text)
