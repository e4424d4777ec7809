"""Rewrite ``[assembly: AssemblyVersion(...)]`` declarations in a C# source file."""

from __future__ import annotations

import logging
import os
import re

from .files import is_patchable_file, read_text, write_text
from .version import VersionInfo

log = logging.getLogger(__name__)

# One declaration per line. Only horizontal whitespace is consumed around the
# brackets so neighbouring lines and their terminators are never touched.
_DECLARATION = (
    r'^[^\S\r\n]*\[assembly:\s*'
    r'(?P<attribute>(?:System\.)?(?:Reflection\.)?{name}(?:Attribute)?'
    r'\s*\(\s*"(?P<version>[^"]+)"\s*\)\s*)'
    r'\][^\S\r\n]*(?=\r?$)'
)

ASSEMBLY_VERSION_RE = re.compile(_DECLARATION.format(name="AssemblyVersion"), re.MULTILINE)
ASSEMBLY_FILE_VERSION_RE = re.compile(_DECLARATION.format(name="AssemblyFileVersion"), re.MULTILINE)


def is_valid_assembly_info(path: str | os.PathLike[str]) -> bool:
    if not is_patchable_file(path):
        return False
    try:
        contents = read_text(path)
    except (OSError, ValueError) as exc:
        log.debug("skip: %s (%s)", path, exc)
        return False
    if ASSEMBLY_VERSION_RE.search(contents) is None:
        log.debug("skip: %s (no AssemblyVersion declaration)", path)
        return False
    return True


def update_assembly_info(path: str | os.PathLike[str], version: VersionInfo) -> None:
    contents = read_text(path)

    contents = ASSEMBLY_VERSION_RE.sub(
        lambda match: f'[assembly: System.Reflection.AssemblyVersion("{version.full}")]',
        contents,
    )
    if ASSEMBLY_FILE_VERSION_RE.search(contents):
        contents = ASSEMBLY_FILE_VERSION_RE.sub(
            lambda match: f'[assembly: System.Reflection.AssemblyFileVersion("{version.full}")]',
            contents,
        )

    write_text(path, contents)
    log.info("stamp: %s -> %s", path, version.full)
