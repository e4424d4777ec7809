"""Synchronize AndroidManifest version attributes."""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET

from .files import is_patchable_file
from .version import VersionInfo
from .xmldoc import load_document, save_document

log = logging.getLogger(__name__)

ANDROID_NS = "http://schemas.android.com/apk/res/android"
VERSION_CODE = f"{{{ANDROID_NS}}}versionCode"
VERSION_NAME = f"{{{ANDROID_NS}}}versionName"

ET.register_namespace("android", ANDROID_NS)


def is_valid_android_manifest(path: str | os.PathLike[str]) -> bool:
    if not is_patchable_file(path):
        return False
    try:
        document = load_document(path)
    except (OSError, ValueError, ET.ParseError) as exc:
        log.debug("skip: %s (%s)", path, exc)
        return False
    if document.root.tag != "manifest":
        log.debug("skip: %s (root element is <%s>, not <manifest>)", path, document.root.tag)
        return False
    return True


def update_android_manifest(path: str | os.PathLike[str], version: VersionInfo) -> None:
    document = load_document(path)

    document.root.set(VERSION_CODE, str(version.build))
    document.root.set(VERSION_NAME, version.short)

    save_document(document, path)
    log.info("stamp: %s -> versionCode=%d versionName=%s", path, version.build, version.short)
