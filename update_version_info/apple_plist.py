"""Stamp CFBundleShortVersionString and CFBundleVersion into an Info.plist.

A plist ``<dict>`` is a flat run of alternating ``<key>`` and value elements,
so a value is found by locating its key and taking the next sibling.
"""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET

from .files import is_patchable_file
from .version import VersionInfo
from .xmldoc import load_document, save_document

log = logging.getLogger(__name__)

SHORT_VERSION_KEY = "CFBundleShortVersionString"
BUNDLE_VERSION_KEY = "CFBundleVersion"


def find_key_value(root: ET.Element, key: str) -> ET.Element | None:
    """Return the sibling following the first ``plist/dict/key`` whose text is ``key``."""
    if root.tag != "plist":
        return None
    for dict_element in root.findall("dict"):
        children = list(dict_element)
        for index, child in enumerate(children):
            if child.tag == "key" and child.text == key:
                if index + 1 < len(children):
                    return children[index + 1]
                return None
    return None


def _string_value(root: ET.Element, key: str, path: str | os.PathLike[str]) -> ET.Element:
    value = find_key_value(root, key)
    if value is None:
        raise ValueError(f"{key} key not found in {path}")
    if value.tag != "string":
        raise ValueError(f"{key} in {path} is not followed by a <string> element")
    return value


def _set_text(element: ET.Element, text: str) -> None:
    for child in list(element):
        element.remove(child)
    element.text = text


def is_valid_touch_plist(path: str | os.PathLike[str]) -> bool:
    if not is_patchable_file(path):
        return False
    try:
        document = load_document(path)
    except (OSError, ValueError, ET.ParseError) as exc:
        log.debug("skip: %s (%s)", path, exc)
        return False
    if document.doctype is None or document.doctype.name != "plist":
        log.debug("skip: %s (missing plist DOCTYPE)", path)
        return False
    value = find_key_value(document.root, SHORT_VERSION_KEY)
    if value is None or value.tag != "string":
        log.debug("skip: %s (no <string> value for %s)", path, SHORT_VERSION_KEY)
        return False
    return True


def update_touch_plist(path: str | os.PathLike[str], version: VersionInfo) -> None:
    document = load_document(path)

    _set_text(_string_value(document.root, SHORT_VERSION_KEY, path), version.short)
    _set_text(_string_value(document.root, BUNDLE_VERSION_KEY, path), version.bundle_version)

    save_document(document, path)
    log.info(
        "stamp: %s -> %s=%s %s=%s",
        path,
        SHORT_VERSION_KEY,
        version.short,
        BUNDLE_VERSION_KEY,
        version.bundle_version,
    )
