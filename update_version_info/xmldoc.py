"""Load and save XML documents without losing their DOCTYPE or namespace prefixes.

``xml.etree.ElementTree`` discards the document type declaration and renames
namespace prefixes to ``ns0``, ``ns1`` ... on output. Plists are identified by
their DOCTYPE and manifests rely on the ``android:`` prefix, so the builder
below records both while parsing and :func:`save_document` writes them back.
"""

from __future__ import annotations

import os
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'

_RESERVED_PREFIX = re.compile(r"ns\d+$")


@dataclass(frozen=True)
class Doctype:
    name: str
    pubid: str | None = None
    system: str | None = None

    def render(self) -> str:
        if self.pubid:
            return f'<!DOCTYPE {self.name} PUBLIC "{self.pubid}" "{self.system or ""}">'
        if self.system:
            return f'<!DOCTYPE {self.name} SYSTEM "{self.system}">'
        return f"<!DOCTYPE {self.name}>"


@dataclass
class XmlDocument:
    root: ET.Element
    doctype: Doctype | None = None
    namespaces: dict[str, str] = field(default_factory=dict)


class _DocumentBuilder(ET.TreeBuilder):
    def __init__(self) -> None:
        super().__init__(insert_comments=True)
        self.doctype_decl: Doctype | None = None
        self.namespaces: dict[str, str] = {}

    def doctype(self, name, pubid, system):
        self.doctype_decl = Doctype(name, pubid, system)

    def start_ns(self, prefix, uri):
        self.namespaces.setdefault(prefix, uri)


def load_document(path: str | os.PathLike[str]) -> XmlDocument:
    """Parse ``path``; raises ``ParseError`` for malformed XML and ``ValueError`` if there is no root."""
    builder = _DocumentBuilder()
    parser = ET.XMLParser(target=builder)
    with open(path, "rb") as handle:
        tree = ET.parse(handle, parser=parser)
    root = tree.getroot()
    if root is None:
        raise ValueError(f"{path} has no root element")
    return XmlDocument(root=root, doctype=builder.doctype_decl, namespaces=builder.namespaces)


def _used_namespaces(root: ET.Element) -> set[str]:
    used = set()
    for element in root.iter():
        names = list(element.attrib)
        if isinstance(element.tag, str):
            names.append(element.tag)
        for name in names:
            if name.startswith("{"):
                used.add(name[1:].partition("}")[0])
    return used


def save_document(document: XmlDocument, path: str | os.PathLike[str]) -> None:
    """Write ``document`` to ``path``.

    ElementTree only declares namespaces that some tag or attribute uses, so
    prefixes the document declared but never used are put back on the root.
    """
    root = document.root
    used = _used_namespaces(root)
    for prefix, uri in document.namespaces.items():
        if not prefix or _RESERVED_PREFIX.match(prefix):
            continue
        ET.register_namespace(prefix, uri)
        if uri not in used:
            if root is document.root:
                root = ET.Element(document.root.tag, dict(document.root.attrib))
                root.text = document.root.text
                root.extend(list(document.root))
            root.set(f"xmlns:{prefix}", uri)

    body = ET.tostring(root, encoding="unicode")
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(XML_DECLARATION + "\n")
        if document.doctype is not None:
            handle.write(document.doctype.render() + "\n")
        handle.write(body + "\n")
