"""
Raw access to parts of a zipped OOXML package.
"""

from __future__ import annotations

import posixpath
import zipfile
from typing import BinaryIO, Optional

import defusedxml.ElementTree as ET

from ..config import PackageConfig


OFFICE_DOCUMENT_REL_TYPES = (
    PackageConfig.OFFICE_DOCUMENT_REL_TYPE,
    PackageConfig.STRICT_OFFICE_DOCUMENT_REL_TYPE,
)


def main_part_name(archive: zipfile.ZipFile) -> Optional[str]:
    """
    Return the zip member name of the main document part.

    The part is located through the officeDocument relationship of the
    package relationships part. Returns None when the package declares no
    such relationship.

    Raises:
        KeyError: the package relationships part is missing
        ET.ParseError: the package relationships part is not well-formed
    """
    root = ET.fromstring(archive.read(PackageConfig.PACKAGE_RELS_PART))
    for rel in root.iter():
        if rel.tag.split("}")[-1] != "Relationship":
            continue
        if rel.get("TargetMode") == "External":
            continue
        if rel.get("Type") in OFFICE_DOCUMENT_REL_TYPES:
            return _member_name(rel.get("Target", ""))
    return None


def read_main_part(stream: BinaryIO) -> bytes:
    """Read the main document part bytes exactly as stored in the package."""
    stream.seek(0)
    with zipfile.ZipFile(stream, "r") as archive:
        name = main_part_name(archive)
        if name is None:
            raise KeyError("Package has no main document part")
        return archive.read(name)


def _member_name(target: str) -> str:
    # Package-level targets are relative to the package root
    return posixpath.normpath(target.lstrip("/"))
