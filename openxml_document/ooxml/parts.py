"""
Part class registration and loading of WordprocessingML packages.

python-docx only maps the plain document main part to ``DocumentPart`` and
keeps footnotes and endnotes as opaque blobs. Registering the remaining
content types lets templates and macro-enabled documents open, and exposes
the note parts as XML trees that are serialized again on save.
"""

from __future__ import annotations

from typing import BinaryIO

from docx.opc.part import PartFactory, XmlPart
from docx.package import Package
from docx.parts.document import DocumentPart

from ..config import PackageConfig


def register_part_types() -> None:
    for content_type in PackageConfig.WORD_MAIN_CONTENT_TYPES:
        PartFactory.part_type_for.setdefault(content_type, DocumentPart)
    for content_type in PackageConfig.STORY_CONTENT_TYPES:
        PartFactory.part_type_for.setdefault(content_type, XmlPart)


def load_document(stream: BinaryIO):
    """
    Open the package in ``stream`` and return its python-docx ``Document``.

    Raises:
        ValueError: the main part is not a WordprocessingML document or template
        KeyError: the package has no main document relationship
    """
    document_part = Package.open(stream).main_document_part
    if document_part.content_type not in PackageConfig.WORD_MAIN_CONTENT_TYPES:
        raise ValueError(
            f"Not a Word document, content type is '{document_part.content_type}'"
        )
    return document_part.document


register_part_types()
