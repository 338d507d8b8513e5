"""Lightweight DOCX validation (structure + XML well-formedness)."""

from __future__ import annotations

import zipfile
from typing import List

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from ...config import PackageConfig
from ..package import main_part_name
from .base import BaseValidator


class DOCXSchemaValidator(BaseValidator):
    required_files = (
        PackageConfig.CONTENT_TYPES_PART,
        PackageConfig.PACKAGE_RELS_PART,
    )

    def _collect_required(self, archive: zipfile.ZipFile) -> List[str] | None:
        try:
            name = main_part_name(archive)
        except (ET.ParseError, DefusedXmlException) as exc:
            self._report(f"Invalid XML in {PackageConfig.PACKAGE_RELS_PART}: {exc}")
            return None
        if name is None:
            self._report("Package declares no main document part")
            return None
        return [name]
