"""Lightweight validation helpers for zipped Office packages."""

from __future__ import annotations

import logging
import zipfile
from typing import BinaryIO, Iterable, List

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

logger = logging.getLogger(__name__)


class BaseValidator:
    """Basic structural checks for a zipped Office package held in a stream."""

    required_files: Iterable[str] = ()

    def __init__(self, stream: BinaryIO, verbose: bool = False):
        self.stream = stream
        self.verbose = verbose
        self.errors: List[str] = []

    def validate(self) -> bool:
        self.errors = []
        self.stream.seek(0)
        try:
            with zipfile.ZipFile(self.stream, "r") as archive:
                required = list(self.required_files)
                if not self._check_required_files(archive, required):
                    return False
                extra = self._collect_required(archive)
                if extra is None:
                    return False
                required.extend(name for name in extra if name not in required)
                if not self._check_required_files(archive, required):
                    return False
                return self._parse_xml_files(archive, required)
        except zipfile.BadZipFile as exc:
            self._report(f"Invalid zip file: {exc}")
            return False
        finally:
            self.stream.seek(0)

    def _collect_required(self, archive: zipfile.ZipFile) -> List[str] | None:
        """Return part names that become required once the fixed ones exist."""
        _ = archive
        return []

    def _check_required_files(self, archive: zipfile.ZipFile, rel_paths: Iterable[str]) -> bool:
        names = set(archive.namelist())
        missing = [p for p in rel_paths if p not in names]
        if missing:
            self._report(f"Missing required files: {missing}")
            return False
        return True

    def _parse_xml_files(self, archive: zipfile.ZipFile, rel_paths: Iterable[str]) -> bool:
        for rel_path in rel_paths:
            if not rel_path.endswith((".xml", ".rels")):
                continue
            try:
                with archive.open(rel_path) as handle:
                    ET.parse(handle)
            except (ET.ParseError, DefusedXmlException) as exc:
                self._report(f"Invalid XML in {rel_path}: {exc}")
                return False
        return True

    def _report(self, message: str) -> None:
        self.errors.append(message)
        if self.verbose:
            logger.warning(message)
        else:
            logger.debug(message)
