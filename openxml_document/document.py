#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Facade over a .docx package for tag and content-control editing.
"""

from __future__ import annotations

import io
import logging
import os
import re
import zipfile
from contextlib import contextmanager
from typing import BinaryIO, Dict, Iterable, Iterator, List, Mapping, Optional

from docx.opc.exceptions import PackageNotFoundError
from lxml import etree

from .config import MarkupConfig, PackageConfig
from .error_handling import (
    DocumentClosedError,
    DocumentNotFoundError,
    InvalidArgumentError,
    MalformedDocumentError,
)
from .ooxml import DOCXSchemaValidator, load_document, read_main_part
from .utilities import (
    alias_name,
    element_text,
    iter_aliases,
    iter_body_elements,
    iter_story_elements,
    nearest_sdt,
    remove_elements,
    replace_text,
)

logger = logging.getLogger(__name__)

_PACKAGE_ERRORS = (
    zipfile.BadZipFile,
    PackageNotFoundError,
    KeyError,
    ValueError,
    etree.XMLSyntaxError,
)


class OpenXmlDocument:
    """
    Read and edit tags and content controls of a Word package (.docx, .docm,
    .dotx or .dotm).

    The document owns its stream until ``close()``. Every operation opens
    the package from the start of the stream, works on it, and closes it
    again; editing operations write the package back before returning.

    Example:
        >>> with OpenXmlDocument("letter.docx") as document:
        ...     document.get_tag_names()
        ['Title', 'Subtitle']
    """

    def __init__(self, source: str | os.PathLike | BinaryIO):
        if source is None:
            raise InvalidArgumentError("A file path or stream is required")

        if isinstance(source, (str, os.PathLike)):
            stream = _open_path(source)
            try:
                self._check_validity_of_stream(stream)
            except Exception:
                stream.close()
                raise
        else:
            stream = source
            _check_stream(stream)
            self._check_validity_of_stream(stream)

        self.stream = stream
        self._closed = False

    def __enter__(self) -> "OpenXmlDocument":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.stream.close()

    def get_content(self) -> str:
        """Return the main document part XML exactly as stored in the package."""
        self._ensure_open()
        data = read_main_part(self.stream)
        self.stream.seek(0)
        return data.decode(PackageConfig.PART_ENCODING)

    def get_tag_names(
        self,
        begin_pattern: str = MarkupConfig.ESCAPED_BEGIN_MARKUP,
        end_pattern: str = MarkupConfig.ESCAPED_END_MARKUP,
    ) -> List[str]:
        """
        Return the distinct tag names found between the delimiter patterns.

        Each block-level body element is matched on its own text, so a tag
        whose markers sit in two different paragraphs is not reported.

        Args:
            begin_pattern: regular expression for the opening delimiter
            end_pattern: regular expression for the closing delimiter
        """
        regex = re.compile(f"({begin_pattern})(.*?)({end_pattern})")
        with self._open_package() as document:
            names = [
                match.group(2)
                for element in iter_body_elements(document)
                for match in regex.finditer(element_text(element))
            ]
        tag_names = _distinct(names)
        logger.debug("Found %d tag name(s)", len(tag_names))
        return tag_names

    def get_alias_names(self) -> List[str]:
        with self._open_package() as document:
            names = [alias_name(alias) for alias in iter_aliases(document.element)]
        alias_names = _distinct(name for name in names if name is not None)
        logger.debug("Found %d alias name(s)", len(alias_names))
        return alias_names

    def search_and_replace_tags(self, replacements: Optional[Mapping[str, str]]) -> None:
        """
        Replace each ``|{tag}|`` in the document with its literal text.

        The canonical markers are always used, whatever patterns were used to
        discover the names. Tags that do not occur are skipped. Nothing is
        written when ``replacements`` is empty.
        """
        if not replacements:
            return

        tags = _map_markup_on_keys(replacements)
        total = 0
        with self._open_package(writable=True) as document:
            stories = list(iter_story_elements(document))
            for tag, text in tags.items():
                count = sum(replace_text(story, tag, text) for story in stories)
                if not count:
                    logger.debug("Tag %s not found", tag)
                total += count
        logger.info("Replaced %d tag occurrence(s) for %d tag(s)", total, len(tags))

    def search_and_remove_aliases(self, alias_names: Optional[Iterable[str]]) -> None:
        """
        Remove every content control whose alias is in ``alias_names``.

        The whole w:sdt that declares the alias goes, nested content controls
        included. Names without a matching alias are ignored.
        """
        if not alias_names:
            return
        if isinstance(alias_names, str):
            alias_names = [alias_names]
        requested = set(alias_names)
        if not requested:
            return

        with self._open_package(writable=True) as document:
            matched = [
                alias for alias in iter_aliases(document.element)
                if alias_name(alias) in requested
            ]
            containers = _distinct(
                container for container in (nearest_sdt(alias) for alias in matched)
                if container is not None
            )
            removed = remove_elements(containers)
        logger.info("Removed %d content control(s)", removed)

    @contextmanager
    def _open_package(self, writable: bool = False) -> Iterator:
        self._ensure_open()
        self.stream.seek(0)
        document = load_document(self.stream)
        yield document
        if writable:
            buffer = io.BytesIO()
            document.save(buffer)
            self.stream.seek(0)
            self.stream.truncate()
            self.stream.write(buffer.getvalue())
            self.stream.flush()
        self.stream.seek(0)

    def _ensure_open(self) -> None:
        if self._closed:
            raise DocumentClosedError("Operation on a closed document")

    def _check_validity_of_stream(self, stream: BinaryIO) -> None:
        validator = DOCXSchemaValidator(stream)
        if not validator.validate():
            raise MalformedDocumentError("; ".join(validator.errors))

        try:
            stream.seek(0)
            load_document(stream)
        except _PACKAGE_ERRORS as exc:
            logger.debug("Package check failed: %s", exc)
            raise MalformedDocumentError(f"Not a WordprocessingML package: {exc}") from exc
        finally:
            stream.seek(0)


def _open_path(path: str | os.PathLike) -> BinaryIO:
    path = os.fspath(path)
    if not isinstance(path, str) or not path.strip():
        raise InvalidArgumentError("File path must not be empty")
    if not os.path.isfile(path):
        raise DocumentNotFoundError(f"Document not found: {path}")
    return open(path, "r+b")


def _check_stream(stream) -> None:
    for method in ("read", "write", "seek", "truncate"):
        if not callable(getattr(stream, method, None)):
            raise InvalidArgumentError(f"Stream must support {method}()")
    seekable = getattr(stream, "seekable", None)
    if callable(seekable) and not seekable():
        raise InvalidArgumentError("Stream must be seekable")


def _map_markup_on_keys(replacements: Mapping[str, str]) -> Dict[str, str]:
    begin, end = MarkupConfig.BEGIN_MARKUP, MarkupConfig.END_MARKUP
    return {f"{begin}{tag}{end}": str(text) for tag, text in replacements.items()}


def _distinct(values: Iterable) -> List:
    return list(dict.fromkeys(values))
