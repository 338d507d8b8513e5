#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Lightweight XML helpers for WordprocessingML traversal and text replacement.

All helpers work on the lxml element tree that python-docx exposes.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from docx.opc.part import XmlPart
from docx.oxml.ns import qn

from .config import PackageConfig


W_P = qn("w:p")
W_T = qn("w:t")
W_SDT = qn("w:sdt")
W_ALIAS = qn("w:alias")
W_VAL = qn("w:val")
XML_SPACE = qn("xml:space")


def element_text(element) -> str:
    """Concatenate the text of every w:t below ``element``."""
    return "".join(node.text or "" for node in element.iter(W_T))


def iter_body_elements(document) -> Iterator:
    """Yield the block-level children of the document body."""
    body = document.element.body
    if body is None:
        return
    for child in body.iterchildren():
        yield child


def iter_story_elements(document) -> Iterator:
    """
    Yield the root element of the main part, then of each header, footer,
    footnotes and endnotes part.
    """
    yield document.element
    for part in document.part.package.iter_parts():
        if part.content_type in PackageConfig.STORY_CONTENT_TYPES and isinstance(part, XmlPart):
            yield part.element


def iter_aliases(element) -> Iterator:
    """Yield w:alias elements in document order."""
    return element.iter(W_ALIAS)


def alias_name(alias) -> Optional[str]:
    return alias.get(W_VAL)


def nearest_sdt(element):
    """Return the closest enclosing w:sdt of ``element``, or None."""
    for ancestor in element.iterancestors(W_SDT):
        return ancestor
    return None


def remove_element(element) -> None:
    parent = element.getparent()
    if parent is not None:
        parent.remove(element)


def remove_elements(elements: List) -> int:
    """
    Remove each element together with its subtree.

    Elements nested in another element of the list go with it and are not
    counted. Returns the number of subtrees detached from the tree.
    """
    targets = set(elements)
    removed = 0
    for element in elements:
        if any(ancestor in targets for ancestor in element.iterancestors()):
            continue
        remove_element(element)
        removed += 1
    return removed


def replace_text(element, search: str, replacement: str) -> int:
    """
    Replace every occurrence of ``search`` in the paragraphs below ``element``.

    Matching runs over the concatenated w:t text of one paragraph, so an
    occurrence may span several runs. The replacement is written into the
    w:t where the occurrence starts and keeps that run's formatting; the
    rest of the occurrence is cut from the following w:t nodes. Paragraphs
    are never split or created.

    Returns:
        int: number of occurrences replaced
    """
    if not search:
        return 0
    count = 0
    for paragraph in element.iter(W_P):
        count += _replace_in_paragraph(paragraph, search, replacement)
    return count


def _replace_in_paragraph(paragraph, search: str, replacement: str) -> int:
    nodes = _paragraph_text_nodes(paragraph)
    full_text = "".join(node.text or "" for node in nodes)

    matches = []
    position = full_text.find(search)
    while position != -1:
        matches.append(position)
        position = full_text.find(search, position + len(search))

    # Right to left so earlier offsets stay valid
    for start in reversed(matches):
        _splice(nodes, start, start + len(search), replacement)
    return len(matches)


def _paragraph_text_nodes(paragraph) -> List:
    # Text boxes nest whole paragraphs inside runs; those are handled on their own
    return [node for node in paragraph.iter(W_T) if _owning_paragraph(node) is paragraph]


def _owning_paragraph(node):
    for ancestor in node.iterancestors(W_P):
        return ancestor
    return None


def _splice(nodes: List, start: int, end: int, replacement: str) -> None:
    offset = 0
    written = False
    for node in nodes:
        text = node.text or ""
        node_start = offset
        offset += len(text)
        if offset <= start or node_start >= end:
            continue

        head = text[:max(start - node_start, 0)]
        tail = text[end - node_start:] if end - node_start < len(text) else ""
        if not written:
            node.text = head + replacement + tail
            written = True
        else:
            node.text = head + tail
        if _needs_space_preserve(node.text):
            node.set(XML_SPACE, "preserve")


def _needs_space_preserve(text: str) -> bool:
    if text.startswith(" ") or text.endswith(" "):
        return True
    if "  " in text:
        return True
    return False
