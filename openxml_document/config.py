"""
config.py
----------------
Centralized constants for tag markup and package structure.
"""
import re


class MarkupConfig:
    # Tags are written in document text as |{TagName}|
    BEGIN_MARKUP = "|{"
    END_MARKUP = "}|"

    ESCAPED_BEGIN_MARKUP = re.escape(BEGIN_MARKUP)
    ESCAPED_END_MARKUP = re.escape(END_MARKUP)


class PackageConfig:
    CONTENT_TYPES_PART = "[Content_Types].xml"
    PACKAGE_RELS_PART = "_rels/.rels"

    OFFICE_DOCUMENT_REL_TYPE = (
        "http://schemas.openxmlformats.org/officeDocument/2006/relationships/officeDocument"
    )
    # Strict OOXML packages use a different relationship namespace
    STRICT_OFFICE_DOCUMENT_REL_TYPE = (
        "http://purl.oclc.org/ooxml/officeDocument/relationships/officeDocument"
    )

    # Encoding of XML parts returned by get_content()
    PART_ENCODING = "utf-8-sig"

    # Main part content types of documents, templates and their macro-enabled forms
    DOCUMENT_MAIN_CONTENT_TYPE = (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"
    )
    WORD_MAIN_CONTENT_TYPES = (
        DOCUMENT_MAIN_CONTENT_TYPE,
        "application/vnd.openxmlformats-officedocument.wordprocessingml.template.main+xml",
        "application/vnd.ms-word.document.macroEnabled.main+xml",
        "application/vnd.ms-word.template.macroEnabledTemplate.main+xml",
    )

    # Parts besides the main part that hold replaceable text
    STORY_CONTENT_TYPES = (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.header+xml",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.footer+xml",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.footnotes+xml",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.endnotes+xml",
    )
