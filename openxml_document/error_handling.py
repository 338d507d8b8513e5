#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Error types raised by the document facade.
"""


class OpenXmlDocumentError(Exception):
    """Base class for document facade errors."""
    pass


class InvalidArgumentError(OpenXmlDocumentError, ValueError):
    """A path or stream argument is missing, empty, or unusable."""
    pass


class DocumentNotFoundError(OpenXmlDocumentError, FileNotFoundError):
    """No file exists at the given path."""
    pass


class MalformedDocumentError(OpenXmlDocumentError):
    """The stream does not hold a readable WordprocessingML package."""
    pass


class DocumentClosedError(OpenXmlDocumentError, ValueError):
    """An operation was attempted on a closed document."""
    pass
