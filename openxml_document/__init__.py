"""Tag and content-control editing for .docx documents."""

from .config import MarkupConfig, PackageConfig
from .document import OpenXmlDocument
from .error_handling import (
    DocumentClosedError,
    DocumentNotFoundError,
    InvalidArgumentError,
    MalformedDocumentError,
    OpenXmlDocumentError,
)

__all__ = [
    "DocumentClosedError",
    "DocumentNotFoundError",
    "InvalidArgumentError",
    "MalformedDocumentError",
    "MarkupConfig",
    "OpenXmlDocument",
    "OpenXmlDocumentError",
    "PackageConfig",
]
