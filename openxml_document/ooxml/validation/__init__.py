"""Validator exports for lightweight OOXML package checks."""

from .base import BaseValidator
from .docx import DOCXSchemaValidator

__all__ = [
    "BaseValidator",
    "DOCXSchemaValidator",
]
