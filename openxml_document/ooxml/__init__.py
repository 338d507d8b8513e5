"""OOXML helpers for package loading, raw part access and lightweight validation."""

from .package import main_part_name, read_main_part
from .parts import load_document, register_part_types
from .validation import DOCXSchemaValidator

__all__ = [
    "DOCXSchemaValidator",
    "load_document",
    "main_part_name",
    "read_main_part",
    "register_part_types",
]
