"""Core module"""
from .document import (
    ArtifactType,
    ClassifiedLine,
    Document,
    LineKind,
    ListItem,
    Priority,
    Section,
    Table,
)
from .exceptions import GenerationError, ReportForgeError
from .parser import BaseParser
from .extractor import BaseExtractor, TableExtractor, KeyPointExtractor

__all__ = [
    "ArtifactType",
    "ClassifiedLine",
    "Document",
    "LineKind",
    "ListItem",
    "Priority",
    "Section",
    "Table",
    "GenerationError",
    "ReportForgeError",
    "BaseParser",
    "BaseExtractor",
    "TableExtractor",
    "KeyPointExtractor",
]
