"""
reportforge - AI 생성 텍스트 → 문서 변환 라이브러리

제목/목록/파이프 테이블로 이루어진 느슨한 마크업 텍스트를 파싱하여
Excel 워크북(.xlsx)과 PowerPoint 덱(.pptx)을 생성합니다.
"""

__version__ = "0.1.0"
__author__ = "dotnetpower"

from .core.document import ArtifactType, Document, Section, Table, ListItem
from .core.exceptions import GenerationError
from .parsers import MarkupParser, parse_text
from .converters import TextToXlsxConverter, TextToPptxConverter
from .pipeline import (
    artifact_filename,
    generate_artifacts,
    generate_deck,
    generate_workbook,
)

__all__ = [
    "ArtifactType",
    "Document",
    "Section",
    "Table",
    "ListItem",
    "GenerationError",
    "MarkupParser",
    "parse_text",
    "TextToXlsxConverter",
    "TextToPptxConverter",
    "artifact_filename",
    "generate_artifacts",
    "generate_deck",
    "generate_workbook",
]
