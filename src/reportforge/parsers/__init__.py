"""Parsers module"""
from .line_classifier import classify_line, classify_lines
from .table_extractor import MarkdownTableExtractor
from .markup_parser import MarkupParser, parse_text

__all__ = [
    "classify_line",
    "classify_lines",
    "MarkdownTableExtractor",
    "MarkupParser",
    "parse_text",
]
