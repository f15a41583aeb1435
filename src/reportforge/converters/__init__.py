"""
문서 변환기 모듈

파싱된 Document를 Excel 워크북과 PowerPoint 덱으로 변환하는 기능을 제공합니다.
"""

from .text_xlsx import TextToXlsxConverter, convert_text_to_xlsx
from .text_pptx import TextToPptxConverter, convert_text_to_pptx

__all__ = [
    "TextToXlsxConverter",
    "convert_text_to_xlsx",
    "TextToPptxConverter",
    "convert_text_to_pptx",
]
