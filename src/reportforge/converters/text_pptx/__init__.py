"""
텍스트 → PPTX 변환 모듈

파싱된 문서를 PowerPoint 프레젠테이션으로 변환하는 기능을 제공합니다.
"""
from .converter import TextToPptxConverter, convert_text_to_pptx

__all__ = ['TextToPptxConverter', 'convert_text_to_pptx']
