"""
텍스트 → XLSX 변환 모듈

파싱된 문서를 Excel 워크북으로 변환하는 기능을 제공합니다.
"""
from .converter import TextToXlsxConverter, convert_text_to_xlsx

__all__ = ['TextToXlsxConverter', 'convert_text_to_xlsx']
