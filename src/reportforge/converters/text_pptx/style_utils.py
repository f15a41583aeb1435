"""
텍스트 처리 및 스타일 적용 유틸리티

슬라이드에 들어갈 텍스트를 정리하고, 텍스트 박스 높이를 추정하며,
python-pptx가 직접 지원하지 않는 글머리 기호를 XML로 적용합니다.
"""
import math
import re

from pptx.oxml.ns import qn
from pptx.util import Emu, Pt

BULLET_CHAR = "•"

# 한 글자 폭 추정 비율 (폰트 크기 대비)
_LATIN_CHAR_WIDTH = 0.5
_WIDE_CHAR_WIDTH = 0.9
_LINE_HEIGHT_RATIO = 1.3


class TextUtils:
    """텍스트 처리 유틸리티"""

    @staticmethod
    def clean_text(text: str) -> str:
        """
        텍스트 정리 (불필요한 공백 제거)

        Args:
            text: 원본 텍스트

        Returns:
            정리된 텍스트
        """
        if not text:
            return ""
        # 여러 공백을 하나로
        text = re.sub(r'\s+', ' ', text)
        return text.strip()

    @staticmethod
    def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
        """
        텍스트를 최대 길이로 자르기

        Args:
            text: 원본 텍스트
            max_length: 최대 길이
            suffix: 잘린 경우 붙일 접미사

        Returns:
            잘린 텍스트
        """
        if len(text) <= max_length:
            return text
        return text[:max_length - len(suffix)] + suffix

    @staticmethod
    def weighted_length(text: str) -> float:
        """한글/CJK 문자를 넓게 계산한 텍스트 길이"""
        wide_count = len([c for c in text if ord(c) >= 0x1100 and not c.isspace()])
        return (len(text) - wide_count) * _LATIN_CHAR_WIDTH + wide_count * _WIDE_CHAR_WIDTH

    @staticmethod
    def estimate_height(text: str, width: int, font_size: int) -> int:
        """
        텍스트 박스에 필요한 높이 추정 (EMU)

        Args:
            text: 줄바꿈이 포함될 수 있는 텍스트
            width: 텍스트 박스 너비 (EMU)
            font_size: 폰트 크기 (EMU)
        """
        if not text:
            return 0
        line_width = max(width / font_size, 1)
        line_count = 0
        for line in text.split("\n"):
            line_count += max(1, math.ceil(TextUtils.weighted_length(line) / line_width))
        return Emu(int(line_count * font_size * _LINE_HEIGHT_RATIO) + Pt(12))


def apply_bullet(paragraph, indent: int, char: str = BULLET_CHAR) -> None:
    """
    단락에 글머리 기호 적용

    Args:
        paragraph: python-pptx 단락
        indent: 글머리 기호 들여쓰기 (EMU)
        char: 글머리 기호 문자
    """
    pPr = paragraph._p.get_or_add_pPr()
    pPr.set('marL', str(int(indent)))
    pPr.set('indent', str(-int(indent)))

    for existing in pPr.findall(qn('a:buNone')) + pPr.findall(qn('a:buChar')):
        pPr.remove(existing)

    bullet = pPr.makeelement(qn('a:buChar'), {'char': char})
    pPr.insert_element_before(bullet, 'a:tabLst', 'a:defRPr', 'a:extLst')
