"""
텍스트 → PPTX 변환 설정 및 상수

슬라이드 크기, 색상, 여백, 생성자 표기 등 공통 설정을 관리합니다.
"""
from pptx.util import Inches, Pt
from pptx.dml.color import RGBColor
from dataclasses import dataclass
from typing import Dict


@dataclass
class SlideConfig:
    """슬라이드 레이아웃 설정 (16:9 와이드)"""
    width: int = Inches(13.333)
    height: int = Inches(7.5)
    margin_left: int = Inches(0.5)
    margin_right: int = Inches(0.5)
    margin_top: int = Inches(0.5)
    margin_bottom: int = Inches(0.4)

    @property
    def content_width(self) -> int:
        return self.width - self.margin_left - self.margin_right

    @property
    def content_height(self) -> int:
        return self.height - self.margin_top - self.margin_bottom


@dataclass
class TableConfig:
    """슬라이드 테이블 설정"""
    max_rows_per_slide: int = 8
    min_row_height: int = Inches(0.3)
    header_font_size: int = Pt(12)
    body_font_size: int = Pt(11)
    cell_margin: int = Pt(4)
    cell_margin_vertical: int = Pt(2)
    border_width: int = Pt(0.5)


@dataclass
class DeckConfig:
    """덱 전반 설정"""
    generator: str = "AI Information Tool"
    company: str = "AI Insights"
    font_face: str = "Arial"
    title_font_size: int = Pt(44)
    heading_font_size: int = Pt(28)
    body_font_size: int = Pt(16)
    date_format: str = "%Y-%m-%d"

    @property
    def attribution(self) -> str:
        return f"Generated by {self.generator}"


class ColorPalette:
    """색상 팔레트"""

    def __init__(self):
        self._colors: Dict[str, RGBColor] = {
            'primary_blue': RGBColor(0x15, 0x65, 0xC0),    # #1565c0
            'background': RGBColor(0xF5, 0xF5, 0xF5),      # #f5f5f5
            'subtitle': RGBColor(0x54, 0x6E, 0x7A),        # #546e7a
            'caption': RGBColor(0x78, 0x90, 0x9C),         # #78909c
            'body': RGBColor(0x33, 0x33, 0x33),            # #333333
            'table_header': RGBColor(0x40, 0x40, 0xFF),    # #4040ff
            'table_stripe': RGBColor(0xF0, 0xF0, 0xF0),    # #f0f0f0
            'gray_line': RGBColor(200, 200, 200),
            'white': RGBColor(255, 255, 255),
            'black': RGBColor(0, 0, 0),
        }

    def __getitem__(self, key: str) -> RGBColor:
        return self._colors.get(key, self._colors['black'])

    def __contains__(self, key: str) -> bool:
        return key in self._colors

    def get(self, key: str, default: RGBColor = None) -> RGBColor:
        return self._colors.get(key, default or self._colors['black'])


# 기본 설정 인스턴스
DEFAULT_SLIDE_CONFIG = SlideConfig()
DEFAULT_TABLE_CONFIG = TableConfig()
DEFAULT_DECK_CONFIG = DeckConfig()
DEFAULT_COLORS = ColorPalette()
