"""
시트 이름 정규화 및 셀 스타일 유틸리티
"""
import logging
from typing import Iterable

from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from .config import (
    INVALID_SHEET_NAME_CHARS,
    MAX_SHEET_NAME_LENGTH,
    RESERVED_SHEET_NAMES,
    WorkbookColors,
)

logger = logging.getLogger(__name__)

DEFAULT_SHEET_NAME = "Sheet"
FORMULA_PREFIX = "="


def set_text(cell, value):
    """
    셀에 값을 텍스트로 기록

    openpyxl은 '='로 시작하는 문자열을 수식으로 저장하므로
    그런 값은 문자열 타입으로 되돌립니다.
    """
    cell.value = value
    if isinstance(value, str) and value.startswith(FORMULA_PREFIX):
        cell.data_type = "s"
    return cell


class SheetNamer:
    """워크북 하나의 시트 이름을 정규화하고 중복을 피함"""

    def __init__(self, existing: Iterable[str] = ()):
        self._used = {name.lower() for name in existing}
        self._used.update(RESERVED_SHEET_NAMES)

    @staticmethod
    def normalize(name: str) -> str:
        """
        Excel 규칙에 맞게 시트 이름 정리

        금지 문자는 '_'로 바꾸고 31자로 자릅니다. 비어있으면 'Sheet'.
        """
        cleaned = "".join("_" if c in INVALID_SHEET_NAME_CHARS else c for c in (name or ""))
        # 작은따옴표로 시작/끝나는 이름은 Excel이 거부함
        cleaned = cleaned.strip().strip("'")
        if len(cleaned) > MAX_SHEET_NAME_LENGTH:
            logger.debug(f"시트 이름 잘림: '{cleaned}'")
            cleaned = cleaned[:MAX_SHEET_NAME_LENGTH].rstrip()
        return cleaned or DEFAULT_SHEET_NAME

    def claim(self, name: str) -> str:
        """
        사용 가능한 시트 이름 반환 및 예약

        이미 사용된 이름이면 ' (2)', ' (3)' ... 를 31자 안에 맞춰 붙입니다.
        """
        base = self.normalize(name)
        candidate = base
        counter = 2
        while candidate.lower() in self._used:
            suffix = f" ({counter})"
            candidate = base[:MAX_SHEET_NAME_LENGTH - len(suffix)].rstrip() + suffix
            counter += 1

        if candidate != base:
            logger.debug(f"중복 시트 이름 변경: '{base}' -> '{candidate}'")
        self._used.add(candidate.lower())
        return candidate


class CellStyles:
    """워크북에서 공통으로 쓰는 셀 스타일"""

    def __init__(self, colors: WorkbookColors):
        self.colors = colors
        thin = Side(style="thin", color=colors.border)
        self.thin_border = Border(left=thin, right=thin, top=thin, bottom=thin)
        self.header_font = Font(bold=True, color=colors.header_font)
        self.header_fill = PatternFill(fill_type="solid", fgColor=colors.brand)
        self.stripe_fill = PatternFill(fill_type="solid", fgColor=colors.stripe)
        self.center = Alignment(horizontal="center")
        self.wrap = Alignment(wrap_text=True, vertical="top")

    def style_header_row(self, worksheet, column_count: int, row: int = 1) -> None:
        """굵은 흰 글씨 + 채움색 헤더"""
        for col in range(1, column_count + 1):
            cell = worksheet.cell(row=row, column=col)
            cell.font = self.header_font
            cell.fill = self.header_fill
            cell.alignment = self.center

    def priority_font(self, priority: str) -> Font:
        """우선순위별 글자색"""
        return Font(color=self.colors.priority.get(priority, self.colors.border))
