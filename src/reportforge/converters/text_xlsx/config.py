"""
텍스트 → XLSX 변환 설정 및 상수

시트 이름 규칙, 열 너비, 색상 등 워크북 공통 설정을 관리합니다.
"""
from dataclasses import dataclass, field
from typing import Dict

# Excel 시트 이름 제한
MAX_SHEET_NAME_LENGTH = 31
INVALID_SHEET_NAME_CHARS = '\\/?*[]:'
# Excel이 내부용으로 예약한 시트 이름 (대소문자 무시)
RESERVED_SHEET_NAMES = ("history",)


@dataclass
class WorkbookConfig:
    """워크북 레이아웃 설정"""
    creator: str = "Taskify AI"
    overview_sheet_name: str = "Overview"
    extracted_sheet_name: str = "Extracted Data"
    highlights_title: str = "Report Highlights"
    table_name_prefix_length: int = 20
    summary_line_count: int = 2
    timestamp_format: str = "%Y-%m-%d %H:%M:%S"
    overview_column_widths: tuple = (20, 40, 20, 20, 20)
    section_column_width: int = 100
    min_table_column_width: int = 15
    extracted_column_widths: tuple = (20, 60, 15)


@dataclass
class WorkbookColors:
    """워크북 색상 (ARGB 없이 RRGGBB 16진수)"""
    brand: str = "4040FF"
    header_font: str = "FFFFFF"
    stripe: str = "F0F0F0"
    border: str = "000000"
    priority: Dict[str, str] = field(default_factory=lambda: {
        "High": "FF0000",
        "Medium": "FFA500",
        "Low": "008000",
    })


# 기본 설정 인스턴스
DEFAULT_WORKBOOK_CONFIG = WorkbookConfig()
DEFAULT_WORKBOOK_COLORS = WorkbookColors()
