"""
텍스트 줄 분류기

한 줄을 제목/테이블 행/구분선/목록 항목/빈 줄/일반 텍스트 중 하나로 분류합니다.
앞선 규칙이 우선합니다 (제목 마커가 목록/테이블 마커보다 먼저 검사됨).
"""
import re
from typing import List

from ..core.document import ClassifiedLine, LineKind

HEADING_1_MARKER = "# "
HEADING_2_MARKER = "## "
TABLE_SEPARATOR_RUN = "---"

LIST_ITEM_PATTERN = re.compile(r'^(?:[-*•]|\d+\.)\s+(.*)$')


def split_table_cells(stripped: str) -> List[str]:
    """
    파이프로 감싸진 행을 셀 목록으로 분리

    바깥쪽 파이프로 생기는 빈 앞/뒤 셀만 제거하고, 가운데의 빈 셀은 유지합니다.

    Args:
        stripped: 양끝 공백이 제거된 '|...|' 형태의 줄

    Returns:
        공백이 제거된 셀 리스트
    """
    cells = [cell.strip() for cell in stripped.split("|")]
    if cells and not cells[0]:
        cells = cells[1:]
    if cells and not cells[-1]:
        cells = cells[:-1]
    return cells


def classify_line(line: str) -> ClassifiedLine:
    """
    한 줄 분류

    Args:
        line: 원본 줄 (줄바꿈 제외)

    Returns:
        ClassifiedLine: 분류 결과와 마커가 제거된 내용
    """
    if line.startswith(HEADING_1_MARKER):
        return ClassifiedLine(LineKind.HEADING_1, text=line[len(HEADING_1_MARKER):].strip(), raw=line)

    if line.startswith(HEADING_2_MARKER):
        return ClassifiedLine(LineKind.HEADING_2, text=line[len(HEADING_2_MARKER):].strip(), raw=line)

    stripped = line.strip()

    if stripped.startswith("|") and stripped.endswith("|"):
        if TABLE_SEPARATOR_RUN in stripped:
            return ClassifiedLine(LineKind.TABLE_SEPARATOR, raw=line)
        return ClassifiedLine(
            LineKind.TABLE_ROW,
            text=stripped,
            cells=split_table_cells(stripped),
            raw=line
        )

    match = LIST_ITEM_PATTERN.match(stripped)
    if match:
        return ClassifiedLine(LineKind.LIST_ITEM, text=match.group(1).strip(), raw=line)

    if not stripped:
        return ClassifiedLine(LineKind.BLANK, raw=line)

    return ClassifiedLine(LineKind.TEXT, text=line.rstrip(), raw=line)


def classify_lines(text: str) -> List[ClassifiedLine]:
    """
    텍스트 전체를 줄 단위로 분류

    Args:
        text: 원본 텍스트 (\\r\\n 허용)

    Returns:
        줄 순서대로 분류된 리스트 (빈 입력이면 빈 리스트)
    """
    if not text:
        return []
    return [classify_line(line) for line in text.replace("\r\n", "\n").split("\n")]
