"""
마크다운 파이프 테이블 추출기

파서의 TABLE 누적 상태에서 사용되며, 버퍼링된 행을 Table 값으로 만듭니다.
"""
import logging
from typing import List, Optional

from ..core.document import Table
from ..core.extractor import TableExtractor

logger = logging.getLogger(__name__)


def normalize_row(cells: List[str], column_count: int) -> List[str]:
    """셀 개수를 column_count에 맞춤 (부족하면 빈 셀 추가, 넘치면 잘라냄)"""
    if len(cells) >= column_count:
        return list(cells[:column_count])
    return list(cells) + [""] * (column_count - len(cells))


class MarkdownTableExtractor(TableExtractor):
    """연속된 테이블 행 블록을 누적해 Table로 만드는 추출기

    첫 행은 구분선 유무와 관계없이 항상 헤더로 취급합니다.
    """

    def __init__(self):
        self.headers: Optional[List[str]] = None
        self.rows: List[List[str]] = []

    @property
    def has_rows(self) -> bool:
        """헤더 행을 하나라도 받았는지"""
        return self.headers is not None

    def add_row(self, cells: List[str]) -> None:
        """테이블 행 추가 (첫 행은 헤더)"""
        if self.headers is None:
            self.headers = list(cells)
        else:
            self.rows.append(list(cells))

    def extract(self, source: Optional[List[List[str]]] = None) -> Table:
        """
        누적된 행으로 Table 생성

        Args:
            source: 행 리스트를 직접 넘기면 누적 상태 대신 사용 (첫 행 = 헤더)

        Returns:
            Table: 모든 행이 헤더 길이로 정규화된 테이블
        """
        if source is not None:
            self.reset()
            for cells in source:
                self.add_row(cells)

        headers = self.headers or []
        column_count = len(headers)

        rows = []
        for row in self.rows:
            if len(row) != column_count:
                logger.debug(
                    f"테이블 행 셀 개수 보정: {len(row)} -> {column_count}"
                )
            rows.append(normalize_row(row, column_count))

        return Table(headers=list(headers), rows=rows)

    def reset(self) -> None:
        self.headers = None
        self.rows = []
