"""
문서 기본 클래스 및 데이터 모델

AI가 생성한 텍스트를 파싱한 결과를 출력 형식(xlsx, pptx)과 무관하게 표현합니다.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class LineKind(Enum):
    """텍스트 한 줄의 분류"""
    HEADING_1 = "heading_1"
    HEADING_2 = "heading_2"
    TABLE_ROW = "table_row"
    TABLE_SEPARATOR = "table_separator"
    LIST_ITEM = "list_item"
    BLANK = "blank"
    TEXT = "text"


class Priority(Enum):
    """핵심 포인트 우선순위"""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class ArtifactType(Enum):
    """생성 가능한 산출물 타입"""
    WORKBOOK = "xlsx"
    DECK = "pptx"

    @property
    def extension(self) -> str:
        return self.value

    @property
    def media_type(self) -> str:
        return _MEDIA_TYPES[self]


_MEDIA_TYPES = {
    ArtifactType.WORKBOOK: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ArtifactType.DECK: "application/vnd.openxmlformats-officedocument.presentationml.presentation",
}


@dataclass
class ClassifiedLine:
    """분류된 한 줄"""
    kind: LineKind
    text: str = ""  # 마커가 제거된 텍스트
    cells: List[str] = field(default_factory=list)  # 테이블 행일 때만
    raw: str = ""


@dataclass
class ListItem:
    """목록 항목"""
    text: str
    category: Optional[str] = None  # Prioritizer가 생성한 경우만
    priority: Optional[Priority] = None


@dataclass
class Table:
    """마크다운 파이프 테이블"""
    headers: List[str]
    rows: List[List[str]] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return len(self.headers)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "headers": list(self.headers),
            "rows": [list(row) for row in self.rows],
        }


@dataclass
class Section:
    """제목 하나와 그 본문"""
    title: str
    level: int = 1  # 1: '# ', 2: '## '
    body_text: str = ""
    list_items: List[ListItem] = field(default_factory=list)
    tables: List[Table] = field(default_factory=list)
    implicit: bool = False  # 첫 제목 이전의 내용을 담는 암묵적 섹션

    @property
    def body_lines(self) -> List[str]:
        """본문의 비어있지 않은 줄"""
        return [line for line in self.body_text.split("\n") if line.strip()]

    @property
    def content_lines(self) -> List[str]:
        """본문 줄 + 목록 항목 텍스트"""
        return self.body_lines + [item.text for item in self.list_items]

    @property
    def is_empty(self) -> bool:
        return not (self.body_text.strip() or self.list_items or self.tables)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "level": self.level,
            "body_text": self.body_text,
            "list_items": [item.text for item in self.list_items],
            "tables": [table.to_dict() for table in self.tables],
            "implicit": self.implicit,
        }


@dataclass
class Document:
    """문서 객체"""
    title: str
    sections: List[Section] = field(default_factory=list)
    prompt: Optional[str] = None  # 텍스트를 생성한 원래 요청
    source_text: str = ""

    @property
    def tables(self) -> List[Table]:
        """모든 섹션의 테이블 (문서 순서)"""
        return [table for section in self.sections for table in section.tables]

    @property
    def has_tables(self) -> bool:
        return any(section.tables for section in self.sections)

    @property
    def is_empty(self) -> bool:
        return not self.sections

    def to_dict(self) -> Dict[str, Any]:
        """문서를 딕셔너리로 변환"""
        return {
            "title": self.title,
            "prompt": self.prompt,
            "sections": [section.to_dict() for section in self.sections],
            "table_count": len(self.tables),
        }
