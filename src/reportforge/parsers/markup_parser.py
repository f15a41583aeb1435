"""
경량 마크업 텍스트 파서

분류된 줄 시퀀스 위에서 동작하는 유한 상태 기계로 Document를 만듭니다.

상태:
    NO_SECTION  첫 제목/내용 이전
    IN_SECTION  섹션 내부, 누적기(PROSE | LIST | TABLE) 중 하나가 활성

다른 종류의 비어있지 않은 줄이 오면 현재 누적기를 섹션에 반영(flush)한 뒤
새 누적기로 전환합니다. 빈 줄은 블록을 끝내지 않습니다.
"""
import logging
from enum import Enum
from typing import List, Optional

from ..core.document import ClassifiedLine, Document, LineKind, ListItem, Section
from ..core.parser import BaseParser
from .line_classifier import classify_lines
from .table_extractor import MarkdownTableExtractor

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Report"
IMPLICIT_SECTION_TITLE = "Introduction"

_HEADING_LEVELS = {
    LineKind.HEADING_1: 1,
    LineKind.HEADING_2: 2,
}


class ParserState(Enum):
    NO_SECTION = "no_section"
    IN_SECTION = "in_section"


class Accumulator(Enum):
    PROSE = "prose"
    LIST = "list"
    TABLE = "table"


_ACCUMULATOR_FOR_KIND = {
    LineKind.TEXT: Accumulator.PROSE,
    LineKind.LIST_ITEM: Accumulator.LIST,
    LineKind.TABLE_ROW: Accumulator.TABLE,
}


class _ParseContext:
    """한 번의 parse 호출 동안만 유지되는 상태"""

    def __init__(self, title: Optional[str]):
        self.requested_title = title
        self.title: Optional[str] = title
        self.title_consumed = False
        self.state = ParserState.NO_SECTION
        self.accumulator = Accumulator.PROSE
        self.section: Optional[Section] = None
        self.sections: List[Section] = []
        self.prose: List[str] = []
        self.items: List[ListItem] = []
        self.table = MarkdownTableExtractor()

    def flush(self) -> None:
        """활성 누적기의 내용을 현재 섹션에 반영"""
        if self.section is None:
            return

        if self.accumulator is Accumulator.PROSE and self.prose:
            self.section.body_text += "".join(f"{line}\n" for line in self.prose)
            self.prose = []
        elif self.accumulator is Accumulator.LIST and self.items:
            self.section.list_items.extend(self.items)
            self.items = []
        elif self.accumulator is Accumulator.TABLE and self.table.has_rows:
            self.section.tables.append(self.table.extract())
            self.table.reset()

    def open_section(self, title: str, level: int, implicit: bool = False) -> None:
        self.close_section()
        self.section = Section(title=title, level=level, implicit=implicit)
        self.state = ParserState.IN_SECTION
        self.accumulator = Accumulator.PROSE

    def close_section(self) -> None:
        self.flush()
        if self.section is not None:
            self.sections.append(self.section)
            self.section = None


class MarkupParser(BaseParser):
    """제목/목록/파이프 테이블 마크업 파서"""

    def parse(
        self,
        text: str,
        title: Optional[str] = None,
        prompt: Optional[str] = None
    ) -> Document:
        """
        텍스트를 Document로 변환

        Args:
            text: AI가 생성한 텍스트
            title: 문서 제목. 지정되면 같은 텍스트의 '# ' 제목은 섹션이 아닌
                문서 제목 줄로 소비됩니다. 없으면 내용보다 먼저 나오는
                '# ' 제목을 문서 제목으로 사용합니다.
            prompt: 텍스트를 생성한 원래 요청

        Returns:
            Document: 파싱된 문서
        """
        self.validate_input(text)

        ctx = _ParseContext(title.strip() if title else None)
        for line in classify_lines(text):
            self._step(ctx, line)
        ctx.close_section()

        document = Document(
            title=ctx.title or DEFAULT_TITLE,
            sections=ctx.sections,
            prompt=prompt,
            source_text=text,
        )
        logger.debug(
            f"파싱 완료: '{document.title}' "
            f"(섹션 {len(document.sections)}개, 테이블 {len(document.tables)}개)"
        )
        return document

    def _step(self, ctx: _ParseContext, line: ClassifiedLine) -> None:
        """줄 하나에 대한 상태 전이"""
        kind = line.kind

        if kind is LineKind.BLANK:
            return

        if kind in _HEADING_LEVELS:
            if self._consume_title(ctx, line):
                return
            ctx.open_section(line.text, _HEADING_LEVELS[kind])
            return

        if ctx.state is ParserState.NO_SECTION:
            ctx.open_section(IMPLICIT_SECTION_TITLE, 1, implicit=True)

        if kind is LineKind.TABLE_SEPARATOR:
            return

        target = _ACCUMULATOR_FOR_KIND[kind]
        if ctx.accumulator is not target:
            ctx.flush()
            ctx.accumulator = target

        if target is Accumulator.TABLE:
            ctx.table.add_row(line.cells)
        elif target is Accumulator.LIST:
            ctx.items.append(ListItem(text=line.text))
        else:
            ctx.prose.append(line.text)

    @staticmethod
    def _consume_title(ctx: _ParseContext, line: ClassifiedLine) -> bool:
        """'# ' 제목이 문서 제목 줄이면 소비하고 True 반환"""
        if line.kind is not LineKind.HEADING_1 or ctx.title_consumed:
            return False

        if ctx.requested_title is not None:
            if line.text == ctx.requested_title:
                ctx.title_consumed = True
                return True
            return False

        if ctx.state is ParserState.NO_SECTION:
            ctx.title = line.text
            ctx.title_consumed = True
            return True
        return False


def parse_text(
    text: str,
    title: Optional[str] = None,
    prompt: Optional[str] = None
) -> Document:
    """
    텍스트를 Document로 파싱하는 편의 함수

    Args:
        text: 입력 텍스트
        title: 문서 제목 (선택)
        prompt: 원래 요청 (선택)

    Returns:
        Document: 파싱된 문서
    """
    return MarkupParser().parse(text, title=title, prompt=prompt)
