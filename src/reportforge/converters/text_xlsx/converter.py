"""
AI 생성 텍스트를 Excel(.xlsx)로 변환하는 컨버터

파싱된 Document를 Overview 시트, 테이블별 시트, 섹션별 시트로 구성하고,
테이블이 하나도 없으면 텍스트에서 추출한 "Extracted Data" 시트를 추가합니다.
"""
import logging
from datetime import datetime
from io import BytesIO
from pathlib import Path
from typing import Optional

from openpyxl import Workbook

from ...analysis.prioritizer import KeyPointPrioritizer
from ...core.document import ArtifactType, Document
from ...core.exceptions import GenerationError
from ...parsers.markup_parser import MarkupParser
from .config import (
    WorkbookColors,
    WorkbookConfig,
    DEFAULT_WORKBOOK_COLORS,
    DEFAULT_WORKBOOK_CONFIG,
)
from .sheet_builder import (
    ExtractedDataSheetBuilder,
    OverviewSheetBuilder,
    SectionSheetBuilder,
    TableSheetBuilder,
    group_sections,
)
from .style_utils import SheetNamer

logger = logging.getLogger(__name__)


def document_text(document: Document) -> str:
    """Prioritizer 입력 텍스트 (원문이 없으면 섹션에서 재구성)"""
    if document.source_text:
        return document.source_text

    lines = []
    for section in document.sections:
        marker = "#" * section.level
        lines.append(f"{marker} {section.title}")
        lines.extend(section.body_lines)
        lines.extend(f"- {item.text}" for item in section.list_items)
    return "\n".join(lines)


class TextToXlsxConverter:
    """Document를 Excel 워크북으로 변환하는 컨버터

    설정만 보관하며, 워크북 객체는 호출마다 새로 만듭니다.
    """

    def __init__(
        self,
        config: WorkbookConfig = None,
        colors: WorkbookColors = None,
        prioritizer: KeyPointPrioritizer = None
    ):
        """
        컨버터 초기화

        Args:
            config: 워크북 레이아웃 설정
            colors: 워크북 색상
            prioritizer: 테이블이 없을 때 사용할 포인트 추출기
        """
        self.config = config or DEFAULT_WORKBOOK_CONFIG
        self.colors = colors or DEFAULT_WORKBOOK_COLORS
        self.prioritizer = prioritizer or KeyPointPrioritizer()

    def build(self, document: Document, generated_at: Optional[datetime] = None) -> Workbook:
        """
        Document로 워크북 객체 생성

        Args:
            document: 파싱된 문서
            generated_at: 생성 일시 (없으면 현재 시각)

        Returns:
            Workbook: 저장 전의 워크북
        """
        generated_at = generated_at or datetime.now()

        wb = Workbook()
        wb.properties.creator = self.config.creator
        wb.properties.title = document.title
        wb.properties.created = generated_at
        wb.properties.modified = generated_at

        namer = SheetNamer()
        builder_args = (wb, namer, self.config, self.colors)

        OverviewSheetBuilder(*builder_args).create(document, generated_at, worksheet=wb.active)

        table_builder = TableSheetBuilder(*builder_args)
        for table in document.tables:
            table_builder.create(table)

        section_builder = SectionSheetBuilder(*builder_args)
        for section, subsections in group_sections(document.sections):
            section_builder.create(section, subsections)

        if not document.has_tables and not document.is_empty:
            points = self.prioritizer.extract(document_text(document))
            ExtractedDataSheetBuilder(*builder_args).create(points)

        return wb

    def save_to_bytes(self, document: Document, generated_at: Optional[datetime] = None) -> bytes:
        """
        Document를 .xlsx 바이트로 직렬화

        Raises:
            GenerationError: 워크북 생성/저장 중 오류 발생
        """
        logger.info(f"XLSX 생성 시작: '{document.title}' (섹션 {len(document.sections)}개)")

        try:
            wb = self.build(document, generated_at)
            buffer = BytesIO()
            wb.save(buffer)
        except Exception as e:
            logger.error(f"XLSX 생성 실패: {e}")
            raise GenerationError(ArtifactType.WORKBOOK, str(e)) from e

        data = buffer.getvalue()
        logger.info(f"XLSX 생성 완료: 시트 {wb.sheetnames}, {len(data)} bytes")
        return data

    def convert(
        self,
        document: Document,
        output_path: Path,
        generated_at: Optional[datetime] = None
    ) -> None:
        """
        Document를 .xlsx 파일로 저장

        Args:
            document: 파싱된 문서
            output_path: 출력 XLSX 파일 경로
            generated_at: 생성 일시
        """
        data = self.save_to_bytes(document, generated_at)
        Path(output_path).write_bytes(data)
        logger.info(f"변환 완료: {output_path}")


def convert_text_to_xlsx(
    text: str,
    output_path: Path,
    title: Optional[str] = None,
    prompt: Optional[str] = None
) -> None:
    """
    텍스트를 XLSX 파일로 변환하는 편의 함수

    Args:
        text: AI가 생성한 텍스트
        output_path: 출력 XLSX 파일 경로
        title: 문서 제목
        prompt: 원래 요청
    """
    document = MarkupParser().parse(text, title=title, prompt=prompt)
    TextToXlsxConverter().convert(document, output_path)
