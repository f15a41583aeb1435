"""
AI 생성 텍스트를 PowerPoint(.pptx)로 변환하는 컨버터

파싱된 Document를 타이틀 슬라이드, 섹션별 컨텐츠 슬라이드, 마무리 슬라이드로 구성합니다.
"""
import logging
from datetime import datetime
from io import BytesIO
from pathlib import Path
from typing import Optional

from pptx import Presentation

from ...core.document import ArtifactType, Document
from ...core.exceptions import GenerationError
from ...parsers.markup_parser import MarkupParser
from .config import (
    ColorPalette,
    DeckConfig,
    SlideConfig,
    TableConfig,
    DEFAULT_COLORS,
    DEFAULT_DECK_CONFIG,
    DEFAULT_SLIDE_CONFIG,
    DEFAULT_TABLE_CONFIG,
)
from .slide_factory import (
    ClosingSlideBuilder,
    ContentSlideBuilder,
    PromptSlideBuilder,
    TitleSlideBuilder,
)
from .style_utils import TextUtils

logger = logging.getLogger(__name__)


class TextToPptxConverter:
    """Document를 PowerPoint로 변환하는 컨버터

    설정만 보관하며, 프레젠테이션 객체는 호출마다 새로 만듭니다.
    """

    def __init__(
        self,
        slide_config: SlideConfig = None,
        table_config: TableConfig = None,
        colors: ColorPalette = None,
        deck_config: DeckConfig = None
    ):
        """
        컨버터 초기화

        Args:
            slide_config: 슬라이드 레이아웃 설정
            table_config: 테이블 설정
            colors: 색상 팔레트
            deck_config: 생성자 표기, 폰트 등 덱 설정
        """
        self.slide_config = slide_config or DEFAULT_SLIDE_CONFIG
        self.table_config = table_config or DEFAULT_TABLE_CONFIG
        self.colors = colors or DEFAULT_COLORS
        self.deck_config = deck_config or DEFAULT_DECK_CONFIG

    def build(self, document: Document, generated_at: Optional[datetime] = None) -> Presentation:
        """
        Document로 프레젠테이션 객체 생성

        Args:
            document: 파싱된 문서
            generated_at: 생성 일시 (없으면 현재 시각)

        Returns:
            Presentation: 저장 전의 프레젠테이션
        """
        generated_at = generated_at or datetime.now()

        prs = Presentation()
        prs.slide_width = self.slide_config.width
        prs.slide_height = self.slide_config.height

        props = prs.core_properties
        # core properties는 255자 제한
        props.title = TextUtils.truncate_text(document.title, 255)
        props.subject = props.title
        props.author = self.deck_config.generator
        props.created = generated_at
        props.modified = generated_at

        builder_args = (prs, self.slide_config, self.colors, self.deck_config)

        TitleSlideBuilder(*builder_args).create(
            document.title,
            generated_at.strftime(self.deck_config.date_format)
        )

        if document.prompt and document.prompt.strip():
            PromptSlideBuilder(*builder_args).create(document.prompt)

        content_builder = ContentSlideBuilder(*builder_args, table_config=self.table_config)
        for section in document.sections:
            content_builder.create(section)

        ClosingSlideBuilder(*builder_args).create()

        return prs

    def save_to_bytes(self, document: Document, generated_at: Optional[datetime] = None) -> bytes:
        """
        Document를 .pptx 바이트로 직렬화

        Raises:
            GenerationError: 프레젠테이션 생성/저장 중 오류 발생
        """
        logger.info(f"PPTX 생성 시작: '{document.title}' (섹션 {len(document.sections)}개)")

        try:
            prs = self.build(document, generated_at)
            buffer = BytesIO()
            prs.save(buffer)
        except Exception as e:
            logger.error(f"PPTX 생성 실패: {e}")
            raise GenerationError(ArtifactType.DECK, str(e)) from e

        data = buffer.getvalue()
        logger.info(f"PPTX 생성 완료: 총 {len(prs.slides)}개 슬라이드, {len(data)} bytes")
        return data

    def convert(
        self,
        document: Document,
        output_path: Path,
        generated_at: Optional[datetime] = None
    ) -> None:
        """
        Document를 .pptx 파일로 저장

        Args:
            document: 파싱된 문서
            output_path: 출력 PPTX 파일 경로
            generated_at: 생성 일시
        """
        data = self.save_to_bytes(document, generated_at)
        Path(output_path).write_bytes(data)
        logger.info(f"변환 완료: {output_path}")


def convert_text_to_pptx(
    text: str,
    output_path: Path,
    title: Optional[str] = None,
    prompt: Optional[str] = None
) -> None:
    """
    텍스트를 PPTX 파일로 변환하는 편의 함수

    Args:
        text: AI가 생성한 텍스트
        output_path: 출력 PPTX 파일 경로
        title: 문서 제목
        prompt: 원래 요청
    """
    document = MarkupParser().parse(text, title=title, prompt=prompt)
    TextToPptxConverter().convert(document, output_path)
