"""
Slide creation factory module

Provides builders for the title, introduction, section content and closing slides.
"""
import logging
from typing import Any, List

from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.enum.shapes import MSO_SHAPE
from pptx.enum.text import PP_ALIGN
from pptx.util import Inches, Pt

from ...core.document import Section
from .config import (
    ColorPalette,
    DeckConfig,
    SlideConfig,
    TableConfig,
    DEFAULT_COLORS,
    DEFAULT_DECK_CONFIG,
    DEFAULT_SLIDE_CONFIG,
)
from .style_utils import TextUtils, apply_bullet
from .table_builder import TableBuilder

logger = logging.getLogger(__name__)

BLANK_LAYOUT_INDEX = 6


class SlideFactory:
    """Slide creation factory"""

    def __init__(
        self,
        presentation: Presentation,
        slide_config: SlideConfig = None,
        colors: ColorPalette = None,
        deck_config: DeckConfig = None
    ):
        self.prs = presentation
        self.config = slide_config or DEFAULT_SLIDE_CONFIG
        self.colors = colors or DEFAULT_COLORS
        self.deck = deck_config or DEFAULT_DECK_CONFIG

    def _get_blank_slide(self):
        """Create blank layout slide"""
        return self.prs.slides.add_slide(self.prs.slide_layouts[BLANK_LAYOUT_INDEX])

    def _fill_background(self, slide) -> None:
        """Solid background color"""
        fill = slide.background.fill
        fill.solid()
        fill.fore_color.rgb = self.colors['background']

    def _add_text(
        self,
        slide,
        text: str,
        top: int,
        height: int,
        font_size: int,
        color: RGBColor,
        bold: bool = False,
        italic: bool = False,
        align=PP_ALIGN.LEFT
    ):
        """Add a full-width text box; each line becomes a paragraph"""
        text_box = slide.shapes.add_textbox(
            self.config.margin_left, top,
            self.config.content_width, height
        )
        text_frame = text_box.text_frame
        text_frame.word_wrap = True
        text_frame.text = text

        for paragraph in text_frame.paragraphs:
            paragraph.alignment = align
            paragraph.font.name = self.deck.font_face
            paragraph.font.size = font_size
            paragraph.font.bold = bold
            paragraph.font.italic = italic
            paragraph.font.color.rgb = color

        return text_box

    def _add_centered_banner(self, slide, title: str) -> None:
        """Big centered title plus generator attribution"""
        self._add_text(
            slide, title,
            Inches(2.0), Inches(1.5),
            self.deck.title_font_size, self.colors['primary_blue'],
            bold=True, align=PP_ALIGN.CENTER
        )
        self._add_text(
            slide, self.deck.attribution,
            Inches(4.0), Inches(0.5),
            Pt(20), self.colors['subtitle'],
            align=PP_ALIGN.CENTER
        )

    def _add_heading(self, slide, title: str) -> int:
        """Add slide heading; returns the top of the body area"""
        top = self.config.margin_top
        self._add_text(
            slide, TextUtils.clean_text(title),
            top, Inches(0.8),
            self.deck.heading_font_size, self.colors['primary_blue'],
            bold=True
        )

        # Accent line under the heading
        accent = slide.shapes.add_shape(
            MSO_SHAPE.RECTANGLE,
            self.config.margin_left, top + Inches(0.85),
            Inches(1.2), Inches(0.05)
        )
        accent.fill.solid()
        accent.fill.fore_color.rgb = self.colors['primary_blue']
        accent.line.fill.background()

        return top + Inches(1.0)


class TitleSlideBuilder(SlideFactory):
    """Title slide builder"""

    def create(self, title: str, created: str) -> Any:
        """Create title slide"""
        slide = self._get_blank_slide()
        self._fill_background(slide)
        self._add_centered_banner(slide, title)

        self._add_text(
            slide, f"Created: {created}",
            Inches(5.0), Inches(0.5),
            Pt(14), self.colors['caption'],
            align=PP_ALIGN.CENTER
        )
        return slide


class PromptSlideBuilder(SlideFactory):
    """Introduction slide showing the original request"""

    def create(self, prompt: str) -> Any:
        slide = self._get_blank_slide()
        top = self._add_heading(slide, "Introduction")

        self._add_text(
            slide, "Original Prompt:",
            top, Inches(0.5),
            self.deck.body_font_size, self.colors['body'],
            bold=True
        )
        self._add_text(
            slide, prompt.strip(),
            top + Inches(0.5), Inches(2.0),
            self.deck.body_font_size, self.colors['subtitle'],
            italic=True
        )
        return slide


class ContentSlideBuilder(SlideFactory):
    """Section content slide builder

    One slide per section: prose block, then bullet block, then the first
    table. Content that does not fit is not split onto further slides.
    """

    def __init__(
        self,
        presentation: Presentation,
        slide_config: SlideConfig = None,
        colors: ColorPalette = None,
        deck_config: DeckConfig = None,
        table_config: TableConfig = None
    ):
        super().__init__(presentation, slide_config, colors, deck_config)
        self.table_builder = TableBuilder(table_config, self.colors)

    def create(self, section: Section) -> Any:
        """Create content slide for a section"""
        slide = self._get_blank_slide()
        y_position = self._add_heading(slide, section.title)
        bottom = self.config.height - self.config.margin_bottom
        font_size = self.deck.body_font_size

        body = section.body_text.strip()
        if body:
            height = TextUtils.estimate_height(body, self.config.content_width, font_size)
            self._add_text(slide, body, y_position, height, font_size, self.colors['body'])
            y_position += height

        if section.list_items:
            texts = [item.text for item in section.list_items]
            height = TextUtils.estimate_height("\n".join(texts), self.config.content_width, font_size)
            self._add_bullets(slide, texts, y_position, height)
            y_position += height

        if section.tables:
            table = section.tables[0]
            available = max(bottom - y_position, self.table_builder.table_config.min_row_height)
            self.table_builder.create_table(
                slide, table,
                self.config.margin_left, y_position,
                self.config.content_width, available
            )
            if len(section.tables) > 1:
                logger.debug(
                    f"섹션 '{section.title}': 첫 번째 테이블만 슬라이드에 표시 "
                    f"({len(section.tables)}개 중)"
                )

        return slide

    def _add_bullets(self, slide, texts: List[str], top: int, height: int):
        """Add bulleted list text box"""
        text_box = self._add_text(
            slide, "\n".join(texts),
            top, height,
            self.deck.body_font_size, self.colors['body']
        )
        for paragraph in text_box.text_frame.paragraphs:
            paragraph.space_after = Pt(4)
            apply_bullet(paragraph, Inches(0.3))
        return text_box


class ClosingSlideBuilder(SlideFactory):
    """Closing slide builder"""

    def create(self, message: str = "Thank You!") -> Any:
        slide = self._get_blank_slide()
        self._fill_background(slide)
        self._add_centered_banner(slide, message)
        return slide
