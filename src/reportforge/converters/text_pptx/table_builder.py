"""
Table creation and styling module

Renders a parsed markdown Table as a native PowerPoint table: filled header row,
striped body rows, thin borders and column widths adjusted to text length.
"""
import logging
from typing import List, Optional

from lxml import etree
from pptx.dml.color import RGBColor
from pptx.enum.text import MSO_ANCHOR, PP_ALIGN
from pptx.oxml.ns import qn

from ...core.document import Table
from .config import DEFAULT_COLORS, DEFAULT_TABLE_CONFIG, ColorPalette, TableConfig
from .style_utils import TextUtils

logger = logging.getLogger(__name__)

_BORDER_TAGS = {
    'left': 'a:lnL',
    'right': 'a:lnR',
    'top': 'a:lnT',
    'bottom': 'a:lnB',
}


class TableBorderStyler:
    """Class that applies table border styles"""

    def __init__(self, width: int, color: RGBColor):
        self.width = width
        self.color = color

    def apply_grid_borders(self, ppt_table, row_count: int, col_count: int) -> None:
        """Thin border on every side of every cell"""
        for i in range(row_count):
            for j in range(col_count):
                cell = ppt_table.cell(i, j)
                for side in _BORDER_TAGS:
                    self._set_cell_border(cell, side)

    def _set_cell_border(self, cell, side: str) -> None:
        """Set specific border of a cell"""
        tcPr = cell._tc.get_or_add_tcPr()
        tag = _BORDER_TAGS[side]

        # Remove existing border elements
        for existing in tcPr.findall(qn(tag)):
            tcPr.remove(existing)

        ln = etree.Element(qn(tag))
        ln.set('w', str(int(self.width)))
        ln.set('cap', 'flat')
        ln.set('cmpd', 'sng')
        ln.set('algn', 'ctr')

        solidFill = etree.SubElement(ln, qn('a:solidFill'))
        srgbClr = etree.SubElement(solidFill, qn('a:srgbClr'))
        srgbClr.set('val', str(self.color))

        prstDash = etree.SubElement(ln, qn('a:prstDash'))
        prstDash.set('val', 'solid')

        # Borders must precede the cell fill in tcPr
        tcPr.insert(list(_BORDER_TAGS).index(side), ln)


class TableColumnAdjuster:
    """Class that adjusts table column widths"""

    @staticmethod
    def auto_adjust(ppt_table, rows_data: List[List[str]], total_width: int) -> None:
        """Auto-adjust column widths based on text length"""
        col_count = len(rows_data[0]) if rows_data else 0
        if col_count == 0:
            return

        max_lengths = [0.0] * col_count
        for row in rows_data:
            for j, cell in enumerate(row):
                max_lengths[j] = max(max_lengths[j], TextUtils.weighted_length(str(cell)))

        min_proportion = 0.05
        total_length = sum(max_lengths)

        if total_length == 0:
            equal_width = total_width // col_count
            for j in range(col_count):
                ppt_table.columns[j].width = equal_width
            return

        proportions = [max(length / total_length, min_proportion) for length in max_lengths]
        scale = sum(proportions)
        for j, proportion in enumerate(proportions):
            ppt_table.columns[j].width = int(total_width * proportion / scale)


class TableBuilder:
    """Class that creates PowerPoint tables"""

    def __init__(
        self,
        table_config: TableConfig = None,
        colors: ColorPalette = None
    ):
        self.table_config = table_config or DEFAULT_TABLE_CONFIG
        self.colors = colors or DEFAULT_COLORS
        self.border_styler = TableBorderStyler(
            self.table_config.border_width,
            self.colors['gray_line']
        )

    def visible_rows(self, table: Table) -> List[List[str]]:
        """Header row plus at most max_rows_per_slide body rows"""
        if not table.headers:
            return []
        body = table.rows[:self.table_config.max_rows_per_slide]
        if len(table.rows) > len(body):
            logger.debug(
                f"Table truncated on slide: {len(table.rows)} -> {len(body)} rows"
            )
        return [list(table.headers)] + [list(row) for row in body]

    def required_height(self, table: Table) -> int:
        return self.table_config.min_row_height * len(self.visible_rows(table))

    def create_table(
        self,
        slide,
        table: Table,
        left: int,
        top: int,
        width: int,
        height: int
    ) -> Optional[object]:
        """Create PowerPoint table; returns None for a table without columns"""
        rows_data = self.visible_rows(table)
        if not rows_data:
            return None

        row_count = len(rows_data)
        col_count = len(rows_data[0])
        height = min(self.table_config.min_row_height * row_count, height)

        ppt_table = slide.shapes.add_table(
            row_count, col_count,
            left, top, width, height
        ).table

        for i, row_data in enumerate(rows_data):
            is_header = i == 0
            for j, cell_data in enumerate(row_data):
                cell = ppt_table.cell(i, j)
                cell.text = str(cell_data)
                cell.vertical_anchor = MSO_ANCHOR.MIDDLE

                cell.margin_left = self.table_config.cell_margin
                cell.margin_right = self.table_config.cell_margin
                cell.margin_top = self.table_config.cell_margin_vertical
                cell.margin_bottom = self.table_config.cell_margin_vertical

                if is_header:
                    cell.fill.solid()
                    cell.fill.fore_color.rgb = self.colors['table_header']
                elif i % 2 == 0:
                    cell.fill.solid()
                    cell.fill.fore_color.rgb = self.colors['table_stripe']
                else:
                    cell.fill.background()

                for paragraph in cell.text_frame.paragraphs:
                    if is_header:
                        paragraph.font.size = self.table_config.header_font_size
                        paragraph.font.bold = True
                        paragraph.font.color.rgb = self.colors['white']
                        paragraph.alignment = PP_ALIGN.CENTER
                    else:
                        paragraph.font.size = self.table_config.body_font_size
                        paragraph.font.color.rgb = self.colors['body']
                        paragraph.alignment = PP_ALIGN.LEFT
                cell.text_frame.word_wrap = True

        self.border_styler.apply_grid_borders(ppt_table, row_count, col_count)
        TableColumnAdjuster.auto_adjust(ppt_table, rows_data, width)

        return ppt_table
