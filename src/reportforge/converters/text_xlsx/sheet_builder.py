"""
Worksheet builder module

Builders for the Overview, per-table, per-section and Extracted Data sheets.
Each builder adds its own sheet to the workbook it was given.
"""
import logging
from datetime import datetime
from typing import List, Optional, Tuple

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.datavalidation import DataValidation

from ...core.document import Document, ListItem, Section, Table
from .config import (
    WorkbookColors,
    WorkbookConfig,
    DEFAULT_WORKBOOK_COLORS,
    DEFAULT_WORKBOOK_CONFIG,
)
from ...parsers.markup_parser import IMPLICIT_SECTION_TITLE
from .style_utils import CellStyles, SheetNamer, set_text

logger = logging.getLogger(__name__)

PRIORITY_VALUES = ("High", "Medium", "Low")
EXTRACTED_HEADERS = ("Category", "Key Points", "Priority")


def table_sheet_name(table: Table, prefix_length: int = 20) -> str:
    """First header (truncated) + ' Table'; 'Data Table' when there is none"""
    first_header = table.headers[0] if table.headers else ""
    return f"{first_header[:prefix_length] or 'Data'} Table"


def group_sections(sections: List[Section]) -> List[Tuple[Section, List[Section]]]:
    """
    Pair each level-1 section with the level-2 sections that follow it

    Level-2 sections before any level-1 section are left out.
    """
    groups: List[Tuple[Section, List[Section]]] = []
    for section in sections:
        if section.level == 1:
            groups.append((section, []))
        elif groups:
            groups[-1][1].append(section)
    return groups


class SheetBuilder:
    """Worksheet creation base"""

    def __init__(
        self,
        workbook: Workbook,
        namer: SheetNamer,
        config: WorkbookConfig = None,
        colors: WorkbookColors = None
    ):
        self.wb = workbook
        self.namer = namer
        self.config = config or DEFAULT_WORKBOOK_CONFIG
        self.colors = colors or DEFAULT_WORKBOOK_COLORS
        self.styles = CellStyles(self.colors)

    def _add_sheet(self, name: str):
        return self.wb.create_sheet(self.namer.claim(name))

    def _set_widths(self, worksheet, widths) -> None:
        for idx, width in enumerate(widths, 1):
            worksheet.column_dimensions[get_column_letter(idx)].width = width

    def _filter_and_freeze(self, worksheet, column_count: int) -> None:
        """Autofilter from the header row down, header row frozen"""
        if column_count > 0:
            last_row = max(worksheet.max_row, 1)
            worksheet.auto_filter.ref = f"A1:{get_column_letter(column_count)}{last_row}"
        worksheet.freeze_panes = "A2"


class OverviewSheetBuilder(SheetBuilder):
    """Overview sheet: title, timestamp, optional prompt, per-section summary"""

    TITLE_RANGE = "A1:E1"
    DATE_RANGE = "A2:E2"
    PROMPT_RANGE = "B3:E3"
    HEADER_RANGE = "A4:E4"
    FIRST_SECTION_ROW = 6

    def create(self, document: Document, generated_at: datetime, worksheet=None):
        """Fill (or add) the overview sheet"""
        if worksheet is None:
            worksheet = self._add_sheet(self.config.overview_sheet_name)
        else:
            worksheet.title = self.namer.claim(self.config.overview_sheet_name)

        self._set_widths(worksheet, self.config.overview_column_widths)

        worksheet.merge_cells(self.TITLE_RANGE)
        title_cell = worksheet["A1"]
        set_text(title_cell, document.title)
        title_cell.font = Font(bold=True, size=16, color=self.colors.brand)
        title_cell.alignment = self.styles.center
        worksheet.row_dimensions[1].height = 30

        worksheet.merge_cells(self.DATE_RANGE)
        date_cell = worksheet["A2"]
        date_cell.value = f"Generated on: {generated_at.strftime(self.config.timestamp_format)}"
        date_cell.font = Font(italic=True, size=10)
        date_cell.alignment = self.styles.center

        if document.prompt and document.prompt.strip():
            worksheet["A3"] = "Original Prompt"
            worksheet["A3"].font = Font(bold=True)
            worksheet.merge_cells(self.PROMPT_RANGE)
            set_text(worksheet["B3"], document.prompt.strip())
            worksheet["B3"].font = Font(italic=True)
            worksheet["B3"].alignment = self.styles.wrap

        worksheet.merge_cells(self.HEADER_RANGE)
        worksheet["A4"] = self.config.highlights_title
        worksheet["A4"].font = Font(bold=True, size=14)

        row = self.FIRST_SECTION_ROW
        for section in document.sections:
            title_cell = set_text(worksheet.cell(row=row, column=1), section.title)
            title_cell.font = Font(bold=True)

            summary = "\n".join(section.content_lines[:self.config.summary_line_count])
            if summary:
                summary_cell = set_text(worksheet.cell(row=row + 1, column=2), summary)
                summary_cell.alignment = self.styles.wrap

            # title, summary, spacer
            row += 3

        return worksheet


class TableSheetBuilder(SheetBuilder):
    """One sheet per extracted table"""

    def create(self, table: Table):
        worksheet = self._add_sheet(
            table_sheet_name(table, self.config.table_name_prefix_length)
        )
        column_count = table.column_count

        for col, header in enumerate(table.headers, 1):
            set_text(worksheet.cell(row=1, column=col), header)
            worksheet.column_dimensions[get_column_letter(col)].width = max(
                len(header) + 5, self.config.min_table_column_width
            )
        self.styles.style_header_row(worksheet, column_count)

        for row_idx, row in enumerate(table.rows, 2):
            shaded = row_idx % 2 == 0
            for col, value in enumerate(row, 1):
                cell = set_text(worksheet.cell(row=row_idx, column=col), value)
                cell.border = self.styles.thin_border
                if shaded:
                    cell.fill = self.styles.stripe_fill

        self._filter_and_freeze(worksheet, column_count)
        return worksheet


class SectionSheetBuilder(SheetBuilder):
    """One sheet per named level-1 section, with its level-2 subsections"""

    def create(self, section: Section, subsections: List[Section]) -> Optional[object]:
        """Returns None when there is nothing to write"""
        if section.implicit or section.title == IMPLICIT_SECTION_TITLE:
            return None

        entries: List[Tuple[str, bool]] = [(line, False) for line in section.content_lines]
        for subsection in subsections:
            lines = subsection.content_lines
            if lines:
                entries.append((subsection.title, True))
                entries.extend((line, False) for line in lines)

        if not entries:
            return None

        worksheet = self._add_sheet(section.title)
        worksheet.merge_cells("A1:D1")
        set_text(worksheet["A1"], section.title)
        worksheet["A1"].font = Font(bold=True, size=14)
        worksheet["A1"].alignment = self.styles.center
        worksheet.column_dimensions["A"].width = self.config.section_column_width

        for row, (text, is_heading) in enumerate(entries, 3):
            cell = set_text(worksheet.cell(row=row, column=1), text)
            cell.alignment = Alignment(wrap_text=True)
            if is_heading:
                cell.font = Font(bold=True)

        return worksheet


class ExtractedDataSheetBuilder(SheetBuilder):
    """Category / Key Points / Priority sheet filled from the prioritizer"""

    def create(self, points: List[ListItem]):
        worksheet = self._add_sheet(self.config.extracted_sheet_name)
        self._set_widths(worksheet, self.config.extracted_column_widths)

        worksheet.append(list(EXTRACTED_HEADERS))
        self.styles.style_header_row(worksheet, len(EXTRACTED_HEADERS))

        for row, point in enumerate(points, 2):
            priority = point.priority.value if point.priority else "Medium"
            set_text(worksheet.cell(row=row, column=1), point.category or "")
            text_cell = set_text(worksheet.cell(row=row, column=2), point.text)
            text_cell.alignment = Alignment(wrap_text=True)
            priority_cell = set_text(worksheet.cell(row=row, column=3), priority)
            priority_cell.font = self.styles.priority_font(priority)

        if points:
            validation = DataValidation(
                type="list",
                formula1=f'"{",".join(PRIORITY_VALUES)}"',
                allow_blank=False
            )
            worksheet.add_data_validation(validation)
            validation.add(f"C2:C{len(points) + 1}")

        self._filter_and_freeze(worksheet, len(EXTRACTED_HEADERS))
        return worksheet
