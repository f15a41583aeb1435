"""생성 파이프라인 테스트"""
import asyncio
from datetime import datetime
from io import BytesIO

import pytest
from openpyxl import load_workbook
from pptx import Presentation

from reportforge import pipeline
from reportforge.converters.text_xlsx import TextToXlsxConverter
from reportforge.core.document import ArtifactType
from reportforge.core.exceptions import GenerationError
from reportforge.parsers import parse_text
from reportforge.pipeline import (
    artifact_filename,
    generate_artifacts,
    generate_deck,
    generate_deck_async,
    generate_workbook,
    generate_workbook_async,
)


FIXED_TIME = datetime(2024, 3, 1, 9, 30, 0)

REPORT = """# Market Brief
Opening context before the first section.
# Findings
Demand rose in every region.
- Important: expand capacity
- Consider a second supplier
## Numbers
| Region | Units | Growth |
|---|---|---|
| North | 120 | 4% |
| South | 95 |
# Outlook
Growth may slow next year.
"""


def workbook_snapshot(data: bytes):
    """시트별 셀 값 스냅샷"""
    wb = load_workbook(BytesIO(data))
    return {
        name: [[cell.value for cell in row] for row in wb[name].iter_rows()]
        for name in wb.sheetnames
    }


def deck_snapshot(data: bytes):
    """슬라이드별 텍스트 스냅샷"""
    prs = Presentation(BytesIO(data))
    return [
        [shape.text_frame.text for shape in slide.shapes if shape.has_text_frame]
        for slide in prs.slides
    ]


class TestGenerate:
    """generate_workbook / generate_deck 테스트"""

    def test_workbook_sheets(self):
        wb = load_workbook(BytesIO(generate_workbook(REPORT, generated_at=FIXED_TIME)))
        assert wb.sheetnames == ["Overview", "Region Table", "Findings", "Outlook"]

    def test_padded_row_in_table_sheet(self):
        wb = load_workbook(BytesIO(generate_workbook(REPORT, generated_at=FIXED_TIME)))
        ws = wb["Region Table"]
        assert [c.value for c in ws[3]][:2] == ["South", "95"]
        assert ws.cell(row=3, column=3).value in (None, "")

    def test_deck_slides(self):
        prs = Presentation(BytesIO(generate_deck(REPORT, generated_at=FIXED_TIME)))
        # title + Introduction + Findings + Numbers + Outlook + closing
        assert len(prs.slides) == 6

    def test_idempotent_with_fixed_time(self):
        """같은 입력, 같은 시각이면 구조가 동일"""
        assert parse_text(REPORT).to_dict() == parse_text(REPORT).to_dict()
        assert workbook_snapshot(generate_workbook(REPORT, generated_at=FIXED_TIME)) == \
            workbook_snapshot(generate_workbook(REPORT, generated_at=FIXED_TIME))
        assert deck_snapshot(generate_deck(REPORT, generated_at=FIXED_TIME)) == \
            deck_snapshot(generate_deck(REPORT, generated_at=FIXED_TIME))

    def test_fallback_sheet_iff_no_tables(self):
        """테이블이 없을 때만 Extracted Data 시트"""
        with_table = load_workbook(BytesIO(generate_workbook(REPORT)))
        assert "Extracted Data" not in with_table.sheetnames

        without_table = load_workbook(BytesIO(generate_workbook("# A\n- one\n- two", title="T")))
        assert without_table.sheetnames.count("Extracted Data") == 1

    def test_generate_artifacts(self):
        artifacts = generate_artifacts(REPORT, title="Market Brief", generated_at=FIXED_TIME)
        assert set(artifacts) == {ArtifactType.WORKBOOK, ArtifactType.DECK}
        assert artifacts[ArtifactType.WORKBOOK][:2] == b"PK"
        assert artifacts[ArtifactType.DECK][:2] == b"PK"

    def test_deck_unaffected_by_workbook_failure(self):
        """워크북 실패와 무관하게 덱 생성 가능"""
        text = "# Doc\n# Bad\ncontrol \x01 char"

        with pytest.raises(GenerationError) as exc_info:
            generate_workbook(text)
        assert exc_info.value.artifact_type == ArtifactType.WORKBOOK

        assert generate_deck("# Doc\n# Fine\ntext")[:2] == b"PK"

    def test_artifacts_propagate_generation_error(self, monkeypatch):
        def broken(self, document, generated_at=None):
            raise ValueError("bad data")

        monkeypatch.setattr(TextToXlsxConverter, "build", broken)
        with pytest.raises(GenerationError) as exc_info:
            generate_artifacts(REPORT)
        assert exc_info.value.artifact_type == ArtifactType.WORKBOOK


class TestAsync:
    """비동기 래퍼 테스트"""

    def test_async_workbook(self):
        data = asyncio.run(generate_workbook_async(REPORT, generated_at=FIXED_TIME))
        assert workbook_snapshot(data) == workbook_snapshot(
            generate_workbook(REPORT, generated_at=FIXED_TIME)
        )

    def test_async_concurrent_calls(self):
        """동시 호출도 서로 독립"""
        async def run_all():
            return await asyncio.gather(
                generate_deck_async(REPORT, generated_at=FIXED_TIME),
                generate_deck_async("# Other\nbody", generated_at=FIXED_TIME),
            )

        first, second = asyncio.run(run_all())
        assert len(deck_snapshot(first)) == 6
        # title + Introduction + closing
        assert len(deck_snapshot(second)) == 3


class TestArtifactHelpers:
    """파일명/미디어 타입 헬퍼"""

    def test_artifact_filename(self):
        assert artifact_filename("Revenue Report: Q1", ArtifactType.WORKBOOK) == "Revenue_Report__Q1.xlsx"
        assert artifact_filename("Deck", ArtifactType.DECK) == "Deck.pptx"
        assert artifact_filename("", ArtifactType.DECK) == "report.pptx"

    def test_media_types(self):
        assert ArtifactType.WORKBOOK.media_type == \
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        assert ArtifactType.DECK.media_type == \
            "application/vnd.openxmlformats-officedocument.presentationml.presentation"

    def test_generation_error_message(self):
        error = GenerationError(ArtifactType.DECK, "bad")
        assert error.artifact_type == ArtifactType.DECK
        assert "bad" in str(error)

    def test_module_exports(self):
        assert pipeline.generate_artifact(ArtifactType.DECK, "", title="x")[:2] == b"PK"
