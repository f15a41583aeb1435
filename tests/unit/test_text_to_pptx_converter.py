"""
Text to PPTX converter 테스트
"""
import pytest
from datetime import datetime
from io import BytesIO
from pathlib import Path
import tempfile
import shutil

from pptx import Presentation
from pptx.oxml.ns import qn
from pptx.util import Inches

from reportforge.converters.text_pptx import TextToPptxConverter, convert_text_to_pptx
from reportforge.converters.text_pptx.config import TableConfig
from reportforge.converters.text_pptx.style_utils import TextUtils
from reportforge.core.document import ArtifactType
from reportforge.core.exceptions import GenerationError
from reportforge.parsers import parse_text


FIXED_TIME = datetime(2024, 3, 1, 9, 30, 0)

SCENARIO = """# Revenue Report
## Q1 Results
| Region | Revenue |
| --- | --- |
| East | 100 |
| West | 150 |
Some narrative text.
- Followup action one
- Followup action two
"""


def load(data: bytes) -> Presentation:
    return Presentation(BytesIO(data))


def build_bytes(text: str, title: str = None, prompt: str = None, converter=None) -> bytes:
    document = parse_text(text, title=title, prompt=prompt)
    return (converter or TextToPptxConverter()).save_to_bytes(document, FIXED_TIME)


def text_shapes(slide):
    """텍스트가 있는 도형 (위에서부터)"""
    shapes = [s for s in slide.shapes if s.has_text_frame and s.text_frame.text]
    return sorted(shapes, key=lambda s: s.top)


def slide_texts(slide):
    return [s.text_frame.text for s in text_shapes(slide)]


class TestTextToPptxConverter:
    """TextToPptxConverter 테스트"""

    @pytest.fixture
    def temp_dir(self):
        """임시 디렉토리 생성"""
        temp_path = Path(tempfile.mkdtemp())
        yield temp_path
        shutil.rmtree(temp_path)

    def test_scenario_slide_count(self):
        """타이틀, 섹션 1개, 마무리 = 3장"""
        prs = load(build_bytes(SCENARIO, title="Revenue Report"))
        assert len(prs.slides) == 3

    def test_title_slide(self):
        prs = load(build_bytes(SCENARIO))
        assert slide_texts(prs.slides[0]) == [
            "Revenue Report",
            "Generated by AI Information Tool",
            "Created: 2024-03-01",
        ]

    def test_closing_slide(self):
        prs = load(build_bytes(SCENARIO))
        assert slide_texts(prs.slides[-1]) == [
            "Thank You!",
            "Generated by AI Information Tool",
        ]

    def test_content_slide_prose_then_bullets(self):
        """산문이 위, 글머리 목록이 아래"""
        slide = load(build_bytes(SCENARIO)).slides[1]
        texts = slide_texts(slide)

        assert texts[0] == "Q1 Results"
        assert texts[1] == "Some narrative text."
        assert texts[2] == "Followup action one\nFollowup action two"

        bullet_shape = text_shapes(slide)[2]
        for paragraph in bullet_shape.text_frame.paragraphs:
            assert paragraph._p.pPr.find(qn('a:buChar')) is not None

        prose_shape = text_shapes(slide)[1]
        for paragraph in prose_shape.text_frame.paragraphs:
            pPr = paragraph._p.pPr
            assert pPr is None or pPr.find(qn('a:buChar')) is None

    def test_content_slide_table(self):
        """섹션의 첫 테이블을 슬라이드 표로 표시"""
        slide = load(build_bytes(SCENARIO)).slides[1]
        tables = [s.table for s in slide.shapes if s.has_table]

        assert len(tables) == 1
        table = tables[0]
        assert len(table.rows) == 3
        assert len(table.columns) == 2
        assert table.cell(0, 0).text == "Region"
        assert table.cell(2, 1).text == "150"

    def test_table_rows_truncated_on_slide(self):
        rows = "\n".join(f"| r{i} | {i} |" for i in range(12))
        text = f"# A\n| k | v |\n|---|---|\n{rows}"
        converter = TextToPptxConverter(table_config=TableConfig(max_rows_per_slide=5))

        slide = load(build_bytes(text, title="Doc", converter=converter)).slides[1]
        table = [s.table for s in slide.shapes if s.has_table][0]
        assert len(table.rows) == 1 + 5

    def test_prose_only_section(self):
        slide = load(build_bytes("# A\nJust prose here.", title="Doc")).slides[1]
        assert slide_texts(slide) == ["A", "Just prose here."]

    def test_list_only_section(self):
        slide = load(build_bytes("# A\n- one\n- two", title="Doc")).slides[1]
        assert slide_texts(slide) == ["A", "one\ntwo"]

    def test_one_slide_per_section_regardless_of_length(self):
        """긴 섹션도 슬라이드 1장"""
        items = "\n".join(f"- item {i}" for i in range(60))
        prs = load(build_bytes(f"# A\n{items}\n# B\ntext", title="Doc"))
        assert len(prs.slides) == 2 + 2

    def test_empty_input(self):
        """빈 입력은 타이틀 + 마무리 슬라이드"""
        prs = load(build_bytes("", title="Empty"))
        assert len(prs.slides) == 2
        assert slide_texts(prs.slides[0])[0] == "Empty"

    def test_prompt_introduction_slide(self):
        """원래 요청이 있으면 Introduction 슬라이드 추가"""
        prs = load(build_bytes(SCENARIO, prompt="Summarize Q1 revenue"))
        assert len(prs.slides) == 4
        assert slide_texts(prs.slides[1]) == [
            "Introduction",
            "Original Prompt:",
            "Summarize Q1 revenue",
        ]

    def test_presentation_properties(self):
        prs = load(build_bytes(SCENARIO))
        assert prs.core_properties.title == "Revenue Report"
        assert prs.core_properties.author == "AI Information Tool"
        assert prs.slide_width == Inches(13.333)
        assert prs.slide_height == Inches(7.5)

    def test_failure_raises_generation_error(self, monkeypatch):
        """빌드 중 오류는 DECK GenerationError로 전달"""
        def broken_build(self, document, generated_at=None):
            raise RuntimeError("boom")

        monkeypatch.setattr(TextToPptxConverter, "build", broken_build)

        with pytest.raises(GenerationError) as exc_info:
            build_bytes(SCENARIO)

        assert exc_info.value.artifact_type == ArtifactType.DECK
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_convert_to_file(self, temp_dir):
        """파일 저장"""
        output_path = temp_dir / "output.pptx"
        convert_text_to_pptx(SCENARIO, output_path)

        assert output_path.exists()
        assert output_path.stat().st_size > 0
        assert len(Presentation(str(output_path)).slides) == 3


class TestTextUtils:
    """텍스트 유틸리티 테스트"""

    def test_clean_text(self):
        assert TextUtils.clean_text("Hello    World ") == "Hello World"

    def test_truncate_text(self):
        assert TextUtils.truncate_text("abcdef", 5) == "ab..."
        assert TextUtils.truncate_text("abc", 5) == "abc"

    def test_estimate_height_grows_with_lines(self):
        width, font = Inches(10), Inches(0.2)
        one = TextUtils.estimate_height("line", width, font)
        three = TextUtils.estimate_height("a\nb\nc", width, font)
        assert TextUtils.estimate_height("", width, font) == 0
        assert three > one > 0
