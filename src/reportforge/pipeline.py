"""
텍스트 → 산출물 생성 파이프라인

HTTP 등 바깥 계층이 호출하는 진입점입니다. 호출마다 파서, Document,
워크북/프레젠테이션 객체를 새로 만들고 바이트만 돌려줍니다.
"""
import asyncio
import logging
import re
from datetime import datetime
from typing import Dict, Optional

from .converters.text_pptx import TextToPptxConverter
from .converters.text_xlsx import TextToXlsxConverter
from .core.document import ArtifactType
from .parsers.markup_parser import MarkupParser

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r'[^a-zA-Z0-9]')


def generate_workbook(
    text: str,
    title: Optional[str] = None,
    prompt: Optional[str] = None,
    generated_at: Optional[datetime] = None
) -> bytes:
    """
    텍스트를 파싱해 .xlsx 바이트 생성

    Args:
        text: AI가 생성한 텍스트
        title: 문서 제목
        prompt: 원래 요청
        generated_at: 생성 일시 (테스트 등에서 고정할 때)

    Raises:
        GenerationError: 워크북 생성 실패 (artifact_type == WORKBOOK)
    """
    document = MarkupParser().parse(text, title=title, prompt=prompt)
    return TextToXlsxConverter().save_to_bytes(document, generated_at)


def generate_deck(
    text: str,
    title: Optional[str] = None,
    prompt: Optional[str] = None,
    generated_at: Optional[datetime] = None
) -> bytes:
    """
    텍스트를 파싱해 .pptx 바이트 생성

    Raises:
        GenerationError: 덱 생성 실패 (artifact_type == DECK)
    """
    document = MarkupParser().parse(text, title=title, prompt=prompt)
    return TextToPptxConverter().save_to_bytes(document, generated_at)


_GENERATORS = {
    ArtifactType.WORKBOOK: generate_workbook,
    ArtifactType.DECK: generate_deck,
}


def generate_artifact(
    artifact_type: ArtifactType,
    text: str,
    title: Optional[str] = None,
    prompt: Optional[str] = None,
    generated_at: Optional[datetime] = None
) -> bytes:
    """산출물 타입에 맞는 생성 함수 호출"""
    return _GENERATORS[artifact_type](text, title, prompt, generated_at)


def generate_artifacts(
    text: str,
    title: Optional[str] = None,
    prompt: Optional[str] = None,
    generated_at: Optional[datetime] = None
) -> Dict[ArtifactType, bytes]:
    """
    워크북과 덱을 각각 독립적으로 생성

    두 생성은 서로 영향을 주지 않으며, 먼저 실패한 쪽의 GenerationError가 전파됩니다.
    """
    generated_at = generated_at or datetime.now()
    return {
        artifact_type: generate_artifact(artifact_type, text, title, prompt, generated_at)
        for artifact_type in ArtifactType
    }


async def generate_workbook_async(
    text: str,
    title: Optional[str] = None,
    prompt: Optional[str] = None,
    generated_at: Optional[datetime] = None
) -> bytes:
    """generate_workbook을 하나의 작업 단위로 스레드에서 실행"""
    return await asyncio.to_thread(generate_workbook, text, title, prompt, generated_at)


async def generate_deck_async(
    text: str,
    title: Optional[str] = None,
    prompt: Optional[str] = None,
    generated_at: Optional[datetime] = None
) -> bytes:
    """generate_deck을 하나의 작업 단위로 스레드에서 실행"""
    return await asyncio.to_thread(generate_deck, text, title, prompt, generated_at)


def artifact_filename(title: str, artifact_type: ArtifactType) -> str:
    """
    다운로드 파일명 생성 (영숫자 외 문자는 '_')

    Args:
        title: 문서 제목
        artifact_type: 산출물 타입

    Returns:
        예: 'Revenue_Report.xlsx'
    """
    stem = _UNSAFE_FILENAME_CHARS.sub("_", title or "") or "report"
    return f"{stem}.{artifact_type.extension}"
