"""
핵심 포인트 우선순위 분석기

문서에 테이블이 하나도 없을 때 워크북의 "Extracted Data" 시트를 채우기 위해
텍스트에서 카테고리/우선순위가 붙은 포인트를 뽑아냅니다.

1. 목록 항목 기반: 가장 가까운 앞 제목을 카테고리로, 키워드로 우선순위 결정
2. 문장 기반 (1에서 아무것도 없을 때): 문장을 잘라 순서대로 카테고리/우선순위 부여
"""
import logging
import re
from typing import List, Optional, Sequence

from ..core.document import LineKind, ListItem, Priority
from ..core.extractor import KeyPointExtractor
from ..parsers.line_classifier import classify_line

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "General"
HIGH_KEYWORDS = ("important", "critical", "essential")
LOW_KEYWORDS = ("consider", "optional", "may")

SENTENCE_PATTERN = re.compile(r'[^.!?]+[.!?]+')
SENTENCE_CATEGORIES = ("Insight", "Finding", "Observation")
MIN_SENTENCE_LENGTH = 10
MAX_SENTENCES = 15


def priority_for(text: str) -> Priority:
    """키워드(대소문자 무시 부분 문자열)로 우선순위 결정"""
    lowered = text.lower()
    if any(keyword in lowered for keyword in HIGH_KEYWORDS):
        return Priority.HIGH
    if any(keyword in lowered for keyword in LOW_KEYWORDS):
        return Priority.LOW
    return Priority.MEDIUM


def priority_for_position(position: int) -> Priority:
    """문장 순번(1부터)으로 우선순위 결정: 1-5 High, 6-10 Medium, 이후 Low"""
    if position <= 5:
        return Priority.HIGH
    if position <= 10:
        return Priority.MEDIUM
    return Priority.LOW


class KeyPointPrioritizer(KeyPointExtractor):
    """목록 항목 또는 문장에서 우선순위 포인트를 추출"""

    def __init__(
        self,
        max_sentences: int = MAX_SENTENCES,
        categories: Sequence[str] = SENTENCE_CATEGORIES
    ):
        self.max_sentences = max_sentences
        self.categories = tuple(categories)

    def extract(self, source: Optional[str]) -> List[ListItem]:
        """
        텍스트에서 포인트 추출

        Args:
            source: 원본 텍스트 전체

        Returns:
            category/priority가 채워진 ListItem 리스트 (없으면 빈 리스트)
        """
        if not source:
            return []

        points = self._extract_marked_items(source)
        if points:
            logger.debug(f"목록 항목 기반 포인트 {len(points)}개 추출")
            return points

        points = self._extract_sentences(source)
        logger.debug(f"문장 기반 포인트 {len(points)}개 추출")
        return points

    def _extract_marked_items(self, text: str) -> List[ListItem]:
        """목록 마커가 붙은 줄을 포인트로 변환"""
        points = []
        category = DEFAULT_CATEGORY

        for raw_line in text.split("\n"):
            # 들여쓰기된 제목도 카테고리로 인정
            line = classify_line(raw_line.strip())

            if line.kind in (LineKind.HEADING_1, LineKind.HEADING_2):
                category = line.text
            elif line.kind is LineKind.LIST_ITEM:
                points.append(ListItem(
                    text=line.text,
                    category=category,
                    priority=priority_for(line.text)
                ))

        return points

    def _extract_sentences(self, text: str) -> List[ListItem]:
        """문장 종결 부호로 나눈 문장을 포인트로 변환"""
        points = []

        for match in SENTENCE_PATTERN.finditer(text):
            sentence = match.group(0).strip()
            if len(sentence) <= MIN_SENTENCE_LENGTH:
                continue
            if len(points) >= self.max_sentences:
                break

            position = len(points) + 1
            points.append(ListItem(
                text=sentence,
                category=self.categories[position % len(self.categories)],
                priority=priority_for_position(position)
            ))

        return points
