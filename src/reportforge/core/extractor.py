"""
데이터 추출 기본 클래스
"""
from abc import ABC, abstractmethod
from typing import Any, List

from .document import ListItem, Table


class BaseExtractor(ABC):
    """모든 추출기의 기본 인터페이스"""

    @abstractmethod
    def extract(self, source: Any) -> Any:
        """
        소스에서 데이터 추출

        Args:
            source: 추출할 데이터 소스

        Returns:
            추출된 데이터
        """
        pass


class TableExtractor(BaseExtractor):
    """테이블 추출기 기본 클래스"""

    @abstractmethod
    def extract(self, source: Any) -> Table:
        """테이블 컨텐츠 추출"""
        pass


class KeyPointExtractor(BaseExtractor):
    """핵심 포인트 추출기 기본 클래스"""

    @abstractmethod
    def extract(self, source: Any) -> List[ListItem]:
        """우선순위가 붙은 핵심 포인트 추출"""
        pass
