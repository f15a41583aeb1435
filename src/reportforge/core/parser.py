"""
파서 인터페이스 정의
"""
from abc import ABC, abstractmethod
from typing import Optional

from .document import Document


class BaseParser(ABC):
    """모든 파서의 기본 인터페이스"""

    @abstractmethod
    def parse(
        self,
        text: str,
        title: Optional[str] = None,
        prompt: Optional[str] = None
    ) -> Document:
        """
        텍스트를 파싱하여 Document 객체로 변환

        Args:
            text: 파싱할 텍스트
            title: 호출자가 별도로 지정한 문서 제목
            prompt: 텍스트를 생성한 원래 요청 (있는 경우)

        Returns:
            Document: 파싱된 문서 객체
        """
        pass

    def can_parse(self, text: Optional[str]) -> bool:
        """
        이 파서가 해당 입력을 파싱할 수 있는지 확인

        Args:
            text: 확인할 입력

        Returns:
            bool: 파싱 가능 여부
        """
        return isinstance(text, str)

    def validate_input(self, text: Optional[str]) -> None:
        """
        입력 유효성 검사

        Raises:
            TypeError: 문자열이 아닌 경우
        """
        if not self.can_parse(text):
            raise TypeError(
                f"문자열 입력만 지원합니다: {type(text).__name__}"
            )
