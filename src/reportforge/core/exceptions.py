"""
reportforge 예외 정의
"""
from typing import Optional

from .document import ArtifactType


class ReportForgeError(Exception):
    """모든 reportforge 예외의 기본 클래스"""


class GenerationError(ReportForgeError):
    """xlsx/pptx 생성 실패

    어떤 산출물(workbook, deck) 생성 중 실패했는지 함께 전달합니다.
    원인이 된 라이브러리 예외는 ``__cause__`` 로 연결됩니다.
    """

    def __init__(self, artifact_type: ArtifactType, message: Optional[str] = None):
        self.artifact_type = artifact_type
        self.message = message or "generation failed"
        super().__init__(f"{artifact_type.name.lower()} 생성 실패: {self.message}")
