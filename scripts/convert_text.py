#!/usr/bin/env python3
"""
AI 생성 텍스트 파일을 XLSX/PPTX로 변환하는 스크립트

Usage:
    python scripts/convert_text.py <input.txt> <output_dir> [--title T] [--prompt P] [--format xlsx|pptx|both]

Example:
    python scripts/convert_text.py private/report.md output --title "Revenue Report"
"""
import argparse
import logging
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from reportforge import ArtifactType, GenerationError, artifact_filename
from reportforge.pipeline import generate_artifact
from reportforge.parsers import parse_text

# 로깅 설정
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

FORMATS = {
    "xlsx": [ArtifactType.WORKBOOK],
    "pptx": [ArtifactType.DECK],
    "both": [ArtifactType.WORKBOOK, ArtifactType.DECK],
}


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="AI 생성 텍스트를 XLSX/PPTX로 변환")
    parser.add_argument("input", type=Path, help="입력 텍스트 파일")
    parser.add_argument("output_dir", type=Path, help="출력 디렉토리")
    parser.add_argument("--title", default=None, help="문서 제목 (없으면 첫 '# ' 제목)")
    parser.add_argument("--prompt", default=None, help="텍스트를 생성한 원래 요청")
    parser.add_argument("--format", choices=sorted(FORMATS), default="both", help="출력 형식")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """메인 실행 함수"""
    args = parse_args(argv)

    # 입력 파일 검증
    if not args.input.exists():
        logger.error(f"입력 파일을 찾을 수 없습니다: {args.input}")
        return 1

    text = args.input.read_text(encoding="utf-8")
    title = parse_text(text, title=args.title).title

    # 출력 디렉토리 생성
    args.output_dir.mkdir(parents=True, exist_ok=True)

    exit_code = 0
    for artifact_type in FORMATS[args.format]:
        output_path = args.output_dir / artifact_filename(title, artifact_type)
        try:
            data = generate_artifact(artifact_type, text, title=title, prompt=args.prompt)
        except GenerationError as e:
            logger.error(f"변환 실패 ({artifact_type.extension}): {e}", exc_info=True)
            exit_code = 1
            continue

        output_path.write_bytes(data)
        logger.info(f"✅ 변환 완료: {output_path}")
        print(f"   출력 파일: {output_path.absolute()}")

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
