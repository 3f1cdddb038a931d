"""
Result storage: 변환 결과를 타임스탬프 파일로 저장.

파일명: <UTC yyyyMMdd_HHmmss><원본 확장자>
예: notes.txt → 20240115_093000.txt

같은 초에 두 요청이 들어오면 파일명이 겹쳐 나중 요청이 덮어씀 (허용된 edge case).
생성 실패와 쓰기 실패는 사용자 메시지가 다르므로 단계를 나눠서 처리.
"""

import logging
from datetime import UTC, datetime
from pathlib import Path

from src.domain.constants import OUTPUT_TIMESTAMP_FORMAT, UPLOAD_MESSAGES
from src.domain.errors import ErrorCodes, UploadError

logger = logging.getLogger(__name__)


def build_output_filename(original_filename: str | None, now: datetime | None = None) -> str:
    """
    결과 파일명 생성.

    Args:
        original_filename: 업로드된 파일명 (확장자만 사용)
        now: 기준 시각 (테스트용, 기본 현재 UTC)

    Returns:
        "20240115_093000.txt" 형식 파일명
    """
    if now is None:
        now = datetime.now(UTC)
    else:
        now = now.astimezone(UTC) if now.tzinfo else now

    # 경로 구분자가 섞인 파일명이어도 확장자만 사용
    ext = Path(original_filename or "").suffix
    return f"{now.strftime(OUTPUT_TIMESTAMP_FORMAT)}{ext}"


def save_result(output_dir: Path, filename: str, content: str) -> Path:
    """
    변환 결과 저장.

    Args:
        output_dir: 저장 디렉토리
        filename: build_output_filename() 결과
        content: 저장할 텍스트 (UTF-8)

    Returns:
        저장된 파일 경로

    Raises:
        UploadError: FILE_CREATE_FAILED / FILE_WRITE_FAILED
    """
    path = output_dir / filename

    try:
        f = open(path, "w", encoding="utf-8", newline="")
    except OSError as e:
        logger.warning(f"Failed to create result file {path}: {e}")
        raise UploadError(
            ErrorCodes.FILE_CREATE_FAILED,
            UPLOAD_MESSAGES[ErrorCodes.FILE_CREATE_FAILED],
            path=str(path),
        ) from e

    with f:
        try:
            f.write(content)
            f.flush()
        except OSError as e:
            logger.warning(f"Failed to write result file {path}: {e}")
            raise UploadError(
                ErrorCodes.FILE_WRITE_FAILED,
                UPLOAD_MESSAGES[ErrorCodes.FILE_WRITE_FAILED],
                path=str(path),
            ) from e

    logger.info(f"Saved conversion result: {path}")
    return path
