"""
Upload Conversion Service: 업로드 파일 → 방향 판정 → 변환 → 저장.

단계별 실패는 UploadError로 변환 (사용자 메시지 단계별로 다름):
- 디코딩 실패 → FILE_READ_FAILED
- 변환 실패 (빈 입력, strict handler) → CONVERT_FAILED
- 저장 실패 → FILE_CREATE_FAILED / FILE_WRITE_FAILED (storage)

HTTP를 모름: 라우트가 바이트와 파일명을 넘기고 결과를 렌더링한다.
"""

import logging
from datetime import datetime
from pathlib import Path

from src.app.services.storage import build_output_filename, save_result
from src.domain.constants import (
    RESPONSE_ORIGINAL_HEADER,
    RESPONSE_RESULT_HEADER,
    UPLOAD_ENCODING,
    UPLOAD_MESSAGES,
)
from src.domain.errors import ErrorCodes, MorseError, UploadError
from src.domain.schemas import ConversionResult
from src.morse.converter import Converter
from src.morse.detect import convert

logger = logging.getLogger(__name__)


class UploadConversionService:
    """
    업로드 1건 처리.

    converter는 앱 시작 시 만들어진 공유 인스턴스 (읽기 전용).
    """

    def __init__(self, converter: Converter, output_dir: Path):
        """
        Args:
            converter: 변환기
            output_dir: 결과 파일 저장 디렉토리
        """
        self.converter = converter
        self.output_dir = output_dir

    def decode_content(self, data: bytes) -> str:
        """
        업로드 바이트 → 텍스트.

        Raises:
            UploadError: FILE_READ_FAILED (UTF-8 아님)
        """
        try:
            return data.decode(UPLOAD_ENCODING)
        except UnicodeDecodeError as e:
            logger.warning(f"Uploaded file is not valid UTF-8: {e}")
            raise UploadError(
                ErrorCodes.FILE_READ_FAILED,
                UPLOAD_MESSAGES[ErrorCodes.FILE_READ_FAILED],
                reason="decode",
            ) from e

    def convert_text(self, text: str) -> ConversionResult:
        """
        방향 판정 + 변환.

        Raises:
            UploadError: CONVERT_FAILED
        """
        try:
            return convert(text, self.converter)
        except MorseError as e:
            logger.warning(f"Conversion failed: {e}")
            raise UploadError(
                ErrorCodes.CONVERT_FAILED,
                UPLOAD_MESSAGES[ErrorCodes.CONVERT_FAILED],
                cause=e.code,
            ) from e

    def process(
        self,
        data: bytes,
        filename: str | None,
        now: datetime | None = None,
    ) -> ConversionResult:
        """
        업로드 처리 전체 흐름.

        Args:
            data: 업로드 파일 내용
            filename: 업로드 파일명 (확장자만 사용)
            now: 파일명 기준 시각 (테스트용)

        Returns:
            ConversionResult (output_path 포함)
        """
        text = self.decode_content(data)
        result = self.convert_text(text)

        output_name = build_output_filename(filename, now)
        result.output_path = save_result(self.output_dir, output_name, result.converted)

        logger.info(f"Converted upload {filename!r}: {result.to_dict()}")
        return result


def render_response(result: ConversionResult) -> str:
    """
    응답 본문.

    형식:
        Исходный текст:
        <original>

        Результат:
        <converted>
    """
    return (
        f"{RESPONSE_ORIGINAL_HEADER}\n{result.original}\n\n"
        f"{RESPONSE_RESULT_HEADER}\n{result.converted}"
    )
