"""
Error definitions for the converter.

규칙:
- 변환 불가 심볼 → NoEncodingError (unknown handler가 인라인 처리, 호출 실패 아님)
- 빈 입력 → EmptyInputError (호출 단위 실패)
- 테이블 없음/잘못된 테이블 → ConfigurationError (생성 시점에 즉시 중단)
- 업로드 단계별 실패 → UploadError (요청 경계에서 500 + 단계별 메시지)
"""

from typing import Any


class MorseError(Exception):
    """
    변환기 에러 베이스.

    Usage:
        raise MorseError("EMPTY_INPUT", length=0)
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


class NoEncodingError(MorseError):
    """
    심볼(또는 코드)에 대응하는 항목이 테이블에 없음.

    unknown handler에 전달되는 값. handler가 다시 raise하지 않는 한
    encode/decode 호출 자체는 실패하지 않는다.
    """

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(ErrorCodes.NO_ENCODING, symbol=symbol)


class EmptyInputError(MorseError):
    """공백 제거 후 입력이 비어 있음."""

    def __init__(self, **context: Any) -> None:
        super().__init__(ErrorCodes.EMPTY_INPUT, **context)


class ConfigurationError(MorseError):
    """
    변환기 구성 오류 (프로그래밍 에러).

    빈 테이블로 동작하는 변환기는 모든 입력을 조용히 버리므로
    생성 시점에 바로 실패시킨다.
    """

    def __init__(self, reason: str, **context: Any) -> None:
        super().__init__(ErrorCodes.CONFIGURATION_ERROR, reason=reason, **context)


class UploadError(MorseError):
    """
    업로드 처리 단계 실패.

    message는 사용자에게 그대로 노출되는 문구 (constants.UPLOAD_MESSAGES).
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.message = message
        super().__init__(code, **context)


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Converter ===
    NO_ENCODING = "NO_ENCODING"
    EMPTY_INPUT = "EMPTY_INPUT"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # === Upload flow ===
    FORM_PARSE_FAILED = "FORM_PARSE_FAILED"
    FILE_MISSING = "FILE_MISSING"
    FILE_READ_FAILED = "FILE_READ_FAILED"
    CONVERT_FAILED = "CONVERT_FAILED"
    FILE_CREATE_FAILED = "FILE_CREATE_FAILED"
    FILE_WRITE_FAILED = "FILE_WRITE_FAILED"
