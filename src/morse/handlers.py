"""
Unknown-symbol handlers.

테이블에 없는 심볼/코드를 만났을 때 출력에 끼워 넣을 텍스트를 결정한다.
handler는 순수 함수여야 함 (변환기는 상태가 없음).

정책:
- ignore: 조용히 버림 (기본값)
- placeholder: 지정 문자열로 대체
- strict: NoEncodingError를 그대로 raise → 호출 실패
"""

from collections.abc import Callable

from src.domain.constants import (
    DEFAULT_PLACEHOLDER,
    UNKNOWN_POLICY_IGNORE,
    UNKNOWN_POLICY_PLACEHOLDER,
    UNKNOWN_POLICY_STRICT,
)
from src.domain.errors import ConfigurationError, NoEncodingError

UnknownHandler = Callable[[NoEncodingError], str]


def ignore_handler(error: NoEncodingError) -> str:
    """알 수 없는 심볼을 버린다."""
    return ""


def strict_handler(error: NoEncodingError) -> str:
    """알 수 없는 심볼에서 변환을 중단한다."""
    raise error


def placeholder_handler(placeholder: str = DEFAULT_PLACEHOLDER) -> UnknownHandler:
    """
    알 수 없는 심볼을 placeholder로 대체하는 handler 생성.

    Args:
        placeholder: 대체 문자열 (빈 문자열이면 ignore와 동일)

    Returns:
        handler 함수
    """

    def handler(error: NoEncodingError) -> str:
        return placeholder

    return handler


def handler_for_policy(
    policy: str,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> UnknownHandler:
    """
    설정 문자열(ignore/placeholder/strict) → handler.

    Raises:
        ConfigurationError: 알 수 없는 정책 이름
    """
    if policy == UNKNOWN_POLICY_IGNORE:
        return ignore_handler
    if policy == UNKNOWN_POLICY_PLACEHOLDER:
        return placeholder_handler(placeholder)
    if policy == UNKNOWN_POLICY_STRICT:
        return strict_handler
    raise ConfigurationError("unknown handler policy", policy=policy)
