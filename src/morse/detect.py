"""
Direction detector: 입력이 모스 부호인지 일반 텍스트인지 판정.

휴리스틱 (파서 아님):
- 앞뒤 공백 제거 후 비어 있으면 EmptyInputError
- ".", "-", "/" 중 하나라도 있으면 모스 부호 → decode
- 그 외 → encode

알려진 한계: "well-known", "т.е." 처럼 하이픈/마침표/슬래시가 들어간
일반 텍스트도 모스 부호로 판정된다. 의도된 동작이므로 보정하지 않음.
"""

from src.domain.constants import MORSE_MARKERS
from src.domain.errors import EmptyInputError
from src.domain.schemas import ConversionResult, Direction
from src.morse.converter import Converter


def detect_direction(text: str) -> Direction:
    """
    변환 방향 판정.

    Args:
        text: 원본 입력

    Returns:
        Direction.DECODE (모스 부호) 또는 Direction.ENCODE (일반 텍스트)

    Raises:
        EmptyInputError: 공백만 있거나 빈 입력
    """
    stripped = text.strip()
    if not stripped:
        raise EmptyInputError(length=len(text))

    if any(ch in MORSE_MARKERS for ch in stripped):
        return Direction.DECODE
    return Direction.ENCODE


def convert(text: str, converter: Converter) -> ConversionResult:
    """
    방향 판정 후 변환.

    Returns:
        ConversionResult (output_path 없음)
    """
    direction = detect_direction(text)
    stripped = text.strip()

    if direction is Direction.DECODE:
        converted = converter.decode(stripped)
    else:
        converted = converter.encode(stripped)

    return ConversionResult(original=text, converted=converted, direction=direction)


def auto_convert(text: str, converter: Converter) -> str:
    """방향 판정 후 변환 결과 문자열만 반환."""
    return convert(text, converter).converted
