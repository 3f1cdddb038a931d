"""
Converter: 텍스트 ↔ 모스 부호 양방향 변환.

구성:
- EncodingTable (생성 시 주입, 전역 상태 없음)
- ConverterConfig (불변, with_options()로 새 인스턴스 생성)

encode 규칙:
- 문자 단위(코드 포인트)로 순회, case_folding이면 대문자로 변환 후 조회
- 있으면: 코드 + 문자 구분자
- 없으면: unknown handler 결과 + (결과가 비어있지 않을 때만) 문자 구분자
- 공백 문자: 단어 경계 → 단어 구분자 (연속 공백은 하나로, 앞/뒤 공백은 무시)
- 마지막 문자 구분자 1개 제거 (trailing_separator=False일 때)

decode 규칙:
- 줄 → 단어 구분자 → 문자 구분자 순으로 분리
- 빈 조각(구분자 잔여물)은 건너뜀
- 없는 코드: unknown handler 결과 + (비어있지 않을 때만) 문자 구분자 (encode와 동일)
- 단어 끝의 문자 구분자는 제거
- 단어는 공백 하나로 연결, trailing_separator=True면 끝 공백 유지
"""

from dataclasses import dataclass, replace
from typing import Any

from src.domain.constants import DEFAULT_CHAR_SEPARATOR, SPACE_CODE
from src.domain.errors import ConfigurationError, NoEncodingError
from src.morse.handlers import UnknownHandler, ignore_handler
from src.morse.table import EncodingTable, default_table

# =============================================================================
# Configuration
# =============================================================================

@dataclass(frozen=True)
class ConverterConfig:
    """
    변환기 설정.

    word_separator가 None이면 변환기 생성 시
    char_separator + (테이블 공백 코드 또는 " ") + char_separator 로 결정된다.
    """
    char_separator: str = DEFAULT_CHAR_SEPARATOR
    word_separator: str | None = None
    case_folding: bool = False
    trailing_separator: bool = False
    unknown_handler: UnknownHandler = ignore_handler

    def with_options(self, **changes: Any) -> "ConverterConfig":
        """변경 사항을 반영한 새 설정 반환 (원본 불변)."""
        return replace(self, **changes)


# =============================================================================
# Converter
# =============================================================================

class Converter:
    """
    모스 부호 변환기.

    Usage:
        converter = Converter(default_table(), ConverterConfig(case_folding=True))
        converter.encode("Тест")       # "- . ... -"
        converter.decode("- . ... -")  # "ТЕСТ"
    """

    def __init__(
        self,
        table: EncodingTable | None,
        config: ConverterConfig | None = None,
    ) -> None:
        if table is None:
            raise ConfigurationError("converter requires an encoding table")

        self._table = table
        self._config = config or ConverterConfig()

        if self._config.word_separator:
            self._word_separator = self._config.word_separator
        else:
            space = table.space_code or SPACE_CODE
            sep = self._config.char_separator
            self._word_separator = sep + space + sep

    @property
    def table(self) -> EncodingTable:
        return self._table

    @property
    def config(self) -> ConverterConfig:
        return self._config

    @property
    def word_separator(self) -> str:
        """실제 사용되는 단어 구분자."""
        return self._word_separator

    def reconfigure(self, **changes: Any) -> "Converter":
        """같은 테이블, 변경된 설정의 새 변환기."""
        return Converter(self._table, self._config.with_options(**changes))

    # -------------------------------------------------------------------------
    # Encode
    # -------------------------------------------------------------------------

    def encode(self, text: str) -> str:
        """
        텍스트 → 모스 부호.

        Args:
            text: 일반 텍스트

        Returns:
            모스 부호 문자열 (예: "ТЕСТ" → "- . ... -")

        공백 문자는 단어 경계로만 쓰이며 unknown handler에 전달되지 않는다.
        """
        sep = self._config.char_separator
        handler = self._config.unknown_handler
        out: list[str] = []
        pending_break = False

        for ch in text:
            if ch.isspace():
                # 첫 출력 전 공백은 무시
                pending_break = bool(out)
                continue

            if self._config.case_folding:
                ch = ch.upper()

            code = self._table.code_for(ch)
            piece = code if code is not None else handler(NoEncodingError(ch))
            if not piece:
                continue

            if pending_break:
                if out and out[-1] == sep:
                    out.pop()
                out.append(self._word_separator)
                pending_break = False

            out.append(piece)
            out.append(sep)

        result = "".join(out)
        return self._trim(result, sep)

    # -------------------------------------------------------------------------
    # Decode
    # -------------------------------------------------------------------------

    def decode(self, morse: str) -> str:
        """
        모스 부호 → 텍스트.

        Args:
            morse: 모스 부호 문자열

        Returns:
            텍스트 (예: "- . ... -" → "ТЕСТ")
        """
        words: list[str] = []
        for line in morse.splitlines():
            for word in self._split(line, self._word_separator):
                decoded = self._decode_word(word)
                if decoded:
                    words.append(decoded)

        result = " ".join(words)
        if self._config.trailing_separator and result:
            result += " "
        return result

    def _decode_word(self, word: str) -> str:
        sep = self._config.char_separator
        handler = self._config.unknown_handler
        chars: list[str] = []
        ends_with_sep = False
        for code in self._split(word, sep):
            if not code:
                continue
            symbol = self._table.symbol_for(code)
            if symbol is not None:
                chars.append(symbol)
                ends_with_sep = False
                continue
            piece = handler(NoEncodingError(code))
            if piece:
                chars.extend((piece, sep))
                ends_with_sep = True
        # 단어 끝 구분자 제거
        if ends_with_sep:
            chars.pop()
        return "".join(chars)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _split(value: str, separator: str) -> list[str]:
        return value.split(separator) if separator else [value]

    def _trim(self, value: str, sep: str) -> str:
        if self._config.trailing_separator or not sep:
            return value
        return value[: -len(sep)] if value.endswith(sep) else value


# =============================================================================
# Factories
# =============================================================================

def default_converter(table: EncodingTable | None = None) -> Converter:
    """
    기본 변환기.

    - 기본 키릴 테이블 (table 미지정 시)
    - 대소문자 무시, 문자 구분자 " ", 단어 구분자 "   "
    - 알 수 없는 심볼은 버림, 끝 구분자 없음
    """
    if table is None:
        table = default_table()

    return Converter(
        table,
        ConverterConfig(
            char_separator=" ",
            word_separator="   ",
            case_folding=True,
            trailing_separator=False,
            unknown_handler=ignore_handler,
        ),
    )
