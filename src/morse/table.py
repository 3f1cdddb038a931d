"""
Encoding table: 심볼 ↔ 모스 코드 대응.

규칙:
- 심볼은 대소문자 무시 (대문자로 저장), 한 글자
- 코드는 "." / "-" 만 허용 (단, 공백 심볼 " "의 커스텀 코드는 예외)
- 빈 테이블 → ConfigurationError
- 역테이블 충돌: first-wins (테이블 순서 기준)
  같은 코드를 가진 심볼이 여럿이면 가장 먼저 나온 심볼로 디코딩됨.
  에러가 아니라 알려진 위험이므로 경고 로그만 남긴다.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from src.domain.constants import (
    CODE_ALPHABET,
    CYRILLIC_LETTERS,
    DIGITS,
    PUNCTUATION,
    SPACE_SYMBOL,
)
from src.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


class EncodingTable:
    """
    불변 인코딩 테이블 + 역테이블.

    Usage:
        table = EncodingTable({"Т": "-", "Е": "."})
        table.code_for("т")   # "-"
        table.symbol_for("-")  # "Т"
    """

    def __init__(self, mapping: Mapping[str, str] | Iterable[tuple[str, str]] | None) -> None:
        if mapping is None:
            raise ConfigurationError("encoding table is not set")

        pairs = mapping.items() if isinstance(mapping, Mapping) else mapping

        forward: dict[str, str] = {}
        for symbol, code in pairs:
            key = _normalize_symbol(symbol)
            _validate_code(key, code)
            if key in forward:
                raise ConfigurationError("duplicate symbol", symbol=key)
            forward[key] = code

        if not forward:
            raise ConfigurationError("encoding table is empty")

        self._forward = MappingProxyType(forward)
        self._inverse = MappingProxyType(_build_inverse(forward))

        collisions = self.collisions()
        for code, symbols in collisions.items():
            logger.warning(
                f"Code collision in encoding table: {code!r} shared by {symbols}, "
                f"decoding to {self._inverse[code]!r}"
            )

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    @property
    def forward(self) -> Mapping[str, str]:
        """심볼 → 코드 (읽기 전용)."""
        return self._forward

    @property
    def inverse(self) -> Mapping[str, str]:
        """코드 → 심볼 (읽기 전용, first-wins)."""
        return self._inverse

    @property
    def space_code(self) -> str | None:
        """테이블에 정의된 공백 코드 (없으면 None)."""
        return self._forward.get(SPACE_SYMBOL)

    def code_for(self, symbol: str) -> str | None:
        return self._forward.get(symbol)

    def symbol_for(self, code: str) -> str | None:
        return self._inverse.get(code)

    def collisions(self) -> dict[str, list[str]]:
        """
        여러 심볼이 공유하는 코드 목록.

        Returns:
            {코드: [심볼, ...]} (테이블 순서, 첫 심볼이 디코딩 결과)
        """
        by_code: dict[str, list[str]] = {}
        for symbol, code in self._forward.items():
            by_code.setdefault(code, []).append(symbol)
        return {code: symbols for code, symbols in by_code.items() if len(symbols) > 1}

    # -------------------------------------------------------------------------
    # Container protocol
    # -------------------------------------------------------------------------

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._forward

    def __iter__(self) -> Iterator[str]:
        return iter(self._forward)

    def __len__(self) -> int:
        return len(self._forward)

    def __repr__(self) -> str:
        return f"EncodingTable({len(self)} symbols)"


# =============================================================================
# Factories
# =============================================================================

def default_table() -> EncodingTable:
    """
    기본 테이블 생성: 키릴 문자 + 숫자 + 문장부호.

    호출마다 새 값을 반환 (모듈 전역 싱글턴 없음).
    """
    return EncodingTable(CYRILLIC_LETTERS + DIGITS + PUNCTUATION)


# =============================================================================
# Helpers
# =============================================================================

def _normalize_symbol(symbol: str) -> str:
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise ConfigurationError("symbol must be a single character", symbol=symbol)
    upper = symbol.upper()
    # "ß".upper() == "SS" 같은 경우는 원래 심볼 유지
    return upper if len(upper) == 1 else symbol


def _validate_code(symbol: str, code: str) -> None:
    if not isinstance(code, str) or not code:
        raise ConfigurationError("code must be a non-empty string", symbol=symbol)
    if symbol == SPACE_SYMBOL:
        return
    if not set(code) <= CODE_ALPHABET:
        raise ConfigurationError(
            "code must contain only dots and dashes", symbol=symbol, morse_code=code
        )


def _build_inverse(forward: Mapping[str, str]) -> dict[str, str]:
    inverse: dict[str, str] = {}
    for symbol, code in forward.items():
        # first-wins
        inverse.setdefault(code, symbol)
    return inverse
