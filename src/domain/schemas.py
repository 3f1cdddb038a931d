"""
Data schemas for the converter.

규칙:
- 변환 방향은 Direction enum으로만 표현
- 결과 레코드는 to_dict()로 로그 직렬화
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

# =============================================================================
# Direction
# =============================================================================

class Direction(str, Enum):
    """
    변환 방향.

    ENCODE: 일반 텍스트 → 모스 부호
    DECODE: 모스 부호 → 일반 텍스트
    """
    ENCODE = "encode"
    DECODE = "decode"


# =============================================================================
# Core Schemas
# =============================================================================

@dataclass
class ConversionResult:
    """
    업로드 1건의 변환 결과.

    original은 업로드된 내용 그대로 (공백 제거 전).
    """
    original: str
    converted: str
    direction: Direction
    output_path: Path | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용."""
        return {
            "direction": self.direction.value,
            "original_length": len(self.original),
            "converted_length": len(self.converted),
            "output_path": str(self.output_path) if self.output_path else None,
        }
