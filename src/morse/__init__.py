"""
Morse layer: 변환 핵심 모듈.

HTTP/파일시스템을 모름. 테이블과 설정은 생성 시 주입.

역할:
- 인코딩 테이블 + 역테이블
- encode/decode, unknown handler 정책
- 변환 방향 판정
"""

from .converter import Converter, ConverterConfig, default_converter
from .detect import auto_convert, convert, detect_direction
from .handlers import (
    UnknownHandler,
    handler_for_policy,
    ignore_handler,
    placeholder_handler,
    strict_handler,
)
from .table import EncodingTable, default_table

__all__ = [
    # table
    "EncodingTable",
    "default_table",
    # converter
    "Converter",
    "ConverterConfig",
    "default_converter",
    # handlers
    "UnknownHandler",
    "ignore_handler",
    "placeholder_handler",
    "strict_handler",
    "handler_for_policy",
    # detect
    "detect_direction",
    "convert",
    "auto_convert",
]
