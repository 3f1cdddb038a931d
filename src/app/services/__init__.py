"""
Application Services.

역할:
- convert: 업로드 바이트 → 방향 판정 → 변환 → 결과 저장
- storage: 타임스탬프 파일명 + 결과 파일 쓰기
"""

from .convert import UploadConversionService, render_response
from .storage import build_output_filename, save_result

__all__ = [
    "UploadConversionService",
    "render_response",
    "build_output_filename",
    "save_result",
]
