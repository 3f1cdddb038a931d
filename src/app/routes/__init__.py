"""
FastAPI Routes.

페이지 라우트 (index.html) + 업로드 라우트
"""

from . import converter

__all__ = ["converter"]
