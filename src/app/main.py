"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run morse-converter
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from src.app.config import Settings, load_settings
from src.app.routes import converter
from src.morse.table import default_table

logger = logging.getLogger(__name__)

LOG_FORMAT = "morse-converter %(asctime)s %(name)s:%(lineno)d %(levelname)s %(message)s"


# =============================================================================
# Lifespan
# =============================================================================


def init_state(app: FastAPI, settings: Settings) -> None:
    """
    app.state 초기화.

    테이블/변환기는 여기서 1회 생성되어 모든 요청이 공유 (읽기 전용).
    """
    table = default_table()
    app.state.settings = settings
    app.state.table = table
    app.state.converter = settings.morse.build_converter(table)


def create_app(settings: Settings | None = None, config_path: Path | None = None) -> FastAPI:
    """
    앱 생성.

    Args:
        settings: 설정 (None이면 시작 시 config_path/default.yaml에서 로드)
        config_path: 설정 파일 경로

    Returns:
        FastAPI 앱
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        애플리케이션 생명주기 관리.

        시작 시: 설정 로드, 테이블/변환기 생성
        """
        init_state(app, settings or load_settings(config_path))
        yield

    app = FastAPI(
        title="Morse Converter",
        description="텍스트 파일 업로드 → 모스 부호 ↔ 텍스트 자동 변환",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(converter.router, tags=["Converter"])

    @app.get("/health")
    async def health() -> dict[str, str]:
        """헬스 체크."""
        return {"status": "ok"}

    return app


# =============================================================================
# App Instance
# =============================================================================

app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================


def run() -> None:
    """서버 실행 (리스너 시작 실패만 프로세스 종료 사유)."""
    import uvicorn

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    settings = load_settings()
    logger.info(
        f"Сервер запущен на http://localhost:{settings.server.port}"
    )

    uvicorn.run(
        create_app(settings),
        host=settings.server.host,
        port=settings.server.port,
        timeout_keep_alive=int(settings.server.idle_timeout),
    )


if __name__ == "__main__":
    run()
