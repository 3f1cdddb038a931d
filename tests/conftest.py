"""
Pytest fixtures for the converter tests.

테스트 구성:
- morse 코어 (테이블/변환기)는 HTTP 없이
- 라우트는 create_app() + TestClient (lifespan 실행)
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from src.app.config import MorseSettings, Settings, UploadSettings
from src.app.main import create_app
from src.morse.converter import Converter, default_converter
from src.morse.table import EncodingTable, default_table

# =============================================================================
# Morse Fixtures
# =============================================================================

@pytest.fixture
def table() -> EncodingTable:
    """기본 키릴 테이블."""
    return default_table()


@pytest.fixture
def converter(table: EncodingTable) -> Converter:
    """기본 변환기 (대소문자 무시, 알 수 없는 심볼 버림)."""
    return default_converter(table)


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """결과 파일 저장 디렉토리."""
    out = tmp_path / "results"
    out.mkdir()
    return out


@pytest.fixture
def settings(output_dir: Path) -> Settings:
    """테스트용 설정 (결과 파일은 tmp 디렉토리로)."""
    return Settings(
        upload=UploadSettings(output_dir=output_dir),
        morse=MorseSettings(),
    )


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    """테스트 클라이언트 (lifespan 포함)."""
    with TestClient(create_app(settings)) as client:
        yield client
