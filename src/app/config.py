"""
Configuration: 선택적 YAML 설정 + 기본값.

default.yaml (프로젝트 루트)이 없으면 기본값만 사용.

예시:
    server:
      port: 8080
      read_timeout: 5
    upload:
      output_dir: ./results
    morse:
      case_folding: true
      unknown_policy: placeholder
      placeholder: "?"
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import (
    DEFAULT_CHAR_SEPARATOR,
    DEFAULT_PLACEHOLDER,
    INDEX_SEARCH_PATHS,
    SERVER_HOST,
    SERVER_IDLE_TIMEOUT,
    SERVER_PORT,
    SERVER_READ_TIMEOUT,
    SERVER_WRITE_TIMEOUT,
    UNKNOWN_POLICY_IGNORE,
    UPLOAD_FIELD_NAME,
    UPLOAD_MAX_BYTES,
)
from src.domain.errors import ConfigurationError
from src.morse.converter import Converter, ConverterConfig
from src.morse.handlers import handler_for_policy
from src.morse.table import EncodingTable

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "default.yaml"


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] | None = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError("config root must be a mapping", path=str(config_path))
    return data


# =============================================================================
# Settings
# =============================================================================

@dataclass(frozen=True)
class ServerSettings:
    host: str = SERVER_HOST
    port: int = SERVER_PORT
    read_timeout: float = SERVER_READ_TIMEOUT
    write_timeout: float = SERVER_WRITE_TIMEOUT
    idle_timeout: float = SERVER_IDLE_TIMEOUT


@dataclass(frozen=True)
class UploadSettings:
    field_name: str = UPLOAD_FIELD_NAME
    max_bytes: int = UPLOAD_MAX_BYTES
    # None → 요청 시점의 작업 디렉토리
    output_dir: Path | None = None
    index_paths: tuple[str, ...] = INDEX_SEARCH_PATHS


@dataclass(frozen=True)
class MorseSettings:
    char_separator: str = DEFAULT_CHAR_SEPARATOR
    # None → char_separator 기준으로 유도 (" " → "   ")
    word_separator: str | None = None
    case_folding: bool = True
    trailing_separator: bool = False
    unknown_policy: str = UNKNOWN_POLICY_IGNORE
    placeholder: str = DEFAULT_PLACEHOLDER

    def build_converter(self, table: EncodingTable) -> Converter:
        """설정값으로 변환기 생성 (테이블은 주입)."""
        return Converter(
            table,
            ConverterConfig(
                char_separator=self.char_separator,
                word_separator=self.word_separator,
                case_folding=self.case_folding,
                trailing_separator=self.trailing_separator,
                unknown_handler=handler_for_policy(self.unknown_policy, self.placeholder),
            ),
        )


@dataclass(frozen=True)
class Settings:
    """
    애플리케이션 설정.

    시작 시 1회 생성, 이후 변경 없음.
    """
    server: ServerSettings = field(default_factory=ServerSettings)
    upload: UploadSettings = field(default_factory=UploadSettings)
    morse: MorseSettings = field(default_factory=MorseSettings)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        """
        load_config() 결과 → Settings.

        Args:
            data: 설정 dict (섹션: server, upload, morse)

        Returns:
            Settings (없는 키는 기본값)

        Raises:
            ConfigurationError: 알 수 없는 키 또는 잘못된 섹션 타입
        """
        server = _section(data, "server")
        upload = _section(data, "upload")
        morse = _section(data, "morse")

        if "output_dir" in upload and upload["output_dir"] is not None:
            upload["output_dir"] = Path(upload["output_dir"])
        if "index_paths" in upload:
            upload["index_paths"] = tuple(upload["index_paths"])

        try:
            return cls(
                server=ServerSettings(**server),
                upload=UploadSettings(**upload),
                morse=MorseSettings(**morse),
            )
        except TypeError as e:
            raise ConfigurationError("unknown config key", detail=str(e)) from e


def load_settings(config_path: Path | None = None) -> Settings:
    """설정 파일 로드 + Settings 변환."""
    return Settings.from_dict(load_config(config_path))


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigurationError("config section must be a mapping", section=name)
    return dict(section)
