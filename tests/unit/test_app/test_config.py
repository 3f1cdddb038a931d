"""
test_config.py - 설정 로드 테스트

DoD:
- 설정 파일 없으면 기본값
- YAML 섹션별 오버라이드
- 잘못된 키/정책 → ConfigurationError
"""

from pathlib import Path

import pytest

from src.app.config import Settings, load_config, load_settings
from src.domain.errors import ConfigurationError
from src.morse.handlers import ignore_handler, strict_handler

# =============================================================================
# load_config 테스트
# =============================================================================


class TestLoadConfig:
    """load_config 함수 테스트."""

    def test_missing_file_returns_empty(self, tmp_path: Path):
        assert load_config(tmp_path / "missing.yaml") == {}

    def test_empty_file_returns_empty(self, tmp_path: Path):
        path = tmp_path / "default.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config(path) == {}

    def test_reads_yaml(self, tmp_path: Path):
        path = tmp_path / "default.yaml"
        path.write_text("server:\n  port: 9000\n", encoding="utf-8")

        assert load_config(path) == {"server": {"port": 9000}}

    def test_non_mapping_rejected(self, tmp_path: Path):
        path = tmp_path / "default.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(path)


# =============================================================================
# Settings 테스트
# =============================================================================


class TestSettings:
    """Settings 변환 테스트."""

    def test_defaults(self):
        settings = Settings.from_dict({})

        assert settings.server.port == 8080
        assert settings.server.read_timeout == 5.0
        assert settings.server.write_timeout == 10.0
        assert settings.server.idle_timeout == 15.0
        assert settings.upload.field_name == "myFile"
        assert settings.upload.max_bytes == 10 * 1024 * 1024
        assert settings.upload.output_dir is None
        assert settings.upload.index_paths == ("index.html", "../index.html")
        assert settings.morse.case_folding is True

    def test_overrides(self, tmp_path: Path):
        path = tmp_path / "default.yaml"
        path.write_text(
            """
server:
  port: 9000
upload:
  output_dir: results
  index_paths: [static/index.html]
morse:
  unknown_policy: strict
""",
            encoding="utf-8",
        )

        settings = load_settings(path)

        assert settings.server.port == 9000
        assert settings.upload.output_dir == Path("results")
        assert settings.upload.index_paths == ("static/index.html",)
        assert settings.morse.unknown_policy == "strict"

    def test_unknown_key_rejected(self):
        with pytest.raises(ConfigurationError):
            Settings.from_dict({"server": {"portt": 1}})

    def test_section_must_be_mapping(self):
        with pytest.raises(ConfigurationError):
            Settings.from_dict({"morse": "strict"})

    def test_missing_file_defaults(self, tmp_path: Path):
        assert load_settings(tmp_path / "missing.yaml") == Settings()


class TestBuildConverter:
    """MorseSettings.build_converter 테스트."""

    def test_default_matches_default_converter(self, table):
        converter = Settings().morse.build_converter(table)

        assert converter.table is table
        assert converter.word_separator == "   "
        assert converter.config.case_folding is True
        assert converter.config.unknown_handler is ignore_handler
        assert converter.encode("тест") == "- . ... -"

    def test_word_separator_derived_from_char_separator(self, table):
        """word_separator 미지정 → char_separator 기준으로 유도."""
        settings = Settings.from_dict({"morse": {"char_separator": "|"}})

        converter = settings.morse.build_converter(table)

        assert settings.morse.word_separator is None
        assert converter.word_separator == "| |"
        assert converter.decode("-|.| |...|-") == "ТЕ СТ"
        assert converter.encode("те ст") == "-|.| |...|-"

    def test_explicit_word_separator(self, table):
        settings = Settings.from_dict(
            {"morse": {"char_separator": "|", "word_separator": "||"}}
        )

        assert settings.morse.build_converter(table).word_separator == "||"

    def test_policy_applied(self, table):
        settings = Settings.from_dict({"morse": {"unknown_policy": "strict"}})

        converter = settings.morse.build_converter(table)

        assert converter.config.unknown_handler is strict_handler

    def test_invalid_policy_rejected(self, table):
        settings = Settings.from_dict({"morse": {"unknown_policy": "retry"}})

        with pytest.raises(ConfigurationError):
            settings.morse.build_converter(table)
