"""
test_converter.py - Converter encode/decode 테스트

DoD:
- "ТЕСТ" ↔ "- . ... -"
- 모든 심볼 왕복 (충돌로 가려진 심볼 제외)
- 알 수 없는 심볼: 기본은 버림, 구분자 잔여물 없음
- 끝 구분자 정책
- 설정 불변성
"""

import dataclasses

import pytest

from src.domain.errors import ConfigurationError, NoEncodingError
from src.morse.converter import Converter, ConverterConfig, default_converter
from src.morse.handlers import placeholder_handler, strict_handler
from src.morse.table import EncodingTable

# =============================================================================
# 생성/설정
# =============================================================================


class TestConstruction:
    """Converter 생성 테스트."""

    def test_requires_table(self):
        """테이블 없이 생성 → ConfigurationError."""
        with pytest.raises(ConfigurationError):
            Converter(None)

    def test_default_config(self, table):
        converter = Converter(table)

        assert converter.config == ConverterConfig()
        assert converter.config.case_folding is False
        assert converter.word_separator == "   "

    def test_word_separator_from_char_separator(self, table):
        converter = Converter(table, ConverterConfig(char_separator="|"))

        assert converter.word_separator == "| |"

    def test_word_separator_uses_table_space(self):
        table = EncodingTable({"Т": "-", "Е": ".", " ": "/"})

        converter = Converter(table)

        assert converter.word_separator == " / "

    def test_explicit_word_separator(self, table):
        converter = Converter(table, ConverterConfig(word_separator=" // "))

        assert converter.word_separator == " // "

    def test_default_converter(self, converter):
        assert converter.config.case_folding is True
        assert converter.config.char_separator == " "
        assert converter.word_separator == "   "
        assert converter.config.trailing_separator is False

    def test_default_converter_builds_table(self):
        assert len(default_converter().table) > 0


class TestConfigImmutability:
    """설정 불변성 테스트."""

    def test_config_frozen(self):
        config = ConverterConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.case_folding = True  # type: ignore[misc]

    def test_with_options_returns_new(self):
        config = ConverterConfig()

        changed = config.with_options(case_folding=True, char_separator="|")

        assert changed is not config
        assert changed.case_folding is True
        assert changed.char_separator == "|"
        assert config.case_folding is False
        assert config.char_separator == " "

    def test_reconfigure_shares_table(self, converter):
        changed = converter.reconfigure(trailing_separator=True)

        assert changed is not converter
        assert changed.table is converter.table
        assert changed.config.trailing_separator is True
        assert converter.config.trailing_separator is False


# =============================================================================
# Encode
# =============================================================================


class TestEncode:
    """encode 테스트."""

    def test_word(self, converter):
        assert converter.encode("ТЕСТ") == "- . ... -"

    def test_lowercase_folded(self, converter):
        assert converter.encode("тест") == "- . ... -"

    def test_lowercase_without_folding_unknown(self, table):
        """case_folding=False면 소문자는 테이블에 없음."""
        converter = Converter(table)

        assert converter.encode("тест") == ""
        assert converter.encode("ТЕСТ") == "- . ... -"

    def test_words_separated(self, converter):
        assert converter.encode("ТЕСТ ТЕСТ") == "- . ... -   - . ... -"

    def test_repeated_whitespace_collapses(self, converter):
        assert converter.encode("Т  \t Е") == "-   ."

    def test_newline_is_word_break(self, converter):
        assert converter.encode("Т\nЕ") == "-   ."

    def test_outer_whitespace_ignored(self, converter):
        assert converter.encode("  ТЕ  ") == "- ."

    def test_punctuation_and_digits(self, converter):
        assert converter.encode("1.") == ".---- ......"
        assert converter.encode("-") == "-....-"

    def test_latin_letters_dropped(self, converter):
        """기본 테이블은 키릴 문자만: 라틴 SOS는 전부 버려짐."""
        assert converter.encode("SOS") == ""

    def test_unknown_dropped_without_separator_artifact(self, converter):
        assert converter.encode("Т😀Е") == "- ."
        assert converter.encode("😀ТЕ😀") == "- ."

    def test_unknown_only(self, converter):
        assert converter.encode("😀") == ""

    def test_empty(self, converter):
        assert converter.encode("") == ""

    def test_placeholder(self, table):
        converter = Converter(
            table,
            ConverterConfig(case_folding=True, unknown_handler=placeholder_handler("#")),
        )

        assert converter.encode("Т😀Е") == "- # ."

    def test_strict_raises(self, converter):
        strict = converter.reconfigure(unknown_handler=strict_handler)

        with pytest.raises(NoEncodingError) as exc_info:
            strict.encode("Т😀")

        assert exc_info.value.symbol == "😀"

    def test_whitespace_not_passed_to_handler(self, converter):
        """공백은 단어 경계: strict 정책에서도 예외 없음."""
        strict = converter.reconfigure(unknown_handler=strict_handler)
        placeholder = converter.reconfigure(unknown_handler=placeholder_handler())

        assert strict.encode("ТЕ\tСТ") == "- .   ... -"
        assert placeholder.encode("ТЕ СТ") == "- .   ... -"

    def test_trailing_separator_kept(self, converter):
        trailing = converter.reconfigure(trailing_separator=True)

        assert trailing.encode("ТЕ") == "- . "

    def test_custom_char_separator(self, table):
        converter = Converter(table, ConverterConfig(char_separator="|", case_folding=True))

        assert converter.encode("ТЕ СТ") == "-|.| |...|-"

    def test_custom_space_code(self):
        table = EncodingTable({"Т": "-", "Е": ".", " ": "/"})
        converter = Converter(table)

        assert converter.encode("Т Е") == "- / ."

    def test_empty_char_separator(self, table):
        converter = Converter(table, ConverterConfig(char_separator=""))

        assert converter.encode("ТЕ") == "-."

    @pytest.mark.parametrize("text", ["ТЕСТ", "Т Е С Т", "  ПРИВЕТ МИР  ", "1, 2 (3)", "А😀"])
    def test_no_stray_separators(self, converter, text):
        """끝 구분자 모드가 아니면 앞뒤 구분자 없음."""
        encoded = converter.encode(text)

        assert encoded == encoded.strip()


# =============================================================================
# Decode
# =============================================================================


class TestDecode:
    """decode 테스트."""

    def test_word(self, converter):
        assert converter.decode("- . ... -") == "ТЕСТ"

    def test_words(self, converter):
        assert converter.decode("- . ... -   - . ... -") == "ТЕСТ ТЕСТ"

    def test_sos(self, converter):
        """키릴 테이블에서 "... --- ..." 는 СОС."""
        assert converter.decode("... --- ...") == "СОС"

    def test_unknown_code_dropped(self, converter):
        assert converter.decode("- ........ .") == "ТЕ"

    def test_unknown_code_placeholder(self, converter):
        placeholder = converter.reconfigure(unknown_handler=placeholder_handler())

        assert placeholder.decode("- ........ .") == "Т? Е"

    def test_unknown_code_placeholder_at_word_end(self, converter):
        """단어 끝 대체 문자 뒤에는 구분자 없음."""
        placeholder = converter.reconfigure(unknown_handler=placeholder_handler())

        assert placeholder.decode("- ........   .") == "Т? Е"
        assert placeholder.decode("........") == "?"

    def test_strict_raises(self, converter):
        strict = converter.reconfigure(unknown_handler=strict_handler)

        with pytest.raises(NoEncodingError) as exc_info:
            strict.decode("- ........")

        assert exc_info.value.symbol == "........"

    def test_extra_spaces_ignored(self, converter):
        """구분자 잔여물(빈 조각)은 건너뜀."""
        assert converter.decode(" -  . ") == "ТЕ"
        assert converter.decode("-      .") == "Т Е"

    def test_lines_are_words(self, converter):
        assert converter.decode("- .\n... -") == "ТЕ СТ"

    def test_trailing_separator_kept(self, converter):
        trailing = converter.reconfigure(trailing_separator=True)

        assert trailing.decode("- . ... -") == "ТЕСТ "

    def test_custom_char_separator(self, table):
        converter = Converter(table, ConverterConfig(char_separator="|"))

        assert converter.decode("-|.| |...|-") == "ТЕ СТ"

    def test_custom_space_code(self):
        table = EncodingTable({"Т": "-", "Е": ".", " ": "/"})
        converter = Converter(table)

        assert converter.decode("- / .") == "Т Е"

    def test_empty(self, converter):
        assert converter.decode("") == ""

    def test_collision_stable(self, converter):
        """충돌 코드는 매번 같은 심볼로 디코딩."""
        results = {converter.decode("-..-") for _ in range(10)}

        assert results == {"Ь"}


# =============================================================================
# 왕복
# =============================================================================


class TestRoundTrip:
    """encode → decode 왕복 테스트."""

    def test_every_symbol(self, converter):
        """충돌로 가려진 심볼(Ъ)을 제외한 모든 심볼 왕복."""
        table = converter.table
        for symbol in table:
            if table.symbol_for(table.code_for(symbol)) != symbol:
                continue
            assert converter.decode(converter.encode(symbol.lower())) == symbol.upper()

    def test_shadowed_symbol_decodes_to_winner(self, converter):
        assert converter.decode(converter.encode("Ъ")) == "Ь"

    def test_sentence(self, converter):
        text = "ПРИВЕТ, МИР! КАК ДЕЛА?"

        # "!"는 테이블에 없어서 버려짐
        assert converter.decode(converter.encode(text)) == "ПРИВЕТ, МИР КАК ДЕЛА?"
