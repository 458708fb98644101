from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock, patch

import pytest

from src.barcodegen.encoder import (
    EncodedSymbol,
    checksum_index,
    encode,
    fold_text,
    symbol_values,
)
from src.barcodegen.exceptions import UnsupportedCharacterError, UnsupportedVariantError
from src.barcodegen.symbol_table import SymbolTable
from src.model.enums import Code128Variant

GENERAL = Code128Variant.GENERAL
UPPER = Code128Variant.UPPERCASE_ONLY


class TestKnownSymbols:
    def test_single_space(self) -> None:
        symbol = encode(" ", GENERAL)
        assert symbol.pattern == "211214" + "212222" + "222122" + "2331112"
        assert symbol.checksum == 1

    def test_empty_text(self) -> None:
        symbol = encode("", GENERAL)
        assert symbol.pattern == "211214" + "222122" + "2331112"
        assert symbol.checksum == 1

    def test_empty_text_uppercase(self) -> None:
        symbol = encode("", UPPER)
        assert symbol.pattern == "211412" + "212222" + "2331112"
        assert symbol.checksum == 0

    def test_reference_vector(self) -> None:
        symbol = encode("PJJ123C", GENERAL)
        assert symbol.checksum == 55
        assert symbol.pattern == (
            "211214"
            + "313121"  # P
            + "112133"  # J
            + "112133"  # J
            + "123221"  # 1
            + "223211"  # 2
            + "221132"  # 3
            + "131321"  # C
            + "311321"  # checksum 55
            + "2331112"
        )

    def test_reference_symbol_values(self) -> None:
        assert symbol_values("PJJ123C", GENERAL) == (
            104, 48, 42, 42, 17, 18, 19, 35, 55, 106,
        )  # fmt: skip

    def test_lower_case_general(self) -> None:
        # 104 + 65 = 169 -> 66 ("b")
        symbol = encode("a", GENERAL)
        assert symbol.pattern == "211214" + "121124" + "121421" + "2331112"

    def test_control_character_uppercase(self) -> None:
        # HT = 73; 103 + 73 = 176 -> 73
        symbol = encode("\t", UPPER)
        assert symbol.pattern == "211412" + "142112" + "142112" + "2331112"

    def test_variant_by_name(self) -> None:
        assert encode("AB", "code128a") == encode("AB", UPPER)


class TestChecksum:
    @pytest.mark.parametrize(
        "text,variant",
        [
            ("Hello, World!", GENERAL),
            ("0123456789", GENERAL),
            ("~{|}`", GENERAL),
            ("HELLO\tWORLD\r\n", UPPER),
            ("x" * 120, GENERAL),
        ],
    )
    def test_weighted_sum(self, text: str, variant: Code128Variant) -> None:
        table = SymbolTable.for_variant(variant)
        expected = (
            table.seed + sum(table.index_of(c) * i for i, c in enumerate(text, 1))
        ) % 103
        assert checksum_index(text, variant) == expected
        symbol = encode(text, variant)
        assert symbol.checksum == expected
        checksum_pattern = symbol.pattern[-13:-7]
        assert checksum_pattern == table.entry_at(expected).pattern

    def test_checksum_selected_by_position_not_character(self) -> None:
        # seed 104 -> value 1, the "!" slot; "1" character would be value 17
        symbol = encode("", GENERAL)
        table = SymbolTable.for_variant(GENERAL)
        assert symbol.pattern[6:12] == table.entry_at(1).pattern
        assert symbol.pattern[6:12] != table.pattern_for("1")

    def test_checksum_uses_folded_text(self) -> None:
        assert checksum_index("abc", UPPER) == checksum_index("ABC", UPPER)


class TestCaseFolding:
    def test_uppercase_variant_folds(self) -> None:
        assert encode("a", UPPER) == encode("A", UPPER)
        assert encode("hello", UPPER).pattern == encode("HELLO", UPPER).pattern

    def test_folded_symbol_keeps_original_text(self) -> None:
        assert encode("abc", UPPER).text == "abc"

    def test_general_variant_does_not_fold(self) -> None:
        assert encode("a", GENERAL) != encode("A", GENERAL)

    def test_fold_text_ascii_only(self) -> None:
        assert fold_text("abc-é", UPPER) == "ABC-é"
        assert fold_text("abc", GENERAL) == "abc"


class TestFailures:
    @pytest.mark.parametrize(
        "text,variant,char,position",
        [
            ("AB\x01", GENERAL, "\x01", 3),
            ("Привет", GENERAL, "П", 1),
            ("OK{", UPPER, "{", 3),
            ("café", UPPER, "é", 4),
        ],
    )
    def test_unsupported_character(
        self, text: str, variant: Code128Variant, char: str, position: int
    ) -> None:
        with pytest.raises(UnsupportedCharacterError) as exc_info:
            encode(text, variant)
        assert exc_info.value.character == char
        assert exc_info.value.position == position
        assert exc_info.value.variant == variant.value

    @patch("src.barcodegen.encoder.logger")
    def test_rejection_is_logged(self, mock_logger: Mock) -> None:
        with pytest.raises(UnsupportedCharacterError):
            encode("A\x00", GENERAL)
        assert mock_logger.warning.call_count == 1
        mock_logger.debug.assert_not_called()

    @pytest.mark.parametrize("variant", ["code39", "codabar", "ean13"])
    def test_unsupported_variant(self, variant: str) -> None:
        with pytest.raises(UnsupportedVariantError):
            encode("ABC", variant)


class TestEncodedSymbol:
    def test_determinism(self) -> None:
        assert encode("Determinism 42", GENERAL) == encode("Determinism 42", GENERAL)

    def test_str_is_pattern(self) -> None:
        symbol = encode(" ", GENERAL)
        assert str(symbol) == symbol.pattern

    def test_module_count(self) -> None:
        assert encode(" ", GENERAL).module_count == 46
        # 11 per symbol + 13 for stop
        assert encode("ABCDE", GENERAL).module_count == 11 * 7 + 13

    def test_frozen(self) -> None:
        symbol = encode("X", GENERAL)
        with pytest.raises(AttributeError):
            symbol.pattern = "1"  # type: ignore[misc]

    def test_starts_and_ends_with_bar(self) -> None:
        symbol = encode("Hello", GENERAL)
        assert len(symbol.pattern) % 2 == 1

    def test_instance_fields(self) -> None:
        symbol = encode("Hi", GENERAL)
        assert isinstance(symbol, EncodedSymbol)
        assert symbol.variant is GENERAL


def test_concurrent_encoding_is_consistent() -> None:
    texts = ["PJJ123C", "hello world", "ABC-123"] * 20
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda t: encode(t, GENERAL).pattern, texts))
    assert results == [encode(t, GENERAL).pattern for t in texts]
