import pytest

from src.model.enums import (
    DEFAULT_ORIENTATION,
    DEFAULT_VARIANT,
    BarOrientation,
    Code128Variant,
)


def test_variant_values_and_lookup() -> None:
    assert Code128Variant("code128") is Code128Variant.GENERAL
    assert Code128Variant("code128a") is Code128Variant.UPPERCASE_ONLY
    assert Code128Variant.names() == ["code128", "code128a"]
    with pytest.raises(ValueError):
        Code128Variant("code39")


def test_variant_case_folding_flag() -> None:
    assert Code128Variant.UPPERCASE_ONLY.folds_case
    assert not Code128Variant.GENERAL.folds_case


def test_variant_is_str() -> None:
    assert Code128Variant.GENERAL == "code128"
    assert isinstance(Code128Variant.UPPERCASE_ONLY, str)


@pytest.mark.parametrize("lang", ["ru", "en"])
def test_variant_localization(lang: str) -> None:
    names = {v.localized_name(lang) for v in Code128Variant}  # type: ignore[arg-type]
    assert len(names) == len(Code128Variant)
    assert all("128" in name for name in names)


def test_orientation() -> None:
    assert BarOrientation.HORIZONTAL.is_horizontal
    assert not BarOrientation.VERTICAL.is_horizontal
    assert BarOrientation("vertical") is BarOrientation.VERTICAL
    assert BarOrientation.HORIZONTAL.localized_name("ru") == "Горизонтальная"
    assert BarOrientation.VERTICAL.localized_name("ru") == "Вертикальная"
    assert BarOrientation.VERTICAL.localized_name("en") == "Vertical"


def test_defaults() -> None:
    assert DEFAULT_VARIANT is Code128Variant.GENERAL
    assert DEFAULT_ORIENTATION is BarOrientation.HORIZONTAL
