import pytest

from src.barcodegen.config import DEFAULT_LAYOUT_CONFIG, LayoutConfig, LayoutProfile


def test_defaults() -> None:
    config = LayoutConfig()
    assert config.margin == 20
    assert config.quiet_zone == 10
    assert config.text_size == 30
    assert config.text_x == 31
    assert config.font_path is None
    assert DEFAULT_LAYOUT_CONFIG == config


def test_profiles() -> None:
    assert LayoutConfig.from_profile(LayoutProfile.STANDARD) == LayoutConfig()
    assert LayoutConfig.from_profile(LayoutProfile.NO_LABEL).text_size == 0


def test_frozen() -> None:
    with pytest.raises(AttributeError):
        DEFAULT_LAYOUT_CONFIG.margin = 0  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs,match",
    [
        ({"margin": -2}, "margin"),
        ({"margin": 5}, "margin"),
        ({"text_size": -1}, "text_size"),
        ({"text_x": -1}, "text_x"),
        ({"font_size": 0}, "font_size"),
    ],
)
def test_validation(kwargs: dict, match: str) -> None:
    with pytest.raises(ValueError, match=match):
        LayoutConfig(**kwargs)


def test_from_mapping_ignores_unknown_keys() -> None:
    config = LayoutConfig.from_mapping(
        {"margin": 40, "background": "#eeeeee", "default_variant": "code128a"}
    )
    assert config.margin == 40
    assert config.quiet_zone == 20
    assert config.background == "#eeeeee"
    assert config.text_size == 30
