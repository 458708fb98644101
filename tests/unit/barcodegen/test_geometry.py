import pytest

from src.barcodegen.encoder import encode
from src.barcodegen.geometry import Bar, BarGeometry, iter_bars
from src.model.enums import Code128Variant

SPACE_PATTERN = "2112142122222221222331112"


@pytest.fixture
def space_geometry() -> BarGeometry:
    return BarGeometry(encode(" ", Code128Variant.GENERAL))


def test_first_bars(space_geometry: BarGeometry) -> None:
    assert list(space_geometry)[:6] == [
        Bar(10, 2, True),
        Bar(12, 1, False),
        Bar(13, 1, True),
        Bar(14, 2, False),
        Bar(16, 1, True),
        Bar(17, 4, False),
    ]


def test_counts(space_geometry: BarGeometry) -> None:
    bars = list(space_geometry)
    assert len(bars) == len(space_geometry) == 25
    assert len(list(space_geometry.black_bars())) == 13
    assert bars[0].is_black and bars[-1].is_black


def test_total_extent(space_geometry: BarGeometry) -> None:
    assert space_geometry.total_extent == 56
    last = list(space_geometry)[-1]
    assert last.offset + last.width == space_geometry.total_extent


def test_bars_are_contiguous(space_geometry: BarGeometry) -> None:
    bars = list(space_geometry)
    for prev, cur in zip(bars, bars[1:]):
        assert cur.offset == prev.offset + prev.width
        assert cur.is_black != prev.is_black


def test_restartable(space_geometry: BarGeometry) -> None:
    assert list(space_geometry) == list(space_geometry)


def test_raw_pattern_and_offset() -> None:
    geometry = BarGeometry("2112", start_offset=0)
    assert geometry.pattern == "2112"
    assert list(geometry) == [
        Bar(0, 2, True),
        Bar(2, 1, False),
        Bar(3, 1, True),
        Bar(4, 2, False),
    ]


def test_iter_bars_matches_geometry() -> None:
    assert list(iter_bars(SPACE_PATTERN)) == list(BarGeometry(SPACE_PATTERN))


def test_invalid_start_offset() -> None:
    with pytest.raises(ValueError, match="start_offset"):
        BarGeometry(SPACE_PATTERN, start_offset=-1)


@pytest.mark.parametrize("pattern", ["", "210", "abc"])
def test_invalid_pattern(pattern: str) -> None:
    with pytest.raises(ValueError, match="Invalid width pattern"):
        BarGeometry(pattern)
