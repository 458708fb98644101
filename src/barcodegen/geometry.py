"""
Bar descriptors for the rasterizer.

BarGeometry walks a width pattern and yields one Bar per digit: odd digits
(1-indexed) are black bars, even digits are white spaces. Iteration is lazy
and can be restarted; each iter() starts again from the first digit.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple, Union

from src.barcodegen.config import DEFAULT_LAYOUT_CONFIG
from src.barcodegen.encoder import EncodedSymbol
from src.barcodegen.symbol_table import check_pattern

__all__ = [
    "Bar",
    "BarGeometry",
    "iter_bars",
]


class Bar(NamedTuple):
    offset: int
    width: int
    is_black: bool


class BarGeometry:
    """
    Restartable sequence of bars along the bar axis.

    Example:
        >>> list(BarGeometry("2112"))
        [Bar(offset=10, width=2, is_black=True), Bar(offset=12, width=1, is_black=False),
         Bar(offset=13, width=1, is_black=True), Bar(offset=14, width=2, is_black=False)]
    """

    def __init__(
        self,
        symbol: Union[EncodedSymbol, str],
        start_offset: int = DEFAULT_LAYOUT_CONFIG.quiet_zone,
    ) -> None:
        pattern = check_pattern(
            symbol.pattern if isinstance(symbol, EncodedSymbol) else symbol
        )
        if start_offset < 0:
            raise ValueError("start_offset must be >= 0")
        self._pattern = pattern
        self._start_offset = start_offset

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def total_extent(self) -> int:
        """Offset just past the last bar."""
        return self._start_offset + sum(int(digit) for digit in self._pattern)

    def __iter__(self) -> Iterator[Bar]:
        offset = self._start_offset
        for position, digit in enumerate(self._pattern, start=1):
            width = int(digit)
            yield Bar(offset=offset, width=width, is_black=position % 2 == 1)
            offset += width

    def __len__(self) -> int:
        return len(self._pattern)

    def black_bars(self) -> Iterator[Bar]:
        return (bar for bar in self if bar.is_black)


def iter_bars(
    symbol: Union[EncodedSymbol, str],
    start_offset: int = DEFAULT_LAYOUT_CONFIG.quiet_zone,
) -> Iterator[Bar]:
    return iter(BarGeometry(symbol, start_offset))
