"""
Canvas size for a Code128 symbol.

Every pattern digit is taken directly as a pixel width, there is no extra
module-to-pixel scaling. The label strip is added by the renderer, not here.
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Optional, Union

from src.barcodegen.config import DEFAULT_LAYOUT_CONFIG, LayoutConfig
from src.barcodegen.encoder import EncodedSymbol
from src.barcodegen.symbol_table import check_pattern
from src.model.enums import BarOrientation

logger = logging.getLogger(__name__)

__all__ = [
    "CanvasSize",
    "pattern_extent",
    "calculate_layout",
]


class CanvasSize(NamedTuple):
    width: int
    height: int


def _pattern_of(symbol: Union[EncodedSymbol, str]) -> str:
    return check_pattern(symbol.pattern if isinstance(symbol, EncodedSymbol) else symbol)


def pattern_extent(
    symbol: Union[EncodedSymbol, str], config: Optional[LayoutConfig] = None
) -> int:
    """Length along the bar axis: margin plus the sum of all pattern digits."""
    cfg = config or DEFAULT_LAYOUT_CONFIG
    return cfg.margin + sum(int(digit) for digit in _pattern_of(symbol))


def calculate_layout(
    symbol: Union[EncodedSymbol, str],
    thickness: int,
    orientation: BarOrientation = BarOrientation.HORIZONTAL,
    config: Optional[LayoutConfig] = None,
) -> CanvasSize:
    """
    Compute (width, height) of the bar area.

    Args:
        symbol: EncodedSymbol or a raw width pattern.
        thickness: Bar length on the orthogonal axis, in pixels.
        orientation: Horizontal puts the extent on the width, vertical on the height.
        config: Layout parameters (margin).

    Example:
        >>> calculate_layout("2112142122222221222331112", 20)
        CanvasSize(width=66, height=20)
    """
    if isinstance(thickness, bool) or not isinstance(thickness, int) or thickness < 1:
        raise ValueError(f"thickness must be a positive integer, got {thickness!r}")
    extent = pattern_extent(symbol, config)
    if BarOrientation(orientation).is_horizontal:
        size = CanvasSize(width=extent, height=thickness)
    else:
        size = CanvasSize(width=thickness, height=extent)
    logger.debug("Layout %s: %dx%d", BarOrientation(orientation).value, *size)
    return size
