"""
Code128 encoder: text -> bar/space width pattern.

The pattern is the concatenation of the start symbol, one symbol per input
character, the modulo-103 checksum symbol and the stop symbol. Every digit is
the width of one bar or space in modules, starting with a bar.

Example:
    >>> encode(" ", Code128Variant.GENERAL).pattern
    '2112142122222221222331112'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Tuple, Union

from src.barcodegen.exceptions import UnsupportedCharacterError
from src.barcodegen.symbol_table import CHECKSUM_MODULUS, SymbolTable
from src.model.enums import Code128Variant

logger = logging.getLogger(__name__)

__all__ = [
    "EncodedSymbol",
    "encode",
    "checksum_index",
    "fold_text",
    "symbol_values",
]


@dataclass(frozen=True)
class EncodedSymbol:
    """
    Result of a single encode call.

    Attributes:
        text: The original input text (before case folding); not part of equality.
        variant: Code128 variant used.
        pattern: Full width pattern, start to stop.
        checksum: Symbol value of the checksum symbol (0..102).
    """

    text: str = field(compare=False)
    variant: Code128Variant
    pattern: str
    checksum: int

    @property
    def module_count(self) -> int:
        """Total width of the symbol in modules."""
        return sum(int(digit) for digit in self.pattern)

    def __str__(self) -> str:
        return self.pattern


def fold_text(text: str, variant: Union[Code128Variant, str]) -> str:
    """Apply the variant's case folding (ASCII a-z only)."""
    table = SymbolTable.for_variant(variant)
    if not table.variant.folds_case:
        return text
    return "".join(c.upper() if "a" <= c <= "z" else c for c in text)


def _symbol_values(text: str, table: SymbolTable) -> List[int]:
    values: List[int] = []
    for position, char in enumerate(text, start=1):
        if not table.supports(char):
            logger.warning(
                "Rejecting %r at position %d for %s", char, position, table.variant.value
            )
            raise UnsupportedCharacterError(char, table.variant.value, position)
        values.append(table.index_of(char))
    return values


def _weighted_checksum(seed: int, values: List[int]) -> int:
    total = seed
    for position, value in enumerate(values, start=1):
        total += value * position
    return total % CHECKSUM_MODULUS


def checksum_index(text: str, variant: Union[Code128Variant, str]) -> int:
    """
    Checksum symbol value: (seed + sum(index_of(c_i) * i)) mod 103.

    Raises:
        UnsupportedCharacterError: if text contains a character outside the alphabet.
    """
    table = SymbolTable.for_variant(variant)
    return _weighted_checksum(table.seed, _symbol_values(fold_text(text, variant), table))


def encode(text: str, variant: Union[Code128Variant, str]) -> EncodedSymbol:
    """
    Encode text into a complete Code128 width pattern.

    All characters are checked before anything is assembled, so a failure
    never leaves a partial pattern behind.

    Args:
        text: Payload. May be empty: the result is then start + checksum + stop.
        variant: Code128Variant or its name ("code128", "code128a").

    Returns:
        EncodedSymbol

    Raises:
        UnsupportedCharacterError: character absent from the variant's alphabet.
        UnsupportedVariantError: unknown or unimplemented variant.
    """
    table = SymbolTable.for_variant(variant)
    values = _symbol_values(fold_text(text, table.variant), table)
    checksum = _weighted_checksum(table.seed, values)

    parts: List[str] = [table.start_pattern]
    parts.extend(table.entry_at(value).pattern for value in values)
    parts.append(table.entry_at(checksum).pattern)
    parts.append(table.stop_pattern)

    symbol = EncodedSymbol(
        text=text,
        variant=table.variant,
        pattern="".join(parts),
        checksum=checksum,
    )
    logger.debug(
        "Encoded %d chars as %s, checksum=%d, modules=%d",
        len(text),
        table.variant.value,
        checksum,
        symbol.module_count,
    )
    return symbol


def symbol_values(text: str, variant: Union[Code128Variant, str]) -> Tuple[int, ...]:
    """Symbol values of the full symbol: start, data, checksum, stop."""
    table = SymbolTable.for_variant(variant)
    values = _symbol_values(fold_text(text, table.variant), table)
    checksum = _weighted_checksum(table.seed, values)
    stop = len(table) - 1
    return (table.seed, *values, checksum, stop)
