"""
RU: Таблицы символов Code128 (набор B и набор A) с порядком, совпадающим со стандартом.
EN: Code128 symbol tables (set B "general" and set A "uppercase-only").

The position of an entry in a table is its Code128 symbol value and doubles
as the checksum weight, so the tables are ordered tuples and must never be
reordered. Both variants share one pattern sequence (patterns depend only on
the symbol value) and differ in the labels of values 64..95 and 100..101.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import (
    Final,
    FrozenSet,
    Iterator,
    Mapping,
    NamedTuple,
    Optional,
    Tuple,
    Union,
)

from src.barcodegen.exceptions import UnsupportedCharacterError, UnsupportedVariantError
from src.model.enums import Code128Variant

logger = logging.getLogger(__name__)

__all__ = [
    "SymbolEntry",
    "SymbolTable",
    "CHECKSUM_MODULUS",
    "STOP_PATTERN",
    "UNIMPLEMENTED_SYMBOLOGIES",
    "resolve_variant",
    "pattern_for",
    "index_of",
    "check_pattern",
]

CHECKSUM_MODULUS: Final[int] = 103
STOP_PATTERN: Final[str] = "2331112"

# Names listed as "supported" by legacy generators without any symbol table behind them.
UNIMPLEMENTED_SYMBOLOGIES: Final[FrozenSet[str]] = frozenset(
    {"code25", "code39", "code128b", "codabar"}
)

# Bar/space module widths indexed by symbol value 0..106.
_PATTERNS: Final[Tuple[str, ...]] = (
    "212222", "222122", "222221", "121223", "121322", "131222",
    "122213", "122312", "132212", "221213", "221312", "231212",
    "112232", "122132", "122231", "113222", "123122", "123221",
    "223211", "221132", "221231", "213212", "223112", "312131",
    "311222", "321122", "321221", "312212", "322112", "322211",
    "212123", "212321", "232121", "111323", "131123", "131321",
    "112313", "132113", "132311", "211313", "231113", "231311",
    "112133", "112331", "132131", "113123", "113321", "133121",
    "313121", "211331", "231131", "213113", "213311", "213131",
    "311123", "311321", "331121", "312113", "312311", "332111",
    "314111", "221411", "431111", "111224", "111422", "121124",
    "121421", "141122", "141221", "112214", "112412", "122114",
    "122411", "142112", "142211", "241211", "221114", "413111",
    "241112", "134111", "111242", "121142", "121241", "114212",
    "124112", "124211", "411212", "421112", "421211", "212141",
    "214121", "412121", "111143", "111341", "131141", "114113",
    "114311", "411113", "411311", "113141", "114131", "311141",
    "411131", "211412", "211214", "211232", STOP_PATTERN,
)  # fmt: skip

_CONTROL_MNEMONICS: Final[Tuple[str, ...]] = (
    "NUL", "SOH", "STX", "ETX", "EOT", "ENQ", "ACK", "BEL",
    "BS", "HT", "LF", "VT", "FF", "CR", "SO", "SI",
    "DLE", "DC1", "DC2", "DC3", "DC4", "NAK", "SYN", "ETB",
    "CAN", "EM", "SUB", "ESC", "FS", "GS", "RS", "US",
)  # fmt: skip


def check_pattern(pattern: str) -> str:
    """Return pattern if it is a non-empty string of width digits 1-9."""
    if not pattern or any(digit not in "123456789" for digit in pattern):
        raise ValueError(f"Invalid width pattern: {pattern!r}")
    return pattern


class SymbolEntry(NamedTuple):
    """One Code128 symbol: printable label, width pattern, encoded input character."""

    name: str
    pattern: str
    char: Optional[str]


class _VariantLayout(NamedTuple):
    # (name, char) for values 64..95 and the labels for values 100, 101
    extended: Tuple[Tuple[str, str], ...]
    code_switch: Tuple[str, str]
    start_symbol: str


def _general_extended() -> Tuple[Tuple[str, str], ...]:
    chars = [chr(code) for code in range(96, 128)]
    return tuple(("DEL" if c == "\x7f" else c, c) for c in chars)


def _control_extended() -> Tuple[Tuple[str, str], ...]:
    return tuple((name, chr(code)) for code, name in enumerate(_CONTROL_MNEMONICS))


_LAYOUTS: Final[Mapping[Code128Variant, _VariantLayout]] = MappingProxyType(
    {
        Code128Variant.GENERAL: _VariantLayout(
            extended=_general_extended(),
            code_switch=("FNC 4", "CODE A"),
            start_symbol="Start B",
        ),
        Code128Variant.UPPERCASE_ONLY: _VariantLayout(
            extended=_control_extended(),
            code_switch=("CODE B", "FNC 4"),
            start_symbol="Start A",
        ),
    }
)


def resolve_variant(variant: Union[Code128Variant, str]) -> Code128Variant:
    """
    Resolve a variant from its enum member or symbology name.

    Raises:
        UnsupportedVariantError: for unknown names and for symbologies that are
            advertised by legacy tooling but have no symbol table.
    """
    if isinstance(variant, Code128Variant):
        return variant
    if not isinstance(variant, str):
        raise UnsupportedVariantError(repr(variant), available=Code128Variant.names())
    key = variant.strip().lower()
    for member in Code128Variant:
        if member.value == key:
            return member
    if key in UNIMPLEMENTED_SYMBOLOGIES:
        logger.warning("Symbology %r is declared but not implemented", variant)
    raise UnsupportedVariantError(variant, available=Code128Variant.names())


def _build_entries(layout: _VariantLayout) -> Tuple[SymbolEntry, ...]:
    labels: list[Tuple[str, Optional[str]]] = []
    labels.extend((chr(code), chr(code)) for code in range(32, 96))
    labels.extend(layout.extended)
    labels.extend((name, None) for name in ("FNC 3", "FNC 2", "SHIFT", "CODE C"))
    labels.extend((name, None) for name in layout.code_switch)
    labels.extend(
        (name, None) for name in ("FNC 1", "Start A", "Start B", "Start C", "Stop")
    )
    if len(labels) != len(_PATTERNS):
        raise ValueError(
            f"Symbol table size mismatch: {len(labels)} labels, {len(_PATTERNS)} patterns"
        )
    return tuple(
        SymbolEntry(name, pattern, char)
        for (name, char), pattern in zip(labels, _PATTERNS)
    )


class SymbolTable:
    """
    Immutable, order-significant Code128 symbol table for one variant.

    Use SymbolTable.for_variant() instead of the constructor: tables are
    built once per process and shared.

    Example:
        >>> table = SymbolTable.for_variant(Code128Variant.GENERAL)
        >>> table.pattern_for("A")
        '111323'
        >>> table.index_of("A")
        33
        >>> table.entry_at(1).pattern
        '222122'
    """

    def __init__(self, variant: Code128Variant, layout: _VariantLayout) -> None:
        self._variant = variant
        self._entries = _build_entries(layout)
        self._char_index: Mapping[str, int] = MappingProxyType(
            {e.char: i for i, e in enumerate(self._entries) if e.char is not None}
        )
        self._name_index: Mapping[str, int] = MappingProxyType(
            {e.name: i for i, e in enumerate(self._entries)}
        )
        self._start_index = self._name_index[layout.start_symbol]

    @classmethod
    def for_variant(cls, variant: Union[Code128Variant, str]) -> "SymbolTable":
        return _table_for(resolve_variant(variant))

    @property
    def variant(self) -> Code128Variant:
        return self._variant

    @property
    def entries(self) -> Tuple[SymbolEntry, ...]:
        return self._entries

    @property
    def characters(self) -> FrozenSet[str]:
        return frozenset(self._char_index)

    @property
    def seed(self) -> int:
        """Checksum seed: the symbol value of the variant's start symbol."""
        return self._start_index

    @property
    def start_pattern(self) -> str:
        return self._entries[self._start_index].pattern

    @property
    def stop_pattern(self) -> str:
        return STOP_PATTERN

    def supports(self, char: str) -> bool:
        return char in self._char_index

    def index_of(self, char: str) -> int:
        """Zero-based alphabet position of char (its checksum weight)."""
        try:
            return self._char_index[char]
        except KeyError:
            raise UnsupportedCharacterError(char, self._variant.value) from None

    def pattern_for(self, char: str) -> str:
        return self._entries[self.index_of(char)].pattern

    def entry_at(self, index: int) -> SymbolEntry:
        """Positional lookup, used for the checksum symbol."""
        if not 0 <= index < len(self._entries):
            raise ValueError(
                f"Symbol value {index} out of range 0..{len(self._entries) - 1}"
            )
        return self._entries[index]

    def entry_named(self, name: str) -> SymbolEntry:
        try:
            return self._entries[self._name_index[name]]
        except KeyError:
            raise ValueError(f"No symbol named {name!r} in {self._variant.value}") from None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SymbolEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"SymbolTable({self._variant.value}, {len(self._entries)} symbols)"


@lru_cache(maxsize=None)
def _table_for(variant: Code128Variant) -> SymbolTable:
    logger.debug("Building Code128 symbol table for %s", variant.value)
    return SymbolTable(variant, _LAYOUTS[variant])


def pattern_for(variant: Union[Code128Variant, str], char: str) -> str:
    return SymbolTable.for_variant(variant).pattern_for(char)


def index_of(variant: Union[Code128Variant, str], char: str) -> int:
    return SymbolTable.for_variant(variant).index_of(char)
