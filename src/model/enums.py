"""
model/enums.py

(Краткое RU: Перечисления для модели штрихкода Code128: варианты набора символов и ориентация.)

EN: Domain enums for the Code128 barcode model (fully type-safe).
NO encoding logic here!

- Only the Code128 variants whose symbol tables are actually implemented.
- Orientation of the bars on the canvas.

See Also:
    - src/barcodegen/symbol_table.py (symbol tables and variant resolution)
"""

from __future__ import annotations

from enum import Enum
from typing import Final, List, Literal


class Code128Variant(str, Enum):
    GENERAL = "code128"  # Start B: printable ASCII incl. lower case
    UPPERCASE_ONLY = "code128a"  # Start A: upper case + control characters

    @property
    def folds_case(self) -> bool:
        return self is Code128Variant.UPPERCASE_ONLY

    @classmethod
    def names(cls) -> List[str]:
        return [member.value for member in cls]

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        names_ru = {
            Code128Variant.GENERAL: "Code 128 (набор B)",
            Code128Variant.UPPERCASE_ONLY: "Code 128A (только заглавные)",
        }
        names_en = {
            Code128Variant.GENERAL: "Code 128 (set B)",
            Code128Variant.UPPERCASE_ONLY: "Code 128A (upper case only)",
        }
        return names_ru[self] if lang == "ru" else names_en[self]


class BarOrientation(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def is_horizontal(self) -> bool:
        return self is BarOrientation.HORIZONTAL

    def localized_name(self, lang: Literal["ru", "en"] = "ru") -> str:
        return (
            "Горизонтальная"
            if self == BarOrientation.HORIZONTAL and lang == "ru"
            else "Вертикальная" if lang == "ru" else self.value.capitalize()
        )


DEFAULT_VARIANT: Final[Code128Variant] = Code128Variant.GENERAL
DEFAULT_ORIENTATION: Final[BarOrientation] = BarOrientation.HORIZONTAL


__all__ = [
    "Code128Variant",
    "BarOrientation",
    "DEFAULT_VARIANT",
    "DEFAULT_ORIENTATION",
]
