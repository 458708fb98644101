"""
barcodegen

Модуль генерации линейных штрихкодов Code128 с типизированным API.

- Два варианта: Code128 (набор B) и Code128A (только заглавные + управляющие символы).
- Контрольный символ по модулю 103, стоп-символ, геометрия полос и размер холста.
- Растеризация в Pillow, PNG-байты, сохранение в файл, HTTP-заголовки для скачивания.

Public API:
    - BarcodeGenerator: кодирование + компоновка + рендеринг (class)
    - SymbolTable: неизменяемая таблица символов варианта (class)
    - encode / EncodedSymbol: кодирование текста в шаблон ширин
    - calculate_layout / CanvasSize: размер холста
    - BarGeometry / Bar: последовательность полос для растеризатора
    - LayoutConfig / LayoutProfile: параметры компоновки
    - BarcodeGenError, UnsupportedCharacterError, UnsupportedVariantError, BarcodeRenderError

Примеры:
    >>> from src.barcodegen import BarcodeGenerator, encode
    >>> encode("PJJ123C", "code128").checksum
    55
    >>> img = BarcodeGenerator("HELLO", "code128a", size=40).render_image()

Зависимости:
    Pillow
"""

from src.barcodegen.barcode_generator import (
    BarcodeGenerator,
    download_headers,
    png_filename,
)
from src.barcodegen.config import DEFAULT_LAYOUT_CONFIG, LayoutConfig, LayoutProfile
from src.barcodegen.encoder import EncodedSymbol, checksum_index, encode
from src.barcodegen.exceptions import (
    BarcodeGenError,
    BarcodeRenderError,
    UnsupportedCharacterError,
    UnsupportedVariantError,
)
from src.barcodegen.geometry import Bar, BarGeometry, iter_bars
from src.barcodegen.layout import CanvasSize, calculate_layout
from src.barcodegen.symbol_table import SymbolEntry, SymbolTable, resolve_variant

__all__ = [
    "BarcodeGenerator",
    "download_headers",
    "png_filename",
    "LayoutConfig",
    "LayoutProfile",
    "DEFAULT_LAYOUT_CONFIG",
    "EncodedSymbol",
    "encode",
    "checksum_index",
    "BarcodeGenError",
    "BarcodeRenderError",
    "UnsupportedCharacterError",
    "UnsupportedVariantError",
    "Bar",
    "BarGeometry",
    "iter_bars",
    "CanvasSize",
    "calculate_layout",
    "SymbolEntry",
    "SymbolTable",
    "resolve_variant",
]
