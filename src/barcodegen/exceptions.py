"""
Исключения модуля генерации штрихкодов Code128.

Иерархия типизированных исключений: единообразная обработка ошибок
кодирования и рендеринга.

Example:
    >>> from src.barcodegen.exceptions import BarcodeGenError
    >>> try:
    ...     encode("Привет", Code128Variant.GENERAL)
    ... except BarcodeGenError as e:
    ...     logger.error(f"Encoding failed: {e}")

Иерархия:
    BarcodeGenError (базовое)
    ├── UnsupportedCharacterError
    ├── UnsupportedVariantError
    └── BarcodeRenderError
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

__all__: list[str] = [
    "BarcodeGenError",
    "UnsupportedCharacterError",
    "UnsupportedVariantError",
    "BarcodeRenderError",
]


class BarcodeGenError(Exception):
    """
    Базовое исключение для всех ошибок генерации штрихкода.

    Attributes:
        message: Человекочитаемое сообщение об ошибке
        variant: Имя варианта Code128 (опционально)
        context: Дополнительный контекст для отладки (опционально)
    """

    def __init__(
        self,
        message: str,
        *,
        variant: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.variant = variant
        self.context = context or {}

    def __str__(self) -> str:
        """
        Строковое представление исключения.

        Example:
            >>> str(error)
            "UnsupportedCharacterError: Character 'é' is not in the code128 alphabet [variant=code128] (position=3)"
        """
        parts = [self.__class__.__name__, ": ", self.message]

        if self.variant:
            parts.append(f" [variant={self.variant}]")

        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f" ({ctx_str})")

        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"variant={self.variant!r}, "
            f"context={self.context!r})"
        )


class UnsupportedCharacterError(BarcodeGenError):
    """
    Символ отсутствует в алфавите выбранного варианта.

    Raises когда:
    - Текст содержит символ вне таблицы (например, кириллицу)
    - Кодирование при этом не производит частичного результата

    Attributes:
        character: Отсутствующий символ
        position: Позиция символа в тексте (с 1)
    """

    def __init__(
        self,
        character: str,
        variant: str,
        position: Optional[int] = None,
    ) -> None:
        message = f"Character {character!r} is not in the {variant} alphabet"
        context: Dict[str, Any] = {}
        if position is not None:
            context["position"] = position
        super().__init__(message, variant=variant, context=context)
        self.character = character
        self.position = position


class UnsupportedVariantError(BarcodeGenError):
    """
    Запрошен вариант/символика без таблицы символов.

    Attributes:
        name: Запрошенное имя
        available: Список реализованных вариантов
    """

    def __init__(
        self,
        name: str,
        available: Optional[List[str]] = None,
    ) -> None:
        message = f"Barcode variant '{name}' is not supported"
        if available:
            message += f". Available: {', '.join(available)}"
        super().__init__(message, context={"available_count": len(available or [])})
        self.name = name
        self.available = available or []


class BarcodeRenderError(BarcodeGenError):
    """Rasterizing or writing the barcode image failed."""
