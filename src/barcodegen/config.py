# -*- coding: utf-8 -*-
"""
RU: Параметры компоновки штрихкода (поля, подпись) с предопределёнными профилями.
EN: Barcode layout parameters (quiet margin, label area) with predefined profiles.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Final, Mapping, Optional


class LayoutProfile(str, Enum):
    """Predefined layout profiles."""

    # 20px margin, 30px label strip under the bars
    STANDARD = "standard"

    # Bars only, no room reserved for the label
    NO_LABEL = "no_label"


@dataclass(frozen=True)
class LayoutConfig:
    """
    Layout configuration for rendering.

    Attributes:
        margin: Total blank border along the bar axis, split evenly between both ends.
        text_size: Height of the label strip added under the bars.
        text_x: Horizontal offset of the label text.
        font_path: Optional TrueType font for the label (Pillow default font otherwise).
        font_size: Label font size, used only with font_path.
        foreground: Bar and text colour.
        background: Canvas colour.

    Examples:
        >>> config = LayoutConfig.from_profile(LayoutProfile.STANDARD)
        >>> config.margin
        20

        >>> LayoutConfig(margin=40).quiet_zone
        20
    """

    margin: int = 20
    text_size: int = 30
    text_x: int = 31
    font_path: Optional[str] = None
    font_size: int = 14
    foreground: str = "black"
    background: str = "white"

    def __post_init__(self) -> None:
        """Validate parameters."""
        if self.margin < 0 or self.margin % 2 != 0:
            raise ValueError("margin must be a non-negative even number")
        if self.text_size < 0:
            raise ValueError("text_size must be >= 0")
        if self.text_x < 0:
            raise ValueError("text_x must be >= 0")
        if self.font_size < 1:
            raise ValueError("font_size must be >= 1")

    @property
    def quiet_zone(self) -> int:
        """Blank border at each end of the symbol."""
        return self.margin // 2

    @staticmethod
    def from_profile(profile: LayoutProfile) -> "LayoutConfig":
        """
        Create configuration from predefined profile.

        Args:
            profile: Layout profile.

        Returns:
            LayoutConfig instance.
        """
        return _PROFILE_PARAMS[profile]

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "LayoutConfig":
        """
        Build a configuration from a loaded config dict; unknown keys are ignored.

        Examples:
            >>> LayoutConfig.from_mapping({"margin": 40, "ui_theme": "dark"}).margin
            40
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in values.items() if k in known})


_PROFILE_PARAMS: Final[dict[LayoutProfile, LayoutConfig]] = {
    LayoutProfile.STANDARD: LayoutConfig(),
    LayoutProfile.NO_LABEL: LayoutConfig(text_size=0),
}

DEFAULT_LAYOUT_CONFIG: Final[LayoutConfig] = _PROFILE_PARAMS[LayoutProfile.STANDARD]


__all__ = [
    "LayoutProfile",
    "LayoutConfig",
    "DEFAULT_LAYOUT_CONFIG",
]
