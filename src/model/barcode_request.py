# RU: Входные параметры одной операции кодирования штрихкода (неизменяемые), с валидацией и сериализацией.
# EN: Immutable input of a single barcode encode/render operation, with fail-fast validation and dict round trip.

import logging
from dataclasses import asdict, dataclass
from typing import Any, ClassVar, Dict, Mapping, Optional, Union

from src.barcodegen.barcode_generator import BarcodeGenerator
from src.barcodegen.config import LayoutConfig
from src.barcodegen.encoder import EncodedSymbol, encode
from src.barcodegen.symbol_table import resolve_variant
from src.model.enums import (
    DEFAULT_ORIENTATION,
    DEFAULT_VARIANT,
    BarOrientation,
    Code128Variant,
)

logger = logging.getLogger(__name__)

DEFAULT_SIZE: int = 20


@dataclass(frozen=True)
class EncodingRequest:
    """
    Domain-level request for one Code128 symbol.

    - text: payload to encode
    - variant: Code128Variant or its name ("code128", "code128a")
    - size: bar thickness in pixels (orthogonal to the bar axis)
    - orientation: horizontal or vertical bars axis
    - show_text: draw the payload under the bars

    Names are normalised on construction: unknown variants raise
    UnsupportedVariantError, a non-positive size raises ValueError.

    Examples:
        req = EncodingRequest(text="PJJ123C")
        req2 = EncodingRequest.from_dict(req.to_dict())
        assert req == req2
    """

    schema_version: ClassVar[str] = "1.0"

    text: str = ""
    variant: Union[Code128Variant, str] = DEFAULT_VARIANT
    size: int = DEFAULT_SIZE
    orientation: Union[BarOrientation, str] = DEFAULT_ORIENTATION
    show_text: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise ValueError(f"Text must be a string, got {type(self.text).__name__}")
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size < 1:
            raise ValueError(f"Invalid size: {self.size!r}")
        try:
            orientation = BarOrientation(self.orientation)
        except ValueError:
            raise ValueError(f"Invalid orientation: {self.orientation!r}") from None
        # frozen: normalised values are written through object.__setattr__
        object.__setattr__(self, "variant", resolve_variant(self.variant))
        object.__setattr__(self, "orientation", orientation)
        object.__setattr__(self, "show_text", bool(self.show_text))

    @property
    def is_horizontal(self) -> bool:
        return BarOrientation(self.orientation).is_horizontal

    def encode(self) -> EncodedSymbol:
        return encode(self.text, self.variant)

    def get_renderer(self, config: Optional[LayoutConfig] = None) -> BarcodeGenerator:
        """Returns the generator that renders this request."""
        return BarcodeGenerator(
            self.text,
            variant=self.variant,
            size=self.size,
            orientation=self.orientation,
            show_text=self.show_text,
            config=config,
        )

    def to_dict(self) -> Dict[str, Any]:
        dct: Dict[str, Any] = asdict(self)
        dct["variant"] = Code128Variant(self.variant).value
        dct["orientation"] = BarOrientation(self.orientation).value
        dct["schema_version"] = self.schema_version
        return dct

    @classmethod
    def from_config(cls, text: str, config: Mapping[str, Any]) -> "EncodingRequest":
        """Request for text using the default_* keys of a loaded config dict."""
        return cls(
            text=text,
            variant=config.get("default_variant", DEFAULT_VARIANT),
            size=config.get("default_size", DEFAULT_SIZE),
            orientation=config.get("default_orientation", DEFAULT_ORIENTATION),
            show_text=config.get("show_text", True),
        )

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "EncodingRequest":
        d = dict(d)
        if "schema_version" in d and d["schema_version"] != cls.schema_version:
            logger.warning(
                "Schema version mismatch (expected %s, got %s)",
                cls.schema_version,
                d["schema_version"],
            )
        d.pop("schema_version", None)
        return cls(**d)

    def __str__(self) -> str:
        datashow: str = self.text[:16] + ("..." if len(self.text) > 16 else "")
        return f"EncodingRequest({Code128Variant(self.variant).value}, text={datashow})"
