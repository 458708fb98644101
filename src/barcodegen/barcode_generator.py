from __future__ import annotations

import logging
from io import BytesIO
from pathlib import Path
from typing import Dict, Optional, Union

from PIL import Image, ImageDraw, ImageFont

from src.barcodegen.config import DEFAULT_LAYOUT_CONFIG, LayoutConfig
from src.barcodegen.encoder import EncodedSymbol, encode
from src.barcodegen.exceptions import BarcodeRenderError
from src.barcodegen.geometry import Bar, BarGeometry
from src.barcodegen.layout import CanvasSize, calculate_layout
from src.barcodegen.symbol_table import resolve_variant
from src.model.enums import (
    DEFAULT_ORIENTATION,
    DEFAULT_VARIANT,
    BarOrientation,
    Code128Variant,
)

logger = logging.getLogger(__name__)

__all__ = [
    "BarcodeGenerator",
    "png_filename",
    "download_headers",
]

PNG_SUFFIX = ".png"


def png_filename(filename: str) -> str:
    """Append .png unless the name already ends with it (any case)."""
    if filename.lower().endswith(PNG_SUFFIX):
        return filename
    return filename + PNG_SUFFIX


def download_headers(filename: str = "") -> Dict[str, str]:
    """
    HTTP response headers for sending a rendered barcode as a PNG download.

    Without a filename the image is served inline (no attachment headers).
    """
    headers: Dict[str, str] = {}
    if filename:
        headers["Content-Description"] = "File Transfer"
        headers["Content-Disposition"] = (
            f'attachment; filename="{png_filename(filename)}"'
        )
    headers["Content-Type"] = "image/png"
    headers["Content-Transfer-Encoding"] = "binary"
    headers["Cache-Control"] = "must-revalidate, post-check=0, pre-check=0"
    headers["Expires"] = "0"
    return headers


class BarcodeGenerator:
    """
    Code128 barcode: encode, lay out and rasterize.

    Args:
        text: Payload string
        variant: Code128Variant or its name ("code128", "code128a")
        size: Bar thickness in pixels
        orientation: Horizontal or vertical bar axis
        show_text: Reserve a label strip and draw the payload in it
        config: Layout parameters (margin, label strip, colours)

    Example:
        >>> gen = BarcodeGenerator("PJJ123C")
        >>> gen.encode().checksum
        55
        >>> png = gen.render_bytes()
    """

    def __init__(
        self,
        text: str,
        variant: Union[Code128Variant, str] = DEFAULT_VARIANT,
        size: int = 20,
        orientation: Union[BarOrientation, str] = DEFAULT_ORIENTATION,
        show_text: bool = True,
        config: Optional[LayoutConfig] = None,
    ) -> None:
        if not isinstance(text, str):
            raise TypeError(f"text must be str, got {type(text)!r}")
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise ValueError(f"size must be a positive integer, got {size!r}")
        self.text = text
        self.variant = resolve_variant(variant)
        self.size = size
        self.orientation = BarOrientation(orientation)
        self.show_text = show_text
        self.config = config or DEFAULT_LAYOUT_CONFIG

    def encode(self) -> EncodedSymbol:
        """
        Encode the current payload.

        Not cached: text, variant and the other attributes may be changed
        between calls.

        Raises:
            UnsupportedCharacterError: payload has a character outside the alphabet.
        """
        return encode(self.text, self.variant)

    def _canvas_for(self, symbol: EncodedSymbol) -> CanvasSize:
        return calculate_layout(symbol, self.size, self.orientation, self.config)

    def canvas_size(self) -> CanvasSize:
        """Size of the bar area only."""
        return self._canvas_for(self.encode())

    def _with_label(self, canvas: CanvasSize) -> CanvasSize:
        if self.show_text:
            return CanvasSize(canvas.width, canvas.height + self.config.text_size)
        return canvas

    def image_size(self) -> CanvasSize:
        """Size of the full image: bar area plus the label strip when shown."""
        return self._with_label(self.canvas_size())

    def bars(self) -> BarGeometry:
        return BarGeometry(self.encode(), self.config.quiet_zone)

    def _bar_box(self, bar: Bar, canvas: CanvasSize) -> tuple[int, int, int, int]:
        # Pillow rectangles include both corner pixels
        start, end = bar.offset, bar.offset + bar.width - 1
        if BarOrientation(self.orientation).is_horizontal:
            return (start, 0, end, canvas.height - 1)
        return (0, start, canvas.width - 1, end)

    def _load_font(self) -> Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]:
        font: Union[ImageFont.FreeTypeFont, ImageFont.ImageFont] = (
            ImageFont.load_default()
        )
        try:
            if self.config.font_path:
                font = ImageFont.truetype(self.config.font_path, self.config.font_size)
        except OSError as e:
            logger.warning("Failed to load label font (%r): %r", self.config.font_path, e)
        return font

    def render_image(self) -> Image.Image:
        """
        Rasterize the symbol.

        The label is drawn at (config.text_x, bar-area height). A vertical
        symbol is only `size` pixels wide, so with the default text_x=31 and
        size <= 31 the label falls outside the canvas and the strip stays
        blank; a warning is logged in that case.

        Returns:
            PIL Image (RGB): white canvas, black bars across the full thickness,
            optional label under the bars.

        Raises:
            UnsupportedCharacterError: payload cannot be encoded.
            BarcodeRenderError: Pillow failed to draw the image.
        """
        symbol = self.encode()
        canvas = self._canvas_for(symbol)
        width, height = self._with_label(canvas)
        logger.debug(
            "Rendering %s barcode %dx%d text=%r",
            symbol.variant.value,
            width,
            height,
            symbol.text,
        )
        draw_label = self.show_text and self.config.text_size > 0
        if draw_label and self.config.text_x >= width:
            logger.warning(
                "Label at x=%d is outside the %dpx wide canvas and will not be visible",
                self.config.text_x,
                width,
            )
        try:
            img = Image.new("RGB", (width, height), color=self.config.background)
            draw = ImageDraw.Draw(img)
            for bar in BarGeometry(symbol, self.config.quiet_zone).black_bars():
                draw.rectangle(self._bar_box(bar, canvas), fill=self.config.foreground)
            if draw_label:
                draw.text(
                    (self.config.text_x, canvas.height),
                    symbol.text,
                    font=self._load_font(),
                    fill=self.config.foreground,
                )
        except (OSError, ValueError) as e:
            raise BarcodeRenderError(
                f"Barcode image generation failed: {e}", variant=symbol.variant.value
            ) from e
        return img

    def render_bytes(self) -> bytes:
        img = self.render_image()
        buf = BytesIO()
        try:
            img.save(buf, format="PNG")
        except (OSError, ValueError) as e:
            raise BarcodeRenderError(
                f"PNG encoding failed: {e}",
                variant=resolve_variant(self.variant).value,
            ) from e
        buf.seek(0)
        return buf.read()

    def save(self, filename: Union[str, Path]) -> Path:
        """
        Write the barcode as a PNG file, appending .png to the name if missing.

        Returns:
            Path of the written file.
        """
        path = Path(png_filename(str(filename)))
        data = self.render_bytes()
        try:
            path.write_bytes(data)
        except OSError as e:
            raise BarcodeRenderError(
                f"Cannot write barcode to {path}",
                variant=resolve_variant(self.variant).value,
            ) from e
        logger.info("Barcode saved to %s (%d bytes)", path, len(data))
        return path

    def download_headers(self, filename: str = "") -> Dict[str, str]:
        return download_headers(filename)
