"""Bitmap drawing surface that the Mandelbrot renderer writes into."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

import numpy as np
import PIL.Image
import PIL.ImageDraw
import PIL.ImageFont

from .colors import BLACK, Color

# Bias added before flooring so that grid coordinates map back onto the pixel
# they were sampled from despite rounding in the step multiplication.
_MAPPING_EPSILON = 1e-3

_FONT_CANDIDATES = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/usr/share/fonts/truetype/freefont/FreeSans.ttf",
)


class PresentationError(RuntimeError):
    """The image was computed but could not be written to disk."""


def _pil_format_name(ext: str) -> str:
    upper = ext.upper()
    if upper == "JPG":
        return "JPEG"
    if upper == "TIF":
        return "TIFF"
    return upper


def _load_label_font(size: int) -> PIL.ImageFont.ImageFont:
    for path in _FONT_CANDIDATES:
        font_path = Path(path)
        if font_path.exists():
            try:
                return PIL.ImageFont.truetype(str(font_path), size)
            except OSError:
                continue
    return PIL.ImageFont.load_default()


@dataclass
class DrawingSurface:
    """An RGB pixel buffer bound to the file it will be written to."""

    path: Path
    pixels: np.ndarray

    @property
    def size(self) -> Tuple[int, int]:
        height, width = self.pixels.shape[:2]
        return width, height

    def fill(self, color: Color) -> None:
        self.pixels[...] = np.asarray(color, dtype=np.uint8)

    def configure_viewport(
        self,
        real_range: Tuple[float, float],
        imag_range: Tuple[float, float],
        *,
        margin: int = 0,
        x_label_area: int = 0,
        y_label_area: int = 0,
    ) -> "PlottingArea":
        """Reserve margins and label areas and return the drawable region.

        ``y_label_area`` pixels are kept free to the left of the plot and
        ``x_label_area`` pixels below it, in addition to ``margin`` on every
        side.
        """

        width, height = self.size
        left = margin + y_label_area
        top = margin
        plot_width = width - left - margin
        plot_height = height - top - margin - x_label_area
        if plot_width <= 0 or plot_height <= 0:
            raise ValueError(
                f"Margins leave no drawable area on a {width}x{height} canvas "
                f"(margin={margin}, x_label_area={x_label_area}, y_label_area={y_label_area})."
            )

        return PlottingArea(
            surface=self,
            left=left,
            top=top,
            width=plot_width,
            height=plot_height,
            real_range=(float(real_range[0]), float(real_range[1])),
            imag_range=(float(imag_range[0]), float(imag_range[1])),
            x_label_area=x_label_area,
            y_label_area=y_label_area,
            margin=margin,
        )

    def to_image(self) -> PIL.Image.Image:
        return PIL.Image.fromarray(self.pixels)

    def present(self) -> Path:
        """Encode the buffer and write it to ``path``, replacing any existing file."""

        image_format = self.path.suffix.lstrip(".") or "png"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.to_image().save(str(self.path), format=_pil_format_name(image_format))
        except (OSError, ValueError, KeyError) as exc:
            raise PresentationError(
                f"Unable to write result to {self.path}; the image was rendered but not saved: {exc}"
            ) from exc
        return self.path


@dataclass
class PlottingArea:
    """The part of a surface onto which complex-plane coordinates are mapped."""

    surface: DrawingSurface
    left: int
    top: int
    width: int
    height: int
    real_range: Tuple[float, float]
    imag_range: Tuple[float, float]
    x_label_area: int = 0
    y_label_area: int = 0
    margin: int = 0

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    def pixel_range(self) -> Tuple[range, range]:
        return range(self.left, self.right), range(self.top, self.bottom)

    def to_pixel(self, coordinate: Tuple[float, float]) -> Tuple[int, int]:
        real, imag = coordinate
        real_min, real_max = self.real_range
        imag_min, imag_max = self.imag_range

        real_fraction = (np.float64(real) - real_min) / (real_max - real_min)
        imag_fraction = (np.float64(imag) - imag_min) / (imag_max - imag_min)

        col = self.left + int(np.floor(real_fraction * self.width + _MAPPING_EPSILON))
        # The imaginary axis points up.
        row = self.bottom - 1 - int(np.floor(imag_fraction * self.height + _MAPPING_EPSILON))
        return col, row

    def set_pixel(self, coordinate: Tuple[float, float], color: Color) -> None:
        col, row = self.to_pixel(coordinate)
        if self.left <= col < self.right and self.top <= row < self.bottom:
            self.surface.pixels[row, col] = color

    def draw_axes(self, color: Color = BLACK, ticks: int = 6, font_size: int = 12) -> None:
        """Draw the left and bottom axes with tick marks, without mesh lines.

        Tick labels are added only where the label area plus margin can hold
        them.
        """

        image = self.surface.to_image()
        draw = PIL.ImageDraw.Draw(image)
        font = _load_label_font(font_size)

        axis_x = self.left - 1
        axis_y = self.bottom
        if self.y_label_area > 0:
            draw.line([(axis_x, self.top), (axis_x, self.bottom - 1)], fill=color)
        if self.x_label_area > 0:
            draw.line([(self.left, axis_y), (self.right - 1, axis_y)], fill=color)

        if ticks > 1:
            for value in np.linspace(self.real_range[0], self.real_range[1], ticks):
                self._draw_real_tick(draw, font, float(value), color)
            for value in np.linspace(self.imag_range[0], self.imag_range[1], ticks):
                self._draw_imag_tick(draw, font, float(value), color)

        self.surface.pixels[...] = np.asarray(image.convert("RGB"), dtype=np.uint8)

    def _draw_real_tick(self, draw: PIL.ImageDraw.ImageDraw, font, value: float, color: Color) -> None:
        if self.x_label_area <= 0:
            return
        real_min, real_max = self.real_range
        col = self.left + int(round((value - real_min) / (real_max - real_min) * (self.width - 1)))
        tick_length = max(1, min(5, self.x_label_area - 1))
        draw.line([(col, self.bottom), (col, self.bottom + tick_length)], fill=color)

        text = f"{value:.3g}"
        text_left, text_top, text_right, text_bottom = draw.textbbox((0, 0), text, font=font)
        text_width = text_right - text_left
        text_height = text_bottom - text_top
        available = self.x_label_area + self.margin - tick_length - 1
        if text_height > available:
            return
        x = min(max(col - text_width // 2, 0), self.surface.size[0] - text_width)
        draw.text((x, self.bottom + tick_length + 1 - text_top), text, font=font, fill=color)

    def _draw_imag_tick(self, draw: PIL.ImageDraw.ImageDraw, font, value: float, color: Color) -> None:
        if self.y_label_area <= 0:
            return
        imag_min, imag_max = self.imag_range
        row = self.bottom - 1 - int(round((value - imag_min) / (imag_max - imag_min) * (self.height - 1)))
        tick_length = max(1, min(5, self.y_label_area - 1))
        axis_x = self.left - 1
        draw.line([(axis_x - tick_length, row), (axis_x, row)], fill=color)

        text = f"{value:.3g}"
        text_left, text_top, text_right, text_bottom = draw.textbbox((0, 0), text, font=font)
        text_width = text_right - text_left
        text_height = text_bottom - text_top
        available = self.y_label_area + self.margin - tick_length - 2
        if text_width > available:
            return
        x = axis_x - tick_length - 1 - text_width - text_left
        y = min(max(row - text_height // 2 - text_top, 0), self.surface.size[1] - text_height)
        draw.text((x, y), text, font=font, fill=color)


def create_canvas(path: str | Path, size: Tuple[int, int]) -> DrawingSurface:
    """Allocate an RGB backing store of ``size`` (width, height) for ``path``."""

    width, height = (int(n) for n in size)
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}.")
    pixels = np.zeros((height, width, 3), dtype=np.uint8)
    return DrawingSurface(path=Path(path), pixels=pixels)
