"""Rasterization of the Mandelbrot set onto a pixel grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Tuple

import numpy as np

from .colors import BLACK, Color, build_palette
from .escape import escape_count

PixelSink = Callable[[Tuple[float, float], Color], None]


@dataclass(frozen=True)
class Viewport:
    """Half-open rectangle of the complex plane that is rasterized."""

    real_min: float
    real_max: float
    imag_min: float
    imag_max: float

    @property
    def real_range(self) -> tuple[float, float]:
        return self.real_min, self.real_max

    @property
    def imag_range(self) -> tuple[float, float]:
        return self.imag_min, self.imag_max


@dataclass(frozen=True)
class SamplingMetadata:
    """Metadata describing the sampling grid for a rendered frame."""

    real_min: float
    imag_min: float
    real_step: float
    imag_step: float
    width: int
    height: int


def compute_metadata(viewport: Viewport, grid: tuple[int, int]) -> SamplingMetadata:
    width, height = (int(n) for n in grid)

    real_min = np.float64(viewport.real_min)
    imag_min = np.float64(viewport.imag_min)
    real_step = (np.float64(viewport.real_max) - real_min) / width if width > 0 else np.float64(0.0)
    imag_step = (np.float64(viewport.imag_max) - imag_min) / height if height > 0 else np.float64(0.0)

    return SamplingMetadata(
        real_min=float(real_min),
        imag_min=float(imag_min),
        real_step=float(real_step),
        imag_step=float(imag_step),
        width=width,
        height=height,
    )


def pixel_to_complex(metadata: SamplingMetadata, col: int, row: int) -> complex:
    real = metadata.real_min + metadata.real_step * col
    imag = metadata.imag_min + metadata.imag_step * row
    return complex(real, imag)


def render(
    viewport: Viewport,
    grid: tuple[int, int],
    max_iterations: int,
    set_pixel: PixelSink,
    *,
    inside_color: Color = BLACK,
) -> int:
    """Evaluate every pixel of ``grid`` and hand its color to ``set_pixel``.

    Pixels are visited once each in row-major order. ``set_pixel`` receives
    the complex-plane coordinate of the pixel as a ``(real, imag)`` pair, not
    its indices; exceptions it raises abort the render. Returns the number of
    pixels written.
    """

    metadata = compute_metadata(viewport, grid)
    palette = build_palette(max_iterations, inside_color)
    written = 0
    for row in range(metadata.height):
        for col in range(metadata.width):
            c = pixel_to_complex(metadata, col, row)
            count = escape_count(c, max_iterations)
            set_pixel((c.real, c.imag), palette[count])
            written += 1
    return written
