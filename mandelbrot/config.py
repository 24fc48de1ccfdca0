"""Launch-time constants for a Mandelbrot plot."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple

from .colors import BLACK, WHITE, Color
from .renderer import Viewport


@dataclass(frozen=True)
class PlotConfig:
    """Everything needed to produce one plot; trusted, never validated."""

    output_path: str
    width: int
    height: int
    real_range: Tuple[float, float] = (-2.1, 0.6)
    imag_range: Tuple[float, float] = (-1.2, 1.2)
    max_iterations: int = 100
    margin: int = 20
    x_label_area: int = 10
    y_label_area: int = 10
    background: Color = WHITE
    inside_color: Color = BLACK

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @property
    def viewport(self) -> Viewport:
        return Viewport(
            real_min=float(self.real_range[0]),
            real_max=float(self.real_range[1]),
            imag_min=float(self.imag_range[0]),
            imag_max=float(self.imag_range[1]),
        )


DEFAULT_PLOT_CONFIG = PlotConfig(
    output_path="mandelbrot.png",
    width=1600,
    height=1200,
)


def default_plot_config(**overrides: object) -> PlotConfig:
    """Return the canonical plot config optionally overridden with kwargs."""
    return replace(DEFAULT_PLOT_CONFIG, **overrides)
