"""Public API for Mandelbrot plotting utilities."""

from .canvas import DrawingSurface, PlottingArea, PresentationError, create_canvas
from .colors import BLACK, WHITE, Color, build_palette, hsl_color, pixel_color
from .config import DEFAULT_PLOT_CONFIG, PlotConfig, default_plot_config
from .escape import ESCAPE_RADIUS, escape_count
from .renderer import SamplingMetadata, Viewport, compute_metadata, pixel_to_complex, render

__all__ = [
    "BLACK",
    "Color",
    "DEFAULT_PLOT_CONFIG",
    "DrawingSurface",
    "ESCAPE_RADIUS",
    "PlotConfig",
    "PlottingArea",
    "PresentationError",
    "SamplingMetadata",
    "Viewport",
    "WHITE",
    "build_palette",
    "compute_metadata",
    "create_canvas",
    "default_plot_config",
    "escape_count",
    "hsl_color",
    "pixel_color",
    "pixel_to_complex",
    "render",
]
