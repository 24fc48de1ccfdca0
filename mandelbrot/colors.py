"""Colors used when plotting escape counts."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np
from matplotlib.colors import hsv_to_rgb

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)


def _hsl_to_rgb_array(hues: np.ndarray, saturation: float, lightness: float) -> np.ndarray:
    """Convert an array of hues at fixed saturation and lightness to 8-bit RGB rows."""

    hues = np.asarray(hues, dtype=np.float64) % 1.0
    # HSL -> HSV: v = l + s * min(l, 1 - l), s_v = 2 * (1 - l / v)
    value = lightness + saturation * min(lightness, 1.0 - lightness)
    hsv_saturation = 0.0 if value == 0.0 else 2.0 * (1.0 - lightness / value)
    hsv = np.stack(
        (hues, np.full_like(hues, hsv_saturation), np.full_like(hues, value)),
        axis=-1,
    )
    return np.uint8(np.clip(np.round(hsv_to_rgb(hsv) * 255), 0, 255))


def hsl_color(hue: float, saturation: float = 1.0, lightness: float = 0.5) -> Color:
    """Convert an HSL triple with components in ``[0, 1]`` to 8-bit RGB."""

    r, g, b = _hsl_to_rgb_array(np.array([hue]), saturation, lightness)[0]
    return int(r), int(g), int(b)


def build_palette(max_iterations: int, inside_color: Color = BLACK) -> List[Color]:
    """Return the color of every escape count in ``[0, max_iterations]``.

    Entry ``n`` is the hue ``n / max_iterations``; the last entry is
    ``inside_color``.
    """

    palette: List[Color] = []
    if max_iterations > 0:
        counts = np.arange(max_iterations, dtype=np.float64)
        rgb = _hsl_to_rgb_array(counts / max_iterations, 1.0, 0.5)
        palette.extend((int(r), int(g), int(b)) for r, g, b in rgb)
    palette.append(inside_color)
    return palette


def pixel_color(count: int, max_iterations: int, inside_color: Color = BLACK) -> Color:
    if count >= max_iterations:
        return inside_color
    return hsl_color(count / max_iterations)
