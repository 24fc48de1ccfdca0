"""Escape-time evaluation of the Mandelbrot recurrence."""

from __future__ import annotations

ESCAPE_RADIUS = 2.0


def escape_count(c: complex, max_iterations: int) -> int:
    """Return how many applications of ``z * z + c`` stay within the escape radius.

    The modulus of ``z`` is tested before each application, starting with the
    seed ``z = 0``. A result of ``max_iterations`` means the orbit never left
    the disc of radius two and the point is treated as inside the set.
    """

    if max_iterations < 0:
        raise ValueError(f"max_iterations must be non-negative, got {max_iterations}")

    z = 0j
    for count in range(max_iterations + 1):
        if abs(z) > ESCAPE_RADIUS:
            return count
        z = z * z + c
    return max_iterations
