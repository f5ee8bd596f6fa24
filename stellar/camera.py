#!/usr/bin/env python3
"""
Camera utilities for the top-down world-to-screen transform.

The viewer looks straight down the world y axis, so world x maps to screen x
and world z maps to screen y. Height above the plane is simply dropped.
"""
from typing import Iterable, Optional, Sequence, Tuple

from .constants import (
    DEFAULT_UNITS_PER_PIXEL,
    MAX_MASS,
    MAX_STAR_SIZE,
    MAX_UNITS_PER_PIXEL,
    MAX_ZOOM_FACTOR,
    MIN_UNITS_PER_PIXEL,
    MIN_ZOOM_FACTOR,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from .vector_utils import clamp

Point = Sequence[float]


def marker_radius(mass: float, max_mass: float = MAX_MASS, max_size: float = MAX_STAR_SIZE) -> float:
    """Marker radius in world units: cube root of the mass ratio, at least 1."""
    return max((mass / max_mass) ** (1.0 / 3.0) * max_size, 1.0)


class Camera2D:
    """
    Top-down camera: world (x, z) to screen pixels.

    `center` is the world (x, z) under the middle of the viewport and `upp` is
    world units per pixel. Points may be any 3-sequence or a Vector3.
    """

    def __init__(self, center=(0.0, 0.0), units_per_pixel=DEFAULT_UNITS_PER_PIXEL):
        self.center = [float(center[0]), float(center[1])]
        self.upp = units_per_pixel
        self.viewport_size = (VIEW_WIDTH, VIEW_HEIGHT)

    def set_viewport_size(self, w: int, h: int) -> None:
        self.viewport_size = (w, h)

    @staticmethod
    def _plane(pos: Point) -> Tuple[float, float]:
        x, _height, z = pos
        return x, z

    def _middle(self) -> Tuple[float, float]:
        return self.viewport_size[0] / 2, self.viewport_size[1] / 2

    def world_to_screen(self, pos: Point) -> Tuple[int, int]:
        x, z = self._plane(pos)
        mid_x, mid_y = self._middle()
        return (int((x - self.center[0]) / self.upp + mid_x),
                int((z - self.center[1]) / self.upp + mid_y))

    def screen_to_world(self, screen: Tuple[int, int]) -> Tuple[float, float]:
        """Inverse of world_to_screen on the (x, z) plane."""
        mid_x, mid_y = self._middle()
        return (self.center[0] + (screen[0] - mid_x) * self.upp,
                self.center[1] + (screen[1] - mid_y) * self.upp)

    def zoom(self, factor: float, pivot_screen: Optional[Tuple[int, int]] = None) -> None:
        """Magnify by factor; the world point under pivot_screen stays put."""
        factor = clamp(factor, MIN_ZOOM_FACTOR, MAX_ZOOM_FACTOR)
        upp = clamp(self.upp / factor, MIN_UNITS_PER_PIXEL, MAX_UNITS_PER_PIXEL)
        if pivot_screen is not None:
            wx, wz = self.screen_to_world(pivot_screen)
            mid_x, mid_y = self._middle()
            self.center = [wx - (pivot_screen[0] - mid_x) * upp,
                           wz - (pivot_screen[1] - mid_y) * upp]
        self.upp = upp

    def pan_pixels(self, dx_pixels: float, dy_pixels: float) -> None:
        """Drag the view: content moves with the pointer."""
        self.center = [self.center[0] - dx_pixels * self.upp,
                       self.center[1] - dy_pixels * self.upp]

    def fit_points(self, points: Iterable[Point], margin: float = 1.3) -> None:
        """Center on the points and zoom so they fit the viewport with a margin."""
        projected = [self._plane(p) for p in points]
        if not projected:
            self.center = [0.0, 0.0]
            self.upp = DEFAULT_UNITS_PER_PIXEL
            return
        xs = [x for x, _ in projected]
        zs = [z for _, z in projected]
        span_x = (max(xs) - min(xs)) * margin + 1.0
        span_z = (max(zs) - min(zs)) * margin + 1.0
        w, h = self.viewport_size
        self.center = [(min(xs) + max(xs)) / 2, (min(zs) + max(zs)) / 2]
        self.upp = clamp(max(span_x / max(w, 1), span_z / max(h, 1)),
                         MIN_UNITS_PER_PIXEL, MAX_UNITS_PER_PIXEL)
