"""Responsive sizing of the two drawing surfaces.

Free of Qt so the sizing rules can be tested without a display.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

SURFACE_WIDTH_RATIO = 0.9
LINEAR_REFERENCE_SIZE = (1200, 350)
LINEAR_MIN_HEIGHT = 300
RADIAL_MAX_SIDE = 600


@dataclass(frozen=True)
class CanvasGeometry:
    width: int
    height: int

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class SurfaceLayout:
    linear: CanvasGeometry
    radial: CanvasGeometry


def compute_layout(container_width: float, responsive: bool = True) -> SurfaceLayout:
    """Compute both surface sizes for a container of the given width.

    Args:
        container_width: Measured width of the containing widget in pixels.
        responsive: When False the surfaces keep their reference sizes
            (1200x350 bars, 600x600 rings) whatever the container does.

    Returns:
        SurfaceLayout with the bars geometry and the (square) rings geometry.
    """
    ref_width, ref_height = LINEAR_REFERENCE_SIZE
    if not responsive:
        return SurfaceLayout(
            CanvasGeometry(ref_width, ref_height),
            CanvasGeometry(RADIAL_MAX_SIDE, RADIAL_MAX_SIDE),
        )

    width = max(0, round(container_width * SURFACE_WIDTH_RATIO))
    # Narrow containers get a 300px floor; wide ones keep the 1200:350 aspect
    linear_height = max(LINEAR_MIN_HEIGHT, round(width * ref_height / ref_width))
    side = min(width, RADIAL_MAX_SIDE)
    return SurfaceLayout(CanvasGeometry(width, linear_height), CanvasGeometry(side, side))


class ResponsiveLayout:
    """Keeps the drawing surfaces sized to their container.

    Surfaces are any objects with a ``set_canvas_geometry(geometry)`` method.
    Every call to apply() derives fresh sizes from the measured width, so
    repeated or re-entrant resize notifications cannot accumulate error.
    """

    def __init__(self, linear_surface=None, radial_surface=None, responsive=True):
        self.linear_surface = linear_surface
        self.radial_surface = radial_surface
        self.responsive = responsive
        self.current = None

    def apply(self, container_width) -> bool:
        """Recompute geometry; returns True when the surfaces were resized."""
        new_layout = compute_layout(container_width, self.responsive)
        if new_layout == self.current:
            return False

        logger.debug("Surface layout for container width %s: %s", container_width, new_layout)
        self.current = new_layout
        if self.linear_surface is not None:
            self.linear_surface.set_canvas_geometry(new_layout.linear)
        if self.radial_surface is not None:
            self.radial_surface.set_canvas_geometry(new_layout.radial)
        return True
