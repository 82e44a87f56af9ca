"""
Geometric Primitives for the SVG viewport.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from heartcurve.model.geometry_utils import as_xy

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class BoundingBox:
    """The minimal axis-aligned rectangle containing a set of points."""
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @classmethod
    def from_points(cls, points: npt.ArrayLike) -> BoundingBox:
        """
        Compute the bounding box of an (N, 2) point array.

        Raises:
            ValueError: If there are no points.
        """
        pts = as_xy(points)
        lo = pts.min(axis=0)
        hi = pts.max(axis=0)
        return cls(xmin=float(lo[0]), xmax=float(hi[0]), ymin=float(lo[1]), ymax=float(hi[1]))

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    def view_box(self, padding: float, symmetric: bool = False) -> tuple[float, float, float, float]:
        """
        SVG viewBox (min-x, min-y, width, height) around this box.

        The origin is shifted by `padding`. Unless `symmetric` is set, the
        extent grows by a single `padding`, so the far edges get no margin of
        their own; this matches the established output of the renderer.

        Args:
            padding: Margin in curve units.
            symmetric: Grow the extent by 2*padding instead.

        Returns:
            Tuple (min_x, min_y, width, height).
        """
        grow = 2.0 * padding if symmetric else padding
        return (
            self.xmin - padding,
            self.ymin - padding,
            self.width + grow,
            self.height + grow,
        )
