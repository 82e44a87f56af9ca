"""
HTML/SVG Writer
Writes a point sequence as a filled SVG polyline wrapped in a minimal HTML page.
"""
from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING, TextIO

from heartcurve.config import DEFAULT_PADDING, DEFAULT_PRECISION
from heartcurve.model.geometry_primitives import BoundingBox
from heartcurve.model.geometry_utils import as_xy

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

POLYLINE_STYLE = "fill:red;stroke:none;"


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Format a coordinate with `precision` significant digits (%g style)."""
    text = f"{float(value):.{precision}g}"
    # -0 and 0 are the same coordinate
    return "0" if text == "-0" else text


def format_points(points: npt.ArrayLike, precision: int = DEFAULT_PRECISION) -> str:
    """
    Render points as an SVG `points` attribute value.

    Every pair is written as "x,y" followed by a single space, in sequence
    order, e.g. "0,-5 0.1,-5.2 ".
    """
    pts = as_xy(points)
    return "".join(
        f"{format_number(x, precision)},{format_number(y, precision)} " for x, y in pts
    )


def write_html_svg(
    out: TextIO,
    points: npt.ArrayLike,
    width: int,
    height: int,
    padding: float = DEFAULT_PADDING,
    symmetric_padding: bool = False,
    precision: int = DEFAULT_PRECISION,
) -> None:
    """
    Write an HTML document with the points drawn as a filled red polyline.

    The SVG viewBox is fitted to the bounding box of the points so the shape
    fills the width x height pixel area.

    Args:
        out: Text sink the document is written to.
        points: (N, 2) array or sequence of (x, y) pairs, N >= 1.
        width: SVG width in pixels.
        height: SVG height in pixels.
        padding: Margin around the bounding box in curve units.
        symmetric_padding: See BoundingBox.view_box.
        precision: Significant digits of written numbers.

    Raises:
        ValueError: If points is empty or not a sequence of pairs.
        OSError: If writing to the sink fails.
    """
    pts = as_xy(points)
    bbox = BoundingBox.from_points(pts)
    view_box = " ".join(
        format_number(v, precision) for v in bbox.view_box(padding, symmetric=symmetric_padding)
    )
    logger.debug(f"Bounding box {bbox}, viewBox '{view_box}'.")

    try:
        # HTML boilerplate
        out.write("<!DOCTYPE html>\n<html>\n<body>\n\n")

        out.write(f'<svg height="{height}" width="{width}" viewBox="{view_box}">\n')
        out.write(f'<polyline points="{format_points(pts, precision)}" style="{POLYLINE_STYLE}" />\n')
        out.write("</svg>\n")

        out.write("\n</body>\n</html>\n")
    except OSError as e:
        logger.exception(f"Failed to write SVG document: {e}")
        raise

    logger.debug(f"Wrote polyline with {pts.shape[0]} points.")


def render_html_svg(
    points: npt.ArrayLike,
    width: int,
    height: int,
    padding: float = DEFAULT_PADDING,
    symmetric_padding: bool = False,
    precision: int = DEFAULT_PRECISION,
) -> str:
    """Same as write_html_svg, but return the document as a string."""
    buffer = io.StringIO()
    write_html_svg(
        buffer,
        points,
        width,
        height,
        padding=padding,
        symmetric_padding=symmetric_padding,
        precision=precision,
    )
    return buffer.getvalue()
