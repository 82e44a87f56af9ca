"""
heartcurve
==========
Samples the classic heart curve and writes it as a filled SVG polyline inside a
minimal HTML page.
"""
from heartcurve.config import APP_VERSION as __version__
from heartcurve.config import RenderConfig
from heartcurve.curves import HeartCurve, ParametricCurve, generate_points
from heartcurve.model.geometry_primitives import BoundingBox
from heartcurve.model.geometry_utils import flip_y
from heartcurve.render import render, render_to_string
from heartcurve.svg import render_html_svg, write_html_svg

__all__ = [
    "__version__",
    "BoundingBox",
    "HeartCurve",
    "ParametricCurve",
    "RenderConfig",
    "flip_y",
    "generate_points",
    "render",
    "render_html_svg",
    "render_to_string",
    "write_html_svg",
]
