"""
Render Pipeline
===============
Generate -> flip y -> write. This is the only place the steps are chained.
"""
from __future__ import annotations

import io
import logging
from typing import Optional, TextIO

from heartcurve.config import RenderConfig
from heartcurve.curves import generate_points
from heartcurve.model.geometry_utils import flip_y
from heartcurve.svg import write_html_svg

logger = logging.getLogger(__name__)


def render(out: TextIO, config: Optional[RenderConfig] = None) -> None:
    """
    Render the heart curve as an HTML/SVG document.

    Args:
        out: Text sink the document is written to.
        config: Render parameters, the default constants if omitted.

    Raises:
        ValueError: If the configuration is invalid.
        OSError: If writing to the sink fails.
    """
    if config is None:
        config = RenderConfig()
    config.validate()

    logger.info(
        f"Rendering heart curve: {config.sample_count} steps, "
        f"{config.width}x{config.height} px."
    )

    points = generate_points(config.sample_count)

    # SVG y axis grows downwards
    points = flip_y(points)

    write_html_svg(
        out,
        points,
        config.width,
        config.height,
        padding=config.padding,
        symmetric_padding=config.symmetric_padding,
        precision=config.precision,
    )


def render_to_string(config: Optional[RenderConfig] = None) -> str:
    buffer = io.StringIO()
    render(buffer, config)
    return buffer.getvalue()
