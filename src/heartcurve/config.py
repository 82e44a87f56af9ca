"""
Configuration & Constants
=========================
This module holds the fixed constants of the renderer and the dataclass that
carries them into a render call.

Why is this file needed?
------------------------
1. One place: sample count, canvas size and padding are defined once instead of
   being scattered through the generator and the writer.
2. Testing: tests build their own `RenderConfig` to render at other scales,
   while the command-line entry point always uses the defaults.

Exports:
    APP_VERSION (str): Installed package version.
    RenderConfig: Parameters of a single render pass.
"""
from __future__ import annotations

from dataclasses import dataclass
from importlib.metadata import version, PackageNotFoundError

try:
    APP_VERSION = version("heartcurve")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"

# Global Constants
DEFAULT_SAMPLE_COUNT: int = 300
DEFAULT_CANVAS_SIZE: int = 500  # px, used for both width and height
DEFAULT_PADDING: float = 5.0  # curve units around the bounding box
DEFAULT_PRECISION: int = 6  # significant digits of written coordinates


@dataclass(frozen=True)
class RenderConfig:
    """
    Parameters of one render pass.

    Attributes:
        sample_count: Number of parameter steps over [0, 2*pi]. The curve is
            sampled at sample_count + 1 points.
        width: Width of the SVG element in pixels.
        height: Height of the SVG element in pixels.
        padding: Margin added around the bounding box, in curve units.
        symmetric_padding: If True the viewBox extent grows by 2*padding so
            the margin is the same on all sides. The default adds it once,
            which leaves the right and bottom edges tighter.
        precision: Significant digits used when writing coordinates.
    """
    sample_count: int = DEFAULT_SAMPLE_COUNT
    width: int = DEFAULT_CANVAS_SIZE
    height: int = DEFAULT_CANVAS_SIZE
    padding: float = DEFAULT_PADDING
    symmetric_padding: bool = False
    precision: int = DEFAULT_PRECISION

    def validate(self) -> None:
        """
        Check the configuration values.

        Raises:
            ValueError: If any value is out of range.
        """
        if isinstance(self.sample_count, bool) or not isinstance(self.sample_count, int):
            raise ValueError(f"Sample count must be an integer, got {self.sample_count!r}.")
        if self.sample_count <= 0:
            raise ValueError(f"Sample count must be positive, got {self.sample_count}.")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Canvas size must be positive, got {self.width}x{self.height}.")
        if self.padding < 0:
            raise ValueError(f"Padding must not be negative, got {self.padding}.")
        if self.precision < 1:
            raise ValueError(f"Precision must be at least 1, got {self.precision}.")
