from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt


def as_xy(points: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """
    Coerce a sequence of (x, y) pairs into an (N, 2) float array.

    Args:
        points: List of (x, y) tuples or (N, 2) array of points.

    Returns:
        (N, 2) array of points.

    Raises:
        ValueError: If the input is not of shape (N, 2) or holds no points.
    """
    arr = np.asarray(points, dtype=np.float64)

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected shape (N, 2), got {arr.shape}.")

    if arr.shape[0] == 0:
        raise ValueError("Expected at least one point, got none.")

    return arr


def flip_y(points: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """
    Negate every y coordinate.

    The curve is defined with y growing upwards while SVG y grows downwards.
    Returns a new array; the input is left untouched.
    """
    flipped = as_xy(points).copy()
    flipped[:, 1] = -flipped[:, 1]
    return flipped
