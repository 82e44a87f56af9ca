from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class ParametricCurve(ABC):
    """
    Abstract base class for closed parametric curves in the plane.
    """
    NAME: str = "Parametric Curve"

    DOMAIN: tuple[float, float] = (0.0, 2.0 * np.pi)

    @abstractmethod
    def x(self, t: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        """
        Get the x coordinate at a given parameter.

        Args:
            t: Curve parameter.

        Returns:
            x coordinate at t.
        """
        pass

    @abstractmethod
    def y(self, t: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        """
        Get the y coordinate at a given parameter.

        Args:
            t: Curve parameter.

        Returns:
            y coordinate at t.
        """
        pass

    def parameters(self, sample_count: int) -> npt.NDArray[np.float64]:
        """
        Uniform parameter values covering the whole domain, both ends included.

        Args:
            sample_count: Number of steps over the domain.

        Returns:
            Array of shape (sample_count + 1,).

        Raises:
            ValueError: If sample_count is not a positive integer.
        """
        if isinstance(sample_count, bool) or not isinstance(sample_count, (int, np.integer)):
            raise ValueError(f"Sample count must be an integer, got {sample_count!r}.")
        if sample_count <= 0:
            raise ValueError(f"Sample count must be positive, got {sample_count}.")

        t_start, t_end = self.DOMAIN
        dt = (t_end - t_start) / sample_count
        # Index based, so the count never depends on accumulated rounding
        t = t_start + np.arange(sample_count + 1, dtype=np.float64) * dt
        t[-1] = t_end
        return t

    def sample(self, sample_count: int) -> npt.NDArray[np.float64]:
        """
        Evaluate the curve at uniform parameter steps.

        Args:
            sample_count: Number of steps over the domain.

        Returns:
            An array of shape (sample_count + 1, 2) containing the (x, y)
            coordinates in parameter order. First and last rows coincide for
            a closed curve.
        """
        t = self.parameters(sample_count)
        pts = np.c_[self.x(t), self.y(t)]
        logger.debug(f"Sampled {self.NAME} curve: {pts.shape[0]} points.")
        return pts


class HeartCurve(ParametricCurve):
    """
    Heart curve (http://mathworld.wolfram.com/HeartCurve.html).

    x(t) = 16 sin(t)^3
    y(t) = 13 cos(t) - 5 cos(2t) - 2 cos(3t) - cos(4t)

    The y axis points up, as in the published equation.
    """
    NAME = "Heart"

    def x(self, t: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        return 16.0 * np.sin(t) ** 3

    def y(self, t: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
        return 13.0 * np.cos(t) - 5.0 * np.cos(2.0 * t) - 2.0 * np.cos(3.0 * t) - np.cos(4.0 * t)


def generate_points(
    sample_count: int,
    curve: Optional[ParametricCurve] = None
) -> npt.NDArray[np.float64]:
    """
    Sample a curve (the heart curve by default) into an (N + 1, 2) polyline.

    Args:
        sample_count: Number of steps N over [0, 2*pi].
        curve: Curve to sample, defaults to HeartCurve.

    Returns:
        An array of shape (N + 1, 2) of (x, y) points.

    Raises:
        ValueError: If sample_count is not a positive integer.
    """
    if curve is None:
        curve = HeartCurve()
    return curve.sample(sample_count)
