"""This module defines the boundary box transformation."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from boxfold.config import BoundsConfig
from boxfold.config.utils import as_matrix

logger = logging.getLogger(__name__)

STEP_SIZE_FACTOR = 0.3


class BoundaryBoxConstraint:
    r"""Map coordinates into a box bounded by lower and upper bounds.

    The transformation maps each coordinate $x$ independently into the
    interval $[l, u]$ given by its lower and upper bound. It is the identity
    well inside the box, and smoothly compresses values approaching the
    bounds. Values outside the box are folded back into it, so that the
    optimizer can search the unconstrained space while every evaluated point
    is feasible.

    With the half-width $d = (u - l) / 2$, two margins are defined:

    $$
    a_l = \min\left(d, \frac{1 + |l|}{20}\right), \quad
    a_u = \min\left(d, \frac{1 + |u|}{20}\right)
    $$

    A coordinate is first shifted by a whole number of periods
    $r = 2 (2 d + a_l + a_u)$ into the interval
    $[l - 2 a_l - d, u + 2 a_u + d]$, then mirrored into the preimage
    $[l - a_l, u + a_u]$. Finally, within the margins the value is mapped
    onto the box by a parabola:

    $$
    y = \begin{cases}
        l + \frac{(x - l + a_l)^2}{4 a_l} & \text{if $x < l + a_l$}, \\
        u - \frac{(x - u - a_u)^2}{4 a_u} & \text{if $x > u - a_u$}, \\
        x & \text{otherwise}
    \end{cases}
    $$

    The parabola and its derivative match the identity at the inner edge of
    each margin. A coordinate with equal lower and upper bounds is fixed at
    that value.

    Bounds are stored as two-dimensional arrays. When the coordinate array
    has more rows or columns than the bounds, the last row or column of the
    bounds is used for the remaining positions. A scalar bound therefore
    applies to all coordinates, and a vector of bounds applies to each column
    of a coordinate matrix.

    The algorithm follows the boundary transformation of N. Hansen's C
    implementation of CMA-ES.
    """

    def __init__(self, lower_bounds: ArrayLike, upper_bounds: ArrayLike) -> None:
        """Initialize the boundary box transformation.

        The bounds may be scalars, one-dimensional (interpreted as a column)
        or two-dimensional, and are broadcast against each other.

        Args:
            lower_bounds: The lower bounds of the coordinates.
            upper_bounds: The upper bounds of the coordinates.

        Raises:
            pydantic.ValidationError: If the bounds are not finite, cannot be
                broadcast, or if a lower bound exceeds its upper bound.
        """
        self._bounds = BoundsConfig(
            lower_bounds=lower_bounds, upper_bounds=upper_bounds
        )
        fixed = np.count_nonzero(self._bounds.lower_bounds == self._bounds.upper_bounds)
        if fixed > 0:
            logger.debug("Box constraint has %d fixed coordinate(s)", fixed)

    @property
    def lower_bounds(self) -> NDArray[np.float64]:
        """The immutable lower bounds."""
        return self._bounds.lower_bounds

    @property
    def upper_bounds(self) -> NDArray[np.float64]:
        """The immutable upper bounds."""
        return self._bounds.upper_bounds

    def with_bounds(
        self,
        lower_bounds: ArrayLike | None = None,
        upper_bounds: ArrayLike | None = None,
    ) -> BoundaryBoxConstraint:
        """Create a new transformation with some or all bounds replaced.

        The current object is not modified.

        Args:
            lower_bounds: The new lower bounds, if not `None`.
            upper_bounds: The new upper bounds, if not `None`.

        Returns:
            A new boundary box transformation.
        """
        return BoundaryBoxConstraint(
            self.lower_bounds if lower_bounds is None else lower_bounds,
            self.upper_bounds if upper_bounds is None else upper_bounds,
        )

    def margins(self) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Return the widths of the smoothing margins at the bounds.

        The preimage of the box is the interval
        `[lower_bounds - al, upper_bounds + au]`.

        Returns:
            The margins `al` and `au` at the lower and upper bounds.
        """
        _, lower_margins, upper_margins = _margins(self.lower_bounds, self.upper_bounds)
        return lower_margins, upper_margins

    def transform(self, values: ArrayLike) -> NDArray[Any]:
        """Map coordinates into the box.

        The input may be a scalar, a vector (interpreted as a column) or a
        matrix. A new array is returned with the same shape, and the same
        floating point type if the input has one.

        Args:
            values: The coordinates to transform.

        Returns:
            The transformed coordinates.
        """
        array = np.asarray(values)
        y = as_matrix(array).astype(np.float64)
        lower, upper = self._resolve_bounds(y.shape)
        diff, al, au = _margins(lower, upper)
        fixed = diff == 0

        # Shift into [xlow, xup] by a whole number of periods.
        xlow = lower - 2 * al - diff
        xup = upper + 2 * au + diff
        period = 2 * (2 * diff + al + au)
        safe_period = np.where(fixed, 1.0, period)
        # fmod is exact, so huge values do not overflow.
        offset = np.fmod(y - xlow, safe_period)
        offset = np.where(offset < 0, offset + safe_period, offset)
        y = np.where((y < xlow) | (y > xup), xlow + offset, y)

        # Mirror into the preimage.
        y = np.where(y < lower - al, 2 * (lower - al) - y, y)
        y = np.where(y > upper + au, 2 * (upper + au) - y, y)

        near_lower = y < lower + al
        near_upper = ~near_lower & (y > upper - au)
        y = np.where(near_lower, lower + _ease(y - (lower - al), al), y)
        y = np.where(near_upper, upper - _ease(y - (upper + au), au), y)

        y = np.where(fixed, lower, np.clip(y, lower, upper))
        return y.reshape(array.shape).astype(_result_dtype(array), copy=False)

    def inverse(self, values: ArrayLike) -> NDArray[Any]:
        """Map coordinates in the box back to the preimage.

        The preimage is bounded by `[lower_bounds - al, upper_bounds + au]`,
        where `al` and `au` are the margins returned by
        [`margins`][boxfold.transforms.BoundaryBoxConstraint.margins]. For
        coordinates `y` inside the box, `transform(inverse(y))` reproduces
        `y`, and for `x` inside the preimage `inverse(transform(x))`
        reproduces `x`.

        Args:
            values: The coordinates to map back.

        Returns:
            The coordinates in the preimage.
        """
        array = np.asarray(values)
        y = as_matrix(array).astype(np.float64)
        lower, upper = self._resolve_bounds(y.shape)
        diff, al, au = _margins(lower, upper)

        near_lower = y < lower + al
        near_upper = ~near_lower & (y > upper - au)
        x = np.where(near_lower, lower - al + 2 * np.sqrt(np.abs(al * (y - lower))), y)
        x = np.where(near_upper, upper + au - 2 * np.sqrt(np.abs(au * (upper - y))), x)

        x = np.where(diff == 0, lower, x)
        return x.reshape(array.shape).astype(_result_dtype(array), copy=False)

    def initial_step_size(self) -> float:
        """Return a suitable initial step size.

        The step size is a fraction of the smallest width of the box. A fixed
        coordinate has zero width, and yields a zero step size.

        Returns:
            The initial step size.
        """
        return float(STEP_SIZE_FACTOR * np.min(self.upper_bounds - self.lower_bounds))

    def _resolve_bounds(
        self, shape: tuple[int, ...]
    ) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        rows, cols = self.lower_bounds.shape
        index = np.ix_(
            np.minimum(np.arange(shape[0]), rows - 1),
            np.minimum(np.arange(shape[1]), cols - 1),
        )
        return self.lower_bounds[index], self.upper_bounds[index]


def _margins(
    lower: NDArray[np.float64], upper: NDArray[np.float64]
) -> tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    diff = (upper - lower) / 2.0
    al = np.minimum(diff, (1.0 + np.abs(lower)) / 20.0)
    au = np.minimum(diff, (1.0 + np.abs(upper)) / 20.0)
    return diff, al, au


def _ease(
    distance: NDArray[np.float64], margin: NDArray[np.float64]
) -> NDArray[np.float64]:
    # Zero margins only occur for fixed coordinates.
    return np.divide(
        distance * distance,
        4.0 * margin,
        out=np.zeros_like(distance),
        where=margin > 0,
    )


def _result_dtype(array: NDArray[Any]) -> np.dtype[Any]:
    if np.issubdtype(array.dtype, np.floating):
        return array.dtype
    return np.dtype(np.float64)
