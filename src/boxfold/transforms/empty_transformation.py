"""This module defines the identity transformation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray


class EmptyTransformation:
    """A transformation that leaves coordinates unchanged.

    This policy is meant to be used when the coordinates are not constrained.
    It provides the same methods as
    [`BoundaryBoxConstraint`][boxfold.transforms.BoundaryBoxConstraint], so
    that an optimizer does not need to know whether constraints are active.
    """

    def transform(self, values: ArrayLike) -> NDArray[Any]:
        """Return a copy of the coordinates.

        Args:
            values: Input coordinates.

        Returns:
            A new array with the same values.
        """
        return np.array(values, copy=True)

    def initial_step_size(self) -> float:
        """Return a fixed initial step size of one.

        Returns:
            The initial step size.
        """
        return 1.0

    def inverse(self, values: ArrayLike) -> NDArray[Any]:
        """Return a copy of the coordinates.

        Args:
            values: Input coordinates.

        Returns:
            A new array with the same values.
        """
        return np.array(values, copy=True)
