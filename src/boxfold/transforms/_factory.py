"""This module defines a function for selecting a transformation policy."""

from __future__ import annotations

from typing import TYPE_CHECKING

from boxfold.exceptions import ConfigError

from .boundary_box import BoundaryBoxConstraint
from .empty_transformation import EmptyTransformation

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from .base import TransformationPolicy


def get_transformation(
    lower_bounds: ArrayLike | None = None, upper_bounds: ArrayLike | None = None
) -> TransformationPolicy:
    """Select a transformation policy for the given bounds.

    Without bounds the coordinates are unconstrained, and an
    [`EmptyTransformation`][boxfold.transforms.EmptyTransformation] is
    returned. Otherwise a
    [`BoundaryBoxConstraint`][boxfold.transforms.BoundaryBoxConstraint] is
    constructed from the bounds.

    Args:
        lower_bounds: The lower bounds, or `None`.
        upper_bounds: The upper bounds, or `None`.

    Returns:
        The transformation policy.

    Raises:
        ConfigError: If only one of the bounds is given.
    """
    if lower_bounds is None and upper_bounds is None:
        return EmptyTransformation()
    if lower_bounds is None or upper_bounds is None:
        msg = "Both lower and upper bounds must be given for a box constraint."
        raise ConfigError(msg)
    return BoundaryBoxConstraint(lower_bounds, upper_bounds)
