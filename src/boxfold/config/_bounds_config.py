"""Configuration class for box bounds."""

from __future__ import annotations

from typing import Self

import numpy as np
from pydantic import ConfigDict, model_validator

from .utils import ImmutableBaseModel, broadcast_arrays
from .validated_types import BoundsArray  # noqa: TC001


class BoundsConfig(ImmutableBaseModel):
    """Configuration class for the bounds of a box constraint.

    The `lower_bounds` and `upper_bounds` fields hold one bound pair per
    (row, column) position. They may be given as scalars, one-dimensional
    sequences (interpreted as a column) or two-dimensional arrays, and are
    broadcast against each other to a common shape. The stored arrays are
    immutable.

    The bounds are checked after broadcasting:

    - All values must be finite.
    - No lower bound may be larger than the corresponding upper bound. Equal
      bounds are allowed and denote a fixed coordinate.

    Attributes:
        lower_bounds: Lower bounds of the box.
        upper_bounds: Upper bounds of the box.
    """

    lower_bounds: BoundsArray
    upper_bounds: BoundsArray

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        extra="forbid",
    )

    @model_validator(mode="after")
    def _broadcast_and_check(self) -> Self:
        self._mutable()

        if self.lower_bounds.size == 0 or self.upper_bounds.size == 0:
            msg = "The bounds must not be empty."
            raise ValueError(msg)

        try:
            lower_bounds, upper_bounds = broadcast_arrays(
                self.lower_bounds, self.upper_bounds
            )
        except ValueError as err:
            msg = "The lower and upper bounds cannot be broadcasted to a common shape."
            raise ValueError(msg) from err

        if not (np.all(np.isfinite(lower_bounds)) and np.all(np.isfinite(upper_bounds))):
            msg = "The bounds must be finite."
            raise ValueError(msg)

        if np.any(lower_bounds > upper_bounds):
            msg = "The lower bounds are larger than the upper bounds."
            raise ValueError(msg)

        self.lower_bounds = lower_bounds
        self.upper_bounds = upper_bounds

        self._immutable()

        return self
