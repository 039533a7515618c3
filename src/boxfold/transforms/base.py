"""This module defines the protocols followed by transformation policies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import ArrayLike, NDArray


@runtime_checkable
class TransformationPolicy(Protocol):
    """Protocol for transformation policies.

    An optimizer holds a single transformation policy. It calls
    [`initial_step_size`][boxfold.transforms.base.TransformationPolicy.initial_step_size]
    once during setup to seed its mutation scale, and then calls
    [`transform`][boxfold.transforms.base.TransformationPolicy.transform] on
    every candidate point, immediately before evaluating the objective
    function on the result. A policy never calls back into the optimizer.

    Policies do not share an implementation, they only need to provide these
    two methods.
    """

    def transform(self, values: ArrayLike) -> NDArray[np.float64]:
        """Map coordinates from the search space to the feasible space.

        The input is not modified.

        Args:
            values: The coordinates to transform.

        Returns:
            The transformed coordinates.
        """

    def initial_step_size(self) -> float:
        """Return a suitable initial step size for the optimizer.

        Returns:
            The initial step size.
        """


@runtime_checkable
class InvertibleTransformation(Protocol):
    """Protocol for policies that can map feasible points back to the search space.

    This is an optional capability. Optimizers that need it, for instance to
    start from a user-supplied feasible point, should check for it with
    `isinstance(policy, InvertibleTransformation)`.
    """

    def inverse(self, values: ArrayLike) -> NDArray[np.float64]:
        """Map coordinates from the feasible space back to the search space.

        Args:
            values: The coordinates to map back.

        Returns:
            A preimage of the coordinates.
        """
