"""Utilities for checking and converting configuration values.

This module provides helper functions primarily designed for use within Pydantic
model validation logic. These functions convert bound inputs into standardized,
immutable NumPy arrays and broadcast them against each other.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray
from pydantic import BaseModel


def immutable_array(
    array_like: ArrayLike,
    **kwargs: Any,  # noqa: ANN401
) -> NDArray[Any]:
    """Convert input to an immutable NumPy array.

    This function takes various array-like inputs (e.g., lists, tuples, other
    NumPy arrays) and converts them into a NumPy array. It then sets the
    `writeable` flag of the resulting array to `False`, making it immutable.

    Args:
        array_like: The input data to convert (e.g., list, tuple, NumPy array).
        kwargs:     Additional keyword arguments passed directly to `numpy.array`.

    Returns:
        A new NumPy array, with its `writeable` flag set to `False`.
    """
    array = np.array(array_like, **kwargs)
    array.setflags(write=False)
    return array


def broadcast_arrays(*args: Any) -> tuple[NDArray[Any], ...]:  # noqa: ANN401
    """Broadcast arrays to a common shape and make them immutable.

    Unlike `numpy.broadcast_arrays`, the results are copies, so the broadcast
    dimensions are real entries and the arrays can be indexed freely.

    Args:
        args: A variable number of NumPy arrays or array-like objects.

    Returns:
        A tuple containing the broadcasted, immutable NumPy arrays.
    """
    results = np.broadcast_arrays(*args)
    return tuple(immutable_array(result) for result in results)


def as_matrix(values: ArrayLike) -> NDArray[Any]:
    """View an array with at most two dimensions as a matrix.

    Scalars become a `1 x 1` matrix and one-dimensional arrays become a single
    column, so that a vector of coordinates and a vector of bounds line up
    along the first axis.

    Args:
        values: The input values.

    Returns:
        A two-dimensional view (or copy) of the input.

    Raises:
        ValueError: If the input has more than two dimensions.
    """
    array = np.asarray(values)
    if array.ndim > 2:  # noqa: PLR2004
        msg = f"expected at most two dimensions, got {array.ndim}"
        raise ValueError(msg)
    if array.ndim < 2:  # noqa: PLR2004
        return array.reshape(-1, 1)
    return array


def _convert_bounds_array(array: ArrayLike | None) -> NDArray[np.float64] | None:
    if array is None:
        return array
    return immutable_array(as_matrix(np.asarray(array, dtype=np.float64)))


class ImmutableBaseModel(BaseModel):
    """Base model providing manual immutability control.

    This class offers an alternative to Pydantic's `frozen=True` configuration.
    It allows instances to be mutable during initialization (e.g., within
    `@model_validator(mode='after')`) and then explicitly made immutable
    afterwards by calling the `_immutable()` method.

    Immutability is enforced by overriding `__setattr__` to check an internal
    `_is_immutable` flag before allowing attribute modification.
    """

    _is_immutable: bool

    def _immutable(self) -> None:
        self._is_immutable = True

    def _mutable(self) -> None:
        self._is_immutable = False

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        """Set an attribute's value, enforcing immutability.

        Args:
            name:  The name of the attribute to set.
            value: The value to assign to the attribute.

        Raises:
            AttributeError: If attempting to set an attribute on an immutable instance.
        """
        if name != "_is_immutable" and self._is_immutable:
            msg = f"{self.__class__.__name__} is immutable"
            raise AttributeError(msg)
        super().__setattr__(name, value)
