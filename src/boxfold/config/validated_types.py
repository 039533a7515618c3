"""Annotated types for Pydantic models providing input conversion and validation.

These types leverage Pydantic's `BeforeValidator` to automatically convert
input values (scalars, sequences or nested sequences) into standardized,
immutable NumPy arrays during model initialization.

- [`BoundsArray`][boxfold.config.validated_types.BoundsArray]: Converts input
  to an immutable 2D `np.float64` array. Scalars become a `1 x 1` array, and
  one-dimensional input becomes a single column.
"""

from typing import Annotated

import numpy as np
from numpy.typing import NDArray
from pydantic import BeforeValidator

from .utils import _convert_bounds_array

BoundsArray = Annotated[NDArray[np.float64], BeforeValidator(_convert_bounds_array)]
"""Convert to an immutable 2D numpy array of floating point bound values."""
