"""Configuration of transformation policies.

Bounds handed to a policy are validated and converted by a
[`BoundsConfig`][boxfold.config.BoundsConfig] object. Pydantic performs the
conversion of the inputs into immutable NumPy arrays, and raises a
`pydantic.ValidationError` (a subclass of `ValueError`) if the bounds are
malformed.
"""

from ._bounds_config import BoundsConfig

__all__ = [
    "BoundsConfig",
]
