from typing import Any

import numpy as np
import pytest
from pydantic import ValidationError

from boxfold.config import BoundsConfig


@pytest.mark.parametrize(
    ("lower", "upper", "shape"),
    [
        (0.0, 2.0, (1, 1)),
        ([0.0, 1.0, 2.0], 5.0, (3, 1)),
        (0.0, [[1.0, 2.0]], (1, 2)),
        ([[0.0], [1.0]], [[2.0, 3.0]], (2, 2)),
    ],
)
def test_bounds_config_shapes(lower: Any, upper: Any, shape: tuple[int, int]) -> None:
    config = BoundsConfig(lower_bounds=lower, upper_bounds=upper)
    assert config.lower_bounds.shape == shape
    assert config.upper_bounds.shape == shape
    assert config.lower_bounds.dtype == np.float64


def test_bounds_config_from_dict() -> None:
    config = BoundsConfig.model_validate({"lower_bounds": [0, 1], "upper_bounds": 2})
    assert np.array_equal(config.upper_bounds, [[2.0], [2.0]])


def test_bounds_config_equal_bounds() -> None:
    config = BoundsConfig(lower_bounds=5.0, upper_bounds=5.0)
    assert np.array_equal(config.lower_bounds, config.upper_bounds)


def test_bounds_config_is_immutable() -> None:
    config = BoundsConfig(lower_bounds=[0.0, 1.0], upper_bounds=[2.0, 3.0])
    with pytest.raises(ValueError):  # noqa: PT011
        config.lower_bounds[0, 0] = 1.0
    with pytest.raises(AttributeError, match="BoundsConfig is immutable"):
        config.upper_bounds = np.array([[4.0]])


def test_bounds_config_lower_larger_than_upper() -> None:
    with pytest.raises(
        ValidationError, match="The lower bounds are larger than the upper bounds"
    ):
        BoundsConfig(lower_bounds=[0.0, 3.0], upper_bounds=[1.0, 2.0])


@pytest.mark.parametrize("value", [np.nan, np.inf, -np.inf])
def test_bounds_config_not_finite(value: float) -> None:
    with pytest.raises(ValidationError, match="The bounds must be finite"):
        BoundsConfig(lower_bounds=[0.0, value], upper_bounds=[1.0, 2.0])


def test_bounds_config_broadcast_error() -> None:
    with pytest.raises(ValidationError, match="cannot be broadcasted"):
        BoundsConfig(lower_bounds=[0.0, 1.0], upper_bounds=[2.0, 3.0, 4.0])


def test_bounds_config_empty() -> None:
    with pytest.raises(ValidationError, match="The bounds must not be empty"):
        BoundsConfig(lower_bounds=[], upper_bounds=[])


def test_bounds_config_too_many_dimensions() -> None:
    with pytest.raises(ValidationError, match="expected at most two dimensions"):
        BoundsConfig(lower_bounds=np.zeros((2, 2, 2)), upper_bounds=1.0)


def test_bounds_config_extra_field() -> None:
    with pytest.raises(ValidationError):
        BoundsConfig(lower_bounds=0.0, upper_bounds=1.0, foo=1)  # type: ignore[call-arg]
