import numpy as np
import pytest

from boxfold.exceptions import ConfigError
from boxfold.transforms import (
    BoundaryBoxConstraint,
    EmptyTransformation,
    get_transformation,
)


def test_get_transformation_unconstrained() -> None:
    assert isinstance(get_transformation(), EmptyTransformation)


def test_get_transformation_box() -> None:
    policy = get_transformation(np.zeros(3), 2.0)
    assert isinstance(policy, BoundaryBoxConstraint)
    assert policy.initial_step_size() == pytest.approx(0.6)


@pytest.mark.parametrize(("lower", "upper"), [(0.0, None), (None, 1.0)])
def test_get_transformation_single_bound(
    lower: float | None, upper: float | None
) -> None:
    with pytest.raises(ConfigError, match="Both lower and upper bounds must be given"):
        get_transformation(lower, upper)
