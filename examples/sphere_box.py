"""Example of a box-constrained minimization with a (1+1) evolution strategy.

This example minimizes a shifted sphere function whose unconstrained optimum
lies partly outside the box. The strategy itself searches an unconstrained
space; a transformation policy maps each candidate into the box before the
objective function is evaluated. The step size is seeded by the policy and
adapted with the one-fifth success rule.
"""

import numpy as np
from numpy.typing import NDArray

from boxfold.transforms import TransformationPolicy, get_transformation

DIM = 4
TARGET = np.array([3.0, -1.0, 0.5, 1.5])
LOWER = np.zeros(DIM)
UPPER = np.full(DIM, 2.0)
ITERATIONS = 2000


def sphere(variables: NDArray[np.float64]) -> float:
    """Evaluate the shifted sphere function.

    Args:
        variables: The variables to evaluate.

    Returns:
        The squared distance to the target.
    """
    return float(np.sum((variables - TARGET) ** 2))


def minimize(
    policy: TransformationPolicy, seed: int = 123
) -> tuple[NDArray[np.float64], float]:
    """Run a (1+1) evolution strategy using the given policy.

    Args:
        policy: The transformation policy.
        seed:   Seed for the random number generator.

    Returns:
        The best feasible point and its objective value.
    """
    rng = np.random.default_rng(seed)
    sigma = policy.initial_step_size()
    mean = np.full(DIM, 1.0)
    best = sphere(policy.transform(mean))
    for _ in range(ITERATIONS):
        candidate = mean + sigma * rng.standard_normal(DIM)
        value = sphere(policy.transform(candidate))
        if value <= best:
            mean, best = candidate, value
            sigma *= np.exp(0.8)
        else:
            sigma *= np.exp(-0.2)
    return policy.transform(mean), best


def main() -> None:
    """Main function."""
    policy = get_transformation(LOWER, UPPER)
    variables, value = minimize(policy)
    assert np.all(variables >= LOWER)
    assert np.all(variables <= UPPER)
    assert np.allclose(variables, np.clip(TARGET, LOWER, UPPER), atol=0.1)
    print(f"  variables: {variables}")
    print(f"  objective: {value}\n")


if __name__ == "__main__":
    main()
