"""Transformation policies for box-constrained optimization.

Evolution strategies such as CMA-ES sample candidate points from an
unconstrained distribution. When the problem is restricted to a box, a
transformation policy maps each candidate into the feasible region just before
the objective function is evaluated, without altering the internal dynamics of
the search.

**Key Components:**

- **Protocols:** Policies share no implementation, they only provide the same
  methods.
    - **[`TransformationPolicy`][boxfold.transforms.base.TransformationPolicy]:**
      Defines the `transform` and `initial_step_size` methods used by an
      optimizer.
    - **[`InvertibleTransformation`][boxfold.transforms.base.InvertibleTransformation]:**
      An optional capability for policies that can map feasible points back
      to the search space.
- **[`BoundaryBoxConstraint`][boxfold.transforms.BoundaryBoxConstraint]:**
  Folds coordinates into a box and eases them towards the bounds.
- **[`EmptyTransformation`][boxfold.transforms.EmptyTransformation]:**
  The identity, for unconstrained problems.
- **[`get_transformation`][boxfold.transforms.get_transformation]:** Selects a
  policy depending on whether bounds are given.

**Workflow:**

1.  The optimizer calls `initial_step_size()` once during setup to seed its
    mutation scale.
2.  For every candidate it calls `transform(candidate)` and evaluates the
    objective function on the result.

Policies are immutable after construction, hence a single policy object may be
used concurrently from multiple threads. New bounds are applied by creating a
new policy, for instance with
[`BoundaryBoxConstraint.with_bounds`][boxfold.transforms.BoundaryBoxConstraint.with_bounds].
"""

from ._factory import get_transformation
from .base import InvertibleTransformation, TransformationPolicy
from .boundary_box import BoundaryBoxConstraint
from .empty_transformation import EmptyTransformation

__all__ = [
    "BoundaryBoxConstraint",
    "EmptyTransformation",
    "InvertibleTransformation",
    "TransformationPolicy",
    "get_transformation",
]
