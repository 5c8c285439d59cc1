"""Singularly perturbed boundary value problems.

Data Structures
---------------
ProblemSpec : Epsilon-independent description of a problem
BVPFormulation : Problem bound to one epsilon, ready for the solver

Exceptions
----------
EmptyDomainError : The domain [a(eps), b] is empty

Problems
--------
third_order_layer : eps y''' - y' + x y = 0 on [0, 1]
truncated_layer : eps y'' + y' = 1/(2 sqrt(x)) on [eps, 1]
"""

from torchasymptotics.problem._exceptions import EmptyDomainError
from torchasymptotics.problem._problem_spec import (
    BVPFormulation,
    ProblemSpec,
)
from torchasymptotics.problem._third_order_layer import third_order_layer
from torchasymptotics.problem._truncated_layer import truncated_layer

__all__ = [
    "BVPFormulation",
    "EmptyDomainError",
    "ProblemSpec",
    "third_order_layer",
    "truncated_layer",
]
