"""
Shared compute infrastructure for pylars.

Numeric helpers shared by the Vector and Matrix value types.

Submodules:
    precision: Numerical precision constants and tolerance comparison
    random: Uniform random generation with explicit, optional seeding
"""

from pylars.core.compute.precision import (
    DEFAULT_ATOL,
    DEFAULT_RTOL,
    EPSILON_64,
    all_close,
    is_close,
)
from pylars.core.compute.random import (
    DEFAULT_HIGH,
    DEFAULT_LOW,
    make_rng,
    uniform,
)

__all__ = [
    # Precision
    "DEFAULT_ATOL",
    "DEFAULT_RTOL",
    "EPSILON_64",
    "all_close",
    "is_close",
    # Random
    "DEFAULT_HIGH",
    "DEFAULT_LOW",
    "make_rng",
    "uniform",
]
