"""
Uniform random element generation.

Random factories are unseeded by default. Reproducibility is opt-in via an
explicit ``seed`` argument; no global random state is read or written.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from pylars.core.exceptions import ValidationError
from pylars.core.validation import check_scalar

logger = logging.getLogger(__name__)

# Default half-open range [DEFAULT_LOW, DEFAULT_HIGH) for random factories
DEFAULT_LOW: float = 0.0
DEFAULT_HIGH: float = 1.0

SeedLike = int | np.random.Generator | None


def make_rng(seed: SeedLike = None) -> np.random.Generator:
    """
    Build a numpy Generator from a seed.

    Args:
        seed: None for fresh OS entropy, an int seed, or an existing
            Generator (returned as is, so callers can share a stream)

    Returns:
        numpy.random.Generator
    """
    if isinstance(seed, np.random.Generator):
        return seed
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, (int, np.integer))):
        raise ValidationError(
            f"seed: expected None, int or numpy.random.Generator, got {type(seed).__name__}"
        )
    return np.random.default_rng(seed)


def uniform(
    size: int,
    low: float = DEFAULT_LOW,
    high: float = DEFAULT_HIGH,
    seed: SeedLike = None,
) -> NDArray[np.float64]:
    """
    Draw ``size`` independent float64 values uniformly from [low, high).

    Raises:
        ValidationError: If low >= high or either bound is not finite
    """
    low = check_scalar(low, "low")
    high = check_scalar(high, "high")
    if not (np.isfinite(low) and np.isfinite(high)):
        raise ValidationError(f"random range must be finite, got [{low}, {high})")
    if low >= high:
        raise ValidationError(f"random range is empty: low={low} >= high={high}")

    rng = make_rng(seed)
    logger.debug("drawing %d uniform values on [%s, %s)", size, low, high)
    return rng.uniform(low, high, size).astype(np.float64, copy=False)
