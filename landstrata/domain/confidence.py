"""Confidence interval helpers for landstrata estimators.

Implements z-score lookup and normal (Wald) intervals for totals.
No I/O. Only depends on: math.
"""

import math
from typing import Tuple

# z-scores for common confidence levels
Z_SCORES = {
    0.80: 1.2816,
    0.85: 1.4395,
    0.90: 1.6449,
    0.95: 1.9600,
    0.99: 2.5758,
}


def z_score_for_confidence(confidence_level: float) -> float:
    """Get z-score for a given two-sided confidence level.

    Args:
        confidence_level: Confidence level in (0, 1), e.g. 0.95.

    Returns:
        Corresponding z-score.
    """
    if not 0 < confidence_level < 1:
        raise ValueError(
            f"confidence_level must be in (0, 1), got {confidence_level}"
        )
    if confidence_level in Z_SCORES:
        return Z_SCORES[confidence_level]
    # Fall back to approximation via inverse normal CDF (Abramowitz & Stegun)
    p = (1 + confidence_level) / 2
    return _probit(p)


def normal_ci(estimate: float, variance: float,
              z: float = 1.96) -> Tuple[float, float]:
    """Symmetric normal confidence interval around an estimate.

    Args:
        estimate: Point estimate (e.g., a population total).
        variance: Estimated variance of the point estimate.
        z: Z-score for desired confidence level.

    Returns:
        (lower, upper) confidence interval bounds.
    """
    if variance < 0:
        raise ValueError(f"variance must be >= 0, got {variance}")
    se = math.sqrt(variance)
    return (estimate - z * se, estimate + z * se)


def _probit(p: float) -> float:
    """Approximate inverse of the standard normal CDF.

    Rational approximation from Abramowitz & Stegun (1964),
    formula 26.2.23. Accurate to ~4.5e-4.
    """
    if p <= 0.0 or p >= 1.0:
        raise ValueError(f"p must be in (0, 1), got {p}")

    if p < 0.5:
        return -_probit(1.0 - p)

    t = math.sqrt(-2.0 * math.log(1.0 - p))
    c0 = 2.515517
    c1 = 0.802853
    c2 = 0.010328
    d1 = 1.432788
    d2 = 0.189269
    d3 = 0.001308

    return t - (c0 + c1 * t + c2 * t * t) / (1.0 + d1 * t + d2 * t * t + d3 * t * t * t)
