"""Stratified point estimator of a population total.

Default factory handed to LandUseStrataManager: it is built from the
ordered stratum names and their population sizes (number of plot-sized
sampling units, N_h), then fed plot-level observations.

    total     = sum_h N_h * mean_h
    var(total) = sum_h N_h^2 * (1 - n_h / N_h) * s_h^2 / n_h

No I/O. Only depends on: numpy, typing.
"""

from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .confidence import normal_ci, z_score_for_confidence


class StratifiedPopulationEstimate:
    """Stratified estimator over one or more named strata."""

    def __init__(
        self,
        stratum_names: Sequence[str],
        population_sizes: Sequence[float],
    ):
        if len(stratum_names) == 0:
            raise ValueError("At least one stratum is required")
        if len(stratum_names) != len(population_sizes):
            raise ValueError(
                f"{len(stratum_names)} stratum names but "
                f"{len(population_sizes)} population sizes"
            )
        if len(set(stratum_names)) != len(stratum_names):
            raise ValueError("Stratum names must be unique")
        for name, size in zip(stratum_names, population_sizes):
            if not size > 0:
                raise ValueError(
                    f"Population size of stratum {name} must be > 0, got {size}"
                )

        self._names: Tuple[str, ...] = tuple(stratum_names)
        self._sizes: Tuple[float, ...] = tuple(float(s) for s in population_sizes)
        self._observations: Dict[str, List[float]] = {n: [] for n in self._names}

    @property
    def stratum_names(self) -> Tuple[str, ...]:
        return self._names

    @property
    def population_sizes(self) -> Tuple[float, ...]:
        return self._sizes

    @property
    def population_size(self) -> float:
        """Total number of sampling units across all strata."""
        return float(sum(self._sizes))

    def add_observation(self, stratum_name: str, value: float) -> None:
        if stratum_name not in self._observations:
            raise KeyError(f"Unknown stratum: {stratum_name}")
        self._observations[stratum_name].append(float(value))

    def get_sample_size(self, stratum_name: Optional[str] = None) -> int:
        """Observation count for one stratum, or for all when None."""
        if stratum_name is None:
            return sum(len(v) for v in self._observations.values())
        if stratum_name not in self._observations:
            raise KeyError(f"Unknown stratum: {stratum_name}")
        return len(self._observations[stratum_name])

    def get_total(self) -> float:
        """Estimated population total."""
        total = 0.0
        for name, size in zip(self._names, self._sizes):
            y = self._values(name, min_n=1)
            total += size * float(y.mean())
        return total

    def get_mean(self) -> float:
        """Estimated mean per sampling unit."""
        return self.get_total() / self.population_size

    def get_variance_of_total(self) -> float:
        """Variance of the total with finite population correction."""
        var = 0.0
        for name, size in zip(self._names, self._sizes):
            y = self._values(name, min_n=2)
            n_h = len(y)
            fpc = max(0.0, 1.0 - n_h / size)
            var += size ** 2 * fpc * float(y.var(ddof=1)) / n_h
        return var

    def get_confidence_interval(
        self, confidence_level: float = 0.95
    ) -> Tuple[float, float]:
        z = z_score_for_confidence(confidence_level)
        return normal_ci(self.get_total(), self.get_variance_of_total(), z=z)

    def _values(self, name: str, min_n: int) -> np.ndarray:
        y = np.asarray(self._observations[name], dtype=float)
        if len(y) < min_n:
            raise ValueError(
                f"Stratum {name} has {len(y)} observation(s), "
                f"at least {min_n} required"
            )
        return y

    def __repr__(self) -> str:
        strata = ", ".join(
            f"{n}={s:g}" for n, s in zip(self._names, self._sizes)
        )
        return f"StratifiedPopulationEstimate({strata})"
