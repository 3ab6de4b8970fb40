"""A land-use stratum and its Horvitz-Thompson inclusion probability.

A stratum is every plot sharing one land use. All its plots have the
same area, so the sampled area is plot_count * individual_plot_area_ha
and the inclusion probability is that over the stratum area.

No I/O. Only depends on: domain models.
"""

from .errors import ConstructionError, DomainError
from .land_use import LandUse
from .models import StratumSummary


class Stratum:
    """Per-land-use aggregate owned by a LandUseStrataManager."""

    def __init__(
        self,
        land_use: LandUse,
        plot_count: int,
        individual_plot_area_ha: float,
    ):
        if land_use is None:
            raise ConstructionError("The land_use argument must be non null")
        if plot_count < 0:
            raise ConstructionError(
                f"plot_count must be >= 0, got {plot_count}"
            )
        if individual_plot_area_ha < 0:
            raise ConstructionError(
                f"individual_plot_area_ha must be >= 0, "
                f"got {individual_plot_area_ha}"
            )
        self._land_use = land_use
        self._plot_count = int(plot_count)
        self._individual_plot_area_ha = float(individual_plot_area_ha)
        self._stratum_area_ha = 0.0

    @property
    def land_use(self) -> LandUse:
        return self._land_use

    @property
    def plot_count(self) -> int:
        return self._plot_count

    @property
    def individual_plot_area_ha(self) -> float:
        return self._individual_plot_area_ha

    @property
    def stratum_area_ha(self) -> float:
        """Total area (ha) this land use covers; 0.0 while unset."""
        return self._stratum_area_ha

    @property
    def population_size(self) -> float:
        """Number of plot-sized sampling units in the stratum."""
        return self._stratum_area_ha / self._individual_plot_area_ha

    def set_stratum_area_ha(self, value: float) -> None:
        """Assign the stratum area.

        The owner is responsible for invalidating its design afterwards.

        Raises:
            DomainError: If value <= 0, or if the stratum has no plots.
        """
        if not value > 0:
            raise DomainError(
                f"Stratum {self._land_use.name}: area must be > 0, got {value}"
            )
        if self._plot_count == 0:
            raise DomainError(
                f"Stratum {self._land_use.name}: area without plots "
                f"(cannot set an area > 0 when there are no plots)"
            )
        self._stratum_area_ha = float(value)

    def validate(self, min_plots: int = 2) -> float:
        """Check the stratum and compute its inclusion probability.

        Args:
            min_plots: Smallest acceptable number of plots.

        Returns:
            plot_count * individual_plot_area_ha / stratum_area_ha

        Raises:
            DomainError: sample too small, or area not set.
        """
        if self._plot_count < min_plots:
            raise DomainError(
                f"Stratum {self._land_use.name}: sample too small "
                f"({self._plot_count} plot(s), at least {min_plots} required)"
            )
        if not self._stratum_area_ha > 0:
            raise DomainError(
                f"Stratum {self._land_use.name}: area not set"
            )
        return (
            self._plot_count * self._individual_plot_area_ha
            / self._stratum_area_ha
        )

    def summary(self) -> StratumSummary:
        return StratumSummary(
            land_use=self._land_use,
            plot_count=self._plot_count,
            individual_plot_area_ha=self._individual_plot_area_ha,
            stratum_area_ha=self._stratum_area_ha,
            harvesting_allowed=self._land_use.harvesting_allowed,
        )

    def __repr__(self) -> str:
        return (
            f"Stratum({self._land_use.name!r}, plot_count={self._plot_count}, "
            f"individual_plot_area_ha={self._individual_plot_area_ha}, "
            f"stratum_area_ha={self._stratum_area_ha})"
        )

    def __str__(self) -> str:
        return (
            f"Stratum {self._land_use.name}; Nb plots = {self._plot_count}; "
            f"Area (ha) = {self._stratum_area_ha}"
        )
