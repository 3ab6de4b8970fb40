"""Land-use strata manager.

Groups inventory plots into one Stratum per land use, validates the
design lazily and assembles stratified point estimators for the whole
population or for a subdomain.

Design state is Unvalidated until every stratum passes validation;
any stratum area assignment sets it back to Unvalidated. Queries that
depend on inclusion probabilities validate first.

Not thread-safe: callers sharing a manager must serialize access.

No I/O. Only depends on: domain models, estimators.
"""

import logging
from typing import (
    Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple,
)

from .errors import ConstructionError, DomainError
from .estimators import StratifiedPopulationEstimate
from .land_use import LandUse
from .models import (
    DEFAULT_SETTINGS,
    DesignSettings,
    DesignState,
    Plot,
    StratumSummary,
    Unvalidated,
    Validated,
)
from .stratum import Stratum

logger = logging.getLogger(__name__)

# (stratum names, population sizes) -> point estimator
EstimatorFactory = Callable[[List[str], List[float]], Any]


class LandUseStrataManager:
    """Stratified sampling design with one stratum per land use."""

    def __init__(
        self,
        plots: Iterable[Plot],
        estimator_factory: Optional[EstimatorFactory] = None,
        settings: Optional[DesignSettings] = None,
    ):
        """Build the strata from a snapshot of plots.

        Args:
            plots: Objects exposing ``id``, ``area_ha`` and ``land_use``.
            estimator_factory: Builds point estimators from stratum names
                and population sizes. Defaults to
                StratifiedPopulationEstimate.
            settings: Design constants. Defaults to DesignSettings().

        Raises:
            ConstructionError: Duplicate plot id, non-positive plot area,
                or plots of one land use with different areas.
        """
        self._settings = settings or DEFAULT_SETTINGS
        self._estimator_factory = estimator_factory or StratifiedPopulationEstimate

        plot_counts: Dict[LandUse, int] = {}
        plot_areas: Dict[LandUse, float] = {}
        plot_ids: Dict[str, LandUse] = {}

        for plot in plots:
            lu = plot.land_use
            if lu is None:
                raise ConstructionError(f"Plot {plot.id} has no land use")
            if not plot.area_ha > 0:
                raise ConstructionError(
                    f"Plot {plot.id} has a non-positive area: {plot.area_ha}"
                )
            if lu in plot_counts:
                plot_counts[lu] += 1
                if abs(plot.area_ha - plot_areas[lu]) > self._settings.plot_area_tolerance:
                    raise ConstructionError(
                        f"inconsistent plot areas in land use {lu.name}: "
                        f"{plot.area_ha} ha vs {plot_areas[lu]} ha"
                    )
            else:
                plot_counts[lu] = 1
                plot_areas[lu] = float(plot.area_ha)

            if plot.id in plot_ids:
                raise ConstructionError(f"duplicate plot id: {plot.id}")
            plot_ids[plot.id] = lu

        self._strata: Dict[LandUse, Stratum] = {
            lu: Stratum(lu, count, plot_areas[lu])
            for lu, count in plot_counts.items()
        }
        self._plot_index: Dict[str, LandUse] = plot_ids
        self._state: DesignState = Unvalidated()

        logger.debug(
            "Built %d strata from %d plots: %s",
            len(self._strata), len(plot_ids),
            ", ".join(f"{lu.name}={n}" for lu, n in plot_counts.items()),
        )

    # ------------------------------------------------------------------
    # Design state
    # ------------------------------------------------------------------

    @property
    def settings(self) -> DesignSettings:
        return self._settings

    @property
    def state(self) -> DesignState:
        return self._state

    @property
    def is_validated(self) -> bool:
        return isinstance(self._state, Validated)

    def validate_design(self) -> None:
        """Validate every stratum. No-op if already validated.

        Raises:
            DomainError: From the first stratum that fails. The design
                stays unvalidated.
        """
        if isinstance(self._state, Validated):
            return
        min_plots = self._settings.min_plots_per_stratum
        probabilities = {
            lu: stratum.validate(min_plots)
            for lu, stratum in self._strata.items()
        }
        self._state = Validated(probabilities)
        logger.debug("Design validated for %d strata", len(probabilities))

    def _probabilities(self):
        self.validate_design()
        return self._state.probabilities

    # ------------------------------------------------------------------
    # Inclusion probabilities
    # ------------------------------------------------------------------

    def get_inclusion_probability_for_this_land_use(self, lu: LandUse) -> float:
        probabilities = self._probabilities()
        if lu not in probabilities:
            raise DomainError(f"unknown land use: {_name(lu)}")
        return probabilities[lu]

    def get_inclusion_probability_for_this_plot(self, plot_id: str) -> float:
        probabilities = self._probabilities()
        if plot_id not in self._plot_index:
            raise DomainError(f"unknown plot id: {plot_id}")
        return probabilities[self._plot_index[plot_id]]

    # ------------------------------------------------------------------
    # Stratum areas
    # ------------------------------------------------------------------

    def set_stratum_area_ha_for_this_land_use(
        self, lu: LandUse, area_ha: float
    ) -> None:
        """Assign the total area (ha) of a land use.

        Resets the design to unvalidated, even if the value is unchanged.
        """
        self._stratum(lu).set_stratum_area_ha(area_ha)
        self._state = Unvalidated()
        logger.debug("Stratum area of %s set to %s ha", lu.name, area_ha)

    def get_stratum_area_ha_for_this_land_use(self, lu: LandUse) -> float:
        return self._stratum(lu).stratum_area_ha

    def get_total_stratum_area_ha_for_these_land_uses(
        self, land_uses: Optional[Iterable[LandUse]]
    ) -> float:
        """Sum of stratum areas (ha). Duplicated entries are counted again."""
        land_uses = list(land_uses or ())
        if not land_uses:
            raise DomainError("empty list: at least one land use is required")
        return sum(self._stratum(lu).stratum_area_ha for lu in land_uses)

    def get_nb_plots_for_this_land_use(self, lu: LandUse) -> int:
        """Number of plots in this land use, 0 if it has no stratum."""
        stratum = self._strata.get(lu)
        return stratum.plot_count if stratum is not None else 0

    # ------------------------------------------------------------------
    # Point estimators
    # ------------------------------------------------------------------

    def get_point_estimate(self) -> Any:
        """Point estimator over all strata, ordered by land-use name."""
        self.validate_design()
        if not self._strata:
            raise DomainError("empty design: no strata to estimate over")
        land_uses = sorted(self._strata, key=lambda lu: lu.name)
        return self._build_estimator(land_uses)

    def get_point_estimate_for_sub_domains(
        self, land_uses: Optional[Iterable[LandUse]]
    ) -> Any:
        """Point estimator restricted to a subdomain of land uses.

        Duplicates are dropped, keeping the first-seen order.
        """
        land_uses = list(land_uses or ())
        if not land_uses:
            raise DomainError(
                "empty selection: the subdomain must have at least one land use"
            )
        selection: List[LandUse] = []
        for lu in land_uses:
            if lu not in selection:
                self._stratum(lu)
                selection.append(lu)
        self.validate_design()
        return self._build_estimator(selection)

    def _build_estimator(self, land_uses: Sequence[LandUse]) -> Any:
        names = [lu.name for lu in land_uses]
        sizes = [self._strata[lu].population_size for lu in land_uses]
        return self._estimator_factory(names, sizes)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def get_strata(self) -> List[LandUse]:
        return sorted(self._strata)

    def get_harvestable_strata(self) -> List[LandUse]:
        return sorted(lu for lu in self._strata if lu.harvesting_allowed)

    def get_stratum_summaries(self) -> Tuple[StratumSummary, ...]:
        return tuple(self._strata[lu].summary() for lu in sorted(self._strata))

    def _stratum(self, lu: LandUse) -> Stratum:
        if lu not in self._strata:
            raise DomainError(f"unknown land use: {_name(lu)}")
        return self._strata[lu]

    def __contains__(self, lu) -> bool:
        return lu in self._strata

    def __len__(self) -> int:
        return len(self._strata)

    def __repr__(self) -> str:
        status = "validated" if self.is_validated else "unvalidated"
        return f"LandUseStrataManager({len(self._strata)} strata, {status})"


def _name(lu) -> str:
    return getattr(lu, "name", repr(lu))
