"""Design workflow orchestrator.

Coordinates: strata construction -> stratum area assignment ->
design validation.

Depends on: domain.*.
"""

import logging
from typing import Callable, Iterable, Mapping, Optional

from ..domain.errors import DomainError
from ..domain.land_use import LandUse
from ..domain.models import DesignSettings, Plot
from ..domain.strata_manager import EstimatorFactory, LandUseStrataManager

logger = logging.getLogger(__name__)


def build_design(
    plots: Iterable[Plot],
    stratum_areas_ha: Mapping[LandUse, float],
    settings: Optional[DesignSettings] = None,
    estimator_factory: Optional[EstimatorFactory] = None,
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> LandUseStrataManager:
    """Execute the full design workflow.

    Args:
        plots: Plot snapshot.
        stratum_areas_ha: {land_use: total area in ha}.
        settings: Optional design constants.
        estimator_factory: Optional point-estimator factory.
        progress_callback: Optional (step, total) progress reporter.

    Returns:
        A validated LandUseStrataManager.

    Raises:
        ConstructionError: If the plots cannot form a design.
        DomainError: If an area is invalid or a stratum fails validation.
    """
    manager = LandUseStrataManager(
        plots, estimator_factory=estimator_factory, settings=settings,
    )
    logger.info("Built design with %d strata", len(manager))

    # Step 1: Assign stratum areas
    land_uses = sorted(stratum_areas_ha)
    total_steps = len(land_uses) + 1
    for step, lu in enumerate(land_uses, start=1):
        try:
            manager.set_stratum_area_ha_for_this_land_use(lu, stratum_areas_ha[lu])
        except DomainError as e:
            logger.warning("Could not assign area to %s: %s", lu.name, e)
            raise
        if progress_callback:
            progress_callback(step, total_steps)

    # Step 2: Validate
    try:
        manager.validate_design()
    except DomainError as e:
        logger.warning("Design validation failed: %s", e)
        raise
    if progress_callback:
        progress_callback(total_steps, total_steps)

    logger.info(
        "Design validated: %s",
        ", ".join(
            f"{lu.name} p={manager.get_inclusion_probability_for_this_land_use(lu):.6g}"
            for lu in manager.get_strata()
        ),
    )
    return manager
