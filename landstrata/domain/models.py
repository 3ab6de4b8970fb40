"""Domain data models for landstrata.

Input records, settings and read-only snapshots are frozen dataclasses
(immutable once created). The design state is a small tagged variant:
either Unvalidated, or Validated carrying the inclusion probabilities.
No I/O. Only depends on: typing, types, dataclasses.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union

from .land_use import LandUse


# ---------------------------------------------------------------------------
# Input records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Plot:
    """A single inventory plot."""
    id: str
    area_ha: float
    land_use: LandUse


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DesignSettings:
    """Tunable constants of a stratified design."""
    plot_area_tolerance: float = 1e-8   # absolute, within one land use
    min_plots_per_stratum: int = 2
    confidence_level: float = 0.95


DEFAULT_SETTINGS = DesignSettings()


# ---------------------------------------------------------------------------
# Snapshots
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StratumSummary:
    """One row of the design as an editor would display it."""
    land_use: LandUse
    plot_count: int
    individual_plot_area_ha: float
    stratum_area_ha: float
    harvesting_allowed: bool


# ---------------------------------------------------------------------------
# Design state
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Unvalidated:
    """The design has not been validated since its last change."""


@dataclass(frozen=True)
class Validated:
    """Every stratum passed validation."""
    probabilities: Mapping[LandUse, float] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(
            self, "probabilities", MappingProxyType(dict(self.probabilities))
        )


DesignState = Union[Unvalidated, Validated]
