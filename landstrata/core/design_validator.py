"""Design checks for landstrata.

Reports every problem of a stratified design at once, where
LandUseStrataManager.validate_design() stops at the first failing
stratum. Returns structured results (never raises for design issues).

Depends on: domain.strata_manager.
"""

from dataclasses import dataclass, field
from typing import List

from ..domain.strata_manager import LandUseStrataManager


@dataclass
class DesignIssue:
    """A single design finding."""
    severity: str     # 'FATAL' | 'WARNING'
    message: str
    land_use: str = ""
    suggestion: str = ""


@dataclass
class DesignCheckResult:
    """Aggregated design check result."""
    issues: List[DesignIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(i.severity == "FATAL" for i in self.issues)

    @property
    def has_warnings(self) -> bool:
        return any(i.severity == "WARNING" for i in self.issues)

    @property
    def fatal_issues(self) -> List[DesignIssue]:
        return [i for i in self.issues if i.severity == "FATAL"]

    @property
    def warnings(self) -> List[DesignIssue]:
        return [i for i in self.issues if i.severity == "WARNING"]


def check_design(manager: LandUseStrataManager) -> DesignCheckResult:
    """Check every stratum of a design.

    Args:
        manager: The design to check. It is not mutated.

    Returns:
        DesignCheckResult with one issue per problem found.
    """
    result = DesignCheckResult()
    min_plots = manager.settings.min_plots_per_stratum
    summaries = manager.get_stratum_summaries()

    if not summaries:
        result.issues.append(DesignIssue(
            severity="FATAL",
            message="The design has no strata (no plots were supplied).",
        ))
        return result

    for s in summaries:
        name = s.land_use.name

        if s.plot_count < min_plots:
            result.issues.append(DesignIssue(
                severity="FATAL",
                land_use=name,
                message=(
                    f"Stratum {name} has {s.plot_count} plot(s). "
                    f"At least {min_plots} are required."
                ),
                suggestion=(
                    "Add plots to this land use or merge it with another "
                    "stratum before building estimators."
                ),
            ))

        if s.stratum_area_ha <= 0:
            result.issues.append(DesignIssue(
                severity="FATAL",
                land_use=name,
                message=f"Stratum {name} has no area.",
                suggestion="Assign the total area (ha) of this land use.",
            ))
            continue

        sampled_ha = s.plot_count * s.individual_plot_area_ha
        if sampled_ha > s.stratum_area_ha:
            result.issues.append(DesignIssue(
                severity="WARNING",
                land_use=name,
                message=(
                    f"Stratum {name}: sampled area ({sampled_ha:g} ha) exceeds "
                    f"the stratum area ({s.stratum_area_ha:g} ha). "
                    f"Inclusion probability is above 1."
                ),
                suggestion="Check the stratum area and the plot areas.",
            ))

    if len(summaries) == 1 and not summaries[0].harvesting_allowed:
        name = summaries[0].land_use.name
        result.issues.append(DesignIssue(
            severity="WARNING",
            land_use=name,
            message=(
                f"The only stratum ({name}) does not allow harvesting."
            ),
        ))

    return result
