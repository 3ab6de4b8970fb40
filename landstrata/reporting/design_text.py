"""Auto-generated description of a stratified design.

Produces a plain-text paragraph set suitable for the Methods section
of an inventory report.

Depends on: domain.strata_manager.
"""

from ..domain.confidence import z_score_for_confidence
from ..domain.strata_manager import LandUseStrataManager


def generate_design_text(manager: LandUseStrataManager, lang: str = "en") -> str:
    """Describe a validated design.

    Args:
        manager: The design. validate_design() is run first, so an
            invalid design raises DomainError.
        lang: Language of the land-use labels ("en" or "fr").

    Returns:
        Multi-paragraph text, one paragraph per stratum after a header.
    """
    manager.validate_design()
    strata = manager.get_strata()
    summaries = {s.land_use: s for s in manager.get_stratum_summaries()}
    n_plots = sum(s.plot_count for s in summaries.values())
    total_ha = manager.get_total_stratum_area_ha_for_these_land_uses(strata)

    paragraphs = []

    # Paragraph 1: Overall design
    p1 = (
        f"The inventory was analysed as a stratified sample of {n_plots} "
        f"plots over {len(strata)} land-use strata covering "
        f"{total_ha:,.1f} ha. Inclusion probabilities were computed per "
        f"stratum as the sampled area over the stratum area "
        f"(Horvitz and Thompson, 1952)."
    )
    harvestable = manager.get_harvestable_strata()
    if harvestable:
        names = ", ".join(lu.display_name(lang) for lu in harvestable)
        p1 += f" Harvesting is allowed in: {names}."
    level = manager.settings.confidence_level
    p1 += (
        f" Confidence intervals on estimated totals are reported at the "
        f"{level:.0%} level (z = {z_score_for_confidence(level):.3f})."
    )
    paragraphs.append(p1)

    # One paragraph per stratum
    for lu in strata:
        s = summaries[lu]
        pi = manager.get_inclusion_probability_for_this_land_use(lu)
        paragraphs.append(
            f"{lu.display_name(lang)}: {s.plot_count} plots of "
            f"{s.individual_plot_area_ha:g} ha in a stratum of "
            f"{s.stratum_area_ha:,.1f} ha; inclusion probability "
            f"{pi:.6g}; population size {s.stratum_area_ha / s.individual_plot_area_ha:,.1f} "
            f"plot units."
        )

    return "\n\n".join(paragraphs)


def generate_references() -> str:
    """Generate the references section for the report."""
    return (
        "Horvitz, D.G. and Thompson, D.J. (1952). A generalization of "
        "sampling without replacement from a finite universe. Journal "
        "of the American Statistical Association, 47(260), 663-685. "
        "https://doi.org/10.1080/01621459.1952.10483446\n\n"
        "Cochran, W.G. (1977). Sampling Techniques, 3rd ed. "
        "John Wiley & Sons."
    )
