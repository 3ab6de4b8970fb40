"""Tests for the design workflow and the design text."""

import logging

import pytest

from landstrata.core.design_workflow import build_design
from landstrata.domain.errors import ConstructionError, DomainError
from landstrata.domain.land_use import LandUse
from landstrata.domain.models import DesignSettings, Plot
from landstrata.domain.strata_manager import LandUseStrataManager
from landstrata.reporting.design_text import generate_design_text, generate_references

WP = LandUse.WoodProduction
SWP = LandUse.SensitiveWoodProduction


class TestBuildDesign:

    def test_returns_validated_manager(self, two_strata_plots):
        m = build_design(two_strata_plots, {WP: 100.0, SWP: 200.0})
        assert m.is_validated
        assert m.get_inclusion_probability_for_this_land_use(WP) == pytest.approx(0.0012)

    def test_progress_callback(self, two_strata_plots):
        steps = []
        build_design(
            two_strata_plots, {SWP: 200.0, WP: 100.0},
            progress_callback=lambda step, total: steps.append((step, total)),
        )
        assert steps == [(1, 3), (2, 3), (3, 3)]

    def test_missing_area_raises(self, two_strata_plots, caplog):
        with caplog.at_level(logging.WARNING, logger="landstrata"):
            with pytest.raises(DomainError, match="area not set"):
                build_design(two_strata_plots, {WP: 100.0})
        assert "validation failed" in caplog.text

    def test_unknown_land_use_raises(self, two_strata_plots):
        with pytest.raises(DomainError, match="unknown land use"):
            build_design(two_strata_plots, {WP: 100.0, LandUse.Conservation: 5.0})

    def test_construction_error_propagates(self):
        with pytest.raises(ConstructionError):
            build_design([Plot("1", 0.04, WP), Plot("1", 0.04, WP)], {WP: 1.0})

    def test_settings_forwarded(self, two_strata_plots):
        with pytest.raises(DomainError, match="sample too small"):
            build_design(
                two_strata_plots, {WP: 100.0, SWP: 200.0},
                settings=DesignSettings(min_plots_per_stratum=3),
            )

    def test_factory_forwarded(self, two_strata_plots, recording_factory):
        m = build_design(
            two_strata_plots, {WP: 100.0, SWP: 200.0},
            estimator_factory=recording_factory,
        )
        assert m.get_point_estimate()["names"] == ["SensitiveWoodProduction", "WoodProduction"]


class TestDesignText:

    def test_mentions_every_stratum(self, two_strata_plots):
        m = build_design(two_strata_plots, {WP: 100.0, SWP: 200.0})
        text = generate_design_text(m)
        assert "5 plots over 2 land-use strata" in text
        assert "Wood Production: 3 plots" in text
        assert "Wood production with constraints: 2 plots" in text
        assert "inclusion probability 0.0012" in text
        assert "population size 2,500.0" in text

    def test_french_labels(self, two_strata_plots):
        m = build_design(two_strata_plots, {WP: 100.0, SWP: 200.0})
        assert "Production ligneuse:" in generate_design_text(m, lang="fr")

    def test_invalid_design_raises(self, two_strata_plots):
        with pytest.raises(DomainError):
            generate_design_text(LandUseStrataManager(two_strata_plots))

    def test_references(self):
        assert "Horvitz" in generate_references()

    def test_confidence_level_from_settings(self, two_strata_plots):
        default = build_design(two_strata_plots, {WP: 100.0, SWP: 200.0})
        assert "95% level (z = 1.960)" in generate_design_text(default)

        custom = build_design(
            two_strata_plots, {WP: 100.0, SWP: 200.0},
            settings=DesignSettings(confidence_level=0.90),
        )
        text = generate_design_text(custom)
        assert "90% level (z = 1.645)" in text
        assert "95% level" not in text
