"""Test configuration for landstrata.

All tests are pure domain tests and run with plain pytest.
"""

import os
import sys

import pytest

# Add repository root to path so package imports work without install
REPO_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
if REPO_DIR not in sys.path:
    sys.path.insert(0, REPO_DIR)

from landstrata.domain.land_use import LandUse  # noqa: E402
from landstrata.domain.models import Plot  # noqa: E402


def make_plots(*groups):
    """Build plots from (count, area_ha, land_use) groups, ids "1", "2", ..."""
    plots = []
    for count, area_ha, land_use in groups:
        for _ in range(count):
            plots.append(Plot(str(len(plots) + 1), area_ha, land_use))
    return plots


@pytest.fixture
def plot_factory():
    return make_plots


@pytest.fixture
def single_stratum_plots():
    """Two 0.04 ha plots in wood production."""
    return make_plots((2, 0.04, LandUse.WoodProduction))


@pytest.fixture
def two_strata_plots():
    """3 x 0.04 ha wood production + 2 x 0.08 ha sensitive wood production."""
    return make_plots(
        (3, 0.04, LandUse.WoodProduction),
        (2, 0.08, LandUse.SensitiveWoodProduction),
    )


@pytest.fixture
def three_strata_plots():
    """Adds two 0.08 ha conservation plots to two_strata_plots."""
    return make_plots(
        (3, 0.04, LandUse.WoodProduction),
        (2, 0.08, LandUse.SensitiveWoodProduction),
        (2, 0.08, LandUse.Conservation),
    )


class RecordingFactory:
    """Point-estimator factory that records the pairs it is called with."""

    def __init__(self):
        self.calls = []

    def __call__(self, names, sizes):
        self.calls.append((list(names), list(sizes)))
        return {"names": list(names), "sizes": list(sizes)}


@pytest.fixture
def recording_factory():
    return RecordingFactory()
