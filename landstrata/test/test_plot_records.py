"""Tests for building plots from tabular records."""

import pytest

from landstrata.core.plot_records import plots_from_records
from landstrata.domain.errors import ConstructionError
from landstrata.domain.land_use import LandUse


class TestPlotsFromRecords:

    def test_csv_like_rows(self):
        rows = [
            {"id": "P1", "area_ha": "0.04", "land_use": "WoodProduction"},
            {"id": "P2", "area_ha": "0.04", "land_use": "woodproduction"},
        ]
        plots = plots_from_records(rows)
        assert len(plots) == 2
        assert plots[0].id == "P1"
        assert plots[0].area_ha == 0.04
        assert plots[1].land_use is LandUse.WoodProduction

    def test_enum_values_and_int_ids(self):
        plots = plots_from_records([
            {"id": 7, "area_ha": 0.08, "land_use": LandUse.Conservation},
        ])
        assert plots[0].id == "7"
        assert plots[0].land_use is LandUse.Conservation

    def test_custom_keys(self):
        plots = plots_from_records(
            [{"PLOT": "a", "AREA": 0.04, "LU": "Unproductive"}],
            id_key="PLOT", area_key="AREA", land_use_key="LU",
        )
        assert plots[0].land_use is LandUse.Unproductive

    def test_missing_column(self):
        with pytest.raises(ConstructionError, match="Row 0: missing column 'area_ha'"):
            plots_from_records([{"id": "1", "land_use": "WoodProduction"}])

    def test_invalid_area(self):
        with pytest.raises(ConstructionError, match="Row 1: invalid area"):
            plots_from_records([
                {"id": "1", "area_ha": 0.04, "land_use": "WoodProduction"},
                {"id": "2", "area_ha": "n/a", "land_use": "WoodProduction"},
            ])

    @pytest.mark.parametrize("area", [0, -0.04, "nan"])
    def test_non_positive_area(self, area):
        with pytest.raises(ConstructionError, match="must be > 0"):
            plots_from_records([{"id": "1", "area_ha": area, "land_use": "WoodProduction"}])

    def test_unknown_land_use(self):
        with pytest.raises(ConstructionError, match="Unknown land use"):
            plots_from_records([{"id": "1", "area_ha": 0.04, "land_use": "Pasture"}])

    def test_empty(self):
        assert plots_from_records([]) == ()
