"""Plot snapshots from tabular records.

Turns mappings (csv.DictReader rows, DataFrame.to_dict("records"),
JSON objects) into Plot instances ready for LandUseStrataManager.

Depends on: domain.models, domain.land_use.
"""

from typing import Any, Iterable, Mapping, Tuple

from ..domain.errors import ConstructionError
from ..domain.land_use import LandUse
from ..domain.models import Plot


def plots_from_records(
    records: Iterable[Mapping[str, Any]],
    id_key: str = "id",
    area_key: str = "area_ha",
    land_use_key: str = "land_use",
) -> Tuple[Plot, ...]:
    """Build Plot instances from mapping records.

    Args:
        records: One mapping per plot.
        id_key: Column holding the plot id (stringified).
        area_key: Column holding the plot area in hectares.
        land_use_key: Column holding a LandUse or a LandUse member name.

    Returns:
        Tuple of Plot, in record order.

    Raises:
        ConstructionError: On a missing column, an unparseable value
            or a non-positive area. The message names the row index.
    """
    plots = []
    for row_idx, record in enumerate(records):
        for key in (id_key, area_key, land_use_key):
            if key not in record:
                raise ConstructionError(
                    f"Row {row_idx}: missing column '{key}'"
                )

        try:
            area_ha = float(record[area_key])
        except (TypeError, ValueError):
            raise ConstructionError(
                f"Row {row_idx}: invalid area '{record[area_key]}'"
            )
        if not area_ha > 0:
            raise ConstructionError(
                f"Row {row_idx}: plot area must be > 0, got {area_ha}"
            )

        land_use = record[land_use_key]
        if not isinstance(land_use, LandUse):
            try:
                land_use = LandUse.from_string(str(land_use))
            except ValueError as e:
                raise ConstructionError(f"Row {row_idx}: {e}") from e

        plots.append(Plot(
            id=str(record[id_key]),
            area_ha=area_ha,
            land_use=land_use,
        ))

    return tuple(plots)
