"""Land-use taxonomy used as the stratification key.

A closed set of categories. Each one knows whether harvesting is
allowed in it and carries an English and a French display name.

No I/O. Only depends on: enum.
"""

from enum import Enum


class LandUse(Enum):
    """Land-use category of an inventory plot.

    Members are ordered by declaration, which is their natural ordering
    when sorted.
    """

    # Land for wood production without constraints.
    WoodProduction = (True, "Wood Production", "Production ligneuse")
    # Unproductive land (e.g., bare land, unforested peatland).
    Unproductive = (False, "Unproductive", "Improductif")
    # Conservation areas.
    Conservation = (False, "Conservation", "Conservation")
    # Land for wood production with constraints (e.g., species habitat).
    SensitiveWoodProduction = (
        True,
        "Wood production with constraints",
        "Production ligneuse avec contraintes",
    )
    Inaccessible = (False, "Inaccessible", "Inaccessible")

    def __init__(self, harvesting_allowed: bool, english: str, french: str):
        self.harvesting_allowed = harvesting_allowed
        self._labels = {"en": english, "fr": french}

    @property
    def ordinal(self) -> int:
        return _ORDINALS[self]

    def display_name(self, lang: str = "en") -> str:
        """Human-readable label, ``lang`` is "en" or "fr"."""
        if lang not in self._labels:
            raise ValueError(f"Unsupported language: {lang}")
        return self._labels[lang]

    def __str__(self) -> str:
        return self._labels["en"]

    def __lt__(self, other):
        if not isinstance(other, LandUse):
            return NotImplemented
        return self.ordinal < other.ordinal

    @classmethod
    def from_string(cls, value: str) -> "LandUse":
        """Resolve a member from its name, case-insensitively."""
        for land_use in cls:
            if land_use.name.lower() == value.strip().lower():
                return land_use
        raise ValueError(f"Unknown land use: {value}")


_ORDINALS = {land_use: idx for idx, land_use in enumerate(LandUse)}
