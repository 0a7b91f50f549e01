"""
Canonical allergen definitions — single source of truth for allergy logic.
The aggregator, the repositories and the filtered listing endpoint import
exclusively from here.
"""

from __future__ import annotations

import enum
from typing import Optional


class Allergen(str, enum.Enum):
    """
    The three rating dimensions tracked per review and per restaurant.

    Values are the exact, case-sensitive labels accepted by
    GET /restaurant/{zipcode}/allergy/{allergy}. "Diary" is the historical
    public spelling of dairy and is kept for API compatibility.
    """

    PEANUT = "Peanut"
    EGG = "Egg"
    DAIRY = "Diary"

    @classmethod
    def from_label(cls, label: str) -> Optional["Allergen"]:
        """Return the matching allergen, or None for any unknown label."""
        try:
            return cls(label)
        except ValueError:
            return None

    @property
    def rating_attr(self) -> str:
        """Attribute name holding this allergen's rating on Review and Restaurant."""
        return _RATING_ATTRS[self]


_RATING_ATTRS: dict[Allergen, str] = {
    Allergen.PEANUT: "rating_peanut",
    Allergen.EGG:    "rating_egg",
    Allergen.DAIRY:  "rating_dairy",
}
