"""Configuration knobs for build validation and the character sheet.

Defaults match the standard rules. Formula constants are not configurable;
these only bound what validation accepts.
"""

from dataclasses import dataclass


@dataclass(slots=True)
class BuildConfig:
    """Tuneable limits that aren't part of any cost formula."""

    attribute_min: int = 1
    attribute_max: int = 10
    tradition_min: int = 0
    tradition_max: int = 10
    light_armor_dodge_bonus: int = 1   # added to active dodge in light armour
