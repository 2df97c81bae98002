"""Derived stat calculator: dicepools, health pools, defence, resist, soak.

Two roundings are in play and are not interchangeable:
  - tradition bonus rounds up:  min(rank, ceil(tradition / 2))
  - soak halves round down:     floor(attr / 2)

Skill ranks are read straight from the rank map. Callers that want group
ranks to count for children resolve them first (skills.effective_skill_rank).
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, fields

from bp_planner.models.character import Attributes, Weapon
from bp_planner.models.constants import (
    BLOCK_SKILL,
    DEFAULT_WEAPON_SKILL,
    DODGE_SKILL,
    PARRY_SKILL,
    SHIELD_BONUSES,
    Attribute,
    ShieldType,
    WeaponType,
)


@dataclass(frozen=True, slots=True)
class StatModifiers:
    """Additive adjustments. Each one only touches the output of the same name."""
    hp: int = 0
    stam: int = 0
    drain: int = 0
    dodge: int = 0
    parry: int = 0
    block: int = 0
    light_armor_bonus: int = 0
    armor: int = 0
    physical: int = 0
    mental: int = 0

    @classmethod
    def from_mapping(cls, values: Mapping[str, int]) -> "StatModifiers":
        """Build from a loose dict. Unrecognised keys are ignored."""
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in values.items():
            key = _MODIFIER_ALIASES.get(key, key)
            if key in known:
                kwargs[key] = int(value)
        return cls(**kwargs)


# camelCase spellings used by the character sheet
_MODIFIER_ALIASES = {"lightArmorBonus": "light_armor_bonus"}

_NO_MODIFIERS = StatModifiers()


@dataclass(frozen=True, slots=True)
class HealthPools:
    hp: int
    stam: int
    drain: int
    luk: int


@dataclass(frozen=True, slots=True)
class DefenseStats:
    dodge_passive: int
    dodge_active: int
    parry: int
    block: int


@dataclass(frozen=True, slots=True)
class ResistStats:
    physical: int
    mental: int
    dv_threshold: int


@dataclass(frozen=True, slots=True)
class SoakStats:
    armor: int
    physical: int
    mental: int
    drain: int


def tradition_bonus(rank: int, tradition: int) -> int:
    """Extra dice from tradition, capped by the skill's own rank."""
    return min(rank, math.ceil(tradition / 2))


def skill_dicepool(tradition: int, rank: int, attribute_value: int) -> int:
    """Dicepool = rank + attribute + min(rank, ceil(tradition/2))."""
    return rank + attribute_value + tradition_bonus(rank, tradition)


def weapon_dicepool(
    weapon: Weapon,
    attributes: Attributes,
    skills: Mapping[str, int],
    tradition: int,
) -> int:
    """Dicepool = AGI (light) or STR (otherwise) + skill rank + reach + tradition bonus."""
    if weapon.type == WeaponType.LIGHT:
        attribute_value = attributes.agility
    else:
        attribute_value = attributes.strength
    skill_rank = skills.get(weapon.skill_name or DEFAULT_WEAPON_SKILL, 0)
    return attribute_value + skill_rank + weapon.reach + tradition_bonus(skill_rank, tradition)


def health_pools(
    attributes: Attributes,
    cast_stat: Attribute | str,
    modifiers: StatModifiers | None = None,
) -> HealthPools:
    """HP = 16 + BOD, STAM = 16 + WIL, DRAIN = 16 + cast stat, LUK = luck."""
    mod = modifiers or _NO_MODIFIERS
    return HealthPools(
        hp=16 + attributes.body + mod.hp,
        stam=16 + attributes.willpower + mod.stam,
        drain=16 + attributes[cast_stat] + mod.drain,
        luk=attributes.luck,
    )


def defense_stats(
    attributes: Attributes,
    tradition: int,
    skills: Mapping[str, int],
    modifiers: StatModifiers | None = None,
) -> DefenseStats:
    """Passive dodge is INT + REA; active lines add a skill rank and tradition bonus."""
    mod = modifiers or _NO_MODIFIERS
    base = attributes.intuition + attributes.reaction

    def active(skill_name: str) -> int:
        rank = skills.get(skill_name, 0)
        return base + rank + tradition_bonus(rank, tradition)

    return DefenseStats(
        dodge_passive=base,
        dodge_active=active(DODGE_SKILL) + mod.dodge + mod.light_armor_bonus,
        parry=active(PARRY_SKILL) + mod.parry,
        block=active(BLOCK_SKILL) + mod.block,
    )


def resist_stats(attributes: Attributes) -> ResistStats:
    return ResistStats(
        physical=attributes.body + attributes.agility,
        mental=attributes.willpower + attributes.charisma,
        dv_threshold=attributes.body,
    )


def soak_stats(attributes: Attributes, modifiers: StatModifiers | None = None) -> SoakStats:
    mod = modifiers or _NO_MODIFIERS
    return SoakStats(
        armor=attributes.body + attributes.logic // 2 + mod.armor,
        physical=attributes.strength + attributes.agility // 2 + mod.physical,
        mental=attributes.willpower + attributes.charisma // 2 + mod.mental,
        drain=2 * attributes.willpower + mod.drain,
    )


def shield_bonus(shield: ShieldType | str) -> int:
    """Defence bonus for a shield tag; unknown tags give 0."""
    try:
        return SHIELD_BONUSES[ShieldType(shield)]
    except ValueError:
        return 0
