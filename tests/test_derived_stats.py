"""Tests for derived stats: formula verification with known inputs."""

import pytest

from bp_planner.models.character import Attributes, Weapon
from bp_planner.models.constants import ShieldType, WeaponType
from bp_planner.models.derived_stats import (
    StatModifiers,
    defense_stats,
    health_pools,
    resist_stats,
    shield_bonus,
    skill_dicepool,
    soak_stats,
    tradition_bonus,
    weapon_dicepool,
)


@pytest.fixture
def attrs():
    """BOD 4, AGI 5, REA 4, STR 3, WIL 6, INT 5, LOG 4, CHA 3, LUK 2."""
    return Attributes(
        body=4, agility=5, reaction=4, strength=3, willpower=6,
        intuition=5, logic=4, charisma=3, luck=2,
    )


def _weapon(type_: WeaponType, reach: int = 1, skill_name: str | None = "Blades") -> Weapon:
    return Weapon(id="w", name="Test", type=type_, power=4, reach=reach, skill_name=skill_name)


# --- Skill dicepool ---

def test_dicepool_with_tradition_bonus():
    """5 + 4 + min(5, ceil(7/2)=4) = 13."""
    assert skill_dicepool(tradition=7, rank=5, attribute_value=4) == 13


def test_dicepool_zero_tradition():
    assert skill_dicepool(tradition=0, rank=5, attribute_value=4) == 9


def test_dicepool_zero_rank_gets_no_bonus():
    assert skill_dicepool(tradition=6, rank=0, attribute_value=4) == 4


def test_tradition_bonus_capped_by_rank():
    """ceil(10/2) = 5 but rank 2 caps it: 2 + 3 + 2 = 7."""
    assert skill_dicepool(tradition=10, rank=2, attribute_value=3) == 7


def test_tradition_bonus_rounds_up():
    assert tradition_bonus(rank=5, tradition=5) == 3
    assert tradition_bonus(rank=5, tradition=1) == 1
    assert tradition_bonus(rank=5, tradition=4) == 2


# --- Weapon dicepool ---

def test_light_weapon_uses_agility(attrs):
    """AGI 5 + Blades 3 + reach 1 + min(3, 2) = 11."""
    weapon = _weapon(WeaponType.LIGHT)
    assert weapon_dicepool(weapon, attrs, {"Blades": 3}, tradition=4) == 11


def test_two_handed_uses_strength(attrs):
    """STR 3 + Axes 4 + reach 2 + min(4, ceil(7/2)=4) = 13."""
    weapon = _weapon(WeaponType.TWO_HANDED, reach=2, skill_name="Axes")
    assert weapon_dicepool(weapon, attrs, {"Axes": 4}, tradition=7) == 13


def test_one_handed_uses_strength(attrs):
    """STR 3 + 2 + 1 + min(2, 3) = 8."""
    weapon = _weapon(WeaponType.ONE_HANDED)
    assert weapon_dicepool(weapon, attrs, {"Blades": 2}, tradition=5) == 8


def test_weapon_tradition_bonus_uses_weapon_skill_rank(attrs):
    """Tradition 10 wants 5, Blades 1 caps it at 1: 5 + 1 + 1 + 1 = 8."""
    weapon = _weapon(WeaponType.LIGHT)
    assert weapon_dicepool(weapon, attrs, {"Blades": 1, "Dodge": 9}, tradition=10) == 8


def test_weapon_without_skill_name_uses_default_skill(attrs):
    """No skillName → 'Weapon' skill. Unranked: just AGI 5 + reach 0."""
    weapon = _weapon(WeaponType.LIGHT, reach=0, skill_name=None)
    assert weapon_dicepool(weapon, attrs, {"Blades": 5}, tradition=6) == 5
    # Ranked: 5 + 2 + 0 + min(2, 3) = 9
    assert weapon_dicepool(weapon, attrs, {"Weapon": 2}, tradition=6) == 9


# --- Health pools ---

def test_health_pools(attrs):
    pools = health_pools(attrs, "wil")
    assert pools.hp == 20       # 16 + BOD 4
    assert pools.stam == 22     # 16 + WIL 6
    assert pools.drain == 22    # 16 + WIL 6
    assert pools.luk == 2


def test_drain_uses_cast_stat(attrs):
    assert health_pools(attrs, "int").drain == 21
    assert health_pools(attrs, "cha").drain == 19


def test_health_modifiers(attrs):
    pools = health_pools(attrs, "wil", StatModifiers(hp=2, stam=1, drain=-3))
    assert (pools.hp, pools.stam, pools.drain) == (22, 23, 19)
    assert pools.luk == 2


# --- Defense ---

def test_passive_dodge_ignores_skill(attrs):
    """INT 5 + REA 4 = 9 regardless of Dodge rank."""
    assert defense_stats(attrs, 5, {"Dodge": 8}).dodge_passive == 9


def test_active_dodge(attrs):
    """9 + 4 + min(4, 3) = 16."""
    assert defense_stats(attrs, 5, {"Dodge": 4}).dodge_active == 16


def test_active_dodge_light_armor_and_modifier(attrs):
    mods = StatModifiers(dodge=2, light_armor_bonus=1)
    assert defense_stats(attrs, 5, {"Dodge": 4}, mods).dodge_active == 19


def test_dodge_tradition_three(attrs):
    """Tradition 3, Dodge 6: 9 + 6 + ceil(1.5)=2 = 17."""
    assert defense_stats(attrs, 3, {"Dodge": 6}).dodge_active == 17


def test_parry_and_block(attrs):
    """Parry 3: 9 + 3 + 3 = 15. Block 2: 9 + 2 + 2 = 13."""
    stats = defense_stats(attrs, 7, {"Parry": 3, "Block": 2}, StatModifiers(block=1))
    assert stats.parry == 15
    assert stats.block == 14


def test_no_defense_skills(attrs):
    stats = defense_stats(attrs, 0, {})
    assert stats.dodge_active == stats.parry == stats.block == stats.dodge_passive == 9


# --- Resist ---

def test_resist_stats(attrs):
    stats = resist_stats(attrs)
    assert stats.physical == 9     # BOD 4 + AGI 5
    assert stats.mental == 9       # WIL 6 + CHA 3
    assert stats.dv_threshold == 4


# --- Soak ---

def test_soak_halves_round_down():
    """LOG 3 → floor(1.5) = 1, not 2."""
    attrs = Attributes(body=4, logic=3, strength=3, agility=5, willpower=6, charisma=3)
    stats = soak_stats(attrs)
    assert stats.armor == 5        # 4 + 1
    assert stats.physical == 5     # 3 + 2
    assert stats.mental == 7       # 6 + 1
    assert stats.drain == 12       # 2 * 6


def test_soak_modifiers(attrs):
    stats = soak_stats(attrs, StatModifiers(armor=2, physical=1, mental=-1, drain=3))
    assert stats.armor == 8        # 4 + 2 + 2
    assert stats.physical == 6     # 3 + 2 + 1
    assert stats.mental == 6       # 6 + 1 - 1
    assert stats.drain == 15       # 12 + 3


# --- Modifiers and shields ---

def test_modifiers_from_mapping():
    mods = StatModifiers.from_mapping({"hp": 2, "lightArmorBonus": 1, "bogus": 9})
    assert mods == StatModifiers(hp=2, light_armor_bonus=1)


def test_modifiers_default_zero():
    assert StatModifiers.from_mapping({}) == StatModifiers()


def test_shield_bonus():
    assert shield_bonus(ShieldType.NONE) == 0
    assert shield_bonus("buckler") == 1
    assert shield_bonus("tower") == 4
    assert shield_bonus("mystery") == 0
