"""Attribute codes, affinity colours, and fixed rule constants.

Attribute and colour codes match the keys used by the character JSON and
the ability database, so enum members compare equal to their raw strings.
"""

from enum import Enum


class Attribute(str, Enum):
    """The nine character attributes, keyed by their three-letter code."""
    BODY = "bod"
    AGILITY = "agi"
    REACTION = "rea"
    STRENGTH = "str"
    WILLPOWER = "wil"
    INTUITION = "int"
    LOGIC = "log"
    CHARISMA = "cha"
    LUCK = "luk"


class Color(str, Enum):
    """Affinity colours. Requirement strings use the uppercase code."""
    WHITE = "W"
    BLUE = "U"
    BLACK = "B"
    RED = "R"
    GREEN = "G"


class SkillType(str, Enum):
    PARENT = "parent"          # skill group, subsumes its children
    INDIVIDUAL = "individual"


class WeaponType(str, Enum):
    LIGHT = "light"
    ONE_HANDED = "1h"
    TWO_HANDED = "2h"


class ShieldType(str, Enum):
    NONE = "none"
    BUCKLER = "buckler"
    MEDIUM = "medium"
    HEAVY = "heavy"
    TOWER = "tower"


class ArmorType(str, Enum):
    NONE = "none"
    LIGHT = "light"
    NORMAL = "normal"


# Friendly display names
ATTRIBUTE_NAMES: dict[Attribute, str] = {
    Attribute.BODY: "Body",
    Attribute.AGILITY: "Agility",
    Attribute.REACTION: "Reaction",
    Attribute.STRENGTH: "Strength",
    Attribute.WILLPOWER: "Willpower",
    Attribute.INTUITION: "Intuition",
    Attribute.LOGIC: "Logic",
    Attribute.CHARISMA: "Charisma",
    Attribute.LUCK: "Luck",
}

COLOR_NAMES: dict[Color, str] = {
    Color.WHITE: "White",
    Color.BLUE: "Blue",
    Color.BLACK: "Black",
    Color.RED: "Red",
    Color.GREEN: "Green",
}

# Skill cost multipliers by kind
PARENT_SKILL_MULTIPLIER = 2.5
INDIVIDUAL_SKILL_MULTIPLIER = 1.0
KNOWLEDGE_SKILL_MULTIPLIER = 0.5

# Weapons without an explicit skill roll against this one
DEFAULT_WEAPON_SKILL = "Weapon"

# Defence lines that read a skill rank straight from the rank map
DODGE_SKILL = "Dodge"
PARRY_SKILL = "Parry"
BLOCK_SKILL = "Block"

SHIELD_BONUSES: dict[ShieldType, int] = {
    ShieldType.NONE: 0,
    ShieldType.BUCKLER: 1,
    ShieldType.MEDIUM: 2,
    ShieldType.HEAVY: 3,
    ShieldType.TOWER: 4,
}

# Starting BP budget for a new character
DEFAULT_BP_BUDGET = 1620
