"""Character build data model.

Represents a player's build choices: attribute allocation, tradition and
affinities, skill ranks, knowledge skills, abilities, and weapons.
This is the core input to the cost and derived stats calculators, which
only ever read it.
"""

from dataclasses import dataclass, field, fields

from bp_planner.models.constants import (
    DEFAULT_BP_BUDGET,
    ArmorType,
    Attribute,
    Color,
    ShieldType,
    WeaponType,
)


# Attribute code → dataclass field name
_ATTRIBUTE_FIELDS: dict[Attribute, str] = {
    Attribute.BODY: "body",
    Attribute.AGILITY: "agility",
    Attribute.REACTION: "reaction",
    Attribute.STRENGTH: "strength",
    Attribute.WILLPOWER: "willpower",
    Attribute.INTUITION: "intuition",
    Attribute.LOGIC: "logic",
    Attribute.CHARISMA: "charisma",
    Attribute.LUCK: "luck",
}

_COLOR_FIELDS = frozenset(color.value.lower() for color in Color)


@dataclass(slots=True)
class Attributes:
    """The nine attributes. Nominally 1-10, but nothing here enforces it."""

    body: int = 1
    agility: int = 1
    reaction: int = 1
    strength: int = 1
    willpower: int = 1
    intuition: int = 1
    logic: int = 1
    charisma: int = 1
    luck: int = 1

    def __getitem__(self, key: Attribute | str) -> int:
        """Look up an attribute by enum member or code (``"bod"``, ``"wil"``...)."""
        return getattr(self, _ATTRIBUTE_FIELDS[Attribute(key)])

    def values(self) -> list[int]:
        return [getattr(self, f.name) for f in fields(self)]

    def as_codes(self) -> dict[str, int]:
        return {attr.value: getattr(self, name) for attr, name in _ATTRIBUTE_FIELDS.items()}

    @classmethod
    def from_codes(cls, values: dict[str, int]) -> "Attributes":
        """Build from a code-keyed dict; missing codes default to 1."""
        kwargs = {
            name: int(values[attr.value])
            for attr, name in _ATTRIBUTE_FIELDS.items()
            if attr.value in values
        }
        return cls(**kwargs)


@dataclass(slots=True)
class Affinities:
    """Points invested in each colour."""

    w: int = 0
    u: int = 0
    b: int = 0
    r: int = 0
    g: int = 0

    def __getitem__(self, key: Color | str) -> int:
        """Pool for a colour code, case-insensitive. Unknown colours hold 0."""
        code = (key.value if isinstance(key, Color) else str(key)).lower()
        if code not in _COLOR_FIELDS:
            return 0
        return getattr(self, code)

    @property
    def total(self) -> int:
        return self.w + self.u + self.b + self.r + self.g


@dataclass(slots=True)
class KnowledgeSkill:
    """Free-form knowledge skill; never looked up in the skill database."""
    name: str
    rank: int = 0


@dataclass(slots=True)
class CharacterAbility:
    """Reference into the ability database. Rank is 0-indexed."""
    name: str
    rank: int = 0


@dataclass(slots=True)
class Weapon:
    id: str
    name: str
    type: WeaponType = WeaponType.ONE_HANDED
    power: int = 0
    reach: int = 0
    shield: ShieldType = ShieldType.NONE
    element: str | None = None
    skill_name: str | None = None  # None = roll with the default weapon skill


@dataclass
class Character:
    """A complete character build as supplied by the caller."""

    # Identity
    id: str = ""
    name: str = "New Character"
    version: str = "1.0"

    attributes: Attributes = field(default_factory=Attributes)

    # Magic: tradition 0-10, affinities bounded by tradition * 3
    tradition: int = 1
    cast_stat: Attribute = Attribute.LOGIC
    affinities: Affinities = field(default_factory=Affinities)

    # Skill name → rank (ranks <= 0 are omitted by convention)
    skills: dict[str, int] = field(default_factory=dict)
    knowledge_skills: list[KnowledgeSkill] = field(default_factory=list)

    abilities: list[CharacterAbility] = field(default_factory=list)
    weapons: list[Weapon] = field(default_factory=list)

    armor_type: ArmorType = ArmorType.NONE
    notes: str = ""
    inventory: str = ""

    bp_budget: int = DEFAULT_BP_BUDGET
