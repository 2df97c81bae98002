"""Skill definition data model."""

from dataclasses import dataclass

from bp_planner.models.constants import (
    INDIVIDUAL_SKILL_MULTIPLIER,
    Attribute,
    SkillType,
)


@dataclass(frozen=True, slots=True)
class SkillDefinition:
    """A static skill database entry.

    Children of a skill group carry the group's name in ``parent_group``.
    Buying the group at rank > 0 covers every child.
    """
    name: str
    type: SkillType
    attribute: Attribute
    cost_multiplier: float = INDIVIDUAL_SKILL_MULTIPLIER
    parent_group: str | None = None
    category: str | None = None   # UI grouping only

    @property
    def is_parent(self) -> bool:
        return self.type == SkillType.PARENT
