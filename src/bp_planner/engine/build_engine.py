"""Build engine: BP totals, the character sheet, rule validation.

Ties the cost formulas, the group-aware skill aggregator, the affinity
evaluator, and the derived stat formulas together for a whole Character.

Everything here is a pure function of its arguments: the Character and
the databases are read, never modified, and rule violations come back as
BuildError records rather than exceptions.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from bp_planner.engine.affinity import (
    affinity_points,
    affinities_used,
    meets_ability_requirement,
)
from bp_planner.engine.build_config import BuildConfig
from bp_planner.engine.costs import (
    ability_costs,
    attribute_costs,
    index_abilities,
    knowledge_discount,
    knowledge_skill_costs,
    tradition_cost,
)
from bp_planner.engine.skills import effective_skill_rank, group_aware_skill_costs
from bp_planner.models.ability import AbilityDefinition
from bp_planner.models.character import Attributes, Character, CharacterAbility, KnowledgeSkill
from bp_planner.models.constants import ATTRIBUTE_NAMES, COLOR_NAMES, ArmorType, Attribute, Color
from bp_planner.models.derived_stats import (
    DefenseStats,
    HealthPools,
    ResistStats,
    SoakStats,
    StatModifiers,
    defense_stats,
    health_pools,
    resist_stats,
    skill_dicepool,
    soak_stats,
    weapon_dicepool,
)
from bp_planner.models.skill import SkillDefinition
from bp_planner.parser.affinity_parser import affinity_req_for_rank, format_affinity_req


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class BuildError:
    """A single rule violation discovered during validation."""

    category: str   # "attributes" | "tradition" | "affinities" | "abilities" | "budget"
    message: str


@dataclass(slots=True)
class WeaponDicepool:
    weapon_id: str
    dicepool: int


@dataclass
class CharacterSheet:
    """Complete computed snapshot for a character build."""

    # BP breakdown
    attribute_cost: float = 0
    tradition_cost: float = 0
    skill_costs: float = 0
    knowledge_costs: float = 0      # after discount
    knowledge_discount: float = 0
    ability_costs: int = 0
    bp_spent: float = 0
    bp_remaining: float = 0
    is_over_budget: bool = False

    # Affinity budget
    affinity_points: int = 0
    affinities_used: int = 0
    affinity_points_remaining: int = 0

    health: HealthPools | None = None
    defense: DefenseStats | None = None
    resist: ResistStats | None = None
    soak: SoakStats | None = None

    # Skill name → dicepool, using the group-resolved rank
    skill_dicepools: dict[str, int] = field(default_factory=dict)

    # One entry per weapon, in the character's order
    weapon_dicepools: list[WeaponDicepool] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Totals
# ---------------------------------------------------------------------------


def total_bp_spent(
    attributes: Attributes,
    tradition: int,
    skill_ranks: Mapping[str, int],
    skill_defs: Iterable[SkillDefinition],
    abilities: Iterable[CharacterAbility],
    ability_db: Iterable[AbilityDefinition],
    knowledge_skills: Iterable[KnowledgeSkill] = (),
) -> float:
    """Grand BP total: attributes + tradition + skills + knowledge + abilities."""
    return (
        attribute_costs(attributes)
        + tradition_cost(tradition)
        + group_aware_skill_costs(skill_ranks, skill_defs)
        + knowledge_skill_costs(knowledge_skills, attributes.logic, attributes.intuition)
        + ability_costs(abilities, ability_db)
    )


def character_bp_spent(
    character: Character,
    skill_defs: Iterable[SkillDefinition],
    ability_db: Iterable[AbilityDefinition],
) -> float:
    return total_bp_spent(
        character.attributes,
        character.tradition,
        character.skills,
        skill_defs,
        character.abilities,
        ability_db,
        character.knowledge_skills,
    )


# ---------------------------------------------------------------------------
# Character sheet
# ---------------------------------------------------------------------------


def compute_sheet(
    character: Character,
    skill_defs: Iterable[SkillDefinition],
    ability_db: Iterable[AbilityDefinition],
    config: BuildConfig | None = None,
) -> CharacterSheet:
    """Compute every cost and derived stat the character sheet displays."""
    config = config or BuildConfig()
    skill_defs = list(skill_defs)
    ability_db = list(ability_db)
    attrs = character.attributes

    skills_bp = group_aware_skill_costs(character.skills, skill_defs)
    knowledge_bp = knowledge_skill_costs(character.knowledge_skills, attrs.logic, attrs.intuition)
    bp_spent = character_bp_spent(character, skill_defs, ability_db)

    light_armor = config.light_armor_dodge_bonus if character.armor_type == ArmorType.LIGHT else 0

    skill_pools = {
        skill.name: skill_dicepool(
            character.tradition,
            effective_skill_rank(skill.name, character.skills, skill_defs),
            attrs[skill.attribute],
        )
        for skill in skill_defs
    }
    weapon_pools = [
        WeaponDicepool(
            weapon.id, weapon_dicepool(weapon, attrs, character.skills, character.tradition)
        )
        for weapon in character.weapons
    ]

    budget = affinity_points(character.tradition)
    used = affinities_used(character.affinities)

    return CharacterSheet(
        attribute_cost=attribute_costs(attrs),
        tradition_cost=tradition_cost(character.tradition),
        skill_costs=skills_bp,
        knowledge_costs=knowledge_bp,
        knowledge_discount=knowledge_discount(attrs.logic, attrs.intuition),
        ability_costs=ability_costs(character.abilities, ability_db),
        bp_spent=bp_spent,
        bp_remaining=character.bp_budget - bp_spent,
        is_over_budget=bp_spent > character.bp_budget,
        affinity_points=budget,
        affinities_used=used,
        affinity_points_remaining=budget - used,
        health=health_pools(attrs, character.cast_stat),
        defense=defense_stats(
            attrs,
            character.tradition,
            character.skills,
            StatModifiers(light_armor_bonus=light_armor),
        ),
        resist=resist_stats(attrs),
        soak=soak_stats(attrs),
        skill_dicepools=skill_pools,
        weapon_dicepools=weapon_pools,
    )


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _validate_attributes(character: Character, config: BuildConfig) -> list[BuildError]:
    errors: list[BuildError] = []
    for attr in Attribute:
        value = character.attributes[attr]
        if not config.attribute_min <= value <= config.attribute_max:
            errors.append(BuildError(
                "attributes",
                f"{ATTRIBUTE_NAMES[attr]} must be {config.attribute_min}-"
                f"{config.attribute_max}, got {value}",
            ))
    return errors


def _validate_affinities(character: Character) -> list[BuildError]:
    errors: list[BuildError] = []
    for color in Color:
        value = character.affinities[color]
        if value < 0:
            errors.append(BuildError(
                "affinities", f"{COLOR_NAMES[color]} affinity cannot be negative, got {value}"
            ))
    budget = affinity_points(character.tradition)
    used = affinities_used(character.affinities)
    if used > budget:
        errors.append(BuildError(
            "affinities",
            f"Affinities use {used} points but tradition {character.tradition} "
            f"allows {budget}",
        ))
    return errors


def _validate_abilities(
    character: Character,
    ability_db: list[AbilityDefinition],
) -> list[BuildError]:
    errors: list[BuildError] = []
    index = index_abilities(ability_db)
    for pick in character.abilities:
        ability = index.get(pick.name)
        if ability is None:
            errors.append(BuildError("abilities", f"Unknown ability {pick.name!r}"))
            continue
        if not meets_ability_requirement(character.affinities, ability, pick.rank):
            req = affinity_req_for_rank(ability.affinity_req, pick.rank)
            errors.append(BuildError(
                "abilities",
                f"{pick.name} (rank {pick.rank + 1}) needs affinity "
                f"{format_affinity_req(req)}",
            ))
    return errors


def validate_character(
    character: Character,
    skill_defs: Iterable[SkillDefinition],
    ability_db: Iterable[AbilityDefinition],
    config: BuildConfig | None = None,
) -> list[BuildError]:
    """Check a build against the rules. Returns [] for a legal build."""
    config = config or BuildConfig()
    ability_db = list(ability_db)

    errors = _validate_attributes(character, config)

    if not config.tradition_min <= character.tradition <= config.tradition_max:
        errors.append(BuildError(
            "tradition",
            f"Tradition must be {config.tradition_min}-{config.tradition_max}, "
            f"got {character.tradition}",
        ))

    errors.extend(_validate_affinities(character))
    errors.extend(_validate_abilities(character, ability_db))

    spent = character_bp_spent(character, skill_defs, ability_db)
    if spent > character.bp_budget:
        errors.append(BuildError(
            "budget",
            f"Build costs {spent:g} BP, over the {character.bp_budget} BP budget",
        ))

    return errors
