"""Build-point cost formulas.

All costs clamp to zero below their minimum input instead of going
negative, and none of them raise for out-of-range values.

    attribute   (v² + v - 2) * 2.5          v <= 1 → 0
    tradition   (t² + 7t - 8) * 2.5         t <= 0 → 0
    skill       (r² + r + 2) * multiplier   r <= 0 → 0
    knowledge   discount = (LOG + INT) * 10
"""

from collections.abc import Iterable

from bp_planner.models.ability import AbilityDefinition
from bp_planner.models.character import Attributes, CharacterAbility, KnowledgeSkill
from bp_planner.models.constants import KNOWLEDGE_SKILL_MULTIPLIER
from bp_planner.models.ranks import pick_by_rank


def attribute_cost(value: int) -> float:
    if value <= 1:
        return 0
    return (value * value + value - 2) * 2.5


def attribute_costs(attributes: Attributes) -> float:
    """Sum of attribute_cost over all nine attributes."""
    return sum(attribute_cost(v) for v in attributes.values())


def tradition_cost(tradition: int) -> float:
    if tradition <= 0:
        return 0
    return (tradition * tradition + 7 * tradition - 8) * 2.5


def skill_cost(rank: int, multiplier: float) -> float:
    """Multiplier is 2.5 for skill groups, 1.0 for skills, 0.5 for knowledge."""
    if rank <= 0:
        return 0
    return (rank * rank + rank + 2) * multiplier


def knowledge_discount(logic: int, intuition: int) -> float:
    return (logic + intuition) * 10


def knowledge_skill_costs(
    entries: Iterable[KnowledgeSkill],
    logic: int,
    intuition: int,
) -> float:
    """Knowledge skill total after the LOG/INT discount, floored at 0."""
    gross = sum(
        skill_cost(entry.rank, KNOWLEDGE_SKILL_MULTIPLIER)
        for entry in entries
        if entry.rank > 0
    )
    return max(0, gross - knowledge_discount(logic, intuition))


def index_abilities(db: Iterable[AbilityDefinition]) -> dict[str, AbilityDefinition]:
    # First entry wins on duplicate names.
    index: dict[str, AbilityDefinition] = {}
    for ability in db:
        index.setdefault(ability.name, ability)
    return index


def ability_cost(ability: AbilityDefinition, rank: int) -> int:
    """BP for one ability at a 0-indexed rank.

    Multi-rank costs cap the rank at the top slot. Single-rank costs ignore it.
    """
    if isinstance(ability.bp_cost, tuple):
        return pick_by_rank(ability.bp_cost, rank, overflow="last") or 0
    return ability.bp_cost or 0


def ability_costs(
    chosen: Iterable[CharacterAbility],
    db: Iterable[AbilityDefinition],
) -> int:
    """Sum ability costs. Names missing from the database cost nothing."""
    index = index_abilities(db)
    total = 0
    for pick in chosen:
        ability = index.get(pick.name)
        if ability is None:
            continue
        total += ability_cost(ability, pick.rank)
    return total
