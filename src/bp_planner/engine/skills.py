"""Group-aware skill costs and effective ranks.

A skill group (``SkillType.PARENT``) bought at rank > 0 covers all of its
children: their own ranks are neither charged nor used. The rank map is
expected to be clean (buying a group clears its children, see
set_group_rank), but nothing here relies on that; the group is always
checked first.

Knowledge skills are costed separately, see costs.knowledge_skill_costs.
"""

from collections.abc import Iterable, Mapping

from bp_planner.engine.costs import skill_cost
from bp_planner.models.constants import SkillType
from bp_planner.models.skill import SkillDefinition


def _rank(ranks: Mapping[str, int], name: str) -> int:
    rank = ranks.get(name, 0) or 0
    return rank if rank > 0 else 0


def group_aware_skill_costs(
    ranks: Mapping[str, int],
    defs: Iterable[SkillDefinition],
) -> float:
    """Total BP for skills, charging groups instead of their children."""
    defs = list(defs)
    total: float = 0
    bought_groups: set[str] = set()

    for skill in defs:
        if skill.type != SkillType.PARENT:
            continue
        rank = _rank(ranks, skill.name)
        if rank > 0:
            total += skill_cost(rank, skill.cost_multiplier)
            bought_groups.add(skill.name)

    for skill in defs:
        if skill.type != SkillType.INDIVIDUAL:
            continue
        if skill.parent_group and skill.parent_group in bought_groups:
            continue
        total += skill_cost(_rank(ranks, skill.name), skill.cost_multiplier)

    return total


def effective_skill_rank(
    name: str,
    ranks: Mapping[str, int],
    defs: Iterable[SkillDefinition],
) -> int:
    """Rank actually in effect: the group's rank if bought, else the skill's own."""
    skill = next((s for s in defs if s.name == name), None)
    if skill is not None and skill.parent_group:
        group_rank = _rank(ranks, skill.parent_group)
        if group_rank > 0:
            return group_rank
    return _rank(ranks, name)


def child_skills(group: str, defs: Iterable[SkillDefinition]) -> list[SkillDefinition]:
    return [s for s in defs if s.parent_group == group]


def set_group_rank(
    ranks: Mapping[str, int],
    group: str,
    rank: int,
    defs: Iterable[SkillDefinition],
) -> dict[str, int]:
    """Return a new rank map with ``group`` at ``rank`` and its children cleared.

    Rank <= 0 removes the group. Children are cleared either way.
    """
    updated = dict(ranks)
    if rank <= 0:
        updated.pop(group, None)
    else:
        updated[group] = rank
    for child in child_skills(group, defs):
        updated.pop(child.name, None)
    return updated
