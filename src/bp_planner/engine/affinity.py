"""Affinity budget and requirement evaluation.

A requirement is met when the pool total reaches ``requirement.total`` and
every term holds. AND-terms check one colour. OR-terms check the *sum* of
the listed colours: 9(R|G) is met by R=5, G=4. One colour alone is not
required to reach the amount.

The affinity budget (tradition * 3) is reported, never enforced here.
"""

from bp_planner.models.ability import AbilityDefinition, AffinityColorReq, AffinityRequirement
from bp_planner.models.character import Affinities
from bp_planner.parser.affinity_parser import affinity_req_for_rank


def affinity_points(tradition: int) -> int:
    """Affinity point budget = tradition * 3."""
    return tradition * 3


def affinities_used(affinities: Affinities) -> int:
    return affinities.total


def affinity_points_remaining(tradition: int, affinities: Affinities) -> int:
    """Budget minus points spent. Negative means over budget."""
    return affinity_points(tradition) - affinities.total


def _term_met(affinities: Affinities, term: AffinityColorReq) -> bool:
    if term.is_or:
        return sum(affinities[color] for color in term.colors) >= term.amount
    return affinities[term.colors[0]] >= term.amount


def meets_affinity_req(affinities: Affinities, requirement: AffinityRequirement) -> bool:
    """True if the pools satisfy the total gate and every term."""
    if affinities.total < requirement.total:
        return False
    return all(_term_met(affinities, term) for term in requirement.requirements)


def meets_ability_requirement(
    affinities: Affinities,
    ability: AbilityDefinition,
    rank: int = 0,
) -> bool:
    """Check an ability's requirement for the chosen rank (0-indexed)."""
    return meets_affinity_req(affinities, affinity_req_for_rank(ability.affinity_req, rank))
