"""Ability data model with parsed affinity requirements."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class AffinityColorReq:
    """One term of an affinity requirement.

    Examples: 7B (7 Black), 5(B|R) (5 points across Black and Red combined)
    """
    colors: tuple[str, ...]   # uppercase colour codes, source order
    is_or: bool               # True if the amount may be split across colors
    amount: int


@dataclass(frozen=True, slots=True)
class AffinityRequirement:
    """All terms must hold, and the pool total must reach ``total``."""
    requirements: tuple[AffinityColorReq, ...] = ()
    total: int = 0


# Zero-requirement sentinel: always met.
EMPTY_REQUIREMENT = AffinityRequirement()


@dataclass(frozen=True, slots=True)
class ColorContributions:
    """Flat per-colour points an ability lists. Informational only."""
    w: int = 0
    u: int = 0
    b: int = 0
    r: int = 0
    g: int = 0


@dataclass(frozen=True, slots=True)
class AbilityDefinition:
    """An ability database entry.

    ``bp_cost`` is an int for single-rank abilities or a tuple indexed by
    rank for multi-rank ones. ``affinity_req`` is kept raw; multi-rank
    abilities put one requirement per line.
    """
    category: str
    name: str
    description: str = ""
    rules_text: str = ""
    bp_cost: int | tuple[int, ...] = 0
    affinity_req: str = ""
    color_contributions: ColorContributions = field(default_factory=ColorContributions)

    @property
    def is_multi_rank(self) -> bool:
        return isinstance(self.bp_cost, tuple)
