"""Convert externally supplied JSON records into model objects.

The ability and skill databases come from a spreadsheet export, and saved
characters from the character sheet application; all three use camelCase
keys. These converters only reshape already-decoded data. Reading files is
left to the caller.

Structural problems (a record that isn't a dict, an entry without a name)
raise ValueError. Quirks that the calculators tolerate anyway (missing
numbers, null cost slots, unknown colours) are passed through or defaulted.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from bp_planner.models.ability import AbilityDefinition, ColorContributions
from bp_planner.models.character import (
    Affinities,
    Attributes,
    Character,
    CharacterAbility,
    KnowledgeSkill,
    Weapon,
)
from bp_planner.models.constants import (
    DEFAULT_BP_BUDGET,
    INDIVIDUAL_SKILL_MULTIPLIER,
    PARENT_SKILL_MULTIPLIER,
    ArmorType,
    Attribute,
    ShieldType,
    SkillType,
    WeaponType,
)
from bp_planner.models.skill import SkillDefinition


def _require_dict(data: Any, what: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ValueError(f"{what} must be an object, got {type(data).__name__}")
    return data


def _require_list(data: Any, what: str) -> list[Any]:
    if not isinstance(data, list):
        raise ValueError(f"{what} must be a list, got {type(data).__name__}")
    return data


def _require_name(data: dict[str, Any], what: str) -> str:
    name = data.get("name")
    if not isinstance(name, str) or not name:
        raise ValueError(f"{what} has no name: {data!r}")
    return name


def _int(value: Any, default: int = 0) -> int:
    """Lenient int: None and blanks become ``default``."""
    if value is None or value == "":
        return default
    if isinstance(value, (int, float, str)):
        return int(value)
    raise ValueError(f"Expected integer-like value, got: {value!r}")


# ---------------------------------------------------------------------------
# Abilities
# ---------------------------------------------------------------------------


def _bp_cost(raw: Any) -> int | tuple[int, ...]:
    if isinstance(raw, list):
        return tuple(_int(v) for v in raw)
    return _int(raw)


def ability_from_dict(data: Any) -> AbilityDefinition:
    """Parse one ability database entry."""
    data = _require_dict(data, "Ability")
    name = _require_name(data, "Ability")
    colors = _require_dict(data.get("colorContributions") or {}, "colorContributions")
    return AbilityDefinition(
        category=str(data.get("category", "")),
        name=name,
        description=str(data.get("description", "")),
        rules_text=str(data.get("rulesText", "")),
        bp_cost=_bp_cost(data.get("bpCost")),
        affinity_req=str(data.get("affinityReq") or ""),
        color_contributions=ColorContributions(
            w=_int(colors.get("w")),
            u=_int(colors.get("u")),
            b=_int(colors.get("b")),
            r=_int(colors.get("r")),
            g=_int(colors.get("g")),
        ),
    )


def abilities_from_list(data: Any) -> list[AbilityDefinition]:
    """Parse the whole ability database."""
    return [ability_from_dict(row) for row in _require_list(data, "Ability database")]


# ---------------------------------------------------------------------------
# Skills
# ---------------------------------------------------------------------------


def skill_definition_from_dict(data: Any) -> SkillDefinition:
    """Parse one skill database entry.

    Only ``parent`` and ``individual`` skills are static; anything else
    raises ValueError.
    """
    data = _require_dict(data, "Skill")
    name = _require_name(data, "Skill")
    try:
        skill_type = SkillType(data.get("type", SkillType.INDIVIDUAL.value))
    except ValueError:
        raise ValueError(f"Skill {name!r} has unsupported type {data.get('type')!r}") from None

    default_mult = (
        PARENT_SKILL_MULTIPLIER if skill_type == SkillType.PARENT
        else INDIVIDUAL_SKILL_MULTIPLIER
    )
    multiplier = data.get("costMultiplier")
    return SkillDefinition(
        name=name,
        type=skill_type,
        attribute=Attribute(data.get("attribute", Attribute.BODY.value)),
        cost_multiplier=default_mult if multiplier is None else float(multiplier),
        parent_group=data.get("parentGroup") or None,
        category=data.get("category") or None,
    )


def skill_definitions_from_list(data: Any) -> list[SkillDefinition]:
    """Parse the skill database, skipping legacy ``knowledge`` rows.

    Knowledge skills are free-form per character, so static rows for them
    carry nothing the calculators use.
    """
    rows = _require_list(data, "Skill database")
    return [
        skill_definition_from_dict(row)
        for row in rows
        if not (isinstance(row, dict) and row.get("type") == "knowledge")
    ]


# ---------------------------------------------------------------------------
# Characters
# ---------------------------------------------------------------------------


def _weapon_from_dict(data: Any) -> Weapon:
    data = _require_dict(data, "Weapon")
    return Weapon(
        id=str(data.get("id", "")),
        name=str(data.get("name", "")),
        type=WeaponType(data.get("type", WeaponType.ONE_HANDED.value)),
        power=_int(data.get("power")),
        reach=_int(data.get("reach")),
        shield=ShieldType(data.get("shield") or ShieldType.NONE.value),
        element=data.get("element") or None,
        skill_name=data.get("skillName") or None,
    )


def _knowledge_skill_from_dict(data: Any) -> KnowledgeSkill:
    data = _require_dict(data, "Knowledge skill")
    return KnowledgeSkill(name=str(data.get("name", "")), rank=_int(data.get("rank")))


def _character_ability_from_dict(data: Any) -> CharacterAbility:
    data = _require_dict(data, "Character ability")
    return CharacterAbility(name=_require_name(data, "Character ability"), rank=_int(data.get("rank")))


def character_from_dict(data: Any) -> Character:
    """Parse a saved character record."""
    data = _require_dict(data, "Character")
    if "attributes" not in data:
        raise ValueError("Character record has no attributes")

    affinities = _require_dict(data.get("affinities") or {}, "affinities")
    skills = {
        str(name): _int(rank)
        for name, rank in _require_dict(data.get("skills") or {}, "skills").items()
    }
    return Character(
        id=str(data.get("id", "")),
        name=str(data.get("name", "New Character")),
        version=str(data.get("version", "1.0")),
        attributes=Attributes.from_codes(_require_dict(data["attributes"], "attributes")),
        tradition=_int(data.get("tradition")),
        cast_stat=Attribute(data.get("castStat", Attribute.LOGIC.value)),
        affinities=Affinities(
            w=_int(affinities.get("w")),
            u=_int(affinities.get("u")),
            b=_int(affinities.get("b")),
            r=_int(affinities.get("r")),
            g=_int(affinities.get("g")),
        ),
        skills=skills,
        knowledge_skills=[
            _knowledge_skill_from_dict(ks)
            for ks in _require_list(data.get("knowledgeSkills", []), "knowledgeSkills")
        ],
        abilities=[
            _character_ability_from_dict(ab)
            for ab in _require_list(data.get("abilities", []), "abilities")
        ],
        weapons=[_weapon_from_dict(w) for w in _require_list(data.get("weapons", []), "weapons")],
        armor_type=ArmorType(data.get("armorType") or ArmorType.NONE.value),
        notes=str(data.get("notes", "")),
        inventory=str(data.get("inventory", "")),
        bp_budget=_int(data.get("bpBudget"), DEFAULT_BP_BUDGET),
    )


def character_to_dict(character: Character) -> dict[str, Any]:
    """Inverse of character_from_dict, using the same camelCase keys."""
    return {
        "id": character.id,
        "name": character.name,
        "version": character.version,
        "attributes": character.attributes.as_codes(),
        "tradition": character.tradition,
        "castStat": Attribute(character.cast_stat).value,
        "affinities": asdict(character.affinities),
        "skills": dict(character.skills),
        "knowledgeSkills": [asdict(ks) for ks in character.knowledge_skills],
        "abilities": [asdict(ab) for ab in character.abilities],
        "weapons": [
            {
                "id": w.id,
                "name": w.name,
                "type": WeaponType(w.type).value,
                "power": w.power,
                "reach": w.reach,
                "shield": ShieldType(w.shield).value,
                **({"element": w.element} if w.element else {}),
                **({"skillName": w.skill_name} if w.skill_name else {}),
            }
            for w in character.weapons
        ],
        "armorType": ArmorType(character.armor_type).value,
        "notes": character.notes,
        "inventory": character.inventory,
        "bpBudget": character.bp_budget,
    }
