"""Dump the BP breakdown and derived stats for a character build.

Computes the full character sheet to verify the whole pipeline:
attributes → tradition → skills → abilities → BP total → derived stats.

Usage:
    python -m scripts.dump_character [--character PATH] [--abilities PATH]
                                     [--skills PATH] [--json]

Without --character, dumps a built-in sample character. Without
--abilities/--skills, uses a small built-in database.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

from bp_planner.engine.build_engine import compute_sheet, validate_character
from bp_planner.models.character import (
    Affinities,
    Attributes,
    Character,
    CharacterAbility,
    KnowledgeSkill,
    Weapon,
)
from bp_planner.models.constants import ArmorType, Attribute, ShieldType, WeaponType
from bp_planner.parser.data_loader import (
    abilities_from_list,
    character_from_dict,
    skill_definitions_from_list,
)


SAMPLE_SKILLS: list[dict[str, Any]] = [
    {"name": "ATHLETICS", "type": "parent", "attribute": "str", "costMultiplier": 2.5},
    {"name": "Strongman", "type": "individual", "attribute": "str",
     "costMultiplier": 1.0, "parentGroup": "ATHLETICS"},
    {"name": "Gymnastics", "type": "individual", "attribute": "agi",
     "costMultiplier": 1.0, "parentGroup": "ATHLETICS"},
    {"name": "Weapon", "type": "individual", "attribute": "agi", "costMultiplier": 1.0},
    {"name": "Dodge", "type": "individual", "attribute": "rea", "costMultiplier": 1.0},
    {"name": "Spellcasting", "type": "individual", "attribute": "wil", "costMultiplier": 1.0},
]

SAMPLE_ABILITIES: list[dict[str, Any]] = [
    {"category": "Combat", "name": "Shadow Step", "bpCost": 15,
     "affinityReq": "7B,(9)", "colorContributions": {"b": 3}},
    {"category": "Magic", "name": "Radiant Ward", "bpCost": [0, 10, 20, 30],
     "affinityReq": "4W,(6)\r\n6W,(9)\r\n8W,(12)", "colorContributions": {"w": 4}},
    {"category": "Utility", "name": "Wild Surge", "bpCost": 20,
     "affinityReq": "5R|G,(8)", "colorContributions": {"r": 2, "g": 2}},
]


def _sample_character() -> Character:
    return Character(
        id="sample-1",
        name="Sample Adept",
        attributes=Attributes(
            body=4, agility=5, reaction=4, strength=3, willpower=6,
            intuition=5, logic=4, charisma=3, luck=2,
        ),
        tradition=4,
        cast_stat=Attribute.WILLPOWER,
        affinities=Affinities(w=6, b=3, r=3),
        skills={"ATHLETICS": 2, "Weapon": 3, "Dodge": 4, "Spellcasting": 3},
        knowledge_skills=[KnowledgeSkill("Arcane Lore", 4), KnowledgeSkill("History", 3)],
        abilities=[CharacterAbility("Radiant Ward", 1), CharacterAbility("Wild Surge", 0)],
        weapons=[
            Weapon(id="w1", name="Rapier", type=WeaponType.LIGHT, power=4, reach=1),
            Weapon(id="w2", name="Spear & Buckler", type=WeaponType.ONE_HANDED,
                   power=5, reach=2, shield=ShieldType.BUCKLER),
        ],
        armor_type=ArmorType.LIGHT,
        bp_budget=1620,
    )


def _load_json(path: Path) -> Any:
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Dump a character's BP costs and stats")
    parser.add_argument("--character", type=Path, help="Character JSON file")
    parser.add_argument("--abilities", type=Path, help="Ability database JSON file")
    parser.add_argument("--skills", type=Path, help="Skill database JSON file")
    parser.add_argument("--json", action="store_true", help="Print the sheet as JSON")
    args = parser.parse_args(argv)

    try:
        abilities = abilities_from_list(
            _load_json(args.abilities) if args.abilities else SAMPLE_ABILITIES
        )
        skills = skill_definitions_from_list(
            _load_json(args.skills) if args.skills else SAMPLE_SKILLS
        )
        character = (
            character_from_dict(_load_json(args.character))
            if args.character else _sample_character()
        )
    except (OSError, json.JSONDecodeError, ValueError) as exc:
        print(f"Error: {exc}")
        return 1

    sheet = compute_sheet(character, skills, abilities)
    errors = validate_character(character, skills, abilities)

    if args.json:
        payload = asdict(sheet)
        payload["errors"] = [asdict(e) for e in errors]
        print(json.dumps(payload, indent=2))
        return 0

    print(f"=== {character.name} ===")
    print(f"\nBP spent: {sheet.bp_spent:g} / {character.bp_budget} "
          f"({sheet.bp_remaining:g} remaining)")
    print(f"  Attributes:  {sheet.attribute_cost:g}")
    print(f"  Tradition:   {sheet.tradition_cost:g}")
    print(f"  Skills:      {sheet.skill_costs:g}")
    print(f"  Knowledge:   {sheet.knowledge_costs:g} (discount {sheet.knowledge_discount:g})")
    print(f"  Abilities:   {sheet.ability_costs}")

    print(f"\nAffinity points: {sheet.affinities_used} / {sheet.affinity_points}")

    print("\n--- Pools ---")
    print(f"  HP {sheet.health.hp}  STAM {sheet.health.stam}  "
          f"DRAIN {sheet.health.drain}  LUK {sheet.health.luk}")
    print("\n--- Defense ---")
    print(f"  Dodge {sheet.defense.dodge_passive} passive / {sheet.defense.dodge_active} active  "
          f"Parry {sheet.defense.parry}  Block {sheet.defense.block}")
    print(f"  Resist physical {sheet.resist.physical}  mental {sheet.resist.mental}  "
          f"DV threshold {sheet.resist.dv_threshold}")
    print(f"  Soak armor {sheet.soak.armor}  physical {sheet.soak.physical}  "
          f"mental {sheet.soak.mental}  drain {sheet.soak.drain}")

    print("\n--- Skill dicepools ---")
    for name, pool in sheet.skill_dicepools.items():
        print(f"  {name:20s} {pool:3d}")

    if character.weapons:
        print("\n--- Weapon dicepools ---")
        for weapon, pool in zip(character.weapons, sheet.weapon_dicepools):
            print(f"  {weapon.name:20s} {pool.dicepool:3d}")

    if errors:
        print("\nWarnings:")
        for err in errors:
            print(f"  [{err.category}] {err.message}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
