"""Tests for the Character model and its attribute/affinity lookups."""

import pytest

from bp_planner.models.character import Affinities, Attributes, Character
from bp_planner.models.constants import DEFAULT_BP_BUDGET, Attribute, Color


# --- Attributes ---

def test_attributes_default_to_one():
    assert Attributes().values() == [1] * 9


def test_attribute_lookup_by_enum_and_code():
    attrs = Attributes(willpower=6, luck=2)
    assert attrs[Attribute.WILLPOWER] == 6
    assert attrs["wil"] == 6
    assert attrs["luk"] == 2


def test_attribute_lookup_unknown_code():
    with pytest.raises(ValueError):
        Attributes()["xyz"]


def test_attribute_codes_round_trip():
    attrs = Attributes(body=4, agility=5, logic=3)
    codes = attrs.as_codes()
    assert codes["bod"] == 4
    assert codes["log"] == 3
    assert Attributes.from_codes(codes) == attrs


def test_from_codes_fills_missing_with_one():
    attrs = Attributes.from_codes({"str": 7})
    assert attrs.strength == 7
    assert attrs.body == 1


# --- Affinities ---

def test_affinity_lookup_case_insensitive():
    aff = Affinities(w=3, b=7)
    assert aff["W"] == 3
    assert aff["b"] == 7
    assert aff[Color.BLACK] == 7


@pytest.mark.parametrize("code", ["X", "wu", ""])
def test_unknown_affinity_colour_is_zero(code):
    assert Affinities(w=3, u=4)[code] == 0


def test_affinity_total():
    assert Affinities(w=1, u=2, b=3, r=4, g=5).total == 15


# --- Character ---

def test_character_defaults():
    character = Character()
    assert character.tradition == 1
    assert character.cast_stat == Attribute.LOGIC
    assert character.bp_budget == DEFAULT_BP_BUDGET == 1620
    assert character.skills == {}
    assert character.affinities.total == 0


def test_characters_do_not_share_collections():
    a, b = Character(), Character()
    a.skills["Dodge"] = 3
    assert b.skills == {}
