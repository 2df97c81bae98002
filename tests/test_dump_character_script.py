import json

from scripts.dump_character import SAMPLE_ABILITIES, SAMPLE_SKILLS, main


def test_sample_character_text_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "=== Sample Adept ===" in out
    assert "BP spent:" in out
    assert "Rapier" in out


def test_json_output(capsys):
    assert main(["--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["bp_spent"] > 0
    assert [p["weapon_id"] for p in payload["weapon_dicepools"]] == ["w1", "w2"]
    assert "Strongman" in payload["skill_dicepools"]
    assert isinstance(payload["errors"], list)


def test_character_from_files(tmp_path, capsys):
    character = tmp_path / "character.json"
    character.write_text(json.dumps({
        "name": "Plain",
        "attributes": {"bod": 2},
        "tradition": 2,
        "affinities": {"b": 3},
        "abilities": [{"name": "Shadow Step", "rank": 0}],
    }))
    abilities = tmp_path / "abilities.json"
    abilities.write_text(json.dumps(SAMPLE_ABILITIES))
    skills = tmp_path / "skills.json"
    skills.write_text(json.dumps(SAMPLE_SKILLS))

    assert main([
        "--character", str(character),
        "--abilities", str(abilities),
        "--skills", str(skills),
        "--json",
    ]) == 0
    payload = json.loads(capsys.readouterr().out)
    # BOD 2 (10) + tradition 2 (25) + Shadow Step (15)
    assert payload["bp_spent"] == 50
    assert {e["category"] for e in payload["errors"]} == {"abilities"}


def test_missing_file_reports_error(tmp_path, capsys):
    assert main(["--character", str(tmp_path / "nope.json")]) == 1
    assert capsys.readouterr().out.startswith("Error:")


def test_malformed_character_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"name": "No attributes"}))
    assert main(["--character", str(path)]) == 1
    assert "no attributes" in capsys.readouterr().out


def test_non_object_affinities_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"attributes": {}, "affinities": [1, 2]}))
    assert main(["--character", str(path)]) == 1
    assert "affinities must be an object" in capsys.readouterr().out


def test_weapons_without_ids_each_printed(tmp_path, capsys):
    path = tmp_path / "armed.json"
    path.write_text(json.dumps({
        "attributes": {"agi": 5, "str": 3},
        "weapons": [
            {"name": "Dagger", "type": "light"},
            {"name": "Spear", "type": "2h", "reach": 3},
        ],
    }))
    assert main(["--character", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert any(line.split() == ["Dagger", "5"] for line in lines)
    assert any(line.split() == ["Spear", "6"] for line in lines)
