"""
Tests for the command line interface.
"""

import json

import pytest

from propcheck import cli

RULES = {
    "rules": [
        {"property": "name", "validators": [{"type": "not_empty", "code": "E_NAME", "message": "Name is required"}]}
    ]
}


@pytest.fixture
def rules_file(tmp_path):
    """Fixture providing a rule configuration file."""
    path = tmp_path / "rules.json"
    path.write_text(json.dumps(RULES))
    return path


def test_parse_json_input_string():
    """Test parsing an inline JSON string."""
    assert cli.parse_json_input('{"a": 1}') == {"a": 1}


def test_parse_json_input_file(tmp_path, monkeypatch):
    """Test parsing absolute and relative @file references."""
    path = tmp_path / "data.json"
    path.write_text('[1, 2]')
    monkeypatch.chdir(tmp_path)

    assert cli.parse_json_input(f"@{path}") == [1, 2]
    assert cli.parse_json_input("@data.json") == [1, 2]


def test_parse_json_input_errors(tmp_path):
    """Test missing files and malformed JSON."""
    with pytest.raises(ValueError, match="File not found"):
        cli.parse_json_input(f"@{tmp_path / 'missing.json'}")
    with pytest.raises(ValueError, match="Invalid JSON input"):
        cli.parse_json_input("{oops")


def test_validate_valid_object(rules_file, capsys):
    """Test a passing validation run."""
    status = cli.main(["validate", f"@{rules_file}", '{"name": "Ada"}'])

    assert status == cli.EXIT_VALID
    assert "Validation passed successfully" in capsys.readouterr().out


def test_validate_invalid_object(rules_file, capsys):
    """Test a failing validation run."""
    status = cli.main(["validate", f"@{rules_file}", '{"name": ""}'])

    assert status == cli.EXIT_INVALID
    assert "[E_NAME] name: Name is required" in capsys.readouterr().out


def test_validate_array_as_json(rules_file, capsys):
    """Test JSON output for an array of objects."""
    status = cli.main(["validate", "--json", f"@{rules_file}", '[{"name": "Ada"}, {"name": ""}, {}]'])

    reports = json.loads(capsys.readouterr().out)
    assert status == cli.EXIT_INVALID
    assert [report["is_valid"] for report in reports] == [True, False, True]
    assert reports[1]["codes"] == ["E_NAME"]


def test_validate_single_object_as_json(rules_file, capsys):
    """Test JSON output for a single object."""
    status = cli.main(["validate", "--json", f"@{rules_file}", "{}"])

    assert status == cli.EXIT_VALID
    assert json.loads(capsys.readouterr().out)["is_valid"] is True


def test_validate_unreadable_rules_file(tmp_path, capsys):
    """Test that a rules path that cannot be read exits with the error status."""
    status = cli.main(["validate", f"@{tmp_path}", "{}"])

    assert status == cli.EXIT_ERROR
    assert "Cannot read" in capsys.readouterr().out


def test_validate_bad_rules(capsys):
    """Test that unusable rules exit with the error status."""
    status = cli.main(["validate", '{"rules": [{"property": "name"}]}', "{}"])

    assert status == cli.EXIT_ERROR
    assert "Configuration Error" in capsys.readouterr().out


def test_schema_command(capsys):
    """Test printing the rule configuration schema."""
    status = cli.main(["schema"])

    assert status == cli.EXIT_VALID
    assert json.loads(capsys.readouterr().out)["required"] == ["rules"]


def test_no_command(capsys):
    """Test that running without a command prints help."""
    assert cli.main([]) == cli.EXIT_ERROR
    assert "usage" in capsys.readouterr().out.lower()
