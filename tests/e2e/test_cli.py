"""End-to-end tests for the mockrender CLI.

Tests rendering, signature listing and validation from JSON input files.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from mockrender.cli.main import app

runner = CliRunner()

BIRD_INPUT = {
    "context": {
        "mockable_type_name": "Bird",
        "mockable_type_kind": "class",
        "scoped_mock_type_name": "BirdMock",
    },
    "methods": [
        {
            "short_name": "fly",
            "parameters": [
                {"name": "destination", "argument_label": "to", "type_name": "String"}
            ],
            "attributes": ["throws"],
            "return_type_name": "Bool",
            "is_overridable": True,
        },
        {
            "kind": "initializer",
            "parameters": [{"name": "name", "argument_label": "name", "type_name": "String"}],
            "is_overridable": True,
        },
    ],
}


@pytest.fixture
def bird_file(tmp_path: Path) -> Path:
    """Write a minimal type input for a class `Bird`."""
    path = tmp_path / "bird.json"
    path.write_text(json.dumps(BIRD_INPUT), encoding="utf-8")
    return path


@pytest.fixture
def invalid_file(tmp_path: Path) -> Path:
    """Write a type input with a duplicated parameter name."""
    data = json.loads(json.dumps(BIRD_INPUT))
    data["methods"][0]["parameters"].append({"name": "destination", "type_name": "Int"})
    path = tmp_path / "invalid.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestCliHelp:
    """Test CLI help and basic commands."""

    def test_main_help(self):
        """Test main help displays correctly."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "render" in result.output
        assert "signatures" in result.output
        assert "validate" in result.output


class TestRenderCommand:
    """Test the render command."""

    def test_render_stdout(self, bird_file: Path):
        result = runner.invoke(app, ["render", str(bird_file)])
        assert result.exit_code == 0
        assert "// MARK: Mocked fly(to destination: String)" in result.output
        assert "public required override init(name: String) {" in result.output
        assert "(String) throws -> Bool, Bool>" in result.output
        assert result.output.count("public func initialize") == 4

    def test_render_to_file(self, bird_file: Path, tmp_path: Path):
        output = tmp_path / "BirdMock.generated.swift"
        result = runner.invoke(app, ["render", str(bird_file), "--output", str(output)])
        assert result.exit_code == 0
        assert "Rendered to" in result.output
        assert "// MARK: Mocked fly(" in output.read_text(encoding="utf-8")

    def test_render_missing_file(self):
        result = runner.invoke(app, ["render", "/nonexistent/bird.json"])
        assert result.exit_code != 0

    def test_render_malformed_json(self, tmp_path: Path):
        path = tmp_path / "broken.json"
        path.write_text("{", encoding="utf-8")
        result = runner.invoke(app, ["render", str(path)])
        assert result.exit_code == 1


class TestProxiesCommand:
    """Test the proxies command."""

    def test_proxies(self, bird_file: Path):
        result = runner.invoke(app, ["proxies", str(bird_file)])
        assert result.exit_code == 0
        assert "-> BirdMock {" in result.output
        assert "MARK: Mocked" not in result.output


class TestSignaturesCommand:
    """Test the signatures command."""

    def test_signatures_json(self, bird_file: Path):
        result = runner.invoke(app, ["signatures", str(bird_file), "--json"])
        assert result.exit_code == 0
        rows = json.loads(result.output)
        assert rows[0]["method"] == "fly(to destination: String) throws -> Bool"
        assert rows[0]["mocking"] == rows[0]["method"]
        assert len(rows[0]["matching"]) == 1
        assert rows[1]["matching"] == []

    def test_signatures_table(self, bird_file: Path):
        result = runner.invoke(app, ["signatures", str(bird_file)])
        assert result.exit_code == 0
        assert "Signatures" in result.output


class TestValidateCommand:
    """Test the validate command."""

    def test_validate_ok(self, bird_file: Path):
        result = runner.invoke(app, ["validate", str(bird_file)])
        assert result.exit_code == 0
        assert "2 methods are valid" in result.output

    def test_validate_failure(self, invalid_file: Path):
        result = runner.invoke(app, ["validate", str(invalid_file)])
        assert result.exit_code == 1
