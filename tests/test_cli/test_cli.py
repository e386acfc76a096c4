"""Tests for the kss CLI commands."""

from pathlib import Path

from click.testing import CliRunner

from kss import __version__
from kss.cli.main import cli

FIXTURES = Path(__file__).parent.parent / "fixtures"
BASIC = str(FIXTURES / "basic.kss")
SCENE = str(FIXTURES / "scene.json")


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("validate", "inspect", "match"):
            assert command in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidateCommand:
    def test_clean_file(self) -> None:
        result = CliRunner().invoke(cli, ["validate", BASIC])
        assert result.exit_code == 0
        assert "OK:" in result.output
        assert "3 rules" in result.output

    def test_json_document(self) -> None:
        result = CliRunner().invoke(cli, ["validate", str(FIXTURES / "basic.json")])
        assert result.exit_code == 0

    def test_diagnostics_summary(self, tmp_path: Path) -> None:
        path = tmp_path / "lint.kss"
        path.write_text("div#a#b::after {}")
        result = CliRunner().invoke(cli, ["validate", str(path)])
        assert result.exit_code == 0
        assert "Summary: 0 error(s), 1 warning(s), 2 info" in result.output

    def test_parse_error_exits_nonzero(self) -> None:
        result = CliRunner().invoke(cli, ["validate", str(FIXTURES / "bad_attribute.kss")])
        assert result.exit_code == 1
        assert "Parse error (rule 0)" in result.output

    def test_missing_file(self) -> None:
        result = CliRunner().invoke(cli, ["validate", "/nonexistent/file.kss"])
        assert result.exit_code == 1

    def test_verbose_flag(self) -> None:
        result = CliRunner().invoke(cli, ["-v", "validate", BASIC])
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# inspect
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_lists_fragments_most_specific_first(self) -> None:
        result = CliRunner().invoke(cli, ["inspect", BASIC])
        assert result.exit_code == 0
        assert "Rules: 3" in result.output
        assert "selector 'scene > group.panel'" in result.output
        assert "0: element 'group.panel'" in result.output
        assert "1: combinator child '>'" in result.output
        assert "2: element 'scene'" in result.output

    def test_shows_declarations(self) -> None:
        result = CliRunner().invoke(cli, ["inspect", BASIC])
        assert "color: red !important" in result.output


# ---------------------------------------------------------------------------
# match
# ---------------------------------------------------------------------------


class TestMatchCommand:
    def test_matching_rules(self) -> None:
        result = CliRunner().invoke(cli, ["match", BASIC, SCENE, "c"])
        assert result.exit_code == 0
        assert "Rule 1: .pickle:hover" in result.output
        assert "Rule 2: group >> mesh[kind=button]" in result.output
        assert "Rule 0" not in result.output
        assert "2 of 3 rule(s) match 'c'" in result.output

    def test_group_node(self) -> None:
        result = CliRunner().invoke(cli, ["match", BASIC, SCENE, "a"])
        assert result.exit_code == 0
        assert "Rule 0: scene > group.panel" in result.output
        assert "1 of 3 rule(s) match 'a'" in result.output

    def test_unknown_node(self) -> None:
        result = CliRunner().invoke(cli, ["match", BASIC, SCENE, "zzz"])
        assert result.exit_code == 1

    def test_invalid_scene(self, tmp_path: Path) -> None:
        scene = tmp_path / "scene.json"
        scene.write_text("not json")
        result = CliRunner().invoke(cli, ["match", BASIC, str(scene), "a"])
        assert result.exit_code == 1
