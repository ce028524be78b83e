"""Tests for the mdlint command line interface."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from mdlint import __version__
from mdlint.cli.commands.check import collect_markdown_files
from mdlint.cli.main import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every command from the temporary directory."""
    monkeypatch.chdir(temp_dir)
    return temp_dir


class TestCheckCommand:
    """Tests for `mdlint check`."""

    def test_clean_file(self, runner: CliRunner, docs_dir: Path) -> None:
        result = runner.invoke(cli, ["check", str(docs_dir / "clean.md")])
        assert result.exit_code == 0
        assert "No issues found in 1 file(s)" in result.output

    def test_broken_file(self, runner: CliRunner, docs_dir: Path) -> None:
        result = runner.invoke(cli, ["check", str(docs_dir / "broken.md")])
        assert result.exit_code == 1
        assert "HM003" in result.output
        assert "Errors: 1" in result.output

    def test_directory(self, runner: CliRunner, docs_dir: Path) -> None:
        """Test that directories are searched and all results reported."""
        result = runner.invoke(cli, ["check", "--json", str(docs_dir)])
        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert [Path(r["path"]).name for r in data] == ["broken.md", "clean.md"]
        assert data[0]["issues"][0]["line_number"] == 6
        assert data[1]["passed"] is True

    def test_default_path(self, runner: CliRunner, docs_dir: Path) -> None:
        result = runner.invoke(cli, ["check", "--json"])
        assert len(json.loads(result.stdout)) == 2

    def test_disable(self, runner: CliRunner, docs_dir: Path) -> None:
        result = runner.invoke(cli, ["check", "--disable", "HM003", str(docs_dir)])
        assert result.exit_code == 0

    def test_disable_unknown_rule(self, runner: CliRunner, docs_dir: Path) -> None:
        result = runner.invoke(cli, ["check", "--disable", "HM999", str(docs_dir)])
        assert result.exit_code == 2
        assert "Unknown rule: HM999" in result.output

    def test_enable_after_config(self, runner: CliRunner, project_dir: Path) -> None:
        """Test that --enable overrides a rule disabled in the config file."""
        (project_dir / "doc.md").write_text("## Title Case\n")
        assert runner.invoke(cli, ["check", "doc.md"]).exit_code == 0
        result = runner.invoke(cli, ["check", "--enable", "heading-sentence-case", "doc.md"])
        assert result.exit_code == 1
        assert "Warnings: 1" in result.output

    def test_fix(self, runner: CliRunner, temp_dir: Path) -> None:
        path = temp_dir / "doc.md"
        path.write_text("Text.\n\n- Item\n\n```\ncode\n```\n")
        result = runner.invoke(cli, ["check", "--fix", str(path)])
        assert result.exit_code == 0
        assert "Fixed: 3" in result.output
        assert path.read_text() == "Text.\n\n -  Item\n\n~~~~\ncode\n~~~~\n"

    def test_explicit_config(self, runner: CliRunner, temp_dir: Path) -> None:
        config = temp_dir / "strict.yaml"
        config.write_text("default: false\nHM002: true\n")
        (temp_dir / "doc.md").write_text("- Item\n\n```\ncode\n```\n")
        result = runner.invoke(cli, ["check", "--json", "--config", str(config), "doc.md"])
        rule_ids = {i["rule_id"] for i in json.loads(result.stdout)[0]["issues"]}
        assert rule_ids == {"HM002"}

    def test_invalid_config(self, runner: CliRunner, temp_dir: Path) -> None:
        (temp_dir / ".mdlint.yaml").write_text("no-such-rule: true\n")
        (temp_dir / "doc.md").write_text("Text.\n")
        result = runner.invoke(cli, ["check", "doc.md"])
        assert result.exit_code == 2
        assert "Unknown rule: no-such-rule" in result.output

    def test_undecodable_file(self, runner: CliRunner, temp_dir: Path) -> None:
        """Test that a file that is not UTF-8 is a usage error, not a crash."""
        (temp_dir / "bad.md").write_bytes(b"\xff\xfe# Title\n")
        result = runner.invoke(cli, ["check", "bad.md"])
        assert result.exit_code == 2
        assert "Could not read" in result.output
        assert not isinstance(result.exception, UnicodeDecodeError)

    def test_missing_path(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["check", "missing.md"])
        assert result.exit_code == 2


class TestCollectMarkdownFiles:
    """Tests for collect_markdown_files."""

    def test_skips_hidden_directories(self, temp_dir: Path) -> None:
        (temp_dir / ".git").mkdir()
        (temp_dir / ".git" / "notes.md").write_text("x\n")
        (temp_dir / "guide").mkdir()
        (temp_dir / "guide" / "intro.markdown").write_text("x\n")
        (temp_dir / "README.md").write_text("x\n")
        (temp_dir / "notes.txt").write_text("x\n")

        files = collect_markdown_files((temp_dir,))
        assert [f.relative_to(temp_dir).as_posix() for f in files] == ["README.md", "guide/intro.markdown"]

    def test_explicit_files_are_kept(self, temp_dir: Path) -> None:
        path = temp_dir / "notes.txt"
        path.write_text("x\n")
        assert collect_markdown_files((path, path)) == [path]


class TestOtherCommands:
    """Tests for `mdlint rules`, `blocks` and `outline`."""

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert __version__ in result.output

    def test_rules(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["rules"])
        assert result.exit_code == 0
        for rule_id in ("HM001", "HM002", "HM003", "HM004", "HM005"):
            assert rule_id in result.output

    def test_rules_invalid_config(self, runner: CliRunner, temp_dir: Path) -> None:
        (temp_dir / ".mdlint.yaml").write_text("- not a mapping\n")
        result = runner.invoke(cli, ["rules"])
        assert result.exit_code == 2

    def test_blocks(self, runner: CliRunner, temp_dir: Path) -> None:
        (temp_dir / "doc.md").write_text("Intro.\n\n# A\n## B\n\nText.\n")
        result = runner.invoke(cli, ["blocks", "doc.md"])
        assert result.exit_code == 0
        assert "1-2" in result.output
        assert "4 (empty)" in result.output
        assert "5-6" in result.output

    def test_blocks_undecodable_file(self, runner: CliRunner, temp_dir: Path) -> None:
        (temp_dir / "bad.md").write_bytes(b"\xff\xfe# Title\n")
        result = runner.invoke(cli, ["blocks", "bad.md"])
        assert result.exit_code == 2
        assert "Could not read" in result.output

    def test_outline(self, runner: CliRunner, temp_dir: Path) -> None:
        (temp_dir / "doc.md").write_text("Title\n=====\n\nSection\n-------\n\nText.\n")
        result = runner.invoke(cli, ["outline", "doc.md"])
        assert result.exit_code == 0
        assert "Section" in result.output
        assert "setext" in result.output
