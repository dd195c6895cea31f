"""Unit tests for the wikiglossary CLI commands."""

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from wikiglossary.cli.main import main


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture
def draft_file(tmp_path: Path, reference_draft: dict[str, Any]) -> Path:
    """Write the reference draft to a JSON file."""
    path = tmp_path / "draft.json"
    path.write_text(json.dumps(reference_draft, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.mark.unit
class TestBuildCommand:
    """Tests for 'wikiglossary build'."""

    def test_outputs_json(self, runner: CliRunner, draft_file: Path) -> None:
        """Test the default output is a JSON list with camelCase keys."""
        result = runner.invoke(main, ["build", str(draft_file)])

        assert result.exit_code == 0, result.output
        entries = json.loads(result.output)
        assert [e["termEn"] for e in entries] == [
            "Async Queue",
            "Cache Layer",
            "task executor",
        ]
        assert set(entries[0]) == {"termKo", "termEn", "definition"}

    def test_outputs_table(self, runner: CliRunner, draft_file: Path) -> None:
        """Test the table format prints a header and one row per entry."""
        result = runner.invoke(main, ["build", str(draft_file), "--format", "table"])

        assert result.exit_code == 0, result.output
        lines = result.output.strip().splitlines()
        assert lines[0] == "termKo\ttermEn\tdefinition"
        assert lines[1].startswith("비동기 큐\tAsync Queue\t")
        assert len(lines) == 4

    def test_accepted_envelope(
        self, runner: CliRunner, tmp_path: Path, reference_draft: dict[str, Any]
    ) -> None:
        """Test --accepted reads the draft from an envelope."""
        path = tmp_path / "accepted.json"
        path.write_text(
            json.dumps({"ingest_run_id": "run-1", "draft": reference_draft}),
            encoding="utf-8",
        )

        result = runner.invoke(main, ["build", str(path), "--accepted"])

        assert result.exit_code == 0, result.output
        assert len(json.loads(result.output)) == 3

    def test_malformed_draft_reports_error(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        """Test wrong draft shapes exit with an error message."""
        path = tmp_path / "draft.json"
        path.write_text(json.dumps({"sections": "oops"}), encoding="utf-8")

        result = runner.invoke(main, ["build", str(path)])

        assert result.exit_code == 1
        assert "Validation error in 'draft'" in result.output

    def test_invalid_json_reports_error(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test unparsable JSON exits with an error message."""
        path = tmp_path / "draft.json"
        path.write_text("{not json", encoding="utf-8")

        result = runner.invoke(main, ["build", str(path)])

        assert result.exit_code == 1
        assert "is not valid JSON" in result.output

    def test_config_file_applied(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        """Test --config changes extraction behaviour."""
        draft = tmp_path / "draft.json"
        draft.write_text(
            json.dumps({"sections": [{"titleKo": "캐시 계층(Cache Layer)"}]}),
            encoding="utf-8",
        )
        config = tmp_path / "glossary.yaml"
        config.write_text("pattern:\n  include_titles: true\n", encoding="utf-8")

        without = runner.invoke(main, ["build", str(draft)])
        with_config = runner.invoke(main, ["build", str(draft), "--config", str(config)])

        assert json.loads(without.output) == []
        assert [e["termEn"] for e in json.loads(with_config.output)] == ["Cache Layer"]

    def test_missing_config_file(self, runner: CliRunner, draft_file: Path) -> None:
        """Test a missing config path exits with an error."""
        result = runner.invoke(
            main, ["build", str(draft_file), "--config", "does-not-exist.yaml"]
        )

        assert result.exit_code == 1
        assert "File not found" in result.output


@pytest.mark.unit
class TestNormalizeCommand:
    """Tests for 'wikiglossary normalize'."""

    def _write(self, tmp_path: Path, payload: Any) -> Path:
        path = tmp_path / "entries.json"
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        return path

    def test_first_seen_order(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test entries keep first-seen order without --sort."""
        path = self._write(
            tmp_path,
            [
                {"termKo": "작업 실행기", "termEn": "task executor", "definition": "d"},
                {"termKo": "", "termEn": "Broken", "definition": "d"},
                {"termKo": "비동기 큐", "termEn": "Async Queue", "definition": "d"},
                {"termKo": "비동기  큐", "termEn": "async queue", "definition": "d2"},
            ],
        )

        result = runner.invoke(main, ["normalize", str(path)])

        assert result.exit_code == 0, result.output
        assert [e["termEn"] for e in json.loads(result.output)] == [
            "task executor",
            "Async Queue",
        ]

    def test_sorted(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test --sort orders entries by English term."""
        path = self._write(
            tmp_path,
            [
                {"termKo": "작업 실행기", "termEn": "task executor", "definition": "d"},
                {"termKo": "비동기 큐", "termEn": "Async Queue", "definition": "d"},
            ],
        )

        result = runner.invoke(main, ["normalize", str(path), "--sort"])

        assert [e["termEn"] for e in json.loads(result.output)] == [
            "Async Queue",
            "task executor",
        ]

    def test_rejects_non_list(self, runner: CliRunner, tmp_path: Path) -> None:
        """Test the input file must hold a list."""
        path = self._write(tmp_path, {"termKo": "큐"})

        result = runner.invoke(main, ["normalize", str(path)])

        assert result.exit_code == 1
        assert "must contain a JSON list" in result.output

    def test_table_keeps_tabs_inside_cells(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        """Test tabs and line breaks in values do not add table columns."""
        path = self._write(
            tmp_path,
            [
                {
                    "termKo": "작업 큐",
                    "termEn": "job\tqueue",
                    "definition": "첫째\t둘째\n셋째",
                }
            ],
        )

        result = runner.invoke(main, ["normalize", str(path), "--format", "table"])

        assert result.exit_code == 0, result.output
        lines = result.output.strip().splitlines()
        assert lines[1:] == ["작업 큐\tjob queue\t첫째 둘째 셋째"]


@pytest.mark.unit
class TestMainGroup:
    """Tests for the top-level command group."""

    def test_version(self, runner: CliRunner) -> None:
        """Test --version prints the package version."""
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "wikiglossary" in result.output

    def test_help_lists_commands(self, runner: CliRunner) -> None:
        """Test --help lists subcommands."""
        result = runner.invoke(main, ["--help"])
        assert "build" in result.output
        assert "normalize" in result.output
