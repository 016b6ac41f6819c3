"""Tests for CLI commands."""

import json
import logging

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def cli_env(tmp_path, monkeypatch):
    """Point settings at tmp_path and restore root logging afterwards."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SQLITE_DB_PATH", str(tmp_path / "scriptura.db"))
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("SCENE_ENDPOINT", raising=False)
    root = logging.getLogger()
    saved = list(root.handlers)
    yield
    root.handlers[:] = saved


@pytest.fixture
def runner():
    return CliRunner()


def _invoke(runner, *args):
    from cli.main import cli
    return runner.invoke(cli, list(args))


class TestBooks:
    def test_lists_canon(self, runner):
        result = _invoke(runner, "books")
        assert result.exit_code == 0
        assert "Genesis" in result.output
        assert "66 books, 1189 chapters" in result.output

    def test_category_filter(self, runner):
        result = _invoke(runner, "books", "-c", "gospels")
        assert result.exit_code == 0
        assert "4 books, 89 chapters" in result.output


class TestPlan:
    def test_default_plan(self, runner):
        result = _invoke(runner, "plan", "-l", "3")
        assert result.exit_code == 0
        assert "Genesis 1-4" in result.output
        assert "298 of 365" in result.output

    def test_monthly(self, runner):
        result = _invoke(runner, "plan", "--monthly")
        assert result.exit_code == 0
        assert "January" in result.output

    def test_unscheduled_warning(self, runner):
        result = _invoke(runner, "plan", "-d", "10", "-k", "5")
        assert result.exit_code == 0
        assert "1139 chapters do not fit" in result.output

    def test_bad_per_period(self, runner):
        result = _invoke(runner, "plan", "-k", "zero")
        assert result.exit_code != 0

    def test_negative_limit_rejected(self, runner):
        result = _invoke(runner, "plan", "-l", "-3")
        assert result.exit_code == 2

    def test_bad_horizon(self, runner):
        result = _invoke(runner, "plan", "-d", "0")
        assert result.exit_code == 1
        assert "Horizon" in result.output


class TestToday:
    def test_first_day(self, runner):
        result = _invoke(runner, "today", "--date", "2026-01-01")
        assert result.exit_code == 0
        assert "Genesis-4" in result.output

    def test_after_plan_end(self, runner):
        result = _invoke(runner, "today", "--date", "2026-12-31")
        assert result.exit_code == 0
        assert "Nothing scheduled" in result.output


class TestToggleAndProgress:
    def test_toggle_persists(self, runner):
        result = _invoke(runner, "toggle", "Genesis-1", "Genesis-2")
        assert result.exit_code == 0
        assert "Genesis 1 marked complete" in result.output

        result = _invoke(runner, "toggle", "Genesis-1")
        assert "Genesis 1 marked not complete" in result.output

        result = _invoke(runner, "progress")
        assert result.exit_code == 0
        assert "1/1189" in result.output

    def test_toggle_invalid(self, runner):
        result = _invoke(runner, "toggle", "Tobit-1")
        assert result.exit_code == 1
        assert "Unknown book" in result.output

    def test_complete_day(self, runner):
        result = _invoke(runner, "complete-day", "1")
        assert result.exit_code == 0
        assert "4 chapter(s) marked complete" in result.output

        result = _invoke(runner, "progress")
        assert "4/1189" in result.output
        assert "Period 2" in result.output

    def test_complete_day_out_of_range(self, runner):
        result = _invoke(runner, "complete-day", "400")
        assert result.exit_code == 1


class TestCorruptDatabase:
    @pytest.fixture(autouse=True)
    def garbage_db(self, tmp_path):
        (tmp_path / "scriptura.db").write_bytes(b"garbage" * 1000)

    def test_progress_starts_empty(self, runner):
        result = _invoke(runner, "progress")
        assert result.exit_code == 0
        assert "0/1189" in result.output

    def test_plan_still_renders(self, runner):
        result = _invoke(runner, "plan", "-l", "1")
        assert result.exit_code == 0
        assert "Genesis 1-4" in result.output

    def test_toggle_reports_unsaved(self, runner):
        result = _invoke(runner, "toggle", "Genesis-1")
        assert result.exit_code == 1
        assert "not saved" in result.output


class TestReset:
    def test_reset_clears_progress(self, runner):
        _invoke(runner, "toggle", "Genesis-1")
        result = _invoke(runner, "reset", "--yes")
        assert result.exit_code == 0
        assert "Reading progress cleared" in result.output

        result = _invoke(runner, "progress")
        assert "0/1189" in result.output

    def test_reset_without_saved_progress(self, runner):
        result = _invoke(runner, "reset", "--yes")
        assert result.exit_code == 0
        assert "No saved progress" in result.output


class TestExport:
    def test_writes_json(self, runner, tmp_path):
        target = tmp_path / "out" / "plan.json"
        result = _invoke(runner, "export", str(target))
        assert result.exit_code == 0
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["total_units"] == 1189
        assert data["periods"][0]["title"] == "Genesis 1-4"


class TestScene:
    def test_fallback_without_endpoint(self, runner):
        result = _invoke(runner, "scene", "Genesis", "1")
        assert result.exit_code == 0
        assert "Scene unavailable: Genesis 1" in result.output
