"""Tests for the form-wizard CLI."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from form_wizard.cli import app

runner = CliRunner()


class TestSubmitCommand:
    def test_mock_submission_accepted(self) -> None:
        result = runner.invoke(app, ["submit", "--mock", "--delay", "0"])
        assert result.exit_code == 0
        assert "Submission accepted" in result.output

    def test_explicit_answers_with_stub(self) -> None:
        result = runner.invoke(
            app,
            [
                "submit",
                "--first-name", "Rhys",
                "--last-name", "Morgan",
                "--dob", "1992-03-14",
                "--job", "iOS Developer",
                "--delay", "0",
            ],
        )
        assert result.exit_code == 0
        assert "stub submitter" in result.output
        assert "Submission accepted" in result.output

    def test_incomplete_answers_refused(self) -> None:
        result = runner.invoke(
            app,
            ["submit", "--last-name", "Morgan", "--dob", "1992-03-14"],
        )
        assert result.exit_code == 1
        assert "missing: first name, job" in result.output

    def test_dob_required_without_mock(self) -> None:
        result = runner.invoke(app, ["submit", "--first-name", "Rhys", "--last-name", "Morgan"])
        assert result.exit_code == 1
        assert "--dob is required" in result.output

    def test_bad_config_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("- not a mapping\n")
        result = runner.invoke(app, ["submit", "--mock", "--config", str(path)])
        assert result.exit_code == 1
        assert "Could not load config" in result.output
