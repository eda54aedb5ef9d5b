"""CLI integration tests for the playground command."""

import pytest
from click.testing import CliRunner

from falcon_interview.cli import main

# base directory, project name, description, open source?, keep values?
_DETAILS_INPUT = "\n\ndemo\n{open_source}\n\n"


@pytest.mark.unit
class TestPlaygroundRegistered:

    def test_listed_in_help(self):
        result = CliRunner().invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "playground" in result.output

    def test_playground_help(self):
        result = CliRunner().invoke(main, ["playground", "--help"])
        assert result.exit_code == 0
        assert "sample interview" in result.output

    def test_debug_flag_accepted(self):
        result = CliRunner().invoke(main, ["--debug", "playground", "--help"])
        assert result.exit_code == 0


@pytest.mark.integration
class TestPlaygroundInterview:

    def test_completed_interview_prints_answers(self, tmp_path):
        user_input = _DETAILS_INPUT.format(open_source="y") + "\n" + "y\n"

        result = CliRunner().invoke(
            main, ["playground", "--base-directory", str(tmp_path)], input=user_input,
        )

        assert result.exit_code == 0, result.output
        assert "Project location" in result.output
        assert "Licensing" in result.output
        assert "Review your settings:" in result.output
        assert "my-project" in result.output
        assert "MIT" in result.output
        assert "Status: completed=True aborted=False" in result.output

    def test_inverted_confirmation_treats_double_no_as_proceed(self, tmp_path):
        user_input = _DETAILS_INPUT.format(open_source="n") + "n\nn\n"

        result = CliRunner().invoke(
            main,
            ["playground", "--base-directory", str(tmp_path), "--invert-confirmation"],
            input=user_input,
        )

        assert result.exit_code == 0, result.output
        assert "Command Aborted" not in result.output
        assert "Status: completed=True aborted=False" in result.output

    def test_closed_source_skips_licensing(self, tmp_path):
        user_input = _DETAILS_INPUT.format(open_source="n") + "y\n"

        result = CliRunner().invoke(
            main, ["playground", "--base-directory", str(tmp_path)], input=user_input,
        )

        assert result.exit_code == 0, result.output
        assert "Licensing" not in result.output

    def test_declining_to_proceed_aborts(self, tmp_path):
        user_input = _DETAILS_INPUT.format(open_source="n") + "n\nn\n"

        result = CliRunner().invoke(
            main, ["playground", "--base-directory", str(tmp_path)], input=user_input,
        )

        assert result.exit_code == 1
        assert "Command Aborted" in result.output

    def test_missing_marker_asks_for_directory_again(self, tmp_path):
        (tmp_path / "project").mkdir()
        (tmp_path / "project" / "pyproject.toml").write_text("")
        user_input = f"\n{tmp_path / 'project'}\n" + "\ndemo\nn\n\n" + "y\n"

        result = CliRunner().invoke(
            main,
            ["playground", "--base-directory", str(tmp_path), "--contains", "pyproject.toml"],
            input=user_input,
        )

        assert result.exit_code == 0, result.output
        assert "Specified directory does not contain 'pyproject.toml'" in result.output
        assert str(tmp_path / "project") in result.output
