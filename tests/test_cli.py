"""
Tests for the command line entry point and its exit codes.
"""

from unittest.mock import patch

from mc_autosetup import cli
from mc_autosetup.errors import MissingRuntimeError, WorkspaceExistsError


def test_presets_from_args():
    args = cli.build_parser().parse_args(["--name", "srv", "--loader", "fabric", "--no-mcdr", "--mc-version", ""])
    assert cli.presets_from_args(args) == {"name": "srv", "loader": "fabric", "mcdr": False, "mc_version": ""}


def test_no_options_no_presets():
    assert cli.presets_from_args(cli.build_parser().parse_args([])) == {}


def test_success_exit_code(tmp_path):
    with patch("mc_autosetup.cli.Orchestrator") as MockOrch:
        assert cli.main(["--base-dir", str(tmp_path), "--patch-mode", "line"]) == 0
    settings, prompter = MockOrch.call_args[0]
    assert settings.base_dir == tmp_path
    assert settings.patch_mode == "line"
    MockOrch.return_value.run.assert_called_once()


def test_fatal_error_exit_code(tmp_path):
    with patch("mc_autosetup.cli.Orchestrator") as MockOrch:
        MockOrch.return_value.run.side_effect = MissingRuntimeError("System can't find java")
        assert cli.main(["--base-dir", str(tmp_path)]) == 1


def test_existing_workspace_exit_code(tmp_path):
    with patch("mc_autosetup.cli.Orchestrator") as MockOrch:
        MockOrch.return_value.run.side_effect = WorkspaceExistsError("Folder already exists")
        assert cli.main(["--base-dir", str(tmp_path)]) == 0


def test_interrupt_cancels_runner(tmp_path):
    with patch("mc_autosetup.cli.Orchestrator") as MockOrch:
        MockOrch.return_value.run.side_effect = KeyboardInterrupt
        assert cli.main(["--base-dir", str(tmp_path)]) == 130
    MockOrch.return_value.runner.cancel.assert_called_once()


def test_interrupt_at_prompt_exits_130(tmp_path, monkeypatch):
    from mc_autosetup.prompts import Prompter

    def interrupted(prompt=""):
        raise KeyboardInterrupt

    monkeypatch.setattr("click.termui.visible_prompt_func", interrupted)
    with patch("mc_autosetup.cli.Orchestrator") as MockOrch:
        MockOrch.return_value.run.side_effect = lambda: Prompter().text("name", "Enter the server folder name")
        assert cli.main(["--base-dir", str(tmp_path)]) == 130
    MockOrch.return_value.runner.cancel.assert_called_once()


def test_closed_stdin_at_confirm_exits_130(tmp_path, monkeypatch):
    from mc_autosetup.prompts import Prompter

    def eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("click.termui.visible_prompt_func", eof)
    with patch("mc_autosetup.cli.Orchestrator") as MockOrch:
        MockOrch.return_value.run.side_effect = lambda: Prompter().confirm("mcdr", "Do you want to use MCDR?", True)
        assert cli.main(["--base-dir", str(tmp_path)]) == 130
