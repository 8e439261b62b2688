"""
Tests for the CLI entrypoint — version flag, config errors, and a full
scripted run through click's test runner.
"""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from mpm_wizard import main
from mpm_wizard.core.services.platform_detect import HostInfo
from mpm_wizard.core.wizard import WizardServices
from mpm_wizard.main import cli
from mpm_wizard.ui.cli.prompt import TerminalPrompter


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated(tmp_path: Path, monkeypatch):
    """Fresh cwd, no config or logging env, root logger restored afterwards."""
    for var in ("MPMW_CONFIG", "MPMW_LOG_LEVEL", "MPMW_LOG_FILE", "MPMW_LOG_FILE_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(main, "TerminalPrompter", lambda: TerminalPrompter(line_editing=False))

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def fake_services(monkeypatch, services_factory):
    services = services_factory()
    monkeypatch.setattr(
        WizardServices, "default", staticmethod(lambda cancel=None, output=None: services),
    )
    return services


class TestVersion:
    @pytest.mark.parametrize("flag", ["--version", "-version"])
    def test_version(self, runner, flag):
        result = runner.invoke(cli, [flag])
        assert result.exit_code == 0
        assert result.output.strip() == "Version number: 2.0"


class TestConfigErrors:
    def test_missing_explicit_config(self, runner, tmp_path: Path):
        result = runner.invoke(cli, ["--config", str(tmp_path / "nope.yml")])
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_invalid_config(self, runner, tmp_path: Path):
        (tmp_path / "mpm-wizard.yml").write_text("default_release: R1999a\n")
        result = runner.invoke(cli, [])
        assert result.exit_code == 1
        assert "Invalid wizard configuration" in result.output


class TestWizardRun:
    def test_full_run(self, runner, tmp_path: Path, fake_services):
        answers = [str(tmp_path), "R2024a", "MATLAB Simulink", str(tmp_path / "matlab"), ""]
        result = runner.invoke(cli, [], input="\n".join(answers) + "\n")

        assert result.exit_code == 0, result.output
        assert "Installation finished!" in result.output
        [cmd] = fake_services.calls["run_mpm"]
        assert cmd[2:] == [
            "--release=R2024a", f"--destination={tmp_path / 'matlab'}",
            "--products", "MATLAB", "Simulink",
        ]

    def test_config_defaults_are_offered(self, runner, tmp_path: Path, fake_services):
        (tmp_path / "mpm-wizard.yml").write_text(
            f"default_release: r2021b\ndownload_dir: {tmp_path}\n"
            f"install_dir: {tmp_path}/ml/{{release}}\n"
        )
        (tmp_path / "ml" / "R2021b").mkdir(parents=True)
        result = runner.invoke(cli, [], input="\n\nMATLAB\n\n\n")

        assert result.exit_code == 0, result.output
        assert "Press Enter to select R2021b" in result.output
        [cmd] = fake_services.calls["run_mpm"]
        assert cmd[0] == str(tmp_path / "mpm")
        assert f"--destination={tmp_path}/ml/R2021b" in cmd

    def test_user_exit(self, runner, tmp_path: Path, fake_services):
        result = runner.invoke(cli, [], input=f"{tmp_path}\nexit\n")
        assert result.exit_code == 0
        assert "Exiting from user input." in result.output
        assert fake_services.calls["run_mpm"] == []

    def test_fatal_step_exits_1(self, runner, monkeypatch, services_factory):
        services = services_factory(detect_host=lambda: HostInfo("plan9", "386"))
        monkeypatch.setattr(
            WizardServices, "default", staticmethod(lambda cancel=None, output=None: services),
        )
        result = runner.invoke(cli, [])
        assert result.exit_code == 1
        assert "Your operating system is unrecognized." in result.output

    def test_pause_flag(self, runner, tmp_path: Path, fake_services):
        answers = [str(tmp_path), "", "MATLAB", str(tmp_path), "", ""]
        result = runner.invoke(cli, ["--pause"], input="\n".join(answers) + "\n")
        assert result.exit_code == 0
        assert main.CLOSE_PROMPT in result.output
