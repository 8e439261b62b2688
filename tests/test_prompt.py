"""
Tests for the terminal prompter — path completion and message styling.
"""

import os
from pathlib import Path

import click

from mpm_wizard.core.wizard.states import error, info
from mpm_wizard.ui.cli import prompt
from mpm_wizard.ui.cli.prompt import TerminalPrompter, complete_path


class TestCompletePath:
    def test_prefix_match(self, tmp_path: Path):
        (tmp_path / "license.lic").write_text("")
        (tmp_path / "licenses").mkdir()
        (tmp_path / "other").write_text("")
        matches = complete_path(str(tmp_path / "lic"))
        assert matches == [
            str(tmp_path / "license.lic"),
            str(tmp_path / "licenses") + os.sep,
        ]

    def test_relative_to_cwd(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / "mpm").write_text("")
        assert complete_path("mp") == ["mpm"]

    def test_missing_directory(self, tmp_path: Path):
        assert complete_path(str(tmp_path / "nope" / "x")) == []


class TestTerminalPrompter:
    def test_show_styles(self, capsys):
        p = TerminalPrompter(line_editing=False)
        p.show(info("Directory created successfully."))
        p.show(error("Invalid release."))
        out = capsys.readouterr().out
        assert "Directory created successfully.\n" in out
        assert "Invalid release." in out

    def test_ask_uses_click_prompt(self, monkeypatch):
        seen = {}

        def _prompt(text, **kwargs):
            seen.update(kwargs, text=text)
            return "R2024a"

        monkeypatch.setattr(prompt.click, "prompt", _prompt)
        assert TerminalPrompter(line_editing=False).ask("Which release?") == "R2024a"
        assert seen["text"] == "Which release?"
        assert seen["default"] == ""
        assert seen["prompt_suffix"] == "\n> "

    def test_pause_ignores_abort(self, monkeypatch):
        def _abort(*args, **kwargs):
            raise click.Abort()

        monkeypatch.setattr(prompt.click, "prompt", _abort)
        TerminalPrompter(line_editing=False).pause("Press Enter")
