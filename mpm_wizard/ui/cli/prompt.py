"""
Terminal prompter — click prompts with readline line editing.

Questions are printed on their own line followed by a ``> `` input
line. Where the standard ``readline`` module exists (not on stock
Windows Python), input gets history and Tab completion of paths.
"""

from __future__ import annotations

import logging
import os

import click

from mpm_wizard.core.wizard.states import Message

try:
    import readline
except ImportError:  # pragma: no cover - Windows
    readline = None  # type: ignore[assignment]

logger = logging.getLogger(__name__)

_COLORS = {
    "info": None,
    "error": "red",
    "success": "bright_green",
}


def complete_path(line: str) -> list[str]:
    """Filesystem entries that start with ``line``; directories end with a separator."""
    directory, prefix = os.path.split(line)
    try:
        entries = sorted(os.scandir(directory or "."), key=lambda e: e.name)
    except OSError:
        return []

    suggestions = []
    for entry in entries:
        name = entry.name
        if entry.is_dir():
            name += os.sep
        if name.startswith(prefix):
            suggestions.append(os.path.join(directory, name) if directory else name)
    return suggestions


def _readline_completer(text: str, state: int) -> str | None:
    matches = complete_path(readline.get_line_buffer())
    return matches[state] if state < len(matches) else None


def enable_line_editing() -> bool:
    """Turn on Tab completion of paths. Returns False without readline."""
    if readline is None:
        return False
    readline.set_completer_delims("")
    readline.set_completer(_readline_completer)
    if "libedit" in (readline.__doc__ or ""):
        readline.parse_and_bind("bind ^I rl_complete")
    else:
        readline.parse_and_bind("tab: complete")
    logger.debug("readline line editing enabled")
    return True


class TerminalPrompter:
    """Prompter backed by the user's terminal."""

    def __init__(self, line_editing: bool = True) -> None:
        if line_editing:
            enable_line_editing()

    def ask(self, question: str) -> str:
        """Print ``question`` and read one line. Empty input returns ``""``.

        Raises:
            click.Abort: On end of input or Ctrl+C at the prompt.
        """
        return click.prompt(
            question,
            default="",
            show_default=False,
            prompt_suffix="\n> ",
        )

    def show(self, message: Message) -> None:
        click.secho(message.text, fg=_COLORS[message.style])

    def pause(self, text: str) -> None:
        """Wait for Enter, so a double-clicked window stays readable."""
        try:
            click.prompt(text, default="", show_default=False, prompt_suffix="")
        except click.Abort:
            pass
