"""
mpm-wizard — CLI entrypoint.

Usage:
    python -m mpm_wizard.main
    python -m mpm_wizard.main --version
    python -m mpm_wizard.main --config mpm-wizard.yml --verbose
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

import click

from mpm_wizard import __version__
from mpm_wizard.core.cancel import CancelToken, handle_signals
from mpm_wizard.core.config.loader import load_config
from mpm_wizard.core.errors import ConfigError, WizardCancelled
from mpm_wizard.core.models.session import Session
from mpm_wizard.core.observability.logging_config import resolve_level, setup_logging
from mpm_wizard.core.wizard import WizardController, WizardServices
from mpm_wizard.core.wizard.steps import EXIT_MESSAGE
from mpm_wizard.ui.cli.prompt import TerminalPrompter

logger = logging.getLogger(__name__)

CLOSE_PROMPT = "Press the Enter/Return key to close this program."


@click.command()
@click.version_option(
    __version__, "--version", "-version",
    prog_name="mpm-wizard",
    message="Version number: %(version)s",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False, dir_okay=False),
    default=None,
    help="Path to mpm-wizard.yml (default: auto-detect).",
)
@click.option(
    "--pause/--no-pause",
    default=None,
    help="Wait for Enter before exiting (default: from config).",
)
def cli(
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
    pause: bool | None,
) -> None:
    """Install MATLAB products with the MathWorks Package Manager (mpm).

    Type "exit" or "quit" at any prompt to leave.
    """
    try:
        config = load_config(Path(config_path) if config_path else None)
    except ConfigError as e:
        click.secho(str(e), fg="red")
        sys.exit(1)

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(
        level=resolve_level(
            debug=debug,
            verbose=verbose,
            quiet=quiet,
            env_level=os.environ.get("MPMW_LOG_LEVEL"),
            config_level=config.log_level,
        ),
        log_file=os.environ.get("MPMW_LOG_FILE") or config.log_file,
        log_file_level=os.environ.get("MPMW_LOG_FILE_LEVEL"),
    )

    session = Session(
        preferred_release=config.default_release,
        preferred_download_dir=config.download_dir,
        preferred_install_dir=config.install_dir,
    )
    prompter = TerminalPrompter()
    token = CancelToken()

    with handle_signals(token):
        controller = WizardController(
            session,
            WizardServices.default(cancel=token),
            prompter,
            cancel=token,
        )
        try:
            exit_code = controller.run()
        except (WizardCancelled, click.Abort):
            click.secho(f"\n{EXIT_MESSAGE}", fg="red")
            exit_code = 0

    should_pause = config.pause_on_exit if pause is None else pause
    if should_pause and not token.cancelled:
        prompter.pause(CLOSE_PROMPT)

    sys.exit(exit_code)


if __name__ == "__main__":
    cli()
