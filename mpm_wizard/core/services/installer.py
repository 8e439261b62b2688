"""
mpm invocation — build the install command and run it.

mpm does the actual installation. The wizard only assembles its
arguments, relays its output as it arrives, and translates failures
into ``InstallError`` / ``MpmNotFoundError``.

mpm prints nothing while it installs, so the relay adds one line of
reassurance as soon as mpm announces the start of the installation.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path
from typing import Sequence, TextIO

from mpm_wizard.core.cancel import CancelToken
from mpm_wizard.core.errors import InstallError, MpmNotFoundError

logger = logging.getLogger(__name__)

START_MARKER = "Starting install"
START_NOTICE = (
    "Installation has begun. Please wait while it finishes. "
    "There is no progress indicator."
)


def build_install_command(
    mpm_path: Path,
    release: str,
    destination: str,
    products: Sequence[str],
) -> list[str]:
    """Argument vector for ``mpm install``."""
    return [
        str(mpm_path),
        "install",
        f"--release={release}",
        f"--destination={destination}",
        "--products",
        *products,
    ]


class InstallOutputRelay:
    """Write-through wrapper around an output stream.

    Every write is forwarded unchanged; a write containing
    ``START_MARKER`` is followed by ``START_NOTICE`` on its own line.
    """

    def __init__(self, stream: TextIO, marker: str = START_MARKER, notice: str = START_NOTICE) -> None:
        self._stream = stream
        self._marker = marker
        self._notice = notice

    def write(self, text: str) -> int:
        n = self._stream.write(text)
        if self._marker in text:
            if not text.endswith("\n"):
                self._stream.write("\n")
            self._stream.write(self._notice + "\n")
        self._stream.flush()
        return n

    def flush(self) -> None:
        self._stream.flush()


def run_mpm(
    cmd: Sequence[str],
    *,
    cancel: CancelToken | None = None,
    output: TextIO | None = None,
) -> None:
    """Run mpm and relay its combined stdout/stderr line by line.

    There is no timeout: mpm installs can legitimately take an hour.
    Output is decoded as UTF-8, undecodable bytes replaced. If relaying
    stops early (cancellation or any other exception) the child process
    is terminated and reaped before the exception propagates.

    Raises:
        MpmNotFoundError: If the binary is missing or not executable.
        InstallError: If mpm exits with a non-zero status.
        WizardCancelled: If the user interrupted the run.
    """
    relay = InstallOutputRelay(output or sys.stdout)
    logger.info("Running: %s", " ".join(cmd))

    try:
        proc = subprocess.Popen(
            list(cmd),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            encoding="utf-8",
            errors="replace",
            bufsize=1,
        )
    except (FileNotFoundError, PermissionError) as e:
        raise MpmNotFoundError(f"{cmd[0]}: {e.strerror or e}") from e
    except OSError as e:
        raise InstallError(str(e)) from e

    try:
        assert proc.stdout is not None
        for line in proc.stdout:
            relay.write(line)
            if cancel is not None:
                cancel.raise_if_cancelled()
        returncode = proc.wait()
    except BaseException:
        logger.info("Stopping mpm (pid %d)", proc.pid)
        proc.terminate()
        proc.wait()
        raise

    if returncode != 0:
        raise InstallError(f"mpm exited with code {returncode}")
    logger.info("mpm finished successfully")
