"""
Helpers for an mpm binary already on disk.

- ``inspect_architecture`` — which CPU a macOS mpm was built for (``lipo``)
- ``is_mismatched`` — does that differ from the platform the user picked?
- ``make_executable`` — add the execute bits after a download
"""

from __future__ import annotations

import logging
import os
import stat
import subprocess
from pathlib import Path

from mpm_wizard.core.errors import ArchitectureCheckError
from mpm_wizard.core.models.platform import Platform

logger = logging.getLogger(__name__)

ARCH_ARM64 = "arm64"
ARCH_X86_64 = "x86_64"


def inspect_architecture(path: Path) -> str:
    """Return the architecture of a macOS binary, ``arm64`` or ``x86_64``.

    Universal binaries list both; arm64 is reported, matching how the
    installer treats them.

    Raises:
        ArchitectureCheckError: If ``lipo`` fails or reports neither arch.
    """
    try:
        result = subprocess.run(
            ["lipo", "-info", str(path)],
            capture_output=True, text=True, check=True,
        )
    except (OSError, subprocess.CalledProcessError) as e:
        raise ArchitectureCheckError(str(e)) from e

    info = result.stdout
    logger.debug("lipo -info %s: %s", path, info.strip())
    if ARCH_ARM64 in info:
        return ARCH_ARM64
    if ARCH_X86_64 in info:
        return ARCH_X86_64
    raise ArchitectureCheckError(f"unrecognized architecture: {info.strip()}")


def is_mismatched(arch: str, platform: Platform) -> bool:
    """Whether a binary built for ``arch`` is wrong for ``platform``."""
    if arch == ARCH_ARM64:
        return platform is Platform.MACOS_X64
    if arch == ARCH_X86_64:
        return platform is Platform.MACOS_ARM
    return False


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def make_executable(path: Path) -> None:
    """``chmod +x``: add the execute bits the process umask allows.

    With the usual 022 umask that is user, group and other; a 077
    umask leaves only the owner bit.

    Raises:
        OSError: If the file is missing or its mode cannot be changed.
    """
    mode = path.stat().st_mode
    exec_bits = (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH) & ~_current_umask()
    path.chmod(mode | exec_bits)
    logger.debug("Marked %s executable", path)
