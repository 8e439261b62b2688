"""
Platform detection — which mpm build does this machine need?

Read-only probes of the running interpreter (``sys.platform``,
``platform.machine()``) plus the Windows administrator check.

Apple silicon machines can run both the Intel and the ARM builds, so
detection alone cannot decide for them; the wizard asks the user.
"""

from __future__ import annotations

import logging
import os
import platform as _platform
import sys
from dataclasses import dataclass
from pathlib import Path, PureWindowsPath

from mpm_wizard.core.errors import AdminCheckError
from mpm_wizard.core.models.platform import Platform

logger = logging.getLogger(__name__)

# Machine name normalization (Darwin reports arm64, Linux aarch64).
_ARCH_MAP: dict[str, str] = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
}

_INTEL_ANSWERS = frozenset({"intel", '"intel"', "idk", '"idk"'})
_ARM_ANSWERS = frozenset({"arm", '"arm"'})

MAC_ARCH_QUESTION = (
    "Would you like to install an Intel or ARM version of your products? "
    'Type in "intel", "arm" or "idk" if you\'re unsure.'
)


@dataclass(frozen=True)
class HostInfo:
    """Operating system family and CPU architecture of this machine."""

    system: str   # "darwin", "windows", "linux", or whatever else
    arch: str     # "amd64", "arm64", or the raw machine name


@dataclass(frozen=True)
class PlatformResolution:
    """Result of mapping a host to a platform.

    Exactly one of the flags describes the outcome:
    a concrete ``platform``, ``needs_choice`` (Apple silicon), or
    ``unrecognized``.
    """

    platform: Platform | None = None
    default_download_dir: str = ""
    needs_choice: bool = False
    needs_admin: bool = False
    unrecognized: bool = False


def detect_host() -> HostInfo:
    """Probe the running interpreter for OS family and architecture."""
    if sys.platform == "darwin":
        system = "darwin"
    elif sys.platform.startswith("win"):
        system = "windows"
    elif sys.platform.startswith("linux"):
        system = "linux"
    else:
        system = sys.platform

    machine = _platform.machine().lower()
    host = HostInfo(system=system, arch=_ARCH_MAP.get(machine, machine))
    logger.debug("Detected host: %s", host)
    return host


def resolve_platform(host: HostInfo) -> PlatformResolution:
    """Map a host to the platform whose mpm build it should use."""
    if host.system == "darwin":
        if host.arch == "arm64":
            return PlatformResolution(
                platform=Platform.MACOS_ARM,
                default_download_dir="/tmp",
                needs_choice=True,
            )
        if host.arch == "amd64":
            return PlatformResolution(platform=Platform.MACOS_X64, default_download_dir="/tmp")
        return PlatformResolution(unrecognized=True)

    if host.system == "windows":
        return PlatformResolution(
            platform=Platform.WINDOWS,
            default_download_dir=os.environ.get("TMP", ""),
            needs_admin=True,
        )

    if host.system == "linux":
        return PlatformResolution(platform=Platform.LINUX, default_download_dir="/tmp")

    return PlatformResolution(unrecognized=True)


def parse_mac_arch_choice(answer: str) -> Platform | None:
    """Interpret the Intel/ARM answer of an Apple silicon user.

    ``idk`` picks Intel, which runs everywhere under Rosetta.

    Returns:
        The chosen platform, or None for unrecognized input.
    """
    choice = answer.strip().lower()
    if choice in _INTEL_ANSWERS:
        return Platform.MACOS_X64
    if choice in _ARM_ANSWERS:
        return Platform.MACOS_ARM
    return None


def has_admin_rights(probe_dir: Path | None = None) -> bool:
    """Best-effort check for administrator rights on Windows.

    Creates and removes a scratch file in the root of the drive that
    holds Windows. This is a heuristic, not a privilege query: it can
    report False for an administrator when something else (antivirus,
    disk policy) blocks writes to the drive root.

    Args:
        probe_dir: Directory to probe instead of the Windows drive root.

    Returns:
        True if the probe file could be created, False otherwise.

    Raises:
        AdminCheckError: If ``WINDIR`` is unset, or the probe file was
            created but cannot be removed.
    """
    if probe_dir is None:
        win_dir = os.environ.get("WINDIR", "")
        if not win_dir:
            raise AdminCheckError("WINDIR environment variable not found")
        probe_dir = Path(PureWindowsPath(win_dir).drive + "\\")

    probe = probe_dir / "admin_test"

    try:
        probe.touch()
    except OSError as e:
        logger.debug("Admin probe %s not writable: %s", probe, e)
        return False

    try:
        probe.unlink()
    except OSError as e:
        raise AdminCheckError(
            f"failed to delete file made when testing admin rights: {e}"
        ) from e

    return True
