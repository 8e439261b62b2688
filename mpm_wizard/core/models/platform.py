"""
Platform model — target OS/architecture and its fixed defaults.

The platform decides which mpm binary is fetched, what it is called on
disk, and where things go by default.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class Platform(str, Enum):
    """Target platform of the installation."""

    WINDOWS = "windows"
    LINUX = "linux"
    MACOS_X64 = "macOSx64"
    MACOS_ARM = "macOSARM"

    @property
    def is_macos(self) -> bool:
        return self in (Platform.MACOS_X64, Platform.MACOS_ARM)

    @property
    def is_windows(self) -> bool:
        return self is Platform.WINDOWS

    def __str__(self) -> str:
        return self.value


class PlatformProfile(BaseModel, frozen=True):
    """Per-platform constants: download URL, binary name, default paths."""

    platform: Platform
    mpm_url: str
    binary_name: str = "mpm"
    install_dir_template: str

    def default_install_dir(self, release: str) -> str:
        """Default installation directory for ``release``."""
        return self.install_dir_template.format(release=release)


PROFILES: dict[Platform, PlatformProfile] = {
    Platform.WINDOWS: PlatformProfile(
        platform=Platform.WINDOWS,
        mpm_url="https://www.mathworks.com/mpm/win64/mpm",
        binary_name="mpm.exe",
        install_dir_template="C:\\Program Files\\MATLAB\\{release}",
    ),
    Platform.LINUX: PlatformProfile(
        platform=Platform.LINUX,
        mpm_url="https://www.mathworks.com/mpm/glnxa64/mpm",
        install_dir_template="/usr/local/MATLAB/{release}",
    ),
    Platform.MACOS_X64: PlatformProfile(
        platform=Platform.MACOS_X64,
        mpm_url="https://www.mathworks.com/mpm/maci64/mpm",
        install_dir_template="/Applications/MATLAB_{release}.app",
    ),
    Platform.MACOS_ARM: PlatformProfile(
        platform=Platform.MACOS_ARM,
        mpm_url="https://www.mathworks.com/mpm/maca64/mpm",
        install_dir_template="/Applications/MATLAB_{release}.app",
    ),
}


def profile_for(platform: Platform) -> PlatformProfile:
    """Look up the fixed profile of a platform."""
    return PROFILES[platform]
