"""
Session — mutable state accumulated across wizard steps.

Owned by the wizard controller. Each step reads the fields written by
earlier steps and fills in its own; nothing else mutates it.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from mpm_wizard.core.data.catalog import DEFAULT_RELEASE
from mpm_wizard.core.models.platform import Platform, profile_for


class Session(BaseModel):
    """Everything the wizard has learned so far."""

    # ── Preferences (from config, offered as prompt defaults) ────
    preferred_release: str = DEFAULT_RELEASE
    preferred_download_dir: str | None = None
    preferred_install_dir: str | None = None    # may contain {release}

    # ── Platform ─────────────────────────────────────────────────
    platform: Platform | None = None
    mpm_url: str = ""
    default_download_dir: str = ""

    # ── mpm binary ───────────────────────────────────────────────
    download_dir: str = ""
    pending_dir: str = ""           # awaiting (y/n) creation confirmation
    mpm_mismatched: bool = False    # existing binary is for the other mac arch

    # ── Installation ─────────────────────────────────────────────
    release: str = ""
    products: list[str] = Field(default_factory=list)
    install_path: str = ""
    license_path: str | None = None

    @property
    def license_used(self) -> bool:
        return self.license_path is not None

    @property
    def binary_name(self) -> str:
        """File name of the mpm binary on this platform."""
        if self.platform is None:
            return "mpm"
        return profile_for(self.platform).binary_name

    @property
    def mpm_path(self) -> Path:
        """Full path of the mpm binary inside the download directory."""
        return Path(self.download_dir) / self.binary_name

    def set_platform(self, platform: Platform) -> None:
        """Select the target platform and its download URL."""
        self.platform = platform
        self.mpm_url = profile_for(platform).mpm_url

    def default_install_dir(self) -> str:
        """Install directory offered when the user just presses Enter."""
        if self.preferred_install_dir:
            return self.preferred_install_dir.replace("{release}", self.release)
        assert self.platform is not None
        return profile_for(self.platform).default_install_dir(self.release)
