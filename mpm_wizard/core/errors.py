"""
Error taxonomy for the wizard.

Services raise these; the wizard's transition function decides whether
a failure is recoverable (re-prompt) or fatal (exit code 1).
"""

from __future__ import annotations


class WizardError(Exception):
    """Base class for every error raised by wizard services."""


class UnknownReleaseError(WizardError, KeyError):
    """Raised when a release name is not part of the supported order."""

    def __init__(self, release: str) -> None:
        super().__init__(release)
        self.release = release

    def __str__(self) -> str:
        return f"Unknown release: {self.release!r}"


class AdminCheckError(WizardError):
    """Raised when the administrator-rights probe cannot reach a verdict."""


class DownloadError(WizardError):
    """Raised when the mpm binary cannot be downloaded."""


class ArchitectureCheckError(WizardError):
    """Raised when an existing mpm binary's architecture cannot be read."""


class InstallError(WizardError):
    """Raised when the mpm subprocess fails."""


class MpmNotFoundError(InstallError):
    """Raised when the mpm binary is missing or not accessible."""


class LicenseInstallError(WizardError):
    """Raised when the license file cannot be placed in the installation."""


class ConfigError(WizardError):
    """Raised when the wizard configuration file is invalid."""


class WizardCancelled(WizardError):
    """Raised in the main thread when the user interrupts the wizard."""
