"""
Domain models — Pydantic types for the wizard.

All models are re-exported here for convenient access:

    from mpm_wizard.core.models import Platform, PlatformProfile, Session
"""

from mpm_wizard.core.models.platform import PROFILES, Platform, PlatformProfile, profile_for
from mpm_wizard.core.models.session import Session

__all__ = [
    # platform.py
    "PROFILES",
    "Platform",
    "PlatformProfile",
    "profile_for",
    # session.py
    "Session",
]
