"""
Release and product resolution.

Answers three questions about the static catalog:

- which releases can be installed on a platform,
- which products exist for a (platform, release) pair,
- whether a user's product list only names products that exist.

The product set is folded from two tables keyed by release (see
``core.data.catalog``): forward entries apply to their release and
every later one, backward entries to their release and every earlier
one. The fold works for releases that have no key of their own.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from mpm_wizard.core.data.catalog import (
    ADDED_FORWARD,
    DEFAULT_RELEASE,
    MACOS_ARM_FIRST_RELEASE,
    PARALLEL_BUNDLE,
    PARALLEL_BUNDLE_LEGACY,
    PARALLEL_KEYWORD,
    PARALLEL_SERVER_RENAME_RELEASE,
    RELEASE_INDEX,
    RELEASE_ORDER,
    VALID_BACKWARD,
)
from mpm_wizard.core.errors import UnknownReleaseError
from mpm_wizard.core.models.platform import Platform

logger = logging.getLogger(__name__)


# ── Releases ────────────────────────────────────────────────────


def release_index(release: str) -> int:
    """Chronological position of ``release`` (R2017b is 0).

    Raises:
        UnknownReleaseError: If the release is not supported.
    """
    try:
        return RELEASE_INDEX[release]
    except KeyError:
        raise UnknownReleaseError(release) from None


def valid_releases(platform: Platform) -> tuple[str, ...]:
    """Releases installable on ``platform``, oldest first."""
    if platform is Platform.MACOS_ARM:
        return RELEASE_ORDER[release_index(MACOS_ARM_FIRST_RELEASE):]
    return RELEASE_ORDER


def release_range_label(releases: Sequence[str]) -> str:
    """``"R2017b-R2025b"`` style label for error messages."""
    return f"{releases[0]}-{releases[-1]}"


def normalize_release(
    text: str,
    valid: Sequence[str],
    default: str = DEFAULT_RELEASE,
) -> str | None:
    """Match user input against ``valid`` case-insensitively.

    Empty input selects ``default``.

    Returns:
        The canonical release name, or None when nothing matches.
    """
    wanted = text.strip() or default
    wanted = wanted.lower()
    for release in valid:
        if release.lower() == wanted:
            return release
    return None


# ── Products ────────────────────────────────────────────────────


def resolve_products(platform: Platform, release: str) -> frozenset[str]:
    """Every product name installable for ``release`` on ``platform``."""
    selected = release_index(release)
    products: set[str] = set()

    for key, names in ADDED_FORWARD[platform].items():
        if selected >= release_index(key):
            products.update(names)

    for key, names in VALID_BACKWARD[platform].items():
        if selected <= release_index(key):
            products.update(names)

    logger.debug("Resolved %d products for %s %s", len(products), platform, release)
    return frozenset(products)


def parallel_products(release: str) -> list[str]:
    """The fixed bundle behind the ``parallel_products`` keyword.

    MATLAB_Distributed_Computing_Server was renamed MATLAB_Parallel_Server
    after R2018b; the bundle follows the name valid for ``release``.
    """
    if release_index(release) <= release_index(PARALLEL_SERVER_RENAME_RELEASE):
        return list(PARALLEL_BUNDLE_LEGACY)
    return list(PARALLEL_BUNDLE)


def find_missing_products(requested: Iterable[str], available: Iterable[str]) -> list[str]:
    """Requested names absent from ``available``, in request order."""
    known = set(available)
    return [name for name in requested if name not in known]


@dataclass
class ProductSelection:
    """Outcome of validating a product answer."""

    products: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.missing


def select_products(text: str, platform: Platform, release: str) -> ProductSelection:
    """Turn the user's product answer into a validated product list.

    - empty: every product of the release (sorted, for a stable command line)
    - ``parallel_products``: the fixed parallel bundle
    - otherwise: whitespace-separated names, all of which must exist
    """
    answer = text.strip()

    if answer == PARALLEL_KEYWORD:
        return ProductSelection(products=parallel_products(release))

    available = resolve_products(platform, release)
    if not answer:
        return ProductSelection(products=sorted(available))

    requested = answer.split()
    missing = find_missing_products(requested, available)
    if missing:
        logger.debug("Unknown products for %s %s: %s", platform, release, missing)
        return ProductSelection(missing=missing)
    return ProductSelection(products=requested)
