"""Resolve the import name generated code uses to reach the runtime library."""

from __future__ import annotations

import importlib.metadata as importlib_metadata
import logging
import re

from zstdembed.config import DEFAULT_DISTRIBUTION
from zstdembed.errors import ImportNameResolutionError

logger = logging.getLogger(__name__)

_PACKAGE_NAME = __name__.partition(".")[0]


def _canonical(distribution: str) -> str:
    """Normalize a distribution name (PEP 503)."""
    return re.sub(r"[-_.]+", "-", distribution).lower()


def resolve_import_name(distribution: str = DEFAULT_DISTRIBUTION) -> str:
    """Return the top-level import name under which ``distribution`` is installed.

    Prefer this package's own name when the distribution provides it. When
    resolving this library itself without installed metadata (a source
    checkout), fall back to the name this module was imported under.
    """
    wanted = _canonical(distribution)
    candidates = sorted(
        name
        for name, owners in importlib_metadata.packages_distributions().items()
        if any(_canonical(owner) == wanted for owner in owners)
    )

    if _PACKAGE_NAME in candidates:
        resolved = _PACKAGE_NAME
    elif candidates:
        resolved = candidates[0]
    elif wanted == _canonical(DEFAULT_DISTRIBUTION):
        resolved = _PACKAGE_NAME
    else:
        raise ImportNameResolutionError(distribution)

    logger.debug("Resolved distribution %s to import name %s", distribution, resolved)
    return resolved
