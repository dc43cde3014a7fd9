"""Configuration for the kperms package.

Controls how many arrangements :func:`kperms.kpermute` is willing to
materialize before refusing.

Resolution order (first match wins):
    1. Programmatic override via :func:`set_eager_limit`.
    2. ``DEFAULT_EAGER_LIMIT``.

Examples:
    Raise the limit::

        import kperms
        kperms.set_eager_limit(50_000_000)

    Restore the default::

        kperms.set_eager_limit(None)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

DEFAULT_EAGER_LIMIT = 10_000_000

_limit_override: int | None = None


def get_eager_limit() -> int:
    """Return the largest arrangement count ``kpermute`` will build."""
    if _limit_override is not None:
        return _limit_override
    return DEFAULT_EAGER_LIMIT


def set_eager_limit(limit: int | None) -> None:
    """Override the eager limit.

    Args:
        limit: A positive integer, or ``None`` to restore the default.

    Raises:
        TypeError: If *limit* is not an int.
        ValueError: If *limit* is not positive.
    """
    global _limit_override
    if limit is None:
        _limit_override = None
        return
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise TypeError(f"Eager limit must be an int, not {type(limit).__name__}")
    if limit <= 0:
        raise ValueError(f"Eager limit must be positive, got {limit}")
    logger.debug("eager limit set to %d", limit)
    _limit_override = limit
