"""Environment-driven settings for tomescan.

Explicit arguments always win; environment variables fill in next; the
built-in defaults come last.

Environment:
    TOMESCAN_WORKERS: Worker threads used for batch dispatch
    TOMESCAN_LIBRARY_TYPE: Library type the CLI assumes when none is given
"""

from __future__ import annotations

import os

from tomescan.core.errors import InvalidLibraryType, InvalidWorkerCount
from tomescan.models.schemas import LibraryType

__all__ = ["default_worker_count", "resolve_library_type", "resolve_worker_count"]

DEFAULT_LIBRARY_TYPE = LibraryType.MANGA


def default_worker_count() -> int:
    """Default thread count, mirroring ThreadPoolExecutor's own default."""
    return min(32, (os.cpu_count() or 1) + 4)


def resolve_worker_count(workers: int | None = None) -> int:
    """Resolve the worker count for batch dispatch.

    Args:
        workers: Optional explicit worker count

    Returns:
        Positive worker count

    Raises:
        InvalidWorkerCount: If the explicit or environment value is not a
            positive integer
    """
    chosen: int | str | None = workers
    env_value = os.getenv("TOMESCAN_WORKERS")
    if chosen is None and env_value:
        chosen = env_value
    if chosen is None:
        return default_worker_count()

    try:
        count = int(chosen)
    except (TypeError, ValueError) as exc:
        raise InvalidWorkerCount(str(chosen)) from exc

    if count < 1:
        raise InvalidWorkerCount(str(chosen))
    return count


def resolve_library_type(value: str | LibraryType | None = None) -> LibraryType:
    """Resolve a library type from an argument, the environment or the default.

    Matching is case-insensitive on the enum value ("Manga", "manga").

    Raises:
        InvalidLibraryType: If the value names no known library type
    """
    chosen: str | LibraryType | None = value
    env_value = os.getenv("TOMESCAN_LIBRARY_TYPE")
    if chosen is None and env_value:
        chosen = env_value
    if chosen is None:
        return DEFAULT_LIBRARY_TYPE

    if isinstance(chosen, LibraryType):
        return chosen

    try:
        return LibraryType(chosen.strip().lower())
    except ValueError as exc:
        raise InvalidLibraryType(chosen, [member.value for member in LibraryType]) from exc
