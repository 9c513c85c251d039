"""Path utilities for the parsing engine.

This module canonicalizes path separators and splits library-relative
paths into folder names. Everything here works on strings only and never
touches the filesystem.
"""

import re

from tomescan.core.constants import PATH_SEPARATOR

__all__ = [
    "directory_name",
    "file_name",
    "file_stem",
    "folders_till_root",
    "normalize_path",
]

_SEPARATOR_RUN = re.compile(r"[\\/]+")
_UNC_PREFIX = re.compile(r"^[\\/]{2}(?=[^\\/])")


def normalize_path(path: str | None) -> str:
    """Normalize a path for consistent handling.

    Backslashes become forward slashes and runs of separators collapse to
    one. Drive prefixes (``M:/``), a leading ``/`` and a UNC ``//server``
    prefix are kept.

    Args:
        path: Path to normalize (may be empty or None)

    Returns:
        Normalized path, or an empty string for empty input
    """
    if not path:
        return ""

    prefix = ""
    if _UNC_PREFIX.match(path):
        prefix = PATH_SEPARATOR
        path = path[1:]

    return prefix + _SEPARATOR_RUN.sub(PATH_SEPARATOR, path)


def file_name(path: str) -> str:
    """Return the last path component (with extension)."""
    normalized = normalize_path(path).rstrip(PATH_SEPARATOR)
    return normalized.rsplit(PATH_SEPARATOR, 1)[-1]


def file_stem(path: str) -> str:
    """Return the last path component without its extension."""
    name = file_name(path)
    if name.lower().endswith(".tar.gz"):
        return name[: -len(".tar.gz")]
    stem, dot, _ = name.rpartition(".")
    if not dot or not stem:
        return name
    return stem


def directory_name(path: str) -> str:
    """Return the parent directory of a path, without a trailing separator."""
    normalized = normalize_path(path).rstrip(PATH_SEPARATOR)
    if PATH_SEPARATOR not in normalized:
        return ""
    parent = normalized.rsplit(PATH_SEPARATOR, 1)[0]
    return parent or PATH_SEPARATOR


def folders_till_root(root_path: str, file_path: str) -> list[str]:
    """List the folder names between ``root_path`` and ``file_path``.

    Folders are returned deepest first, so the last entry is the folder
    directly below the root. The file itself is never included.

    Examples:
        >>> folders_till_root("C:/Manga/", "C:/Manga/Love Hina/Specials/Omake/file.cbz")
        ['Omake', 'Specials', 'Love Hina']
        >>> folders_till_root("C:/Manga/", "C:/Manga/file.cbz")
        []
    """
    root = normalize_path(root_path).rstrip(PATH_SEPARATOR)
    parent = directory_name(file_path)

    if not parent or parent.rstrip(PATH_SEPARATOR) == root:
        return []

    root_prefix = root + PATH_SEPARATOR
    if not root_path:
        relative = parent
    elif parent.lower().startswith(root_prefix.lower()):
        relative = parent[len(root_prefix) :]
    else:
        # File lives outside the root: only its own folder is meaningful
        relative = parent.rsplit(PATH_SEPARATOR, 1)[-1]

    folders = [part for part in relative.split(PATH_SEPARATOR) if part]
    folders.reverse()
    return folders
