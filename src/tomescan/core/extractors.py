"""Token extractors for file and folder names.

Each extractor is a stateless function over a name (usually a filename
without its extension). Extractors never raise: a missing token yields an
empty string or the matching sentinel.

Examples:
    >>> parse_series("Mujaki no Rakuen Vol12 ch76", LibraryType.MANGA)
    'Mujaki no Rakuen'
    >>> parse_volume("Mujaki no Rakuen Vol12 ch76", LibraryType.MANGA)
    '12'
    >>> parse_chapter("Beelzebub_01_[Noodles]", LibraryType.MANGA)
    '1'
"""

import re

from tomescan.core import patterns
from tomescan.core.constants import (
    ARCHIVE_EXTENSIONS,
    DEFAULT_CHAPTER,
    DEFAULT_CHAPTER_NUMBER,
    EPUB_EXTENSIONS,
    IMAGE_EXTENSIONS,
    LOOSE_LEAF_VOLUME,
    LOOSE_LEAF_VOLUME_NUMBER,
    PDF_EXTENSIONS,
    SPECIAL_VOLUME,
    SPECIAL_VOLUME_NUMBER,
    SUPPORTED_EXTENSIONS,
)
from tomescan.core.paths import file_name
from tomescan.core.ranges import format_value, min_from_range
from tomescan.models.schemas import LibraryType, MangaFormat

_COMIC_TYPES = frozenset({LibraryType.COMIC, LibraryType.COMICVINE})


def _is_comic(library_type: LibraryType) -> bool:
    return library_type in _COMIC_TYPES


def _has_extension(path: str, extensions: tuple[str, ...]) -> bool:
    lowered = file_name(path).lower()
    return any(lowered.endswith(ext) for ext in extensions)


# ============================================================================
# Extension checks
# ============================================================================


def is_image(path: str) -> bool:
    """Return True if the path has a raster image extension."""
    return _has_extension(path, IMAGE_EXTENSIONS)


def is_archive(path: str) -> bool:
    return _has_extension(path, ARCHIVE_EXTENSIONS)


def is_epub(path: str) -> bool:
    return _has_extension(path, EPUB_EXTENSIONS)


def is_pdf(path: str) -> bool:
    return _has_extension(path, PDF_EXTENSIONS)


def is_supported(path: str) -> bool:
    return _has_extension(path, SUPPORTED_EXTENSIONS)


def parse_format(path: str) -> MangaFormat:
    """Infer the container format of a file from its extension."""
    if is_archive(path):
        return MangaFormat.ARCHIVE
    if is_epub(path):
        return MangaFormat.EPUB
    if is_pdf(path):
        return MangaFormat.PDF
    if is_image(path):
        return MangaFormat.IMAGE
    return MangaFormat.UNKNOWN


def is_cover_image(filename: str) -> bool:
    """Return True for images that only decorate a folder (cover.png, folder.jpg)."""
    if not is_image(filename):
        return False
    stem = file_name(filename).rsplit(".", 1)[0]
    return patterns.COVER_IMAGE_PATTERN.search(stem) is not None


# ============================================================================
# Sentinel checks
# ============================================================================


def is_loose_leaf_volume(volume: str | float) -> bool:
    if isinstance(volume, str):
        return volume == LOOSE_LEAF_VOLUME
    return abs(volume - LOOSE_LEAF_VOLUME_NUMBER) < 0.001


def is_special_volume(volume: str | float) -> bool:
    if isinstance(volume, str):
        return volume == SPECIAL_VOLUME
    return abs(volume - SPECIAL_VOLUME_NUMBER) < 0.001


def is_default_chapter(chapter: str | float) -> bool:
    if isinstance(chapter, str):
        return chapter == DEFAULT_CHAPTER or min_from_range(chapter) == DEFAULT_CHAPTER_NUMBER
    return abs(chapter - DEFAULT_CHAPTER_NUMBER) < 0.001


# ============================================================================
# Volume / Chapter / Series / Edition
# ============================================================================


def _first_match(
    name: str, table: tuple[re.Pattern[str], ...]
) -> re.Match[str] | None:
    for pattern in table:
        match = pattern.search(name)
        if match:
            return match
    return None


def parse_volume(name: str, library_type: LibraryType) -> str:
    """Extract the volume range from a name, or LOOSE_LEAF_VOLUME."""
    table = (
        patterns.COMIC_VOLUME_PATTERNS
        if _is_comic(library_type)
        else patterns.MANGA_VOLUME_PATTERNS
    )
    match = _first_match(name or "", table)
    if not match:
        return LOOSE_LEAF_VOLUME
    value = patterns.WHITESPACE_PATTERN.sub("", match.group("Volume"))
    return format_value(value)


def parse_chapter(name: str, library_type: LibraryType) -> str:
    """Extract the chapter range from a name, or DEFAULT_CHAPTER.

    A part suffix (``c012a``) turns the chapter into a ``.5`` release.
    """
    table = (
        patterns.COMIC_CHAPTER_PATTERNS
        if _is_comic(library_type)
        else patterns.MANGA_CHAPTER_PATTERNS
    )
    match = _first_match(name or "", table)
    if not match:
        return DEFAULT_CHAPTER
    value = patterns.WHITESPACE_PATTERN.sub("", match.group("Chapter"))
    has_part = "Part" in match.re.groupindex and bool(match.group("Part"))
    return format_value(value, has_part=has_part)


def parse_series(name: str, library_type: LibraryType) -> str:
    """Extract the series name preceding the first volume/chapter/special token.

    Returns an empty string when the name carries no such token (for
    example a bare ``Vol 1``), so the caller can fall back to folders.
    """
    name = name or ""
    comic = _is_comic(library_type)
    table = patterns.COMIC_SERIES_PATTERNS if comic else patterns.MANGA_SERIES_PATTERNS

    candidates = [m.group("Series") for m in (p.search(name) for p in table) if m]
    if not candidates:
        bare = (
            patterns.COMIC_BARE_SERIES_PATTERN
            if comic
            else patterns.MANGA_BARE_SERIES_PATTERN
        )
        match = bare.search(name)
        if match:
            candidates.append(match.group("Series"))

    for candidate in sorted(candidates, key=len):
        cleaned = clean_title(candidate, is_comic=comic)
        if cleaned and not is_number_token_only(cleaned):
            return cleaned
    return ""


def is_number_token_only(name: str) -> bool:
    """Return True when a name holds nothing but volume/chapter tokens and numbers.

    Such names ("v 02", "Chapter", "Vol 2", "003") can never be a series.
    """
    residue = patterns.NUMBER_TOKEN_PATTERN.sub(" ", name or "")
    return not residue.strip(patterns.NUMBER_TOKEN_RESIDUE_CHARS)


def _edition_match(name: str) -> re.Match[str] | None:
    return _first_match(name or "", patterns.EDITION_PATTERNS)


def parse_edition(name: str) -> str:
    """Extract a release edition tag ("Omnibus", "Deluxe Edition"), or ""."""
    match = _edition_match(name)
    if not match:
        return ""
    return match.group("Edition").strip("[](){} ")


def remove_edition(title: str) -> str:
    """Remove the edition token (with any enclosing brackets) from a title."""
    match = _edition_match(title)
    if not match:
        return title
    return title[: match.start()] + title[match.end() :]


# ============================================================================
# Specials
# ============================================================================


def has_special_marker(name: str) -> bool:
    """Return True for an explicit special marker (``SP01``, ``(Special)``)."""
    name = name or ""
    return bool(
        patterns.SPECIAL_MARKER_PATTERN.search(name)
        or patterns.SPECIAL_MARKER_PARENTHETICAL_PATTERN.search(name)
    )


def parse_special_index(name: str) -> int:
    """Return the number carried by an ``SP##`` marker, or 0."""
    match = patterns.SPECIAL_MARKER_PATTERN.search(name or "")
    if not match:
        return 0
    return int(match.group("Index"))


def is_special(name: str, library_type: LibraryType) -> bool:
    """Return True when a name contains a special keyword (Omake, Annual, ...)."""
    pattern = (
        patterns.COMIC_SPECIAL_PATTERN
        if _is_comic(library_type)
        else patterns.MANGA_SPECIAL_PATTERN
    )
    return pattern.search(name or "") is not None


# ============================================================================
# Cleaning
# ============================================================================


def _collapse(text: str) -> str:
    text = patterns.EMPTY_BRACKETS_PATTERN.sub("", text)
    text = patterns.WHITESPACE_PATTERN.sub(" ", text)
    return text.strip(patterns.TITLE_TRIM_CHARS)


def clean_title(title: str, is_comic: bool = False, replace_specials: bool = True) -> str:
    """Turn a raw name fragment into a human-readable series name.

    Removes underscores, release-group brackets, edition tags and,
    optionally, special keywords, then trims separators from both ends.
    """
    if not title:
        return ""

    cleaned = title.replace("_", " ")
    cleaned = patterns.RELEASE_GROUP_PATTERN.sub("", cleaned)
    cleaned = remove_edition(cleaned)
    if replace_specials:
        pattern = (
            patterns.COMIC_SPECIAL_PATTERN if is_comic else patterns.MANGA_SPECIAL_PATTERN
        )
        cleaned = pattern.sub("", cleaned)
    return _collapse(cleaned)


def clean_special_title(name: str) -> str:
    """Strip the special marker from a name, keeping the descriptive rest.

    Bracketed release-group tags are kept, since for specials they are
    often the only distinguishing text.
    """
    if not name:
        return name

    cleaned = patterns.SPECIAL_MARKER_PATTERN.sub("", name.replace("_", " "))
    cleaned = patterns.SPECIAL_MARKER_PARENTHETICAL_PATTERN.sub("", cleaned)
    cleaned = _collapse(cleaned)
    return cleaned or name


def clean_one_shot_title(name: str) -> str:
    """Title for a named single release: the name minus release-group tags."""
    if not name:
        return name
    cleaned = patterns.RELEASE_GROUP_PATTERN.sub("", name.replace("_", " "))
    return _collapse(cleaned) or name
