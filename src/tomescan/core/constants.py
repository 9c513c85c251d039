"""Core constants for tomescan.

This module defines constants shared between the parsing engine, the
ordering engine and whatever persists their results:
- Sentinel volume/chapter values
- File extensions grouped by container format
- Special-folder naming
"""

# ============================================================================
# Sentinels
# ============================================================================

#: Chapter value used when a file carries no chapter number (whole volume)
DEFAULT_CHAPTER: str = "-100000"

#: Numeric form of DEFAULT_CHAPTER
DEFAULT_CHAPTER_NUMBER: float = -100000.0

#: Volume value used when no volume could be determined (chapter-only release)
LOOSE_LEAF_VOLUME: str = "-100000"

#: Numeric form of LOOSE_LEAF_VOLUME
LOOSE_LEAF_VOLUME_NUMBER: float = -100000.0

#: Volume value reserved for specials/bonus releases
SPECIAL_VOLUME: str = "100000"

#: Numeric form of SPECIAL_VOLUME
SPECIAL_VOLUME_NUMBER: float = 100000.0

# ============================================================================
# File Extensions
# ============================================================================

#: Archive containers (comic book archives and plain archives)
ARCHIVE_EXTENSIONS: tuple[str, ...] = (
    ".cbz",
    ".cbr",
    ".cb7",
    ".cbt",
    ".zip",
    ".rar",
    ".7z",
    ".tar.gz",
)

#: Epub documents
EPUB_EXTENSIONS: tuple[str, ...] = (".epub",)

#: Pdf documents
PDF_EXTENSIONS: tuple[str, ...] = (".pdf",)

#: Loose raster images
IMAGE_EXTENSIONS: tuple[str, ...] = (
    ".png",
    ".jpg",
    ".jpeg",
    ".jpe",
    ".gif",
    ".webp",
    ".avif",
    ".jxl",
    ".bmp",
)

#: Documents and archives handled by the basic strategy
BOOK_EXTENSIONS: tuple[str, ...] = ARCHIVE_EXTENSIONS + EPUB_EXTENSIONS + PDF_EXTENSIONS

#: All extensions the engine understands
SUPPORTED_EXTENSIONS: tuple[str, ...] = BOOK_EXTENSIONS + IMAGE_EXTENSIONS

# ============================================================================
# Folder Conventions
# ============================================================================

#: Folder name users put specials into, below the series folder
SPECIALS_FOLDER: str = "Specials"

#: Canonical path separator produced by the path normalizer
PATH_SEPARATOR: str = "/"
