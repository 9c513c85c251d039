"""Pydantic schemas for the parse/order/scan pipeline.

These schemas define the data structures exchanged with tomescan callers:
- ParsedFileInfo: Output from parsing a single file
- ChapterOrderingUnit: Input to the ordering engine
- ScanResult: Output from scanning a library root

All schemas use Pydantic v2 for validation and serialization.
"""

from enum import Enum
from pathlib import Path
from typing import NamedTuple

from pydantic import BaseModel, Field, computed_field, field_serializer, field_validator

from tomescan.core.constants import (
    DEFAULT_CHAPTER,
    LOOSE_LEAF_VOLUME,
    SPECIAL_VOLUME,
)
from tomescan.core.ranges import max_from_range, min_from_range


class LibraryType(str, Enum):
    """Kind of library a file lives in.

    The same filename is interpreted differently depending on this value.
    The set is closed: adding a member means revisiting every strategy's
    ``is_applicable``.
    """

    MANGA = "manga"
    COMIC = "comic"
    COMICVINE = "comicvine"
    BOOK = "book"
    LIGHTNOVEL = "lightnovel"
    IMAGE = "image"


class MangaFormat(str, Enum):
    """Container type of a file, inferred from its extension."""

    ARCHIVE = "archive"
    EPUB = "epub"
    PDF = "pdf"
    IMAGE = "image"
    UNKNOWN = "unknown"


class ParsedFileInfo(BaseModel):
    """Structured metadata extracted from a single file path.

    Attributes:
        series: Cleaned series name (never empty)
        volumes: Volume range text, or LOOSE_LEAF_VOLUME / SPECIAL_VOLUME
        chapters: Chapter range text, or DEFAULT_CHAPTER
        edition: Release edition tag such as "Omnibus", empty when absent
        title: Human title, mostly used for specials
        is_special: True when the file is a bonus/special release
        special_index: Number from an SP## marker, 0 when absent
        format: Container format inferred from the extension
        filename: Base name of the file including extension
        full_file_path: Normalized path of the file
    """

    series: str
    volumes: str = LOOSE_LEAF_VOLUME
    chapters: str = DEFAULT_CHAPTER
    edition: str = ""
    title: str = ""
    is_special: bool = False
    special_index: int = 0
    format: MangaFormat = MangaFormat.UNKNOWN
    filename: str = ""
    full_file_path: str = ""

    @field_validator("series")
    @classmethod
    def validate_series(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("series cannot be empty")
        return value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def volume_min_number(self) -> float:
        return min_from_range(self.volumes)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def volume_max_number(self) -> float:
        return max_from_range(self.volumes)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def chapter_min_number(self) -> float:
        return min_from_range(self.chapters)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def chapter_max_number(self) -> float:
        return max_from_range(self.chapters)

    @property
    def is_loose_leaf(self) -> bool:
        return self.volumes == LOOSE_LEAF_VOLUME

    @property
    def has_default_chapter(self) -> bool:
        return self.chapters == DEFAULT_CHAPTER

    @property
    def is_special_volume(self) -> bool:
        return self.volumes == SPECIAL_VOLUME


class ChapterOrderingUnit(BaseModel):
    """Lightweight key attached to a chapter for ordering.

    Attributes:
        volume_min_number: Minimum number of the owning volume (may be a sentinel)
        is_special: Whether the chapter itself is a special
        sort_order: Persisted tie-break assigned at import time
        range: Display text of the chapter, used for natural ordering
    """

    volume_min_number: float
    is_special: bool = False
    sort_order: int = 0
    range: str = ""

    model_config = {"frozen": True}


class ScanCandidate(NamedTuple):
    """One file handed over by the directory walker.

    Attributes:
        path: Absolute path of the file
        folder: Folder the caller considers the series/root folder
        library_root: Root folder of the library
        library_type: Type of the owning library
    """

    path: str
    folder: str
    library_root: str
    library_type: LibraryType


class ScannedFile(BaseModel):
    """A scanned file paired with its parse outcome.

    ``info`` is None when the file was skipped (no applicable strategy,
    cover image, or no recoverable series).
    """

    path: Path
    info: ParsedFileInfo | None = None

    @field_serializer("path")
    def serialize_path(self, path: Path) -> str:
        """Serialize Path to string for JSON."""
        return str(path)


class ScanResult(BaseModel):
    """Complete results from scanning a library root.

    Attributes:
        root_path: Library root that was scanned
        library_type: Type the library was scanned as
        files: Scanned files, in walk order
        parsed_count: Number of files that produced a ParsedFileInfo
        skipped_count: Number of files that produced nothing
    """

    root_path: Path
    library_type: LibraryType
    files: list[ScannedFile] = Field(default_factory=list)
    parsed_count: int = 0
    skipped_count: int = 0

    @field_serializer("root_path")
    def serialize_root_path(self, path: Path) -> str:
        """Serialize Path to string for JSON."""
        return str(path)

    @property
    def parsed(self) -> list[ParsedFileInfo]:
        return [item.info for item in self.files if item.info is not None]
