"""Pydantic models shared by the engine and its callers."""

from tomescan.models.schemas import (
    ChapterOrderingUnit,
    LibraryType,
    MangaFormat,
    ParsedFileInfo,
    ScanCandidate,
    ScannedFile,
    ScanResult,
)

__all__ = [
    "ChapterOrderingUnit",
    "LibraryType",
    "MangaFormat",
    "ParsedFileInfo",
    "ScanCandidate",
    "ScannedFile",
    "ScanResult",
]
