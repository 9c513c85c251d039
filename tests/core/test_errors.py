"""Tests for core custom exceptions."""

import pytest

from tomescan.core.errors import (
    InvalidLibraryType,
    InvalidWorkerCount,
    LibraryRootNotFound,
    TomescanError,
)


@pytest.mark.parametrize(
    "exc",
    [
        LibraryRootNotFound("/missing", "missing"),
        InvalidLibraryType("novel", ["manga", "comic"]),
        InvalidWorkerCount("zero"),
    ],
)
def test_errors_share_base_class(exc: TomescanError) -> None:
    assert isinstance(exc, TomescanError)


def test_library_root_not_found() -> None:
    exc = LibraryRootNotFound("/data/Manga", "not a directory")

    assert exc.path == "/data/Manga"
    assert exc.reason == "not a directory"
    assert "/data/Manga" in str(exc)
    assert exc.to_dict() == {
        "error": "library_root_not_found",
        "path": "/data/Manga",
        "reason": "not a directory",
    }
    assert repr(exc) == "LibraryRootNotFound(path='/data/Manga', reason='not a directory')"


def test_invalid_library_type() -> None:
    exc = InvalidLibraryType("novel", ["manga", "comic"])

    assert "novel" in str(exc)
    assert "manga, comic" in str(exc)
    assert exc.to_dict()["error"] == "invalid_library_type"
    assert exc.to_dict()["allowed"] == ["manga", "comic"]


def test_invalid_worker_count() -> None:
    exc = InvalidWorkerCount("zero")

    assert exc.to_dict() == {"error": "invalid_worker_count", "value": "zero"}
    assert repr(exc) == "InvalidWorkerCount(value='zero')"
