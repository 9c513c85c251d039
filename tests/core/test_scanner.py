"""Tests for the library scanner."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from tomescan.core.errors import LibraryRootNotFound
from tomescan.core.scanner import scan
from tomescan.models.schemas import LibraryType


def _logger() -> tuple[Mock, Mock]:
    logger = Mock()
    bound = Mock()
    logger.bind.return_value = bound
    return logger, bound


def test_scan_walks_supported_files(manga_library: Path) -> None:
    logger, _ = _logger()

    result = scan(manga_library, LibraryType.MANGA, workers=2, logger=logger)

    names = [item.path.name for item in result.files]
    assert names == [
        "Accel World - Chapter 3.cbz",
        "Accel World - Volume 1.cbz",
        "cover.png",
        "Beelzebub_01_[Noodles].zip",
    ]
    assert result.root_path == manga_library
    assert result.library_type == LibraryType.MANGA


def test_scan_counts_parsed_and_skipped(manga_library: Path) -> None:
    logger, _ = _logger()

    result = scan(manga_library, LibraryType.MANGA, workers=2, logger=logger)

    assert result.parsed_count == 3
    assert result.skipped_count == 1
    assert {info.series for info in result.parsed} == {"Accel World", "Beelzebub"}

    cover = next(item for item in result.files if item.path.name == "cover.png")
    assert cover.info is None


def test_scan_parses_volume_and_chapter(manga_library: Path) -> None:
    logger, _ = _logger()

    result = scan(manga_library, LibraryType.MANGA, workers=1, logger=logger)

    by_name = {item.path.name: item.info for item in result.files}
    volume = by_name["Accel World - Volume 1.cbz"]
    chapter = by_name["Accel World - Chapter 3.cbz"]
    assert volume is not None and volume.volumes == "1"
    assert chapter is not None and chapter.chapters == "3"
    assert chapter.is_loose_leaf


def test_scan_nested_volume_folders(tmp_path: Path) -> None:
    """Files under "Vol N" folders keep the series folder as their series."""
    root = tmp_path / "library"
    volume = root / "Series" / "Vol 2"
    volume.mkdir(parents=True)
    (volume / "ch 3.cbz").write_bytes(b"")
    (volume / "004.cbz").write_bytes(b"")
    logger, _ = _logger()

    result = scan(root, LibraryType.MANGA, workers=2, logger=logger)

    assert [(i.series, i.volumes, i.chapters) for i in result.parsed] == [
        ("Series", "2", "4"),
        ("Series", "2", "3"),
    ]


def test_scan_logs_summary(manga_library: Path) -> None:
    """Test that structlog events carry the scan counts."""
    logger, bound = _logger()

    scan(manga_library, LibraryType.MANGA, workers=2, logger=logger)

    logger.bind.assert_called_once_with(
        root=str(manga_library), library_type="manga"
    )
    bound.info.assert_called_once_with(
        "scan.summary", file_count=4, parsed_count=3, skipped_count=1
    )
    bound.debug.assert_called_once_with(
        "scan.skipped", path=str(manga_library / "Accel World" / "cover.png")
    )


def test_scan_comicvine_library_skips_everything(manga_library: Path) -> None:
    logger, _ = _logger()

    result = scan(manga_library, LibraryType.COMICVINE, logger=logger)

    assert result.parsed_count == 0
    assert result.skipped_count == len(result.files) == 4


def test_scan_missing_root(tmp_path: Path) -> None:
    with pytest.raises(LibraryRootNotFound) as exc_info:
        scan(tmp_path / "nope", LibraryType.MANGA, logger=Mock())

    assert exc_info.value.reason == "missing"


def test_scan_root_is_file(tmp_path: Path) -> None:
    file_path = tmp_path / "book.cbz"
    file_path.write_bytes(b"")

    with pytest.raises(LibraryRootNotFound) as exc_info:
        scan(file_path, LibraryType.MANGA, logger=Mock())

    assert exc_info.value.reason == "not a directory"


def test_scan_empty_library(tmp_path: Path) -> None:
    logger, _ = _logger()

    result = scan(tmp_path, LibraryType.MANGA, logger=logger)

    assert result.files == []
    assert result.parsed_count == 0
