"""Tests for strategy selection and batch dispatch."""

import pytest

from tomescan.core.constants import LOOSE_LEAF_VOLUME
from tomescan.core.dispatcher import STRATEGIES, dispatch, dispatch_many, select_parser
from tomescan.core.errors import InvalidWorkerCount
from tomescan.core.parser import BASIC_PARSER, IMAGE_PARSER
from tomescan.models.schemas import LibraryType, ScanCandidate

ROOT = "/data/Manga"


def _candidate(relative: str, library_type: LibraryType = LibraryType.MANGA) -> ScanCandidate:
    series_folder = relative.split("/", 1)[0]
    return ScanCandidate(
        path=f"{ROOT}/{relative}",
        folder=f"{ROOT}/{series_folder}",
        library_root=ROOT,
        library_type=library_type,
    )


def test_strategy_table_order() -> None:
    assert STRATEGIES == (IMAGE_PARSER, BASIC_PARSER)


@pytest.mark.parametrize(
    ("path", "library_type", "expected"),
    [
        ("a.png", LibraryType.IMAGE, IMAGE_PARSER),
        ("a.png", LibraryType.MANGA, BASIC_PARSER),
        ("a.cbz", LibraryType.COMIC, BASIC_PARSER),
        ("a.cbz", LibraryType.IMAGE, None),
        ("a.cbz", LibraryType.COMICVINE, None),
        ("a.txt", LibraryType.MANGA, None),
    ],
)
def test_select_parser(path: str, library_type: LibraryType, expected: object) -> None:
    assert select_parser(path, library_type) is expected


def test_dispatch_without_strategy_returns_none() -> None:
    assert dispatch(f"{ROOT}/Batman/Batman #1.cbz", ROOT, ROOT, LibraryType.COMICVINE) is None
    assert dispatch(f"{ROOT}/Series/notes.txt", ROOT, ROOT, LibraryType.MANGA) is None


def test_dispatch_is_deterministic() -> None:
    candidate = _candidate("Mujaki no Rakuen/Mujaki no Rakuen Vol12 ch76.cbz")

    first = dispatch(*candidate)
    second = dispatch(*candidate)

    assert first is not None
    assert first == second


def test_dispatch_many_preserves_order() -> None:
    candidates = [
        _candidate("Mujaki no Rakuen/Mujaki no Rakuen Vol12 ch76.cbz"),
        _candidate("Accel World/cover.png"),
        _candidate("Beelzebub/Beelzebub_01_[Noodles].zip"),
        _candidate("Accel World/Accel World - Chapter 3.cbz"),
    ]

    results = dispatch_many(candidates, workers=4)

    assert len(results) == 4
    assert results[1] is None
    assert [info.series if info else None for info in results] == [
        "Mujaki no Rakuen",
        None,
        "Beelzebub",
        "Accel World",
    ]


def test_dispatch_many_matches_serial_dispatch() -> None:
    candidates = [
        _candidate(f"Series/Series v{volume:02d} ch{volume * 10}.cbz")
        for volume in range(1, 13)
    ]

    parallel = dispatch_many(candidates, workers=4)
    serial = dispatch_many(candidates, workers=1)

    assert parallel == serial
    assert [info.volumes for info in parallel if info] == [str(v) for v in range(1, 13)]


@pytest.mark.parametrize(
    ("relative", "volumes", "chapters"),
    [
        ("Series/Vol 2/ch 3.cbz", "2", "3"),
        ("Series/Vol 2/003.cbz", "2", "3"),
        ("Series/v 02 ch 3.cbz", "2", "3"),
        ("Series/Chapter 3.cbz", LOOSE_LEAF_VOLUME, "3"),
        ("Series/c 3.cbz", LOOSE_LEAF_VOLUME, "3"),
    ],
)
def test_dispatch_nested_and_token_only_names(
    relative: str, volumes: str, chapters: str
) -> None:
    """Series comes from the series folder the scanner passes in."""
    info = dispatch(*_candidate(relative))

    assert info is not None
    assert info.series == "Series"
    assert info.volumes == volumes
    assert info.chapters == chapters


def test_dispatch_many_nested_layout() -> None:
    candidates = [
        _candidate("Series/Vol 1/ch 1.cbz"),
        _candidate("Series/Vol 1/ch 2.cbz"),
        _candidate("Series/Vol 2/003.cbz"),
    ]

    results = dispatch_many(candidates, workers=2)

    assert [(i.series, i.volumes, i.chapters) for i in results if i] == [
        ("Series", "1", "1"),
        ("Series", "1", "2"),
        ("Series", "2", "3"),
    ]


def test_dispatch_many_empty() -> None:
    assert dispatch_many([]) == []


def test_dispatch_many_rejects_bad_worker_count() -> None:
    with pytest.raises(InvalidWorkerCount):
        dispatch_many([_candidate("Series/Series v01.cbz")], workers=0)
