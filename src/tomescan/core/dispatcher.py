"""Parser dispatch: pick the strategy for a file and run it.

The strategy table is fixed at import. Strategies are mutually exclusive
for any (extension, library type) pair, so the first applicable one is the
only applicable one.
"""

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from tomescan.core.config import resolve_worker_count
from tomescan.core.parser import BASIC_PARSER, IMAGE_PARSER, FileParser
from tomescan.models.schemas import LibraryType, ParsedFileInfo, ScanCandidate

__all__ = ["STRATEGIES", "dispatch", "dispatch_many", "select_parser"]

#: Strategies in the order they are tried
STRATEGIES: tuple[FileParser, ...] = (IMAGE_PARSER, BASIC_PARSER)


def select_parser(file_path: str, library_type: LibraryType) -> FileParser | None:
    """Return the first strategy applicable to the file, or None."""
    for strategy in STRATEGIES:
        if strategy.is_applicable(file_path, library_type):
            return strategy
    return None


def dispatch(
    file_path: str,
    folder: str,
    library_root: str,
    library_type: LibraryType,
) -> ParsedFileInfo | None:
    """Parse a single file with the applicable strategy.

    Args:
        file_path: Path of the file
        folder: Folder the file was grouped under (usually the series folder)
        library_root: Root folder of the library
        library_type: Type of the owning library

    Returns:
        ParsedFileInfo, or None when no strategy applies or the strategy
        skipped the file (cover image, no recoverable series)
    """
    strategy = select_parser(file_path, library_type)
    if strategy is None:
        return None
    return strategy.parse(file_path, folder, library_root, library_type)


def _dispatch_candidate(candidate: ScanCandidate) -> ParsedFileInfo | None:
    return dispatch(
        candidate.path,
        candidate.folder,
        candidate.library_root,
        candidate.library_type,
    )


def dispatch_many(
    candidates: Iterable[ScanCandidate],
    workers: int | None = None,
) -> list[ParsedFileInfo | None]:
    """Parse many files concurrently.

    Results come back in the same order as ``candidates``, one entry per
    candidate, so callers can pair them with their paths.

    Args:
        candidates: Files to parse
        workers: Worker thread count (TOMESCAN_WORKERS or a CPU-based default
            when None)

    Returns:
        List of parse results aligned with the input
    """
    items = list(candidates)
    if not items:
        return []

    worker_count = min(resolve_worker_count(workers), len(items))
    if worker_count <= 1:
        return [_dispatch_candidate(item) for item in items]

    with ThreadPoolExecutor(max_workers=worker_count) as executor:
        return list(executor.map(_dispatch_candidate, items))
