"""Library scanner.

This module walks a library root, groups every supported file under its
series folder, dispatches the files to the parser in parallel, and
reports how many files were parsed or skipped.
"""

from pathlib import Path
from typing import Any

import structlog

from tomescan.core.dispatcher import dispatch_many
from tomescan.core.errors import LibraryRootNotFound
from tomescan.core.extractors import is_supported
from tomescan.models.schemas import (
    LibraryType,
    ScanCandidate,
    ScannedFile,
    ScanResult,
)


def scan(
    root: Path,
    library_type: LibraryType,
    workers: int | None = None,
    logger: Any = None,
) -> ScanResult:
    """Scan a library root and parse every supported file.

    Args:
        root: Library root directory to scan recursively
        library_type: Type of the library
        workers: Worker thread count for parsing (None for the default)
        logger: Optional structlog logger instance

    Returns:
        ScanResult with one entry per supported file, in walk order

    Raises:
        LibraryRootNotFound: If the root doesn't exist or is not a directory
    """
    log = (logger or structlog.get_logger()).bind(
        root=str(root), library_type=library_type.value
    )

    if not root.exists():
        raise LibraryRootNotFound(str(root), "missing")
    if not root.is_dir():
        raise LibraryRootNotFound(str(root), "not a directory")

    file_paths = [
        path
        for path in _walk_directory(root)
        if not path.name.startswith(".") and is_supported(path.name)
    ]
    candidates = [
        ScanCandidate(
            path=str(path),
            folder=str(_series_folder(root, path)),
            library_root=str(root),
            library_type=library_type,
        )
        for path in file_paths
    ]

    results = dispatch_many(candidates, workers=workers)

    files: list[ScannedFile] = []
    skipped_count = 0
    for path, info in zip(file_paths, results, strict=True):
        if info is None:
            skipped_count += 1
            log.debug("scan.skipped", path=str(path))
        files.append(ScannedFile(path=path, info=info))

    parsed_count = len(files) - skipped_count
    log.info(
        "scan.summary",
        file_count=len(files),
        parsed_count=parsed_count,
        skipped_count=skipped_count,
    )

    return ScanResult(
        root_path=root,
        library_type=library_type,
        files=files,
        parsed_count=parsed_count,
        skipped_count=skipped_count,
    )


def _series_folder(root: Path, path: Path) -> Path:
    """Return the first-level folder below ``root`` that contains ``path``.

    Files directly inside the root are grouped under the root itself.
    """
    relative = path.relative_to(root)
    if len(relative.parts) <= 1:
        return root
    return root / relative.parts[0]


def _walk_directory(path: Path) -> list[Path]:
    """Recursively walk a directory and return all file paths, sorted.

    Args:
        path: Directory path to walk

    Returns:
        List of file paths found recursively
    """
    files: list[Path] = []

    for item in path.rglob("*"):
        if item.is_file():
            files.append(item)

    return sorted(files)
