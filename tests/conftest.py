"""Pytest configuration and fixtures for tomescan tests."""

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

#: Library root used by the path-only parser fixtures (nothing touches disk)
BOOKS_ROOT = "/data/Books/"


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep TOMESCAN_* settings from the developer shell out of tests."""
    monkeypatch.delenv("TOMESCAN_WORKERS", raising=False)
    monkeypatch.delenv("TOMESCAN_LIBRARY_TYPE", raising=False)


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Undo any structlog configuration applied by a CLI command."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def books_root() -> str:
    return BOOKS_ROOT


@pytest.fixture
def manga_library(tmp_path: Path) -> Path:
    """Create a small manga library on disk.

    Structure:
        library/
            .hidden.cbz
            notes.txt
            Accel World/
                Accel World - Chapter 3.cbz
                Accel World - Volume 1.cbz
                cover.png
            Beelzebub/
                Beelzebub_01_[Noodles].zip
    """
    root = tmp_path / "library"
    accel = root / "Accel World"
    beelzebub = root / "Beelzebub"
    accel.mkdir(parents=True)
    beelzebub.mkdir(parents=True)

    (accel / "Accel World - Chapter 3.cbz").write_bytes(b"")
    (accel / "Accel World - Volume 1.cbz").write_bytes(b"")
    (accel / "cover.png").write_bytes(b"")
    (beelzebub / "Beelzebub_01_[Noodles].zip").write_bytes(b"")
    (root / ".hidden.cbz").write_bytes(b"")
    (root / "notes.txt").write_text("not a book")

    return root
