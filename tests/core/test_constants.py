"""Tests for shared constants."""

from tomescan.core import constants


def test_sentinel_text_matches_number() -> None:
    assert float(constants.DEFAULT_CHAPTER) == constants.DEFAULT_CHAPTER_NUMBER
    assert float(constants.LOOSE_LEAF_VOLUME) == constants.LOOSE_LEAF_VOLUME_NUMBER
    assert float(constants.SPECIAL_VOLUME) == constants.SPECIAL_VOLUME_NUMBER


def test_special_volume_sorts_after_everything() -> None:
    assert constants.SPECIAL_VOLUME_NUMBER > 0
    assert constants.LOOSE_LEAF_VOLUME_NUMBER < 0


def test_extension_groups() -> None:
    assert ".cbz" in constants.ARCHIVE_EXTENSIONS
    assert ".epub" in constants.BOOK_EXTENSIONS
    assert ".png" in constants.SUPPORTED_EXTENSIONS
    assert not set(constants.IMAGE_EXTENSIONS) & set(constants.BOOK_EXTENSIONS)
    assert all(ext.startswith(".") and ext == ext.lower() for ext in constants.SUPPORTED_EXTENSIONS)
