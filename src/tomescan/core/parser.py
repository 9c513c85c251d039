"""Parser strategies turning a file path into ParsedFileInfo.

Two strategies exist:
- BasicParser: archives and documents (cbz, cbr, zip, rar, 7z, epub, pdf)
  in Manga, Comic, Book and LightNovel libraries. Loose images found in
  those libraries are screened for covers and handed to ImageParser.
- ImageParser: loose images in Image libraries.

Both share the folder fallback logic in FileParser, which fills in series,
volume and chapter from the folders between a root and the file when the
filename alone is not enough.

The strategy set is closed; see ``tomescan.core.dispatcher`` for the
table the dispatcher walks.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from tomescan.core import extractors
from tomescan.core.constants import (
    DEFAULT_CHAPTER,
    LOOSE_LEAF_VOLUME,
    PATH_SEPARATOR,
    SPECIAL_VOLUME,
    SPECIAL_VOLUME_NUMBER,
    SPECIALS_FOLDER,
)
from tomescan.core.paths import (
    directory_name,
    file_name,
    file_stem,
    folders_till_root,
    normalize_path,
)
from tomescan.core.ranges import min_from_range
from tomescan.models.schemas import LibraryType, MangaFormat, ParsedFileInfo


@dataclass
class ParseDraft:
    """Mutable working copy of a ParsedFileInfo while a strategy runs."""

    series: str = ""
    volumes: str = LOOSE_LEAF_VOLUME
    chapters: str = DEFAULT_CHAPTER
    edition: str = ""
    title: str = ""
    is_special: bool = False
    special_index: int = 0
    format: MangaFormat = MangaFormat.UNKNOWN
    filename: str = ""
    full_file_path: str = ""

    @property
    def has_no_numbers(self) -> bool:
        return self.volumes == LOOSE_LEAF_VOLUME and self.chapters == DEFAULT_CHAPTER

    def build(self) -> ParsedFileInfo | None:
        """Freeze the draft, or return None when no series was recovered."""
        if not self.series.strip():
            return None
        # The specials volume and the special flag always travel together
        if min_from_range(self.volumes) == SPECIAL_VOLUME_NUMBER:
            self.is_special = True
        if self.is_special:
            self.volumes = SPECIAL_VOLUME
        return ParsedFileInfo(
            series=self.series,
            volumes=self.volumes,
            chapters=self.chapters,
            edition=self.edition,
            title=self.title,
            is_special=self.is_special,
            special_index=self.special_index,
            format=self.format,
            filename=self.filename,
            full_file_path=self.full_file_path,
        )


def _last_folder(path: str) -> str:
    return file_name(normalize_path(path).rstrip(PATH_SEPARATOR))


def _is_specials_folder(path: str) -> bool:
    return _last_folder(path).lower() == SPECIALS_FOLDER.lower()


class FileParser(ABC):
    """Base class for parser strategies.

    Subclasses implement ``is_applicable`` and ``parse``. Instances hold no
    state, so one instance can serve every worker thread.
    """

    @abstractmethod
    def is_applicable(self, file_path: str, library_type: LibraryType) -> bool:
        """Return True if this strategy handles the file in this library type."""

    @abstractmethod
    def parse(
        self,
        file_path: str,
        root_path: str,
        library_root: str,
        library_type: LibraryType,
    ) -> ParsedFileInfo | None:
        """Parse a file, or return None when it should be skipped."""

    def fill_from_folders(
        self,
        file_path: str,
        root_path: str,
        library_type: LibraryType,
        draft: ParseDraft,
    ) -> None:
        """Fill missing series/volume/chapter from folders above the file.

        Folders between ``root_path`` and the file are visited deepest
        first; folders that are themselves special-named (``Specials``,
        ``Omake``) are skipped. Volume and chapter only fill gaps. The
        topmost folder that is more than volume/chapter tokens supplies the
        series name. When no such folder exists (the file sits directly in
        ``root_path`` or only under ``Vol 2``-style folders), the root
        folder name is used instead.
        """
        comic = library_type in (LibraryType.COMIC, LibraryType.COMICVINE)
        folders = [
            folder
            for folder in folders_till_root(root_path, file_path)
            if not extractors.is_special(folder, library_type)
        ]

        series_folder = ""
        for folder in folders:
            parsed_volume = extractors.parse_volume(folder, library_type)
            parsed_chapter = extractors.parse_chapter(folder, library_type)

            if draft.volumes == LOOSE_LEAF_VOLUME and parsed_volume != LOOSE_LEAF_VOLUME:
                draft.volumes = parsed_volume
            if draft.chapters == DEFAULT_CHAPTER and parsed_chapter != DEFAULT_CHAPTER:
                draft.chapters = parsed_chapter

            # Users group files in series folders, so the topmost named folder
            # is the series; "Vol 2" or "003" folders never are
            if not extractors.is_number_token_only(folder):
                series_folder = folder

        if not series_folder:
            self._fill_series_from_root(root_path, library_type, draft)
            return
        if series_folder == draft.series:
            return

        series = extractors.parse_series(series_folder, library_type)
        if not series:
            draft.series = extractors.clean_title(series_folder, is_comic=comic)
        elif not draft.series or draft.series not in series_folder:
            draft.series = series

    def _fill_series_from_root(
        self,
        root_path: str,
        library_type: LibraryType,
        draft: ParseDraft,
    ) -> None:
        comic = library_type in (LibraryType.COMIC, LibraryType.COMICVINE)
        root_folder = _last_folder(root_path)
        series = extractors.parse_series(root_folder, library_type)
        if not series:
            cleaned = extractors.clean_title(root_folder, is_comic=comic)
            if cleaned:
                draft.series = cleaned
            return
        if not draft.series or draft.series not in root_folder:
            draft.series = series


class ImageParser(FileParser):
    """Strategy for loose image files.

    Series comes from the folder the scanner grouped the image under;
    volume and chapter come from folders between the library root and the
    image. An image with no volume or chapter anywhere is kept as a
    special. Cover images are dropped unless the library is an Image
    library.
    """

    def is_applicable(self, file_path: str, library_type: LibraryType) -> bool:
        return library_type == LibraryType.IMAGE and extractors.is_image(file_path)

    def parse(
        self,
        file_path: str,
        root_path: str,
        library_root: str,
        library_type: LibraryType,
    ) -> ParsedFileInfo | None:
        filename = file_name(file_path)
        if library_type != LibraryType.IMAGE and extractors.is_cover_image(filename):
            return None

        directory = _last_folder(root_path)
        draft = ParseDraft(
            series=directory,
            title=file_stem(file_path),
            format=MangaFormat.IMAGE,
            filename=filename,
            full_file_path=normalize_path(file_path),
        )
        self.fill_from_folders(file_path, library_root, LibraryType.IMAGE, draft)

        if draft.has_no_numbers:
            draft.is_special = True
        else:
            parsed_volume = extractors.parse_volume(filename, LibraryType.IMAGE)
            parsed_chapter = extractors.parse_chapter(filename, LibraryType.IMAGE)
            if draft.volumes == LOOSE_LEAF_VOLUME and parsed_volume != LOOSE_LEAF_VOLUME:
                draft.volumes = parsed_volume
            if draft.chapters == DEFAULT_CHAPTER and parsed_chapter != DEFAULT_CHAPTER:
                draft.chapters = parsed_chapter

        if not draft.series or draft.series == directory:
            draft.series = extractors.clean_title(directory, replace_specials=False)

        return draft.build()


class BasicParser(FileParser):
    """Strategy for archives and documents in non-Image libraries.

    Runs the extractors over the filename: series, volume, chapter,
    edition, then special detection. An ``SP##`` marker always wins: the
    file becomes a special, any chapter numbers in its descriptive text are
    discarded, and the series comes from the folder (the one above
    ``Specials/`` when the file lives there).
    """

    def __init__(self, image_parser: ImageParser) -> None:
        self._image_parser = image_parser

    def is_applicable(self, file_path: str, library_type: LibraryType) -> bool:
        if library_type in (LibraryType.IMAGE, LibraryType.COMICVINE):
            return False
        return extractors.is_supported(file_path)

    def parse(
        self,
        file_path: str,
        root_path: str,
        library_root: str,
        library_type: LibraryType,
    ) -> ParsedFileInfo | None:
        # Cover screening happens in the image parser
        if extractors.is_image(file_path):
            return self._image_parser.parse(
                file_path, root_path, library_root, library_type
            )

        comic = library_type in (LibraryType.COMIC, LibraryType.COMICVINE)
        filename = file_name(file_path)
        stem = file_stem(file_path)
        draft = ParseDraft(
            series=extractors.parse_series(stem, library_type),
            volumes=extractors.parse_volume(stem, library_type),
            chapters=extractors.parse_chapter(stem, library_type),
            title=stem,
            format=extractors.parse_format(file_path),
            filename=filename,
            full_file_path=normalize_path(file_path),
        )

        if not draft.series:
            self.fill_from_folders(file_path, root_path, library_type, draft)

        if draft.volumes == LOOSE_LEAF_VOLUME:
            self._fill_volume_from_folders(file_path, root_path, library_type, draft)

        edition = extractors.parse_edition(stem)
        if edition:
            draft.series = extractors.clean_title(
                extractors.remove_edition(draft.series), is_comic=comic
            )
            draft.edition = edition

        # Keywords like Omake only mark a special when nothing else was parsed,
        # so "v20 c171-180+Omake" stays a regular chapter
        if draft.has_no_numbers and extractors.is_special(stem, library_type):
            draft.is_special = True
            self.fill_from_folders(file_path, root_path, library_type, draft)

        if extractors.has_special_marker(stem):
            self._apply_special_marker(file_path, root_path, library_type, stem, draft)

        if not draft.series:
            draft.series = extractors.clean_title(stem, is_comic=comic)

        if extractors.is_pdf(file_path) and draft.series.lower().endswith(".pdf"):
            draft.series = draft.series[: -len(".pdf")]

        if draft.has_no_numbers:
            draft.is_special = True
            if not extractors.has_special_marker(stem):
                draft.title = extractors.clean_one_shot_title(stem)

        return draft.build()

    def _fill_volume_from_folders(
        self,
        file_path: str,
        root_path: str,
        library_type: LibraryType,
        draft: ParseDraft,
    ) -> None:
        for folder in folders_till_root(root_path, file_path):
            if extractors.is_special(folder, library_type):
                continue
            parsed_volume = extractors.parse_volume(folder, library_type)
            if parsed_volume != LOOSE_LEAF_VOLUME:
                draft.volumes = parsed_volume
                return

    def _apply_special_marker(
        self,
        file_path: str,
        root_path: str,
        library_type: LibraryType,
        stem: str,
        draft: ParseDraft,
    ) -> None:
        draft.is_special = True
        draft.special_index = extractors.parse_special_index(stem)
        draft.chapters = DEFAULT_CHAPTER
        draft.volumes = SPECIAL_VOLUME

        root = normalize_path(root_path).rstrip(PATH_SEPARATOR)
        if _is_specials_folder(root):
            root = directory_name(root)

        file_directory = directory_name(file_path)
        if file_directory and _is_specials_folder(file_directory):
            parent = _last_folder(directory_name(file_directory))
            draft.series = extractors.clean_title(parent)
        else:
            self.fill_from_folders(file_path, root, library_type, draft)

        draft.title = extractors.clean_special_title(stem)


IMAGE_PARSER = ImageParser()
BASIC_PARSER = BasicParser(IMAGE_PARSER)
