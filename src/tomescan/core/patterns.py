"""Compiled regex tables used by the token extractors.

Every pattern is compiled once at import and only read afterwards, so the
tables can be shared freely between worker threads. Tables are ordered:
extractors try patterns top to bottom and the first match wins.

Manga tables serve Manga, Book, LightNovel and Image libraries; comic
tables serve Comic and ComicVine libraries.
"""

import re

_FLAGS = re.IGNORECASE

# Start of a token: not glued to a preceding letter or digit. Underscores
# count as separators, which \b would not allow.
_B = r"(?<![a-z0-9])"
# End of a token
_E = r"(?![a-z0-9])"

_NUMBER = r"\d+(?:\.\d+)?"
_RANGE = rf"{_NUMBER}(?:\s?-\s?{_NUMBER})?"

_MANGA_VOLUME_WORD = r"(?:volumes?|vol|vo|v|tome)"
_COMIC_VOLUME_WORD = r"(?:volumes?|vol|v|tome)"
_MANGA_CHAPTER_WORD = r"(?:chapters?|chap|ch|c)"
_COMIC_CHAPTER_WORD = r"(?:issues?|chapters?|chap|ch)"

_NO_MANGA_VOLUME = rf"(?!.*{_B}{_MANGA_VOLUME_WORD}\.?[\s_]?\d)"
_NO_COMIC_VOLUME = rf"(?!.*{_B}{_COMIC_VOLUME_WORD}\.?[\s_]?\d)"

# Bare number after a series name: "Beelzebub_01_[Noodles]", "Series 012 (2019)"
_BARE_FOLLOW = r"(?=[\s_]*[\[({]|[\s_]+|$)"

# Stem that is only a number, optionally followed by bracketed tags: "003", "003 (2019)"
_NUMBER_ONLY_FOLLOW = r"(?=[\s_]*(?:[\[({].*)?$)"

# ============================================================================
# Volumes
# ============================================================================

MANGA_VOLUME_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Mujaki no Rakuen Vol12 ch76, Accel World - Volume 1, Air Gear v01
    re.compile(rf"{_B}{_MANGA_VOLUME_WORD}\.?[\s_]?(?P<Volume>{_RANGE})", _FLAGS),
    # 第01巻, 1권, 第3卷
    re.compile(r"第?\s?(?P<Volume>\d+(?:-\d+)?)\s?(?:巻|권|卷|册)", _FLAGS),
)

COMIC_VOLUME_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Batman Vol 2 #1, Asterix Tome 3
    re.compile(rf"{_B}{_COMIC_VOLUME_WORD}\.?[\s_]?(?P<Volume>{_RANGE})", _FLAGS),
)

# ============================================================================
# Chapters
# ============================================================================

MANGA_CHAPTER_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Accel World - Chapter 3, Vol12 ch76, c012a
    re.compile(
        rf"{_B}{_MANGA_CHAPTER_WORD}\.?[\s_]?(?P<Chapter>{_RANGE})"
        rf"(?:(?P<Part>[a-c]){_E})?",
        _FLAGS,
    ),
    # Hanako #12
    re.compile(rf"#(?P<Chapter>{_RANGE})", _FLAGS),
    # 第12話, 12화
    re.compile(r"第?\s?(?P<Chapter>\d+(?:-\d+)?)\s?(?:話|화|话)", _FLAGS),
    # Beelzebub_01_[Noodles]
    re.compile(
        rf"^{_NO_MANGA_VOLUME}.+?[\s_-]+(?P<Chapter>\d{{1,4}}(?:\.\d+)?(?:-\d{{1,4}}(?:\.\d+)?)?)"
        rf"{_BARE_FOLLOW}",
        _FLAGS,
    ),
    # Series/Vol 2/003
    re.compile(rf"^(?P<Chapter>\d{{1,4}}(?:\.\d+)?){_NUMBER_ONLY_FOLLOW}", _FLAGS),
)

COMIC_CHAPTER_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Batman #1, Spawn #001-004
    re.compile(rf"#(?P<Chapter>{_RANGE})", _FLAGS),
    # Saga Issue 12, Invincible Chapter 3
    re.compile(rf"{_B}{_COMIC_CHAPTER_WORD}\.?[\s_]?(?P<Chapter>{_RANGE})", _FLAGS),
    # Spider-Man 2099 001 (2020), Watchmen 01 of 12
    re.compile(
        rf"^{_NO_COMIC_VOLUME}.+?[\s_-]+(?P<Chapter>\d{{1,4}}(?:\.\d+)?)"
        r"(?=[\s_]*\(|[\s_]*$|[\s_]+of[\s_]+\d)",
        _FLAGS,
    ),
    # Batman/001
    re.compile(rf"^(?P<Chapter>\d{{1,4}}(?:\.\d+)?){_NUMBER_ONLY_FOLLOW}", _FLAGS),
)

# ============================================================================
# Series
# ============================================================================

MANGA_SERIES_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"^(?P<Series>.+?)[\s_-]+{_B}{_MANGA_VOLUME_WORD}\.?[\s_]?\d", _FLAGS),
    re.compile(rf"^(?P<Series>.+?)[\s_-]+{_B}{_MANGA_CHAPTER_WORD}\.?[\s_]?\d", _FLAGS),
    re.compile(r"^(?P<Series>.+?)[\s_-]*#\d", _FLAGS),
    re.compile(rf"^(?P<Series>.+?)[\s_-]+{_B}SP\d+", _FLAGS),
)

COMIC_SERIES_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^(?P<Series>.+?)[\s_-]*#\d", _FLAGS),
    re.compile(rf"^(?P<Series>.+?)[\s_-]+{_B}{_COMIC_VOLUME_WORD}\.?[\s_]?\d", _FLAGS),
    re.compile(rf"^(?P<Series>.+?)[\s_-]+{_B}{_COMIC_CHAPTER_WORD}\.?[\s_]?\d", _FLAGS),
    re.compile(rf"^(?P<Series>.+?)[\s_-]+{_B}SP\d+", _FLAGS),
)

# Used only when none of the token-anchored patterns matched
MANGA_BARE_SERIES_PATTERN = re.compile(
    rf"^{_NO_MANGA_VOLUME}(?P<Series>.+?)[\s_-]+\d{{1,4}}(?:\.\d+)?(?:-\d{{1,4}}(?:\.\d+)?)?"
    rf"{_BARE_FOLLOW}",
    _FLAGS,
)

COMIC_BARE_SERIES_PATTERN = re.compile(
    rf"^{_NO_COMIC_VOLUME}(?P<Series>.+?)[\s_-]+\d{{1,4}}(?:\.\d+)?"
    r"(?=[\s_]*\(|[\s_]*$|[\s_]+of[\s_]+\d)",
    _FLAGS,
)

# ============================================================================
# Editions
# ============================================================================

EDITION_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Tenjo Tenge {Full Contact Edition} v01
    re.compile(r"(?P<Edition>[\[({][^\])}]*?\bEdition\s*[\])}])", _FLAGS),
    # Chainsaw Man Deluxe Edition v01
    re.compile(
        rf"{_B}(?P<Edition>(?:Deluxe|Full[\s_-]Colou?r|Colou?r|Collector'?s|Special"
        rf"|Complete|Perfect|Anniversary|Limited|Uncensored|Digital[\s_]Colou?red)"
        rf"[\s_]Edition){_E}",
        _FLAGS,
    ),
    # Air Gear Omnibus v01
    re.compile(
        rf"{_B}(?P<Edition>(?:Omnibus|Deluxe|Kanzenban|Aizoban|Shinsouban|Wideban|Bunkoban)"
        rf"(?:[\s_]Edition)?){_E}",
        _FLAGS,
    ),
)

# ============================================================================
# Specials
# ============================================================================

SPECIAL_MARKER_PATTERN = re.compile(rf"{_B}SP(?P<Index>\d+){_E}", _FLAGS)

SPECIAL_MARKER_PARENTHETICAL_PATTERN = re.compile(
    r"[\[(]\s*(?:Specials?|SP|Omake|Extras?|Bonus)\s*\d*\s*[\])]", _FLAGS
)

MANGA_SPECIAL_PATTERN = re.compile(
    rf"{_B}(?:Omake|Extras?|Specials?|Side[\s_-]?Stor(?:y|ies)|One[\s_-]?Shot|Oneshot"
    rf"|Bonus|Art[\s_-]?Book|Art[\s_]Collection|Anthology|Prologue|Epilogue|Interlude"
    rf"|Short[\s_]Stor(?:y|ies)|Booklet|Outtakes){_E}",
    _FLAGS,
)

COMIC_SPECIAL_PATTERN = re.compile(
    rf"{_B}(?:Annuals?|Specials?|One[\s_-]?Shot|Oneshot|TPB|Trade[\s_]Paperback"
    rf"|Sketchbooks?|Artbook|Art[\s_]Book|FCBD|Free[\s_]Comic[\s_]Book[\s_]Day"
    rf"|Director'?s[\s_]Cut|Preview|Extras?){_E}",
    _FLAGS,
)

# ============================================================================
# Cleaning
# ============================================================================

COVER_IMAGE_PATTERN = re.compile(
    rf"{_B}(?<!back[\s_-])!?(?:cover|folder){_E}", _FLAGS
)

RELEASE_GROUP_PATTERN = re.compile(r"\[[^\]]*\]|\{[^}]*\}")

EMPTY_BRACKETS_PATTERN = re.compile(r"\(\s*\)|\[\s*\]|\{\s*\}")

WHITESPACE_PATTERN = re.compile(r"\s+")

# A volume/chapter word with its optional number: "v 02", "ch", "Chapter 3"
NUMBER_TOKEN_PATTERN = re.compile(
    rf"{_B}(?:{_MANGA_VOLUME_WORD}|{_MANGA_CHAPTER_WORD}|{_COMIC_CHAPTER_WORD})"
    rf"\.?[\s_]?(?:{_RANGE})?{_E}",
    _FLAGS,
)

# What is left of a name made only of numbers, separators and number tokens
NUMBER_TOKEN_RESIDUE_CHARS = " \t-_.#0123456789"

#: Characters trimmed from both ends of a cleaned title
TITLE_TRIM_CHARS = " -_.,:;~"
