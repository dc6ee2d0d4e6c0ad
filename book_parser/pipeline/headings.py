"""
Heading classification as an ordered rule table.

Each rule is a named predicate over a paragraph's text. A paragraph is a
heading when any rule matches; the first match wins for reporting. Rules
are heuristics for Latin and Hebrew script books and carry no confidence.
"""

import re
from typing import Callable, NamedTuple

MAX_HEADING_CHARS = 80
MAX_HEBREW_HEADING_CHARS = 50

# "Chapter 3", "PART IV:", "פרק א", "חלק שני"
_CHAPTER_MARKER_RE = re.compile(
    r"^(?:chapter|part|פרק|חלק)\s+[\divxlcdm\u05d0-\u05ea]+[\s:.\-–]?",
    re.IGNORECASE,
)
_LATIN_TITLE_RE = re.compile(r"^[A-Z][a-zA-Z\s\-:]+$")
_HEBREW_LETTER_RE = re.compile(r"[\u05d0-\u05ea]")
_SENTENCE_END_RE = re.compile(r"[.!?,;]$")


class HeadingRule(NamedTuple):
    name: str
    rationale: str
    matches: Callable[[str], bool]


def _is_unterminated_short_line(text: str) -> bool:
    return len(text) <= MAX_HEADING_CHARS and not _SENTENCE_END_RE.search(text)


def is_chapter_marker(text: str) -> bool:
    return bool(_CHAPTER_MARKER_RE.match(text))


def _is_latin_title_line(text: str) -> bool:
    return _is_unterminated_short_line(text) and bool(_LATIN_TITLE_RE.match(text))


def _is_hebrew_short_line(text: str) -> bool:
    return (
        _is_unterminated_short_line(text)
        and len(text) < MAX_HEBREW_HEADING_CHARS
        and bool(_HEBREW_LETTER_RE.search(text))
    )


HEADING_RULES: tuple[HeadingRule, ...] = (
    HeadingRule(
        "chapter_marker",
        "chapter/part keyword followed by an Arabic, Roman or Hebrew-letter numeral",
        is_chapter_marker,
    ),
    HeadingRule(
        "latin_title_line",
        "short capitalized Latin line of letters only, no closing punctuation",
        _is_latin_title_line,
    ),
    HeadingRule(
        "hebrew_short_line",
        "Hebrew has no case, so a short unpunctuated Hebrew line stands in for a title",
        _is_hebrew_short_line,
    ),
)


def classify_heading(text: str, rules: tuple[HeadingRule, ...] = HEADING_RULES) -> str | None:
    """Name of the first rule that marks text as a heading, or None."""
    for rule in rules:
        if rule.matches(text):
            return rule.name
    return None


def is_heading(text: str) -> bool:
    return classify_heading(text) is not None
