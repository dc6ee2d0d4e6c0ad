"""
Shared TypedDicts for the parsing pipeline.
"""

from typing import TypedDict


class PositionedToken(TypedDict):
    text: str
    x: float         # left edge
    y: float         # baseline, grows upward (PDF user space)


class RawPage(TypedDict):
    page_number: int  # 1-indexed
    lines: list[str]  # "" marks a paragraph gap


class ChapterMark(TypedDict):
    title: str
    page: int        # 1-indexed display page


class ParsedBook(TypedDict):
    paragraphs: list[str]
    content: str
    total_pages: int
    chapters: list[ChapterMark]
