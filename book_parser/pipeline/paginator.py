"""
Display pagination: bin-pack whole paragraphs into bounded pages.

The paginator is a fold over the paragraph list. Each step takes the
current PaginationState and returns a new one; a page is flushed when a
heading arrives or when the next paragraph would overflow a page that
already holds the minimum. Oversized paragraphs get a page of their own
and are never split.
"""

import logging
from typing import NamedTuple

from book_parser.config import ParserConfig
from book_parser.pipeline.headings import classify_heading
from book_parser.state import ChapterMark

logger = logging.getLogger(__name__)

MIN_PAGE_CHARS = 800
MAX_PAGE_CHARS = 2800
PARAGRAPH_SEPARATOR = "\n\n"


class PageBuffer(NamedTuple):
    paragraphs: tuple[str, ...] = ()
    chars: int = 0


class PaginationState(NamedTuple):
    pages: tuple[str, ...] = ()
    chapters: tuple[ChapterMark, ...] = ()
    buffer: PageBuffer = PageBuffer()


def flush(state: PaginationState) -> PaginationState:
    if not state.buffer.paragraphs:
        return state
    page = PARAGRAPH_SEPARATOR.join(state.buffer.paragraphs)
    return state._replace(pages=state.pages + (page,), buffer=PageBuffer())


def step(
    state: PaginationState,
    paragraph: str,
    min_chars: int = MIN_PAGE_CHARS,
    max_chars: int = MAX_PAGE_CHARS,
) -> PaginationState:
    rule = classify_heading(paragraph)
    if rule is not None:
        state = flush(state)
        mark = ChapterMark(title=paragraph, page=len(state.pages) + 1)
        logger.debug("Heading (%s) on page %d: %r", rule, mark["page"], paragraph)
        state = state._replace(chapters=state.chapters + (mark,))

    if len(paragraph) > max_chars:
        state = flush(state)
        return state._replace(pages=state.pages + (paragraph,))

    buffer = state.buffer
    if buffer.chars + len(paragraph) > max_chars and buffer.chars >= min_chars:
        state = flush(state)
        buffer = state.buffer

    return state._replace(buffer=PageBuffer(
        paragraphs=buffer.paragraphs + (paragraph,),
        chars=buffer.chars + len(paragraph) + len(PARAGRAPH_SEPARATOR),
    ))


def build_display_pages(
    paragraphs: list[str],
    min_chars: int = MIN_PAGE_CHARS,
    max_chars: int = MAX_PAGE_CHARS,
) -> tuple[list[str], list[ChapterMark]]:
    state = PaginationState()
    for paragraph in paragraphs:
        state = step(state, paragraph, min_chars, max_chars)
    state = flush(state)
    return list(state.pages), list(state.chapters)


def paginate(state: dict) -> dict:
    config: ParserConfig = state["config"]
    pages, chapters = build_display_pages(
        state["paragraphs"], config.min_page_chars, config.max_page_chars,
    )
    average = sum(len(p) for p in pages) // len(pages) if pages else 0
    logger.info(
        "Paginated into %d display pages, %d chapters (avg %d chars, target %d)",
        len(pages), len(chapters), average, config.target_page_chars,
    )
    return {"pages": pages, "chapters": chapters}
