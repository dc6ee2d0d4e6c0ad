"""
Paragraph splitting on blank-line breaks.
"""

import logging
import re

from book_parser.config import ParserConfig
from book_parser.pipeline.headings import is_chapter_marker

logger = logging.getLogger(__name__)

MIN_PARAGRAPH_CHARS = 20

_PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")
_LINE_BREAK_RE = re.compile(r"\s*\n\s*")


def split_into_paragraphs(text: str, min_chars: int = MIN_PARAGRAPH_CHARS) -> list[str]:
    """Blank-line separated blocks, single newlines folded to spaces.

    Blocks shorter than min_chars are dropped as stray fragments, except
    chapter markers such as "Chapter 1" which are short by nature.
    """
    paragraphs = []
    for block in _PARAGRAPH_BREAK_RE.split(text):
        para = _LINE_BREAK_RE.sub(" ", block).strip()
        if len(para) >= min_chars or (para and is_chapter_marker(para)):
            paragraphs.append(para)
    return paragraphs


def build_paragraphs(state: dict) -> dict:
    config: ParserConfig = state["config"]
    paragraphs = split_into_paragraphs(state["text"], config.min_paragraph_chars)
    logger.info("Built %d paragraphs", len(paragraphs))
    return {"paragraphs": paragraphs}
