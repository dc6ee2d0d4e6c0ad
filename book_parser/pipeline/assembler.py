"""
pipeline/assembler.py — final assembly of the ParsedBook.

Pure Python, deterministic: the same state always yields the same book.
"""

import logging

from book_parser.state import ChapterMark, ParsedBook

logger = logging.getLogger(__name__)


def assemble(state: dict) -> dict:
    """Collect the pipeline outputs into a ParsedBook."""
    chapters = [
        ChapterMark(title=c["title"], page=c["page"])
        for c in state.get("chapters", [])
    ]
    book = ParsedBook(
        paragraphs=list(state.get("paragraphs", [])),
        content=state.get("content", ""),
        total_pages=state.get("total_pages", 0),
        chapters=chapters,
    )

    if book["total_pages"] == 0:
        logger.warning("No content survived parsing; book is empty")
    logger.info(
        "Assembly complete: %d paragraphs, %d pages, %d chapters",
        len(book["paragraphs"]), book["total_pages"], len(chapters),
    )
    return {"book": book}
