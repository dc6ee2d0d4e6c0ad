"""
Marker-delimited content format shared with the reader and editor.

    <<PAGE:1>>
    first page text
    <<LUMINA_PAGE_BREAK>>
    <<PAGE:2>>
    ...

Changing either marker breaks every stored book.
"""

import logging
import re

logger = logging.getLogger(__name__)

PAGE_BREAK_MARKER = "<<LUMINA_PAGE_BREAK>>"
_PAGE_MARKER_RE = re.compile(r"^\s*<<PAGE:\d+>>\n?")


def page_marker(number: int) -> str:
    return f"<<PAGE:{number}>>"


def serialize_pages(pages: list[str]) -> str:
    return "".join(
        f"{page_marker(i)}\n{page}\n{PAGE_BREAK_MARKER}\n"
        for i, page in enumerate(pages, start=1)
    )


def split_pages(content: str) -> list[str]:
    """Page texts back out of stored content.

    Also reads the editor's save layout, which joins pages with the break
    marker and has no trailing break.
    """
    pages = []
    for chunk in content.split(PAGE_BREAK_MARKER):
        if not chunk.strip():
            continue
        pages.append(_PAGE_MARKER_RE.sub("", chunk, count=1).strip())
    return pages


def count_pages(content: str) -> int:
    return len(split_pages(content))


def serialize(state: dict) -> dict:
    pages = state["pages"]
    content = serialize_pages(pages)
    logger.info("Serialized %d pages (%d chars)", len(pages), len(content))
    return {"content": content, "total_pages": len(pages)}
