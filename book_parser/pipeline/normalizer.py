"""
Per-page text cleanup.

Drops artifact lines, strips extraction junk, repairs words hyphenated
across a line wrap and re-joins lines wrapped mid-sentence. Blank lines
survive as single paragraph breaks.
"""

import logging
import re

from book_parser.pipeline.artifacts import ArtifactSet

logger = logging.getLogger(__name__)

_JUNK_CHARS_RE = re.compile(r"[\uFFFD\u00AD]")   # replacement char, soft hyphen
_MULTI_SPACE_RE = re.compile(r"\s{2,}")
_BROKEN_WORD_RE = re.compile(r"(?:-\n)+(?=[a-zA-Z\u05d0-\u05ea])")
_WRAPPED_LINE_RE = re.compile(r"(?<=[^.!?:\n])\n(?=[a-z\u0590-\u05ff])")

_WORD_START_RE = re.compile(r"[a-zA-Z\u05d0-\u05ea]")
_CONTINUATION_RE = re.compile(r"[a-z\u0590-\u05ff]")
_SENTENCE_END = ".!?:"

PARAGRAPH_BREAK = "\n\n"


def clean_line(line: str) -> str:
    return _MULTI_SPACE_RE.sub(" ", _JUNK_CHARS_RE.sub("", line)).strip()


def normalize_page(lines: list[str], artifacts: ArtifactSet = frozenset()) -> str:
    """Clean one source page; returns "" when nothing survives."""
    kept: list[str] = []
    for line in lines:
        trimmed = line.strip()
        if trimmed in artifacts:
            continue
        if not trimmed:
            if kept and kept[-1]:
                kept.append("")
            continue
        clean = clean_line(trimmed)
        if clean:
            kept.append(clean)

    while kept and not kept[-1]:
        kept.pop()
    if not kept:
        return ""

    text = _BROKEN_WORD_RE.sub("", "\n".join(kept))
    return _WRAPPED_LINE_RE.sub(" ", text)


def stitch_pages(page_texts: list[str]) -> str:
    """Join normalized pages, carrying sentences and hyphenated words across page breaks."""
    parts: list[str] = []
    for text in page_texts:
        if not text:
            continue
        if parts:
            tail = parts[-1]
            if len(tail) > 1 and tail.endswith("-") and _WORD_START_RE.match(text):
                parts[-1] = tail[:-1]
            elif tail[-1] not in _SENTENCE_END and _CONTINUATION_RE.match(text):
                parts.append(" ")
            else:
                parts.append(PARAGRAPH_BREAK)
        parts.append(text)
    return "".join(parts)


def normalize_pages(state: dict) -> dict:
    artifacts: ArtifactSet = state.get("artifacts", frozenset())
    page_texts = []
    for page in state["raw_pages"]:
        text = normalize_page(page["lines"], artifacts)
        if not text:
            logger.debug("Source page %d has no content after cleanup", page["page_number"])
        page_texts.append(text)

    kept = sum(1 for t in page_texts if t)
    logger.info("Normalized %d/%d source pages with content", kept, len(page_texts))
    return {"page_texts": page_texts, "text": stitch_pages(page_texts)}
