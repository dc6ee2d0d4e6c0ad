"""
Recurring header/footer/folio detection.

Pass 1 counts the first and last short line of a bounded sample of pages
(the first K and the last K). Pass 2 turns the counts into a frozen set of
line texts that the normalizer drops everywhere. Standalone page-number
lines are artifacts wherever they appear, sampled or not.
"""

import logging
import math
import re
from collections import Counter

from book_parser.config import ParserConfig
from book_parser.state import RawPage

logger = logging.getLogger(__name__)

ArtifactSet = frozenset[str]

# "42", "- 42 -", "Page 42", "— 7 —"
_FOLIO_RE = re.compile(r"^[\s\-–—]*(?:page\s*)?\d{1,4}[\s\-–—]*$", re.IGNORECASE)


def is_folio_line(line: str) -> bool:
    return bool(_FOLIO_RE.match(line))


def sample_pages(raw_pages: list[RawPage], sample_size: int, min_pages: int) -> tuple[RawPage, ...]:
    """First and last K pages, K = min(sample_size, pages // 3)."""
    if len(raw_pages) < min_pages:
        return ()
    k = min(sample_size, len(raw_pages) // 3)
    if k <= 0:
        return ()
    return tuple(raw_pages[:k]) + tuple(raw_pages[-k:])


def _edge_lines(page: RawPage, max_chars: int) -> set[str]:
    candidates = [line for line in page["lines"] if line.strip() and len(line) <= max_chars]
    if not candidates:
        return set()
    return {candidates[0].strip(), candidates[-1].strip()}


def count_edge_lines(sample: tuple[RawPage, ...], max_chars: int) -> Counter:
    """How many sampled pages open or close with each short line."""
    counts: Counter = Counter()
    for page in sample:
        counts.update(_edge_lines(page, max_chars))
    return counts


def find_artifacts(raw_pages: list[RawPage], config: ParserConfig) -> ArtifactSet:
    folios = {
        line.strip()
        for page in raw_pages
        for line in page["lines"]
        if line.strip() and is_folio_line(line)
    }

    sample = sample_pages(raw_pages, config.artifact_sample_pages, config.artifact_min_pages)
    counts = count_edge_lines(sample, config.artifact_max_line_chars)
    threshold = max(2, math.floor(len(sample) * config.artifact_frequency))
    recurring = {line for line, count in counts.items() if count >= threshold}

    logger.debug("Sampled %d pages, recurrence threshold %d", len(sample), threshold)
    return frozenset(folios | recurring)


def detect_artifacts(state: dict) -> dict:
    artifacts = find_artifacts(state["raw_pages"], state["config"])
    if artifacts:
        logger.info("Detected %d artifact lines", len(artifacts))
        for line in sorted(artifacts):
            logger.debug("  artifact: %r", line)
    return {"artifacts": artifacts}
