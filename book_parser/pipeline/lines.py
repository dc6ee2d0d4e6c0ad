"""
Line assembly: positioned tokens of one source page -> ordered text lines.

Tokens are read top to bottom, then left to right. A token starts a new line
when its y drifts more than the tolerance from the current line's reference y.
Unusually large vertical gaps between lines are kept as "" entries so the
normalizer can turn them into paragraph breaks.
"""

import logging
from statistics import median

from book_parser.config import ParserConfig
from book_parser.state import PositionedToken, RawPage

logger = logging.getLogger(__name__)

LINE_TOLERANCE = 4.0
PARAGRAPH_GAP_RATIO = 1.6
_MIN_LINES_FOR_GAPS = 3


def _group_rows(tokens: list[PositionedToken], tolerance: float) -> list[tuple[float, list[PositionedToken]]]:
    ordered = sorted(tokens, key=lambda t: (-t["y"], t["x"]))
    rows: list[tuple[float, list[PositionedToken]]] = []
    for token in ordered:
        if rows and abs(token["y"] - rows[-1][0]) <= tolerance:
            rows[-1][1].append(token)
        else:
            rows.append((token["y"], [token]))
    return rows


def _row_text(row: list[PositionedToken]) -> str:
    parts = [t["text"].strip() for t in sorted(row, key=lambda t: t["x"])]
    return " ".join(p for p in parts if p)


def group_tokens_into_lines(
    tokens: list[PositionedToken],
    tolerance: float = LINE_TOLERANCE,
    gap_ratio: float = PARAGRAPH_GAP_RATIO,
) -> list[str]:
    """Build the page's lines. gap_ratio <= 0 disables paragraph-gap markers."""
    if not tokens:
        return []

    lines: list[tuple[float, str]] = []
    for ref_y, row in _group_rows(tokens, tolerance):
        text = _row_text(row)
        if text:
            lines.append((ref_y, text))

    if gap_ratio <= 0 or len(lines) < _MIN_LINES_FOR_GAPS:
        return [text for _, text in lines]

    pitches = [lines[i - 1][0] - lines[i][0] for i in range(1, len(lines))]
    threshold = median(pitches) * gap_ratio

    result = [lines[0][1]]
    for pitch, (_, text) in zip(pitches, lines[1:]):
        if pitch > threshold:
            result.append("")
        result.append(text)
    return result


def assemble_lines(state: dict) -> dict:
    """Turn each source page's tokens into a RawPage."""
    config: ParserConfig = state["config"]
    raw_pages: list[RawPage] = []

    for page_number, tokens in enumerate(state["token_pages"], start=1):
        lines = group_tokens_into_lines(
            list(tokens),
            tolerance=config.line_tolerance,
            gap_ratio=config.paragraph_gap_ratio,
        )
        if not lines:
            logger.debug("Source page %d is blank", page_number)
        raw_pages.append(RawPage(page_number=page_number, lines=lines))

    logger.info("Assembled lines for %d source pages", len(raw_pages))
    return {"raw_pages": raw_pages}
