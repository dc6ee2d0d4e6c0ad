"""
Input loading: pdfplumber word geometry for PDFs, plain reads for text files.
"""

import logging
from pathlib import Path

import pdfplumber

from book_parser.errors import ExtractionError
from book_parser.state import PositionedToken

logger = logging.getLogger(__name__)


def _page_tokens(page) -> list[PositionedToken]:
    """Words of one pdfplumber page, flipped to baseline-up coordinates."""
    height = float(page.height)
    return [
        PositionedToken(
            text=word["text"],
            x=float(word["x0"]),
            y=height - float(word["bottom"]),
        )
        for word in page.extract_words()
    ]


def load_token_pages(pdf_path: str | Path) -> list[list[PositionedToken]]:
    """Read every page of a PDF in order as a list of positioned tokens."""
    path = Path(pdf_path)
    if not path.exists():
        raise FileNotFoundError(f"PDF not found: {pdf_path}")

    logger.info("Extracting tokens: %s", path)
    pages: list[list[PositionedToken]] = []
    try:
        with pdfplumber.open(str(path)) as pdf:
            for page_num, page in enumerate(pdf.pages, start=1):
                tokens = _page_tokens(page)
                logger.debug("  page %d: %d tokens", page_num, len(tokens))
                pages.append(tokens)
    except Exception as exc:
        raise ExtractionError(f"Failed to extract {path} (page {len(pages) + 1}): {exc}") from exc

    logger.info("Loaded %d source pages", len(pages))
    return pages


def load_text(path: str | Path) -> str:
    """Read a UTF-8 text file with newlines normalized to LF."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Text file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ExtractionError(f"{path} is not valid UTF-8: {exc}") from exc

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    logger.info("Loaded %d characters from %s", len(text), path)
    return text
