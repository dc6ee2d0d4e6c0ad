"""
Library entry points: run the pipeline stages over a shared state dict.
"""

import logging
from pathlib import Path
from typing import Sequence

from book_parser.config import ParserConfig, get_config
from book_parser.errors import UnsupportedFormatError
from book_parser.pipeline.artifacts import detect_artifacts
from book_parser.pipeline.assembler import assemble
from book_parser.pipeline.lines import assemble_lines
from book_parser.pipeline.loader import load_text, load_token_pages
from book_parser.pipeline.normalizer import normalize_pages
from book_parser.pipeline.paginator import paginate
from book_parser.pipeline.paragraphs import build_paragraphs
from book_parser.pipeline.serializer import serialize
from book_parser.state import ParsedBook, PositionedToken

logger = logging.getLogger(__name__)

PDF_SUFFIXES = {".pdf"}
TEXT_SUFFIXES = {".txt", ".text", ".md"}

PDF_STAGES = (assemble_lines, detect_artifacts, normalize_pages, build_paragraphs, paginate, serialize, assemble)
TEXT_STAGES = (build_paragraphs, paginate, serialize, assemble)


def _run(state: dict, stages) -> ParsedBook:
    for stage in stages:
        state.update(stage(state))
    return state["book"]


def parse_token_pages(
    token_pages: Sequence[Sequence[PositionedToken]],
    config: ParserConfig | None = None,
) -> ParsedBook:
    """Parse per-source-page token lists, in page order, into a book."""
    state: dict = {"config": config or get_config(), "token_pages": list(token_pages)}
    return _run(state, PDF_STAGES)


def parse_text(text: str, config: ParserConfig | None = None) -> ParsedBook:
    """Parse already-assembled plain text; skips line assembly and cleanup."""
    state: dict = {"config": config or get_config(), "text": text}
    return _run(state, TEXT_STAGES)


def parse_pdf(pdf_path: str | Path, config: ParserConfig | None = None) -> ParsedBook:
    return parse_token_pages(load_token_pages(pdf_path), config)


def parse_file(path: str | Path, config: ParserConfig | None = None) -> ParsedBook:
    """Parse a .pdf or plain-text file, chosen by suffix."""
    suffix = Path(path).suffix.lower()
    if suffix in PDF_SUFFIXES:
        return parse_pdf(path, config)
    if suffix in TEXT_SUFFIXES:
        return parse_text(load_text(path), config)
    raise UnsupportedFormatError(f"Unsupported file type {suffix or '(none)'!r}: {path}")
