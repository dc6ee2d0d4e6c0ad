"""CLI entry point for the book parser."""

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

from book_parser.config import get_config
from book_parser.parser import parse_file

logger = logging.getLogger(__name__)


def run_pipeline(path: str) -> dict:
    """Parse one book file, return the JSON-ready record."""
    book = parse_file(path, get_config())
    return {"title": Path(path).stem, **book}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Reconstruct paragraphs, chapters and display pages from a PDF or text file.")
    parser.add_argument("path", help="Path to a .pdf or .txt book")
    parser.add_argument("--output", "-o", default="output/book.json")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    path = Path(args.path)
    if not path.exists():
        logger.error("File not found: %s", path)
        return 1

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    start = time.time()
    logger.info("Parsing %s", path)

    try:
        record = run_pipeline(str(path))
    except Exception:
        logger.exception("Pipeline failed")
        return 1

    with open(output_path, "w", encoding="utf-8") as fh:
        json.dump(record, fh, indent=2, ensure_ascii=False)

    logger.info("Done: %d pages, %d chapters -> %s (%.1fs)",
                record["total_pages"], len(record["chapters"]), output_path, time.time() - start)
    return 0


if __name__ == "__main__":
    sys.exit(main())
