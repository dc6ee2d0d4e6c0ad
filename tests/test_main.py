"""
Tests for the command line entry point.
"""

import json

from book_parser.main import main


def test_writes_book_json(tmp_path):
    source = tmp_path / "My Novel.txt"
    source.write_text("Chapter 1\n\nIt was a dark and stormy night.", encoding="utf-8")
    output = tmp_path / "out" / "book.json"

    assert main([str(source), "-o", str(output)]) == 0

    record = json.loads(output.read_text(encoding="utf-8"))
    assert record["title"] == "My Novel"
    assert record["total_pages"] == 1
    assert record["chapters"] == [{"title": "Chapter 1", "page": 1}]
    assert record["content"].startswith("<<PAGE:1>>\nChapter 1")


def test_missing_file(tmp_path):
    assert main([str(tmp_path / "nope.txt"), "-o", str(tmp_path / "o.json")]) == 1


def test_failure_returns_error_code(tmp_path):
    source = tmp_path / "book.epub"
    source.write_bytes(b"PK")

    assert main([str(source), "-o", str(tmp_path / "o.json")]) == 1
