"""
End-to-end tests for the parse entry points.
"""

import pytest

from book_parser.config import ParserConfig
from book_parser.errors import UnsupportedFormatError
from book_parser.parser import parse_file, parse_text, parse_token_pages
from book_parser.pipeline.artifacts import detect_artifacts
from book_parser.pipeline.lines import assemble_lines
from book_parser.pipeline.paginator import MAX_PAGE_CHARS, MIN_PAGE_CHARS, PARAGRAPH_SEPARATOR
from book_parser.pipeline.serializer import split_pages


@pytest.fixture
def config():
    return ParserConfig()


def _footer_pages(make_page):
    return [
        make_page(["The first page carries distinct body content here.", "- 12 -"]),
        make_page(["Another page with entirely different content.", "- 13 -"]),
    ]


class TestTokenPages:

    def test_recurring_footers_removed(self, make_page, config):
        token_pages = _footer_pages(make_page)
        state = {"config": config, "token_pages": token_pages}
        state.update(assemble_lines(state))

        assert {"- 12 -", "- 13 -"} <= detect_artifacts(state)["artifacts"]

        book = parse_token_pages(token_pages, config)

        assert "- 12 -" not in book["content"]
        assert "- 13 -" not in book["content"]
        assert book["paragraphs"] == [
            "The first page carries distinct body content here.",
            "Another page with entirely different content.",
        ]

    def test_hyphenated_line_break_repaired(self, make_page, config):
        page = make_page(["An example of a broken word-", "continued on the next line."])

        book = parse_token_pages([page], config)

        assert book["paragraphs"] == ["An example of a broken wordcontinued on the next line."]

    def test_running_header_and_folios_stripped(self, make_page, config):
        token_pages = [
            make_page([
                "A Tale Of Two Cities",
                f"Body of page {n} starts with a sentence that",
                "continues onto this line and then",
                "ends right here on the page.",
                f"Page {n}",
            ])
            for n in range(1, 13)
        ]

        book = parse_token_pages(token_pages, config)

        assert len(book["paragraphs"]) == 12
        assert book["paragraphs"][0] == (
            "Body of page 1 starts with a sentence that continues onto this line "
            "and then ends right here on the page."
        )
        assert not any("Tale" in p or "Page " in p for p in book["paragraphs"])
        assert book["chapters"] == []

    def test_vertical_gaps_split_paragraphs(self, make_page, config):
        page = make_page(
            [
                "The opening paragraph of the page",
                "wraps across two lines.",
                "A second paragraph follows the gap",
                "and also wraps once.",
            ],
            gaps_before=(2,),
        )

        book = parse_token_pages([page], config)

        assert book["paragraphs"] == [
            "The opening paragraph of the page wraps across two lines.",
            "A second paragraph follows the gap and also wraps once.",
        ]

    def test_blank_document(self, config):
        for token_pages in ([], [[], []]):
            book = parse_token_pages(token_pages, config)

            assert book == {"paragraphs": [], "content": "", "total_pages": 0, "chapters": []}


class TestPlainText:

    def test_chapter_heading_scenario(self, config):
        book = parse_text("Chapter 1\n\nHello world.", config)

        assert book["chapters"] == [{"title": "Chapter 1", "page": 1}]
        assert book["total_pages"] == 1

    def test_empty_text(self, config):
        assert parse_text("", config)["total_pages"] == 0

    def test_book_level_properties(self, make_paragraph, config):
        paragraphs = []
        for chapter in range(1, 5):
            paragraphs.append(f"Chapter {chapter}")
            paragraphs.extend(make_paragraph(n, f"c{chapter}p{n}") for n in (400, 650, 900, 300, 1200, 2100))
        paragraphs.insert(7, make_paragraph(3100, "huge"))

        book = parse_text("\n\n".join(paragraphs), config)
        pages = split_pages(book["content"])

        assert book["paragraphs"] == paragraphs
        assert len(pages) == book["total_pages"]
        assert [p for page in pages for p in page.split(PARAGRAPH_SEPARATOR)] == paragraphs
        for mark in book["chapters"]:
            assert pages[mark["page"] - 1].split(PARAGRAPH_SEPARATOR)[0] == mark["title"]
        assert [m["title"] for m in book["chapters"]] == [f"Chapter {i}" for i in range(1, 5)]
        for page in pages:
            assert len(page) <= MAX_PAGE_CHARS or PARAGRAPH_SEPARATOR not in page


class TestParseFile:

    def test_text_file(self, tmp_path, config):
        path = tmp_path / "book.txt"
        path.write_text("Chapter 1\r\n\r\nThe story begins on a rainy day.\r\n", encoding="utf-8")

        book = parse_file(path, config)

        assert book["paragraphs"] == ["Chapter 1", "The story begins on a rainy day."]

    def test_unsupported_suffix(self, tmp_path, config):
        path = tmp_path / "book.epub"
        path.write_bytes(b"PK")

        with pytest.raises(UnsupportedFormatError):
            parse_file(path, config)


def test_min_bound_respected_between_headings(make_paragraph, config):
    paragraphs = [make_paragraph(450, f"p{i}") for i in range(10)]

    book = parse_text("\n\n".join(paragraphs), config)
    pages = split_pages(book["content"])

    for page in pages[:-1]:
        assert MIN_PAGE_CHARS <= len(page) <= MAX_PAGE_CHARS
