"""
Tests for paragraph splitting.
"""

from book_parser.config import ParserConfig
from book_parser.pipeline.paragraphs import build_paragraphs, split_into_paragraphs


def test_blank_lines_separate_paragraphs():
    text = "First paragraph is long enough.\n\n\nSecond paragraph is also long enough."

    assert split_into_paragraphs(text) == [
        "First paragraph is long enough.",
        "Second paragraph is also long enough.",
    ]


def test_single_newlines_fold_into_spaces():
    assert split_into_paragraphs("line one of para\n  line two of para") == ["line one of para line two of para"]


def test_whitespace_only_line_is_a_break():
    text = "A paragraph that is long enough.\n   \nAnother paragraph long enough here."

    assert len(split_into_paragraphs(text)) == 2


def test_short_fragments_dropped():
    assert split_into_paragraphs("tiny\n\nThis paragraph is long enough to keep.") == [
        "This paragraph is long enough to keep.",
    ]


def test_chapter_marker_survives_length_filter():
    assert split_into_paragraphs("Chapter 1\n\nThis paragraph is long enough to keep.")[0] == "Chapter 1"


def test_empty_text():
    assert split_into_paragraphs("") == []
    assert split_into_paragraphs("\n\n\n") == []


def test_stage_uses_configured_minimum():
    state = {"config": ParserConfig(min_paragraph_chars=3), "text": "tiny\n\nok"}

    assert build_paragraphs(state) == {"paragraphs": ["tiny"]}
