"""Shared fixtures: synthetic paragraphs and positioned-token pages."""

import pytest

_FILLER = "lorem ipsum dolor sit amet consectetur adipiscing elit "


def _make_paragraph(length: int, word: str = "") -> str:
    """Lowercase body text of exactly `length` chars ending in a period."""
    base = (word + " " if word else "") + _FILLER
    body = (base * (length // len(base) + 1))[: length - 1]
    if body.endswith(" "):
        body = body[:-1] + "x"
    return body + "."


def _make_page(lines: list[str], top: float = 700.0, pitch: float = 14.0, gaps_before: tuple = ()) -> list[dict]:
    """One token per word, lines laid out top to bottom at a fixed pitch."""
    tokens = []
    y = top
    for i, line in enumerate(lines):
        if i in gaps_before:
            y -= pitch * 2
        x = 72.0
        for word in line.split():
            tokens.append({"text": word, "x": x, "y": y})
            x += 6.0 * (len(word) + 1)
        y -= pitch
    return tokens


@pytest.fixture
def make_paragraph():
    return _make_paragraph


@pytest.fixture
def make_page():
    return _make_page
