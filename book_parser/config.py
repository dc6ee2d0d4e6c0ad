"""
Parser thresholds, with environment overrides.

Every field of ParserConfig can be overridden by an environment variable
named BOOK_PARSER_<FIELD>, e.g. BOOK_PARSER_MAX_PAGE_CHARS=3200. The CLI
loads a .env file before reading them.
"""

import logging
import os
from dataclasses import dataclass, fields, replace

from book_parser.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "BOOK_PARSER_"


@dataclass(frozen=True)
class ParserConfig:
    # Display page bounds. target_page_chars does not steer pagination;
    # it is only reported against the average page length.
    min_page_chars: int = 800
    max_page_chars: int = 2800
    target_page_chars: int = 1800

    # Line assembly
    line_tolerance: float = 4.0
    paragraph_gap_ratio: float = 1.6   # 0 disables gap detection

    # Artifact sampling
    artifact_sample_pages: int = 8
    artifact_min_pages: int = 4
    artifact_max_line_chars: int = 80
    artifact_frequency: float = 0.4

    min_paragraph_chars: int = 20

    def validate(self) -> "ParserConfig":
        if self.max_page_chars <= 0:
            raise ConfigError(f"max_page_chars must be positive, got {self.max_page_chars}")
        if self.min_page_chars > self.max_page_chars:
            raise ConfigError(
                f"min_page_chars ({self.min_page_chars}) exceeds max_page_chars ({self.max_page_chars})"
            )
        if self.line_tolerance < 0 or self.paragraph_gap_ratio < 0:
            raise ConfigError("line_tolerance and paragraph_gap_ratio must not be negative")
        if not 0 < self.artifact_frequency <= 1:
            raise ConfigError(f"artifact_frequency must be in (0, 1], got {self.artifact_frequency}")
        return self


def get_config(environ: dict | None = None) -> ParserConfig:
    """Default configuration with BOOK_PARSER_* environment overrides applied."""
    env = os.environ if environ is None else environ
    overrides = {}
    for f in fields(ParserConfig):
        raw = env.get(ENV_PREFIX + f.name.upper())
        if raw is None or raw.strip() == "":
            continue
        cast = int if f.type in (int, "int") else float
        try:
            overrides[f.name] = cast(raw)
        except ValueError:
            raise ConfigError(f"{ENV_PREFIX}{f.name.upper()}={raw!r} is not a valid {cast.__name__}") from None
        logger.debug("Config override %s=%r", f.name, overrides[f.name])

    return replace(ParserConfig(), **overrides).validate()
