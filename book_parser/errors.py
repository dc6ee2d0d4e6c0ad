"""Exception types raised by the parser."""


class BookParserError(Exception):
    """Base class for all parser errors."""


class ExtractionError(BookParserError):
    """A source document or one of its pages could not be read."""


class UnsupportedFormatError(BookParserError):
    """The input file is neither a PDF nor plain text."""


class ConfigError(BookParserError):
    """A configuration value is missing or invalid."""
