"""Lexgram error types."""


class LexgramError(Exception):
    """Base error for all lexgram failures."""


class InputError(LexgramError):
    """An input file could not be used."""


class InputNotFoundError(InputError):
    """Input file is missing or cannot be opened."""


class InputReadError(InputError):
    """Input file failed while being read."""


class SchemaError(LexgramError):
    """Header or row layout does not match the expected columns."""


class ValueParseError(LexgramError):
    """A value cannot be parsed as its column's declared type."""


class DataValidityError(LexgramError):
    """A word is invalid or duplicated."""
