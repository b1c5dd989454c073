"""Word/weight sources: typed SUBTLEX CSV columns and flat word-count files."""

from __future__ import annotations

import csv
import logging
import math
import re
from abc import ABC, abstractmethod
from collections import Counter
from collections.abc import Iterator
from pathlib import Path
from typing import IO, Protocol, Union

from ._errors import (
    DataValidityError,
    InputNotFoundError,
    InputReadError,
    SchemaError,
    ValueParseError,
)

logger = logging.getLogger(__name__)

Value = Union[int, float, str]

WORD_COLUMN = "Word"
DEFAULT_WEIGHT_COLUMN = "SUBTLWF"  # frequency per million words

# | Column               | Meaning                                              |
# | -------------------- | ---------------------------------------------------- |
# | FREQcount            | Occurrences in the subtitle corpus                   |
# | CDcount              | Number of subtitle files containing the word         |
# | FREQlow / Cdlow      | Same two counts for the lowercase form only          |
# | SUBTLWF              | Frequency per million words                          |
# | Lg10WF               | log10(FREQcount + 1)                                 |
# | SUBTLCD              | Percentage of subtitle files containing the word     |
# | Lg10CD               | log10(CDcount + 1)                                   |
# | Dom_PoS_SUBTLEX      | Dominant part of speech                              |
# | Freq_dom_PoS_SUBTLEX | Count for the dominant part of speech                |
# | Percentage_dom_PoS   | Share of occurrences with the dominant part of speech|
# | All_PoS_SUBTLEX      | Every part of speech the word takes                  |
# | All_freqs_SUBTLEX    | Counts matching All_PoS_SUBTLEX                      |
# | Zipf-value           | Frequency on the Zipf scale                          |
SUBTLEX_COLUMNS: dict[str, type] = {
    "Word": str,
    "FREQcount": int,
    "CDcount": int,
    "FREQlow": int,
    "Cdlow": int,
    "SUBTLWF": float,
    "Lg10WF": float,
    "SUBTLCD": float,
    "Lg10CD": float,
    "Dom_PoS_SUBTLEX": str,
    "Freq_dom_PoS_SUBTLEX": int,
    "Percentage_dom_PoS": float,
    "All_PoS_SUBTLEX": str,
    "All_freqs_SUBTLEX": str,
    "Zipf-value": float,
}

_WORD_RE = re.compile(r"[a-z]+")


class WordSource(Protocol):
    """Anything that can feed (word, weight) pairs to the analysis."""

    def weighted_words(self) -> Iterator[tuple[str, float]]: ...


def _open_text(path: Path) -> IO[str]:
    try:
        return open(path, encoding="utf-8-sig", newline="")
    except OSError as exc:
        raise InputNotFoundError(f"Cannot open file: {path} ({exc.strerror})") from exc


def _is_valid_word(word: str) -> bool:
    return _WORD_RE.fullmatch(word) is not None


def _validate_columns(names: list[str], schema: dict[str, type]) -> None:
    """Header must hold exactly the schema's names, in any order."""
    if WORD_COLUMN not in schema:
        raise SchemaError(f"Schema has no '{WORD_COLUMN}' column")
    duplicated = sorted(n for n, c in Counter(names).items() if c > 1)
    if duplicated:
        raise SchemaError(f"Duplicate column in CSV header: {', '.join(duplicated)}")
    present = set(names)
    for name in schema:
        if name not in present:
            raise SchemaError(f"Missing required column: {name}")
    for name in names:
        if name not in schema:
            raise SchemaError(f"Unexpected column in CSV: {name}")


def _parse_value(raw: str, column: str, column_type: type) -> Value:
    if column_type is str:
        return raw
    if not raw.isascii():
        raise ValueParseError(
            f"Failed to parse value '{raw}' for column '{column}': non-ASCII characters"
        )
    try:
        value = column_type(raw)
    except ValueError as exc:
        raise ValueParseError(
            f"Failed to parse value '{raw}' for column '{column}': {exc}"
        ) from exc
    if column_type is float and not math.isfinite(value):
        raise ValueParseError(
            f"Failed to parse value '{raw}' for column '{column}': not a finite number"
        )
    return value


class DatasetImporter(ABC):
    """A word dataset whose rows hold typed values in named columns."""

    @abstractmethod
    def get(self, column: str) -> dict[str, Value]:
        """Return {word: value} for a column, or {} for an unknown column."""

    def weighted_words(
        self, column: str = DEFAULT_WEIGHT_COLUMN
    ) -> Iterator[tuple[str, float]]:
        """Yield (word, weight) pairs using a numeric column as the weight."""
        for word, value in self.get(column).items():
            if isinstance(value, str):
                raise ValueParseError(
                    f"Column '{column}' is not numeric (word '{word}' has '{value}')"
                )
            yield word, float(value)


class SubtlexImporter(DatasetImporter):
    """A SUBTLEX CSV file loaded and validated at construction.

    Example:
        importer = SubtlexImporter("subtlex.csv")
        counts = importer.get("FREQcount")   # {"apple": 100, ...}

    Raises:
        InputNotFoundError: The file cannot be opened.
        InputReadError: The file fails while being read.
        SchemaError: The file is empty, the header is not exactly the
            SUBTLEX columns, or a row has the wrong number of fields.
        ValueParseError: A value does not parse as its column's type.
        DataValidityError: A word is empty, has non-letters or is repeated
            (compared after lowercasing).
    """

    __slots__ = ("_path", "_columns", "_column_index", "_rows")

    def __init__(
        self,
        path: Path | str,
        schema: dict[str, type] | None = None,
    ) -> None:
        self._path = Path(path)
        schema = SUBTLEX_COLUMNS if schema is None else schema
        self._columns: list[str] = []
        self._column_index: dict[str, int] = {}
        self._rows: list[list[Value]] = []

        f = _open_text(self._path)
        with f:
            try:
                self._read(csv.reader(f), schema)
            except (OSError, UnicodeDecodeError, csv.Error) as exc:
                raise InputReadError(f"Failed reading {self._path}: {exc}") from exc

        logger.info("Loaded SUBTLEX file: %s (%d words)", self._path, len(self._rows))

    def _read(self, reader: Iterator[list[str]], schema: dict[str, type]) -> None:
        header = next(reader, None)
        if header is None:
            raise SchemaError(f"File is empty: {self._path}")
        _validate_columns(header, schema)
        self._columns = header
        self._column_index = {name: i for i, name in enumerate(header)}
        types = [schema[name] for name in header]
        word_idx = self._column_index[WORD_COLUMN]

        seen: set[str] = set()
        for line_no, raw_row in enumerate(reader, start=2):
            if not raw_row:
                continue
            if len(raw_row) != len(header):
                raise SchemaError(
                    f"{self._path}:{line_no}: row has incorrect number of columns "
                    f"(expected {len(header)}, got {len(raw_row)})"
                )

            word = raw_row[word_idx].lower()
            if not raw_row[word_idx].isascii() or not _is_valid_word(word):
                raise DataValidityError(f"Invalid word in data: {word}")
            if word in seen:
                raise DataValidityError(f"Duplicate word in data: {word}")
            seen.add(word)
            raw_row[word_idx] = word

            self._rows.append([
                _parse_value(raw, name, t)
                for raw, name, t in zip(raw_row, header, types)
            ])

    @property
    def path(self) -> Path:
        return self._path

    @property
    def columns(self) -> list[str]:
        """Column names in file order."""
        return list(self._columns)

    def __len__(self) -> int:
        return len(self._rows)

    def get(self, column: str) -> dict[str, Value]:
        idx = self._column_index.get(column)
        if idx is None:
            return {}
        word_idx = self._column_index[WORD_COLUMN]
        return {row[word_idx]: row[idx] for row in self._rows}  # type: ignore[misc]


class WordCountFile:
    """Whitespace-separated ``word count`` pairs, read eagerly to EOF.

    Pairs may span lines; only the token order matters. Repeated words are
    kept as separate pairs.
    """

    __slots__ = ("_path", "_pairs")

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._pairs: list[tuple[str, int]] = []

        f = _open_text(self._path)
        with f:
            try:
                self._read(f)
            except (OSError, UnicodeDecodeError) as exc:
                raise InputReadError(f"Failed reading {self._path}: {exc}") from exc

        logger.info("Loaded dictionary file: %s (%d words)", self._path, len(self._pairs))

    def _read(self, f: IO[str]) -> None:
        pending: str | None = None
        line_no = 0
        for line_no, line in enumerate(f, start=1):
            for token in line.split():
                if pending is None:
                    word = token.lower()
                    if not token.isascii() or not _is_valid_word(word):
                        raise DataValidityError(
                            f"{self._path}:{line_no}: Invalid word in data: {word}"
                        )
                    pending = word
                    continue
                try:
                    if not token.isascii():
                        raise ValueError("non-ASCII characters")
                    count = int(token)
                except ValueError as exc:
                    raise ValueParseError(
                        f"{self._path}:{line_no}: Failed to parse count '{token}' "
                        f"for word '{pending}'"
                    ) from exc
                if count < 0:
                    raise DataValidityError(
                        f"{self._path}:{line_no}: Negative count {count} for word '{pending}'"
                    )
                self._pairs.append((pending, count))
                pending = None

        if pending is not None:
            raise SchemaError(
                f"{self._path}:{line_no}: word '{pending}' has no count"
            )

    @property
    def path(self) -> Path:
        return self._path

    def __len__(self) -> int:
        return len(self._pairs)

    def weighted_words(self) -> Iterator[tuple[str, float]]:
        for word, count in self._pairs:
            yield word, count
