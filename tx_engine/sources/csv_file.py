"""CSV transaction sources."""

import csv
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Iterator, TextIO

from tx_engine.exceptions import SourceError
from tx_engine.models.enums import TransactionType
from tx_engine.models.transaction import MAX_CLIENT_ID, MAX_TRANSACTION_ID, Transaction

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("type", "client", "tx")
OPTIONAL_COLUMNS = ("amount",)


class CsvSource:
    """Read transactions from a CSV text stream.

    The first row is a header naming the ``type``, ``client``, ``tx`` and
    ``amount`` columns in any order. Headers and values may be padded with
    whitespace, and blank lines are skipped. A short row leaves its
    trailing columns empty, which is how dispute-family records usually
    omit the amount.
    """

    def __init__(
        self,
        stream: TextIO,
        trim_whitespace: bool = True,
        name: str = "<stream>",
    ) -> None:
        """Initialize CSV source.

        Parameters
        ----------
        stream : TextIO
            Open text stream positioned at the header row.
        trim_whitespace : bool
            Strip whitespace around header names and values.
        name : str
            Source name used in error messages.
        """
        self.stream = stream
        self.trim_whitespace = trim_whitespace
        self.name = name

    def read(self) -> Iterator[Transaction]:
        """Lazily parse transactions, raising ``SourceError`` on malformed input."""
        reader = csv.reader(self.stream)
        count = 0
        try:
            header = next(reader, None)
            if header is None:
                logger.info("%s: empty input", self.name)
                return
            columns = self._parse_header(header)

            for row in reader:
                if not any(value.strip() for value in row):
                    continue
                yield self._parse_row(row, columns, reader.line_num)
                count += 1
        except (csv.Error, OSError, UnicodeDecodeError) as e:
            raise SourceError(f"{self.name}, line {reader.line_num}: {e}") from e

        logger.info("%s: read %d transactions", self.name, count)

    def _parse_header(self, header: list[str]) -> list[str]:
        columns = [self._clean(name).lower() for name in header]
        missing = [name for name in REQUIRED_COLUMNS if name not in columns]
        if missing:
            raise SourceError(
                f"{self.name}: missing required column(s) {', '.join(missing)} in header {header}"
            )
        return columns

    def _parse_row(self, row: list[str], columns: list[str], line: int) -> Transaction:
        if len(row) > len(columns):
            raise SourceError(
                f"{self.name}, line {line}: expected at most {len(columns)} fields, found {len(row)}"
            )
        values = {name: self._clean(value) for name, value in zip(columns, row)}

        type_value = values.get("type", "")
        try:
            transaction_type = TransactionType(type_value.lower())
        except ValueError:
            raise SourceError(
                f"{self.name}, line {line}: unknown transaction type {type_value!r}"
            ) from None

        return Transaction(
            transaction_type=transaction_type,
            client_id=self._parse_id(values.get("client", ""), "client", MAX_CLIENT_ID, line),
            transaction_id=self._parse_id(values.get("tx", ""), "tx", MAX_TRANSACTION_ID, line),
            amount=self._parse_amount(values.get("amount", ""), line),
        )

    def _parse_id(self, value: str, column: str, maximum: int, line: int) -> int:
        if not (value.isascii() and value.isdigit()) or int(value) > maximum:
            raise SourceError(
                f"{self.name}, line {line}: invalid {column} {value!r}, "
                f"expected an integer between 0 and {maximum}"
            )
        return int(value)

    def _parse_amount(self, value: str, line: int) -> Decimal | None:
        if not value:
            return None
        try:
            amount = Decimal(value)
        except InvalidOperation:
            raise SourceError(f"{self.name}, line {line}: invalid amount {value!r}") from None
        if not amount.is_finite():
            raise SourceError(f"{self.name}, line {line}: amount must be finite, got {value!r}")
        return amount

    def _clean(self, value: str) -> str:
        return value.strip() if self.trim_whitespace else value


class CsvFileSource:
    """Read transactions from a CSV file.

    The file is opened when iteration starts and closed once it ends.
    """

    def __init__(self, path: str | Path, trim_whitespace: bool = True) -> None:
        self.path = Path(path)
        self.trim_whitespace = trim_whitespace

    def read(self) -> Iterator[Transaction]:
        """Lazily parse transactions from the file."""
        try:
            f = open(self.path, "r", encoding="utf-8", newline="")
        except OSError as e:
            raise SourceError(f"Cannot read input file: {self.path}") from e

        with f:
            yield from CsvSource(f, self.trim_whitespace, name=str(self.path)).read()
