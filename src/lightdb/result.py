"""
In-memory result model: Result -> DataBaseRow -> DataBaseColumn.

Every cell is held as text, the way the driver value renders through str().
SQL NULL stays None so it can be told apart from an empty string.
"""
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any

import pandas as pd

__all__ = [
    'DataBaseColumn',
    'DataBaseRow',
    'Result',
    'to_text',
]


def to_text(value: Any) -> str | None:
    """Render a driver value as text.

    >>> to_text(120)
    '120'
    >>> to_text(b'abc')
    'abc'
    >>> to_text(None) is None
    True
    """
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode('utf-8', errors='replace')
    return str(value)


@dataclass(frozen=True, slots=True)
class DataBaseColumn:
    """One cell: column name and its value as text."""
    name: str
    value: str | None

    def __str__(self) -> str:
        return f'{self.name} : {self.value}'


class DataBaseRow:
    """Columns of one row, in the order the database returned them."""

    __slots__ = ('_columns',)

    def __init__(self, columns: Iterable[DataBaseColumn] = ()) -> None:
        self._columns = list(columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __iter__(self) -> Iterator[DataBaseColumn]:
        return iter(self._columns)

    def __getitem__(self, index: int) -> DataBaseColumn:
        return self._columns[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataBaseRow):
            return NotImplemented
        return self._columns == other._columns

    def __repr__(self) -> str:
        return f'DataBaseRow({self._columns!r})'

    def add_column(self, column: DataBaseColumn) -> None:
        self._columns.append(column)

    @property
    def column_count(self) -> int:
        return len(self._columns)

    def get_column(self, index: int) -> DataBaseColumn:
        """Column at a 0-based position."""
        return self._columns[index]

    def get_column_by_name(self, name: str) -> DataBaseColumn | None:
        """First column with the given name, or None.
        """
        for column in self._columns:
            if column.name == name:
                return column
        return None

    def to_dict(self) -> dict[str, str | None]:
        """Map column names to values; a repeated name keeps its last value."""
        return {column.name: column.value for column in self._columns}


class Result:
    """Rows of a result set, in the order the database returned them.

    A query that matches nothing yields an empty Result, never None.
    """

    __slots__ = ('_rows', 'column_names')

    def __init__(self, rows: Iterable[DataBaseRow] = (),
                 column_names: Iterable[str] = ()) -> None:
        self._rows = list(rows)
        self.column_names = list(column_names)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[DataBaseRow]:
        return iter(self._rows)

    def __getitem__(self, index: int) -> DataBaseRow:
        return self._rows[index]

    def __bool__(self) -> bool:
        return bool(self._rows)

    def __repr__(self) -> str:
        return f'Result({len(self._rows)} rows, columns={self.column_names!r})'

    def add_row(self, row: DataBaseRow) -> None:
        self._rows.append(row)

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def get_row(self, index: int) -> DataBaseRow:
        """Row at a 0-based position."""
        return self._rows[index]

    def to_dicts(self) -> list[dict[str, str | None]]:
        return [row.to_dict() for row in self._rows]

    def to_dataframe(self) -> pd.DataFrame:
        """Load the text values into a DataFrame.

        Always returns a DataFrame, with columns preserved for empty results.
        """
        if not self._rows:
            return pd.DataFrame(columns=self.column_names)
        records = [[column.value for column in row] for row in self._rows]
        return pd.DataFrame.from_records(records, columns=self.column_names or None)
