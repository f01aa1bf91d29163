"""
Prepared statement and result cursor handles over a DBAPI cursor.

PEP-249 drivers take all parameters in one sequence at execute time, so
binding by position fills slots that are handed over together.
"""
import logging
import time
from collections.abc import Iterator
from functools import wraps
from typing import Any

from lightdb.sql import standardize_placeholders

__all__ = [
    'Statement',
    'ResultCursor',
]

logger = logging.getLogger(__name__)

_UNBOUND = object()


def dumpsql(func):
    """Decorator for logging statement SQL, parameters and timing."""
    @wraps(func)
    def wrapper(self, *args: Any, **kwargs: Any):
        start = time.time()
        logger.debug(f'SQL:\n{self.sql}\nargs: {self.parameters}')
        try:
            return func(self, *args, **kwargs)
        except Exception:
            logger.error(f'Error with query:\nSQL:\n{self.sql}\nargs: {self.parameters}')
            raise
        finally:
            logger.debug(f'Query time: {time.time() - start:.4f}s')
    return wrapper


class Statement:
    """A template prepared against one DBAPI cursor.

    The template's `?` placeholders are rewritten for the driver's
    paramstyle; values are bound at 1-based positions. Without bound values
    the template is sent verbatim, since drivers only interpret `%` when
    parameters are passed.
    """

    def __init__(self, cursor: Any, template: str, paramstyle: str = 'qmark') -> None:
        self.dbapi_cursor = cursor
        self.template = template
        self.paramstyle = paramstyle
        self._slots: list[Any] = []

    @property
    def sql(self) -> str:
        """SQL text as it is handed to the driver."""
        if not self._slots:
            return self.template
        return standardize_placeholders(self.template, self.paramstyle)

    def bind(self, position: int, value: Any) -> None:
        """Bind value to the placeholder at 1-based position."""
        if position < 1:
            raise IndexError(f'parameter positions start at 1, got {position}')
        if position > len(self._slots):
            self._slots.extend([_UNBOUND] * (position - len(self._slots)))
        self._slots[position - 1] = value

    @property
    def parameters(self) -> tuple[Any, ...]:
        """Bound values in position order."""
        missing = [i for i, value in enumerate(self._slots, start=1) if value is _UNBOUND]
        if missing:
            raise IndexError(f'no value bound at position(s) {missing}')
        return tuple(self._slots)

    def _execute(self) -> None:
        params = self.parameters
        if params:
            self.dbapi_cursor.execute(self.sql, params)
        else:
            self.dbapi_cursor.execute(self.sql)

    @dumpsql
    def execute_update(self) -> int:
        """Run a mutating statement and return the affected row count."""
        self._execute()
        return self.dbapi_cursor.rowcount

    @dumpsql
    def execute_query(self) -> 'ResultCursor':
        """Run a query and return a cursor over its rows."""
        self._execute()
        return ResultCursor(self.dbapi_cursor)

    def close(self) -> None:
        try:
            self.dbapi_cursor.close()
        except Exception as e:
            logger.error(f'Error closing statement: {e}')
            raise
        logger.debug('Statement closed')


class ResultCursor:
    """Rows and column metadata of an executed query."""

    def __init__(self, cursor: Any) -> None:
        self.dbapi_cursor = cursor
        self.closed = False

    @property
    def column_names(self) -> list[str]:
        """Names from cursor.description, in result order."""
        return [item[0] for item in (self.dbapi_cursor.description or [])]

    def __iter__(self) -> Iterator[tuple]:
        """Yield rows one at a time."""
        while not self.closed:
            row = self.dbapi_cursor.fetchone()
            if row is None:
                return
            yield row

    def close(self) -> None:
        """Discard unread rows.

        The DBAPI cursor itself belongs to the Statement and is closed there.
        """
        if not self.closed:
            self.closed = True
            logger.debug('Result cursor closed')
