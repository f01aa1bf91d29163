"""
Fake engine, connection and cursor objects for connector unit tests.

The fakes record every execute, commit and close so tests can check binding
order and resource release without a database.

Usage:
    def test_binding(fake_engine):
        connector = Connector('sqlite:///unused.db')
        connector.execute_update(query)
        sql, params = fake_engine.cursors[0].executed[0]
"""
import types

import pytest
import sqlalchemy as sa


class FakeCursor:
    """DBAPI cursor stand-in returning canned rows."""

    def __init__(self, rows=(), columns=(), rowcount=1, execute_error=None,
                 close_error=None):
        self.rows = list(rows)
        self.description = [(name, None, None, None, None, None, None) for name in columns] or None
        self.rowcount = rowcount
        self.execute_error = execute_error
        self.close_error = close_error
        self.executed = []
        self.closed = False
        self._pending = iter(())

    def execute(self, sql, params=None):
        if self.execute_error is not None:
            raise self.execute_error
        self.executed.append((sql, params))
        self._pending = iter(self.rows)

    def fetchone(self):
        return next(self._pending, None)

    def close(self):
        self.closed = True
        if self.close_error is not None:
            raise self.close_error


class FakeDbapiConnection:

    def __init__(self, cursor):
        self._cursor = cursor
        self.commits = 0

    def cursor(self):
        return self._cursor

    def commit(self):
        self.commits += 1


class FakeConnection:
    """SQLAlchemy Connection stand-in."""

    def __init__(self, cursor, paramstyle='qmark', close_error=None):
        self.connection = FakeDbapiConnection(cursor)
        self.close_error = close_error
        self.dialect = types.SimpleNamespace(dbapi=types.SimpleNamespace(paramstyle=paramstyle))
        self.closed = False

    def close(self):
        self.closed = True
        if self.close_error is not None:
            raise self.close_error


class FakeEngine:
    """Engine stand-in handing out one FakeConnection per connect()."""

    def __init__(self, paramstyle='qmark'):
        self.url = sa.make_url('sqlite:///unused.db')
        self.paramstyle = paramstyle
        self.cursors = []
        self.connections = []
        self.next_cursor = FakeCursor()
        self.close_error = None

    def connect(self):
        cursor, self.next_cursor = self.next_cursor, FakeCursor()
        connection = FakeConnection(cursor, self.paramstyle, self.close_error)
        self.cursors.append(cursor)
        self.connections.append(connection)
        return connection


@pytest.fixture
def fake_engine(mocker):
    """Patch engine creation so every Connector talks to a FakeEngine.

    Set `fake_engine.next_cursor` to control what the next connection returns.
    """
    engine = FakeEngine()
    mocker.patch('lightdb.connector.get_engine', return_value=engine)
    return engine
