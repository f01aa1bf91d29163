"""
Connector-specific exception classes.

Driver errors (connect failures, SQL syntax errors, constraint violations)
are never wrapped: they reach the caller as raised by SQLAlchemy or the
DBAPI driver. The tuples at the bottom group them for ``except`` clauses.
"""
import sqlite3

import psycopg
import sqlalchemy as sa


class DatabaseError(Exception):
    """Base class for all lightdb errors.
    """


class InvalidQueryError(DatabaseError):
    """Query template is empty or a parameter carries an unknown type tag.
    """


class ConnectionFailure(DatabaseError):
    """Connection URL could not be turned into a database connection.
    """


class FormatError(DatabaseError, ValueError):
    """A numeric parameter value does not parse as its declared type.
    """


DbConnectionError = (
    sa.exc.OperationalError,
    sa.exc.InterfaceError,
    psycopg.OperationalError,
    psycopg.InterfaceError,
    sqlite3.OperationalError,
    sqlite3.InterfaceError,
    ConnectionFailure,
    )

IntegrityError = (
    sa.exc.IntegrityError,
    psycopg.IntegrityError,
    sqlite3.IntegrityError,
    )

ProgrammingError = (
    sa.exc.ProgrammingError,
    sa.exc.DatabaseError,
    psycopg.ProgrammingError,
    psycopg.DatabaseError,
    sqlite3.ProgrammingError,
    sqlite3.DatabaseError,
    )
