"""
Lightweight parameterized SQL over SQLAlchemy, one connection per operation.

Build a Query, hand it to a Connector, get back a Result of text cells:

    connector = Connector('sqlite:///inventory.db')
    query = Query('select * from t where id = ? and name = ?')
    query.add_int_parameter(120)
    query.add_text_parameter('testName')
    for row in connector.execute_select(query):
        print(row.to_dict())
"""
__version__ = '0.1.0'

from lightdb.connector import Connector, connect, dispose_all_engines
from lightdb.exceptions import ConnectionFailure, DatabaseError
from lightdb.exceptions import DbConnectionError, FormatError, IntegrityError
from lightdb.exceptions import InvalidQueryError, ProgrammingError
from lightdb.options import ConnectorOptions, read_settings_file
from lightdb.query import Parameter, ParameterType, Query
from lightdb.result import DataBaseColumn, DataBaseRow, Result

__all__ = [
    'connect',
    'Connector',
    'ConnectorOptions',
    'read_settings_file',
    'dispose_all_engines',
    'Query',
    'Parameter',
    'ParameterType',
    'Result',
    'DataBaseRow',
    'DataBaseColumn',
    'DatabaseError',
    'InvalidQueryError',
    'ConnectionFailure',
    'FormatError',
    'DbConnectionError',
    'IntegrityError',
    'ProgrammingError',
]
