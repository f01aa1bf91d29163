"""
Placeholder handling for query templates.

Templates are written with `?` positional placeholders. Before a template is
prepared it is rewritten into the paramstyle of the active DBAPI driver:

    qmark   (sqlite3)            ?   -> ?
    format  (psycopg, pymysql)   ?   -> %s    literal % -> %%
    numeric                      ?   -> :1, :2, ...

String literals and quoted identifiers are left untouched apart from
percent escaping, so `'what?'` is never mistaken for a placeholder.
"""
import re

__all__ = [
    'count_placeholders',
    'standardize_placeholders',
]

# String literals, quoted identifiers, placeholders and bare percent signs
_TOKENIZE = re.compile(r"""
    (?P<string>'(?:[^']|'')*'|"(?:[^"]|"")*")
    |(?P<qmark>\?)
    |(?P<percent>%)
""", re.VERBOSE)

_SUPPORTED_PARAMSTYLES = ('qmark', 'format', 'pyformat', 'numeric')


def count_placeholders(sql: str | None) -> int:
    """Count `?` placeholders outside string literals.

    >>> count_placeholders("select * from t where id = ? and name = ?")
    2
    >>> count_placeholders("select 'what?' from t where id = ?")
    1
    >>> count_placeholders('')
    0
    """
    if not sql or '?' not in sql:
        return 0
    return sum(1 for m in _TOKENIZE.finditer(sql) if m.group('qmark'))


def standardize_placeholders(sql: str, paramstyle: str = 'qmark') -> str:
    """Rewrite `?` placeholders into the driver's paramstyle.

    >>> standardize_placeholders('select * from t where id = ?', 'format')
    'select * from t where id = %s'
    >>> standardize_placeholders("select '5%' from t where id = ?", 'format')
    "select '5%%' from t where id = %s"
    >>> standardize_placeholders('select * from t where a = ? and b = ?', 'numeric')
    'select * from t where a = :1 and b = :2'
    >>> standardize_placeholders('select * from t where id = ?', 'qmark')
    'select * from t where id = ?'
    """
    if paramstyle not in _SUPPORTED_PARAMSTYLES:
        raise ValueError(f'Unsupported paramstyle: {paramstyle}')

    if not sql or paramstyle == 'qmark':
        return sql

    escape_percent = paramstyle in {'format', 'pyformat'}
    position = 0
    result = []
    last_end = 0

    for match in _TOKENIZE.finditer(sql):
        start, end = match.span()
        result.append(sql[last_end:start])
        last_end = end

        if match.group('string'):
            text = match.group('string')
            result.append(text.replace('%', '%%') if escape_percent else text)
        elif match.group('qmark'):
            position += 1
            result.append('%s' if escape_percent else f':{position}')
        else:
            result.append('%%' if escape_percent else '%')

    result.append(sql[last_end:])
    return ''.join(result)


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
