"""
Query templates and typed parameters.

A Query is plain data: the SQL text exactly as it will be prepared plus the
ordered parameters bound to its `?` placeholders. Parameter values are kept
string-encoded and converted to their declared type only when bound.

    >>> query = Query('select * from t where id = ? and name = ?')
    >>> query.add_int_parameter(120)
    >>> query.add_text_parameter('testName')
    >>> query.parameter_count
    2
    >>> query.bind_values()
    (120, 'testName')
"""
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from lightdb.exceptions import FormatError, InvalidQueryError
from lightdb.sql import count_placeholders

__all__ = [
    'ParameterType',
    'Parameter',
    'Query',
]


class ParameterType(Enum):
    """SQL bind type of a parameter."""
    TEXT = 'text'
    INT = 'int'
    FLOAT = 'float'
    DOUBLE = 'double'

    @classmethod
    def coerce(cls, value: Any) -> Any:
        """Map 'int', 'text', ... onto members; leave unknown tags untouched.

        Unknown tags are only rejected when the parameter is bound.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return value


INT_MIN, INT_MAX = -2**31, 2**31 - 1

_INTEGER = re.compile(r'[+-]?[0-9]+')


def parse_int(value: str) -> int:
    """Parse a signed 32-bit decimal integer, rejecting whitespace and `_` separators.

    >>> parse_int('-42')
    -42
    >>> parse_int(' 12 ')
    Traceback (most recent call last):
    ...
    ValueError: not a decimal integer: ' 12 '
    """
    if not _INTEGER.fullmatch(value):
        raise ValueError(f'not a decimal integer: {value!r}')
    number = int(value)
    if not INT_MIN <= number <= INT_MAX:
        raise ValueError(f'integer out of range: {value}')
    return number


def parse_float(value: str) -> float:
    if '_' in value:
        raise ValueError(f'digit separators are not allowed: {value!r}')
    return float(value)


_CONVERTERS = {
    ParameterType.TEXT: str,
    ParameterType.INT: parse_int,
    ParameterType.FLOAT: parse_float,
    ParameterType.DOUBLE: parse_float,
    }


@dataclass(frozen=True, slots=True)
class Parameter:
    """A string-encoded value tagged with its bind type.

    A None value is SQL NULL and binds as None whatever the type.
    """
    value: str | None
    type: ParameterType

    def to_python(self) -> str | int | float | None:
        """Convert the stored text to the value handed to the driver.

        Raises
            InvalidQueryError: the type tag is not a ParameterType
            FormatError: the value does not parse as the declared numeric type
        """
        converter = _CONVERTERS.get(self.type)
        if converter is None:
            raise InvalidQueryError(f'invalid parameter type: {self.type!r}')
        if self.value is None:
            return None
        try:
            return converter(self.value)
        except (TypeError, ValueError) as exc:
            raise FormatError(f'{self.value!r} is not a valid {self.type.value} value') from exc


@dataclass(init=False)
class Query:
    """SQL template plus ordered parameters."""
    template: str | None = None
    parameters: list[Parameter] = field(default_factory=list)

    def __init__(self, template: str | None = None, *parameters: Parameter) -> None:
        self.template = template
        self.parameters = list(parameters)

    def __str__(self) -> str:
        return self.template or ''

    def set_template(self, sql: str | None) -> None:
        """Store the SQL text; placeholders are written as `?`."""
        self.template = sql

    def add_parameter(self, value: Any, type: ParameterType | str) -> None:
        """Append a parameter bound to the next placeholder.

        Non-string values are stored through str(); None is kept as SQL NULL.
        """
        text = value if value is None or isinstance(value, str) else str(value)
        self.parameters.append(Parameter(text, ParameterType.coerce(type)))

    def add_text_parameter(self, value: str) -> None:
        self.add_parameter(value, ParameterType.TEXT)

    def add_int_parameter(self, value: int | str) -> None:
        self.add_parameter(value, ParameterType.INT)

    def add_float_parameter(self, value: float | str) -> None:
        self.add_parameter(value, ParameterType.FLOAT)

    def add_double_parameter(self, value: float | str) -> None:
        self.add_parameter(value, ParameterType.DOUBLE)

    @property
    def parameter_count(self) -> int:
        return len(self.parameters)

    def parameter_type(self, index: int) -> ParameterType:
        return self.parameters[index].type

    def parameter_value(self, index: int) -> str | None:
        return self.parameters[index].value

    def is_valid(self) -> bool:
        """True when the template is non-empty.

        The number of parameters is not compared against the placeholders;
        a mismatch is reported by the database.
        """
        return bool(self.template)

    def validate(self) -> list[str]:
        """Return every problem that would make this query fail.

        Covers what execution rejects up front (empty template, bad
        parameters) and a placeholder/parameter count mismatch, which the
        database would report. An empty list means the query is sound.
        Nothing is raised, so callers can check a query before running it.

        >>> Query('').validate()
        ['query template is empty']
        >>> q = Query('select ?')
        >>> q.add_int_parameter('abc')
        >>> q.validate()
        ["parameter 1: 'abc' is not a valid int value"]
        """
        problems = []
        if not self.is_valid():
            problems.append('query template is empty')
        for position, parameter in enumerate(self.parameters, start=1):
            try:
                parameter.to_python()
            except (InvalidQueryError, FormatError) as exc:
                problems.append(f'parameter {position}: {exc}')
        placeholders = count_placeholders(self.template)
        if self.template and placeholders != self.parameter_count:
            problems.append(f'{placeholders} placeholders but {self.parameter_count} parameters')
        return problems

    def bind_values(self) -> tuple[str | int | float | None, ...]:
        """Converted parameter values in placeholder order.

        Raises InvalidQueryError or FormatError on the first bad parameter.
        """
        return tuple(parameter.to_python() for parameter in self.parameters)
