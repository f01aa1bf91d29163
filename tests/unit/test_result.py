"""Unit tests for the Result / DataBaseRow / DataBaseColumn model."""
import dataclasses

import pandas as pd
import pytest
from lightdb.result import DataBaseColumn, DataBaseRow, Result, to_text


def _row(**values):
    return DataBaseRow(DataBaseColumn(name, value) for name, value in values.items())


def test_column_value_equality():
    assert DataBaseColumn('id', '120') == DataBaseColumn('id', '120')
    assert DataBaseColumn('id', '120') != DataBaseColumn('id', '121')
    assert hash(DataBaseColumn('id', '120')) == hash(DataBaseColumn('id', '120'))
    assert str(DataBaseColumn('id', '120')) == 'id : 120'


def test_column_is_immutable():
    column = DataBaseColumn('id', '120')
    with pytest.raises(dataclasses.FrozenInstanceError):
        column.value = '121'


def test_row_preserves_column_order():
    row = _row(id='120', name='testName', extra='x')
    assert row.column_count == 3
    assert [c.name for c in row] == ['id', 'name', 'extra']
    assert row.get_column(1) == DataBaseColumn('name', 'testName')
    assert row.get_column_by_name('extra').value == 'x'
    assert row.get_column_by_name('missing') is None
    assert row.to_dict() == {'id': '120', 'name': 'testName', 'extra': 'x'}


def test_row_add_column():
    row = DataBaseRow()
    row.add_column(DataBaseColumn('a', '1'))
    assert len(row) == 1
    assert row[0].name == 'a'


def test_result_rows():
    result = Result([_row(id='1'), _row(id='2')], column_names=['id'])
    assert result.row_count == 2
    assert result.get_row(1).get_column(0).value == '2'
    assert result.to_dicts() == [{'id': '1'}, {'id': '2'}]


def test_empty_result():
    result = Result(column_names=['id', 'name'])
    assert result.row_count == 0
    assert list(result) == []
    assert result is not None


def test_to_dataframe():
    result = Result([_row(id='1', name=None)], column_names=['id', 'name'])
    df = result.to_dataframe()
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ['id', 'name']
    assert df.iloc[0]['id'] == '1'
    assert df.iloc[0]['name'] is None


def test_empty_to_dataframe_keeps_columns():
    df = Result(column_names=['id', 'name']).to_dataframe()
    assert list(df.columns) == ['id', 'name']
    assert len(df) == 0


@pytest.mark.parametrize(('value', 'expected'), [
    (120, '120'),
    (1.5, '1.5'),
    ('', ''),
    (None, None),
    (b'raw', 'raw'),
])
def test_to_text(value, expected):
    assert to_text(value) == expected
