import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
from revparty.table import LabeledTable, UNSET, TableError, \
    DimensionMismatch, IndexOutOfRange, CellAlreadySet


@pytest.fixture
def table():
    return LabeledTable(2, ['A', 'B', 'C'])


def test_shape(table):
    assert table.shape == (2, 3)
    assert table.labels == ('A', 'B', 'C')


def test_initially_unset(table):
    assert all(value is UNSET for row in table.rows() for value in row)
    assert not table.is_set(1, 2)


def test_write_once(table):
    table.set(1, 2, 7)
    assert table.get(1, 2) == 7
    with pytest.raises(CellAlreadySet) as excinfo:
        table.set(1, 2, 8)
    assert excinfo.value.value == 7
    assert table.get(1, 2) == 7


@pytest.mark.parametrize('row, column', [
    (2, 0), (0, 3), (-1, 0), (0, -1),
])
def test_out_of_range(table, row, column):
    with pytest.raises(IndexOutOfRange):
        table.get(row, column)
    with pytest.raises(IndexOutOfRange):
        table.set(row, column, 1)


def test_rows_and_columns(table):
    table.fill_rows([[1, None, 3], [4, 5, None]])
    assert table.row(0) == (1, None, 3)
    assert table.column(1) == (None, 5)
    with pytest.raises(IndexOutOfRange):
        table.row(2)
    with pytest.raises(IndexOutOfRange):
        table.column(3)


@pytest.mark.parametrize('rows', [
    [[1, 2, 3]],
    [[1, 2, 3], [4, 5]],
    [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
])
def test_fill_dimension_mismatch(table, rows):
    with pytest.raises(DimensionMismatch):
        table.fill_rows(rows)


def test_labels(table):
    assert table.label_to_index('C') == 2
    assert table.index_to_label(1) == 'B'
    with pytest.raises(IndexOutOfRange):
        table.index_to_label(3)


def test_fill_value():
    table = LabeledTable(1, ['A'], fill=0)
    assert table.is_set(0, 0)
    with pytest.raises(CellAlreadySet):
        table.set(0, 0, 1)


def test_errors_share_base():
    for error in (DimensionMismatch, IndexOutOfRange, CellAlreadySet):
        assert issubclass(error, TableError)
    assert issubclass(DimensionMismatch, ValueError)
    assert issubclass(IndexOutOfRange, IndexError)


def test_negative_rows():
    with pytest.raises(DimensionMismatch):
        LabeledTable(-1, ['A'])
