'''Fixed-size labelled integer tables with write-once cells.

This is the storage underlying both ballots (voters by candidates) and duel
matrices (candidates by candidates). A table has fixed dimensions, a label
for every column, and cells that start out unset and can be written exactly
once. Errors are raised as subclasses of :class:`TableError`; nothing is
silently clamped or overwritten.
'''

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from revparty.candidate import LabelIndex


UNSET = None
'''Value of a cell that has not been written yet.'''


class TableError(Exception):
    '''Base class for invalid operations on a table.'''
    pass


class DimensionMismatch(TableError, ValueError):
    '''Table contents do not fit the declared dimensions.

    E.g. a different number of labels than columns, or a row of data with
    the wrong number of cells.

    :param what: What was being sized.
    :param got: Size that was received.
    :param expected: Size that was required.
    '''
    def __init__(self, what: str, got: int, expected: int):
        self.what = what
        self.got = got
        self.expected = expected
        super().__init__(f'{what}: got {got}, expected {expected}')


class IndexOutOfRange(TableError, IndexError):
    '''A row or column index is outside the table.'''
    def __init__(self, row: int, column: int, shape: Tuple[int, int]):
        self.row = row
        self.column = column
        self.shape = shape
        super().__init__(
            f'position ({row}, {column}) outside table of shape {shape}'
        )


class CellAlreadySet(TableError, ValueError):
    '''A write-once cell was written a second time.'''
    def __init__(self, row: int, column: int, value: int):
        self.row = row
        self.column = column
        self.value = value
        super().__init__(
            f'cell ({row}, {column}) already set to {value}'
        )


class LabeledTable:
    '''A fixed-size integer table with labelled columns and write-once cells.

    :param n_rows: Number of data rows.
    :param labels: Column labels (candidate labels), one per column.
    :param fill: Initial value of all cells. The default leaves them unset
        so that each can be written once; a number makes the table fully
        populated from the start.
    :raises DimensionMismatch: If the number of rows is negative.
    :raises revparty.candidate.CandidateError: If the labels are invalid.
    '''
    def __init__(self,
                 n_rows: int,
                 labels: Iterable[str],
                 fill: Optional[int] = UNSET,
                 ):
        if n_rows < 0:
            raise DimensionMismatch('row count', n_rows, 0)
        self._index = LabelIndex(labels)
        self._cells: List[List[Optional[int]]] = [
            [fill] * len(self._index) for _ in range(n_rows)
        ]

    @property
    def labels(self) -> Tuple[str, ...]:
        return self._index.labels

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self._cells), len(self._index)

    def _check_position(self, row: int, column: int) -> None:
        n_rows, n_cols = self.shape
        if not (0 <= row < n_rows and 0 <= column < n_cols):
            raise IndexOutOfRange(row, column, self.shape)

    def get(self, row: int, column: int) -> Optional[int]:
        '''Return the raw cell value, :data:`UNSET` if never written.'''
        self._check_position(row, column)
        return self._cells[row][column]

    def is_set(self, row: int, column: int) -> bool:
        return self.get(row, column) is not UNSET

    def set(self, row: int, column: int, value: int) -> None:
        '''Write a cell that has not been written yet.

        :raises IndexOutOfRange: If the position lies outside the table.
        :raises CellAlreadySet: If the cell already holds a value.
        '''
        current = self.get(row, column)
        if current is not UNSET:
            raise CellAlreadySet(row, column, current)
        self._cells[row][column] = value

    def _increment(self, row: int, column: int) -> None:
        # Tallying tables are zero-filled and owned by their builder.
        self._cells[row][column] += 1

    def row(self, row: int) -> Tuple[Optional[int], ...]:
        if not 0 <= row < self.shape[0]:
            raise IndexOutOfRange(row, 0, self.shape)
        return tuple(self._cells[row])

    def column(self, column: int) -> Tuple[Optional[int], ...]:
        if not 0 <= column < self.shape[1]:
            raise IndexOutOfRange(0, column, self.shape)
        return tuple(row[column] for row in self._cells)

    def rows(self) -> Iterator[Tuple[Optional[int], ...]]:
        for row in self._cells:
            yield tuple(row)

    def label_to_index(self, label: str) -> int:
        '''Return the column index of a candidate label.

        :raises revparty.candidate.CandidateError: For an unknown label.
        '''
        return self._index.index(label)

    def index_to_label(self, index: int) -> str:
        '''Return the label of the given column.

        :raises IndexOutOfRange: If there is no such column.
        '''
        if not 0 <= index < self.shape[1]:
            raise IndexOutOfRange(0, index, self.shape)
        return self._index.labels[index]

    def fill_rows(self, rows: Iterable[Sequence[Optional[int]]]) -> None:
        '''Write consecutive rows of values, leaving ``None`` cells unset.

        :raises DimensionMismatch: If the number of rows or the length of
            any row does not match the table shape.
        '''
        n_rows, n_cols = self.shape
        n_filled = 0
        for i, values in enumerate(rows):
            if i >= n_rows:
                raise DimensionMismatch('row count', i + 1, n_rows)
            if len(values) != n_cols:
                raise DimensionMismatch(f'length of row {i}',
                                        len(values), n_cols)
            for j, value in enumerate(values):
                if value is not UNSET:
                    self.set(i, j, value)
            n_filled += 1
        if n_filled != n_rows:
            raise DimensionMismatch('row count', n_filled, n_rows)

    def __repr__(self) -> str:
        return (
            f'<{self.__class__.__name__}({self.shape[0]}x{self.shape[1]},'
            f' {list(self.labels)!r})>'
        )
