'''Comma-separated ballot and duel files.

Both kinds of files start with a header line of candidate labels.

In ballot files, the header and every data line begin with a fixed number of
metadata columns (such as a timestamp or a voter identifier, four by default)
that are skipped. Every data line then holds one voter's rank (or grade) for
each candidate; an empty cell or a negative number means that the voter
expressed no opinion on the candidate.

Duel files have no metadata columns. The data lines form a square matrix,
line ``x`` column ``y`` holding the number of voters preferring candidate
``x`` over candidate ``y``; empty cells are left unset.
'''

import csv
import io
import logging
from typing import Iterable, List, Optional

import revparty.io.core
from revparty.ballot import Ballot, NO_OPINION
from revparty.duel import Duel

logger = logging.getLogger(__name__)

DEFAULT_SKIP_COLUMNS: int = 4
'''Number of leading metadata columns of a ballot file.'''


class CSVParseError(revparty.io.core.ParseError):
    pass


def _read_rows(lines: Iterable[str]) -> List[List[str]]:
    # Blank lines are dropped; line numbers count the remaining rows.
    # Lines of empty cells are kept as abstaining voters.
    rows = []
    for row in csv.reader(lines):
        if row and not (len(row) == 1 and not row[0].strip()):
            rows.append([cell.strip() for cell in row])
    return rows


def _parse_cell(cell: str, line: int) -> Optional[int]:
    if not cell:
        return None
    try:
        return int(cell)
    except ValueError:
        raise CSVParseError(f'not an integer: {cell!r}', line) from None


def _header(rows: List[List[str]], skip_columns: int) -> List[str]:
    if not rows:
        raise CSVParseError('missing header line')
    header = rows[0]
    if len(header) < skip_columns:
        raise CSVParseError(
            f'header has {len(header)} columns,'
            f' fewer than {skip_columns} skipped', 1
        )
    return header[skip_columns:]


def parse_ballot(lines: Iterable[str],
                 skip_columns: int = DEFAULT_SKIP_COLUMNS,
                 ) -> Ballot:
    '''Read a ballot from CSV lines.

    :param lines: Lines of the file.
    :param skip_columns: Number of leading metadata columns to ignore.
    :raises CSVParseError: If a cell is not an integer or the header is
        missing.
    :raises revparty.table.DimensionMismatch: If a line does not have one
        cell per candidate.
    '''
    rows = _read_rows(lines)
    labels = _header(rows, skip_columns)
    ranks = []
    for line_no, row in enumerate(rows[1:], start=2):
        values = [_parse_cell(cell, line_no) for cell in row[skip_columns:]]
        ranks.append([
            NO_OPINION if value is None or value < 0 else value
            for value in values
        ])
    ballot = Ballot.from_rows(labels, ranks)
    logger.info('loaded ballot of %d voters for %d candidates',
                ballot.n_voters, ballot.n_candidates)
    return ballot


def parse_duel(lines: Iterable[str]) -> Duel:
    '''Read a duel matrix from CSV lines.

    :param lines: Lines of the file.
    :raises CSVParseError: If a cell is not a non-negative integer or the
        header is missing.
    :raises revparty.table.DimensionMismatch: If the matrix is not square
        with one row and column per candidate.
    '''
    rows = _read_rows(lines)
    labels = _header(rows, 0)
    counts = []
    for line_no, row in enumerate(rows[1:], start=2):
        values = [_parse_cell(cell, line_no) for cell in row]
        if any(value is not None and value < 0 for value in values):
            raise CSVParseError('negative vote count', line_no)
        counts.append(values)
    duel = Duel.from_rows(labels, counts)
    logger.info('loaded duel of %d candidates', duel.n_candidates)
    return duel


def _format_row(cells: Iterable) -> str:
    buffer = io.StringIO()
    csv.writer(buffer, lineterminator='\n').writerow(cells)
    return buffer.getvalue()


def duel_lines(duel: Duel) -> Iterable[str]:
    '''Generate the CSV lines of a duel file for the given duel.'''
    yield _format_row(duel.labels)
    for row in duel.to_rows():
        yield _format_row(row)


load_ballot, loads_ballot = revparty.io.core.loaders(parse_ballot)
load_duel, loads_duel = revparty.io.core.loaders(parse_duel)
dump_duel, dumps_duel = revparty.io.core.dumpers(duel_lines)
