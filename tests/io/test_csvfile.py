import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import revparty.io.csvfile
import revparty.evaluate.single_member
from revparty.ballot import NO_OPINION
from revparty.duel import Duel
from revparty.io.csvfile import CSVParseError
from revparty.io.core import ParseError
from revparty.table import DimensionMismatch
from revparty.candidate import CandidateError

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')


def test_load_ballot_file():
    with open(os.path.join(DATA_DIR, 'ballot.csv'), encoding='utf8') as f:
        ballot = revparty.io.csvfile.load_ballot(f)
    assert ballot.labels == ('Alice', 'Bob', 'Carol')
    assert ballot.n_voters == 7
    assert ballot.row(0) == (1, 2, 3)
    assert ballot.rank(4, 2) is NO_OPINION
    assert ballot.rank(5, 0) is NO_OPINION


def test_loads_ballot_skip_columns():
    ballot = revparty.io.csvfile.loads_ballot(
        'id,A,B\n1,1,2\n2,,1\n\n',
        skip_columns=1,
    )
    assert ballot.labels == ('A', 'B')
    assert list(ballot.rows()) == [(1, 2), (NO_OPINION, 1)]


def test_loads_ballot_quoted_labels():
    ballot = revparty.io.csvfile.loads_ballot(
        '"Smith, Jane","Doe, John"\n1,2\n', skip_columns=0
    )
    assert ballot.labels == ('Smith, Jane', 'Doe, John')


def test_load_duel_file():
    with open(os.path.join(DATA_DIR, 'duel.csv'), encoding='utf8') as f:
        duel = revparty.io.csvfile.load_duel(f)
    assert duel.labels == ('A', 'B', 'C')
    assert duel.to_rows() == [[0, 5, 2], [2, 0, 5], [5, 2, 0]]


def test_loads_duel_unset_cells():
    duel = revparty.io.csvfile.loads_duel('A,B\n,3\n1,\n')
    assert not duel.is_set(0, 0)
    assert duel.value(0, 1) == 3


def test_dumps_duel():
    duel = Duel.from_rows(['A', 'B, Jr.'], [[None, 3], [2, None]])
    assert revparty.io.csvfile.dumps_duel(duel) == 'A,"B, Jr."\n0,3\n2,0\n'


@pytest.mark.parametrize('text, line', [
    ('a,b,c,d,A,B\nx,x,x,x,1,two\n', 2),
    ('a,b,c,d,A,B\nx,x,x,x,1,2\nx,x,x,x,1.5,2\n', 3),
])
def test_ballot_parse_error(text, line):
    with pytest.raises(CSVParseError) as excinfo:
        revparty.io.csvfile.loads_ballot(text)
    assert excinfo.value.line == line
    assert isinstance(excinfo.value, ParseError)


@pytest.mark.parametrize('text', ['', '\n\n', 'a,b\n'])
def test_missing_header(text):
    with pytest.raises(CSVParseError):
        revparty.io.csvfile.loads_ballot(text)


def test_ragged_ballot():
    with pytest.raises(DimensionMismatch):
        revparty.io.csvfile.loads_ballot('A,B\n1,2\n1\n', skip_columns=0)


def test_duplicate_label():
    with pytest.raises(CandidateError):
        revparty.io.csvfile.loads_duel('A,A\n0,1\n1,0\n')


def test_negative_duel_count():
    with pytest.raises(CSVParseError):
        revparty.io.csvfile.loads_duel('A,B\n0,-1\n1,0\n')


def test_non_square_duel():
    with pytest.raises(DimensionMismatch):
        revparty.io.csvfile.loads_duel('A,B\n0,1\n1,0\n1,1\n')


def test_abstaining_voter_kept():
    ballot = revparty.io.csvfile.loads_ballot(
        'a,b,c,d,X,Y\n,,,,,\n1,2,3,4,1,2\n'
    )
    assert ballot.n_voters == 2
    assert ballot.row(0) == (NO_OPINION, NO_OPINION)
    assert ballot.row(1) == (1, 2)


def test_abstaining_voter_counts_in_percentage():
    ballot = revparty.io.csvfile.loads_ballot('X,Y\n1,2\n,\n', skip_columns=0)
    assert revparty.evaluate.single_member.compute_one_round_winners(
        ballot
    )[0].score == 50.0
