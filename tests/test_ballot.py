import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
from revparty.ballot import Ballot, NO_OPINION
from revparty.table import CellAlreadySet


N = NO_OPINION


@pytest.fixture(scope='module')
def ballot():
    return Ballot.from_rows(['A', 'B', 'C'], [
        [1, 2, 3],
        [2, N, 1],
        [1, 1, N],
        [N, N, N],
    ])


def test_dimensions(ballot):
    assert ballot.n_voters == 4
    assert ballot.n_candidates == 3
    assert ballot.rank(1, 2) == 1
    assert ballot.rank(1, 1) is NO_OPINION


@pytest.mark.parametrize('voter, cand1, cand2, expected', [
    (0, 0, 1, 1),
    (0, 2, 1, -1),
    (1, 0, 1, 1),
    (1, 1, 2, -1),
    (2, 0, 1, 0),
    (3, 0, 1, 0),
])
def test_prefers(ballot, voter, cand1, cand2, expected):
    assert ballot.prefers(voter, cand1, cand2) == expected


@pytest.mark.parametrize('voter, among, expected', [
    (0, None, 0),
    (1, None, 2),
    (2, None, None),
    (3, None, None),
    (2, [1, 2], 1),
    (1, [1], None),
])
def test_first_preference(ballot, voter, among, expected):
    assert ballot.first_preference(voter, among=among) == expected


def test_set_rank():
    ballot = Ballot(1, ['A', 'B'])
    ballot.set_rank(0, 1, 1)
    assert ballot.rank(0, 1) == 1
    with pytest.raises(CellAlreadySet):
        ballot.set_rank(0, 1, 2)


@pytest.mark.parametrize('rank', ['1', 1.0, True, None])
def test_set_rank_type(rank):
    with pytest.raises(TypeError):
        Ballot(1, ['A']).set_rank(0, 0, rank)
