import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
from revparty.ballot import Ballot
from revparty.duel import Duel, build_duel_from_ballot
from revparty.table import CellAlreadySet, DimensionMismatch


N = None


@pytest.fixture(scope='module')
def ballot():
    return Ballot.from_rows(['A', 'B', 'C'], [
        [1, 2, 3],
        [2, 1, N],
        [1, 1, 2],
        [N, N, N],
    ])


def test_build_from_ballot(ballot):
    duel = build_duel_from_ballot(ballot)
    assert duel.labels == ('A', 'B', 'C')
    assert duel.to_rows() == [
        [0, 1, 3],
        [1, 0, 3],
        [0, 0, 0],
    ]


def test_at_most_one_increment_per_voter(ballot):
    duel = Duel.from_ballot(ballot)
    for cand1, cand2 in duel.pairs():
        assert duel[cand1, cand2] + duel[cand2, cand1] <= ballot.n_voters


def test_unset_reads_zero():
    duel = Duel(['A', 'B'])
    assert duel.value(0, 1) == 0
    assert not duel.is_set(0, 1)
    duel.set_value(0, 1, 4)
    assert duel[0, 1] == 4
    with pytest.raises(CellAlreadySet):
        duel.set_value(0, 1, 5)


def test_set_value_type():
    with pytest.raises(TypeError):
        Duel(['A', 'B']).set_value(0, 1, 2.5)


def test_margins_and_beats():
    duel = Duel.from_rows('AB', [[0, 7], [3, 0]])
    assert duel.margin(0, 1) == 4
    assert duel.margin(1, 0) == -4
    assert duel.beats(0, 1)
    assert not duel.beats(1, 0)
    assert duel.total() == 10
    assert duel.total(1) == 3
    assert duel.counts() == {(0, 1): 7, (1, 0): 3}


@pytest.mark.parametrize('rows', [
    [[0, 1]],
    [[0, 1], [1]],
    [[0, 1, 2], [1, 0, 2]],
])
def test_not_square(rows):
    with pytest.raises(DimensionMismatch):
        Duel.from_rows('AB', rows)
