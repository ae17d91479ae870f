import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))
import revparty.evaluate.majority_judgment
from revparty.evaluate.majority_judgment import \
    compute_majority_judgment_winners
from revparty.ballot import Ballot
from revparty.evaluate.core import JudgmentWinner


N = None

BALLOTS = {
    'fewest_opponents': (tuple('ABC'), [
        [3, 3, 2],
        [4, 3, 2],
        [2, 3, 5],
        [4, 1, 5],
        [1, 4, N],
    ]),
    'most_partisans': (tuple('AB'), [
        [1, 2],
        [3, 3],
        [3, 3],
        [5, 3],
    ]),
    'clear': (tuple('AB'), [
        [5, 1],
        [4, 2],
        [N, 3],
    ]),
    'full_tie': (tuple('AB'), [
        [1, 2],
        [2, 1],
    ]),
}


@pytest.fixture(scope='module')
def ballots():
    return {
        name: Ballot.from_rows(labels, rows)
        for name, (labels, rows) in BALLOTS.items()
    }


RESULTS = {
    'fewest_opponents': [JudgmentWinner('B', 3, 0.2, 0.2)],
    'most_partisans': [JudgmentWinner('A', 3, 0.25, 0.25)],
    'clear': [JudgmentWinner('A', 4, 1 / 3, 1 / 3)],
    'full_tie': [
        JudgmentWinner('A', 1, 0.0, 0.5),
        JudgmentWinner('B', 1, 0.0, 0.5),
    ],
}


@pytest.mark.parametrize('ballot_name, expected', RESULTS.items())
def test_majority_judgment(ballots, ballot_name, expected):
    assert compute_majority_judgment_winners(ballots[ballot_name]) == expected


def test_profile(ballots):
    evaluator = revparty.evaluate.majority_judgment.MajorityJudgment()
    assert evaluator.profile(ballots['fewest_opponents'], 2) == (2, 0.2, 0.4)


def test_unset_grade(ballots):
    evaluator = revparty.evaluate.majority_judgment.MajorityJudgment(
        unset_grade=5
    )
    assert evaluator.grades(ballots['clear'], 0) == [4, 5, 5]
    assert evaluator.evaluate(ballots['clear']) == [
        JudgmentWinner('A', 5, 1 / 3, 0.0)
    ]


@pytest.mark.parametrize('ballot', [
    Ballot(0, 'AB'),
    Ballot(3, []),
])
def test_empty(ballot):
    evaluator = revparty.evaluate.majority_judgment.MajorityJudgment()
    assert evaluator.evaluate(ballot) == []
