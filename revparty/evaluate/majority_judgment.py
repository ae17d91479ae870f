'''Majority Judgment, a median-based evaluator of graded ballots.

The ballot cells hold grades instead of ranks, higher grades being better.
Each candidate's majority grade is the lower median of the grades they
received. Candidates sharing the best majority grade are separated by the
shares of voters grading them below their majority grade (opponents) and
above it (partisans).
'''

import logging
import statistics
from numbers import Number
from typing import List, Tuple

import revparty.util
import revparty.evaluate.core
from revparty.ballot import Ballot, NO_OPINION
from revparty.evaluate.core import JudgmentWinner

logger = logging.getLogger(__name__)


class MajorityJudgment(revparty.evaluate.core.Evaluator):
    '''Majority Judgment evaluator.

    Ties in the majority grade are broken by keeping the candidates with
    the smallest share of opponents and then, among those, the candidates
    with the largest share of partisans. Candidates still tied after that
    are all returned.

    :param unset_grade: Grade counted for a candidate the voter did not
        grade.
    '''
    def __init__(self, unset_grade: Number = 0):
        self.unset_grade = unset_grade

    def grades(self, ballot: Ballot, candidate: int) -> List[Number]:
        '''Return all grades of a candidate in ascending order.'''
        return sorted(
            self.unset_grade if grade is NO_OPINION else grade
            for grade in ballot.column(candidate)
        )

    def profile(self, ballot: Ballot, candidate: int
                ) -> Tuple[Number, float, float]:
        '''Compute the majority grade and the opponent and partisan shares.

        :param ballot: Graded ballots with at least one voter.
        :param candidate: Candidate index.
        :returns: A tuple of the majority grade, the fraction of voters
            grading below it and the fraction grading above it.
        '''
        grades = self.grades(ballot, candidate)
        median = statistics.median_low(grades)
        n_below = sum(1 for grade in grades if grade < median)
        n_above = sum(1 for grade in grades if grade > median)
        return median, n_below / len(grades), n_above / len(grades)

    def evaluate(self, ballot: Ballot) -> List[JudgmentWinner]:
        '''Select the candidates with the best majority grade.

        :param ballot: Graded ballots.
        :returns: Winners scored by their majority grade; empty if there
            are no candidates or no voters.
        '''
        if ballot.n_voters == 0 or ballot.n_candidates == 0:
            return []
        profiles = [
            self.profile(ballot, cand) for cand in range(ballot.n_candidates)
        ]
        tied = revparty.util.best_indices([prof[0] for prof in profiles])
        if len(tied) > 1:
            logger.debug('majority grade %s shared by %d candidates',
                         profiles[tied[0]][0], len(tied))
            tied = self._tiebreak(profiles, tied)
        return [
            JudgmentWinner(ballot.index_to_label(cand), *profiles[cand])
            for cand in tied
        ]

    @staticmethod
    def _tiebreak(profiles: List[Tuple[Number, float, float]],
                  tied: List[int],
                  ) -> List[int]:
        least_opposed = [
            tied[i] for i in revparty.util.best_indices(
                [profiles[cand][1] for cand in tied], lowest=True
            )
        ]
        return [
            least_opposed[i] for i in revparty.util.best_indices(
                [profiles[cand][2] for cand in least_opposed]
            )
        ]


EVALUATORS = {
    'majority_judgment': MajorityJudgment(),
}


def compute_majority_judgment_winners(ballot: Ballot
                                      ) -> List[JudgmentWinner]:
    '''Select the winners by Majority Judgment.'''
    return EVALUATORS['majority_judgment'].evaluate(ballot)
