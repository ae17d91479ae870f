'''Single-member plurality evaluators working on ranked ballots.

Every voter contributes a single vote to their first preference, which is
the only candidate holding their best (lowest) rank. Ballots where the best
rank is shared by several candidates, or where no candidate is ranked at
all, count for no one.

Scores of the winners are expressed as a percentage of all voters
(including those whose ballot did not count).
'''

import logging
from typing import List, Optional, Sequence

import revparty.util
import revparty.evaluate.core
from revparty.ballot import Ballot
from revparty.evaluate.core import RoundWinner

logger = logging.getLogger(__name__)


def first_preference_tally(ballot: Ballot,
                           among: Optional[Sequence[int]] = None,
                           ) -> List[int]:
    '''Count the first preferences of all voters.

    :param ballot: Ranked ballots.
    :param among: Only consider these candidate indices when looking for
        each voter's first preference; all candidates by default.
    :returns: Vote counts by candidate index; candidates outside ``among``
        receive zero.
    '''
    tally = [0] * ballot.n_candidates
    for voter in range(ballot.n_voters):
        choice = ballot.first_preference(voter, among=among)
        if choice is not None:
            tally[choice] += 1
    return tally


def _round_winners(ballot: Ballot,
                   tally: List[int],
                   round_no: int,
                   ) -> List[RoundWinner]:
    return [
        RoundWinner(
            ballot.index_to_label(i),
            revparty.util.percentage(tally[i], ballot.n_voters),
            round_no,
        )
        for i in revparty.util.best_indices(tally)
    ]


class OneRound(revparty.evaluate.core.Evaluator):
    '''First past the post on ranked ballots.

    The candidates with the most first preferences win. If no voter
    expressed a valid first preference, there is no winner.
    '''
    def evaluate(self, ballot: Ballot) -> List[RoundWinner]:
        '''Select the plurality winners.

        :param ballot: Ranked ballots.
        '''
        tally = first_preference_tally(ballot)
        if not any(tally):
            return []
        return _round_winners(ballot, tally, 1)


class TwoRounds(revparty.evaluate.core.Evaluator):
    '''Two-round plurality (runoff) on ranked ballots.

    The second round is simulated from the same ballots: the candidates with
    the two highest distinct first-round tallies advance (all of them if
    several share a tally) and each ballot is then counted for the voter's
    first preference among the advancing candidates.

    The election ends after the first round when its leader has an absolute
    majority of all voters, or when several candidates tie for the lead.
    '''
    def rounds(self, ballot: Ballot) -> List[List[int]]:
        '''Compute the tallies of all rounds held.

        :param ballot: Ranked ballots.
        :returns: One list of vote counts by candidate index per round; the
            second round tally is zero for eliminated candidates.
        '''
        first = first_preference_tally(ballot)
        leaders = revparty.util.best_indices(first)
        top = max(first, default=0)
        if top == 0 or len(leaders) > 1 or 2 * top > ballot.n_voters:
            return [first]
        thresholds = revparty.util.distinct_top(first, 2)
        advancing = [i for i, votes in enumerate(first)
                     if votes >= thresholds[-1]]
        logger.info('second round between %s',
                    ', '.join(ballot.index_to_label(i) for i in advancing))
        return [first, first_preference_tally(ballot, among=advancing)]

    def evaluate(self, ballot: Ballot) -> List[RoundWinner]:
        '''Select the winners of the two-round election.

        :param ballot: Ranked ballots.
        :returns: The winners of the last round held, with the round number.
        '''
        tallies = self.rounds(ballot)
        final = tallies[-1]
        if not any(final):
            return []
        return _round_winners(ballot, final, len(tallies))


EVALUATORS = {
    'one_round': OneRound(),
    'two_rounds': TwoRounds(),
}


def compute_one_round_winners(ballot: Ballot) -> List[RoundWinner]:
    '''Select the winners of a one-round plurality election.'''
    return EVALUATORS['one_round'].evaluate(ballot)


def compute_two_round_winners(ballot: Ballot) -> List[RoundWinner]:
    '''Select the winners of a two-round plurality election.'''
    return EVALUATORS['two_rounds'].evaluate(ballot)
