'''Functions to score magnitudes of wins between pairs of candidates.

These are used in the Condorcet evaluators to measure how strong a pairwise
victory (or how bad a pairwise defeat) is. Each scorer maps a duel to
a dictionary of scores keyed by ordered ``(winner, loser)`` candidate index
pairs, covering all ordered pairs of distinct candidates.
'''

from typing import Callable, Dict, Tuple

import revparty.component.core
from revparty.duel import Duel


PairScores = Dict[Tuple[int, int], int]

PAIRWIN_SCORERS: Dict[str, Callable[[Duel], PairScores]] = {}


pairwin_scorer_mark, get, construct = \
    revparty.component.core.register_functions(
        PAIRWIN_SCORERS, 'pairwise win scorer'
    )


@pairwin_scorer_mark
def winning_votes(duel: Duel) -> PairScores:
    '''Winning votes pairwise win scorer. Counts wins fully, zero otherwise.

    When more voters rank the pair in the given order than the other way
    round, the whole count is the strength of the win; losses and ties
    score zero.
    '''
    return {
        (cand1, cand2): (
            duel.value(cand1, cand2) if duel.beats(cand1, cand2) else 0
        )
        for cand1, cand2 in duel.pairs()
    }


@pairwin_scorer_mark
def margins(duel: Duel) -> PairScores:
    '''Margins pairwise win scorer. Takes the difference from reverse option.

    Negative for pairwise losses.
    '''
    return {pair: duel.margin(*pair) for pair in duel.pairs()}


@pairwin_scorer_mark
def pairwise_opposition(duel: Duel) -> PairScores:
    '''Pairwise opposition win scorer. Returns the raw counts unchanged.

    The number of voters ranking the pair in the given order, regardless of
    how many prefer the opposite.
    '''
    return duel.counts()
