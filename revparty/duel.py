'''Duel matrices - head-to-head vote counts between all candidate pairs.

``duel[x, y]`` is the number of voters that strictly prefer candidate ``x``
to candidate ``y``. The two directions of a pair need not add up to the
number of voters since abstentions (ties and unranked candidates) are
dropped. A duel is either entered directly (e.g. loaded from a duel file,
each cell written once) or derived from a :class:`revparty.ballot.Ballot`
by :func:`build_duel_from_ballot`. The Condorcet evaluators only read it.
'''

import itertools
import logging
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from revparty.ballot import Ballot
from revparty.table import LabeledTable, UNSET

logger = logging.getLogger(__name__)


class Duel(LabeledTable):
    '''A square matrix of pairwise vote counts.

    Cells of a directly entered duel start unset and may be written once.
    An unset cell reads as zero votes.

    :param labels: Candidate labels, used for both rows and columns.
    :param fill: Initial value of all cells; zero for tallied duels.
    '''
    def __init__(self, labels: Iterable[str], fill: Optional[int] = UNSET):
        labels = tuple(labels)
        super().__init__(len(labels), labels, fill=fill)

    @classmethod
    def from_rows(cls,
                  labels: Sequence[str],
                  rows: Sequence[Sequence[Optional[int]]],
                  ) -> 'Duel':
        '''Create a duel from a full square matrix of counts.

        :param labels: Candidate labels.
        :param rows: One row per candidate, ``rows[x][y]`` being the number
            of voters preferring x over y; ``None`` cells stay unset.
        :raises revparty.table.DimensionMismatch: If the matrix is not
            square with one row and column per label.
        '''
        duel = cls(labels)
        duel.fill_rows(rows)
        return duel

    @classmethod
    def from_ballot(cls, ballot: Ballot) -> 'Duel':
        '''Tally a duel from ranked ballots. See build_duel_from_ballot.'''
        return build_duel_from_ballot(ballot)

    @property
    def n_candidates(self) -> int:
        return self.shape[1]

    def value(self, winner: int, loser: int) -> int:
        '''Return the number of voters preferring winner over loser.'''
        count = self.get(winner, loser)
        return 0 if count is UNSET else count

    def __getitem__(self, pair: Tuple[int, int]) -> int:
        return self.value(*pair)

    def set_value(self, winner: int, loser: int, count: int) -> None:
        '''Enter the number of voters preferring winner over loser.

        :raises revparty.table.CellAlreadySet: If the count was already
            entered.
        '''
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(f'vote count must be an integer, got {count!r}')
        self.set(winner, loser, count)

    def margin(self, cand1: int, cand2: int) -> int:
        '''Return how many more voters prefer cand1 to cand2 than vice versa.

        Negative for a pairwise defeat of cand1.
        '''
        return self.value(cand1, cand2) - self.value(cand2, cand1)

    def beats(self, cand1: int, cand2: int) -> bool:
        '''Whether cand1 strictly wins the head-to-head against cand2.'''
        return self.value(cand1, cand2) > self.value(cand2, cand1)

    def pairs(self) -> Iterator[Tuple[int, int]]:
        '''Iterate over all ordered pairs of distinct candidates.'''
        return itertools.permutations(range(self.n_candidates), 2)

    def counts(self) -> Dict[Tuple[int, int], int]:
        '''Return the vote counts of all ordered pairs as a dictionary.'''
        return {pair: self.value(*pair) for pair in self.pairs()}

    def total(self, winner: Optional[int] = None) -> int:
        '''Sum the counts of one candidate's row, or of the whole matrix.'''
        if winner is None:
            return sum(self.counts().values())
        return sum(
            self.value(winner, other)
            for other in range(self.n_candidates) if other != winner
        )

    def to_rows(self) -> List[List[int]]:
        '''Return the counts as a list of rows, the diagonal being zero.'''
        return [
            [self.value(x, y) if x != y else 0
             for y in range(self.n_candidates)]
            for x in range(self.n_candidates)
        ]


def build_duel_from_ballot(ballot: Ballot) -> Duel:
    '''Count pairwise preferences over all voters of a ballot.

    For every voter and every unordered pair of candidates, the candidate
    with the better (lower) rank gets one vote over the other; a ranked
    candidate beats an unranked one. Equal ranks and pairs of unranked
    candidates contribute nothing.

    :param ballot: Ranked ballots.
    :returns: A fully populated duel, zero where nobody expressed the
        preference.
    '''
    duel = Duel(ballot.labels, fill=0)
    cand_pairs = list(itertools.combinations(range(ballot.n_candidates), 2))
    for voter in range(ballot.n_voters):
        for cand1, cand2 in cand_pairs:
            preference = ballot.prefers(voter, cand1, cand2)
            if preference > 0:
                duel._increment(cand1, cand2)
            elif preference < 0:
                duel._increment(cand2, cand1)
    logger.debug('tallied %d voters into a %d-candidate duel',
                 ballot.n_voters, ballot.n_candidates)
    return duel
