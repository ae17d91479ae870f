'''Ballots - the voters' individual preferences.

A ballot is a table with one row per voter and one column per candidate.
Each cell holds the rank the voter gave the candidate (lower is more
preferred) or :data:`NO_OPINION` if the voter did not rank the candidate.
For Majority Judgment, the same structure holds grades instead of ranks
(higher is better); the evaluators define which reading they use.

Cells are write-once: a ballot is filled in by its loader and stays
read-only for all computations.
'''

from typing import Iterable, List, Optional, Sequence

from revparty.table import LabeledTable, UNSET


NO_OPINION = UNSET
'''Cell value of a candidate the voter expressed no opinion on.'''


class Ballot(LabeledTable):
    '''Ranked preferences of a fixed set of voters over a fixed candidate set.

    :param n_voters: Number of voters (rows).
    :param labels: Candidate labels (columns).
    '''
    def __init__(self, n_voters: int, labels: Iterable[str]):
        super().__init__(n_voters, labels)

    @classmethod
    def from_rows(cls,
                  labels: Sequence[str],
                  rows: Sequence[Sequence[Optional[int]]],
                  ) -> 'Ballot':
        '''Create a ballot and fill it with one row of ranks per voter.

        :param labels: Candidate labels.
        :param rows: Ranks given by each voter, in label order; ``None``
            stands for no opinion.
        :raises revparty.table.DimensionMismatch: If any row does not have
            one cell per candidate.
        '''
        ballot = cls(len(rows), labels)
        ballot.fill_rows(rows)
        return ballot

    @property
    def n_voters(self) -> int:
        return self.shape[0]

    @property
    def n_candidates(self) -> int:
        return self.shape[1]

    def rank(self, voter: int, candidate: int) -> Optional[int]:
        '''Return the voter's rank of the candidate, or NO_OPINION.'''
        return self.get(voter, candidate)

    def set_rank(self, voter: int, candidate: int, rank: int) -> None:
        '''Record the voter's rank of the candidate.

        :raises TypeError: If the rank is not an integer.
        :raises revparty.table.CellAlreadySet: If the voter already ranked
            the candidate.
        '''
        if isinstance(rank, bool) or not isinstance(rank, int):
            raise TypeError(f'rank must be an integer, got {rank!r}')
        self.set(voter, candidate, rank)

    def set(self, row: int, column: int, value: int) -> None:
        if value is NO_OPINION:
            raise TypeError('cannot explicitly set a cell to no opinion')
        super().set(row, column, value)

    def prefers(self, voter: int, cand1: int, cand2: int) -> int:
        '''Compare two candidates on one voter's ballot.

        Any valid rank beats no opinion; two missing opinions or two equal
        ranks are a non-preference.

        :returns: 1 if the voter strictly prefers cand1, -1 if they strictly
            prefer cand2, 0 otherwise.
        '''
        return _compare_ranks(self.rank(voter, cand1), self.rank(voter, cand2))

    def first_preference(self,
                         voter: int,
                         among: Optional[Sequence[int]] = None,
                         ) -> Optional[int]:
        '''Return the voter's single most preferred candidate.

        :param voter: Voter (row) index.
        :param among: Restrict the choice to these candidate indices;
            all candidates by default.
        :returns: Index of the only candidate holding the voter's best
            (lowest) rank, or None if that rank is shared or the voter
            ranked none of the candidates considered.
        '''
        if among is None:
            among = range(self.n_candidates)
        best_rank = None
        best: List[int] = []
        for cand in among:
            rank = self.rank(voter, cand)
            if rank is NO_OPINION:
                continue
            if best_rank is None or rank < best_rank:
                best_rank = rank
                best = [cand]
            elif rank == best_rank:
                best.append(cand)
        return best[0] if len(best) == 1 else None


def _compare_ranks(rank1: Optional[int], rank2: Optional[int]) -> int:
    if rank1 is NO_OPINION:
        return 0 if rank2 is NO_OPINION else -1
    elif rank2 is NO_OPINION:
        return 1
    elif rank1 < rank2:
        return 1
    elif rank2 < rank1:
        return -1
    else:
        return 0
