'''General evaluator machinery and result records.'''

import abc
import dataclasses
from typing import Callable, List, Optional, Sequence
from numbers import Number

import revparty.util
from revparty.table import LabeledTable


@dataclasses.dataclass(frozen=True)
class Winner:
    '''An elected candidate.

    The meaning of the score depends on the evaluator: the number of pairwise
    wins for the Condorcet winner, the worst pairwise defeat for Minimax,
    the number of locked victories for Ranked Pairs, the number of candidates
    dominated by path strength for Schulze, the percentage of voters for
    plurality and the majority grade for Majority Judgment.
    '''
    name: str
    score: Number


@dataclasses.dataclass(frozen=True)
class RoundWinner(Winner):
    '''A winner of a plurality election, with the round that decided it.'''
    round: int = 1


@dataclasses.dataclass(frozen=True)
class JudgmentWinner(Winner):
    '''A winner of a Majority Judgment election.

    :ivar below: Fraction of voters grading the winner below their majority
        grade (opponents).
    :ivar above: Fraction of voters grading the winner above their majority
        grade (partisans).
    '''
    below: float = 0.0
    above: float = 0.0


def winners_by_score(table: LabeledTable,
                     scores: Sequence[Number],
                     lowest: bool = False,
                     ) -> List[Winner]:
    '''Select all candidates sharing the best score as winners.

    :param table: The ballot or duel giving the candidate labels.
    :param scores: Scores by candidate index.
    :param lowest: Whether the lowest score is the best.
    :returns: Winner records in candidate index order.
    '''
    return [
        Winner(table.index_to_label(i), scores[i])
        for i in revparty.util.best_indices(scores, lowest=lowest)
    ]


class Evaluator(metaclass=abc.ABCMeta):
    '''Determine the winners of an election.

    A root abstract base class for all evaluators.
    '''
    @abc.abstractmethod
    def evaluate(self, votes) -> List[Winner]:
        '''Return the winners, several of them in case of an unresolved tie.

        :param votes: A ballot or a duel matrix, depending on the evaluator.
        '''
        raise NotImplementedError


class SingleWinnerCriterion(metaclass=abc.ABCMeta):
    '''A criterion that either designates one winner or none.'''
    @abc.abstractmethod
    def evaluate(self, votes) -> Optional[Winner]:
        raise NotImplementedError


class PreConverted(Evaluator):
    '''An evaluator whose votes are first run through a converter.

    Useful when the evaluator accepts a different form of votes than the
    actual ballots, e.g. when ranked ballots are given to a Condorcet
    evaluator that works on a duel matrix.

    :param converter: A function to apply on the votes before passing them
        to the evaluator, such as
        :func:`revparty.duel.build_duel_from_ballot`.
    :param evaluator: An evaluator to run.
    '''
    def __init__(self, converter: Callable, evaluator: Evaluator):
        self.converter = converter
        self.evaluator = evaluator

    def evaluate(self, votes) -> List[Winner]:
        return self.evaluator.evaluate(self.converter(votes))
