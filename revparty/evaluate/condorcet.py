'''Condorcet selection evaluators.

These evaluators work by examining pairwise orderings between candidates
(how many voters prefer one candidate to another), which is also the form of
votes they take in: a :class:`revparty.duel.Duel`. If you have ranked ballots,
use :func:`revparty.duel.build_duel_from_ballot` to convert them first.

All of the resolvers in this module first look for a Condorcet winner and
return it alone when there is one; only otherwise do they apply their own
rule to break the pairwise cycle.

These evaluators only take few parameters; therefore, a dictionary of their
instances with different setups is provided in the ``EVALUATORS`` module
variable.
'''

import abc
import logging
from typing import List, Optional, Union, Callable

import revparty.util
import revparty.evaluate.core
import revparty.component.pairwin_scorer
from revparty.duel import Duel
from revparty.evaluate.core import Winner
from revparty.graph import Arc, Graph, arc_tuples

logger = logging.getLogger(__name__)


def pairwise_win_counts(duel: Duel) -> List[int]:
    '''Count the number of candidates each candidate strictly beats pairwise.

    :param duel: Pairwise vote counts.
    :returns: Win counts by candidate index.
    '''
    wins = [0] * duel.n_candidates
    for winner, loser in duel.pairs():
        if duel.beats(winner, loser):
            wins[winner] += 1
    return wins


class CondorcetWinner(revparty.evaluate.core.SingleWinnerCriterion):
    '''Condorcet winner selector.

    Returns the candidate whose number of strict pairwise victories is
    greater than that of every other candidate, scored by that number.
    If the maximum is shared, there is no Condorcet winner and None is
    returned. A lone candidate wins with no victories.
    '''
    def evaluate(self, duel: Duel) -> Optional[Winner]:
        '''Select the Condorcet winner, if there is one.

        :param duel: Pairwise vote counts.
        '''
        wins = pairwise_win_counts(duel)
        leaders = revparty.util.best_indices(wins)
        if len(leaders) != 1:
            logger.debug('no Condorcet winner, top win count shared by %d',
                         len(leaders))
            return None
        leader = leaders[0]
        return Winner(duel.index_to_label(leader), wins[leader])


class CondorcetResolver(revparty.evaluate.core.Evaluator):
    '''Base for evaluators resolving the absence of a Condorcet winner.

    Subclasses implement :meth:`resolve`, which is only called when the
    Condorcet criterion does not designate a winner by itself.
    '''
    criterion = CondorcetWinner()

    def evaluate(self, duel: Duel) -> List[Winner]:
        '''Select the winners from pairwise vote counts.

        :param duel: Pairwise vote counts; only read.
        :returns: The Condorcet winner alone if there is one, otherwise all
            candidates tied under the resolving rule. Empty without
            candidates, or when several candidates stand and nobody
            expressed any pairwise preference.
        '''
        if duel.n_candidates == 0:
            return []
        if duel.n_candidates > 1 and duel.total() == 0:
            logger.debug('no pairwise preferences recorded')
            return []
        condorcet = self.criterion.evaluate(duel)
        if condorcet is not None:
            return [condorcet]
        winners = self.resolve(duel)
        logger.info('%s resolved %d winner(s): %s',
                    self.__class__.__name__, len(winners),
                    ', '.join(winner.name for winner in winners))
        return winners

    @abc.abstractmethod
    def resolve(self, duel: Duel) -> List[Winner]:
        raise NotImplementedError


class MinimaxCondorcet(CondorcetResolver):
    '''Minimax Condorcet selection evaluator.

    Also known as successive reversal or Simpson-Kramer method.
    Selects as the winner the candidate whose greatest pairwise defeat is
    smaller than the greatest pairwise defeat of any other candidate.

    The magnitude of the pairwise defeat can be measured in different ways
    according to the pairwise win scorer provided. The default measures it
    by the raw number of votes the opponent collected against the candidate,
    regardless of the candidate's own votes.

    :param pairwin_scoring: A pairwise win scorer callable. Most common
        variants are found in the :mod:`revparty.component.pairwin_scorer`
        module and can be referred to by their names.
    '''
    def __init__(self,
                 pairwin_scoring: Union[str, Callable] = 'pairwise_opposition',
                 ):
        self.pairwin_scoring = revparty.component.pairwin_scorer.construct(
            pairwin_scoring
        )

    def worst_defeats(self, duel: Duel) -> List[int]:
        '''Return the greatest defeat score of each candidate.

        A candidate without opponents scores zero.
        '''
        worst: List[Optional[int]] = [None] * duel.n_candidates
        for (opponent, cand), score in self.pairwin_scoring(duel).items():
            if worst[cand] is None or score > worst[cand]:
                worst[cand] = score
        return [0 if score is None else score for score in worst]

    def resolve(self, duel: Duel) -> List[Winner]:
        worst = self.worst_defeats(duel)
        logger.debug('minimax worst defeats: %s', worst)
        return revparty.evaluate.core.winners_by_score(
            duel, worst, lowest=True
        )


class RankedPairs(CondorcetResolver):
    '''Tideman's ranked pairs Condorcet selection evaluator.

    Locks pairwise victories into a preference graph in order of decreasing
    strength (the winner's vote count), skipping those that would close
    a cycle with the already locked ones. The candidates with the most
    locked victories win.

    Victories of equal strength are locked in the order of the winner's
    candidate index, then the loser's, so that the result is deterministic.
    '''
    @staticmethod
    def victory_arcs(duel: Duel) -> List[Arc]:
        '''Create an arc from the winner to the loser of each decided pair.

        Tied pairs produce no arc. The arcs are returned in locking order.
        '''
        arcs = []
        for cand1, cand2 in duel.pairs():
            if duel.beats(cand1, cand2):
                arcs.append(Arc(cand1, cand2, duel.value(cand1, cand2)))
        return sorted(
            arcs, key=lambda arc: (-arc.weight, arc.source, arc.dest)
        )

    def lock(self, duel: Duel) -> Graph:
        '''Build the acyclic preference graph of locked victories.

        :param duel: Pairwise vote counts.
        :returns: A graph over all candidates containing the locked arcs.
        '''
        graph = Graph(duel.n_candidates, duel.labels)
        for arc in self.victory_arcs(duel):
            if graph.would_create_cycle(arc):
                logger.debug('skipping %s > %s (%d), would create a cycle',
                             graph.label(arc.source), graph.label(arc.dest),
                             arc.weight)
            else:
                graph.add_arc(arc)
        logger.debug('locked pairs: %s', arc_tuples(graph))
        return graph

    def resolve(self, duel: Duel) -> List[Winner]:
        return revparty.evaluate.core.winners_by_score(
            duel, self.lock(duel).out_degrees()
        )


class Schulze(CondorcetResolver):
    '''Schulze (beatpath) Condorcet selection evaluator.

    Also called Schwartz Sequential dropping or path voting. Finds paths
    between pairs of candidates in which each candidate pairwise beats the next
    and then selects the candidates with strongest such paths.

    The strength of a path is its weakest link; a link from a pairwise winner
    to the loser is as strong as the winner's vote count while links in
    the opposite direction (and between tied candidates) have zero strength.
    The winners are the candidates whose strongest paths to the most
    opponents are at least as strong as the opponents' paths back.
    '''
    @staticmethod
    def strength_graph(duel: Duel) -> Graph:
        '''Build the graph of strongest path strengths.

        Every ordered pair of candidates gets an arc. It is seeded with the
        winner's vote count for the pairwise winner and zero for the loser
        (and for both of tied candidates), then widened until no path
        through an intermediate candidate is stronger.

        :param duel: Pairwise vote counts.
        '''
        graph = Graph(duel.n_candidates, duel.labels)
        for cand1, cand2 in duel.pairs():
            graph.add(
                cand1, cand2,
                duel.value(cand1, cand2) if duel.beats(cand1, cand2) else 0
            )
        n = duel.n_candidates
        for cand_aug in range(n):
            for cand1 in range(n):
                if cand1 == cand_aug:
                    continue
                for cand2 in range(n):
                    if cand2 in (cand1, cand_aug):
                        continue
                    through = min(graph.weight(cand1, cand_aug),
                                  graph.weight(cand_aug, cand2))
                    if through > graph.weight(cand1, cand2):
                        graph.set_weight(cand1, cand2, through)
        return graph

    @classmethod
    def widest_paths(cls, duel: Duel) -> List[List[int]]:
        '''Compute the strongest path strengths between all candidate pairs.

        :param duel: Pairwise vote counts.
        :returns: A square matrix of path strengths, indexed
            ``[source][destination]``; the diagonal is zero.
        '''
        graph = cls.strength_graph(duel)
        return [
            [graph.weight(cand1, cand2) for cand2 in range(graph.n_vertices)]
            for cand1 in range(graph.n_vertices)
        ]

    @classmethod
    def path_duel(cls, duel: Duel) -> Duel:
        '''Return the path strengths as a new duel over the same candidates.'''
        return Duel.from_rows(duel.labels, cls.widest_paths(duel))

    @staticmethod
    def dominance_counts(paths: List[List[int]]) -> List[int]:
        '''Count the opponents whose paths back are not stronger.'''
        n = len(paths)
        return [
            sum(
                1 for other in range(n)
                if other != cand and paths[cand][other] >= paths[other][cand]
            )
            for cand in range(n)
        ]

    def resolve(self, duel: Duel) -> List[Winner]:
        paths = self.widest_paths(duel)
        logger.debug('schulze path strengths: %s', paths)
        return revparty.evaluate.core.winners_by_score(
            duel, self.dominance_counts(paths)
        )


EVALUATORS = {
    'condorcet': CondorcetWinner(),
    'minimax': MinimaxCondorcet(),
    'minimax_wv': MinimaxCondorcet(pairwin_scoring='winning_votes'),
    'minimax_margins': MinimaxCondorcet(pairwin_scoring='margins'),
    'ranked_pairs': RankedPairs(),
    'schulze': Schulze(),
}


def compute_condorcet_winner(duel: Duel) -> Optional[Winner]:
    '''Return the Condorcet winner of the duel, or None if there is none.'''
    return EVALUATORS['condorcet'].evaluate(duel)


def compute_minimax_winners(duel: Duel) -> List[Winner]:
    '''Select the winners by Minimax (pairwise opposition).'''
    return EVALUATORS['minimax'].evaluate(duel)


def compute_ranked_pairs_winners(duel: Duel) -> List[Winner]:
    '''Select the winners by Ranked Pairs.'''
    return EVALUATORS['ranked_pairs'].evaluate(duel)


def compute_schulze_winners(duel: Duel) -> List[Winner]:
    '''Select the winners by the Schulze method.'''
    return EVALUATORS['schulze'].evaluate(duel)
