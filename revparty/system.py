'''Named voting systems available for elections.

Every system wraps an evaluator and declares which kinds of input files it
can evaluate: ranked ballots, duel matrices or graded ballots (judgments).
Systems working on duel matrices can also take ranked ballots, which are
converted to a duel first.
'''

from typing import Dict, Iterable, List

import revparty.evaluate.core
import revparty.evaluate.condorcet
import revparty.evaluate.single_member
import revparty.evaluate.majority_judgment
from revparty.duel import build_duel_from_ballot

BALLOT = 'ballot'
DUEL = 'duel'
JUDGMENT = 'judgment'
INPUT_KINDS = (BALLOT, DUEL, JUDGMENT)


class VotingSystem:
    '''A named voting system. Wraps an election evaluator.

    :param name: Name of the system, shown in the results.
    :param evaluator: Evaluator representing the system.
    :param accepts: Kinds of input the evaluator can take directly.
    '''
    def __init__(self,
                 name: str,
                 evaluator: revparty.evaluate.core.Evaluator,
                 accepts: Iterable[str],
                 ):
        self.name = name
        self.evaluator = evaluator
        self.accepts = frozenset(accepts)

    def evaluate(self, votes) -> List[revparty.evaluate.core.Winner]:
        '''Return the evaluator's results of the system for the votes given.'''
        return self.evaluator.evaluate(votes)

    def __repr__(self) -> str:
        return f'<VotingSystem({self.name!r})>'


SYSTEMS = {
    'uni1': VotingSystem(
        'One-round plurality',
        revparty.evaluate.single_member.OneRound(),
        [BALLOT],
    ),
    'uni2': VotingSystem(
        'Two-round plurality',
        revparty.evaluate.single_member.TwoRounds(),
        [BALLOT],
    ),
    'cm': VotingSystem(
        'Condorcet Minimax',
        revparty.evaluate.condorcet.MinimaxCondorcet(),
        [DUEL],
    ),
    'cp': VotingSystem(
        'Condorcet Ranked Pairs',
        revparty.evaluate.condorcet.RankedPairs(),
        [DUEL],
    ),
    'cs': VotingSystem(
        'Condorcet Schulze',
        revparty.evaluate.condorcet.Schulze(),
        [DUEL],
    ),
    'jm': VotingSystem(
        'Majority Judgment',
        revparty.evaluate.majority_judgment.MajorityJudgment(),
        [JUDGMENT, BALLOT],
    ),
}


def _ranked_condorcet(system: VotingSystem) -> VotingSystem:
    return VotingSystem(
        system.name,
        revparty.evaluate.core.PreConverted(
            converter=build_duel_from_ballot,
            evaluator=system.evaluator,
        ),
        [BALLOT],
    )


def get_available_systems(input_kind: str) -> Dict[str, VotingSystem]:
    '''Select the systems able to evaluate the given kind of input.

    Duel-based systems are wrapped to convert ranked ballots when given
    ballot input.

    :param input_kind: One of ``ballot``, ``duel`` or ``judgment``.
    :raises ValueError: For an unknown input kind.
    '''
    if input_kind not in INPUT_KINDS:
        raise ValueError(
            f'invalid input kind: {input_kind}, supported: '
            + ', '.join(INPUT_KINDS)
        )
    available = {}
    for key, system in SYSTEMS.items():
        if input_kind in system.accepts:
            available[key] = system
        elif input_kind == BALLOT and DUEL in system.accepts:
            available[key] = _ranked_condorcet(system)
    return available
