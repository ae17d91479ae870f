'''Evaluate single-winner elections by Condorcet and other methods.

The engine takes ranked ballots (:class:`revparty.ballot.Ballot`), converts
them to a matrix of pairwise duels (:class:`revparty.duel.Duel`) and
selects the winners by the Condorcet criterion, resolving pairwise cycles by
Minimax, Ranked Pairs or the Schulze method. One- and two-round plurality and
Majority Judgment work on the ballots directly.
'''

from revparty.ballot import Ballot, NO_OPINION
from revparty.duel import Duel, build_duel_from_ballot
from revparty.evaluate.core import Winner, RoundWinner, JudgmentWinner
from revparty.evaluate.condorcet import (
    compute_condorcet_winner,
    compute_minimax_winners,
    compute_ranked_pairs_winners,
    compute_schulze_winners,
)
from revparty.evaluate.single_member import (
    compute_one_round_winners,
    compute_two_round_winners,
)
from revparty.evaluate.majority_judgment import (
    compute_majority_judgment_winners,
)
