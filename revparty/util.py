'''Various utility functions for other modules of revparty.

There should normally be no need to use these functions directly.
'''

from typing import List, Sequence
from numbers import Number


def best_indices(scores: Sequence[Number],
                 lowest: bool = False,
                 ) -> List[int]:
    '''Return the positions of all maximum (or minimum) values, in order.

    :param scores: Scores by candidate index.
    :param lowest: Look for the minimum instead of the maximum.
    :returns: Indices of all tied best scores; empty for empty input.
    '''
    if not scores:
        return []
    best = min(scores) if lowest else max(scores)
    return [i for i, score in enumerate(scores) if score == best]


def distinct_top(scores: Sequence[Number], n: int) -> List[Number]:
    '''Return the n highest distinct values, in descending order.'''
    return sorted(set(scores), reverse=True)[:n]


def percentage(part: Number, total: Number) -> float:
    '''Express part as a percentage of total, zero for an empty total.'''
    if not total:
        return 0.0
    return 100 * part / total
