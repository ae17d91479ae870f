'''Candidate labels and their validation.

Within an election, candidates are identified by a stable integer index
(``0..n-1``, the column of the ballot or the row/column of the duel matrix)
and carry a display label. Labels are plain strings; this module only checks
that a set of labels is usable and provides a two-way index between labels
and candidate indices.
'''

from typing import Any, Dict, Iterable, Tuple


MAX_LABEL: int = 256
'''Maximum length of a candidate label, in characters.'''


class CandidateError(ValueError):
    '''A candidate label is invalid in the given context.

    E.g. an empty or overly long label, two candidates sharing a label, or
    a lookup of a label that is not standing in the election.

    :param candidate: Label that was found to be invalid.
    :param reason: What is wrong with it.
    '''
    def __init__(self, candidate: Any, reason: str = 'invalid'):
        self.candidate = candidate
        self.reason = reason
        super().__init__(f'{reason} candidate: {candidate!r}')


def validate_label(label: str) -> None:
    '''Check that a single label can name a candidate.

    :param label: The candidate label.
    :raises CandidateError: If the label is not a non-empty string of at most
        :data:`MAX_LABEL` characters.
    '''
    if not isinstance(label, str):
        raise CandidateError(label, 'non-string label for')
    if not label:
        raise CandidateError(label, 'empty label for')
    if len(label) > MAX_LABEL:
        raise CandidateError(
            label, f'label longer than {MAX_LABEL} characters for'
        )


def validate_labels(labels: Iterable[str]) -> Tuple[str, ...]:
    '''Validate a full list of candidate labels and freeze it.

    :param labels: Labels in candidate index order.
    :returns: The labels as an immutable tuple.
    :raises CandidateError: If any label is invalid or appears twice.
    '''
    frozen = tuple(labels)
    seen = set()
    for label in frozen:
        validate_label(label)
        if label in seen:
            raise CandidateError(label, 'duplicate')
        seen.add(label)
    return frozen


class LabelIndex:
    '''Bidirectional mapping between candidate labels and indices.

    :param labels: Candidate labels in index order.
    '''
    def __init__(self, labels: Iterable[str]):
        self.labels = validate_labels(labels)
        self._indices: Dict[str, int] = {
            label: i for i, label in enumerate(self.labels)
        }

    def __len__(self) -> int:
        return len(self.labels)

    def __contains__(self, label: str) -> bool:
        return label in self._indices

    def index(self, label: str) -> int:
        '''Return the candidate index of a label.

        :raises CandidateError: If no candidate carries the label.
        '''
        try:
            return self._indices[label]
        except KeyError:
            raise CandidateError(label, 'unknown') from None

    def label(self, index: int) -> str:
        '''Return the label of the candidate at the given index.'''
        if not 0 <= index < len(self.labels):
            raise IndexError(
                f'candidate index {index} out of range for'
                f' {len(self.labels)} candidates'
            )
        return self.labels[index]
