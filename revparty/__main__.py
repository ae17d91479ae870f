"""A commandline tool for evaluating single-winner elections from CSV files.

Reads ranked ballots, a duel matrix or graded ballots (judgments) and
evaluates the election by one or all of the compatible voting methods.
"""

import argparse
import io
import logging
import warnings
from typing import Dict, List, Optional, Union

import revparty.system
import revparty.io.core
import revparty.io.csvfile
from revparty.ballot import Ballot
from revparty.duel import Duel
from revparty.evaluate.core import Winner, RoundWinner, JudgmentWinner
from revparty.system import VotingSystem, BALLOT, DUEL, JUDGMENT

argparser = argparse.ArgumentParser(
    prog='revparty',
    description=__doc__,
    formatter_class=argparse.ArgumentDefaultsHelpFormatter,
)
input_group = argparser.add_mutually_exclusive_group()
input_group.add_argument(
    '-i', '--ballot-file',
    type=argparse.FileType('r', encoding='utf8'),
    help='CSV file to load ranked ballots from',
)
input_group.add_argument(
    '-d', '--duel-file',
    type=argparse.FileType('r', encoding='utf8'),
    help='CSV file to load a duel matrix from',
)
input_group.add_argument(
    '-j', '--judgment-file',
    type=argparse.FileType('r', encoding='utf8'),
    help='CSV file to load graded ballots from (majority judgment only)',
)
argparser.add_argument(
    '-m', '--method',
    choices=list(revparty.system.SYSTEMS) + ['all'],
    default='all',
    help='voting method to use',
)
argparser.add_argument(
    '-o', '--output-file',
    help='write log messages to this file instead of standard error',
)
argparser.add_argument(
    '--skip-columns',
    type=int,
    default=revparty.io.csvfile.DEFAULT_SKIP_COLUMNS,
    help='number of leading metadata columns in ballot files',
)
argparser.add_argument(
    '-v', '--verbose',
    action='store_true',
    help='show all evaluator log messages and other info',
)
argparser.add_argument(
    '-q', '--quiet',
    action='store_true',
    help='do not show any evaluator log messages or other info',
)


def main(ballot_file: Optional[io.TextIOBase] = None,
         duel_file: Optional[io.TextIOBase] = None,
         judgment_file: Optional[io.TextIOBase] = None,
         method: str = 'all',
         output_file: Optional[str] = None,
         skip_columns: int = revparty.io.csvfile.DEFAULT_SKIP_COLUMNS,
         verbose: bool = False,
         quiet: bool = False,
         ) -> None:
    logging.basicConfig(
        level=(
            logging.DEBUG if verbose
            else (logging.WARNING if quiet else logging.INFO)
        ),
        format='%(levelname)-10s %(message)s',
        filename=output_file,
    )
    if duel_file is not None:
        input_kind = DUEL
        votes = revparty.io.csvfile.load_duel(duel_file)
    elif judgment_file is not None:
        input_kind = JUDGMENT
        votes = revparty.io.csvfile.load_ballot(
            judgment_file, skip_columns=skip_columns
        )
    elif ballot_file is not None:
        input_kind = BALLOT
        votes = revparty.io.csvfile.load_ballot(
            ballot_file, skip_columns=skip_columns
        )
    else:
        raise ValueError('no input file given')
    use_systems = gather_systems(input_kind, method)
    if is_empty(votes):
        warnings.warn('empty input: cannot evaluate election, terminating')
        return
    show_vote_stats(votes, input_kind)
    for system in use_systems.values():
        run_one_system(system, votes)


def gather_systems(input_kind: str,
                   method: str = 'all',
                   ) -> Dict[str, VotingSystem]:
    """Select the desired voting systems compatible with the input."""
    avail_systems = revparty.system.get_available_systems(input_kind)
    if method == 'all':
        return avail_systems
    elif method in avail_systems:
        return {method: avail_systems[method]}
    else:
        raise ValueError(
            f'method {method} cannot evaluate a {input_kind} file,'
            ' available: ' + ', '.join(avail_systems.keys())
        )


def is_empty(votes: Union[Ballot, Duel]) -> bool:
    n_rows, n_cols = votes.shape
    return n_rows == 0 or n_cols == 0


def show_vote_stats(votes: Union[Ballot, Duel], input_kind: str) -> None:
    if input_kind == DUEL:
        print(f'Received a duel matrix of {votes.n_candidates} candidates')
    else:
        print(f'Received {votes.n_voters} {input_kind}s'
              f' for {votes.n_candidates} candidates')
    for label in votes.labels:
        print(' ' * 10 + label)


def format_winner(winner: Winner) -> List[str]:
    """Produce display columns for a winner record."""
    cols = [winner.name, f'{winner.score:g}']
    if isinstance(winner, RoundWinner):
        cols[1] += ' %'
        cols.append(f'round {winner.round}')
    elif isinstance(winner, JudgmentWinner):
        cols.append(f'below {winner.below:.1%}')
        cols.append(f'above {winner.above:.1%}')
    return cols


def show_elected_full(result: List[Winner]) -> None:
    """Show the winners as an aligned table."""
    if not result:
        print('Nobody elected')
        return
    rows = [format_winner(winner) for winner in result]
    widths = [
        max(len(row[i]) for row in rows if i < len(row))
        for i in range(max(len(row) for row in rows))
    ]
    for row in rows:
        print('   '.join(
            cell.ljust(width) for cell, width in zip(row, widths)
        ).rstrip())


def run_one_system(system: VotingSystem,
                   votes: Union[Ballot, Duel],
                   ) -> None:
    print()
    print(f'Running a {system.name} election')
    result = system.evaluate(votes)
    print('Election result:')
    show_elected_full(result)


if __name__ == '__main__':
    args = argparser.parse_args()
    if not (args.ballot_file or args.duel_file or args.judgment_file):
        argparser.print_usage()
    else:
        try:
            main(**vars(args))
        except (ValueError, revparty.io.core.ParseError) as err:
            argparser.error(str(err))
