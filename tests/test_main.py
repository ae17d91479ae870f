import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import revparty.__main__

DATA_DIR = os.path.join(os.path.dirname(__file__), 'io', 'data')


def _open(name):
    return open(os.path.join(DATA_DIR, name), encoding='utf8')


def test_all_methods_on_ballot(capsys):
    with _open('ballot.csv') as ballot_file:
        revparty.__main__.main(ballot_file=ballot_file, quiet=True)
    out = capsys.readouterr().out
    assert 'Received 7 ballots for 3 candidates' in out
    for name in ['One-round plurality', 'Two-round plurality',
                 'Condorcet Minimax', 'Condorcet Ranked Pairs',
                 'Condorcet Schulze', 'Majority Judgment']:
        assert f'Running a {name} election' in out


def test_duel_schulze(capsys):
    with _open('duel.csv') as duel_file:
        revparty.__main__.main(duel_file=duel_file, method='cs', quiet=True)
    out = capsys.readouterr().out
    assert 'Received a duel matrix of 3 candidates' in out
    assert 'Running a Condorcet Schulze election' in out
    assert 'Minimax' not in out
    lines = out.splitlines()
    result_at = lines.index('Election result:')
    assert lines[result_at + 1:] == ['A   2', 'B   2', 'C   2']


def test_judgment(capsys):
    with _open('judgment.csv') as judgment_file:
        revparty.__main__.main(judgment_file=judgment_file, quiet=True)
    out = capsys.readouterr().out
    assert 'Running a Majority Judgment election' in out
    assert 'Bob   3   below 0.0%   above 25.0%' in out


@pytest.mark.parametrize('file_name, kwarg, method', [
    ('duel.csv', 'duel_file', 'uni1'),
    ('duel.csv', 'duel_file', 'jm'),
    ('judgment.csv', 'judgment_file', 'cs'),
])
def test_incompatible_method(file_name, kwarg, method):
    with _open(file_name) as file:
        with pytest.raises(ValueError):
            revparty.__main__.main(**{kwarg: file}, method=method,
                                   quiet=True)


def test_no_input():
    with pytest.raises(ValueError):
        revparty.__main__.main(quiet=True)


def test_empty_input(tmp_path):
    path = tmp_path / 'empty.csv'
    path.write_text('a,b,c,d,A,B\n', encoding='utf8')
    with open(path, encoding='utf8') as ballot_file:
        with pytest.warns(UserWarning, match='empty input'):
            revparty.__main__.main(ballot_file=ballot_file, quiet=True)


def test_argparser():
    args = revparty.__main__.argparser.parse_args(['-m', 'cp', '-v'])
    assert args.method == 'cp'
    assert args.verbose
    assert args.skip_columns == 4
    with pytest.raises(SystemExit):
        revparty.__main__.argparser.parse_args(['-m', 'borda'])
