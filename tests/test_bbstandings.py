import pytest

from bberrors import DataIntegrityError
from bbstandings import POINTS_PER_WIN, Standings
from bbteam import Team


@pytest.fixture
def standings():
    teams = [Team(f'T{ii}', f'Team {ii}', is_player=(ii == 0)) for ii in range(4)]
    return Standings(teams)


def test_win_and_loss_recorded(standings):
    standings.update_standings('T2', 'T0')
    assert standings.records['T2'] == {'wins': 1, 'losses': 0, 'points': POINTS_PER_WIN}
    assert standings.records['T0'] == {'wins': 0, 'losses': 1, 'points': 0}


def test_sorted_by_wins_ties_keep_registration_order(standings):
    standings.update_standings('T3', 'T0')
    standings.update_standings('T1', 'T2')
    order = [row['team_id'] for row in standings.get_sorted_standings()]
    assert order == ['T1', 'T3', 'T0', 'T2']


def test_games_back_and_pct(standings):
    standings.update_standings('T1', 'T0')
    standings.update_standings('T1', 'T2')
    rows = {row['team_id']: row for row in standings.get_sorted_standings()}
    assert rows['T1']['games_back'] == 0
    assert rows['T0']['games_back'] == 1.5
    assert rows['T3']['games_back'] == 1.0
    assert rows['T1']['pct'] == 1.0
    assert rows['T3']['pct'] == 0.0
    assert standings.games_back('T2') == 1.5


def test_draft_order_worst_first(standings):
    standings.update_standings('T1', 'T0')
    standings.update_standings('T1', 'T2')
    standings.update_standings('T3', 'T2')
    assert standings.get_draft_order() == ['T2', 'T0', 'T3', 'T1']


@pytest.mark.parametrize('winner_id, loser_id', [('T9', 'T0'), ('T0', 'T9'), ('T1', 'T1')])
def test_bad_update_changes_nothing(standings, winner_id, loser_id):
    before = standings.to_dict()
    with pytest.raises(DataIntegrityError):
        standings.update_standings(winner_id, loser_id)
    assert standings.to_dict() == before


def test_reset(standings):
    standings.update_standings('T1', 'T0')
    standings.reset()
    assert all(record['wins'] == 0 and record['losses'] == 0 for record in standings.records.values())


def test_standings_table_marks_human_team(standings):
    standings.update_standings('T0', 'T1')
    table = standings.standings_table()
    assert 'Team 0 *' in table
    assert '1-0' in table
