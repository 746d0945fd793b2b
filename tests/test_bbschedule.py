from collections import Counter

import pytest

from bberrors import ConfigurationError, DataIntegrityError
from bbschedule import Fixture, Schedule, generate_schedule
from bbteam import Team


def make_teams(count):
    return [Team(f'T{ii}', f'Team {ii}') for ii in range(count)]


@pytest.mark.parametrize('num_teams', [2, 4, 6, 8, 10])
def test_double_round_robin(num_teams):
    teams = make_teams(num_teams)
    rounds = generate_schedule(teams)
    assert len(rounds) == 2 * (num_teams - 1)
    pairs = Counter()
    for round_fixtures in rounds:
        assert len(round_fixtures) == num_teams // 2
        playing = [team.team_id for fixture in round_fixtures for team in (fixture.home, fixture.away)]
        assert sorted(playing) == sorted(team.team_id for team in teams)  # everyone plays once a round
        for fixture in round_fixtures:
            pairs[(fixture.home.team_id, fixture.away.team_id)] += 1
    expected = {(a.team_id, b.team_id) for a in teams for b in teams if a is not b}
    assert set(pairs) == expected
    assert set(pairs.values()) == {1}


def test_second_half_mirrors_first_half():
    rounds = generate_schedule(make_teams(4))
    for first, second in zip(rounds[:3], rounds[3:]):
        assert [(f.home, f.away) for f in first] == [(f.away, f.home) for f in second]


@pytest.mark.parametrize('num_teams', [0, 1, 3, 7])
def test_odd_or_tiny_leagues_raise(num_teams):
    with pytest.raises(ConfigurationError):
        generate_schedule(make_teams(num_teams))


def test_failed_generate_keeps_old_schedule():
    schedule = Schedule(make_teams(4))
    schedule.advance_round()
    with pytest.raises(ConfigurationError):
        schedule.generate(make_teams(3))
    assert schedule.total_rounds == 6
    assert schedule.current_round_index == 1


def test_round_cursor():
    teams = make_teams(2)
    schedule = Schedule(teams)
    assert schedule.round_number == 1
    assert schedule.fixture_for_team('T1') is schedule.get_current_round()[0]
    schedule.advance_round()
    schedule.advance_round()
    assert schedule.is_season_complete()
    assert schedule.get_current_round() is None
    assert schedule.fixture_for_team('T0') is None
    schedule.advance_round()
    assert schedule.current_round_index == 2


def test_empty_schedule_is_complete():
    assert Schedule().is_season_complete()


def test_fixture_records_once():
    home, away = make_teams(2)
    fixture = Fixture(home, away)
    assert not fixture.is_played
    fixture.record(3, 5)
    assert fixture.winner_loser() == (away, home)
    with pytest.raises(DataIntegrityError):
        fixture.record(6, 5)
    assert fixture.result == (3, 5)
    assert fixture.to_dict() == {'home': 'T0', 'away': 'T1', 'result': [3, 5]}
