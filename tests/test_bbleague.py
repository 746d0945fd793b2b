import numpy as np
import pytest

from bbconfig import LeagueSettings
from bberrors import ConfigurationError, DataIntegrityError, PostseasonError
from bbleague import League
from bbplayer import create_team_roster
from bbrules import BaseballRules
from bbteam import Team


@pytest.fixture
def league():
    rules = BaseballRules()
    rng = np.random.default_rng(17)
    settings = LeagueSettings(num_teams=4)
    player_team = Team('player', 'Madison Mallards', create_team_roster(rules, rng), budget=10 ** 9)
    new_league = League(rules, settings, rng)
    new_league.initialize(player_team)
    return new_league


def test_initialize_builds_the_league(league):
    assert len(league.teams) == 4
    assert len({team.name for team in league.teams}) == 4
    assert league.player_team().team_id == 'player'
    assert league.schedule.total_rounds == 6
    assert len(league.free_agents) == 10
    assert all(BaseballRules().validate_lineup(team) for team in league.teams)
    assert all(not team.is_player for team in league.teams[1:])


def test_record_result_credits_standings_once(league):
    fixture = league.get_current_round()[0]
    league.record_result(fixture, 2, 7)
    assert league.standings.records[fixture.away.team_id]['wins'] == 1
    assert league.standings.records[fixture.home.team_id]['losses'] == 1
    before = league.standings.to_dict()
    with pytest.raises(DataIntegrityError):
        league.record_result(fixture, 7, 2)
    assert league.standings.to_dict() == before


def test_quick_result_adds_team_runs(league):
    fixture = league.get_current_round()[0]
    league.record_result(fixture, 4, 1, quick=True)
    assert league.stats.team_totals[fixture.home.team_id]['RS'] == 4


def test_draft_order_and_standings(league):
    for fixture in league.get_current_round():
        league.record_result(fixture, 3, 1)
    standings = league.get_sorted_standings()
    assert [row['wins'] for row in standings] == [1, 1, 0, 0]
    assert league.get_draft_order()[-1] == standings[0]['team_id']


def test_sign_free_agent(league):
    team = league.player_team()
    team.release_player(team.roster[-1])
    free_agent = league.free_agents[0]
    budget = team.budget
    league.sign_free_agent(team, free_agent)
    assert free_agent in team.roster
    assert free_agent not in league.free_agents
    assert team.budget == budget - free_agent.signing_bonus


def test_sign_free_agent_full_roster_keeps_pool(league):
    team = league.player_team()
    free_agent = league.free_agents[0]
    with pytest.raises(ConfigurationError):
        league.sign_free_agent(team, free_agent)
    assert free_agent in league.free_agents


def test_only_free_agents_can_be_signed(league):
    with pytest.raises(ConfigurationError):
        league.sign_free_agent(league.player_team(), league.teams[1].roster[0])


def test_new_season_resets(league):
    for fixture in league.get_current_round():
        league.record_result(fixture, 3, 1)
    league.advance_round()
    league.new_season()
    assert league.season == 2
    assert league.schedule.current_round_index == 0
    assert all(record['wins'] == 0 for record in league.standings.records.values())


def test_find_team_and_to_dict(league):
    assert league.find_team('player') is league.player_team()
    assert league.find_team('nobody') is None
    data = league.to_dict()
    assert data['season'] == 1
    assert len(data['teams']) == 4
    assert len(data['schedule']['rounds']) == 6


@pytest.mark.parametrize('num_teams', [3, 7])
def test_odd_team_count_leaves_the_league_untouched(num_teams):
    rules = BaseballRules()
    rng = np.random.default_rng(3)
    settings = LeagueSettings(num_teams=4)
    settings.num_teams = num_teams
    player_team = Team('player', 'Madison Mallards', create_team_roster(rules, rng))
    new_league = League(rules, settings, rng)
    with pytest.raises(ConfigurationError):
        new_league.initialize(player_team)
    assert new_league.teams == []
    assert new_league.standings.records == {}
    assert new_league.schedule.total_rounds == 0
    assert not player_team.is_player


def play_out(league):
    while not league.is_season_complete():
        for fixture in league.get_current_round():
            league.record_result(fixture, 5, 3)
        league.advance_round()


def test_postseason_waits_for_the_last_round(league):
    with pytest.raises(PostseasonError):
        league.start_postseason()
    assert league.postseason is None


def test_postseason_seeded_from_the_standings(league):
    play_out(league)
    postseason = league.start_postseason()
    seeds = [row['team_id'] for row in league.get_sorted_standings()]
    assert [(s.home.team_id, s.away.team_id) for s in postseason.current_round()] == \
        [(seeds[0], seeds[3]), (seeds[1], seeds[2])]
    assert league.start_postseason() is postseason
    assert league.to_dict()['postseason']['seeds'][seeds[0]] == 1


def test_no_postseason_when_switched_off():
    rules = BaseballRules()
    rng = np.random.default_rng(23)
    new_league = League(rules, LeagueSettings(num_teams=4, playoff_teams=0), rng)
    new_league.initialize(Team('player', 'Madison Mallards', create_team_roster(rules, rng)))
    play_out(new_league)
    assert new_league.start_postseason() is None


def test_new_season_clears_the_postseason(league):
    play_out(league)
    league.start_postseason()
    league.new_season()
    assert league.postseason is None
