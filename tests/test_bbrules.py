import asyncio

import numpy as np
import pytest

from bbplayer import POSITIONS
from bbrules import BaseballRules, RuleSet


@pytest.fixture
def rules():
    return BaseballRules()


def test_rule_set_is_abstract():
    with pytest.raises(TypeError):
        RuleSet()


def test_positions_and_lineup_size(rules):
    assert rules.get_positions() == POSITIONS
    assert rules.get_lineup_size() == 9


def test_generated_stats_in_range(rules):
    rng = np.random.default_rng(21)
    for _ in range(20):
        for position in POSITIONS:
            stats = rules.generate_player_stats(position, rng)
            assert all(0 <= value <= 99 for value in stats.values())
            if position == 'P':
                assert stats['pitching'] >= 50
                assert stats['contact'] < 30
            else:
                assert stats['pitching'] == 0


def test_validate_lineup(rules, make_team):
    team = make_team()
    assert rules.validate_lineup(team)
    team.set_lineup_slot(4, None)
    assert not rules.validate_lineup(team)


def test_validate_lineup_needs_a_starter(rules, make_team):
    team = make_team()
    team.rotation[team.current_rotation_index] = None
    assert not rules.validate_lineup(team)


def test_young_player_improves(rules, make_player, scripted_rng):
    player = make_player('kid', 'SS', age=23, contact=50, power=50, speed=50, defense=50)
    rules.update_player_stats_for_age(player, scripted_rng(ints=[3, 2, 1, 0]))
    assert (player.contact, player.power, player.speed, player.defense) == (53, 52, 51, 50)


def test_veteran_pitcher_declines(rules, make_player, scripted_rng):
    pitcher = make_player('vet', 'P', age=36, pitching=60, stamina=2)
    rules.update_player_stats_for_age(pitcher, scripted_rng(ints=[-4, -4]))
    assert pitcher.pitching == 56
    assert pitcher.stamina == 0
    assert pitcher.contact == 50


def test_simulate_match(rules, make_team):
    home_score, away_score = asyncio.run(
        rules.simulate_match(make_team('H'), make_team('A'), None, np.random.default_rng(4), None))
    assert home_score != away_score


def test_validate_lineup_rejects_injured_players(rules, make_team):
    team = make_team()
    team.lineup_players()[3].injury_days = 4
    assert not rules.validate_lineup(team)


def test_validate_lineup_rejects_injured_starter(rules, make_team):
    team = make_team()
    team.current_starter().injury_days = 4
    assert not rules.validate_lineup(team)
