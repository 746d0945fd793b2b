import numpy as np
import pytest

import bbroster
from bbplayer import FIELDING_ROLES, Player
from bbteam import Team


class ScriptedRng:
    """
    stand in for a numpy generator that hands out scripted rolls, then a default once the script runs out
    """
    def __init__(self, rolls=None, ints=None, default=0.5):
        self.rolls = list(rolls or [])
        self.ints = list(ints or [])
        self.default = default
        self.random_calls = 0
        self.integer_calls = 0

    def random(self):
        self.random_calls += 1
        return self.rolls.pop(0) if self.rolls else self.default

    def integers(self, low, high=None, size=None):
        self.integer_calls += 1
        if high is None:
            low, high = 0, low
        if size is None:
            return self.ints.pop(0) if self.ints else low
        values = [self.ints.pop(0) if self.ints else low for _ in range(size)]
        return np.array(values)


@pytest.fixture
def scripted_rng():
    return ScriptedRng


def build_player(player_id, position='CF', age=25, **stats):
    return Player(player_id, player_id, position, age, stats)


def build_team(team_id='T1', name=None, pitching=(70, 60, 50, 40, 30), is_player=False, rotation_size=5,
               hitter_stats=None, budget=0):
    """one hitter at every fielding role plus a DH, then the pitchers, lineup and rotation filled"""
    hitter_stats = {} if hitter_stats is None else hitter_stats
    roster = [build_player(f'{team_id}-{role}', role, **hitter_stats.get(role, {}))
              for role in FIELDING_ROLES + ['DH']]
    roster += [build_player(f'{team_id}-P{ii + 1}', 'P', pitching=rating) for ii, rating in enumerate(pitching)]
    team = Team(team_id, name or f'Team {team_id}', roster, is_player=is_player, rotation_size=rotation_size,
                budget=budget)
    bbroster.auto_lineup(team)
    return team


@pytest.fixture
def make_player():
    return build_player


@pytest.fixture
def make_team():
    return build_team
