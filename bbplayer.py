# MIT License
#
# 2024 Jim Maastricht
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# JimMaastricht5@gmail.com
"""
Player and lineup slot data plus the random player generator.

A player carries a stat bundle of 0-99 ratings (contact, power, speed, defense,
pitching, stamina) and three derived values (overall, salary, signing_bonus).
The derived values are recomputed any time a rating changes, e.g., aging.
"""
import numpy as np
from typing import Dict, List, Optional

from bberrors import ConfigurationError

POSITIONS = ['P', 'C', '1B', '2B', '3B', 'SS', 'LF', 'CF', 'RF', 'DH']
FIELDING_ROLES = ['C', '1B', '2B', '3B', 'SS', 'LF', 'CF', 'RF']
LINEUP_ROLES = FIELDING_ROLES + ['DH']
RATING_KEYS = ['contact', 'power', 'speed', 'defense', 'pitching', 'stamina']

FIRST_NAMES = ["James", "John", "Robert", "Michael", "William", "David", "Richard", "Joseph", "Thomas", "Charles",
               "Shohei", "Mookie", "Mike", "Aaron", "Juan", "Gerrit", "Jacob", "Clayton", "Max", "Justin"]
LAST_NAMES = ["Smith", "Johnson", "Williams", "Jones", "Brown", "Davis", "Miller", "Wilson", "Moore", "Taylor",
              "Ohtani", "Betts", "Trout", "Judge", "Soto", "Cole", "deGrom", "Kershaw", "Scherzer", "Verlander"]


def clamp_rating(value) -> int:
    return int(np.floor(max(0, min(99, value))))


class Player:
    def __init__(self, player_id: str, name: str, position: str, age: int = 25,
                 stats: Optional[Dict[str, int]] = None) -> None:
        """
        a single player, hitters and pitchers share the same stat bundle
        :param player_id: unique id for the player
        :param name: first and last name
        :param position: primary position, one of POSITIONS
        :param age: age in years
        :param stats: dict of ratings, missing ratings default to 50 (pitching to 0)
        :return: None
        """
        if position not in POSITIONS:
            raise ConfigurationError(f'unknown position {position!r} for {name}')
        stats = {} if stats is None else stats
        self.player_id = player_id
        self.name = name
        self.position = position
        self.age = age
        self.stats = {
            'contact': clamp_rating(stats.get('contact', 50)),
            'power': clamp_rating(stats.get('power', 50)),
            'speed': clamp_rating(stats.get('speed', 50)),
            'defense': clamp_rating(stats.get('defense', 50)),
            'pitching': clamp_rating(stats.get('pitching', 0)),
            'stamina': clamp_rating(stats.get('stamina', 50)),
            'overall': 0,
            'salary': 0,
            'signing_bonus': 0,
        }
        self.fatigue = 0.0  # 0-100, match wear that builds the injury risk
        self.injury_days = 0
        self.injury = ''  # description of the current injury
        self.recalculate_financials()
        return

    def __getattr__(self, item):
        # ratings read as attributes, e.g., player.contact
        stats = self.__dict__.get('stats')
        if stats is not None and item in stats:
            return stats[item]
        raise AttributeError(item)

    def __repr__(self) -> str:
        return f'Player({self.name!r}, {self.position}, ovr={self.stats["overall"]})'

    def is_pitcher(self) -> bool:
        return self.position == 'P'

    def is_injured(self) -> bool:
        return self.injury_days > 0

    def hitting_rating(self) -> int:
        """contact + power + speed, used to rank hitters for the lineup"""
        return self.stats['contact'] + self.stats['power'] + self.stats['speed']

    def recalculate_financials(self) -> None:
        """
        overall, salary, and signing bonus are pure functions of the ratings
        :return: None
        """
        stats = self.stats
        if self.is_pitcher():
            overall = stats['pitching'] * 0.8 + stats['power'] * 0.1 + stats['contact'] * 0.1
        else:
            overall = stats['contact'] * 0.3 + stats['power'] * 0.3 + stats['speed'] * 0.2 + stats['defense'] * 0.2
        stats['overall'] = int(round(overall))
        stats['salary'] = stats['overall'] * 15000
        stats['signing_bonus'] = stats['salary'] * 10
        return

    def apply_stat_deltas(self, deltas: Dict[str, int]) -> None:
        """
        add rating changes, clamp to 0-99, and refresh the derived values
        :param deltas: dict of rating name to change, pitching is ignored for position players
        :return: None
        """
        for key, value in deltas.items():
            if key not in RATING_KEYS or value == 0:
                continue
            if key == 'pitching' and not self.is_pitcher():
                continue
            self.stats[key] = clamp_rating(self.stats[key] + value)
        self.recalculate_financials()
        return

    def overview(self) -> str:
        return f'{self.name} ({self.position}) - CON:{self.contact} POW:{self.power}'

    def to_dict(self) -> dict:
        return {'player_id': self.player_id, 'name': self.name, 'position': self.position, 'age': self.age,
                'stats': dict(self.stats),
                'health': {'fatigue': self.fatigue, 'injury_days': self.injury_days, 'injury': self.injury}}

    @classmethod
    def from_dict(cls, data: dict) -> 'Player':
        player = cls(data['player_id'], data['name'], data['position'], data.get('age', 25), data.get('stats'))
        health = data.get('health', {})
        player.fatigue = health.get('fatigue', 0.0)
        player.injury_days = health.get('injury_days', 0)
        player.injury = health.get('injury', '')
        return player


class LineupSlot:
    """one batting order entry, the fielding role can change without changing the player"""
    def __init__(self, player: Player, role: str) -> None:
        self.player = player
        self.role = None
        self.set_role(role)
        return

    def set_role(self, role: str) -> None:
        if role not in LINEUP_ROLES:
            raise ConfigurationError(f'{role!r} is not a lineup role, expected one of {LINEUP_ROLES}')
        self.role = role
        return

    def __repr__(self) -> str:
        return f'LineupSlot({self.player.name!r}, {self.role})'

    def to_dict(self) -> dict:
        return {'player_id': self.player.player_id, 'role': self.role}


def generate_player_id(rng: np.random.Generator) -> str:
    alphabet = np.array(list('0123456789abcdefghijklmnopqrstuvwxyz'))
    return ''.join(rng.choice(alphabet, size=9))


def generate_name(rng: np.random.Generator) -> str:
    return f'{FIRST_NAMES[rng.integers(len(FIRST_NAMES))]} {LAST_NAMES[rng.integers(len(LAST_NAMES))]}'


def create_player(rules, rng: np.random.Generator, position: Optional[str] = None) -> Player:
    """
    create a random player for a position using the rule set's stat generator
    :param rules: rule set providing get_positions and generate_player_stats
    :param rng: numpy random generator
    :param position: optional position, random position if None
    :return: new player
    """
    positions = rules.get_positions()
    chosen_pos = position if position is not None else positions[rng.integers(len(positions))]
    age = int(rng.integers(20, 35))
    return Player(generate_player_id(rng), generate_name(rng), chosen_pos, age,
                  rules.generate_player_stats(chosen_pos, rng))


def create_team_roster(rules, rng: np.random.Generator, size: int = 25, target_pitchers: int = 12) -> List[Player]:
    """
    one player at every position, then pitchers up to the target, then random positions up to size
    :param rules: rule set
    :param rng: numpy random generator
    :param size: roster size
    :param target_pitchers: number of pitchers to carry when size allows
    :return: list of players
    """
    roster = [create_player(rules, rng, pos) for pos in rules.get_positions()]
    pitcher_count = len([player for player in roster if player.is_pitcher()])
    while pitcher_count < target_pitchers and len(roster) < size:
        roster.append(create_player(rules, rng, 'P'))
        pitcher_count += 1
    while len(roster) < size:
        roster.append(create_player(rules, rng))
    return roster
