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
Sport rules behind one interface.

The league, the player generator, and the season only talk to a RuleSet.
Baseball is the one implementation; another sport is another subclass.
"""
import abc
import numpy as np
from typing import Dict, List, Tuple

import bbgame
from bbplayer import POSITIONS, clamp_rating


class RuleSet(abc.ABC):
    name = ''

    @abc.abstractmethod
    def get_positions(self) -> List[str]:
        """position codes a roster is built from, e.g., ['P', 'C', '1B']"""

    @abc.abstractmethod
    def get_lineup_size(self) -> int:
        """batting order size, bench not included"""

    @abc.abstractmethod
    def generate_player_stats(self, position: str, rng: np.random.Generator) -> Dict[str, int]:
        """random ratings for a new player at a position"""

    @abc.abstractmethod
    def validate_lineup(self, team) -> bool:
        """True if the team can take the field with a full, healthy lineup and starter"""

    @abc.abstractmethod
    async def simulate_match(self, home, away, events, rng: np.random.Generator, settings) -> Tuple[int, int]:
        """play a full match, returns (home_score, away_score)"""

    @abc.abstractmethod
    def update_player_stats_for_age(self, player, rng: np.random.Generator) -> None:
        """off season development or decline"""


class BaseballRules(RuleSet):
    name = 'Baseball'

    def get_positions(self) -> List[str]:
        return list(POSITIONS)

    def get_lineup_size(self) -> int:
        return 9

    def generate_player_stats(self, position: str, rng: np.random.Generator) -> Dict[str, int]:
        """
        random ratings with position specific adjustments, every rating clamped to 0-99
        :param position: position code
        :param rng: numpy random generator
        :return: dict of ratings
        """
        stats = {'contact': 30 + rng.random() * 60, 'power': 20 + rng.random() * 70,
                 'speed': 30 + rng.random() * 60, 'defense': 40 + rng.random() * 50,
                 'pitching': 0, 'stamina': 50 + rng.random() * 40}
        if position == 'P':
            stats['pitching'] = 50 + rng.random() * 50
            stats['contact'] = rng.random() * 30
            stats['power'] = rng.random() * 20
        elif position in ('1B', 'DH'):
            stats['power'] += 10
            stats['speed'] -= 10
        elif position in ('SS', 'CF', '2B'):
            stats['defense'] += 10
            stats['speed'] += 10
        elif position == 'C':
            stats['defense'] += 15
            stats['speed'] -= 20
        return {key: clamp_rating(value) for key, value in stats.items()}

    def validate_lineup(self, team) -> bool:
        lineup_full = len(team.lineup) == self.get_lineup_size() and all(slot is not None for slot in team.lineup)
        starter = team.current_starter()
        if not lineup_full or starter is None:
            return False
        return not starter.is_injured() and not any(player.is_injured() for player in team.lineup_players())

    async def simulate_match(self, home, away, events, rng: np.random.Generator, settings) -> Tuple[int, int]:
        game = bbgame.Game(home, away, settings, rng, events)
        return await game.sim_game()

    def update_player_stats_for_age(self, player, rng: np.random.Generator) -> None:
        """
        young players improve, players in their prime hold, veterans slip
        :param player: player who just aged a year
        :param rng: numpy random generator
        :return: None
        """
        if player.age <= 26:
            low, high = 0, 4
        elif player.age <= 31:
            low, high = -1, 2
        else:
            low, high = -4, 0
        keys = ['pitching', 'stamina'] if player.is_pitcher() else ['contact', 'power', 'speed', 'defense']
        player.apply_stat_deltas({key: int(rng.integers(low, high)) for key in keys})
        return
