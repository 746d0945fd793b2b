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
Player health: match wear, injuries, and recovery between rounds.

Every game a player starts adds fatigue on a 0-100 scale.  Once a player is
past INJURY_FATIGUE he risks an injury that grows with every point of wear
beyond it.  Each round off the field takes fatigue back off and counts an
injury down a day.
"""
import numpy as np
from typing import Dict, List, Optional, Tuple

from bblogger import logger

BATTER_MATCH_FATIGUE = (8, 6)  # base plus a random spread per game started
PITCHER_MATCH_FATIGUE = (12, 8)
BATTER_INJURY_CHANCE = 0.006
PITCHER_INJURY_CHANCE = 0.01
INJURY_FATIGUE = 75  # no injury risk below this much wear
LONG_INJURY_CHANCE = 0.2
LONG_INJURY_DAYS = (30, 60)
SHORT_INJURY_DAYS = (7, 21)
MAX_FATIGUE = 100
REST_RECOVERY = 12  # fatigue back per round for a healthy player
INJURED_RECOVERY = 4


class InjuryType:
    """
    injury descriptions by the length of time they keep a player out
    """
    def __init__(self) -> None:
        self.pitcher_injuries: Dict[str, Tuple[int, int]] = {
            'Rotator Cuff Tear': (30, 60),
            'Stress Fracture (Arm)': (40, 60),
            'Shoulder Impingement': (30, 60),
            'Forearm Strain': (15, 30),
            'Elbow Inflammation': (15, 30),
            'Lat Strain': (20, 30),
            'Blister': (5, 12),
            'Finger Strain': (7, 15),
            'Minor Shoulder Fatigue': (7, 14),
        }
        self.batter_injuries: Dict[str, Tuple[int, int]] = {
            'Broken Wrist': (30, 50),
            'Hamstring Tear': (30, 60),
            'Oblique Strain (Severe)': (30, 45),
            'Hamstring Strain': (15, 25),
            'Ankle Sprain': (15, 30),
            'Quad Strain': (15, 25),
            'Finger Sprain': (7, 14),
            'Hip Soreness': (5, 12),
            'Foot Contusion': (5, 10),
        }
        self.general_injuries: Dict[str, Tuple[int, int]] = {
            'Back Spasms': (7, 14),
            'Illness': (3, 7),
        }
        return

    def get_injury(self, days: int, is_pitcher: bool, rng: np.random.Generator) -> str:
        """
        description that fits the time out
        :param days: days on the injured list
        :param is_pitcher: pitchers get arm injuries, hitters get leg and hand injuries
        :param rng: numpy random generator
        :return: injury description
        """
        injuries = {**(self.pitcher_injuries if is_pitcher else self.batter_injuries), **self.general_injuries}
        if days >= 30:
            names = [name for name, (low, _) in injuries.items() if low >= 30]
        elif days >= 15:
            names = [name for name, (low, _) in injuries.items() if 15 <= low < 30]
        else:
            names = [name for name, (low, _) in injuries.items() if low < 15]
        if len(names) == 0:
            return 'Undisclosed Injury'
        return names[int(rng.integers(len(names)))]


class PlayerHealth:
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        """
        tracks wear and injuries through the players' own fatigue and injury_days
        :param rng: numpy random generator
        :return: None
        """
        self.rng = np.random.default_rng() if rng is None else rng
        self.injury_types = InjuryType()
        return

    def apply_match_fatigue(self, team, pitchers) -> List:
        """
        wear for everyone who played, then the injury check
        :param team: team that played, its lineup gets the batter wear
        :param pitchers: pitchers who threw for the team in the game
        :return: players injured in this game
        """
        injured = []
        for player in team.lineup_players():
            if self.add_fatigue(player, BATTER_MATCH_FATIGUE, BATTER_INJURY_CHANCE):
                injured.append(player)
        for pitcher in pitchers:
            if self.add_fatigue(pitcher, PITCHER_MATCH_FATIGUE, PITCHER_INJURY_CHANCE):
                injured.append(pitcher)
        for player in injured:
            logger.info('{} of the {} is out {} days: {}', player.name, team.name, player.injury_days,
                        player.injury)
        return injured

    def add_fatigue(self, player, wear: Tuple[int, int], base_chance: float) -> bool:
        base, spread = wear
        player.fatigue = min(MAX_FATIGUE, player.fatigue + base + self.rng.random() * spread)
        return self.injury_check(player, base_chance)

    def injury_check(self, player, base_chance: float) -> bool:
        """
        roll for an injury, the chance grows with wear past INJURY_FATIGUE
        :param player: player to check
        :param base_chance: chance at exactly INJURY_FATIGUE
        :return: True if the player was just injured
        """
        if player.is_injured() or player.fatigue < INJURY_FATIGUE:
            return False
        chance = base_chance + max(0.0, (player.fatigue - INJURY_FATIGUE) / 250)
        if self.rng.random() >= chance:
            return False
        low, high = LONG_INJURY_DAYS if self.rng.random() < LONG_INJURY_CHANCE else SHORT_INJURY_DAYS
        self.injure(player, int(self.rng.integers(low, high + 1)))
        return True

    def injure(self, player, days: int, injury: Optional[str] = None) -> None:
        player.injury_days = days
        player.injury = self.injury_types.get_injury(days, player.is_pitcher(), self.rng) if injury is None \
            else injury
        return

    @staticmethod
    def recover(players) -> List:
        """
        a round of rest, injured players count down a day and shed a little wear
        :param players: every player in the league
        :return: players back from injury this round
        """
        healed = []
        for player in players:
            if player.is_injured():
                player.injury_days -= 1
                player.fatigue = max(0.0, player.fatigue - INJURED_RECOVERY)
                if not player.is_injured():
                    logger.info('{} is back from {}', player.name, player.injury)
                    player.injury = ''
                    healed.append(player)
            else:
                player.fatigue = max(0.0, player.fatigue - REST_RECOVERY)
        return healed
