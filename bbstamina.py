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
Pitcher stamina, workload, and rest tracking across a season.

Stamina drains a little with every pitch and the engine turns the missing
stamina into a hit chance bonus for the batter.  Between rounds pitchers who
threw lose their rest days and everyone recovers toward a cap that depends on
rest, recent workload, and whether the pitcher is in the rotation.
"""
import numpy as np
from typing import Dict, List

from bblogger import logger

MAX_FATIGUE = 0.18  # hit chance bonus against a pitcher with nothing left
MAX_REST_DAYS = 5
HISTORY_LEN = 3


class PitcherStamina:
    def __init__(self, rng: np.random.Generator = None) -> None:
        self.rng = np.random.default_rng() if rng is None else rng
        self.stamina: Dict[str, float] = {}  # player id -> current stamina
        self.workload: Dict[str, float] = {}  # stamina used in the current game
        self.pitch_count: Dict[str, int] = {}
        self.rest_days: Dict[str, int] = {}
        self.workload_history: Dict[str, List[float]] = {}
        return

    @staticmethod
    def max_stamina(pitcher) -> float:
        return max(50, pitcher.stamina or 80)

    def ensure_team(self, team) -> None:
        """
        start tracking any pitcher on the team that is new, fully rested
        :param team: team whose pitchers are tracked
        :return: None
        """
        for pitcher in team.pitchers():
            self.stamina.setdefault(pitcher.player_id, self.max_stamina(pitcher))
            self.rest_days.setdefault(pitcher.player_id, 2)
            self.workload_history.setdefault(pitcher.player_id, [])
        return

    def consume(self, pitcher, amount: float) -> float:
        """
        drain stamina for pitches thrown, high stamina arms drain slower
        :param pitcher: pitcher
        :param amount: pitches thrown
        :return: stamina drained
        """
        max_stamina = self.max_stamina(pitcher)
        current = self.stamina.get(pitcher.player_id, max_stamina)
        stamina_bonus = max(0.0, (max_stamina - 60) / 200)
        random_factor = 0.8 + self.rng.random() * 0.4
        drain = max(0.5, amount * random_factor * max(0.6, 1 - stamina_bonus))
        self.stamina[pitcher.player_id] = max(0.0, current - drain)
        self.workload[pitcher.player_id] = self.workload.get(pitcher.player_id, 0.0) + drain
        self.pitch_count[pitcher.player_id] = self.pitch_count.get(pitcher.player_id, 0) + max(1, int(round(amount)))
        return drain

    def ratio(self, pitcher) -> float:
        max_stamina = self.max_stamina(pitcher)
        current = self.stamina.get(pitcher.player_id, max_stamina)
        return float(np.clip(current / max(1, max_stamina), 0, 1))

    def fatigue_multiplier(self, pitcher) -> float:
        return (1 - self.ratio(pitcher)) * MAX_FATIGUE

    def update_rest_days_after_match(self, pitchers) -> None:
        """
        pitchers who threw reset to zero rest days and log the workload, the rest gain a day
        :param pitchers: every pitcher in the league
        :return: None
        """
        for pitcher in pitchers:
            used = self.workload.get(pitcher.player_id, 0.0)
            if used > 0:
                self.rest_days[pitcher.player_id] = 0
                history = self.workload_history.setdefault(pitcher.player_id, [])
                history.append(used)
                del history[:-HISTORY_LEN]
            else:
                self.rest_days[pitcher.player_id] = min(MAX_REST_DAYS, self.rest_days.get(pitcher.player_id, 0) + 1)
        return

    def recovery_cap(self, pitcher, is_starter: bool) -> float:
        """
        share of max stamina a pitcher can get back to before the next game
        :param pitcher: pitcher
        :param is_starter: starters recover on a four day cycle, relievers on three
        :return: cap between 0.4 and 1.0
        """
        max_stamina = self.max_stamina(pitcher)
        used = self.workload.get(pitcher.player_id, 0.0)
        used_ratio = min(1.0, used / max_stamina)
        rest_days = min(MAX_REST_DAYS, self.rest_days.get(pitcher.player_id, 0))
        history = self.workload_history.get(pitcher.player_id, [])
        recent_ratio = min(1.0, (sum(history) / len(history) if history else 0.0) / max_stamina)
        stamina_bonus = max(0.0, (max_stamina - 60) / 200)
        if is_starter:
            cap = 0.5 + min(4, rest_days) / 4 * 0.45
            if used_ratio > 0.95:
                cap -= 0.28
            elif used_ratio > 0.75:
                cap -= 0.2
            elif used_ratio > 0.6:
                cap -= 0.12
            if recent_ratio > 0.7:
                cap -= 0.08
            cap += stamina_bonus * 0.12
        else:
            cap = 0.65 + min(3, rest_days) / 3 * 0.3
            if used >= 50:
                cap -= 0.4
            elif used >= 35:
                cap -= 0.28
            elif used >= 20:
                cap -= 0.14
            if recent_ratio > 0.6:
                cap -= 0.08
            cap += stamina_bonus * 0.1
        return float(np.clip(cap, 0.4, 1.0))

    def recover(self, team) -> None:
        """
        recover every pitcher on a team toward his cap, stamina never goes down here
        :param team: team to recover
        :return: None
        """
        starters = [starter for starter in team.starting_rotation() if starter is not None]
        for pitcher in team.pitchers():
            max_stamina = self.max_stamina(pitcher)
            current = self.stamina.get(pitcher.player_id, max_stamina)
            target = round(max_stamina * self.recovery_cap(pitcher, pitcher in starters))
            self.stamina[pitcher.player_id] = max(current, target)
        return

    def recover_after_match(self, teams) -> None:
        """
        end of round bookkeeping for the whole league
        :param teams: all teams
        :return: None
        """
        self.update_rest_days_after_match([pitcher for team in teams for pitcher in team.pitchers()])
        for team in teams:
            self.recover(team)
        logger.debug('pitcher stamina recovered for {} teams', len(teams))
        self.workload = {}
        self.pitch_count = {}
        return
