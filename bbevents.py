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
Hooks the match engine calls while a game is played.

GameEvents is the do-nothing sink: every hook exists and returns right away, so
the engine never checks whether a hook is there.  A display or a season layer
subclasses it and overrides the hooks it cares about.
"""
from typing import Dict, Optional, Tuple


class GameEvents:
    def log(self, message: str, options: Optional[dict] = None) -> None:
        return

    def update_scoreboard(self, home_score: int, away_score: int) -> None:
        return

    def update_matchup_display(self, batter, pitcher, next_batter=None) -> None:
        return

    def update_inning_display(self, half: str, inning: int) -> None:
        return

    def update_line_score(self, side: str, inning: int, runs: int) -> None:
        return

    def update_outs_display(self, outs: int) -> None:
        return

    def record_at_bat(self, batter, outcome) -> None:
        return

    def record_pitcher_outcome(self, pitcher, outcome) -> None:
        return

    def record_pitcher_run(self, pitcher, runs: int, earned: bool) -> None:
        return

    def record_team_runs(self, team_id: str, opponent_id: str, runs: int) -> None:
        return

    def consume_pitcher_stamina(self, pitcher, amount: float) -> None:
        return

    def get_pitcher_fatigue_multiplier(self, pitcher) -> float:
        return 0.0

    def substitute_pitcher(self, team, pitcher) -> None:
        """the engine has brought pitcher in from the team's bullpen"""
        return

    def get_next_batter_info(self, team) -> Optional[Tuple]:
        """:return: (batter, next_batter) or None to let the engine pick a batter"""
        return None

    def advance_batter(self, team) -> None:
        return

    async def wait_for_simulation_event(self, kind: str) -> None:
        """suspension point, kind is 'pitch' or 'batter'"""
        return

    async def finish_match(self, home_score: int, away_score: int) -> None:
        return


class BattingOrder:
    def __init__(self) -> None:
        """
        batting order cursor for each team, keyed by team id
        :return: None
        """
        self.cursors: Dict[str, int] = {}
        return

    def reset(self, team=None) -> None:
        if team is None:
            self.cursors.clear()
        else:
            self.cursors.pop(team.team_id, None)
        return

    def next_batter_info(self, team) -> Optional[Tuple]:
        """
        :param team: batting team
        :return: (batter, on deck batter) from the filled lineup slots or None if the lineup is empty
        """
        order = team.lineup_players()
        if len(order) == 0:
            return None
        index = self.cursors.get(team.team_id, 0) % len(order)
        return order[index], order[(index + 1) % len(order)]

    def advance(self, team) -> None:
        order_len = len(team.lineup_players())
        if order_len > 0:
            self.cursors[team.team_id] = (self.cursors.get(team.team_id, 0) + 1) % order_len
        return
