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
import pandas as pd
from typing import Dict

BATTING_COLS = ['PA', 'AB', 'H', '1B', '2B', '3B', 'HR', 'BB', 'HBP', 'SO', 'SF', 'DP', 'RBI']
PITCHING_COLS = ['BF', 'H', 'HR', 'BB', 'HBP', 'SO', 'Outs', 'R', 'ER']
TEAM_COLS = ['G', 'W', 'L', 'RS', 'RA']


class SeasonStats:
    def __init__(self) -> None:
        """
        season totals for hitters, pitchers, and teams, kept as dicts and viewed as data frames
        :return: None
        """
        self.players = {}  # player id -> (player, team name)
        self.batting: Dict[str, Dict[str, int]] = {}
        self.pitching: Dict[str, Dict[str, int]] = {}
        self.team_totals: Dict[str, Dict[str, int]] = {}
        self.team_names: Dict[str, str] = {}
        self.game_log = []
        return

    def register_team(self, team) -> None:
        self.team_names[team.team_id] = team.name
        self.team_totals.setdefault(team.team_id, {col: 0 for col in TEAM_COLS})
        for player in team.roster:
            self.players[player.player_id] = (player, team.name)
        return

    def reset(self) -> None:
        self.batting.clear()
        self.pitching.clear()
        self.team_totals = {team_id: {col: 0 for col in TEAM_COLS} for team_id in self.team_names}
        self.game_log = []
        return

    def _batting_row(self, player) -> Dict[str, int]:
        self.players.setdefault(player.player_id, (player, ''))
        return self.batting.setdefault(player.player_id, {col: 0 for col in BATTING_COLS})

    def _pitching_row(self, player) -> Dict[str, int]:
        self.players.setdefault(player.player_id, (player, ''))
        return self.pitching.setdefault(player.player_id, {col: 0 for col in PITCHING_COLS})

    def record_at_bat(self, batter, outcome) -> None:
        row = self._batting_row(batter)
        row['PA'] += 1
        if outcome.is_at_bat:
            row['AB'] += 1
        if outcome.is_hit:
            row['H'] += 1
        if outcome.score_book_cd in ['1B', '2B', '3B', 'HR', 'BB', 'HBP', 'SO', 'SF', 'DP']:
            row[outcome.score_book_cd] += 1
        row['RBI'] += outcome.runs_scored
        return

    def record_pitcher_outcome(self, pitcher, outcome) -> None:
        row = self._pitching_row(pitcher)
        row['BF'] += 1
        row['Outs'] += outcome.outs_on_play
        if outcome.is_hit:
            row['H'] += 1
        if outcome.score_book_cd in ['HR', 'BB', 'HBP', 'SO']:
            row[outcome.score_book_cd] += 1
        return

    def record_pitcher_run(self, pitcher, runs: int, earned: bool = True) -> None:
        row = self._pitching_row(pitcher)
        row['R'] += runs
        if earned:
            row['ER'] += runs
        return

    def record_team_runs(self, team_id: str, opponent_id: str, runs: int) -> None:
        self.team_totals.setdefault(team_id, {col: 0 for col in TEAM_COLS})['RS'] += runs
        self.team_totals.setdefault(opponent_id, {col: 0 for col in TEAM_COLS})['RA'] += runs
        return

    def record_team_game(self, home, away, home_score: int, away_score: int, quick: bool = False) -> None:
        """
        add a final score to the team totals and the game log, runs come from record_team_runs when simulated
        :param home: home team
        :param away: away team
        :param home_score: home runs
        :param away_score: away runs
        :param quick: True if the game was resolved with a single roll, runs are added here
        :return: None
        """
        for team, runs_for, runs_against in ((home, home_score, away_score), (away, away_score, home_score)):
            totals = self.team_totals.setdefault(team.team_id, {col: 0 for col in TEAM_COLS})
            totals['G'] += 1
            totals['W' if runs_for > runs_against else 'L'] += 1
            if quick:
                totals['RS'] += runs_for
                totals['RA'] += runs_against
        self.game_log.append({'home': home.name, 'away': away.name, 'home_score': home_score,
                              'away_score': away_score, 'quick': quick})
        return

    def batting_df(self) -> pd.DataFrame:
        rows = [{'Player': self.players[pid][0].name, 'Team': self.players[pid][1], **row}
                for pid, row in self.batting.items()]
        df = pd.DataFrame(rows, columns=['Player', 'Team'] + BATTING_COLS)
        df['AVG'] = (df['H'] / df['AB'].where(df['AB'] > 0)).fillna(0.0).round(3)
        on_base_chances = df['AB'] + df['BB'] + df['HBP'] + df['SF']
        df['OBP'] = ((df['H'] + df['BB'] + df['HBP']) / on_base_chances.where(on_base_chances > 0)).fillna(0.0).round(3)
        total_bases = df['1B'] + 2 * df['2B'] + 3 * df['3B'] + 4 * df['HR']
        df['SLG'] = (total_bases / df['AB'].where(df['AB'] > 0)).fillna(0.0).round(3)
        return df.sort_values('PA', ascending=False, kind='stable').reset_index(drop=True)

    def pitching_df(self) -> pd.DataFrame:
        rows = [{'Player': self.players[pid][0].name, 'Team': self.players[pid][1], **row}
                for pid, row in self.pitching.items()]
        df = pd.DataFrame(rows, columns=['Player', 'Team'] + PITCHING_COLS)
        df['IP'] = (df['Outs'] // 3) + (df['Outs'] % 3) / 10  # baseball notation, 5.2 is 5 and 2/3
        innings = df['Outs'] / 3
        df['ERA'] = (df['ER'] * 9 / innings.where(innings > 0)).fillna(0.0).round(2)
        df['WHIP'] = ((df['H'] + df['BB'] + df['HBP']) / innings.where(innings > 0)).fillna(0.0).round(2)
        return df.sort_values('Outs', ascending=False, kind='stable').reset_index(drop=True)

    def team_df(self) -> pd.DataFrame:
        rows = [{'Team': self.team_names.get(team_id, team_id), **totals} for team_id, totals in self.team_totals.items()]
        df = pd.DataFrame(rows, columns=['Team'] + TEAM_COLS)
        df['Diff'] = df['RS'] - df['RA']
        return df
