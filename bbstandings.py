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
from typing import List

from bberrors import DataIntegrityError
from bblogger import logger

POINTS_PER_WIN = 3
STANDINGS_COLUMNS = ['team_id', 'name', 'is_player', 'wins', 'losses', 'points', 'pct', 'games_back']


class Standings:
    def __init__(self, teams: list) -> None:
        """
        win loss records for every team in registration order
        :param teams: list of teams
        :return: None
        """
        self.teams = {team.team_id: team for team in teams}
        self.records = {team.team_id: {'wins': 0, 'losses': 0, 'points': 0} for team in teams}
        return

    def reset(self) -> None:
        for record in self.records.values():
            record.update({'wins': 0, 'losses': 0, 'points': 0})
        return

    def update_standings(self, winner_id: str, loser_id: str) -> None:
        """
        credit a win and a loss, both ids are checked before anything changes
        :param winner_id: team id of the winner
        :param loser_id: team id of the loser
        :return: None
        """
        for team_id in (winner_id, loser_id):
            if team_id not in self.records:
                logger.error('standings update for unknown team {}', team_id)
                raise DataIntegrityError(f'unknown team id {team_id!r} in standings update')
        if winner_id == loser_id:
            logger.error('standings update with {} as winner and loser', winner_id)
            raise DataIntegrityError(f'team {winner_id!r} cannot beat itself')
        self.records[winner_id]['wins'] += 1
        self.records[winner_id]['points'] += POINTS_PER_WIN
        self.records[loser_id]['losses'] += 1
        logger.debug('standings: {} beat {}', self.teams[winner_id].name, self.teams[loser_id].name)
        return

    def standings_df(self) -> pd.DataFrame:
        """
        :return: df sorted by wins then points, ties keep registration order
        """
        rows = [{'team_id': team_id, 'name': self.teams[team_id].name, 'is_player': self.teams[team_id].is_player,
                 **record} for team_id, record in self.records.items()]
        df = pd.DataFrame(rows, columns=STANDINGS_COLUMNS[:-2])
        games = df['wins'] + df['losses']
        df['pct'] = (df['wins'] / games.where(games > 0)).fillna(0.0)
        df = df.sort_values(['wins', 'points'], ascending=False, kind='stable').reset_index(drop=True)
        if len(df) > 0:
            leader_wins, leader_losses = df['wins'].iloc[0], df['losses'].iloc[0]
            df['games_back'] = ((leader_wins - df['wins']) + (df['losses'] - leader_losses)) / 2.0
        else:
            df['games_back'] = []
        return df

    def get_sorted_standings(self) -> List[dict]:
        return self.standings_df().to_dict('records')

    def games_back(self, team_id: str) -> float:
        if team_id not in self.records:
            raise DataIntegrityError(f'unknown team id {team_id!r}')
        df = self.standings_df()
        return float(df.loc[df['team_id'] == team_id, 'games_back'].iloc[0])

    def get_draft_order(self) -> List[str]:
        """
        :return: team ids worst to best
        """
        return list(reversed(self.standings_df()['team_id'].tolist()))

    def standings_table(self) -> str:
        """
        :return: printable standings with W-L, Pct, and GB
        """
        df = self.standings_df()
        df['W-L'] = df['wins'].astype(str) + '-' + df['losses'].astype(str)
        df['Pct'] = df['pct'].apply(lambda x: f'{x:.3f}')
        df['GB'] = df['games_back'].apply(lambda x: '-' if x == 0 else f'{x:.1f}')
        df['Team'] = df['name'] + df['is_player'].apply(lambda x: ' *' if x else '')
        return df[['Team', 'W-L', 'Pct', 'GB']].to_string(index=False)

    def to_dict(self) -> dict:
        return {team_id: dict(record) for team_id, record in self.records.items()}
