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
Postseason bracket seeded from the final standings.

The top seeds meet best against worst, the better seed at home.  Winners are
reseeded after each round so the best seed left always draws the worst.  Each
round plays a best of n series, series_lengths[round] with the last length
repeating for any later round.
"""
from typing import Dict, List, Optional

from bbboxscore import SeasonStats
from bberrors import ConfigurationError, DataIntegrityError, PostseasonError
from bblogger import logger


class Series:
    def __init__(self, home, away, best_of: int) -> None:
        """
        :param home: better seed, hosts every game
        :param away: lower seed
        :param best_of: odd number of games at most
        :return: None
        """
        self.home = home
        self.away = away
        self.best_of = best_of
        self.wins: Dict[str, int] = {home.team_id: 0, away.team_id: 0}
        self.games: List[tuple] = []  # (home_score, away_score)
        return

    def __repr__(self) -> str:
        return (f'{self.home.name} {self.wins[self.home.team_id]} - {self.away.name} '
                f'{self.wins[self.away.team_id]} (best of {self.best_of})')

    @property
    def wins_needed(self) -> int:
        return self.best_of // 2 + 1

    def is_complete(self) -> bool:
        return max(self.wins.values()) >= self.wins_needed

    def involves(self, team) -> bool:
        return team.team_id in self.wins

    def winner(self):
        if not self.is_complete():
            return None
        return self.home if self.wins[self.home.team_id] >= self.wins_needed else self.away

    def record(self, home_score: int, away_score: int):
        """
        credit one game to the series
        :param home_score: runs for the better seed
        :param away_score: runs for the lower seed
        :return: team that won the game
        """
        if self.is_complete():
            logger.error('{} is decided, no more games can be recorded', self)
            raise DataIntegrityError(f'series {self} is already decided')
        if home_score == away_score:
            logger.error('postseason game {} @ {} recorded tied {}-{}', self.away.name, self.home.name, home_score,
                         away_score)
            raise DataIntegrityError(f'postseason game cannot end tied {home_score}-{away_score}')
        game_winner = self.home if home_score > away_score else self.away
        self.wins[game_winner.team_id] += 1
        self.games.append((home_score, away_score))
        return game_winner

    def to_dict(self) -> dict:
        return {'home': self.home.team_id, 'away': self.away.team_id, 'best_of': self.best_of,
                'games': [list(game) for game in self.games]}


class Postseason:
    def __init__(self, seeded_teams: list, series_lengths=(3, 5)) -> None:
        """
        :param seeded_teams: teams in seed order, best first, a power of 2 of them
        :param series_lengths: best of n for each round, the last one repeats
        :return: None
        """
        if len(seeded_teams) < 2 or len(seeded_teams) & (len(seeded_teams) - 1):
            logger.error('postseason bracket of {} teams is not a power of 2', len(seeded_teams))
            raise ConfigurationError(f'a bracket needs a power of 2 teams, got {len(seeded_teams)}')
        self.seeds = {team.team_id: seed for seed, team in enumerate(seeded_teams, start=1)}
        self.series_lengths = list(series_lengths)
        self.stats = SeasonStats()
        for team in seeded_teams:
            self.stats.register_team(team)
        self.rounds: List[List[Series]] = [self.pair(seeded_teams, 0)]
        self.champion = None
        logger.info('postseason field: {}', ', '.join(f'{seed}. {team.name}' for seed, team in
                                                       enumerate(seeded_teams, start=1)))
        return

    def pair(self, teams: list, round_index: int) -> List[Series]:
        """best seed left against the worst, the better seed at home"""
        teams = sorted(teams, key=lambda team: self.seeds[team.team_id])
        best_of = self.series_lengths[min(round_index, len(self.series_lengths) - 1)]
        return [Series(teams[ii], teams[-1 - ii], best_of) for ii in range(len(teams) // 2)]

    def current_round(self) -> List[Series]:
        return self.rounds[-1]

    def round_name(self) -> str:
        if len(self.current_round()) == 1:
            return 'Finals'
        if len(self.current_round()) == 2:
            return 'Semifinals'
        return f'Round {len(self.rounds)}'

    def open_series(self) -> List[Series]:
        return [series for series in self.current_round() if not series.is_complete()]

    def series_for_team(self, team) -> Optional[Series]:
        for series in self.open_series():
            if series.involves(team):
                return series
        return None

    def is_round_complete(self) -> bool:
        return len(self.open_series()) == 0

    def is_complete(self) -> bool:
        return self.champion is not None

    def advance_round(self) -> None:
        """
        move the winners on, a single winner is the champion
        :return: None
        """
        if self.is_complete():
            logger.error('{} already won the postseason', self.champion.name)
            raise PostseasonError(f'{self.champion.name} already won the postseason')
        if not self.is_round_complete():
            logger.error('{} series still open, the {} cannot advance', len(self.open_series()), self.round_name())
            raise PostseasonError(f'{len(self.open_series())} series still open in the {self.round_name()}')
        winners = [series.winner() for series in self.current_round()]
        if len(winners) == 1:
            self.champion = winners[0]
            logger.info('{} win the championship', self.champion.name)
            return
        self.rounds.append(self.pair(winners, len(self.rounds)))
        logger.info('{}: {}', self.round_name(), '; '.join(str(series) for series in self.current_round()))
        return

    def to_dict(self) -> dict:
        return {'seeds': dict(self.seeds), 'rounds': [[series.to_dict() for series in round_series]
                                                      for round_series in self.rounds],
                'champion': None if self.champion is None else self.champion.team_id}
