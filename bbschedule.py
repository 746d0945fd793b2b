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
Double round robin schedule.

Circle method: team 0 stays put, round r pairs teams[i] with teams[n-1-i], then
the last team moves to slot 1.  The first n-1 rounds are repeated with home
and away swapped, so each team hosts every other team exactly once.
"""
from typing import List, Optional

from bberrors import ConfigurationError, DataIntegrityError
from bblogger import logger


class Fixture:
    def __init__(self, home, away) -> None:
        self.home = home
        self.away = away
        self.result = None  # (home_score, away_score) once played
        return

    def __repr__(self) -> str:
        return f'Fixture({self.away.name} @ {self.home.name}, result={self.result})'

    @property
    def is_played(self) -> bool:
        return self.result is not None

    def involves(self, team_id: str) -> bool:
        return team_id in (self.home.team_id, self.away.team_id)

    def record(self, home_score: int, away_score: int) -> None:
        """
        store the final score, a fixture can only be played once
        :param home_score: runs for the home team
        :param away_score: runs for the away team
        :return: None
        """
        if self.result is not None:
            logger.error('{} already has a result {}', self, self.result)
            raise DataIntegrityError(f'{self.away.name} @ {self.home.name} already has a result')
        self.result = (home_score, away_score)
        return

    def winner_loser(self):
        """:return: (winner, loser) teams for a played fixture"""
        home_score, away_score = self.result
        return (self.home, self.away) if home_score > away_score else (self.away, self.home)

    def to_dict(self) -> dict:
        return {'home': self.home.team_id, 'away': self.away.team_id,
                'result': None if self.result is None else list(self.result)}


def generate_schedule(teams: list) -> List[List[Fixture]]:
    """
    build a double round robin
    :param teams: list of teams, even count of at least 2
    :return: list of rounds, each a list of n/2 fixtures
    """
    num_teams = len(teams)
    if num_teams < 2 or num_teams % 2 != 0:
        logger.error('cannot schedule {} teams, need an even number of at least 2', num_teams)
        raise ConfigurationError(f'schedule needs an even number of at least 2 teams, got {num_teams}')

    rotating = list(teams)
    first_half = []
    for _ in range(num_teams - 1):
        first_half.append([Fixture(rotating[ii], rotating[num_teams - 1 - ii]) for ii in range(num_teams // 2)])
        rotating.insert(1, rotating.pop())  # team 0 fixed, last team moves to slot 1
    second_half = [[Fixture(fixture.away, fixture.home) for fixture in round_fixtures]
                   for round_fixtures in first_half]
    rounds = first_half + second_half
    logger.debug('schedule built for {} teams: {} rounds of {} games', num_teams, len(rounds), num_teams // 2)
    return rounds


class Schedule:
    def __init__(self, teams: Optional[list] = None) -> None:
        """
        round cursor over a double round robin
        :param teams: optional list of teams, builds the schedule immediately
        :return: None
        """
        self.rounds = []
        self.current_round_index = 0
        if teams is not None:
            self.generate(teams)
        return

    def generate(self, teams: list) -> None:
        self.rounds = generate_schedule(teams)  # raises before anything is replaced
        self.current_round_index = 0
        return

    def get_current_round(self) -> Optional[List[Fixture]]:
        if self.is_season_complete():
            return None
        return self.rounds[self.current_round_index]

    def advance_round(self) -> None:
        if not self.is_season_complete():
            self.current_round_index += 1
        return

    def is_season_complete(self) -> bool:
        return self.current_round_index >= len(self.rounds)

    @property
    def round_number(self) -> int:
        return self.current_round_index + 1

    @property
    def total_rounds(self) -> int:
        return len(self.rounds)

    def fixture_for_team(self, team_id: str) -> Optional[Fixture]:
        """
        :param team_id: team to look for
        :return: the team's fixture in the current round or None
        """
        current_round = self.get_current_round()
        if current_round is None:
            return None
        for fixture in current_round:
            if fixture.involves(team_id):
                return fixture
        return None

    def to_dict(self) -> dict:
        return {'current_round_index': self.current_round_index,
                'rounds': [[fixture.to_dict() for fixture in round_fixtures] for round_fixtures in self.rounds]}
