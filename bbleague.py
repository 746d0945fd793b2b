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
League: the teams, the schedule, the standings, and the free agent pool.

record_result is the only way a result reaches the standings, so every
fixture changes the standings exactly once.
"""
import numpy as np
from typing import List, Optional

import bbroster
import city_names
from bbboxscore import SeasonStats
from bbconfig import LeagueSettings
from bberrors import ConfigurationError, PostseasonError
from bblogger import logger
from bbplayer import create_team_roster, generate_player_id
from bbpostseason import Postseason
from bbrules import RuleSet
from bbschedule import Fixture, Schedule
from bbstandings import Standings
from bbteam import Team


class League:
    def __init__(self, rules: RuleSet, settings: Optional[LeagueSettings] = None,
                 rng: Optional[np.random.Generator] = None) -> None:
        """
        :param rules: sport rules used to generate players and check lineups
        :param settings: league settings
        :param rng: numpy random generator
        :return: None
        """
        self.rules = rules
        self.settings = LeagueSettings() if settings is None else settings
        self.rng = np.random.default_rng() if rng is None else rng
        self.teams: List[Team] = []
        self.schedule = Schedule()
        self.standings = Standings([])
        self.stats = SeasonStats()
        self.free_agents = []
        self.postseason: Optional[Postseason] = None
        self.season = 1
        return

    def initialize(self, player_team: Team) -> None:
        """
        build the ai teams around the human team, then the standings and the schedule
        :param player_team: the human controlled team
        :return: None
        """
        self.settings.validate()  # settings can be changed after they are built
        team_names = city_names.random_team_names(self.rng, self.settings.num_teams - 1, exclude=[player_team.name])
        player_team.is_player = True
        self.teams = [player_team]
        for team_name in team_names:
            roster = create_team_roster(self.rules, self.rng, self.settings.roster_size, self.settings.target_pitchers)
            self.teams.append(Team(generate_player_id(self.rng), team_name, roster, is_player=False,
                                   rotation_size=self.settings.rotation_size, budget=self.settings.ai_budget))
        for team in self.teams:
            bbroster.auto_lineup(team)
            self.stats.register_team(team)
        self.free_agents = create_team_roster(self.rules, self.rng, self.settings.free_agent_count,
                                              target_pitchers=0)
        self.standings = Standings(self.teams)
        self.generate_schedule(self.teams)
        logger.info('league initialized with {} teams, {} rounds', len(self.teams), self.schedule.total_rounds)
        return

    def generate_schedule(self, teams: Optional[list] = None) -> None:
        self.schedule.generate(self.teams if teams is None else teams)
        return

    def get_current_round(self) -> Optional[List[Fixture]]:
        return self.schedule.get_current_round()

    def advance_round(self) -> None:
        self.schedule.advance_round()
        return

    def is_season_complete(self) -> bool:
        return self.schedule.is_season_complete()

    def update_standings(self, winner_id: str, loser_id: str) -> None:
        self.standings.update_standings(winner_id, loser_id)
        return

    def get_sorted_standings(self) -> List[dict]:
        return self.standings.get_sorted_standings()

    def get_draft_order(self) -> List[str]:
        return self.standings.get_draft_order()

    def player_team(self) -> Optional[Team]:
        for team in self.teams:
            if team.is_player:
                return team
        return None

    def find_team(self, team_id: str) -> Optional[Team]:
        for team in self.teams:
            if team.team_id == team_id:
                return team
        return None

    def record_result(self, fixture: Fixture, home_score: int, away_score: int, quick: bool = False) -> None:
        """
        mark the fixture played and credit the standings, a fixture can only be recorded once
        :param fixture: fixture from the current round
        :param home_score: home runs
        :param away_score: away runs
        :param quick: True for single roll results, the team run totals are added here
        :return: None
        """
        fixture.record(home_score, away_score)  # raises if the fixture already has a result
        winner, loser = fixture.winner_loser()
        self.update_standings(winner.team_id, loser.team_id)
        self.stats.record_team_game(fixture.home, fixture.away, home_score, away_score, quick=quick)
        logger.debug('{} {} @ {} {}', fixture.away.name, away_score, fixture.home.name, home_score)
        return

    def start_postseason(self) -> Optional[Postseason]:
        """
        seed the bracket from the final standings
        :return: the postseason, None when the league is smaller than the bracket or has no postseason
        """
        if not self.is_season_complete():
            logger.error('season {} is still in round {}, the postseason waits for the last round', self.season,
                         self.schedule.round_number)
            raise PostseasonError(f'season {self.season} is not complete')
        if self.postseason is not None:
            return self.postseason
        bracket_size = self.settings.playoff_teams
        if bracket_size == 0 or len(self.teams) < bracket_size:
            logger.info('no postseason for {} teams with a bracket of {}', len(self.teams), bracket_size)
            return None
        seeded = [self.find_team(row['team_id']) for row in self.get_sorted_standings()[:bracket_size]]
        self.postseason = Postseason(seeded, self.settings.series_lengths)
        return self.postseason

    def sign_free_agent(self, team: Team, player) -> None:
        """
        move a free agent to a team for his signing bonus
        :param team: team signing the player
        :param player: player from the free agent pool
        :return: None
        """
        if player not in self.free_agents:
            logger.error('{} is not a free agent', player.name)
            raise ConfigurationError(f'{player.name} is not a free agent')
        team.sign_player(player, cost=player.signing_bonus)
        self.free_agents.remove(player)
        self.stats.register_team(team)
        return

    def new_season(self) -> None:
        """
        reset the standings and the schedule for the next season
        :return: None
        """
        self.season += 1
        self.postseason = None
        self.standings.reset()
        self.stats.reset()
        self.generate_schedule(self.teams)
        logger.info('season {} schedule ready', self.season)
        return

    def to_dict(self) -> dict:
        return {'season': self.season, 'teams': [team.to_dict() for team in self.teams],
                'schedule': self.schedule.to_dict(), 'standings': self.standings.to_dict(),
                'free_agents': [player.to_dict() for player in self.free_agents],
                'postseason': None if self.postseason is None else self.postseason.to_dict()}
