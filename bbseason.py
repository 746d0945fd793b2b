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
import asyncio
import datetime
import numpy as np
from typing import List, Optional

import bbgame
import bbroster
from bbboxscore import SeasonStats
from bbconfig import LeagueSettings
from bberrors import ConfigurationError, PostseasonError, SeasonCompleteError
from bbevents import BattingOrder, GameEvents
from bbinjuries import PlayerHealth
from bbleague import League
from bblogger import logger
from bbplayer import create_team_roster
from bbpostseason import Postseason, Series
from bbrules import BaseballRules, RuleSet
from bbschedule import Fixture
from bbstamina import PitcherStamina
from bbteam import Team


class SeasonEvents(GameEvents):
    def __init__(self, stamina: PitcherStamina, batting_order: BattingOrder, stats: SeasonStats,
                 pitch_delay: float = 0.0, batter_delay: float = 0.0, chatty: bool = False) -> None:
        """
        game hooks for a season: play by play to the log, stamina, batting order, stats, and pacing
        :param stamina: pitcher stamina tracker
        :param batting_order: batting order cursor
        :param stats: season stat totals
        :param pitch_delay: seconds to wait after each pitch, zero for no pacing
        :param batter_delay: seconds to wait after each plate appearance
        :param chatty: True logs the play by play at info, otherwise debug
        :return: None
        """
        self.stamina = stamina
        self.batting_order = batting_order
        self.stats = stats
        self.pitch_delay = pitch_delay
        self.batter_delay = batter_delay
        self.chatty = chatty
        self.scoreboard = (0, 0)  # home, away
        return

    def log(self, message: str, options: Optional[dict] = None) -> None:
        if self.chatty:
            logger.info(message)
        else:
            logger.debug(message)
        return

    def update_scoreboard(self, home_score: int, away_score: int) -> None:
        self.scoreboard = (home_score, away_score)
        return

    def record_at_bat(self, batter, outcome) -> None:
        self.stats.record_at_bat(batter, outcome)
        return

    def record_pitcher_outcome(self, pitcher, outcome) -> None:
        self.stats.record_pitcher_outcome(pitcher, outcome)
        return

    def record_pitcher_run(self, pitcher, runs: int, earned: bool) -> None:
        self.stats.record_pitcher_run(pitcher, runs, earned)
        return

    def record_team_runs(self, team_id: str, opponent_id: str, runs: int) -> None:
        self.stats.record_team_runs(team_id, opponent_id, runs)
        return

    def consume_pitcher_stamina(self, pitcher, amount: float) -> None:
        self.stamina.consume(pitcher, amount)
        return

    def get_pitcher_fatigue_multiplier(self, pitcher) -> float:
        return self.stamina.fatigue_multiplier(pitcher)

    def substitute_pitcher(self, team, pitcher) -> None:
        self.stamina.ensure_team(team)
        logger.debug('{} bring in {} from the bullpen ({:.0%} stamina)', team.name, pitcher.name,
                    self.stamina.ratio(pitcher))
        return

    def get_next_batter_info(self, team):
        return self.batting_order.next_batter_info(team)

    def advance_batter(self, team) -> None:
        self.batting_order.advance(team)
        return

    async def wait_for_simulation_event(self, kind: str) -> None:
        delay = self.pitch_delay if kind == 'pitch' else self.batter_delay
        if delay > 0:
            await asyncio.sleep(delay)
        return

    async def finish_match(self, home_score: int, away_score: int) -> None:
        self.scoreboard = (home_score, away_score)
        return


class BaseballSeason:
    def __init__(self, player_team_name: str = 'Madison Mallards', settings: Optional[LeagueSettings] = None,
                 seed: Optional[int] = None, rules: Optional[RuleSet] = None, pitch_delay: float = 0.0,
                 batter_delay: float = 0.0, chatty: bool = False) -> None:
        """
        a league season with one human team, only the human team's game is played pitch by pitch
        :param player_team_name: name of the human team
        :param settings: league settings, professional level by default
        :param seed: random seed, None for a new season every run
        :param rules: rule set, baseball by default
        :param pitch_delay: seconds between pitches in the human game
        :param batter_delay: seconds between plate appearances in the human game
        :param chatty: log the play by play at info
        :return: None
        """
        self.settings = LeagueSettings() if settings is None else settings
        self.rng = np.random.default_rng(seed)
        self.rules = BaseballRules() if rules is None else rules
        player_roster = create_team_roster(self.rules, self.rng, self.settings.roster_size,
                                           self.settings.target_pitchers)
        self.player_team = Team('player', player_team_name, player_roster, is_player=True,
                                rotation_size=self.settings.rotation_size, budget=self.settings.starting_budget)
        self.league = League(self.rules, self.settings, self.rng)
        self.league.initialize(self.player_team)
        self.stamina = PitcherStamina(self.rng)
        self.health = PlayerHealth(self.rng)
        for team in self.league.teams:
            self.stamina.ensure_team(team)
        self.batting_order = BattingOrder()
        self.events = SeasonEvents(self.stamina, self.batting_order, self.league.stats, pitch_delay=pitch_delay,
                                   batter_delay=batter_delay, chatty=chatty)
        self.last_game = None  # (fixture, home_score, away_score) for the human team
        logger.debug('season {} ready for {}', self.league.season, player_team_name)
        return

    def is_season_complete(self) -> bool:
        return self.league.is_season_complete()

    async def play_round(self) -> List[Fixture]:
        """
        play the human game step by step, then roll every other game of the round
        :return: fixtures of the round with results
        """
        if self.league.is_season_complete():
            logger.error('season {} is complete, no round left to play', self.league.season)
            raise SeasonCompleteError(f'season {self.league.season} is complete')
        self.check_player_lineup()
        self.refresh_ai_lineups()

        current_round = self.league.get_current_round()
        player_fixture = self.league.schedule.fixture_for_team(self.player_team.team_id)
        if player_fixture is not None:
            self.batting_order.reset()
            home_score, away_score = await self.rules.simulate_match(player_fixture.home, player_fixture.away,
                                                                     self.events, self.rng, self.settings)
            self.league.record_result(player_fixture, home_score, away_score)
            winner, _ = player_fixture.winner_loser()
            if winner is self.player_team:
                self.player_team.budget += self.settings.win_bonus
            self.last_game = (player_fixture, home_score, away_score)
            self.apply_match_fatigue([player_fixture.home, player_fixture.away])
            logger.info('Round {}: {} {} @ {} {}', self.league.schedule.round_number, player_fixture.away.name,
                        away_score, player_fixture.home.name, home_score)

        for fixture in current_round:
            if fixture is player_fixture:
                continue
            home_score, away_score = bbgame.quick_result(self.rng, self.settings.quick_sim_max_runs)
            self.league.record_result(fixture, home_score, away_score, quick=True)

        self.end_of_day()
        self.league.advance_round()
        return current_round

    def check_player_lineup(self) -> None:
        if not self.rules.validate_lineup(self.player_team):
            logger.error('{} lineup is not ready: 9 healthy batters and a healthy starting pitcher are required',
                         self.player_team.name)
            raise ConfigurationError(f'{self.player_team.name} needs 9 healthy batters and a healthy starting pitcher')
        return

    def apply_match_fatigue(self, teams) -> None:
        """
        wear and injury checks for teams that just played, a team rolled by quick_result only used its starter
        :param teams: teams from one game
        :return: None
        """
        for team in teams:
            pitchers = [pitcher for pitcher in team.pitchers() if self.stamina.workload.get(pitcher.player_id, 0) > 0]
            if len(pitchers) == 0 and team.current_starter() is not None:
                pitchers = [team.current_starter()]
            self.health.apply_match_fatigue(team, pitchers)
        return

    def end_of_day(self) -> None:
        """
        rotation, stamina, and health bookkeeping once every team has played
        :return: None
        """
        for team in self.league.teams:
            team.advance_rotation()
        self.stamina.recover_after_match(self.league.teams)
        healed = self.health.recover([player for team in self.league.teams for player in team.roster] +
                                     self.league.free_agents)
        if any(player.is_injured() for player in self.player_team.lineup_players()):
            logger.warning('{} have injured players in the lineup', self.player_team.name)
        self.refresh_ai_lineups(healed)
        return

    def refresh_ai_lineups(self, healed=()) -> None:
        """
        ai teams rebuild their lineup around injuries and when a player comes back
        :param healed: players just back from injury
        :return: None
        """
        for team in self.league.teams:
            if team.is_player:
                continue
            if not self.rules.validate_lineup(team) or any(player in team.roster for player in healed):
                bbroster.auto_lineup(team)
        return

    async def play_season(self) -> List[dict]:
        """
        play every remaining round
        :return: final standings
        """
        while not self.league.is_season_complete():
            await self.play_round()
        logger.info('season {} complete', self.league.season)
        return self.league.get_sorted_standings()

    def start_postseason(self) -> Optional[Postseason]:
        return self.league.start_postseason()

    async def play_postseason_day(self) -> List[Series]:
        """
        one game in every open series, the human team's game is played pitch by pitch
        :return: series that played a game today
        """
        postseason = self.league.start_postseason()  # raises while the regular season is on
        if postseason is None:
            logger.error('season {} has no postseason with a bracket of {}', self.league.season,
                         self.settings.playoff_teams)
            raise PostseasonError(f'season {self.league.season} has no postseason')
        if postseason.is_complete():
            logger.error('{} already won the postseason', postseason.champion.name)
            raise PostseasonError(f'{postseason.champion.name} already won the postseason')
        player_series = postseason.series_for_team(self.player_team)
        if player_series is not None:
            self.check_player_lineup()
        self.refresh_ai_lineups()

        todays_series = postseason.open_series()
        for series in todays_series:
            quick = series is not player_series
            if quick:
                home_score, away_score = bbgame.quick_result(self.rng, self.settings.quick_sim_max_runs)
            else:
                self.batting_order.reset()
                self.events.stats = postseason.stats
                try:
                    home_score, away_score = await self.rules.simulate_match(series.home, series.away, self.events,
                                                                             self.rng, self.settings)
                finally:
                    self.events.stats = self.league.stats
            series.record(home_score, away_score)
            postseason.stats.record_team_game(series.home, series.away, home_score, away_score, quick=quick)
            self.apply_match_fatigue([series.home, series.away])
            logger.info('{} game {}: {} {} @ {} {}, {}', postseason.round_name(), len(series.games),
                        series.away.name, away_score, series.home.name, home_score, series)

        self.end_of_day()
        if postseason.is_round_complete():
            postseason.advance_round()
        return todays_series

    async def play_postseason(self):
        """
        play the bracket through to a champion
        :return: champion, None when the league has no postseason
        """
        postseason = self.league.start_postseason()
        if postseason is None:
            return None
        while not postseason.is_complete():
            await self.play_postseason_day()
        return postseason.champion

    def advance_season(self) -> None:
        """
        off season: everyone ages a year, salaries come out of the budgets, and a new schedule is built
        :return: None
        """
        for team in self.league.teams:
            total_salaries = sum(player.salary for player in team.roster)
            team.budget -= total_salaries
            logger.info('{} paid ${:,} in salaries', team.name, total_salaries)
        for player in [player for team in self.league.teams for player in team.roster] + self.league.free_agents:
            player.age += 1
            self.rules.update_player_stats_for_age(player, self.rng)
        for team in self.league.teams:
            if not team.is_player:
                bbroster.auto_lineup(team)
        self.league.new_season()
        return

    def print_standings(self) -> None:
        print(f'Season {self.league.season} standings after round {self.league.schedule.current_round_index}:')
        print(self.league.standings.standings_table())
        print('')
        return


# play a full season with no pacing
if __name__ == '__main__':
    from bblogger import configure_logger
    configure_logger("INFO")

    start_time = datetime.datetime.now()
    season = BaseballSeason(player_team_name='Madison Mallards', seed=42)
    print(season.player_team.lineup_card())
    asyncio.run(season.play_season())
    season.print_standings()
    print(season.league.stats.batting_df().head(10).to_string(index=False))
    print(season.league.stats.pitching_df().head(5).to_string(index=False))
    champion = asyncio.run(season.play_postseason())
    print(f"Champion: {champion.name}" if champion is not None else "No postseason")

    run_time = datetime.datetime.now() - start_time
    print(f"Run time (timedelta format): {run_time}")
