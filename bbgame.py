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
import numpy as np
from typing import List, Optional, Tuple

import at_bat
import bbbaserunners
import bbfielding
from bbconfig import LeagueSettings
from bberrors import ConfigurationError, MatchStateError
from bbevents import GameEvents
from bblogger import logger

AWAY = 0
HOME = 1
IDLE = 'idle'
IN_PROGRESS = 'in_progress'
FINISHED = 'finished'
REGULATION_INNINGS = 9


class Game:
    def __init__(self, home, away, settings: Optional[LeagueSettings] = None,
                 rng: Optional[np.random.Generator] = None, events: Optional[GameEvents] = None) -> None:
        """
        a single match played plate appearance by plate appearance
        :param home: home team
        :param away: away team
        :param settings: league settings with the throw out and aggression knobs
        :param rng: numpy random generator, every roll in the game goes through it
        :param events: hook sink for display, stats, stamina, batting order, and pacing
        :return: None
        """
        self.teams = [away, home]  # keep track of away in pos 0 and home team in pos 1
        self.settings = LeagueSettings() if settings is None else settings
        self.rng = np.random.default_rng() if rng is None else rng
        self.events = GameEvents() if events is None else events
        self.at_bat = at_bat.SimAB(self.rng)
        self.state = IDLE
        self.total_score = [0, 0]
        self.line_score = [[], []]  # runs per half inning, away then home
        self.inning = 1
        self.top_bottom = 0  # zero is top offset, 1 is bottom offset
        self.pitchers = [None, None]
        self.pitchers_used = [[], []]  # everyone who has pitched for each side, a pulled pitcher stays out
        self.bases = None
        return

    def team_hitting(self) -> int:
        return self.top_bottom

    def team_pitching(self) -> int:
        return (self.top_bottom + 1) % 2

    def preflight(self) -> None:
        """
        check the game can be played before anything changes
        :return: None
        """
        if self.state != IDLE:
            logger.error('game {} @ {} is {}, it can only be simulated once', self.teams[AWAY].name,
                         self.teams[HOME].name, self.state)
            raise MatchStateError(f'game is {self.state}, expected {IDLE}')
        for team in self.teams:
            if team.current_starter() is None:
                logger.error('{} has no starting pitcher in rotation slot {}', team.name,
                             team.current_rotation_index + 1)
                raise ConfigurationError(f'{team.name} has no starting pitcher in rotation slot '
                                         f'{team.current_rotation_index + 1}')
            if len(team.lineup_players()) == 0:
                logger.error('{} has an empty lineup', team.name)
                raise ConfigurationError(f'{team.name} has no players in the lineup')
        return

    def is_game_end(self) -> bool:
        """
        called after each half inning, the home team skips the bottom of the 9th or later when ahead
        and any inning from the 9th on ends once the scores differ after the bottom half
        :return: True if the game is over
        """
        if self.inning < REGULATION_INNINGS:
            return False
        if self.top_bottom == 0:
            return self.total_score[HOME] > self.total_score[AWAY]
        return self.total_score[HOME] != self.total_score[AWAY]

    def next_batter(self, batting) -> Tuple:
        """
        batting order cursor from the sink, otherwise a random filled lineup slot
        :param batting: batting team
        :return: (batter, on deck batter or None)
        """
        info = self.events.get_next_batter_info(batting)
        if info is not None and info[0] is not None:
            return info
        players = batting.lineup_players()
        return players[int(self.rng.integers(len(players)))], None

    def bullpen(self, side: int) -> List:
        """
        healthy pitchers outside the rotation who have not pitched in this game
        :param side: AWAY or HOME
        :return: relievers, freshest first and roster order on ties
        """
        team = self.teams[side]
        starters = [starter for starter in team.starting_rotation() if starter is not None]
        relievers = [pitcher for pitcher in team.pitchers() if pitcher not in starters
                     and pitcher not in self.pitchers_used[side] and not pitcher.is_injured()]
        return sorted(relievers, key=self.events.get_pitcher_fatigue_multiplier)

    def pitching_sit(self, side: int):
        """
        check the pitcher before each plate appearance, a tired pitcher is replaced by the freshest reliever
        :param side: team in the field, AWAY or HOME
        :return: pitcher for the next plate appearance
        """
        pitcher = self.pitchers[side]
        fatigue = self.events.get_pitcher_fatigue_multiplier(pitcher)
        if fatigue < self.settings.bullpen_fatigue:
            return pitcher
        bullpen = self.bullpen(side)
        if len(bullpen) == 0 or self.events.get_pitcher_fatigue_multiplier(bullpen[0]) >= fatigue:
            return pitcher  # nobody fresher, he stays in

        reliever = bullpen[0]
        self.pitchers[side] = reliever
        self.pitchers_used[side].append(reliever)
        self.events.substitute_pitcher(self.teams[side], reliever)
        self.events.log(f'Pitching change: {reliever.name} enters for {pitcher.name}.')
        logger.debug('{} go to the bullpen, {} replaces {}', self.teams[side].name, reliever.name, pitcher.name)
        return reliever

    async def sim_game(self) -> Tuple[int, int]:
        """
        play the game to the end, extra innings have no limit
        :return: (home_score, away_score)
        """
        self.preflight()
        self.state = IN_PROGRESS
        self.pitchers = [self.teams[AWAY].current_starter(), self.teams[HOME].current_starter()]
        self.pitchers_used = [[self.pitchers[AWAY]], [self.pitchers[HOME]]]
        self.events.log('MATCH STARTING!')
        self.events.log(f'Away pitcher: {self.pitchers[AWAY].name}, home pitcher: {self.pitchers[HOME].name}')
        while True:
            for self.top_bottom, half in ((0, 'top'), (1, 'bottom')):
                await self.sim_half_inning(self.teams[self.team_hitting()], self.teams[self.team_pitching()], half)
                if self.is_game_end():
                    break
            else:
                self.inning += 1
                continue
            break

        self.state = FINISHED
        home_score, away_score = self.total_score[HOME], self.total_score[AWAY]
        self.events.log(f'GAME OVER! Final: {self.teams[AWAY].name} {away_score}, '
                        f'{self.teams[HOME].name} {home_score}')
        logger.debug('final {} {} - {} {} in {} innings', self.teams[AWAY].name, away_score,
                     self.teams[HOME].name, home_score, self.inning)
        await self.events.finish_match(home_score, away_score)
        return home_score, away_score

    async def sim_half_inning(self, batting, fielding, half: str) -> int:
        """
        one team bats until three outs or a walk off
        :param batting: team hitting
        :param fielding: team in the field
        :param half: 'top' or 'bottom'
        :return: runs scored in the half inning
        """
        side = AWAY if half == 'top' else HOME
        can_walk_off = side == HOME and self.inning >= REGULATION_INNINGS
        walk_off_runs = self.total_score[AWAY] - self.total_score[HOME] + 1 if can_walk_off else None
        self.bases = bbbaserunners.Bases(walk_off_runs=walk_off_runs)
        alignment = fielding.fielding_alignment()
        defense = bbfielding.fielding_defense(alignment)
        arm_defense = bbfielding.outfield_arm_defense(alignment)

        self.events.update_inning_display(half, self.inning)
        self.events.log(f'--- {half.upper()} {self.inning}: {batting.name} batting ---')
        self.events.update_outs_display(0)
        while not self.bases.is_over():
            pitcher = self.pitching_sit((side + 1) % 2)
            batter, next_batter = self.next_batter(batting)
            self.bases.new_ab(batter)
            self.events.update_matchup_display(batter, pitcher, next_batter)
            fatigue = self.events.get_pitcher_fatigue_multiplier(pitcher)
            for _ in range(at_bat.pitches_for_plate_appearance(batter, pitcher)):
                self.events.consume_pitcher_stamina(pitcher, 1)
                await self.events.wait_for_simulation_event('pitch')

            outcome = self.at_bat.ab_outcome(batter, pitcher, self.bases, defense, fatigue)
            runs = self.bases.handle_runners(outcome, self.rng, self.settings, arm_defense)
            self.events.record_at_bat(batter, outcome)
            self.events.record_pitcher_outcome(pitcher, outcome)
            self.events.log(f'{batter.name}: {outcome.desc} ({self.bases.outs} out)' if not outcome.on_base_b
                            else f'{batter.name}: {outcome.desc}!')
            if runs > 0:
                self.total_score[side] += runs
                self.events.log(f'> {runs} run(s) score: ' + ', '.join(p.name for p in self.bases.player_scored))
                self.events.record_pitcher_run(pitcher, runs, True)
                self.events.update_line_score(half, self.inning, self.bases.runs)
                self.events.update_scoreboard(self.total_score[HOME], self.total_score[AWAY])
                self.events.record_team_runs(batting.team_id, fielding.team_id, runs)
            self.events.update_outs_display(self.bases.outs)
            self.events.advance_batter(batting)
            await self.events.wait_for_simulation_event('batter')

        if self.bases.walk_off:
            self.events.log(f'WALK OFF! {batting.name} win it in the bottom of the {self.inning}')
        self.line_score[side].append(self.bases.runs)
        self.events.update_line_score(half, self.inning, self.bases.runs)
        return self.bases.runs

    def line_score_text(self) -> str:
        """
        :return: printable line score, a bottom half that was not played shows an x
        """
        innings = len(self.line_score[AWAY])
        header = 'Team'.ljust(16) + ''.join(str(ii + 1).rjust(3) for ii in range(innings)) + '  R'
        lines = [header]
        for side in (AWAY, HOME):
            runs = [str(r) for r in self.line_score[side]] + ['x'] * (innings - len(self.line_score[side]))
            lines.append(self.teams[side].name[:15].ljust(16) + ''.join(r.rjust(3) for r in runs) +
                         str(self.total_score[side]).rjust(3))
        return '\n'.join(lines)


def quick_result(rng: np.random.Generator, max_runs: int = 10) -> Tuple[int, int]:
    """
    resolve a game with a single draw, a level draw goes to the home team by a run
    :param rng: numpy random generator
    :param max_runs: scores are drawn from 0 to max_runs - 1
    :return: (home_score, away_score)
    """
    home_score, away_score = (int(score) for score in rng.integers(0, max_runs, size=2))
    if home_score == away_score:
        home_score += 1
    return home_score, away_score


# play a single game between two generated teams
if __name__ == '__main__':
    import bbroster
    from bbplayer import create_team_roster
    from bbrules import BaseballRules
    from bbteam import Team

    demo_rng = np.random.default_rng(7)
    rules = BaseballRules()
    demo_teams: List = []
    for team_num, team_name in enumerate(['Milwaukee Brewers', 'Chicago Cubs']):
        demo_team = Team(f'T{team_num}', team_name, create_team_roster(rules, demo_rng))
        bbroster.auto_lineup(demo_team)
        demo_teams.append(demo_team)

    class PrintEvents(GameEvents):
        def log(self, message: str, options: Optional[dict] = None) -> None:
            print(message)

    demo_game = Game(demo_teams[0], demo_teams[1], rng=demo_rng, events=PrintEvents())
    print(asyncio.run(demo_game.sim_game()))
    print(demo_game.line_score_text())
