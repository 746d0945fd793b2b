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
Base runner tracking and advancement for a half inning.

Runners are the Player objects themselves.  Hits move the lead runner first;
a runner trying for an extra base can be thrown out, and once the third out is
recorded nobody else moves or scores.  When the half inning can end the game
(bottom of the 9th or later) the bases stop crediting runs the moment the
winning run scores, unless the play is a home run.
"""
from typing import List, Optional

import bbfielding
from at_bat import OutCome


class Bases:
    """
    Manages base runners, outs, and runs for one half inning.

    The class tracks runners in a 4 position list:
    - Index 0: at bat (current batter)
    - Index 1-3: 1st, 2nd, 3rd

    Attributes:
        baserunners: 4 element list of Player or None
        outs: outs recorded in the half inning
        runs: runs scored in the half inning
        player_scored: players who scored on the last play
        runs_scored: runs scored on the last play
        walk_off_runs: runs that win the game in this half inning, None if the half cannot end the game
        walk_off: True once the winning run has scored
    """
    def __init__(self, walk_off_runs: Optional[int] = None) -> None:
        self.baserunners = [None, None, None, None]
        self.outs = 0
        self.runs = 0
        self.player_scored = []
        self.runs_scored = 0
        self.walk_off_runs = walk_off_runs
        self.walk_off = False
        return

    @property
    def first(self):
        return self.baserunners[1]

    @first.setter
    def first(self, runner) -> None:
        self.baserunners[1] = runner

    @property
    def second(self):
        return self.baserunners[2]

    @second.setter
    def second(self, runner) -> None:
        self.baserunners[2] = runner

    @property
    def third(self):
        return self.baserunners[3]

    @third.setter
    def third(self, runner) -> None:
        self.baserunners[3] = runner

    def __repr__(self) -> str:
        names = ['-' if runner is None else runner.name for runner in self.baserunners[1:]]
        return f'Bases(1B={names[0]}, 2B={names[1]}, 3B={names[2]}, outs={self.outs}, runs={self.runs})'

    def is_runner_on_base_num(self, base_num: int) -> bool:
        return self.baserunners[base_num] is not None

    def runners_on(self) -> int:
        return sum(runner is not None for runner in self.baserunners[1:])

    def is_over(self) -> bool:
        """half inning is over on the third out or a walk off"""
        return self.outs >= 3 or self.walk_off

    def load(self, first=None, second=None, third=None, outs: int = 0) -> None:
        """
        Put runners on base, used to resume a state or set up a situation.

        Args:
            first: runner on first or None
            second: runner on second or None
            third: runner on third or None
            outs: outs in the inning
        """
        self.baserunners[1:] = [first, second, third]
        self.outs = outs
        return

    def new_ab(self, batter) -> None:
        """Start a new plate appearance, the batter goes to position 0 and the play counters reset."""
        self.baserunners[0] = batter
        self.player_scored = []
        self.runs_scored = 0
        return

    def score_runner(self, runner) -> None:
        """
        Send a runner home.  Ignored once the inning or the game is over.

        Args:
            runner: player crossing the plate
        """
        if self.is_over():
            return
        self.player_scored.append(runner)
        self.runs_scored += 1
        self.runs += 1
        if self.walk_off_runs is not None and self.runs >= self.walk_off_runs:
            self.walk_off = True
        return

    def record_out(self, outs: int = 1) -> None:
        self.outs = min(3, self.outs + outs)
        return

    def handle_runners(self, outcome: OutCome, rng, settings, arm_defense: float = 50.0) -> int:
        """
        Process runner advancement based on the plate appearance outcome.

        Args:
            outcome: OutCome for the plate appearance, runs_scored is set on it
            rng: numpy random generator for extra base attempts and throws
            settings: league settings with throw_out_factor and baserunner_aggression
            arm_defense: weighted outfield arm rating of the fielding team

        Returns:
            int: runs scored on the play
        """
        batter = self.baserunners[0]
        cd = outcome.score_book_cd
        if cd in ('BB', 'HBP'):
            self.walk_or_hbp(batter)
        elif cd == '1B':
            self.single(batter, rng, settings, arm_defense)
        elif cd == '2B':
            self.double(batter, rng, settings, arm_defense)
        elif cd == '3B':
            self.triple(batter)
        elif cd == 'HR':
            self.home_run(batter)
        elif cd == 'SF':
            self.tag_up()
        elif cd == 'DP':
            self.first = None  # runner on first and the batter are out
            self.record_out(2)
        else:  # strike out, ground out, fly out, runners hold
            self.record_out(1)
        self.baserunners[0] = None
        outcome.set_runs_score(self.runs_scored)
        return self.runs_scored

    def walk_or_hbp(self, batter) -> None:
        """Force advance only the runners pushed by the batter taking first."""
        if self.first is not None:
            if self.second is not None:
                if self.third is not None:
                    self.score_runner(self.third)
                self.third = self.second
            self.second = self.first
        self.first = batter
        return

    def try_extra_base(self, runner, base_chance: float, base_out_chance: float, outs: int, rng, settings,
                       arm_defense: float) -> Optional[bool]:
        """
        Runner decides whether to go for the extra base and the fielders try to throw him out.

        Args:
            runner: player running
            base_chance: chance to try before speed, outs, and aggression
            base_out_chance: 0.30 at home, 0.25 at third
            outs: outs before the play
            rng: numpy random generator
            settings: league settings
            arm_defense: outfield arm rating

        Returns:
            None if the runner holds, True if safe, False if thrown out
        """
        if rng.random() >= bbfielding.extra_base_chance(base_chance, runner.speed, outs, settings):
            return None
        out_chance = bbfielding.throw_out_chance(runner.speed, arm_defense, settings, base_out_chance)
        if rng.random() < out_chance:
            self.record_out(1)
            return False
        return True

    def single(self, batter, rng, settings, arm_defense: float) -> None:
        outs = self.outs
        if self.score_lead_runners((3,)):
            return
        if self.second is not None:
            runner, self.second = self.second, None
            safe = self.try_extra_base(runner, 0.62, bbfielding.HOME_OUT_CHANCE, outs, rng, settings, arm_defense)
            if safe is None:
                self.third = runner
            elif safe:
                self.score_runner(runner)
            if self.is_over():
                return
        if self.first is not None:
            runner, self.first = self.first, None
            safe = None
            if outs == 2 and self.third is None:  # first to third only with two outs and an open base
                safe = self.try_extra_base(runner, 0.12, bbfielding.THIRD_OUT_CHANCE, outs, rng, settings,
                                           arm_defense)
            if safe is None:
                self.second = runner
            elif safe:
                self.third = runner
            if self.is_over():
                return
        self.first = batter
        return

    def double(self, batter, rng, settings, arm_defense: float) -> None:
        outs = self.outs
        if self.score_lead_runners((3, 2)):
            return
        if self.first is not None:
            runner, self.first = self.first, None
            safe = self.try_extra_base(runner, 0.62, bbfielding.HOME_OUT_CHANCE, outs, rng, settings, arm_defense)
            if safe is None:
                self.third = runner
            elif safe:
                self.score_runner(runner)
            if self.is_over():
                return
        self.second = batter
        return

    def triple(self, batter) -> None:
        if self.score_lead_runners((3, 2, 1)):
            return
        self.third = batter
        return

    def score_lead_runners(self, base_nums) -> bool:
        """
        Score the runners on the given bases, lead runner first.

        Returns:
            bool: True if the half inning ended on the way, the remaining runners stay put
        """
        for base_num in base_nums:
            if self.baserunners[base_num] is not None:
                self.score_runner(self.baserunners[base_num])
                self.baserunners[base_num] = None
            if self.is_over():
                return True
        return False

    def home_run(self, batter) -> None:
        # everyone scores on a home run, even past the winning run
        runners = [runner for runner in (self.third, self.second, self.first, batter) if runner is not None]
        self.baserunners[1:] = [None, None, None]
        walk_off_runs, self.walk_off_runs = self.walk_off_runs, None
        for runner in runners:
            self.score_runner(runner)
        self.walk_off_runs = walk_off_runs
        if walk_off_runs is not None and self.runs >= walk_off_runs:
            self.walk_off = True
        return

    def tag_up(self) -> None:
        """Sac fly, the batter is out and the runner on third scores, everyone else holds."""
        self.record_out(1)
        if self.third is not None:
            runner = self.third
            self.third = None
            self.score_runner(runner)
        return

    def describe(self) -> List[str]:
        return [f'{base}: {runner.name}' for base, runner in zip(('1B', '2B', '3B'), self.baserunners[1:])
                if runner is not None]
