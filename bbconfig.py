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
League level settings and season constants.

The two difficulty knobs, throw_out_factor and baserunner_aggression, scale the
throw-out and extra-base chances in bbfielding.  Each named level carries its
own pair; everything else is a season constant that can be overridden by
keyword when the settings are built.
"""
from bberrors import ConfigurationError
from bblogger import logger

# level name -> (throw_out_factor, baserunner_aggression)
LEAGUE_LEVELS = {
    'professional': (1.00, 1.00),
    'semi-pro': (0.92, 1.06),
    'amateur': (0.82, 1.15),
    'youth': (0.70, 1.25),
}


class LeagueSettings:
    def __init__(self, level: str = 'professional', **overrides) -> None:
        """
        settings used by the league, the roster optimizer and the match engine
        :param level: one of the LEAGUE_LEVELS keys
        :param overrides: any attribute below by name, e.g., num_teams=4 or rotation_size=4
        :return: None
        """
        if level not in LEAGUE_LEVELS:
            logger.error('Unknown league level {}, expected one of {}', level, list(LEAGUE_LEVELS))
            raise ConfigurationError(f'unknown league level {level!r}')
        self.level = level
        self.throw_out_factor, self.baserunner_aggression = LEAGUE_LEVELS[level]

        self.num_teams = 8  # one human team plus generated ai teams, must be even
        self.rotation_size = 5  # active starters, max of 6
        self.roster_size = 25  # generated roster size and hard roster limit
        self.target_pitchers = 12  # generator fills pitchers up to this count
        self.free_agent_count = 10
        self.win_bonus = 50000  # paid to the human team for each win
        self.starting_budget = 20000000
        self.ai_budget = 5000000
        self.quick_sim_max_runs = 10  # non-human fixtures draw scores from 0..max-1
        self.bullpen_fatigue = 0.10  # fatigue bonus that sends for a reliever, about 45% stamina left
        self.playoff_teams = 4  # bracket size seeded from the standings, 0 skips the postseason
        self.series_lengths = (3, 5)  # best of n per postseason round, the last repeats

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise ConfigurationError(f'unknown league setting {key!r}')
            setattr(self, key, value)
        self.validate()
        return

    def validate(self) -> None:
        """
        raise ConfigurationError for settings the league cannot be built from
        :return: None
        """
        if self.num_teams < 2 or self.num_teams % 2 != 0:
            logger.error('League needs an even number of at least 2 teams, got {}', self.num_teams)
            raise ConfigurationError(f'number of teams must be even and at least 2, got {self.num_teams}')
        if not 1 <= self.rotation_size <= 6:
            logger.error('Rotation size {} is outside 1 to 6', self.rotation_size)
            raise ConfigurationError(f'rotation size must be between 1 and 6, got {self.rotation_size}')
        if self.playoff_teams != 0 and (self.playoff_teams < 2 or self.playoff_teams & (self.playoff_teams - 1)):
            logger.error('Playoff bracket of {} teams is not a power of 2', self.playoff_teams)
            raise ConfigurationError(f'playoff teams must be 0 or a power of 2, got {self.playoff_teams}')
        if len(self.series_lengths) == 0 or any(best_of < 1 or best_of % 2 == 0 for best_of in self.series_lengths):
            logger.error('Series lengths {} must all be odd', self.series_lengths)
            raise ConfigurationError(f'series lengths must be odd and positive, got {self.series_lengths}')
        return

    @classmethod
    def from_level(cls, level: str, **overrides) -> 'LeagueSettings':
        return cls(level=level, **overrides)

    def to_dict(self) -> dict:
        return dict(self.__dict__)

    def __repr__(self) -> str:
        return (f'LeagueSettings(level={self.level!r}, throw_out_factor={self.throw_out_factor}, '
                f'baserunner_aggression={self.baserunner_aggression})')
