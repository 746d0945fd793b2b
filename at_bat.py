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
import numpy as np
from typing import Optional

from bblogger import logger


class OutCome:
    # scorebook code -> (kind, description, outs on the play)
    outcome_dict = {'1B': ('hit', 'Single', 0), '2B': ('hit', 'Double', 0), '3B': ('hit', 'Triple', 0),
                    'HR': ('hit', 'Home Run', 0), 'BB': ('walk', 'Walk', 0), 'HBP': ('hbp', 'Hit By Pitch', 0),
                    'SO': ('out', 'Strikeout', 1), 'GO': ('out', 'Groundout', 1), 'FO': ('out', 'Flyout', 1),
                    'SF': ('sac_fly', 'Sacrifice Fly', 1), 'DP': ('out', 'Double Play', 2)}
    hit_bases_dict = {'1B': 1, '2B': 2, '3B': 3, 'HR': 4}

    def __init__(self, score_book_cd: str = '') -> None:
        """
        class handles a single plate appearance result and what it means for the batter and the outs
        :param score_book_cd: scorebook code, 1B, 2B, 3B, HR, BB, HBP, SO, GO, FO, SF, DP
        :return: None
        """
        self.score_book_cd = ''
        self.kind = ''
        self.desc = ''
        self.outs_on_play = 0
        self.on_base_b = False  # batter reached base
        self.runs_scored = 0
        if score_book_cd:
            self.set_score_book_cd(score_book_cd)
        return

    def __repr__(self) -> str:
        return f'OutCome({self.score_book_cd}, runs={self.runs_scored})'

    def set_score_book_cd(self, cd: str) -> None:
        """
        set the scorebook code for the plate appearance along with the kind, outs on play, and on base indicator
        :param cd: scorebook code
        :return: None
        """
        self.score_book_cd = cd
        self.kind, self.desc, self.outs_on_play = self.outcome_dict[cd]
        self.on_base_b = self.kind in ('hit', 'walk', 'hbp')
        return

    def set_runs_score(self, runs_scored: int) -> None:
        self.runs_scored = runs_scored
        return

    @property
    def is_hit(self) -> bool:
        return self.kind == 'hit'

    @property
    def bases_on_hit(self) -> int:
        return self.hit_bases_dict.get(self.score_book_cd, 0)

    @property
    def is_at_bat(self) -> bool:
        """walks, hbp, and sac flies do not count as an at bat"""
        return self.kind in ('hit', 'out')


def pitches_for_plate_appearance(batter, pitcher) -> int:
    """
    pitches thrown in a plate appearance, good hitters work deeper counts
    :param batter: hitter
    :param pitcher: pitcher
    :return: 3 to 8 pitches
    """
    return int(np.clip(5 + round((batter.contact - pitcher.pitching) / 30), 3, 8))


class SimAB:
    walk_rate = 0.07  # share of non-hits that are walks
    hbp_rate = 0.01  # share of non-hits that are hbp, after walks
    strikeout_rate = 0.3
    groundout_rate = 0.3  # after strikeouts, the rest are fly outs
    sac_fly_chance = 0.35  # fly out with a runner on third and less than 2 outs
    dp_chance = 0.22  # ground out with a runner on first and less than 2 outs

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        """
        class handles calculating the outcome of a plate appearance from the batter, pitcher, defense, and fatigue
        :param rng: numpy random generator, every roll goes through it
        :return: None
        """
        self.rng = np.random.default_rng() if rng is None else rng
        self.dice_roll = None
        return

    @staticmethod
    def hit_chance(batter, pitcher, fielding_defense: float = 50.0, fatigue: float = 0.0) -> float:
        """
        chance the plate appearance is a hit
        :param batter: hitter, uses contact
        :param pitcher: pitcher, uses pitching
        :param fielding_defense: weighted team defense 0-99, 50 is average
        :param fatigue: additive bonus for the hitter from a tired pitcher
        :return: probability clipped to 0.05-0.6
        """
        chance = (batter.contact - pitcher.pitching * 0.5) / 100 + 0.25 - (fielding_defense - 50) * 0.0012 + fatigue
        return float(np.clip(chance, 0.05, 0.6))

    def calculate_outcome(self, batter, pitcher, fielding_defense: float = 50.0, fatigue: float = 0.0) -> OutCome:
        """
        roll the plate appearance
        :param batter: hitter
        :param pitcher: pitcher
        :param fielding_defense: weighted team defense
        :param fatigue: pitcher fatigue multiplier from the stamina tracker
        :return: OutCome with the scorebook code set
        """
        hit_chance = self.hit_chance(batter, pitcher, fielding_defense, fatigue)
        self.dice_roll = self.rng.random()
        if self.dice_roll < hit_chance:
            power_roll = self.rng.random() * 100
            if power_roll < batter.power * 0.3:
                cd = 'HR'
            elif power_roll < batter.power * 0.6:
                cd = '2B'
            else:
                cd = '1B'
        else:
            remainder = (self.dice_roll - hit_chance) / (1 - hit_chance)  # where the roll fell in the non-hits
            if remainder < self.walk_rate:
                cd = 'BB'
            elif remainder < self.walk_rate + self.hbp_rate:
                cd = 'HBP'
            else:
                out_roll = self.rng.random()
                if out_roll < self.strikeout_rate:
                    cd = 'SO'
                elif out_roll < self.strikeout_rate + self.groundout_rate:
                    cd = 'GO'
                else:
                    cd = 'FO'
        logger.debug('{} vs {}: hit chance {:.3f} roll {:.3f} -> {}', batter.name, pitcher.name, hit_chance,
                     self.dice_roll, cd)
        return OutCome(cd)

    def situational_out(self, outcome: OutCome, bases) -> OutCome:
        """
        fly outs can become sac flies and ground outs can become double plays depending on the runners
        :param outcome: outcome from calculate_outcome, changed in place
        :param bases: current base state with outs
        :return: the outcome
        """
        if bases.outs >= 2:
            return outcome
        if outcome.score_book_cd == 'FO' and bases.third is not None and self.rng.random() < self.sac_fly_chance:
            outcome.set_score_book_cd('SF')
        elif outcome.score_book_cd == 'GO' and bases.first is not None and self.rng.random() < self.dp_chance:
            outcome.set_score_book_cd('DP')
        return outcome

    def ab_outcome(self, batter, pitcher, bases, fielding_defense: float = 50.0, fatigue: float = 0.0) -> OutCome:
        """
        full plate appearance: the base outcome then the situational change for the runners on base
        :return: OutCome
        """
        return self.situational_out(self.calculate_outcome(batter, pitcher, fielding_defense, fatigue), bases)
