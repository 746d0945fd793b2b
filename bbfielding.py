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
Team defense ratings and the chances used when a runner tries for an extra base.
"""
import numpy as np
from typing import Dict

DEFAULT_DEFENSE = 50.0
FIELDING_WEIGHTS = {'C': 1.85, 'SS': 1.35, 'CF': 1.35}  # every other fielding role weighs 1.0, DH is not a fielder
ARM_WEIGHTS = {'LF': 1.0, 'CF': 1.1, 'RF': 1.35}
HOME_OUT_CHANCE = 0.30
THIRD_OUT_CHANCE = 0.25
MAX_THROW_OUT = 0.6


def _weighted_defense(alignment: Dict, weights: Dict[str, float], default_weight=None) -> float:
    total, weight_sum = 0.0, 0.0
    for role, player in alignment.items():
        if player is None or role == 'DH':
            continue
        weight = weights.get(role, default_weight)
        if weight is None:
            continue
        total += player.defense * weight
        weight_sum += weight
    return total / weight_sum if weight_sum > 0 else DEFAULT_DEFENSE


def fielding_defense(alignment: Dict) -> float:
    """
    weighted average defense of the fielders, catcher counts most, then short and center
    :param alignment: dict of fielding role to player
    :return: rating 0-99, 50 if nobody is in the field
    """
    return _weighted_defense(alignment, FIELDING_WEIGHTS, default_weight=1.0)


def outfield_arm_defense(alignment: Dict) -> float:
    """
    outfield arm rating, right field has the longest throw
    :param alignment: dict of fielding role to player
    :return: rating 0-99, 50 with no outfielders
    """
    return _weighted_defense(alignment, ARM_WEIGHTS)


def throw_out_chance(runner_speed: float, arm_defense: float, settings, base_out_chance: float) -> float:
    """
    chance the runner is thrown out trying for an extra base
    :param runner_speed: runner speed 0-99
    :param arm_defense: outfield arm rating 0-99
    :param settings: league settings with throw_out_factor
    :param base_out_chance: 0.30 at home, 0.25 at third
    :return: probability capped at 0.6
    """
    speed_factor = 1.25 - runner_speed / 150
    defense_factor = 0.7 + arm_defense / 165
    return min(MAX_THROW_OUT, base_out_chance * settings.throw_out_factor * speed_factor * defense_factor)


def extra_base_chance(base_chance: float, runner_speed: float, outs: int, settings) -> float:
    """
    chance the runner tries for the extra base, runners go on anything with two outs
    :param base_chance: starting chance for the situation
    :param runner_speed: runner speed 0-99
    :param outs: outs before the play
    :param settings: league settings with baserunner_aggression
    :return: probability between 0.02 and 0.95
    """
    chance = base_chance + (runner_speed - 50) * 0.004 + (0.08 if outs == 2 else 0.0)
    return float(np.clip(chance * settings.baserunner_aggression, 0.02, 0.95))
