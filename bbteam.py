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
from typing import Dict, List, Optional

import bbroster
from bberrors import ConfigurationError, DataIntegrityError
from bblogger import logger
from bbplayer import FIELDING_ROLES, LineupSlot, Player

MAX_ROSTER = 25
LINEUP_SIZE = 9
MAX_ROTATION = 6


class Team:
    def __init__(self, team_id: str, name: str, roster: Optional[List[Player]] = None, is_player: bool = False,
                 rotation_size: int = 5, budget: int = 0, max_roster: int = MAX_ROSTER) -> None:
        """
        class handles a single franchise: roster, batting order with fielding roles, and the starting rotation
        :param team_id: unique id for the team
        :param name: display name, e.g., city and mascot
        :param roster: list of players, at most max_roster
        :param is_player: True for the human controlled team
        :param rotation_size: number of active starters, 1 to 6
        :param budget: money available for signings
        :param max_roster: roster limit
        :return: None
        """
        roster = [] if roster is None else list(roster)
        if len(roster) > max_roster:
            raise ConfigurationError(f'{name} roster has {len(roster)} players, limit is {max_roster}')
        if not 1 <= rotation_size <= MAX_ROTATION:
            raise ConfigurationError(f'rotation size must be between 1 and {MAX_ROTATION}, got {rotation_size}')
        self.team_id = team_id
        self.name = name
        self.roster = roster
        self.is_player = is_player
        self.budget = budget
        self.max_roster = max_roster
        self.lineup = [None] * LINEUP_SIZE  # batting order 0-8, each None or a LineupSlot
        self.rotation = [None] * MAX_ROTATION  # only the first rotation_size slots are active
        self.rotation_size = rotation_size
        self.current_rotation_index = 0
        return

    def __repr__(self) -> str:
        return f'Team({self.name!r}, players={len(self.roster)})'

    def current_starter(self) -> Optional[Player]:
        """
        :return: pitcher in the active rotation slot or None if the slot is empty
        """
        return self.rotation[self.current_rotation_index % self.rotation_size]

    def advance_rotation(self) -> int:
        """
        move to the next starter, wraps around the active rotation
        :return: new rotation index
        """
        self.current_rotation_index = (self.current_rotation_index + 1) % self.rotation_size
        logger.debug('{} rotation advanced to SP{}', self.name, self.current_rotation_index + 1)
        return self.current_rotation_index

    def set_rotation_size(self, rotation_size: int) -> None:
        if not 1 <= rotation_size <= MAX_ROTATION:
            raise ConfigurationError(f'rotation size must be between 1 and {MAX_ROTATION}, got {rotation_size}')
        self.rotation_size = rotation_size
        self.current_rotation_index %= rotation_size
        return

    def set_rotation_slot(self, index: int, pitcher: Optional[Player]) -> None:
        if not 0 <= index < self.rotation_size:
            raise ConfigurationError(f'rotation slot {index + 1} is not active for {self.name}')
        if pitcher is not None and pitcher not in self.roster:
            raise ConfigurationError(f'{pitcher.name} is not on the {self.name} roster')
        self.rotation[index] = pitcher
        return

    def starting_rotation(self) -> List[Optional[Player]]:
        return self.rotation[:self.rotation_size]

    def clear_lineup(self) -> None:
        self.lineup = [None] * LINEUP_SIZE
        return

    def set_lineup_slot(self, index: int, player: Optional[Player], role: Optional[str] = None) -> None:
        """
        put a player in a batting order slot, default role is the player's position or DH in the 9th slot
        :param index: batting order slot 0-8
        :param player: player or None to empty the slot
        :param role: fielding role, C, 1B, ..., DH
        :return: None
        """
        if not 0 <= index < LINEUP_SIZE:
            raise ConfigurationError(f'batting order slot {index} is out of range')
        if player is None:
            self.lineup[index] = None
            return
        if player not in self.roster:
            raise ConfigurationError(f'{player.name} is not on the {self.name} roster')
        if role is None:
            role = 'DH' if index == LINEUP_SIZE - 1 or player.is_pitcher() else player.position
        self.lineup[index] = LineupSlot(player, role)
        return

    def swap_lineup_slots(self, from_index: int, to_index: int) -> None:
        self.lineup[from_index], self.lineup[to_index] = self.lineup[to_index], self.lineup[from_index]
        return

    def filled_slots(self) -> List[LineupSlot]:
        return [slot for slot in self.lineup if slot is not None]

    def lineup_players(self) -> List[Player]:
        return [slot.player for slot in self.filled_slots()]

    def fielding_alignment(self) -> Dict[str, Player]:
        """
        :return: dict of fielding role to player for the eight non-pitcher fielding roles in the lineup
        """
        return {slot.role: slot.player for slot in self.filled_slots() if slot.role in FIELDING_ROLES}

    def pitchers(self) -> List[Player]:
        return [player for player in self.roster if player.is_pitcher()]

    def position_players(self) -> List[Player]:
        return [player for player in self.roster if not player.is_pitcher()]

    def find_player(self, player_id: str) -> Optional[Player]:
        for player in self.roster:
            if player.player_id == player_id:
                return player
        return None

    def sign_player(self, player: Player, cost: int = 0, auto_fill: bool = False) -> None:
        """
        add a player to the roster and charge the budget, ai teams reset their lineup afterwards
        :param player: player to add
        :param cost: amount removed from the budget
        :param auto_fill: re-run the lineup optimizer for the human team too
        :return: None
        """
        if len(self.roster) >= self.max_roster:
            logger.warning('{} roster is full, cannot sign {}', self.name, player.name)
            raise ConfigurationError(f'{self.name} roster is full (max {self.max_roster})')
        if self.find_player(player.player_id) is not None:
            raise ConfigurationError(f'{player.name} is already on the {self.name} roster')
        if cost > self.budget:
            raise ConfigurationError(f'{self.name} cannot afford {player.name} (${cost:,} vs ${self.budget:,})')
        self.budget -= cost
        self.roster.append(player)
        logger.info('{} signed {} for ${:,}', self.name, player.name, cost)
        if auto_fill or not self.is_player:
            bbroster.auto_lineup(self)
        return

    def release_player(self, player: Player, auto_fill: bool = False) -> None:
        """
        drop a player from the roster, lineup, and rotation
        :param player: player to release
        :param auto_fill: re-run the lineup optimizer for the human team too
        :return: None
        """
        if player not in self.roster:
            logger.error('{} is not on the {} roster', player.name, self.name)
            raise ConfigurationError(f'{player.name} is not on the {self.name} roster')
        self.roster.remove(player)
        self.lineup = [None if slot is not None and slot.player is player else slot for slot in self.lineup]
        self.rotation = [None if starter is player else starter for starter in self.rotation]
        logger.info('{} released {}', self.name, player.name)
        if auto_fill or not self.is_player:
            bbroster.auto_lineup(self)
        return

    def roster_df(self) -> pd.DataFrame:
        """
        :return: roster as a data frame, one row per player, for display
        """
        rows = [{'Player': player.name, 'Pos': player.position, 'Age': player.age,
                 **{key.upper(): value for key, value in player.stats.items()}, 'IL': player.injury_days}
                for player in self.roster]
        return pd.DataFrame(rows)

    def lineup_card(self) -> str:
        """
        :return: printable batting order and rotation
        """
        card = f'{self.name} lineup:\n'
        for ii, slot in enumerate(self.lineup):
            card += f'{ii + 1}. ' + ('(empty)' if slot is None else f'{slot.player.name} {slot.role}') + '\n'
        for ii, starter in enumerate(self.starting_rotation()):
            marker = '*' if ii == self.current_rotation_index else ' '
            card += f'{marker}SP{ii + 1} ' + ('(empty)' if starter is None else starter.name) + '\n'
        return card

    def to_dict(self) -> dict:
        return {'team_id': self.team_id, 'name': self.name, 'is_player': self.is_player, 'budget': self.budget,
                'roster': [player.to_dict() for player in self.roster],
                'lineup': [None if slot is None else slot.to_dict() for slot in self.lineup],
                'rotation': [None if starter is None else starter.player_id for starter in self.rotation],
                'rotation_size': self.rotation_size, 'current_rotation_index': self.current_rotation_index}

    @classmethod
    def from_dict(cls, data: dict) -> 'Team':
        team = cls(data['team_id'], data['name'], [Player.from_dict(p) for p in data['roster']],
                   is_player=data.get('is_player', False), rotation_size=data.get('rotation_size', 5),
                   budget=data.get('budget', 0))
        for ii, slot in enumerate(data.get('lineup', [])):
            if slot is not None:
                team.lineup[ii] = LineupSlot(team._rostered(slot['player_id'], 'lineup'), slot['role'])
        for ii, player_id in enumerate(data.get('rotation', [])):
            team.rotation[ii] = None if player_id is None else team._rostered(player_id, 'rotation')
        team.current_rotation_index = data.get('current_rotation_index', 0) % team.rotation_size
        return team

    def _rostered(self, player_id: str, where: str) -> Player:
        player = self.find_player(player_id)
        if player is None:
            logger.error('{} {} names player {} who is not on the roster', self.name, where, player_id)
            raise DataIntegrityError(f'{where} player {player_id} is not on the {self.name} roster')
        return player
