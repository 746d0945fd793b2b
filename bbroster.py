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
Greedy lineup and rotation builder.

The rotation is the best pitchers by pitching rating.  Injured players sit
whenever enough healthy players are left to fill the spots.  The batting order is
built in two passes: pick one fielder per role (plus a DH), then place those
nine into batting slots by the stat that slot wants.  Every pick is a stable
pandas sort so ties go to the player listed first on the roster.
"""
import pandas as pd
from typing import List, Optional, Tuple

from bblogger import logger
from bbplayer import FIELDING_ROLES, LineupSlot

# batting slot (0 based) and the stat used to fill it, in the order the slots are filled
SLOT_PICK_ORDER = [(0, 'speed'), (3, 'power'), (2, 'contact_power'), (1, 'contact'), (4, 'power')]


def roster_df(players) -> pd.DataFrame:
    """
    :param players: list of players
    :return: df indexed by roster order with the ratings the optimizer sorts on
    """
    rows = [{'Pos': player.position, 'contact': player.contact, 'power': player.power, 'speed': player.speed,
             'pitching': player.pitching, 'rating': player.hitting_rating(),
             'contact_power': player.contact + player.power} for player in players]
    return pd.DataFrame(rows, columns=['Pos', 'contact', 'power', 'speed', 'pitching', 'rating', 'contact_power'])


def best_at_stat(df: pd.DataFrame, stat_criteria: str, exclude: Optional[List[int]] = None,
                 position: Optional[str] = None) -> Optional[int]:
    """
    find the best available player using a given stat as the selection criteria
    :param df: ratings df from roster_df
    :param stat_criteria: column to sort by, descending
    :param exclude: row indexes already used
    :param position: optional position the player must have
    :return: index of the best player or None if nobody is left
    """
    exclude = [] if exclude is None else exclude
    df_criteria = ~df.index.isin(exclude)
    if position is not None:
        df_criteria = df_criteria & (df['Pos'] == position)
    df_players = df[df_criteria].sort_values(stat_criteria, ascending=False, kind='stable')
    return None if len(df_players) == 0 else int(df_players.index[0])


def healthy_or_all(players, needed: int) -> list:
    """
    :param players: candidates in roster order
    :param needed: spots to fill
    :return: the healthy players when there are enough of them, otherwise everyone
    """
    healthy = [player for player in players if not player.is_injured()]
    return healthy if len(healthy) >= needed else list(players)


def fill_rotation(team) -> None:
    """
    load the best pitchers by pitching rating into the active rotation slots, inactive slots are emptied
    :param team: team to update
    :return: None
    """
    pitchers = healthy_or_all(team.pitchers(), team.rotation_size)
    df = roster_df(pitchers).sort_values('pitching', ascending=False, kind='stable')
    starters = [pitchers[ii] for ii in df.index[:team.rotation_size]]
    team.rotation = [starters[ii] if ii < len(starters) else None for ii in range(len(team.rotation))]
    team.current_rotation_index %= team.rotation_size
    if len(starters) < team.rotation_size:
        logger.warning('{} only has {} starters for a {} man rotation', team.name, len(starters), team.rotation_size)
    return


def pick_fielders(players) -> List[Tuple[int, str]]:
    """
    one player per fielding role, best rating at that exact position, otherwise best remaining of any position,
    then the best remaining player as DH
    :param players: non-pitchers in roster order
    :return: list of (row index, role) in role order
    """
    df = roster_df(players)
    picks = []
    used = []
    for role in FIELDING_ROLES + ['DH']:
        row = None
        if role != 'DH':
            row = best_at_stat(df, 'rating', used, position=role)
        if row is None:
            row = best_at_stat(df, 'rating', used)
        if row is None:  # out of players
            break
        used.append(row)
        picks.append((row, role))
    return picks


def fill_batting_order(team) -> None:
    """
    pick fielders for each role then place them in the batting order
    top of the order wants speed, contact, and power; the bottom goes by overall hitting rating
    :param team: team to update
    :return: None
    """
    players = healthy_or_all(team.position_players(), len(team.lineup))
    picks = pick_fielders(players)
    df = roster_df(players)
    pool = df.loc[[row for row, _ in picks]]  # shared pool of chosen hitters
    role_by_row = dict(picks)

    batting_order = [None] * len(team.lineup)
    used = []
    for slot_index, stat in SLOT_PICK_ORDER:
        row = best_at_stat(pool, stat, used)
        if row is None:
            break
        used.append(row)
        batting_order[slot_index] = row
    remaining = pool[~pool.index.isin(used)].sort_values('rating', ascending=False, kind='stable')
    for slot_index, row in zip(range(5, len(batting_order)), remaining.index):
        batting_order[slot_index] = int(row)

    team.lineup = [None if row is None else LineupSlot(players[row], role_by_row[row]) for row in batting_order]
    if len(picks) < len(team.lineup):
        logger.warning('{} could only fill {} of {} lineup spots', team.name, len(picks), len(team.lineup))
    return


def auto_lineup(team) -> None:
    """
    build the starting rotation and the batting order for a team
    :param team: team to update in place
    :return: None
    """
    fill_rotation(team)
    fill_batting_order(team)
    logger.debug('auto lineup set for {}', team.name)
    return
