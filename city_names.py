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
# name of cities and mascots for random generation of ai teams
import numpy as np
from typing import List

from bberrors import ConfigurationError
from bblogger import logger

names = ["Akron", "Albany", "Albuquerque", "Amarillo", "Anchorage", "Appleton", "Asheville", "Augusta", "Austin",
         "Bakersfield", "Baton Rouge", "Billings", "Boise", "Bridgeport", "Buffalo", "Burlington", "Cedar Rapids",
         "Charleston", "Chattanooga", "Colorado Springs", "Columbus", "Corpus Christi", "Dayton", "Des Moines",
         "Duluth", "Durham", "El Paso", "Erie", "Eugene", "Fargo", "Fort Wayne", "Fresno", "Green Bay", "Harrisburg",
         "Knoxville", "Lansing", "Lincoln", "Little Rock", "Madison", "Memphis", "Modesto", "Omaha", "Peoria",
         "Portland", "Providence", "Raleigh", "Reno", "Rockford", "Sacramento", "Salem", "Savannah", "Scranton",
         "Sioux Falls", "South Bend", "Spokane", "Syracuse", "Tacoma", "Toledo", "Tucson", "Tulsa", "Wichita",
         "Worcester", "Yakima"]

mascots = ["Red Dragons", "Blue Sharks", "Green Vipers", "Golden Eagles", "Silver Wolves", "Iron Titans",
           "Neon Phantoms", "Night Owls", "River Cats", "Thunder", "Lumberjacks", "Comets", "Miners", "Storm",
           "Sea Dogs", "Grizzlies"]


def random_team_names(rng: np.random.Generator, count: int, exclude: List[str] = None) -> List[str]:
    """
    unique city and mascot names for generated teams
    :param rng: numpy random generator
    :param count: number of names
    :param exclude: names already in use, e.g., the human team
    :return: list of names like 'Omaha Iron Titans'
    """
    exclude = [] if exclude is None else exclude
    if count <= 0:
        return []
    if count > len(names):
        logger.error('Asked for {} team names, only {} cities available', count, len(names))
        raise ConfigurationError(f'only {len(names)} team names available, asked for {count}')
    cities = rng.permutation(names)
    team_names = []
    for city in cities:
        team_name = f'{city} {mascots[int(rng.integers(len(mascots)))]}'
        if team_name not in exclude:
            team_names.append(team_name)
        if len(team_names) == count:
            break
    if len(team_names) < count:
        logger.error('Only {} team names left after {} exclusions, asked for {}', len(team_names), len(exclude), count)
        raise ConfigurationError(f'only {len(team_names)} team names left after exclusions, asked for {count}')
    return team_names
