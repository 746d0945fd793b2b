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
Exceptions raised by the league, roster, schedule and match layers.

Configuration problems (no starting pitcher, odd team count, empty lineup,
full roster) and data problems (unknown team id in the standings, a result
recorded twice) are raised before anything is mutated so the caller can fix
the input and try again.
"""


class ConfigurationError(ValueError):
    """Raised when a team, lineup, rotation or league setup is not playable."""


class DataIntegrityError(ValueError):
    """Raised when a standings or fixture update references bad data."""


class SeasonCompleteError(RuntimeError):
    """Raised when a round is requested after the last round has been played."""


class MatchStateError(RuntimeError):
    """Raised when a match is simulated outside of its idle state."""


class PostseasonError(RuntimeError):
    """Raised when the postseason is started before the season ends or played after it has a champion."""
