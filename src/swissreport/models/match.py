"""Match data class."""

# Swiss Report
# Copyright (C) 2025  Swiss Report developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass

from swissreport.constants import LOSS_SCORE
from swissreport.models.enums import Colour
from swissreport.type_hints import PlayerIndex


@dataclass(frozen=True)
class Match:
    """One round of one player's history.

    Attributes
    ----------
    opponent : int
        Index of the opponent in ``Tournament.players``. For a bye this is
        the player's own index and carries no meaning.
    colour : Colour
        Colour assigned to this player in the round.
    game_was_played : bool
        False for byes, forfeits and any other round without a game. Such
        matches carry no colour information.
    score : float
        Points this player earned in the round.
    """

    opponent: PlayerIndex
    colour: Colour = Colour.NONE
    game_was_played: bool = True
    score: float = LOSS_SCORE
