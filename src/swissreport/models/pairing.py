"""Pairing data class."""

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
from typing import Tuple

from swissreport.type_hints import PlayerIndex


@dataclass(frozen=True)
class Pairing:
    """A board of the round, by player index.

    ``white == black`` is a bye: the player has no opponent this round.
    """

    white: PlayerIndex
    black: PlayerIndex

    @classmethod
    def bye(cls, player: PlayerIndex) -> "Pairing":
        return cls(white=player, black=player)

    @property
    def is_bye(self) -> bool:
        return self.white == self.black

    def players(self) -> Tuple[PlayerIndex, ...]:
        """Indices of the players on this board, white first."""
        if self.is_bye:
            return (self.white,)
        return (self.white, self.black)


#  LocalWords:  Pairing
