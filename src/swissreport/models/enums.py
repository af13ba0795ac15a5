"""Enumerations shared by the Swiss Report models."""

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

from enum import Enum


class Colour(Enum):
    """Piece colour of a game, or the absence of one.

    ``NONE`` doubles as "no preference" for a player's colour preference and
    as "no colour information" for the colour-history scanner.
    """

    WHITE = "White"
    BLACK = "Black"
    NONE = "None"

    def opposite(self) -> "Colour":
        """The other piece colour; ``NONE`` stays ``NONE``."""
        if self is Colour.WHITE:
            return Colour.BLACK
        if self is Colour.BLACK:
            return Colour.WHITE
        return Colour.NONE


class SwissSystem(Enum):
    """Pairing systems a report can be produced for."""

    BURSTEIN = "burstein"
    DUTCH = "dutch"  # declared, no report implementation registered
