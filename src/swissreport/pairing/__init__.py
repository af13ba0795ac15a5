"""Pairing analysis: colour history and publication order."""

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

from swissreport.pairing.colour_history import (
    find_first_colour_difference,
    last_played_colour,
)
from swissreport.pairing.publication_order import (
    higher_and_lower,
    publication_key,
    publication_player_order,
    sort_pairings,
)

__all__ = [
    "find_first_colour_difference",
    "last_played_colour",
    "higher_and_lower",
    "publication_key",
    "publication_player_order",
    "sort_pairings",
]
