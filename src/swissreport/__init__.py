"""Publication order and colour history analysis for Swiss pairing reports.

Typical use after a round has been paired::

    ordered = sort_pairings(pairings, tournament)
    players = publication_player_order(ordered, tournament)
    get_info(tournament.config.swiss_system).write_checklist(
        stream, tournament, players
    )
"""

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

from swissreport.models import (
    Colour,
    Match,
    Pairing,
    Player,
    SwissSystem,
    Tournament,
    TournamentConfig,
)
from swissreport.pairing import (
    find_first_colour_difference,
    publication_player_order,
    sort_pairings,
)
from swissreport.systems import SwissSystemInfo, get_info

__all__ = [
    "Colour",
    "Match",
    "Pairing",
    "Player",
    "SwissSystem",
    "Tournament",
    "TournamentConfig",
    "find_first_colour_difference",
    "publication_player_order",
    "sort_pairings",
    "SwissSystemInfo",
    "get_info",
]
