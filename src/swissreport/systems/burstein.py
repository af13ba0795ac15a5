"""Burstein system report columns."""

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

from typing import List

from swissreport.constants import DEFAULT_BURSTEIN_TIEBREAK_ORDER, TIEBREAK_HEADERS
from swissreport.models.enums import SwissSystem
from swissreport.models.player import Player
from swissreport.models.tournament import Tournament
from swissreport.systems.base import SwissSystemInfo
from swissreport.systems.tiebreak_calculator import TiebreakCalculator
from swissreport.utils import format_points


class BursteinInfo(SwissSystemInfo):
    """Burstein checklist columns.

    Burstein ranks players inside a scoregroup by Sonneborn-Berger, then
    Buchholz, then Median-Buchholz; the checklist shows all three.
    """

    system = SwissSystem.BURSTEIN

    def specialty_headers(self) -> List[str]:
        return [TIEBREAK_HEADERS[key] for key in DEFAULT_BURSTEIN_TIEBREAK_ORDER]

    def specialty_columns(self, player: Player, tournament: Tournament) -> List[str]:
        tiebreaks = TiebreakCalculator(tournament).calculate_player_tiebreaks(player)
        return [
            format_points(tiebreaks[key]) for key in DEFAULT_BURSTEIN_TIEBREAK_ORDER
        ]
