"""Interface implemented once per supported pairing system."""

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

from abc import ABC, abstractmethod
from typing import List, Sequence, TextIO

from swissreport.models.enums import SwissSystem
from swissreport.models.player import Player
from swissreport.models.tournament import Tournament
from swissreport.report.checklist import write_checklist


class SwissSystemInfo(ABC):
    """
    Report capabilities of one pairing system.

    Implementations are stateless; one instance per system lives in the
    registry and is shared by every tournament.

    See Also
    --------
    swissreport.systems.registry.get_info
        Looks up the implementation for a ``SwissSystem``.
    """

    system: SwissSystem

    @abstractmethod
    def specialty_headers(self) -> List[str]:
        """Titles of the columns this system adds to the checklist."""

    @abstractmethod
    def specialty_columns(self, player: Player, tournament: Tournament) -> List[str]:
        """Values of this system's columns for one player.

        Positionally aligned with ``specialty_headers``.
        """

    def write_checklist(
        self,
        stream: TextIO,
        tournament: Tournament,
        ordered_players: Sequence[Player],
    ) -> None:
        """Write the checklist with this system's columns."""
        write_checklist(
            stream,
            self.specialty_headers(),
            lambda player: self.specialty_columns(player, tournament),
            tournament,
            ordered_players,
        )
