"""Tournament state read by the report.

The tournament owns the players, in index order, and knows how many rounds
have been played. The report only reads it.
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

from typing import Iterable, List, Optional, Set

from swissreport.exceptions import (
    InvalidPairingException,
    InvalidPlayerDataException,
    PlayerNotFoundException,
)
from swissreport.models.pairing import Pairing
from swissreport.models.player import Player
from swissreport.models.tournament_config import TournamentConfig
from swissreport.type_hints import PlayerIndex
from swissreport.utils import setup_logger

logger = setup_logger(__name__)


class Tournament:
    """Players and round count of a tournament.

    Args
    ----
    players: Players in index order; ``players[i].id`` must equal ``i``
    played_rounds: Number of rounds played so far
    config: Tournament configuration, defaults to a Burstein tournament
    """

    def __init__(
        self,
        players: List[Player],
        played_rounds: int = 0,
        config: Optional[TournamentConfig] = None,
    ) -> None:
        if played_rounds < 0:
            raise ValueError(f"played_rounds must not be negative: {played_rounds}")
        for index, player in enumerate(players):
            if player.id != index:
                raise InvalidPlayerDataException(
                    f"Player at position {index} has index {player.id}"
                )

        self.players: List[Player] = players
        self.played_rounds: int = played_rounds
        self.config: TournamentConfig = config or TournamentConfig()

    def __repr__(self) -> str:
        return (
            f"Tournament(name={self.config.name!r}, players={len(self.players)}, "
            f"played_rounds={self.played_rounds})"
        )

    def player(self, index: PlayerIndex) -> Player:
        """Look up a player by index.

        Raises:
            PlayerNotFoundException: If the index is outside the player list
        """
        if not 0 <= index < len(self.players):
            raise PlayerNotFoundException(
                f"No player with index {index} among {len(self.players)} players"
            )
        return self.players[index]

    def validate_pairings(self, pairings: Iterable[Pairing]) -> None:
        """Check that pairings reference real players, each at most once.

        Raises:
            InvalidPairingException: On an unknown index or a repeated player
        """
        seen: Set[PlayerIndex] = set()
        for pairing in pairings:
            for index in pairing.players():
                if not 0 <= index < len(self.players):
                    raise InvalidPairingException(
                        f"Pairing {pairing.white + 1}-{pairing.black + 1} "
                        f"references unknown player index {index}"
                    )
                if index in seen:
                    raise InvalidPairingException(
                        f"Player {index + 1} appears in more than one pairing"
                    )
                seen.add(index)

    @staticmethod
    def unaccelerated_score_rank_compare(player0: Player, player1: Player) -> bool:
        """Standings order on unaccelerated score.

        Returns True when ``player0`` ranks below ``player1``: a lower score
        without acceleration, or an equal score and a worse (larger) rank
        index.
        """
        if player0.score_without_acceleration != player1.score_without_acceleration:
            return (
                player0.score_without_acceleration
                < player1.score_without_acceleration
            )
        return player0.rank_index > player1.rank_index
