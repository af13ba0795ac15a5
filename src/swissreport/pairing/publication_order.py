"""Publication order of a round's pairings.

White and black only reflect colour allocation, so each pairing is first
reduced to its (higher ranked, lower ranked) players. Boards are then ordered
by the unaccelerated scores of those players; acceleration bonuses never
move a board.
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

from typing import Iterable, List, Optional, Tuple

from swissreport.models.pairing import Pairing
from swissreport.models.player import Player
from swissreport.models.tournament import Tournament
from swissreport.type_hints import RankCompare, RankedPair
from swissreport.utils import setup_logger

logger = setup_logger(__name__)

# (is bye, higher score, lower score, higher rank index)
PublicationKey = Tuple[bool, float, float, int]


def higher_and_lower(
    pairing: Pairing,
    tournament: Tournament,
    compare: Optional[RankCompare] = None,
) -> RankedPair:
    """Resolve a pairing into its (higher ranked, lower ranked) players.

    Args:
        pairing: The board to resolve
        tournament: Tournament owning the players
        compare: Standings comparator, True when its first argument ranks
            below its second. Defaults to
            ``Tournament.unaccelerated_score_rank_compare``.

    Returns:
        The two players, better first. A bye gives the same player twice.
    """
    compare = compare or tournament.unaccelerated_score_rank_compare
    white = tournament.player(pairing.white)
    black = tournament.player(pairing.black)
    if compare(white, black):
        return black, white
    return white, black


def publication_key(
    pairing: Pairing,
    tournament: Tournament,
    compare: Optional[RankCompare] = None,
) -> PublicationKey:
    """Sort key of a pairing in the published order."""
    higher, lower = higher_and_lower(pairing, tournament, compare)
    return (
        pairing.is_bye,
        higher.score_without_acceleration,
        lower.score_without_acceleration,
        higher.rank_index,
    )


def sort_pairings(
    pairings: Iterable[Pairing],
    tournament: Tournament,
    compare: Optional[RankCompare] = None,
) -> List[Pairing]:
    """Order the round's pairings for publication.

    Precedence, most significant first:

    1. Byes after every other board.
    2. Higher ranked player's unaccelerated score, lower first.
    3. Lower ranked player's unaccelerated score, lower first.
    4. Higher ranked player's rank index, better standing first.

    The key of each pairing is computed once per call. The sort is stable
    and re-sorting its own output returns it unchanged.

    Raises:
        InvalidPairingException: If a pairing references an unknown player
            or a player is paired twice
    """
    pairings = list(pairings)
    tournament.validate_pairings(pairings)
    ordered = sorted(
        pairings, key=lambda pairing: publication_key(pairing, tournament, compare)
    )
    logger.debug("Sorted %d pairings for publication", len(ordered))
    return ordered


def publication_player_order(
    pairings: Iterable[Pairing], tournament: Tournament
) -> List[Player]:
    """Players in the order their boards are published.

    White comes before black on each board; a bye player appears once.
    """
    return [
        tournament.player(index)
        for pairing in pairings
        for index in pairing.players()
    ]
