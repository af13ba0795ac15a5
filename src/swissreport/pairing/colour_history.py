"""Colour history scanning for colour allocation.

When two players' colour preferences cannot both be granted, the pairing
engine alternates the colours the two players had in the most recent round
where they differed. Rounds without a game played carry no colour and are
skipped, so the two histories are aligned on played games, not on rounds.
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

from typing import List

from swissreport.models.enums import Colour
from swissreport.models.match import Match
from swissreport.models.player import Player
from swissreport.type_hints import ColourPair
from swissreport.utils import setup_logger

logger = setup_logger(__name__)


def _skip_unplayed_games(matches: List[Match], position: int) -> int:
    """Move ``position`` backward to the nearest played game.

    Returns -1 when no played game remains at or before ``position``.
    """
    while position >= 0 and not matches[position].game_was_played:
        position -= 1
    return position


def last_played_colour(player: Player) -> Colour:
    """Colour of the player's most recent played game, or ``Colour.NONE``."""
    position = _skip_unplayed_games(player.matches, len(player.matches) - 1)
    if position < 0:
        return Colour.NONE
    return player.matches[position].colour


def find_first_colour_difference(player0: Player, player1: Player) -> ColourPair:
    """Find the colours of two players in the latest round they differed.

    Both histories are walked from the most recent played game backward,
    one played game at a time each, for as long as the two colours agree.

    Parameters
    ----------
    player0 : Player
        First player.
    player1 : Player
        Second player.

    Returns
    -------
    tuple of Colour
        ``(colour0, colour1)`` at the first disagreement. A side whose played
        games ran out first is ``Colour.NONE``. Two identical histories give
        ``(Colour.NONE, Colour.NONE)``; so does a player with no played games
        paired against another such player.

    Examples
    --------
    Played colours most recent first, W B W against B B W::

        >>> find_first_colour_difference(a, b)
        (<Colour.WHITE: 'White'>, <Colour.BLACK: 'Black'>)
    """
    matches0 = player0.matches
    matches1 = player1.matches
    position0 = _skip_unplayed_games(matches0, len(matches0) - 1)
    position1 = _skip_unplayed_games(matches1, len(matches1) - 1)

    while (
        position0 >= 0
        and position1 >= 0
        and matches0[position0].colour == matches1[position1].colour
    ):
        position0 = _skip_unplayed_games(matches0, position0 - 1)
        position1 = _skip_unplayed_games(matches1, position1 - 1)

    colour0 = matches0[position0].colour if position0 >= 0 else Colour.NONE
    colour1 = matches1[position1].colour if position1 >= 0 else Colour.NONE
    logger.debug(
        "Colour difference for players %d and %d: %s / %s",
        player0.id + 1,
        player1.id + 1,
        colour0.value,
        colour1.value,
    )
    return colour0, colour1
