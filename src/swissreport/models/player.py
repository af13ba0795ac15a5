"""A chess player as seen by the report."""

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

from dataclasses import dataclass, field
from typing import Iterator, List

from swissreport.exceptions import InvalidPlayerDataException
from swissreport.models.enums import Colour
from swissreport.models.match import Match
from swissreport.type_hints import PlayerIndex


@dataclass(slots=True)
class Player:
    """
    Player state consumed by the publication sorter, the colour-history
    scanner and the checklist.

    Scores, rank and colour preference are computed by the pairing engine
    before the report runs; nothing in this package changes them.

    Attributes
    ----------
    id : int
        Zero-based index of the player in ``Tournament.players``. Displayed
        1-based.
    score_without_acceleration : float
        Points scored so far, without any acceleration bonus.
    rank_index : int
        Position in the current standings (0 is the leader).
    acceleration : float
        Acceleration bonus for the round being paired.
    colour_preference : Colour
        Colour the player is owed next, ``Colour.NONE`` for no preference.
    absolute_colour_preference : bool
        The preference is mandatory.
    strong_colour_preference : bool
        The preference is strong. Implied by an absolute preference.
    matches : list of Match
        One entry per round, in round order. Only ever appended to.

    Examples
    --------
    A player who had white, then a bye::

        player = Player(id=0, score_without_acceleration=2.0, rank_index=0)
        player.record_match(Match(opponent=3, colour=Colour.WHITE, score=1.0))
        player.record_match(Match(opponent=0, game_was_played=False, score=1.0))
    """

    id: PlayerIndex
    score_without_acceleration: float = 0.0
    rank_index: int = 0
    acceleration: float = 0.0

    colour_preference: Colour = Colour.NONE
    absolute_colour_preference: bool = False
    strong_colour_preference: bool = False

    matches: List[Match] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.id < 0:
            raise InvalidPlayerDataException(f"Player index {self.id} is negative")
        if self.rank_index < 0:
            raise InvalidPlayerDataException(
                f"Rank index {self.rank_index} of player {self.id + 1} is negative"
            )
        if self.absolute_colour_preference and not self.strong_colour_preference:
            raise InvalidPlayerDataException(
                f"Player {self.id + 1} has an absolute colour preference "
                "that is not marked strong"
            )
        if self.colour_preference is Colour.NONE and self.strong_colour_preference:
            raise InvalidPlayerDataException(
                f"Player {self.id + 1} has a strong preference for no colour"
            )

    @property
    def score_with_acceleration(self) -> float:
        """Score used for pairing and display, bonus included."""
        return self.score_without_acceleration + self.acceleration

    def played_matches(self) -> Iterator[Match]:
        """Matches in round order whose game was actually played."""
        return (match for match in self.matches if match.game_was_played)

    def record_match(self, match: Match) -> None:
        """Append the match for the next round."""
        self.matches.append(match)
