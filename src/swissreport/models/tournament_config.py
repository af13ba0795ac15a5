"""TournamentConfig data class."""

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
from typing import Any, Dict

from swissreport.constants import (
    DEFAULT_TOURNAMENT_NAME,
    DRAW_SCORE,
    LOSS_SCORE,
    WIN_SCORE,
)
from swissreport.exceptions import InvalidConfigurationException
from swissreport.models.enums import SwissSystem


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    name : str
        Tournament name.
    swiss_system : SwissSystem
        Pairing system whose report columns are used.
    points_for_win : float
        Points awarded for a win. Tiebreaks scale game points by it.
    points_for_draw : float
        Points awarded for a draw.
    points_for_loss : float
        Points awarded for a played loss.
    """

    name: str = DEFAULT_TOURNAMENT_NAME
    swiss_system: SwissSystem = SwissSystem.BURSTEIN
    points_for_win: float = WIN_SCORE
    points_for_draw: float = DRAW_SCORE
    points_for_loss: float = LOSS_SCORE

    def __post_init__(self) -> None:
        if self.points_for_win <= 0:
            raise InvalidConfigurationException(
                f"Points for a win must be positive, got {self.points_for_win}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "swiss_system": self.swiss_system.value,
            "points_for_win": self.points_for_win,
            "points_for_draw": self.points_for_draw,
            "points_for_loss": self.points_for_loss,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            name=data.get("name", DEFAULT_TOURNAMENT_NAME),
            swiss_system=SwissSystem(
                data.get("swiss_system", SwissSystem.BURSTEIN.value)
            ),
            points_for_win=data.get("points_for_win", WIN_SCORE),
            points_for_draw=data.get("points_for_draw", DRAW_SCORE),
            points_for_loss=data.get("points_for_loss", LOSS_SCORE),
        )
