"""Tiebreak calculation for the checklist columns.

Opponent scores are unaccelerated, and only games actually played count:
byes, forfeits and other unplayed rounds contribute nothing.
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

from typing import Dict, List

from swissreport.constants import (
    TB_BUCHHOLZ,
    TB_MEDIAN_BUCHHOLZ,
    TB_SONNEBORN_BERGER,
)
from swissreport.models.player import Player
from swissreport.models.tournament import Tournament


class TiebreakCalculator:
    """Calculates tiebreak scores of one tournament.

    Supported systems:
    - Buchholz: Sum of opponents' scores
    - Median-Buchholz: Buchholz dropping the highest and lowest opponent
    - Sonneborn-Berger: Sum of (opponent score x fraction of the game won)
    """

    def __init__(self, tournament: Tournament) -> None:
        self.tournament = tournament

    def calculate_player_tiebreaks(self, player: Player) -> Dict[str, float]:
        """Calculate all tiebreak scores for a single player.

        Args:
            player: The player to calculate tiebreaks for

        Returns:
            Tiebreak values keyed by tiebreak key
        """
        opponent_scores = self.opponent_scores(player)
        return {
            TB_SONNEBORN_BERGER: self.sonneborn_berger(player),
            TB_BUCHHOLZ: self.buchholz(opponent_scores),
            TB_MEDIAN_BUCHHOLZ: self.median_buchholz(opponent_scores),
        }

    def opponent_scores(self, player: Player) -> List[float]:
        """Unaccelerated scores of the opponents of every played game."""
        return [
            self.tournament.player(match.opponent).score_without_acceleration
            for match in player.played_matches()
        ]

    def buchholz(self, opponent_scores: List[float]) -> float:
        return sum(opponent_scores)

    def median_buchholz(self, opponent_scores: List[float]) -> float:
        """Calculate Median-Buchholz.

        Drop both the highest and lowest opponent scores.

        Args:
            opponent_scores: List of opponent scores

        Returns:
            The Median-Buchholz score
        """
        if len(opponent_scores) <= 2:
            # If 1 or 2 opponents, can't drop both ends
            return sum(opponent_scores)

        sorted_scores = sorted(opponent_scores)
        return sum(sorted_scores[1:-1])

    def sonneborn_berger(self, player: Player) -> float:
        """Calculate Sonneborn-Berger.

        Each played game adds the opponent's score scaled by the share of a
        win the player scored, so a draw adds half the opponent's score.
        """
        points_for_win = self.tournament.config.points_for_win
        total = 0.0
        for match in player.played_matches():
            opponent = self.tournament.player(match.opponent)
            total += opponent.score_without_acceleration * match.score / points_for_win
        return total
