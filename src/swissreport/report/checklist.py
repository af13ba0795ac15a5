"""Checklist report assembly.

The checklist lists one row per player: identity, score, colour history,
colour preference, the columns specific to the pairing system and the
opponent of every round. Columns are right aligned and tab separated, with a
blank line between scoregroups.
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

from typing import Optional, Sequence, TextIO

from swissreport.constants import (
    BLACK_CHAR,
    CHECKLIST_OUT_OF_MEMORY_MESSAGE,
    CHECKLIST_TOO_LARGE_MESSAGE,
    CHECKLIST_TRAILER,
    HEADER_ID,
    HEADER_POINTS,
    HEADER_PREFERENCE,
    HEADER_ROUND_PREFIX,
    MAX_CHECKLIST_CELL_WIDTH,
    PREF_ABSOLUTE_BLACK,
    PREF_ABSOLUTE_WHITE,
    PREF_MILD_BLACK,
    PREF_MILD_WHITE,
    PREF_NONE,
    PREF_STRONG_BLACK,
    PREF_STRONG_WHITE,
    WHITE_CHAR,
)
from swissreport.exceptions import (
    ChecklistLayoutException,
    ChecklistTooLargeException,
)
from swissreport.models.enums import Colour
from swissreport.models.player import Player
from swissreport.models.tournament import Tournament
from swissreport.type_hints import ColumnWidths, Row, SpecialtyValues
from swissreport.utils import display_index, format_points, setup_logger

logger = setup_logger(__name__)


def _checked_width(cell: str) -> int:
    if len(cell) > MAX_CHECKLIST_CELL_WIDTH:
        raise ChecklistTooLargeException(
            f"Checklist cell of {len(cell)} characters exceeds "
            f"{MAX_CHECKLIST_CELL_WIDTH}"
        )
    return len(cell)


def get_header(specialty_headers: Sequence[str], tournament: Tournament) -> Row:
    """Header row: fixed columns, system columns, a spacer, then one per round."""
    if tournament.played_rounds >= MAX_CHECKLIST_CELL_WIDTH:
        raise ChecklistTooLargeException(
            f"{tournament.played_rounds} rounds do not fit in a colour column"
        )
    header = [
        HEADER_ID,
        HEADER_POINTS,
        "-" * (tournament.played_rounds + 1),
        HEADER_PREFERENCE,
    ]
    header.extend(specialty_headers)
    header.append("")
    header.extend(
        f"{HEADER_ROUND_PREFIX}{round_index + 1}"
        for round_index in range(tournament.played_rounds)
    )
    return header


def colour_string(player: Player) -> str:
    """One character per played game, in round order."""
    return "".join(
        WHITE_CHAR if match.colour is Colour.WHITE else BLACK_CHAR
        for match in player.played_matches()
    )


def preference_indicator(player: Player) -> str:
    """Checklist notation for the player's colour preference.

    Absolute preferences are upper case, strong ones upper case in
    parentheses, mild ones lower case. ``"A "`` means no preference.
    """
    prefers_white = player.colour_preference is Colour.WHITE
    if player.absolute_colour_preference:
        return PREF_ABSOLUTE_WHITE if prefers_white else PREF_ABSOLUTE_BLACK
    if player.strong_colour_preference:
        return PREF_STRONG_WHITE if prefers_white else PREF_STRONG_BLACK
    if player.colour_preference is Colour.NONE:
        return PREF_NONE
    return PREF_MILD_WHITE if prefers_white else PREF_MILD_BLACK


def get_row(
    specialty_columns: Sequence[str], player: Player, tournament: Tournament
) -> Row:
    """Row of one player, aligned with ``get_header``.

    A round without a played game, or not yet recorded for the player,
    leaves the opponent cell blank.
    """
    row = [
        display_index(player.id),
        format_points(player.score_with_acceleration),
        colour_string(player),
        preference_indicator(player),
    ]
    row.extend(specialty_columns)
    row.append("")
    for round_index in range(tournament.played_rounds):
        if round_index < len(player.matches) and (
            player.matches[round_index].game_was_played
        ):
            row.append(display_index(player.matches[round_index].opponent))
        else:
            row.append("")
    return row


def update_column_widths(widths: ColumnWidths, row: Sequence[str]) -> None:
    """Widen ``widths`` in place so every cell of ``row`` fits.

    Raises:
        ChecklistLayoutException: If the row and widths differ in length
        ChecklistTooLargeException: If a cell is too long to lay out
    """
    if len(row) != len(widths):
        raise ChecklistLayoutException(
            f"Row has {len(row)} cells but the header has {len(widths)}"
        )
    for position, cell in enumerate(row):
        widths[position] = max(widths[position], _checked_width(cell))


def format_row(row: Sequence[str], widths: ColumnWidths) -> str:
    """Right align each cell to its column width, each followed by a tab."""
    return "".join(f"{cell:>{width}}\t" for cell, width in zip(row, widths))


def build_checklist(
    specialty_headers: Sequence[str],
    specialty_values: SpecialtyValues,
    tournament: Tournament,
    ordered_players: Sequence[Player],
) -> str:
    """Lay out the whole checklist body.

    Widths are measured over the header and every row before any text is
    produced. A blank line precedes the first player and every player whose
    accelerated score differs from the previous one.

    Args:
        specialty_headers: Titles of the pairing system's columns
        specialty_values: Produces a player's pairing system columns
        tournament: Tournament being reported
        ordered_players: Players in publication order

    Returns:
        The checklist text, without the trailing newlines
    """
    header = get_header(specialty_headers, tournament)
    rows = [
        get_row(specialty_values(player), player, tournament)
        for player in ordered_players
    ]

    widths = [_checked_width(cell) for cell in header]
    for row in rows:
        update_column_widths(widths, row)

    lines = ["\n", format_row(header, widths)]
    previous_player: Optional[Player] = None
    for player, row in zip(ordered_players, rows):
        lines.append("\n")
        if (
            previous_player is None
            or previous_player.score_with_acceleration
            != player.score_with_acceleration
        ):
            lines.append("\n")
        lines.append(format_row(row, widths))
        previous_player = player
    return "".join(lines)


def write_checklist(
    stream: TextIO,
    specialty_headers: Sequence[str],
    specialty_values: SpecialtyValues,
    tournament: Tournament,
    ordered_players: Sequence[Player],
) -> None:
    """Write the checklist, or a one-line error in its place.

    The body is built completely before anything is written, so the stream
    never receives a partial checklist. A checklist too large to lay out and
    running out of memory are reported in the stream; every other error
    propagates. The output always ends with three newlines.
    """
    try:
        body = build_checklist(
            specialty_headers, specialty_values, tournament, ordered_players
        )
    except ChecklistTooLargeException as e:
        logger.error("Checklist not produced: %s", e)
        body = CHECKLIST_TOO_LARGE_MESSAGE
    except MemoryError:
        logger.error("Checklist not produced: out of memory")
        body = CHECKLIST_OUT_OF_MEMORY_MESSAGE
    else:
        logger.info(
            "Checklist written for %d players after %d rounds",
            len(ordered_players),
            tournament.played_rounds,
        )
    stream.write(body)
    stream.write(CHECKLIST_TRAILER)


#  LocalWords:  scoregroup scoregroups
