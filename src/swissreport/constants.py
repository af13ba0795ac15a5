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

# --- Constants ---

# Game outcome scores
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
LOSS_SCORE = 0.0

# Colour characters used in the checklist colour column
WHITE_CHAR = "W"
BLACK_CHAR = "B"

# Colour preference indicators (checklist "Pref" column)
PREF_ABSOLUTE_WHITE = "W "
PREF_ABSOLUTE_BLACK = "B "
PREF_STRONG_WHITE = "(W)"
PREF_STRONG_BLACK = "(B)"
PREF_MILD_WHITE = "w "
PREF_MILD_BLACK = "b "
PREF_NONE = "A "

# Checklist header titles
HEADER_ID = "ID"
HEADER_POINTS = "Pts"
HEADER_PREFERENCE = "Pref"
HEADER_ROUND_PREFIX = "R"

# Tiebreak keys - Burstein
TB_SONNEBORN_BERGER = "sb"
TB_BUCHHOLZ = "buchholz"
TB_MEDIAN_BUCHHOLZ = "median"

# Column titles for the tiebreaks, in checklist order
TIEBREAK_HEADERS = {
    TB_SONNEBORN_BERGER: "SB",
    TB_BUCHHOLZ: "Buch",
    TB_MEDIAN_BUCHHOLZ: "Med",
}

DEFAULT_BURSTEIN_TIEBREAK_ORDER = [
    TB_SONNEBORN_BERGER,
    TB_BUCHHOLZ,
    TB_MEDIAN_BUCHHOLZ,
]

# Largest cell the checklist will lay out (a signed 32-bit width)
MAX_CHECKLIST_CELL_WIDTH = 2**31 - 1

# Messages substituted for the checklist body
CHECKLIST_TOO_LARGE_MESSAGE = (
    "Error: The build does not support checklists for tournaments this large."
)
CHECKLIST_OUT_OF_MEMORY_MESSAGE = (
    "Error: There was not enough memory to construct the checklist."
)
# Number of newlines terminating every checklist, degraded or not
CHECKLIST_TRAILER = "\n\n\n"

DEFAULT_TOURNAMENT_NAME = "Untitled Tournament"
