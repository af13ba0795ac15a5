"""Text formatting helpers for report values."""

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


def format_points(value: float) -> str:
    """Format a point total with at least one decimal digit.

    Quarter points keep their second digit, so ``2.25`` stays ``"2.25"``
    while ``3`` becomes ``"3.0"`` and ``2.5`` stays ``"2.5"``.
    """
    text = f"{value:.2f}".rstrip("0")
    if text.endswith("."):
        text += "0"
    return text


def display_index(index: int) -> str:
    """Zero-based player index as shown to readers (1-based)."""
    return str(index + 1)
