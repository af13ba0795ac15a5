"""Exceptions for use in Swiss Report"""

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


# ========== Base Application Exception ==========


class SwissReportException(Exception):
    """Base exception for all Swiss Report errors.

    All custom exceptions in the package inherit from this class.
    This enables catching all package-specific errors with a single except clause.
    """

    pass


# ========== Pairing Exceptions ==========


class PairingException(SwissReportException):
    """Base exception for pairing-related errors."""

    pass


class InvalidPairingException(PairingException):
    """Raised when a pairing references an unknown player or repeats a player."""

    pass


# ========== Player Exceptions ==========


class PlayerException(SwissReportException):
    """Base exception for player-related errors."""

    pass


class PlayerNotFoundException(PlayerException):
    """Raised when a requested player index does not exist."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when player data breaks a colour preference or index invariant."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(SwissReportException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass


class UnsupportedSwissSystemException(ConfigurationException):
    """Raised when no implementation is registered for a Swiss system."""

    pass


# ========== Report Exceptions ==========


class ReportException(SwissReportException):
    """Base exception for report assembly errors."""

    pass


class ChecklistTooLargeException(ReportException):
    """Raised when a checklist value is too long to lay out.

    Covers both an oversized cell and a round count whose colour column
    cannot be represented.
    """

    pass


class ChecklistLayoutException(ReportException):
    """Raised when a checklist row does not line up with the header."""

    pass
