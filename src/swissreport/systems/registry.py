"""Lookup of the report implementation for a pairing system."""

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

from types import MappingProxyType
from typing import Mapping

from swissreport.exceptions import UnsupportedSwissSystemException
from swissreport.models.enums import SwissSystem
from swissreport.systems.base import SwissSystemInfo
from swissreport.systems.burstein import BursteinInfo

SYSTEM_INFO: Mapping[SwissSystem, SwissSystemInfo] = MappingProxyType(
    {
        SwissSystem.BURSTEIN: BursteinInfo(),
    }
)


def get_info(system: SwissSystem) -> SwissSystemInfo:
    """Retrieve the report implementation for ``system``.

    Raises:
        UnsupportedSwissSystemException: If no implementation is registered.
            The set of systems is fixed, so this is a programming error.
    """
    try:
        return SYSTEM_INFO[system]
    except KeyError:
        raise UnsupportedSwissSystemException(
            f"No report implementation for Swiss system {system!r}"
        ) from None


def supported_systems() -> frozenset:
    """Systems with a registered report implementation."""
    return frozenset(SYSTEM_INFO)
