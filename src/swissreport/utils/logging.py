"""Logging utilities."""

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


import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from PyQt6 import QtCore

# the logger format used
LOG_FMT = "LVL: %(levelname)s | FILE PATH: %(pathname)s | FUN: %(funcName)s | msg: %(message)s | ln#:%(lineno)d"

LOG_FILE_NAME = "swiss-report.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5


def _writable_location(location: QtCore.QStandardPaths.StandardLocation) -> str:
    return QtCore.QStandardPaths.writableLocation(location)


def resolve_log_folder() -> Optional[str]:
    """Find a folder the log file can be written to.

    Windows uses ``%APPDATA%\\Swiss Report``; everything else uses Qt's
    AppDataLocation, then TempLocation. A ``logs`` sub folder is created.

    Returns
    -------
    str or None
        The log folder, or None when no writable location exists.
    """
    if sys.platform == "win32" and os.environ.get("APPDATA"):
        base_folder = os.path.join(os.environ["APPDATA"], "Swiss Report")
    else:
        base_folder = _writable_location(
            QtCore.QStandardPaths.StandardLocation.AppDataLocation
        ) or _writable_location(QtCore.QStandardPaths.StandardLocation.TempLocation)

    if not base_folder:
        return None

    log_folder = os.path.join(base_folder, "logs")
    try:
        os.makedirs(log_folder, exist_ok=True)
    except OSError:
        temp_folder = _writable_location(
            QtCore.QStandardPaths.StandardLocation.TempLocation
        )
        if not temp_folder:
            return None
        log_folder = os.path.join(temp_folder, "logs")
        try:
            os.makedirs(log_folder, exist_ok=True)
        except OSError:
            return None
    return log_folder


# --- Logging Setup ---
def setup_logger(logger_name: str) -> logging.Logger:
    """Set up logger for a python module.

    Sets up a rotating file handler (when a log folder is available) and a
    console handler.

    Parameters
    ----------
    logger_name : str
        The name for the logger, __name__ is idiomatic

    Returns
    -------
    logging.Logger
        the configured logger
    """
    lgr = logging.getLogger(name=logger_name)
    lgr.setLevel(logging.INFO)
    # Remove any existing handlers on this logger to avoid duplicates
    for _h in list(lgr.handlers):
        lgr.removeHandler(_h)
    log_formatter = logging.Formatter(LOG_FMT)

    file_handler = None
    log_folder = resolve_log_folder()
    if log_folder:
        log_path = os.path.join(log_folder, LOG_FILE_NAME)
        try:
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setFormatter(log_formatter)
        except OSError:
            file_handler = None

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(logging.INFO)
    lgr.addHandler(console_handler)
    if file_handler:
        lgr.addHandler(file_handler)
    lgr.debug("logger %s initialized", logger_name)
    return lgr
