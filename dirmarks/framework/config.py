#
# dirmarks - Named bookmarks for your working directories
# Copyright (c) 2019-2021 the pagemarks contributors
# Copyright (c) 2026 the dirmarks contributors
#
# This program is free software: you can redistribute it and/or modify it under the terms of the GNU General Public
# License, version 3, as published by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied
# warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/gpl.html>.
#

"""Access to the process environment: working directory, config directory, config file, and store location."""

import os
from typing import Optional

import click
import commentjson

from dirmarks.framework.globals import APP_NAME, CONFIG_FILENAME, DB_FILENAME, ENV_DB, ENV_HOME
from dirmarks.framework.util import DirmarksError, read_json_with_comments



def current_dir() -> str:
    return os.getcwd()



def default_name(cwd: str) -> Optional[str]:
    """Derive a bookmark name from the leaf component of the given directory. There is none for a filesystem root."""
    leaf = os.path.basename(os.path.normpath(cwd))
    return leaf if len(leaf) > 0 else None



def config_dir() -> str:
    """The user-scoped config directory, which also holds the database unless configured otherwise."""
    home = os.getenv(ENV_HOME)
    if home is not None and len(home.strip()) > 0:
        return os.path.expanduser(home)
    return click.get_app_dir(APP_NAME)



def read_config(cfg_dir: str) -> dict:
    """Read the config file from the given directory. A missing file is the same as an empty one."""
    cfg_file = os.path.join(cfg_dir, CONFIG_FILENAME)
    if not os.path.isfile(cfg_file):
        return {}
    try:
        cfg = read_json_with_comments(cfg_file)
    except (OSError, ValueError, commentjson.JSONLibraryException) as e:
        raise DirmarksError(f"Failed to read config file {cfg_file}: {e}") from e
    if not isinstance(cfg, dict):
        raise DirmarksError(f"Config file must contain a JSON object: {cfg_file}")
    return cfg



def store_location(cfg_dir: Optional[str] = None) -> str:
    """Determine where the bookmarks are stored, unless given on the command line.

    In order of precedence, this is the ``DIRMARKS_DB`` environment variable, the ``database`` entry of the config
    file, or ``dirmarks.db`` in the config directory. Relative paths from the config file are relative to the config
    directory.
    """
    location = os.getenv(ENV_DB)
    if location is not None and len(location.strip()) > 0:
        return location
    if cfg_dir is None:
        cfg_dir = config_dir()
    database = read_config(cfg_dir).get('database')
    if database is None:
        return os.path.join(cfg_dir, DB_FILENAME)
    if not isinstance(database, str) or len(database.strip()) == 0:
        raise DirmarksError(f"Invalid 'database' entry in config file: {database!r}")
    if '://' in database:
        return database
    return os.path.join(cfg_dir, os.path.expanduser(database))
