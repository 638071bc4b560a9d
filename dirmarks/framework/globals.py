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

APP_NAME: str = 'dirmarks'
"""Program name, also used to locate the user config directory"""

NAME_MAX_LEN: int = 50
"""Maximum number of characters in a bookmark name"""

PATH_MAX_LEN: int = 500
"""Maximum number of characters in a bookmarked path"""

DB_FILENAME: str = 'dirmarks.db'
"""Name of the SQLite database file created in the config directory unless another location is configured"""

CONFIG_FILENAME: str = 'config.json'
"""Name of the optional config file in the config directory"""

ENV_DB: str = 'DIRMARKS_DB'
"""Environment variable which overrides the store location"""

ENV_HOME: str = 'DIRMARKS_HOME'
"""Environment variable which overrides the config directory"""
