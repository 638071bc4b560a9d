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

from logging import getLogger, Logger
from typing import Optional

from dirmarks.framework.basecmd import DirmarksCommand
from dirmarks.framework.cmdline import CmdLine
from dirmarks.framework.store import BookmarkStore, NotFound
from dirmarks.framework.util import DirmarksFailure, invalid_name


LOG: Logger = getLogger(__name__)



class CmdRemove(DirmarksCommand):
    """Remove a bookmark. Removing a name which is not bookmarked succeeds, unless ``must_exist`` is set."""
    name: str
    must_exist: bool


    def __init__(self, config: CmdLine, name: str, must_exist: bool = False):
        super().__init__(config)
        self.name = name
        self.must_exist = must_exist


    def invalid_args(self) -> Optional[str]:
        return invalid_name(self.name)


    def execute(self, store: BookmarkStore) -> None:
        try:
            removed = store.remove(self.name, must_exist=self.must_exist)
        except NotFound as e:
            raise DirmarksFailure(e.error_message)
        if not removed:
            LOG.debug(f"No bookmark named '{self.name}'")
        LOG.info('Entry removed.')
