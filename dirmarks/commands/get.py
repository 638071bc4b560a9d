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

from typing import Optional

import click

from dirmarks.framework.basecmd import DirmarksCommand
from dirmarks.framework.cmdline import CmdLine
from dirmarks.framework.store import BookmarkStore, NotFound
from dirmarks.framework.util import DirmarksError, invalid_name



class CmdGet(DirmarksCommand):
    """Print the path bookmarked under a name."""
    name: str


    def __init__(self, config: CmdLine, name: str):
        super().__init__(config)
        self.name = name


    def invalid_args(self) -> Optional[str]:
        return invalid_name(self.name)


    def execute(self, store: BookmarkStore) -> None:
        try:
            path = store.lookup(self.name)
        except NotFound as e:
            raise DirmarksError(e.error_message)
        click.echo(path)
