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

import click

from dirmarks.framework.basecmd import DirmarksCommand
from dirmarks.framework.cmdline import CmdLine
from dirmarks.framework.render import format_table
from dirmarks.framework.store import BookmarkStore


LOG: Logger = getLogger(__name__)



class CmdList(DirmarksCommand):
    """List all bookmarks in the order they were saved."""


    def __init__(self, config: CmdLine):
        super().__init__(config)


    def invalid_args(self) -> Optional[str]:
        return None


    def execute(self, store: BookmarkStore) -> None:
        bookmarks = store.list()
        LOG.debug(f"{len(bookmarks)} bookmark(s) in {store.location}")
        for line in format_table(bookmarks):
            click.echo(line)
