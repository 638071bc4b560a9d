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
from dirmarks.framework.config import current_dir, default_name
from dirmarks.framework.store import BookmarkStore, DuplicateName
from dirmarks.framework.util import DirmarksAbort, invalid_name, invalid_path, printable


LOG: Logger = getLogger(__name__)



class CmdSave(DirmarksCommand):
    """
    Bookmark the current working directory.

    If no name is given, the bookmark is named after the last component of the directory path.
    """
    name: Optional[str]
    path: Optional[str]


    def __init__(self, config: CmdLine, name: Optional[str]):
        super().__init__(config)
        self.name = name
        self.path = None


    def invalid_args(self) -> Optional[str]:
        try:
            self.path = current_dir()
        except OSError as e:
            return f"Cannot determine the current directory: {e}"
        if self.name is None:
            self.name = default_name(self.path)
            if self.name is None:
                return f"Cannot derive a bookmark name from '{self.path}', please specify one."
            LOG.debug(f"Using default name '{printable(self.name)}'")
        return invalid_path(self.path) or invalid_name(self.name)


    def execute(self, store: BookmarkStore) -> None:
        try:
            store.insert(self.name, self.path)
        except DuplicateName as e:
            # shown even with --quiet
            click.echo(e.error_message, err=True)
            raise DirmarksAbort()
        LOG.info(f"Saved '{self.name}' -> {self.path}")
