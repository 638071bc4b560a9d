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

from typing import Iterable

from dirmarks.framework.store import Bookmark


COLUMN_GAP: str = '  '
"""Separator between the name column and the path column of the list output"""



def format_table(bookmarks: Iterable[Bookmark]) -> list[str]:
    """Render bookmarks as lines of ``name  path``, with the names left-justified to the longest name."""
    bookmarks = list(bookmarks)
    if len(bookmarks) == 0:
        return []
    width = max(len(bm.name) for bm in bookmarks)
    return [bm.name.ljust(width) + COLUMN_GAP + bm.path for bm in bookmarks]
