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

import commentjson

from dirmarks.framework.globals import NAME_MAX_LEN, PATH_MAX_LEN



class DirmarksError(Exception):
    """An ERROR occurred which prevents further program execution."""


    def __init__(self, error_message):
        self.error_message = error_message



class DirmarksFailure(Exception):
    """An operation did not succeed, so a non-zero exit code should be returned, but it is not an error. For example,
       we may have been asked to remove a bookmark which does not exist."""


    def __init__(self, error_message):
        self.error_message = error_message



class DirmarksAbort(Exception):
    """The program should terminate gracefully. Not an error."""


    def __init__(self, message: Optional[str] = None):
        self.message = message



def is_utf8(text: str) -> bool:
    """Strings from the file system may carry undecodable bytes as lone surrogates, which cannot be stored."""
    try:
        text.encode('utf-8')
    except UnicodeEncodeError:
        return False
    return True



def printable(text: str) -> str:
    return text.encode('utf-8', 'backslashreplace').decode('utf-8')



def invalid_name(name: Optional[str]) -> Optional[str]:
    """Check a bookmark name for length limits, and that it can be stored.

    :returns: the error message, or ``None`` if the name is fine
    """
    if name is None or len(name.strip()) == 0:
        return 'Missing argument \'NAME\'.'
    if not is_utf8(name):
        return f"Name is not valid UTF-8: {printable(name)}"
    if len(name) > NAME_MAX_LEN:
        return f"Name too long ({len(name)} characters, at most {NAME_MAX_LEN} allowed): {name}"
    return None



def invalid_path(path: str) -> Optional[str]:
    if len(path) == 0:
        return 'Empty path.'
    if not is_utf8(path):
        return f"Path is not valid UTF-8: {printable(path)}"
    if len(path) > PATH_MAX_LEN:
        return f"Path too long ({len(path)} characters, at most {PATH_MAX_LEN} allowed): {path}"
    return None



def read_json_with_comments(filename: str) -> dict:
    with open(filename, 'r', encoding='utf-8') as f:
        return commentjson.load(f)
