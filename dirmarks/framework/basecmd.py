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

import abc
from logging import getLogger, Logger
from typing import final, Optional

from dirmarks.framework.cmdline import CmdLine
from dirmarks.framework.config import store_location
from dirmarks.framework.store import BookmarkStore, StorageUnavailable, StoreError
from dirmarks.framework.util import DirmarksAbort, DirmarksError, DirmarksFailure


LOG: Logger = getLogger(__name__)



class DirmarksCommand(object, metaclass=abc.ABCMeta):
    """Abstract superclass of all dirmarks commands"""
    config: CmdLine


    def __init__(self, config: CmdLine):
        self.config = config


    @final
    def run_command(self) -> int:
        try:
            err_msg = self.invalid_args()
            if err_msg is not None:
                LOG.error(err_msg)
                return 2
            store = self.open_store()
            try:
                self.execute(store)
            finally:
                store.close()
            return 0
        except DirmarksError as e:
            LOG.error(e.error_message)
            return 1
        except DirmarksFailure as e:
            LOG.info(e.error_message)
            return 1
        except DirmarksAbort as e:
            if e.message is not None:
                LOG.info(e.message)
            return 0
        except StorageUnavailable as e:
            LOG.error('Storage unavailable: ' + e.error_message)
            return 1
        except StoreError as e:
            LOG.error(e.error_message)
            return 1


    def open_store(self) -> BookmarkStore:
        location = self.locate_store()
        LOG.debug(f"Opening bookmark store: {location}")
        return BookmarkStore.initialize(location)


    def locate_store(self) -> str:
        if self.config.db_location is not None and len(self.config.db_location.strip()) > 0:
            return self.config.db_location
        return store_location()


    @abc.abstractmethod
    def execute(self, store: BookmarkStore) -> None:
        """Execute the command"""
        raise NotImplementedError('execute')


    @abc.abstractmethod
    def invalid_args(self) -> Optional[str]:
        """Validate the arguments passed into the command. An error found is immediately returned.

        :returns: the error message, in case something was wrong, or ``None`` if all is well
        """
        raise NotImplementedError('invalid_args')
