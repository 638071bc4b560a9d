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

import logging
import sys
from typing import Optional

import click

from dirmarks.commands.get import CmdGet
from dirmarks.commands.listing import CmdList
from dirmarks.commands.remove import CmdRemove
from dirmarks.commands.save import CmdSave
from dirmarks.framework.cmdline import CmdLine


pass_config = click.make_pass_decorator(CmdLine, ensure=True)



class DirmarksLogFormatter(logging.Formatter):
    dbg_fmt = "DEBUG:%(module)s:%(lineno)d: %(msg)s"
    info_fmt = '%(msg)s'


    def __init__(self):
        super().__init__(fmt="%(levelname)s: %(msg)s", datefmt=None, style='%')


    def format(self, record):
        if record.levelno == logging.DEBUG or record.levelno == logging.INFO:
            # noinspection PyProtectedMember
            format_orig = self._style._fmt

            if record.levelno == logging.DEBUG:
                self._style._fmt = self.dbg_fmt
            elif record.levelno == logging.INFO:
                self._style._fmt = self.info_fmt

            result = logging.Formatter.format(self, record)
            self._style._fmt = format_orig
        else:
            result = logging.Formatter.format(self, record)
        return result



def init_logging(quiet: bool, verbose: bool) -> None:
    handler_err = logging.StreamHandler(sys.stderr)
    handler_err.setLevel(logging.ERROR)
    handler_err.setFormatter(DirmarksLogFormatter())

    handler_out = logging.StreamHandler(sys.stdout)
    handler_out.setLevel(logging.DEBUG)
    handler_out.addFilter(lambda record: record.levelno < logging.ERROR)
    handler_out.setFormatter(DirmarksLogFormatter())

    log_level = logging.INFO
    if verbose:
        log_level = logging.DEBUG
    elif quiet:
        log_level = logging.ERROR
    logging.basicConfig(handlers=[handler_out, handler_err], level=log_level)



@click.group()
@click.option('--db', type=click.Path(dir_okay=False), required=False,
        help='Bookmark database file or SQLite URL. Overrides $DIRMARKS_DB and the config file')
@click.option('--quiet', '-q', is_flag=True, help='Suppress all output except errors and command results')
@click.option('--verbose', is_flag=True, help='Enable debug output')
@click.version_option(package_name='dirmarks', prog_name='dirmarks', message='%(prog)s v%(version)s')
@pass_config
def app(config: CmdLine, db: Optional[str], quiet: bool, verbose: bool) -> None:
    """dirmarks: Named bookmarks for your working directories"""
    config.db_location = db
    init_logging(quiet, verbose)



@app.command('save')
@click.argument('name', required=False)
@pass_config
def cmd_save(config: CmdLine, name: Optional[str]) -> None:
    """Bookmark the current directory, named after its last path component unless NAME is given"""
    rc = CmdSave(config, name).run_command()
    if rc != 0:
        sys.exit(rc)



@app.command('get')
@click.argument('name', required=True)
@pass_config
def cmd_get(config: CmdLine, name: str) -> None:
    """Print the path bookmarked as NAME"""
    rc = CmdGet(config, name).run_command()
    if rc != 0:
        sys.exit(rc)



@app.command('list')
@pass_config
def cmd_list(config: CmdLine) -> None:
    """List all bookmarks"""
    rc = CmdList(config).run_command()
    if rc != 0:
        sys.exit(rc)



@app.command('remove')
@click.option('--must-exist', required=False, is_flag=True,
        help='Fail if there is no bookmark named NAME, instead of succeeding silently')
@click.argument('name', required=True)
@pass_config
def cmd_remove(config: CmdLine, must_exist: bool, name: str) -> None:
    """Remove the bookmark named NAME"""
    rc = CmdRemove(config, name, must_exist).run_command()
    if rc != 0:
        sys.exit(rc)
