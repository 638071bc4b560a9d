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

"""Persistent name → path mapping, backed by a single SQLite file.

The store classifies SQLAlchemy errors into a closed set of error kinds (see ``ErrorKind``), so that callers never
need to know about the storage engine. It does not log; presentation is left to the caller.

Every operation opens its own session and closes it on all exit paths. Nothing is cached between calls, so every
read reflects what is committed in the database file at that time. Locking across processes is left to SQLite.
"""

import os
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Union

from sqlalchemy import CheckConstraint, create_engine, delete, Integer, select, String
from sqlalchemy.engine import Engine, make_url, URL
from sqlalchemy.exc import ArgumentError, DatabaseError, IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from dirmarks.framework.globals import NAME_MAX_LEN, PATH_MAX_LEN



class ErrorKind(str, Enum):
    """The kinds of failure a store operation may report."""

    STORAGE_UNAVAILABLE = 'storage_unavailable'
    DUPLICATE_NAME = 'duplicate_name'
    NOT_FOUND = 'not_found'
    OTHER = 'other'



class StoreError(Exception):
    """A store operation failed. Unless raised as one of the subclasses, the kind is ``ErrorKind.OTHER``."""
    kind: ErrorKind


    def __init__(self, error_message: str, kind: ErrorKind = ErrorKind.OTHER):
        super().__init__(error_message)
        self.error_message = error_message
        self.kind = kind



class StorageUnavailable(StoreError):
    """The backing database cannot be created, opened, read, or written."""


    def __init__(self, error_message: str):
        super().__init__(error_message, ErrorKind.STORAGE_UNAVAILABLE)



class DuplicateName(StoreError):
    """A bookmark with the given name already exists."""
    name: str


    def __init__(self, name: str):
        super().__init__(f"Name '{name}' is already used.", ErrorKind.DUPLICATE_NAME)
        self.name = name



class NotFound(StoreError):
    """No bookmark with the given name exists."""
    name: str


    def __init__(self, name: str):
        super().__init__(f"Path '{name}' not found.", ErrorKind.NOT_FOUND)
        self.name = name



class StoreBase(DeclarativeBase):
    pass



class SavedPath(StoreBase):
    """A row of the ``paths`` table. The ``id`` only defines the order of enumeration."""
    __tablename__ = 'paths'
    __table_args__ = (
        CheckConstraint(f"length(name) BETWEEN 1 AND {NAME_MAX_LEN}", name='ck_paths_name_len'),
        CheckConstraint(f"length(path) BETWEEN 1 AND {PATH_MAX_LEN}", name='ck_paths_path_len'),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(NAME_MAX_LEN), unique=True, nullable=False)
    path: Mapped[str] = mapped_column(String(PATH_MAX_LEN), nullable=False)


    def __repr__(self):
        return f"SavedPath(id={self.id}, name={self.name!r}, path={self.path!r})"



@dataclass(frozen=True)
class Bookmark:
    """A bookmark as handed out to callers of the store."""

    name: str
    path: str



def to_url(location: Union[str, os.PathLike]) -> URL:
    """Turn a storage location into an SQLAlchemy URL. The location may be a file path or an SQLite URL.

    An in-memory database must be asked for explicitly, as ``sqlite://``; an empty location is an error.
    """
    location = os.fspath(location)
    if len(location.strip()) == 0:
        raise StorageUnavailable('Empty storage location')
    if '://' not in location:
        return URL.create('sqlite', database=location)
    try:
        url = make_url(location)
    except ArgumentError as e:
        raise StorageUnavailable(f"Invalid storage location '{location}': {e}") from e
    if url.get_backend_name() != 'sqlite':
        raise StorageUnavailable(f"Unsupported storage location '{location}': only SQLite is supported")
    return url



def is_in_memory(url: URL) -> bool:
    return url.database is None or url.database in ('', ':memory:')



def is_sqlite_uri(url: URL) -> bool:
    """SQLite URI filenames (``sqlite:///file:...?uri=true``) are handed to SQLite unchanged."""
    return url.database is not None and url.database.startswith('file:')



def is_unique_violation(error: IntegrityError) -> bool:
    return 'UNIQUE constraint failed' in str(error.orig)



class BookmarkStore(object):
    """Durable, uniquely keyed mapping of bookmark names to paths.

    Create instances via ``BookmarkStore.initialize()``. The handle should be closed when done, either by calling
    ``close()`` or by using it as a context manager.
    """
    engine: Engine
    location: str


    def __init__(self, engine: Engine, location: str):
        self.engine = engine
        self.location = location
        self.session_factory = sessionmaker(bind=engine, expire_on_commit=False)


    @classmethod
    def initialize(cls, location: Union[str, os.PathLike]) -> 'BookmarkStore':
        """Open the store at the given location, creating the database file, its parent directories, and the
        ``paths`` table as needed. Safe to call on every start.

        :raises StorageUnavailable: if the location cannot be created or opened
        """
        url = to_url(location)
        if is_in_memory(url):
            engine = create_engine(url, poolclass=StaticPool, connect_args={'check_same_thread': False})
        elif is_sqlite_uri(url):
            engine = create_engine(url)
        else:
            db_file = os.path.abspath(url.database)
            try:
                os.makedirs(os.path.dirname(db_file), exist_ok=True)
            except OSError as e:
                raise StorageUnavailable(f"Cannot create directory for '{db_file}': {e}") from e
            if os.path.isdir(db_file):
                raise StorageUnavailable(f"Cannot open '{db_file}': is a directory")
            url = url.set(database=db_file)
            engine = create_engine(url)
        try:
            StoreBase.metadata.create_all(engine)
        except DatabaseError as e:
            engine.dispose()
            raise StorageUnavailable(f"Cannot open '{url.database or ':memory:'}': {e.orig}") from e
        except SQLAlchemyError as e:
            engine.dispose()
            raise StoreError(f"Cannot initialize '{url.database or ':memory:'}': {e}") from e
        return cls(engine, url.database or ':memory:')


    @contextmanager
    def session(self) -> Iterator[Session]:
        """One transaction: committed if the block completes, rolled back otherwise.

        Operational errors are reported as ``StorageUnavailable``. Integrity errors propagate unchanged, so that the
        operation can tell which constraint was violated. Other engine errors, and text which cannot be encoded for
        the database, become a ``StoreError``.
        """
        session = self.session_factory()
        try:
            yield session
            session.commit()
        except OperationalError as e:
            raise StorageUnavailable(f"'{self.location}': {e.orig}") from e
        except IntegrityError:
            raise
        except SQLAlchemyError as e:
            raise StoreError(f"'{self.location}': {e}") from e
        except UnicodeError as e:
            # undecodable file names come back from os.getcwd() as lone surrogates, which SQLite cannot bind
            raise StoreError(f"'{self.location}': text is not valid UTF-8 ({e})") from e
        finally:
            session.close()


    def insert(self, name: str, path: str) -> None:
        """Add a bookmark. Either the row is fully present afterwards, or not at all.

        :raises DuplicateName: if a bookmark of that name exists already
        """
        try:
            with self.session() as session:
                session.add(SavedPath(name=name, path=path))
        except IntegrityError as e:
            if is_unique_violation(e):
                raise DuplicateName(name) from e
            raise StoreError(f"Cannot save '{name}': {e.orig}") from e


    def lookup(self, name: str) -> str:
        """Return the path bookmarked under the given name.

        :raises NotFound: if there is no such bookmark
        """
        with self.session() as session:
            path: Optional[str] = session.execute(
                    select(SavedPath.path).where(SavedPath.name == name)).scalar_one_or_none()
        if path is None:
            raise NotFound(name)
        return path


    def list(self) -> list[Bookmark]:
        """All bookmarks in the order they were inserted."""
        with self.session() as session:
            rows = session.execute(select(SavedPath.name, SavedPath.path).order_by(SavedPath.id)).all()
        return [Bookmark(name=row.name, path=row.path) for row in rows]


    def remove(self, name: str, must_exist: bool = False) -> bool:
        """Delete the bookmark of the given name, if present.

        :param must_exist: raise ``NotFound`` instead of succeeding silently when there is nothing to delete
        :returns: ``True`` if a bookmark was deleted
        """
        with self.session() as session:
            result = session.execute(delete(SavedPath).where(SavedPath.name == name))
            removed = result.rowcount > 0
            if must_exist and not removed:
                raise NotFound(name)
        return removed


    def close(self) -> None:
        self.engine.dispose()


    def __enter__(self) -> 'BookmarkStore':
        return self


    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
