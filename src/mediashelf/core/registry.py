# Copyright (c) 2025 knguyen1
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Core registry module.

One canonical instance per title and kind. `get_movie` and `get_tv_show`
return the instance already registered under a title and ignore the other
arguments in that case: asking again with a different studio or language
does not update the stored work.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Generic, TypeVar

from mediashelf.core.errors import require
from mediashelf.core.metadata import TagMap
from mediashelf.core.models import Movie, TVShow

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from mediashelf.core.languages import Language
    from mediashelf.core.metadata import MetadataStore

_log = logging.getLogger(__name__)

W = TypeVar("W")


class IdentityRegistry(Generic[W]):
    """Title-keyed interning map for one kind of work.

    Parameters
    ----------
    kind:
        Name of the registered kind, used in log records.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        self._entries: dict[str, W] = {}

    def get_or_create(self, title: str, factory: Callable[[], W]) -> W:
        """Return the instance registered under ``title``, creating it once.

        Parameters
        ----------
        title:
            Identity key.
        factory:
            Builds the instance on a miss; not called on a hit.

        Returns
        -------
        W
            The canonical instance for ``title``.
        """
        existing = self._entries.get(title)
        if existing is not None:
            _log.debug("registry_hit", extra={"kind": self.kind, "title": title})
            return existing
        created = factory()
        self._entries[title] = created
        _log.debug("registry_created", extra={"kind": self.kind, "title": title})
        return created

    def get(self, title: str) -> W | None:
        """Return the instance registered under ``title``, if any."""
        return self._entries.get(title)

    def clear(self) -> None:
        """Forget every entry; intended for test isolation."""
        self._entries.clear()

    def __contains__(self, title: object) -> bool:
        return title in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))


# Default, process-wide registries
movie_registry: IdentityRegistry[Movie] = IdentityRegistry("movie")
show_registry: IdentityRegistry[TVShow] = IdentityRegistry("tv_show")


def _check_work_args(title: str, language: Language, studio: str) -> None:
    require(
        title is not None and language is not None and studio is not None,
        "Title, language and studio are required",
    )
    require(bool(title), "Title must not be empty")


def get_movie(
    path: Path | str,
    title: str,
    language: Language,
    studio: str,
    *,
    registry: IdentityRegistry[Movie] | None = None,
    tags: MetadataStore | None = None,
) -> Movie:
    """Return the movie registered under ``title``, creating it if needed.

    Parameters
    ----------
    path:
        Location of the movie file.
    title:
        Official title; the identity key.
    language:
        Original language.
    studio:
        Publishing studio.
    registry:
        Registry to use instead of `movie_registry`.
    tags:
        Metadata store for a newly created movie; a fresh `TagMap` when
        omitted. Ignored when the title is already registered.

    Raises
    ------
    PreconditionError
        If any argument is missing or the title is empty.
    ConstructionError
        If a new movie would be built on a directory path.
    """
    require(path is not None, "Movie path is required")
    _check_work_args(title, language, studio)
    reg = registry if registry is not None else movie_registry
    return reg.get_or_create(
        title,
        lambda: Movie(
            path=Path(path),
            title=title,
            language=language,
            studio=studio,
            tags=tags if tags is not None else TagMap(),
        ),
    )


def get_tv_show(
    title: str,
    language: Language,
    studio: str,
    *,
    registry: IdentityRegistry[TVShow] | None = None,
    tags: MetadataStore | None = None,
) -> TVShow:
    """Return the show registered under ``title``, creating it if needed.

    ``registry`` and ``tags`` work as in `get_movie`.
    """
    _check_work_args(title, language, studio)
    reg = registry if registry is not None else show_registry
    return reg.get_or_create(
        title,
        lambda: TVShow(
            title=title,
            language=language,
            studio=studio,
            tags=tags if tags is not None else TagMap(),
        ),
    )
