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

"""Core models module.

Movies and TV shows should be obtained through `mediashelf.core.registry`
(`get_movie`, `get_tv_show`) so that each title maps to a single instance.
All models compare and hash by identity. Movies and shows are frozen: their
title is the registry key and a movie path is fixed once checked.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from mediashelf.core.cursor import BingeCursor
from mediashelf.core.errors import ConstructionError, require
from mediashelf.core.linking import SequenceLink, set_previous
from mediashelf.core.metadata import TagMap
from mediashelf.core.paths import get_path_probe

if TYPE_CHECKING:
    from collections.abc import Iterator

    from mediashelf.core.languages import Language
    from mediashelf.core.metadata import MetadataStore

_log = logging.getLogger(__name__)


class _Tagged:
    """Metadata accessors over a ``tags`` store."""

    __slots__ = ()

    tags: MetadataStore

    def get_info(self, key: str) -> str:
        """Return the value tagged under ``key``.

        Unlike a plain lookup, an absent key is not answered with ``None``:
        asking for it is a `PreconditionError`, for shows and episodes as
        well as movies. Check `has_info` first.
        """
        return self.tags.get(key)

    def has_info(self, key: str) -> bool:
        return self.tags.has(key)

    def set_info(self, key: str, value: str | None) -> str | None:
        return self.tags.set(key, value)


@dataclass(eq=False, frozen=True, slots=True, weakref_slot=True)
class Movie(_Tagged):
    """A single movie identified by its file path.

    Parameters
    ----------
    path:
        Location of the movie on the file system. It may not exist yet, but
        it must not denote a directory.
    title:
        Official title in the original language.
    language:
        Original language.
    studio:
        Studio which originally published the movie.

    Raises
    ------
    ConstructionError
        If ``path`` exists and is not a regular file.
    """

    path: Path
    title: str
    language: Language
    studio: str
    tags: MetadataStore = field(default_factory=TagMap, repr=False)
    sequence: SequenceLink = field(default_factory=SequenceLink, init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", Path(self.path))
        if not get_path_probe().is_file_or_missing(self.path):
            msg = f"The path should point to a file: {self.path}"
            raise ConstructionError(msg)

    def watch(self) -> None:
        # Playback is a stub; only announce it.
        _log.info("now_playing", extra={"title": self.title, "path": str(self.path)})

    def is_valid(self) -> bool:
        return get_path_probe().is_readable_file(self.path)

    # --- Sequenceable ---
    def has_previous(self) -> bool:
        return self.sequence.previous is not None

    def has_next(self) -> bool:
        return self.sequence.next is not None

    def get_previous(self) -> Movie | None:
        return self.sequence.previous

    def get_next(self) -> Movie | None:
        return self.sequence.next

    def set_previous(self, movie: Movie) -> None:
        """Set the prequel, updating the links of every movie involved."""
        set_previous(self, movie)


@dataclass(eq=False, slots=True)
class Episode(_Tagged):
    """One episode of a TV show.

    Episodes are created by `TVShow.create_and_add_episode`. The studio is
    always the show's; the language is the show's unless the episode was
    added with its own (e.g., a dubbed special).

    Parameters
    ----------
    show:
        Owning show.
    number:
        1-based position within the show.
    title:
        Episode title.
    path:
        Location of the video file.
    language_override:
        Episode language when it differs from the show's.
    """

    show: TVShow
    number: int
    title: str
    path: Path
    language_override: Language | None = None
    tags: MetadataStore = field(default_factory=TagMap, repr=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    @property
    def language(self) -> Language:
        if self.language_override is not None:
            return self.language_override
        return self.show.language

    @property
    def studio(self) -> str:
        return self.show.studio

    def watch(self) -> None:
        _log.info(
            "now_playing",
            extra={
                "title": self.title,
                "show": self.show.title,
                "number": self.number,
                "path": str(self.path),
            },
        )

    def is_valid(self) -> bool:
        return get_path_probe().is_readable_file(self.path)

    def __repr__(self) -> str:
        return (
            f"Episode(show={self.show.title!r}, number={self.number}, "
            f"title={self.title!r})"
        )


@dataclass(eq=False, frozen=True, slots=True)
class TVShow(_Tagged):
    """A TV show aggregating episodes in airing order.

    Parameters
    ----------
    title:
        Official title of the show.
    language:
        Original language.
    studio:
        Studio which originally published the show.
    """

    title: str
    language: Language
    studio: str
    tags: MetadataStore = field(default_factory=TagMap, repr=False)
    _episodes: list[Episode] = field(default_factory=list, init=False, repr=False)
    _cursor: BingeCursor[Episode] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_cursor", BingeCursor(self._episodes))

    def create_and_add_episode(
        self,
        path: Path | str,
        title: str,
        *,
        language: Language | None = None,
    ) -> Episode:
        """Create an episode and append it to the show.

        Parameters
        ----------
        path:
            Path of the file holding the episode video.
        title:
            Episode title.
        language:
            Episode language if it differs from the show's.

        Returns
        -------
        Episode
            The new episode, numbered after the last one.
        """
        require(
            path is not None and title is not None,
            "Episode path and title are required",
        )
        episode = Episode(
            show=self,
            number=len(self._episodes) + 1,
            title=title,
            path=Path(path),
            language_override=language,
        )
        self._episodes.append(episode)
        return episode

    def get_episode(self, number: int) -> Episode:
        """Return episode ``number``; numbers start at 1."""
        require(
            1 <= number <= len(self._episodes),
            f"No episode {number} in {self.title!r} ({len(self._episodes)} known)",
        )
        return self._episodes[number - 1]

    @property
    def episodes(self) -> tuple[Episode, ...]:
        return tuple(self._episodes)

    def watch(self) -> None:
        for episode in self._episodes:
            if episode.is_valid():
                episode.watch()

    def is_valid(self) -> bool:
        """Return True if the show has at least one valid episode."""
        return any(episode.is_valid() for episode in self._episodes)

    # --- Bingeable ---
    def total_count(self) -> int:
        return self._cursor.total_count()

    def remaining_count(self) -> int:
        return self._cursor.remaining_count()

    def next(self) -> Episode:
        return self._cursor.next()

    def reset(self) -> None:
        self._cursor.reset()

    def __iter__(self) -> Iterator[Episode]:
        return iter(tuple(self._episodes))

    def __len__(self) -> int:
        return len(self._episodes)


@dataclass(eq=False, slots=True)
class Watchlist:
    """Named, ordered list of movies and episodes.

    Insertion order is the watching order. A watchlist can also be binged:
    `next` walks its items and starts over after the last one.

    Parameters
    ----------
    name:
        Non-empty display name.
    """

    name: str
    _items: list[Movie | Episode] = field(default_factory=list, init=False, repr=False)
    _cursor: BingeCursor[Movie | Episode] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        require(bool(self.name), "Watchlist name must not be empty")
        self._cursor = BingeCursor(self._items)

    def rename(self, name: str) -> None:
        require(bool(name), "Watchlist name must not be empty")
        self.name = name

    def add_watchable(self, item: Movie | Episode) -> None:
        """Append ``item`` to the end of the list."""
        require(
            isinstance(item, (Movie, Episode)),
            "Only movies and episodes can be listed",
        )
        self._items.append(item)

    def remove_watchable(self, index: int) -> Movie | Episode:
        """Remove and return the item at 0-based ``index``."""
        require(0 <= index < len(self._items), f"No item at index {index}")
        item = self._items.pop(index)
        self._cursor.removed(index)
        return item

    def valid_count(self) -> int:
        """Number of items ready to be played."""
        return sum(1 for item in self._items if item.is_valid())

    def watch(self) -> None:
        for item in self._items:
            if item.is_valid():
                item.watch()

    # --- Bingeable ---
    def total_count(self) -> int:
        return self._cursor.total_count()

    def remaining_count(self) -> int:
        return self._cursor.remaining_count()

    def next(self) -> Movie | Episode:
        return self._cursor.next()

    def reset(self) -> None:
        self._cursor.reset()

    def __iter__(self) -> Iterator[Movie | Episode]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Movie | Episode:
        return self._items[index]
