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

"""Watchlist generation.

A generator scans a catalog, keeps the items accepted by a selection
predicate and orders them with a comparator. The predicate sees TV shows,
episodes and movies alike: a show must pass before any of its episodes are
considered, and each episode must then pass on its own.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from mediashelf.core.errors import require
from mediashelf.core.models import Episode, Movie, Watchlist

if TYPE_CHECKING:
    from collections.abc import Callable

    from mediashelf.core.base import Watchable
    from mediashelf.core.catalog import Catalog
    from mediashelf.core.languages import Language

    Predicate = Callable[[Watchable], bool]
    Comparator = Callable[[Watchable, Watchable], int]

_log = logging.getLogger(__name__)


@runtime_checkable
class GenerationParams(Protocol):
    """Selection and ordering used to generate a watchlist."""

    def filter(self, item: Watchable) -> bool:
        """Whether ``item`` (show, episode or movie) is selected."""

    def compare(self, a: Watchable, b: Watchable) -> int:
        """Negative, zero or positive as ``a`` sorts before, with or after ``b``."""


@dataclass(frozen=True, slots=True)
class WatchlistCriteria:
    """`GenerationParams` built from a predicate and a comparator.

    Parameters
    ----------
    predicate:
        Selection applied to shows, episodes and movies.
    comparator:
        Total order over selected items.
    """

    predicate: Predicate
    comparator: Comparator

    def filter(self, item: Watchable) -> bool:
        return bool(self.predicate(item))

    def compare(self, a: Watchable, b: Watchable) -> int:
        return self.comparator(a, b)


class WatchlistGenerator:
    """Build watchlists out of a catalog's shows and movies."""

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def generate(self, name: str, params: GenerationParams) -> Watchlist:
        """Return a new watchlist of the selected items in comparator order.

        Parameters
        ----------
        name:
            Name of the new watchlist.
        params:
            Selection predicate and ordering.

        Returns
        -------
        Watchlist
            Fresh list; the catalog is not modified.
        """
        require(
            name is not None and params is not None,
            "Name and parameters are required",
        )

        items: list[Movie | Episode] = []
        for show in self._catalog.tv_shows:
            if not params.filter(show):
                continue
            items.extend(episode for episode in show if params.filter(episode))
        items.extend(movie for movie in self._catalog.movies if params.filter(movie))

        items.sort(key=cmp_to_key(params.compare))
        watchlist = Watchlist(name)
        for item in items:
            watchlist.add_watchable(item)
        _log.info(
            "watchlist_generated",
            extra={
                "watchlist": name,
                "items": len(items),
                "catalog": self._catalog.name,
            },
        )
        return watchlist


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare_by(*keys: Callable[[Watchable], Any]) -> Comparator:
    """Return a comparator ordering by ``keys`` in turn."""
    require(bool(keys), "At least one sort key is required")

    def comparator(a: Watchable, b: Watchable) -> int:
        return _cmp(tuple(k(a) for k in keys), tuple(k(b) for k in keys))

    return comparator


def by_title(a: Watchable, b: Watchable) -> int:
    return _cmp(a.title, b.title)


def by_studio(a: Watchable, b: Watchable) -> int:
    return _cmp(a.studio, b.studio)


def by_language(a: Watchable, b: Watchable) -> int:
    return _cmp(a.language.label, b.language.label)


# --- Predicates ---
def language_is(language: Language) -> Predicate:
    return lambda item: item.language == language


def studio_is(studio: str) -> Predicate:
    return lambda item: item.studio == studio


def has_tag(key: str, value: str | None = None) -> Predicate:
    """Select items tagged with ``key`` (and ``value`` when given)."""

    def predicate(item: Watchable) -> bool:
        if not item.has_info(key):
            return False
        return value is None or item.get_info(key) == value

    return predicate


def is_valid(item: Watchable) -> bool:
    return item.is_valid()


def all_of(*predicates: Predicate) -> Predicate:
    return lambda item: all(p(item) for p in predicates)


def any_of(*predicates: Predicate) -> Predicate:
    return lambda item: any(p(item) for p in predicates)
