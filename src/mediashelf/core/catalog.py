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

"""The catalog aggregate and its process-wide instance.

A process normally works with one catalog, created by `init_catalog` at
startup and reached through `get_catalog`. Tests should build their own
`Catalog()` instead of sharing that instance.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Final

from mediashelf.core.config import DEFAULT_CATALOG_NAME, AppConfig, load_config_from_env
from mediashelf.core.errors import InvalidFormatError, require
from mediashelf.core.generation import WatchlistGenerator
from mediashelf.core.models import Episode, Movie, TVShow, Watchlist
from mediashelf.core.paths import FileSystemProbe, set_path_probe
from mediashelf.core.registry import movie_registry, show_registry

if TYPE_CHECKING:
    from mediashelf.core.generation import GenerationParams
    from mediashelf.core.registry import IdentityRegistry

_log = logging.getLogger(__name__)

_EMAIL_RE: Final = re.compile(r"^(.+)@(.+)$")


def is_valid_email(value: str) -> bool:
    """Return True if ``value`` looks like ``localpart@domain``."""
    return _EMAIL_RE.match(value) is not None


class Catalog:
    """Movies, TV shows, episodes and watchlists known to one user.

    Collections behave as insertion-ordered sets keyed by identity, so adding
    the same item twice keeps a single entry. Only the instance registered
    under a title is accepted, so a title never appears twice.

    Parameters
    ----------
    name:
        Display name of the catalog.
    movies:
        Registry movies must come from; defaults to `movie_registry`.
    shows:
        Registry shows must come from; defaults to `show_registry`.
    """

    def __init__(
        self,
        name: str = DEFAULT_CATALOG_NAME,
        *,
        movies: IdentityRegistry[Movie] | None = None,
        shows: IdentityRegistry[TVShow] | None = None,
    ) -> None:
        self._name = ""
        self.name = name
        self._movie_registry = movies if movies is not None else movie_registry
        self._show_registry = shows if shows is not None else show_registry
        self._email: str | None = None
        self._movies: dict[Movie, None] = {}
        self._tv_shows: dict[TVShow, None] = {}
        self._episodes: dict[Episode, None] = {}
        self._watchlists: dict[Watchlist, None] = {}

    @classmethod
    def from_config(cls, config: AppConfig) -> Catalog:
        """Build a catalog named and addressed as ``config`` says.

        A malformed configured email is logged and left unset rather than
        failing the whole catalog.
        """
        catalog = cls(config.catalog_name)
        if config.catalog_email:
            try:
                catalog.set_email(config.catalog_email)
            except InvalidFormatError:
                _log.warning(
                    "configured_email_ignored", extra={"catalog": catalog.name}
                )
        return catalog

    # --- Owner ---
    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        require(
            isinstance(value, str) and bool(value.strip()),
            "Catalog name must not be blank",
        )
        self._name = value

    @property
    def email(self) -> str:
        """Owner email, or an empty string when none is set."""
        return self._email or ""

    def set_email(self, value: str) -> None:
        """Set the owner email.

        Raises
        ------
        InvalidFormatError
            If ``value`` is not of the form ``localpart@domain``; the current
            email is kept.
        """
        require(value is not None, "Email must not be None")
        if not is_valid_email(value):
            _log.warning("email_rejected", extra={"catalog": self._name})
            msg = f"Email address is not valid: {value!r}"
            raise InvalidFormatError(msg)
        self._email = value

    def clear_email(self) -> None:
        self._email = None

    # --- Contents ---
    @property
    def movies(self) -> tuple[Movie, ...]:
        return tuple(self._movies)

    @property
    def tv_shows(self) -> tuple[TVShow, ...]:
        return tuple(self._tv_shows)

    @property
    def episodes(self) -> tuple[Episode, ...]:
        return tuple(self._episodes)

    @property
    def watchlists(self) -> tuple[Watchlist, ...]:
        return tuple(self._watchlists)

    def add_movie(self, movie: Movie) -> None:
        """Add a movie; adding it again has no effect."""
        require(movie is not None, "Movie must not be None")
        self._check_registered(movie)
        self._movies[movie] = None

    def add_tv_show(self, show: TVShow) -> None:
        """Add a show together with each of its episodes."""
        require(show is not None, "TV show must not be None")
        require(
            self._show_registry.get(show.title) is show,
            f"TV show {show.title!r} is not the registered instance",
        )
        self._tv_shows[show] = None
        for episode in show:
            self._episodes[episode] = None

    def add_watchlist(self, watchlist: Watchlist) -> None:
        """Add a watchlist together with each movie and episode it lists."""
        require(watchlist is not None, "Watchlist must not be None")
        items = tuple(watchlist)
        for item in items:
            if isinstance(item, Movie):
                self._check_registered(item)
        self._watchlists[watchlist] = None
        for item in items:
            if isinstance(item, Movie):
                self._movies[item] = None
            else:
                self._episodes[item] = None

    def _check_registered(self, movie: Movie) -> None:
        require(
            self._movie_registry.get(movie.title) is movie,
            f"Movie {movie.title!r} is not the registered instance",
        )

    def generate_watchlist(self, name: str, params: GenerationParams) -> Watchlist:
        """Generate a new watchlist from this catalog.

        See `WatchlistGenerator.generate`. The result is not added to the
        catalog.
        """
        return WatchlistGenerator(self).generate(name, params)

    def __repr__(self) -> str:
        return (
            f"Catalog(name={self._name!r}, movies={len(self._movies)}, "
            f"tv_shows={len(self._tv_shows)}, watchlists={len(self._watchlists)})"
        )


_catalog: Catalog | None = None


def init_catalog(config: AppConfig | None = None) -> Catalog:
    """Create the process-wide catalog, replacing any previous one.

    Parameters
    ----------
    config:
        Configuration to apply; loaded from the environment when omitted.
        A positive ``validity_ttl`` also installs a caching path probe.

    Returns
    -------
    Catalog
        The new shared catalog, initially empty.
    """
    global _catalog  # noqa: PLW0603
    cfg = config if config is not None else load_config_from_env()
    catalog = Catalog.from_config(cfg)
    if cfg.validity_ttl > 0:
        set_path_probe(FileSystemProbe(cfg.validity_ttl))
    _catalog = catalog
    _log.info(
        "catalog_initialised",
        extra={"catalog": _catalog.name, "validity_ttl": cfg.validity_ttl},
    )
    return _catalog


def get_catalog() -> Catalog:
    """Return the process-wide catalog, initialising it on first use."""
    if _catalog is None:
        return init_catalog()
    return _catalog


def drop_catalog() -> None:
    """Forget the process-wide catalog; the next `get_catalog` starts fresh."""
    global _catalog  # noqa: PLW0603
    _catalog = None
