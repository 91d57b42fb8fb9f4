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

"""Core business logic for mediashelf (models, registry, generation, catalog).

The process-wide catalog is reached through `get_catalog`; works are
obtained through `get_movie` and `get_tv_show`.
"""

from mediashelf.core.base import Bingeable, Sequenceable, Watchable
from mediashelf.core.catalog import Catalog, get_catalog, init_catalog
from mediashelf.core.config import AppConfig, load_config_from_env
from mediashelf.core.errors import (
    ConstructionError,
    InvalidFormatError,
    MediaShelfError,
    PreconditionError,
)
from mediashelf.core.generation import (
    GenerationParams,
    WatchlistCriteria,
    WatchlistGenerator,
)
from mediashelf.core.languages import Language, get_language
from mediashelf.core.models import Episode, Movie, TVShow, Watchlist
from mediashelf.core.registry import (
    IdentityRegistry,
    get_movie,
    get_tv_show,
    movie_registry,
    show_registry,
)

__all__ = [
    "AppConfig",
    "Bingeable",
    "Catalog",
    "ConstructionError",
    "Episode",
    "GenerationParams",
    "IdentityRegistry",
    "InvalidFormatError",
    "Language",
    "MediaShelfError",
    "Movie",
    "PreconditionError",
    "Sequenceable",
    "TVShow",
    "Watchable",
    "Watchlist",
    "WatchlistCriteria",
    "WatchlistGenerator",
    "get_catalog",
    "get_language",
    "get_movie",
    "get_tv_show",
    "init_catalog",
    "load_config_from_env",
    "movie_registry",
    "show_registry",
]
