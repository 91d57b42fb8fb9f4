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

"""File checks used by movies and episodes.

Works never touch the file system directly: they ask the process-wide
`PathProbe` whether a path may back a new movie and whether a path is ready
to be played. Tests swap the probe with `set_path_probe`.
"""

from __future__ import annotations

import logging
import os
import time
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from cachetools import TTLCache

if TYPE_CHECKING:
    from collections.abc import Callable

_log = logging.getLogger(__name__)


@runtime_checkable
class PathProbe(Protocol):
    """Environment predicate over file-system paths."""

    def is_file_or_missing(self, path: Path) -> bool:
        """Return True unless ``path`` exists and is not a regular file."""

    def is_readable_file(self, path: Path) -> bool:
        """Return True if ``path`` is an existing, readable regular file."""


class FileSystemProbe:
    """`PathProbe` backed by the local file system.

    Parameters
    ----------
    validity_ttl:
        Seconds a readability answer is reused. ``0`` checks the file system
        on every call.
    maxsize:
        Maximum number of memoised answers.
    timer:
        Clock used for expiry; mostly useful in tests.
    """

    def __init__(
        self,
        validity_ttl: float = 0.0,
        *,
        maxsize: int = 4096,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._cache: TTLCache | None = None
        if validity_ttl > 0:
            self._cache = TTLCache(maxsize=maxsize, ttl=validity_ttl, timer=timer)

    def is_file_or_missing(self, path: Path) -> bool:
        p = Path(path)
        return not p.exists() or p.is_file()

    def is_readable_file(self, path: Path) -> bool:
        key = os.fspath(path)
        if self._cache is not None:
            cached = self._cache.get(key)
            if cached is not None:
                _log.debug("path_probe_cache_hit", extra={"path": key})
                return cached
        readable = Path(path).is_file() and os.access(path, os.R_OK)
        if self._cache is not None:
            self._cache[key] = readable
        return readable

    def invalidate(self) -> None:
        """Forget every memoised answer."""
        if self._cache is not None:
            self._cache.clear()


_probe: PathProbe = FileSystemProbe()


def get_path_probe() -> PathProbe:
    """Return the probe consulted by movies and episodes."""
    return _probe


def set_path_probe(probe: PathProbe) -> PathProbe:
    """Install ``probe`` as the process-wide probe.

    Returns
    -------
    PathProbe
        The previously installed probe, so callers can restore it.
    """
    global _probe  # noqa: PLW0603
    previous = _probe
    _probe = probe
    return previous
