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

"""Free-text metadata attached to works and episodes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from mediashelf.core.errors import require

if TYPE_CHECKING:
    from collections.abc import Iterator


@runtime_checkable
class MetadataStore(Protocol):
    """Associative store of string tags; no schema is enforced."""

    def get(self, key: str) -> str:
        """Return the value stored under ``key``."""

    def has(self, key: str) -> bool:
        """Whether ``key`` is present."""

    def set(self, key: str, value: str | None) -> str | None:
        """Store ``value`` under ``key``, or remove ``key`` if value is None."""


def _check_key(key: str) -> None:
    require(isinstance(key, str) and bool(key.strip()), "Tag key must be non-blank")


class TagMap:
    """Dict-backed `MetadataStore`."""

    __slots__ = ("_tags",)

    def __init__(self, tags: dict[str, str] | None = None) -> None:
        self._tags: dict[str, str] = {}
        for key, value in (tags or {}).items():
            self.set(key, value)

    def get(self, key: str) -> str:
        """Return the value for ``key``; the key must be present."""
        require(self.has(key), f"No tag named {key!r}")
        return self._tags[key]

    def has(self, key: str) -> bool:
        _check_key(key)
        return key in self._tags

    def set(self, key: str, value: str | None) -> str | None:
        """Set or remove a tag.

        Parameters
        ----------
        key:
            Non-blank tag name.
        value:
            New value; ``None`` removes the tag.

        Returns
        -------
        str | None
            The value previously stored under ``key``, if any.
        """
        _check_key(key)
        if value is None:
            return self._tags.pop(key, None)
        previous = self._tags.get(key)
        self._tags[key] = value
        return previous

    def as_dict(self) -> dict[str, str]:
        """Return a copy of all tags."""
        return dict(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tags))

    def __repr__(self) -> str:
        return f"TagMap({self._tags!r})"
