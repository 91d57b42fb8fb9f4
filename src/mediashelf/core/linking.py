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

"""Prequel/sequel chains.

Each chainable item owns a `SequenceLink` holding weak references to its
neighbours; the chain itself never keeps an item alive.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Protocol, TypeVar

from mediashelf.core.errors import require

if TYPE_CHECKING:
    from collections.abc import Iterator


class Linked(Protocol):
    """Anything carrying a `SequenceLink`."""

    @property
    def sequence(self) -> SequenceLink: ...


L = TypeVar("L", bound=Linked)


class SequenceLink:
    """Non-owning previous/next pointers of one item."""

    __slots__ = ("_next", "_previous")

    def __init__(self) -> None:
        self._previous: weakref.ref | None = None
        self._next: weakref.ref | None = None

    @property
    def previous(self):  # noqa: ANN201 - item type is owner-specific
        return self._previous() if self._previous is not None else None

    @previous.setter
    def previous(self, item: object | None) -> None:
        self._previous = weakref.ref(item) if item is not None else None

    @property
    def next(self):  # noqa: ANN201 - item type is owner-specific
        return self._next() if self._next is not None else None

    @next.setter
    def next(self, item: object | None) -> None:
        self._next = weakref.ref(item) if item is not None else None

    def __repr__(self) -> str:
        return f"SequenceLink(previous={self.previous!r}, next={self.next!r})"


def set_previous(item: L, other: L) -> None:
    """Make ``other`` the prequel of ``item``.

    Whichever links are displaced are cut rather than reattached: the former
    prequel of ``item`` loses its sequel, and the former sequel of ``other``
    loses its prequel.

    Parameters
    ----------
    item:
        Item receiving a prequel.
    other:
        New prequel; must be a distinct item of the same kind.
    """
    require(other is not None, "Prequel must not be None")
    require(type(other) is type(item), "Prequel must be of the same kind")
    require(other is not item, "An item cannot be its own prequel")

    former_previous = item.sequence.previous
    if former_previous is not None:
        former_previous.sequence.next = None
    former_next = other.sequence.next
    if former_next is not None:
        former_next.sequence.previous = None

    item.sequence.previous = other
    other.sequence.next = item


def iter_chain(item: L) -> Iterator[L]:
    """Yield the whole chain ``item`` belongs to, earliest first.

    Walking stops when an item repeats, so cyclic chains are yielded once.
    """
    seen = {id(item)}
    first = item
    while (prev := first.sequence.previous) is not None and id(prev) not in seen:
        seen.add(id(prev))
        first = prev

    visited: set[int] = set()
    current = first
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        yield current
        current = current.sequence.next
