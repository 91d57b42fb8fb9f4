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

"""Wrap-around cursor behind the bingeable protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from mediashelf.core.errors import require

if TYPE_CHECKING:
    from collections.abc import Sequence

T = TypeVar("T")


class BingeCursor(Generic[T]):
    """Endless cursor over a live sequence.

    The cursor reads ``items`` by reference, so items appended by the owner
    grow `total_count`. After the last item is returned the cursor goes back
    to the first one; there is no exhausted state.

    Parameters
    ----------
    items:
        Sequence to walk; owned by the caller.
    """

    __slots__ = ("_items", "_next_index")

    def __init__(self, items: Sequence[T]) -> None:
        self._items = items
        self._next_index = 0

    def total_count(self) -> int:
        return len(self._items)

    def remaining_count(self) -> int:
        return len(self._items) - self._next_index

    def next(self) -> T:
        """Return the item under the cursor and advance.

        Raises
        ------
        PreconditionError
            If the sequence is empty.
        """
        require(self.remaining_count() > 0, "No item left to watch")
        item = self._items[self._next_index]
        self._next_index += 1
        if self._next_index >= len(self._items):
            self._next_index = 0
        return item

    def reset(self) -> None:
        self._next_index = 0

    def removed(self, index: int) -> None:
        """Keep the cursor on the same item after ``index`` was removed."""
        if index < self._next_index:
            self._next_index -= 1
        if self._next_index >= len(self._items):
            self._next_index = 0

    def __repr__(self) -> str:
        return (
            f"BingeCursor(next_index={self._next_index}, "
            f"total={self.total_count()})"
        )
