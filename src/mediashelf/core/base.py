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

"""Capability protocols shared by catalog items.

Notes
-----
Movies and episodes are `Watchable`; TV shows are `Watchable` and
`Bingeable`; watchlists are `Bingeable`; movies are also `Sequenceable`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from mediashelf.core.languages import Language

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Watchable(Protocol):
    """Something that can be played and tagged."""

    @property
    def title(self) -> str:
        """Official title."""

    @property
    def language(self) -> Language:
        """Original language."""

    @property
    def studio(self) -> str:
        """Studio which originally published the item."""

    def watch(self) -> None:
        """Play the item; callers should check `is_valid` first."""

    def is_valid(self) -> bool:
        """Whether the item is ready to be played."""

    def get_info(self, key: str) -> str:
        """Return the metadata value for ``key``."""

    def has_info(self, key: str) -> bool:
        """Whether metadata ``key`` is set."""

    def set_info(self, key: str, value: str | None) -> str | None:
        """Set metadata ``key``; ``None`` removes it. Returns the old value."""


@runtime_checkable
class Bingeable(Protocol[T_co]):
    """Stateful sequential consumption with wrap-around."""

    def total_count(self) -> int:
        """Number of items in the sequence."""

    def remaining_count(self) -> int:
        """Number of items left before the cursor wraps."""

    def next(self) -> T_co:
        """Return the next item and advance, wrapping after the last one."""

    def reset(self) -> None:
        """Move the cursor back to the first item."""


@runtime_checkable
class Sequenceable(Protocol):
    """Item that can be chained with prequels and sequels."""

    def has_previous(self) -> bool:
        """Whether a prequel is linked."""

    def has_next(self) -> bool:
        """Whether a sequel is linked."""

    def get_previous(self) -> Sequenceable | None:
        """Return the prequel, if any."""

    def get_next(self) -> Sequenceable | None:
        """Return the sequel, if any."""
