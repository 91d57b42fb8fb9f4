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

"""Core errors module.

Failures fall in three groups:

* precondition violations (caller bugs such as ``None`` arguments or an
  episode number past the end of a show), raised as `PreconditionError`;
* construction rejections (a movie path that denotes a directory), raised as
  `ConstructionError`;
* validation rejections of expected bad input (a malformed email), raised as
  `InvalidFormatError`.
"""

from __future__ import annotations


class MediaShelfError(Exception):
    """Base class for all library errors."""


class PreconditionError(MediaShelfError, AssertionError):
    """A caller broke an operation's precondition; the operation did not run."""


class ConstructionError(MediaShelfError, ValueError):
    """An entity could not be built from the given arguments."""


class InvalidFormatError(MediaShelfError, ValueError):
    """A value was rejected because it does not have the expected shape."""


def require(condition: bool, message: str) -> None:  # noqa: FBT001
    """Raise `PreconditionError` with ``message`` unless ``condition`` holds.

    Parameters
    ----------
    condition:
        Precondition to check.
    message:
        Error message used when the precondition does not hold.
    """
    if not condition:
        raise PreconditionError(message)
