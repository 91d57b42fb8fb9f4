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

from __future__ import annotations

import pytest

from mediashelf.core.languages import (
    ENGLISH,
    FRENCH,
    Language,
    get_language,
    get_languages,
)


@pytest.mark.parametrize("name", ["en", "EN", "English", " english "])
def test_lookup_by_code_or_label(name: str) -> None:
    assert get_language(name) is ENGLISH


def test_unknown_language_raises_key_error() -> None:
    with pytest.raises(KeyError, match="Unknown language"):
        get_language("Klingon")


def test_languages_list_starts_with_english_and_is_a_copy() -> None:
    langs = get_languages()
    assert langs[0] == ENGLISH
    assert FRENCH in langs
    langs.clear()
    assert get_languages()


def test_languages_are_values() -> None:
    assert Language("fr", "French") == FRENCH
    assert str(FRENCH) == "French"
