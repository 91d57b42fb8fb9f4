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

"""Language values for works in the catalog.

Works carry a `Language` rather than a free-form string so that filters such
as "English only" compare reliably. A table of common languages is provided;
callers may still build their own `Language` for anything missing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class Language:
    """Language descriptor.

    Parameters
    ----------
    code:
        ISO 639-1 language code (e.g., "en").
    label:
        Human-readable language name (e.g., "English").
    """

    code: str
    label: str

    def __str__(self) -> str:
        return self.label


ENGLISH: Final = Language("en", "English")
FRENCH: Final = Language("fr", "French")
GERMAN: Final = Language("de", "German")
ITALIAN: Final = Language("it", "Italian")
JAPANESE: Final = Language("ja", "Japanese")
KOREAN: Final = Language("ko", "Korean")
SPANISH: Final = Language("es", "Spanish")

_LANGUAGES: Final[list[Language]] = [
    ENGLISH,
    Language("ar", "Arabic"),
    Language("zh", "Chinese"),
    Language("cs", "Czech"),
    Language("da", "Danish"),
    Language("nl", "Dutch"),
    Language("fi", "Finnish"),
    FRENCH,
    GERMAN,
    Language("el", "Greek"),
    Language("he", "Hebrew"),
    Language("hi", "Hindi"),
    Language("hu", "Hungarian"),
    ITALIAN,
    JAPANESE,
    KOREAN,
    Language("no", "Norwegian"),
    Language("pl", "Polish"),
    Language("pt", "Portuguese"),
    Language("ru", "Russian"),
    SPANISH,
    Language("sv", "Swedish"),
    Language("tr", "Turkish"),
    Language("uk", "Ukrainian"),
]

_BY_KEY: Final[dict[str, Language]] = {
    key: lang
    for lang in _LANGUAGES
    for key in (lang.code.casefold(), lang.label.casefold())
}


def get_languages() -> list[Language]:
    """Return the known languages, English first."""
    return list(_LANGUAGES)


def get_language(name: str) -> Language:
    """Look up a known language by ISO code or label.

    Parameters
    ----------
    name:
        Code ("fr") or label ("French"); matching ignores case.

    Returns
    -------
    Language
        The matching language.

    Raises
    ------
    KeyError
        If no known language matches.
    """
    try:
        return _BY_KEY[name.strip().casefold()]
    except KeyError:
        msg = f"Unknown language: {name!r}"
        raise KeyError(msg) from None
