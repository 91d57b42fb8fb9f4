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

"""Core config module."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

DEFAULT_CATALOG_NAME: Final[str] = "Default"


@dataclass(slots=True)
class AppConfig:
    """Process configuration for the shared catalog.

    Parameters
    ----------
    catalog_name:
        Display name given to the shared catalog.
    catalog_email:
        Owner email for the shared catalog, if configured.
    validity_ttl:
        Seconds a file validity answer may be reused; ``0`` disables caching.
    """

    catalog_name: str = DEFAULT_CATALOG_NAME
    catalog_email: str | None = None
    validity_ttl: float = 0.0


def _parse_ttl(raw: str | None) -> float:
    if not raw:
        return 0.0
    try:
        ttl = float(raw)
    except ValueError:
        return 0.0
    return max(ttl, 0.0)


def load_config_from_env() -> AppConfig:
    """Load configuration from environment variables.

    Environment
    ----
    MEDIASHELF_CATALOG_NAME:
        Display name of the shared catalog.
    MEDIASHELF_CATALOG_EMAIL:
        Owner email of the shared catalog.
    MEDIASHELF_VALIDITY_TTL:
        Validity cache lifetime in seconds.

    Returns
    -------
    AppConfig
        Loaded configuration object.
    """
    return AppConfig(
        catalog_name=os.getenv("MEDIASHELF_CATALOG_NAME") or DEFAULT_CATALOG_NAME,
        catalog_email=os.getenv("MEDIASHELF_CATALOG_EMAIL") or None,
        validity_ttl=_parse_ttl(os.getenv("MEDIASHELF_VALIDITY_TTL")),
    )
