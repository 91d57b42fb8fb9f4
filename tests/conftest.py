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

"""Shared fixtures for catalog tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from mediashelf.core import catalog as catalog_module
from mediashelf.core.catalog import Catalog
from mediashelf.core.paths import FileSystemProbe, set_path_probe
from mediashelf.core.registry import movie_registry, show_registry

if TYPE_CHECKING:  # type-only imports
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def _isolate_process_state() -> Iterator[None]:
    """Give every test empty registries, the default probe and no catalog."""

    movie_registry.clear()
    show_registry.clear()
    previous = set_path_probe(FileSystemProbe())
    catalog_module.drop_catalog()
    yield
    movie_registry.clear()
    show_registry.clear()
    set_path_probe(previous)
    catalog_module.drop_catalog()


@pytest.fixture
def catalog() -> Catalog:
    """A fresh catalog, independent of the process-wide one."""

    return Catalog()


@pytest.fixture
def tmp_files(tmp_path: Path) -> list[Path]:
    """Create a small set of video files."""

    names = [
        "alien.mkv",
        "aliens.mkv",
        "show.s01e01.mkv",
        "show.s01e02.mkv",
    ]
    files: list[Path] = []
    for name in names:
        p = tmp_path / name
        p.write_text("x")
        files.append(p)
    return files


class FakeProbe:
    """Path probe answering from in-memory sets."""

    def __init__(
        self, readable: set[str] | None = None, dirs: set[str] | None = None
    ) -> None:
        self.readable = set(readable or ())
        self.dirs = set(dirs or ())
        self.calls = 0

    def is_file_or_missing(self, path: Path) -> bool:
        return str(path) not in self.dirs

    def is_readable_file(self, path: Path) -> bool:
        self.calls += 1
        return str(path) in self.readable


@pytest.fixture
def fake_probe() -> FakeProbe:
    """Install a `FakeProbe` for the duration of a test."""

    probe = FakeProbe()
    set_path_probe(probe)
    return probe


