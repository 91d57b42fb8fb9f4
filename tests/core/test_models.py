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

import logging
from pathlib import Path

import pytest

from mediashelf.core.base import Bingeable, Sequenceable, Watchable
from mediashelf.core.errors import PreconditionError
from mediashelf.core.languages import ENGLISH, FRENCH
from mediashelf.core.models import Episode, Movie, TVShow, Watchlist


def test_episode_numbers_follow_append_order() -> None:
    show = TVShow("Show", ENGLISH, "Studio")
    first = show.create_and_add_episode("e1.mkv", "Pilot")
    second = show.create_and_add_episode(Path("e2.mkv"), "Second")

    assert (first.number, second.number) == (1, 2)
    assert show.get_episode(1) is first
    assert show.get_episode(2) is second
    assert list(show) == [first, second]
    assert show.episodes == (first, second)
    assert first.show is show


@pytest.mark.parametrize("number", [0, 3, -1])
def test_get_episode_out_of_range(number: int) -> None:
    show = TVShow("Show", ENGLISH, "Studio")
    show.create_and_add_episode("e1.mkv", "One")
    show.create_and_add_episode("e2.mkv", "Two")
    with pytest.raises(PreconditionError):
        show.get_episode(number)


def test_episode_inherits_show_language_and_studio() -> None:
    show = TVShow("Show", ENGLISH, "Studio")
    plain = show.create_and_add_episode("e1.mkv", "One")
    dubbed = show.create_and_add_episode("e2.mkv", "Deux", language=FRENCH)

    assert plain.language == ENGLISH
    assert dubbed.language == FRENCH
    assert dubbed.studio == "Studio"


def test_models_satisfy_capabilities() -> None:
    movie = Movie("m.mkv", "M", ENGLISH, "S")
    show = TVShow("Show", ENGLISH, "Studio")
    episode = show.create_and_add_episode("e1.mkv", "One")

    assert isinstance(movie, Watchable)
    assert isinstance(movie, Sequenceable)
    assert isinstance(episode, Watchable)
    assert isinstance(show, Watchable)
    assert isinstance(show, Bingeable)
    assert isinstance(Watchlist("w"), Bingeable)


def test_models_compare_by_identity() -> None:
    a = Movie("m.mkv", "M", ENGLISH, "S")
    b = Movie("m.mkv", "M", ENGLISH, "S")
    assert a != b
    assert len({a, b}) == 2


def test_validity_follows_files(tmp_files: list[Path], tmp_path: Path) -> None:
    movie = Movie(tmp_files[0], "Alien", ENGLISH, "Fox")
    missing = Movie(tmp_path / "missing.mkv", "Missing", ENGLISH, "Fox")

    assert movie.is_valid()
    assert not missing.is_valid()

    show = TVShow("Show", ENGLISH, "Studio")
    gone = show.create_and_add_episode(tmp_path / "gone.mkv", "Gone")
    assert not gone.is_valid()
    assert not show.is_valid()
    show.create_and_add_episode(tmp_files[2], "Here")
    assert show.is_valid()


def test_show_without_episodes_is_invalid() -> None:
    assert not TVShow("Empty", ENGLISH, "Studio").is_valid()


def test_watch_logs_playback(
    tmp_files: list[Path], caplog: pytest.LogCaptureFixture
) -> None:
    movie = Movie(tmp_files[0], "Alien", ENGLISH, "Fox")
    with caplog.at_level(logging.INFO, logger="mediashelf.core.models"):
        movie.watch()
    assert [r.getMessage() for r in caplog.records] == ["now_playing"]
    assert caplog.records[0].title == "Alien"


def test_show_watch_plays_only_valid_episodes(
    tmp_files: list[Path], tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    show = TVShow("Show", ENGLISH, "Studio")
    show.create_and_add_episode(tmp_files[2], "One")
    show.create_and_add_episode(tmp_path / "gone.mkv", "Gone")
    show.create_and_add_episode(tmp_files[3], "Two")

    with caplog.at_level(logging.INFO, logger="mediashelf.core.models"):
        show.watch()
    assert [r.title for r in caplog.records] == ["One", "Two"]


def test_info_round_trip_and_removal() -> None:
    movie = Movie("m.mkv", "M", ENGLISH, "S")

    assert movie.set_info("director", "Scott") is None
    assert movie.has_info("director")
    assert movie.get_info("director") == "Scott"
    assert movie.set_info("director", "Cameron") == "Scott"
    assert movie.set_info("director", None) == "Cameron"
    assert not movie.has_info("director")


def test_info_preconditions() -> None:
    show = TVShow("Show", ENGLISH, "Studio")
    episode = show.create_and_add_episode("e1.mkv", "One")
    movie = Movie("m.mkv", "M", ENGLISH, "Studio")
    for item in (show, episode, movie):
        assert not item.has_info("missing")
        with pytest.raises(PreconditionError):
            item.get_info("missing")
    with pytest.raises(PreconditionError):
        show.set_info("  ", "x")


def test_watchlist_keeps_insertion_order() -> None:
    show = TVShow("Show", ENGLISH, "Studio")
    episode = show.create_and_add_episode("e1.mkv", "One")
    movie = Movie("m.mkv", "M", ENGLISH, "S")

    wl = Watchlist("Weekend")
    wl.add_watchable(movie)
    wl.add_watchable(episode)
    wl.add_watchable(movie)

    assert list(wl) == [movie, episode, movie]
    assert len(wl) == 3
    assert wl[1] is episode


def test_watchlist_rejects_shows_and_empty_names() -> None:
    with pytest.raises(PreconditionError):
        Watchlist("")
    wl = Watchlist("w")
    with pytest.raises(PreconditionError):
        wl.add_watchable(TVShow("Show", ENGLISH, "Studio"))  # type: ignore[arg-type]
    with pytest.raises(PreconditionError):
        wl.rename("")
    wl.rename("Renamed")
    assert wl.name == "Renamed"


def test_watchlist_remove_and_binge() -> None:
    wl = Watchlist("w")
    movies = [Movie(f"{t}.mkv", t, ENGLISH, "S") for t in ("A", "B", "C")]
    for m in movies:
        wl.add_watchable(m)

    assert wl.next() is movies[0]
    assert wl.next() is movies[1]
    assert wl.remove_watchable(0) is movies[0]
    # Cursor still points at "C"
    assert wl.remaining_count() == 1
    assert wl.next() is movies[2]
    assert wl.next() is movies[1]
    with pytest.raises(PreconditionError):
        wl.remove_watchable(5)


def test_watchlist_valid_count(tmp_files: list[Path], tmp_path: Path) -> None:
    wl = Watchlist("w")
    wl.add_watchable(Movie(tmp_files[0], "Alien", ENGLISH, "Fox"))
    wl.add_watchable(Movie(tmp_path / "nope.mkv", "Nope", ENGLISH, "Fox"))
    assert wl.valid_count() == 1


def test_episode_repr_is_compact() -> None:
    show = TVShow("Show", ENGLISH, "Studio")
    episode = show.create_and_add_episode("e1.mkv", "One")
    assert repr(episode) == "Episode(show='Show', number=1, title='One')"
    assert isinstance(episode, Episode)
