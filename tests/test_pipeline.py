"""Tests for sorting, formatting and the list_playlist flow."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from tube_ls import pipeline
from tube_ls.config import Settings
from tube_ls.models import PlaylistItem
from tube_ls.pipeline import format_lines, list_playlist, sort_by_published


def _item(video_id: str, published_at: str = "2020-01-01T00:00:00Z", title: str = "") -> PlaylistItem:
    return PlaylistItem(video_id=video_id, title=title, published_at=published_at)


def test_sort_places_earlier_first() -> None:
    items = [_item("late", "2020-01-02T00:00:00Z"), _item("early", "2020-01-01T00:00:00Z")]
    assert [i.video_id for i in sort_by_published(items)] == ["early", "late"]


def test_sort_is_stable() -> None:
    items = [_item("a"), _item("b"), _item("c", "2019-12-31T00:00:00Z"), _item("d")]
    assert [i.video_id for i in sort_by_published(items)] == ["c", "a", "b", "d"]


def test_format_single_item() -> None:
    assert format_lines([_item("abc")]) == ["https://youtu.be/abc 1."]


def test_format_twelve_items_two_digits() -> None:
    lines = format_lines([_item(f"v{n}") for n in range(12)])

    assert lines[0] == "https://youtu.be/v0 01."
    assert lines[8] == "https://youtu.be/v8 09."
    assert lines[-1] == "https://youtu.be/v11 12."


def test_format_no_items() -> None:
    assert format_lines([]) == []


def test_format_with_titles() -> None:
    lines = format_lines([_item("abc", title="Aula 1: intro")], with_titles=True)
    assert lines == ["https://youtu.be/abc 1.Aula.1..intro"]


@pytest.mark.asyncio
async def test_list_playlist_sorts_fetched_items(
    settings: Settings, monkeypatch: pytest.MonkeyPatch
) -> None:
    fetched = [_item("b", "2021-05-01T00:00:00Z"), _item("a", "2020-05-01T00:00:00Z")]
    mock_fetch = AsyncMock(return_value=fetched)
    monkeypatch.setattr(pipeline, "playlist_items_list_all", mock_fetch)

    items = await list_playlist(settings, "PL1")

    assert [i.video_id for i in items] == ["a", "b"]
    assert mock_fetch.call_args.args[1:] == (settings, "PL1")
