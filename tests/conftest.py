"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any, Callable
from unittest.mock import MagicMock

import pytest

from tube_ls.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key="test-key", api_url="https://api.test/youtube/v3")


@pytest.fixture
def make_raw_item() -> Callable[..., dict[str, Any]]:
    """Build a raw playlistItems.list item as returned by the API."""

    def _make(video_id: str, published_at: str = "2020-01-01T00:00:00Z", title: str = "") -> dict[str, Any]:
        return {
            "kind": "youtube#playlistItem",
            "snippet": {
                "title": title or f"Video {video_id}",
                "description": "",
                "publishedAt": published_at,
                "thumbnails": {
                    "medium": {"url": f"https://i.ytimg.com/vi/{video_id}/mqdefault.jpg"},
                    "high": {"url": f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg"},
                },
                "position": 0,
                "resourceId": {"kind": "youtube#video", "videoId": video_id},
            },
        }

    return _make


@pytest.fixture
def make_page(make_raw_item: Callable[..., dict[str, Any]]) -> Callable[..., dict[str, Any]]:
    """Build a raw page body with the given token and video ids."""

    def _make(token: str, *video_ids: str) -> dict[str, Any]:
        return {
            "kind": "youtube#playlistItemListResponse",
            "nextPageToken": token,
            "pageInfo": {"totalResults": 3, "resultsPerPage": 50},
            "items": [make_raw_item(v) for v in video_ids],
        }

    return _make


@pytest.fixture
def mock_session() -> Callable[..., MagicMock]:
    """Build a ClientSession double whose `get` yields the given response."""

    def _make(response: MagicMock) -> MagicMock:
        session = MagicMock()
        session.get.return_value.__aenter__.return_value = response
        session.get.return_value.__aexit__.return_value = False
        return session

    return _make
