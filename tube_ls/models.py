# -*- coding: utf-8 -*-
"""Registros decodificados da resposta de `playlistItems.list`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .exceptions import DecodeError

THUMBNAIL_VARIANTS = ("medium", "high", "standard", "maxres")


def _as_dict(value: Any, what: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise DecodeError(f"campo `{what}` inesperado na resposta: {type(value).__name__}")
    return value


def _as_str(value: Any, what: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"campo `{what}` inesperado na resposta: {type(value).__name__}")
    return value


def _as_int(value: Any, what: str) -> int:
    if value is None:
        return 0
    # bool é subclasse de int, mas não é um valor válido aqui
    if isinstance(value, bool):
        raise DecodeError(f"campo `{what}` inesperado na resposta: bool")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"campo `{what}` não numérico: {value!r}", cause=e) from e


@dataclass(frozen=True)
class PlaylistItem:
    video_id: str
    title: str = ""
    description: str = ""
    published_at: str = ""
    position: int = 0
    thumbnails: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_api(cls, raw: Any) -> PlaylistItem:
        """Lê o `snippet` de um item cru da API."""
        snippet = _as_dict(_as_dict(raw, "items[]").get("snippet"), "snippet")
        thumbs = _as_dict(snippet.get("thumbnails"), "snippet.thumbnails")
        resource = _as_dict(snippet.get("resourceId"), "snippet.resourceId")
        return cls(
            video_id=_as_str(resource.get("videoId"), "snippet.resourceId.videoId"),
            title=_as_str(snippet.get("title"), "snippet.title"),
            description=_as_str(snippet.get("description"), "snippet.description"),
            published_at=_as_str(snippet.get("publishedAt"), "snippet.publishedAt"),
            position=_as_int(snippet.get("position"), "snippet.position"),
            thumbnails={
                name: thumbs[name]["url"]
                for name in THUMBNAIL_VARIANTS
                if isinstance(thumbs.get(name), dict) and thumbs[name].get("url")
            },
        )


@dataclass(frozen=True)
class PlaylistPage:
    next_page_token: str = ""
    items: Tuple[PlaylistItem, ...] = ()
    total_results: int = 0
    results_per_page: int = 0

    @classmethod
    def from_api(cls, data: Any) -> PlaylistPage:
        data = _as_dict(data, "resposta")
        raw_items = data.get("items")
        if raw_items is None:
            raw_items = []
        if not isinstance(raw_items, list):
            raise DecodeError("campo `items` da resposta não é uma lista")
        page_info = _as_dict(data.get("pageInfo"), "pageInfo")
        return cls(
            next_page_token=_as_str(data.get("nextPageToken"), "nextPageToken"),
            items=tuple(PlaylistItem.from_api(it) for it in raw_items),
            total_results=_as_int(page_info.get("totalResults"), "pageInfo.totalResults"),
            results_per_page=_as_int(page_info.get("resultsPerPage"), "pageInfo.resultsPerPage"),
        )
