# -*- coding: utf-8 -*-
from __future__ import annotations

from operator import attrgetter
from typing import Iterable, List, Sequence

import aiohttp

from .config import VIDEO_LINK_PREFIX, Settings
from .models import PlaylistItem
from .utils import counter_width, safe_title
from .youtube_api import playlist_items_list_all


def sort_by_published(items: Iterable[PlaylistItem]) -> List[PlaylistItem]:
    # publishedAt é ISO-8601: ordem de string == ordem cronológica
    return sorted(items, key=attrgetter("published_at"))


def format_lines(items: Sequence[PlaylistItem], *, with_titles: bool = False) -> List[str]:
    """Uma linha por vídeo: `<link> <número>.` com o número preenchido com zeros."""
    width = counter_width(len(items))
    lines: List[str] = []
    for n, item in enumerate(items, start=1):
        line = f"{VIDEO_LINK_PREFIX}{item.video_id} {n:0{width}d}."
        if with_titles:
            line += safe_title(item.title)
        lines.append(line)
    return lines


async def list_playlist(settings: Settings, playlist_id: str) -> List[PlaylistItem]:
    """Fluxo: playlistItems.list (todas as páginas) → ordena por publishedAt."""
    # sem timeout total, como um cliente HTTP padrão
    timeout = aiohttp.ClientTimeout(total=None)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        items = await playlist_items_list_all(session, settings, playlist_id)
    return sort_by_published(items)
