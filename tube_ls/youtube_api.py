"""Wrappers assíncronos para o endpoint `playlistItems.list` da YouTube Data API v3."""

import logging
from typing import Any, Dict, List

import aiohttp

from .config import PLAYLIST_PARTS, Settings
from .http_client import http_get_json
from .models import PlaylistItem, PlaylistPage

logger = logging.getLogger(__name__)


async def playlist_items_page(
    session: aiohttp.ClientSession,
    settings: Settings,
    playlist_id: str,
    *,
    page_token: str = "",
) -> PlaylistPage:
    """Busca uma página de itens da playlist."""
    url = f"{settings.api_url}/playlistItems"
    params: Dict[str, Any] = {
        "maxResults": settings.max_results,
        "part": PLAYLIST_PARTS,
        "playlistId": playlist_id,
        "key": settings.api_key,
        "pageToken": page_token,
    }
    data = await http_get_json(session, url, params)
    return PlaylistPage.from_api(data)


async def playlist_items_list_all(
    session: aiohttp.ClientSession,
    settings: Settings,
    playlist_id: str,
) -> List[PlaylistItem]:
    """Percorre todas as páginas, em série, acumulando os itens na ordem recebida.

    A primeira página é sempre buscada; as seguintes só enquanto a API
    devolver um token não vazio e diferente do anterior.
    """
    items: List[PlaylistItem] = []
    page_token = ""
    pages = 0

    while True:
        page = await playlist_items_page(session, settings, playlist_id, page_token=page_token)
        pages += 1
        items.extend(page.items)
        logger.debug("playlist %s: página %d com %d itens (total %d)",
                     playlist_id, pages, len(page.items), len(items))

        if not page.next_page_token or page.next_page_token == page_token:
            break
        page_token = page.next_page_token

    return items
