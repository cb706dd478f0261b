# -*- coding: utf-8 -*-
from typing import Any, Dict

import aiohttp

from .exceptions import DecodeError, FetchError


async def http_get_json(session: aiohttp.ClientSession, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
    """Um único GET; sem retry. Erros viram FetchError/DecodeError."""
    try:
        async with session.get(url, params=params) as r:
            r.raise_for_status()
            data = await r.json(content_type=None)
    except aiohttp.ClientResponseError as e:
        raise FetchError(f"HTTP {e.status} em {url}: {e.message}", status_code=e.status, cause=e) from e
    except aiohttp.ClientError as e:
        raise FetchError(f"falha ao acessar {url}: {e}", cause=e) from e
    except ValueError as e:
        raise DecodeError(f"resposta inválida de {url}: {e}", cause=e) from e

    if not isinstance(data, dict):
        raise DecodeError(f"resposta de {url} não é um objeto JSON")
    return data
