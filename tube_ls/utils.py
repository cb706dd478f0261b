# -*- coding: utf-8 -*-
import re
from typing import Pattern

from .config import PLAYLIST_URL_PATTERN, TITLE_MAX_LEN

PLAYLIST_URL_RE = re.compile(PLAYLIST_URL_PATTERN)


def extract_playlist_id(value: str, pattern: Pattern[str] = PLAYLIST_URL_RE) -> str:
    """Extrai o id de uma URL `...?list=<ID>`; qualquer outra coisa volta como veio.

    O `list=` precisa ser o último parâmetro da query.
    """
    m = pattern.search(value)
    if m:
        return m.group(1)
    return value


def counter_width(count: int) -> int:
    # playlist vazia: largura 1
    if count <= 0:
        return 1
    return len(str(count))


def safe_title(title: str, max_len: int = TITLE_MAX_LEN) -> str:
    t = "".join(ch if ch.isalpha() or ch.isdecimal() else "." for ch in title)
    return t[:max_len]
