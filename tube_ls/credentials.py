# -*- coding: utf-8 -*-
"""Resolução da chave da API: flag, variável de ambiente ou arquivo de chaves."""

import logging
import os
from typing import Dict, Iterable, Mapping, Optional

from .config import API_KEY_ENV, API_KEY_NAME, CONFIG_PATH, Settings
from .exceptions import CredentialError

logger = logging.getLogger(__name__)


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return value[1:-1]
    return value


def parse_key_file(lines: Iterable[str], source: str = "<config>") -> Dict[str, str]:
    """Interpreta linhas `chave=valor`; comentários (#) e linhas vazias são ignorados.

    Linhas inválidas geram um warning e são puladas. Se a mesma chave
    aparece mais de uma vez, vale a última.
    """
    out: Dict[str, str] = {}
    for line in lines:
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        kv = line.split("=")
        if len(kv) != 2 or not kv[0].strip():
            logger.warning("linha inválida em %s: %s", source, line)
            continue

        key, value = kv[0].strip(), kv[1].strip()
        out[key] = _strip_quotes(value)
    return out


def read_key_file(path: str) -> Dict[str, str]:
    """Lê o arquivo de chaves; se não for possível, avisa e segue sem linhas."""
    path = os.path.expanduser(os.path.expandvars(path))
    try:
        # bytes inválidos (ex.: num comentário) não podem impedir a leitura da chave
        with open(path, encoding="utf-8", errors="replace") as f:
            lines = f.read().splitlines()
    except OSError as e:
        logger.warning("não foi possível ler %s: %s", path, e)
        return {}
    return parse_key_file(lines, source=path)


def resolve_api_key(
    *,
    api_key: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    config_path: str = CONFIG_PATH,
) -> str:
    """Ordem: `api_key` explícita > env `YtKey` > entrada `YtKey` do arquivo."""
    if api_key:
        return api_key

    environ = os.environ if environ is None else environ
    if environ.get(API_KEY_ENV):
        return environ[API_KEY_ENV]

    key = read_key_file(config_path).get(API_KEY_NAME, "")
    if not key:
        raise CredentialError(
            f"Nenhuma chave {API_KEY_NAME} fornecida (flag, env {API_KEY_ENV} ou {config_path}).")
    return key


def load_settings(
    *,
    api_key: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    config_path: str = CONFIG_PATH,
) -> Settings:
    return Settings(api_key=resolve_api_key(
        api_key=api_key, environ=environ, config_path=config_path))
