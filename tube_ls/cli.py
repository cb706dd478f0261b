"""Interface de linha de comando: lista os vídeos de uma playlist do YouTube."""

import sys
import asyncio
import logging
import argparse
from typing import List, Optional

from .config import CONFIG_PATH
from .credentials import load_settings
from .exceptions import TubeLsError
from .pipeline import format_lines, list_playlist
from .utils import extract_playlist_id

logger = logging.getLogger("tube_ls")


def build_parser() -> argparse.ArgumentParser:
    """Monta o parser de argumentos da CLI."""
    p = argparse.ArgumentParser(
        prog="tube-ls",
        description="Lista os vídeos de uma playlist do YouTube, ordenados por data de publicação")
    # opcional aqui para que a falta do argumento saia com código 1
    p.add_argument("playlist", nargs="?",
                   help="ID da playlist ou URL contendo ...list=<ID>")
    p.add_argument("--api-key", default=None,
                   help="YouTube Data API v3 Key (senão env YtKey ou arquivo de chaves)")
    p.add_argument("--config", default=CONFIG_PATH,
                   help=f"arquivo de chaves chave=valor (default: {CONFIG_PATH})")
    p.add_argument("--titles", action="store_true",
                   help="acrescenta o título (sanitizado) a cada linha")
    p.add_argument("-v", "--verbose", action="store_true")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    """Ponto de entrada da CLI; único lugar onde erros viram código de saída."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.playlist:
        parser.print_usage(sys.stderr)
        return 1

    try:
        settings = load_settings(api_key=args.api_key, config_path=args.config)
        playlist_id = extract_playlist_id(args.playlist)
        items = asyncio.run(list_playlist(settings, playlist_id))
    except TubeLsError as e:
        logger.error("%s", e.message)
        return 1

    for line in format_lines(items, with_titles=args.titles):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
