"""Constantes de configuração e a configuração de execução do tube-ls."""

from dataclasses import dataclass

YOUTUBE_API_URL = "https://www.googleapis.com/youtube/v3"
MAX_RESULTS = 50                 # playlistItems.list aceita até 50
PLAYLIST_PARTS = "snippet"

# chave da API: variável de ambiente e nome da chave no arquivo
API_KEY_ENV = "YtKey"
API_KEY_NAME = "YtKey"
CONFIG_PATH = "$HOME/config/youtube.keys"

PLAYLIST_URL_PATTERN = r"youtube\.com/.*[?&]list=([0-9A-Za-z_-]+)\Z"
VIDEO_LINK_PREFIX = "https://youtu.be/"
TITLE_MAX_LEN = 50


@dataclass(frozen=True)
class Settings:
    """Configuração resolvida uma única vez no início da execução."""

    api_key: str
    api_url: str = YOUTUBE_API_URL
    max_results: int = MAX_RESULTS
