# tmdb_client.py
from typing import List
from urllib.parse import quote

import requests

from config import TMDBConfig
from logger_conf import get_logger

logger = get_logger(__name__)

# categorias de navegação (id do endpoint /movie/<id>, rótulo da UI)
CATEGORIES = [
    ("popular", "Popular"),
    ("top_rated", "Top Rated"),
    ("upcoming", "Upcoming"),
    ("now_playing", "Now Playing"),
]
CATEGORY_IDS = [cid for cid, _ in CATEGORIES]
DEFAULT_CATEGORY = "popular"
TRENDING_LIMIT = 10

# mesmos caracteres que o encodeURIComponent do navegador deixa passar
_QUERY_SAFE = "!~*'()"


class TMDBError(Exception):
    """Falha ao consultar a API (rede, status != 200 ou JSON inválido)."""


# ---------- utilitários ----------
def category_label(category: str) -> str:
    for cid, label in CATEGORIES:
        if cid == category:
            return label
    raise ValueError(f"Categoria desconhecida: {category!r}")

def build_movies_url(config: TMDBConfig, query: str = "", category: str = DEFAULT_CATEGORY) -> str:
    """
    Texto presente -> /search/movie?query=<texto escapado> (categoria ignorada).
    Texto vazio -> /movie/<categoria>.
    Texto que não dá para codificar em UTF-8 (ex.: surrogate solto) -> TMDBError.
    """
    if query:
        try:
            escaped = quote(query, safe=_QUERY_SAFE)
        except UnicodeEncodeError as e:
            raise TMDBError(f"Texto de busca inválido: {query!r}") from e
        return f"{config.base_url}/search/movie?query={escaped}"
    if category not in CATEGORY_IDS:
        raise ValueError(f"Categoria desconhecida: {category!r}")
    return f"{config.base_url}/movie/{category}"

def _get(config: TMDBConfig, url: str, check_status: bool = True) -> dict:
    try:
        resp = requests.get(url, headers=config.headers, timeout=config.timeout)
    except requests.exceptions.RequestException as e:
        raise TMDBError(f"Erro de rede em {url}: {e}") from e

    if check_status and resp.status_code != 200:
        logger.debug(f"status {resp.status_code} em {url}: {resp.text[:200]}")
        raise TMDBError("Failed to fetch movies")

    try:
        data = resp.json()
    except ValueError as e:
        raise TMDBError(f"Resposta inválida (JSON) em {url}: {e}") from e
    if not isinstance(data, dict):
        raise TMDBError(f"Resposta inesperada em {url}: {type(data).__name__}")
    return data

def _results(data: dict, url: str) -> List[dict]:
    # `results` ausente/nulo vira []; qualquer coisa que não seja lista é erro
    results = data.get("results")
    if results is None:
        return []
    if not isinstance(results, list):
        raise TMDBError(f"Campo `results` inesperado em {url}: {type(results).__name__}")
    return list(results)

# ---------- funções principais ----------
def fetch_movies(config: TMDBConfig, query: str = "", category: str = DEFAULT_CATEGORY) -> List[dict]:
    """
    Busca por texto (/search/movie) ou navegação por categoria (/movie/<categoria>).
    Retorna a lista `results` na ordem da resposta ([] se o campo não vier).
    Levanta TMDBError em qualquer falha.
    """
    url = build_movies_url(config, query=query, category=category)
    return _results(_get(config, url), url)

def fetch_trending(config: TMDBConfig, limit: int = TRENDING_LIMIT) -> List[dict]:
    """
    /trending/movie/week, limitado aos `limit` primeiros.
    O status HTTP não é verificado: um corpo de erro sem `results` vira [].
    """
    url = f"{config.base_url}/trending/movie/week"
    return _results(_get(config, url, check_status=False), url)[:limit]
