# config.py
import logging
import os
from dataclasses import dataclass
from typing import Dict, Optional

from dotenv import load_dotenv

from logger_conf import LOG_FILE

BASE_URL = "https://api.themoviedb.org/3"
IMAGE_BASE_URL = "https://image.tmdb.org/t/p"
DEFAULT_TIMEOUT = 10
DEFAULT_DEBOUNCE_MS = 500
DEFAULT_LOG_LEVEL = "INFO"


class ConfigError(RuntimeError):
    """Configuração ausente ou inválida (detectada na inicialização)."""


@dataclass(frozen=True)
class TMDBConfig:
    api_key: str
    base_url: str = BASE_URL
    image_base_url: str = IMAGE_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = LOG_FILE

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "accept": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }


def _read_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw.strip())
    except ValueError:
        raise ConfigError(f"Valor inválido para {name}: {raw!r}")
    if value <= 0:
        raise ConfigError(f"{name} precisa ser positivo (recebido {raw!r})")
    return value


def _read_log_level() -> str:
    level = (os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    # getLevelName devolve int só para nomes conhecidos (DEBUG, INFO, ...)
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"Valor inválido para LOG_LEVEL: {level!r}")
    return level


def load_config(env_file: Optional[str] = None) -> TMDBConfig:
    """
    Lê o .env e as variáveis de ambiente e monta o TMDBConfig.
      - TMDB_API_KEY (obrigatória): Bearer token v4
      - TMDB_BASE_URL, TMDB_TIMEOUT, DEBOUNCE_MS (opcionais)
      - LOG_LEVEL (nível do console), LOG_FILE (caminho do log) (opcionais)
    Falha logo aqui (ConfigError) se o token não estiver configurado,
    em vez de estourar só na primeira requisição.
    """
    load_dotenv(env_file)

    api_key = (os.getenv("TMDB_API_KEY") or "").strip()
    if not api_key:
        raise ConfigError("Variável de ambiente ausente: TMDB_API_KEY")

    return TMDBConfig(
        api_key=api_key,
        base_url=(os.getenv("TMDB_BASE_URL") or BASE_URL).rstrip("/"),
        timeout=_read_number("TMDB_TIMEOUT", DEFAULT_TIMEOUT, float),
        debounce_ms=_read_number("DEBOUNCE_MS", DEFAULT_DEBOUNCE_MS, int),
        log_level=_read_log_level(),
        log_file=(os.getenv("LOG_FILE") or "").strip() or LOG_FILE,
    )
