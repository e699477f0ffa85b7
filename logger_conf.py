# logger_conf.py
import logging
import os
from typing import Optional

LOG_FILE = os.path.join(os.path.dirname(__file__), "movie_discovery.log")
ROOT_LOGGER = "movie_discovery"

def configure_logging(level: str = "INFO", log_file: Optional[str] = LOG_FILE) -> logging.Logger:
    """
    (Re)configura os handlers do logger raiz do projeto. Pode ser chamada de
    novo com os valores do TMDBConfig: troca os handlers, não duplica.
      - console no nível pedido
      - arquivo sempre em DEBUG (com as falhas de rede detalhadas); None desliga
    """
    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.DEBUG)
    root.propagate = False

    ch = logging.StreamHandler()
    ch.setLevel(level.upper())
    ch.setFormatter(logging.Formatter("%(levelname)s - %(message)s"))
    root.addHandler(ch)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
        root.addHandler(fh)

    return root

def get_logger(name: str) -> logging.Logger:
    # módulos logam como filhos de movie_discovery; handlers ficam só no raiz
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        configure_logging()
    return root.getChild(name)
