# controller.py
"""
Orquestra as buscas da tela: guarda o estado da UI (texto digitado, texto
"assentado" pelo debounce, categoria, listas, loading, erro) e decide qual
requisição disparar a cada mudança.

Fluxo:
  set_search_term -> Debouncer -> on_search_settled -> load_movies
  select_category ------------------------------------> load_movies
  mount -> load_movies (categoria inicial) + load_trending (uma vez)

Só o resultado da requisição emitida por último é aplicado: cada
load_movies pega um número de geração e, ao terminar, descarta o
resultado se outra requisição já tiver sido emitida depois.
"""
import copy
import threading
from dataclasses import dataclass, field
from typing import List, MutableMapping, Optional

import tmdb_client
from config import TMDBConfig
from debounce import Debouncer
from formatting import movie_card
from logger_conf import get_logger
from tmdb_client import DEFAULT_CATEGORY, CATEGORY_IDS, TMDBError, category_label

logger = get_logger(__name__)

ERROR_MESSAGE = "Error fetching movies. Please try again later."
NO_RESULTS_MESSAGE = "No movies found. Try a different search term."
SKELETON_COUNT = 10


@dataclass
class BrowseState:
    search_term: str = ""
    debounced_search_term: str = ""
    selected_category: str = DEFAULT_CATEGORY
    movie_list: List[dict] = field(default_factory=list)
    trending_movies: List[dict] = field(default_factory=list)
    is_loading: bool = False
    error_message: str = ""


@dataclass
class ListView:
    """O que a grade principal deve mostrar (derivado do estado)."""
    kind: str  # "loading" | "error" | "empty" | "results"
    placeholders: int = 0
    message: str = ""
    cards: List[dict] = field(default_factory=list)


def build_list_view(state: BrowseState, image_base_url: Optional[str] = None) -> ListView:
    if state.is_loading:
        return ListView(kind="loading", placeholders=SKELETON_COUNT)
    if state.error_message:
        return ListView(kind="error", message=state.error_message)
    if not state.movie_list:
        return ListView(kind="empty", message=NO_RESULTS_MESSAGE)
    kwargs = {"image_base_url": image_base_url} if image_base_url else {}
    return ListView(kind="results", cards=[movie_card(m, **kwargs) for m in state.movie_list])


class MovieController:
    def __init__(self, config: TMDBConfig, client=tmdb_client, debouncer_factory=Debouncer):
        self.config = config
        self.client = client
        self.state = BrowseState()
        self._lock = threading.RLock()
        self._generation = 0
        self._trending_loaded = False
        self._debouncer = debouncer_factory(config.debounce_ms, self.on_search_settled)

    # ---------- ciclo de vida ----------
    def mount(self) -> None:
        """Primeira carga: lista da categoria inicial + tendências da semana."""
        with self._lock:
            query = self.state.debounced_search_term
            category = self.state.selected_category
        self.load_movies(query, category)
        self.load_trending()

    def unmount(self) -> None:
        # nenhum debounce pendente pode publicar depois daqui
        self._debouncer.close()

    # ---------- gatilhos ----------
    def set_search_term(self, text: str) -> None:
        text = text or ""
        with self._lock:
            self.state.search_term = text
        self._debouncer.set(text)

    def on_search_settled(self, text: str) -> None:
        with self._lock:
            if text == self.state.debounced_search_term:
                return
            self.state.debounced_search_term = text
            category = self.state.selected_category
        if text:
            self.load_movies(text)
        else:
            self.load_movies("", category)

    def select_category(self, category: str) -> None:
        if category not in CATEGORY_IDS:
            raise ValueError(f"Categoria desconhecida: {category!r}")
        with self._lock:
            if category == self.state.selected_category:
                return
            self.state.selected_category = category
            # com busca ativa a categoria só fica registrada
            searching = bool(self.state.debounced_search_term)
        if not searching:
            self.load_movies("", category)

    # ---------- requisições ----------
    def load_movies(self, query: str = "", category: str = DEFAULT_CATEGORY) -> bool:
        """
        Busca principal. Retorna True se o resultado foi aplicado ao estado,
        False se foi descartado por ter sido superado por outra requisição.
        Em caso de falha a lista anterior é mantida e a mensagem de erro
        fixa é exibida.
        """
        with self._lock:
            self._generation += 1
            generation = self._generation
            self.state.is_loading = True
            self.state.error_message = ""

        results = None
        failed = True
        applied = False
        try:
            results = self.client.fetch_movies(self.config, query=query, category=category)
            failed = False
        except TMDBError as e:
            logger.error(f"Error fetching movies (query={query!r}, category={category!r}): {e}")
        finally:
            # roda até com exceção inesperada: o loading nunca fica preso
            with self._lock:
                if generation != self._generation:
                    logger.debug(f"Descartando resposta antiga (geração {generation}, atual {self._generation})")
                else:
                    if failed:
                        self.state.error_message = ERROR_MESSAGE
                    else:
                        self.state.movie_list = results
                    self.state.is_loading = False
                    applied = True
        return applied

    def load_trending(self) -> None:
        """Tendências da semana, só na primeira vez. Falha fica apenas no log."""
        with self._lock:
            if self._trending_loaded:
                return
            self._trending_loaded = True
        try:
            trending = self.client.fetch_trending(self.config)
        except TMDBError as e:
            logger.error(f"Error fetching trending movies: {e}")
            return
        with self._lock:
            self.state.trending_movies = trending

    # ---------- leitura p/ a UI ----------
    def snapshot(self) -> BrowseState:
        with self._lock:
            return copy.deepcopy(self.state)

    def list_view(self) -> ListView:
        return build_list_view(self.snapshot(), image_base_url=self.config.image_base_url)

    def section_title(self) -> str:
        with self._lock:
            term = self.state.search_term
            category = self.state.selected_category
        if term:
            return f'Search Results for "{term}"'
        return category_label(category)

    def show_browse_extras(self) -> bool:
        """Botões de categoria e tendências só aparecem sem texto digitado."""
        with self._lock:
            return not self.state.search_term


def ensure_controller(store: MutableMapping, config: TMDBConfig, factory=MovieController,
                      key: str = "controller") -> MovieController:
    """
    Devolve o controller da sessão guardado em `store` (ex.: st.session_state),
    criando e montando um novo se não houver ou se a config mudou. O antigo é
    desmontado antes de ser substituído, para o debounce dele não publicar mais.
    """
    current = store.get(key)
    if current is not None and current.config == config:
        return current
    if current is not None:
        logger.info("Config mudou; substituindo o controller da sessão")
        current.unmount()
    controller = factory(config)
    store[key] = controller
    controller.mount()
    return controller
