import streamlit as st
from st_keyup import st_keyup

from config import ConfigError, load_config
from controller import MovieController, ensure_controller
from formatting import trending_card
from logger_conf import configure_logging, get_logger
from tmdb_client import CATEGORIES

logger = get_logger(__name__)

# intervalo em que a grade é redesenhada para pegar o resultado do debounce
REFRESH_SECONDS = 0.5

# ---------------------- CONFIG BÁSICA ---------------------- #

st.set_page_config(
    page_title="Movie Discovery",
    page_icon="🎬",
    layout="wide",
)

@st.cache_resource
def get_config():
    config = load_config()
    configure_logging(level=config.log_level, log_file=config.log_file)
    return config

# CSS simples para dar uma cara de app
st.markdown(
    """
    <style>
    .main-title {
        font-size: 2.3rem;
        font-weight: 700;
        margin-bottom: 0.2rem;
        text-align: center;
    }
    .main-subtitle {
        font-size: 0.95rem;
        color: #bbbbbb;
        margin-bottom: 1.5rem;
        text-align: center;
    }
    .section-header {
        font-size: 1.3rem;
        font-weight: 600;
        margin-top: 0.5rem;
        margin-bottom: 0.3rem;
    }
    .movie-meta {
        font-size: 0.9rem;
        color: #cccccc;
    }
    .rank {
        font-size: 1.8rem;
        font-weight: 700;
        color: #c084fc;
    }
    .error-text {
        color: #f87171;
        text-align: center;
        padding: 2rem 0;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

try:
    config = get_config()
except ConfigError as e:
    logger.error(f"Configuração inválida: {e}")
    st.error(f"Configuração inválida: {e}. Defina TMDB_API_KEY no .env.")
    st.stop()

# ---------------------- ESTADO INICIAL ---------------------- #

# um controller por sessão; se a config mudar o antigo é desmontado
controller: MovieController = ensure_controller(st.session_state, config)

# ---------------------- HELPERS ---------------------- #

def show_poster(container, url: str, width: int) -> None:
    # o placeholder .svg é caminho relativo (não existe no streamlit); mostra só o ícone
    if url.startswith("http"):
        container.image(url, width=width)
    else:
        container.write("🎞️\n(no poster)")

def render_movie_card(card: dict) -> None:
    show_poster(st, card["poster"], width=220)
    st.markdown(f"**{card['title']}**")
    st.markdown(
        f"<div class='movie-meta'>⭐ {card['rating']} &nbsp;|&nbsp; "
        f"<code>{card['language']}</code> &nbsp;|&nbsp; {card['year']}</div>",
        unsafe_allow_html=True,
    )
    if card["overview"]:
        with st.expander("Overview"):
            st.write(card["overview"])

def render_trending_card(card: dict) -> None:
    # já roda dentro de uma coluna; sem st.columns aninhado
    st.markdown(f"<div class='rank'>{card['rank']}</div>", unsafe_allow_html=True)
    show_poster(st, card["poster"], width=64)
    st.markdown(f"**{card['title']}**")
    st.markdown(f"⭐ {card['rating']}")

def on_search_change() -> None:
    controller.set_search_term(st.session_state.get("search_input", ""))

# ---------------------- TÍTULO GERAL ---------------------- #

st.markdown('<div class="main-title">🎬 Discover Amazing Movies</div>', unsafe_allow_html=True)
st.markdown(
    '<div class="main-subtitle">Explore thousands of movies, find your next favorite, and discover what\'s trending</div>',
    unsafe_allow_html=True,
)

# st_keyup manda cada tecla (debounce=0); quem assenta o texto é o Debouncer
st_keyup(
    "Search",
    key="search_input",
    placeholder="Search for movies...",
    debounce=0,
    on_change=on_search_change,
    label_visibility="collapsed",
)

# categorias só aparecem sem texto digitado
if controller.show_browse_extras():
    selected = controller.snapshot().selected_category
    cols = st.columns(len(CATEGORIES))
    for col, (cid, label) in zip(cols, CATEGORIES):
        col.button(
            label,
            key=f"cat-{cid}",
            type="primary" if cid == selected else "secondary",
            on_click=controller.select_category,
            args=(cid,),
            use_container_width=True,
        )

# ============================================================
#  TENDÊNCIAS + GRADE (redesenhadas periodicamente)
# ============================================================ #

@st.fragment(run_every=REFRESH_SECONDS)
def render_results() -> None:
    state = controller.snapshot()

    if controller.show_browse_extras() and state.trending_movies:
        st.markdown('<div class="section-header">📈 Trending This Week</div>', unsafe_allow_html=True)
        per_row = 5
        for start in range(0, len(state.trending_movies), per_row):
            row = st.columns(per_row)
            for offset, movie in enumerate(state.trending_movies[start:start + per_row]):
                with row[offset]:
                    render_trending_card(trending_card(movie, start + offset, image_base_url=config.image_base_url))

    st.markdown(f'<div class="section-header">🎞️ {controller.section_title()}</div>', unsafe_allow_html=True)

    view = controller.list_view()
    per_row = 5
    if view.kind == "loading":
        row = st.columns(per_row)
        for i in range(view.placeholders):
            row[i % per_row].markdown("⬜️ ⬜️ ⬜️\n\n▭▭▭▭\n\n▭▭")
    elif view.kind == "error":
        st.markdown(f"<div class='error-text'>{view.message}</div>", unsafe_allow_html=True)
    elif view.kind == "empty":
        st.info(view.message)
    else:
        for start in range(0, len(view.cards), per_row):
            row = st.columns(per_row)
            for offset, card in enumerate(view.cards[start:start + per_row]):
                with row[offset]:
                    render_movie_card(card)

render_results()
