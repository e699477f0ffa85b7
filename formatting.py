# formatting.py
from typing import Optional

from config import IMAGE_BASE_URL

NOT_AVAILABLE = "N/A"
POSTER_SIZE = "w500"
THUMB_SIZE = "w200"
POSTER_PLACEHOLDER = "/placeholder.svg?height=450&width=300"
THUMB_PLACEHOLDER = "/placeholder.svg?height=80&width=64"


def format_rating(vote_average) -> str:
    """Nota com uma casa decimal; sem nota (None ou 0) -> N/A."""
    if not vote_average:
        return NOT_AVAILABLE
    try:
        return f"{float(vote_average):.1f}"
    except (TypeError, ValueError):
        return NOT_AVAILABLE

def format_year(release_date: Optional[str]) -> str:
    """'2023-05-04' -> '2023'."""
    if not release_date:
        return NOT_AVAILABLE
    return str(release_date).split("-")[0] or NOT_AVAILABLE

def poster_url(poster_path: Optional[str], size: str = POSTER_SIZE,
               placeholder: str = POSTER_PLACEHOLDER, image_base_url: str = IMAGE_BASE_URL) -> str:
    if not poster_path:
        return placeholder
    return f"{image_base_url}/{size}{poster_path}"

def language_badge(code: Optional[str]) -> str:
    if not code:
        return NOT_AVAILABLE
    return code.upper()

# ---------- cards ----------
def movie_card(movie: dict, image_base_url: str = IMAGE_BASE_URL) -> dict:
    """Campos de exibição de um filme da grade principal."""
    return {
        "id": movie.get("id"),
        "title": movie.get("title") or "",
        "overview": movie.get("overview") or "",
        "poster": poster_url(movie.get("poster_path"), image_base_url=image_base_url),
        "rating": format_rating(movie.get("vote_average")),
        "year": format_year(movie.get("release_date")),
        "language": language_badge(movie.get("original_language")),
    }

def trending_card(movie: dict, index: int, image_base_url: str = IMAGE_BASE_URL) -> dict:
    """Miniatura do carrossel de tendências; `index` começa em 0, exibido como #1."""
    return {
        "id": movie.get("id"),
        "rank": f"#{index + 1}",
        "title": movie.get("title") or "",
        "poster": poster_url(movie.get("poster_path"), size=THUMB_SIZE,
                             placeholder=THUMB_PLACEHOLDER, image_base_url=image_base_url),
        "rating": format_rating(movie.get("vote_average")),
    }
