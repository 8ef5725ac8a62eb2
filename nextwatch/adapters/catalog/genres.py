"""TMDB genre taxonomy (movie and TV lists merged; ids do not collide)."""

from collections.abc import Iterable

TMDB_GENRES: dict[int, str] = {
    # movie
    28: "Action",
    12: "Adventure",
    16: "Animation",
    35: "Comedy",
    80: "Crime",
    99: "Documentary",
    18: "Drama",
    10751: "Family",
    14: "Fantasy",
    36: "History",
    27: "Horror",
    10402: "Music",
    9648: "Mystery",
    10749: "Romance",
    878: "Science Fiction",
    10770: "TV Movie",
    53: "Thriller",
    10752: "War",
    37: "Western",
    # tv
    10759: "Action & Adventure",
    10762: "Kids",
    10763: "News",
    10764: "Reality",
    10765: "Sci-Fi & Fantasy",
    10766: "Soap",
    10767: "Talk",
    10768: "War & Politics",
}


def genre_names(genre_ids: Iterable[int]) -> list[str]:
    """Map TMDB genre ids to names, keeping order and dropping unknown ids."""
    return [TMDB_GENRES[gid] for gid in genre_ids if gid in TMDB_GENRES]
