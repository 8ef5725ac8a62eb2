"""Preference inference from an actor's interaction history."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from nextwatch.domain.models import POSITIVE_INTERACTIONS


@dataclass(frozen=True)
class InteractionSignal:
    """One interaction joined with the fields of the item it targets."""

    media_item_id: int
    interaction_type: str
    title: str
    genres: tuple[str, ...]
    media_type: str


@dataclass(frozen=True)
class PreferenceProfile:
    excluded_ids: frozenset[int] = frozenset()
    liked_genres: frozenset[str] = frozenset()
    liked_kinds: frozenset[str] = frozenset()
    liked_titles: tuple[str, ...] = field(default=())

    @property
    def preferred_kind(self) -> str | None:
        """The single media type to restrict candidates to, if the taste is clear."""
        if len(self.liked_kinds) == 1:
            return next(iter(self.liked_kinds))
        return None

    @property
    def has_likes(self) -> bool:
        return bool(self.liked_titles)


def infer_preferences(signals: Iterable[InteractionSignal]) -> PreferenceProfile:
    """
    Derive exclusion and affinity sets.

    Any interaction, whatever its sentiment, excludes the item from future
    candidates. Only like / watched_liked contribute genres and kinds.
    """
    excluded: set[int] = set()
    genres: set[str] = set()
    kinds: set[str] = set()
    titles: list[str] = []

    for signal in signals:
        excluded.add(signal.media_item_id)
        if signal.interaction_type in POSITIVE_INTERACTIONS:
            genres.update(signal.genres)
            kinds.add(signal.media_type)
            titles.append(signal.title)

    return PreferenceProfile(
        excluded_ids=frozenset(excluded),
        liked_genres=frozenset(genres),
        liked_kinds=frozenset(kinds),
        liked_titles=tuple(titles),
    )
