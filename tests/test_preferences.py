"""Unit tests for preference inference."""

from nextwatch.domain.preferences import InteractionSignal, infer_preferences


def signal(media_item_id, interaction_type, genres=(), media_type="movie", title=None):
    return InteractionSignal(
        media_item_id=media_item_id,
        interaction_type=interaction_type,
        title=title or f"Title {media_item_id}",
        genres=tuple(genres),
        media_type=media_type,
    )


# ── Preference inference ───────────────────────────


def test_every_interaction_excludes_its_item():
    profile = infer_preferences(
        [
            signal(1, "like"),
            signal(2, "dislike"),
            signal(3, "watched_disliked"),
            signal(4, "add_to_watchlist"),
            signal(5, "remove_from_watchlist"),
            signal(6, "watched_liked"),
        ]
    )
    assert profile.excluded_ids == {1, 2, 3, 4, 5, 6}


def test_only_positive_interactions_shape_taste():
    profile = infer_preferences(
        [
            signal(1, "like", ["Action", "Adventure"], "movie", "Mad Max"),
            signal(2, "watched_liked", ["Drama"], "movie", "Heat"),
            signal(3, "dislike", ["Horror"], "tv"),
            signal(4, "add_to_watchlist", ["Comedy"], "tv"),
        ]
    )
    assert profile.liked_genres == {"Action", "Adventure", "Drama"}
    assert profile.liked_kinds == {"movie"}
    assert profile.liked_titles == ("Mad Max", "Heat")
    assert profile.preferred_kind == "movie"
    assert profile.has_likes


def test_two_liked_kinds_mean_no_preferred_kind():
    profile = infer_preferences([signal(1, "like", media_type="movie"), signal(2, "like", media_type="tv")])
    assert profile.liked_kinds == {"movie", "tv"}
    assert profile.preferred_kind is None


def test_empty_history():
    profile = infer_preferences([])
    assert profile.excluded_ids == frozenset()
    assert profile.preferred_kind is None
    assert not profile.has_likes

