import logging
import random
from collections.abc import Sequence

from nextwatch.domain.numeric import round_score
from nextwatch.domain.preferences import PreferenceProfile
from nextwatch.domain.records import MediaItemRecord
from nextwatch.ports.recommender import RecommendationResult, RecommenderPort

logger = logging.getLogger(__name__)

KIND_LABELS = {"movie": "movies", "tv": "TV shows"}


class HeuristicRecommenderAdapter(RecommenderPort):
    """
    Genre-overlap recommender.

    Score = base
          + GENRE_WEIGHT per candidate genre the actor liked
          + HIGH_RATING_BONUS if vote_average >= 8.0, else GOOD_RATING_BONUS if >= 7.0
          + KIND_BONUS if the candidate's media type is one the actor liked
          + POPULARITY_BONUS if popularity > 50
    clamped to [0, 1].

    Ranking is a stable sort on score, so ties keep the order the candidates
    were supplied in (rating, then popularity).
    """

    BASE_SCORE = 0.3
    GENRE_WEIGHT = 0.2
    HIGH_RATING = 8.0
    HIGH_RATING_BONUS = 0.2
    GOOD_RATING = 7.0
    GOOD_RATING_BONUS = 0.1
    KIND_BONUS = 0.1
    POPULARITY_THRESHOLD = 50.0
    POPULARITY_BONUS = 0.05

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def rank(
        self,
        profile: PreferenceProfile,
        candidates: Sequence[MediaItemRecord],
        limit: int = 10,
    ) -> list[RecommendationResult]:
        scored = [self.score(profile, candidate) for candidate in candidates]
        ranked = sorted(scored, key=lambda result: result.score, reverse=True)
        logger.debug(
            "Ranked %d candidates (liked genres=%d, liked kinds=%s)",
            len(scored),
            len(profile.liked_genres),
            sorted(profile.liked_kinds),
        )
        return ranked[:limit]

    def score(self, profile: PreferenceProfile, candidate: MediaItemRecord) -> RecommendationResult:
        """Score one candidate and explain why."""
        score = self.BASE_SCORE
        reasons: list[str] = []

        matching = [genre for genre in candidate.genres if genre in profile.liked_genres]
        if matching:
            score += self.GENRE_WEIGHT * len(matching)
            reasons.append(f"genres you enjoy: {', '.join(matching)}")

        rating = candidate.vote_average
        if rating >= self.HIGH_RATING:
            score += self.HIGH_RATING_BONUS
            reasons.append(f"highly rated ({rating:g}/10)")
        elif rating >= self.GOOD_RATING:
            score += self.GOOD_RATING_BONUS
            reasons.append(f"well-rated ({rating:g}/10)")

        if candidate.media_type in profile.liked_kinds:
            score += self.KIND_BONUS
            reasons.append(f"you like {KIND_LABELS.get(candidate.media_type, candidate.media_type)}")

        if candidate.popularity > self.POPULARITY_THRESHOLD:
            score += self.POPULARITY_BONUS

        score = round_score(min(max(score, 0.0), 1.0))
        return RecommendationResult(
            media_item_id=candidate.id,
            score=score,
            reason=self._reason(profile, reasons),
        )

    def _reason(self, profile: PreferenceProfile, reasons: list[str]) -> str:
        if reasons:
            return f"Because of {' and '.join(reasons)}"
        if profile.has_likes:
            return f'Because you liked "{self._rng.choice(profile.liked_titles)}"'
        return "Recommended for you"
