"""Recommender port: abstract interface for candidate scoring."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from nextwatch.domain.preferences import PreferenceProfile
from nextwatch.domain.records import MediaItemRecord


@dataclass
class RecommendationResult:
    """A single scored candidate with its explanation."""

    media_item_id: int
    score: float
    reason: str


class RecommenderPort(ABC):
    """Abstraction for the recommendation scoring engine."""

    @abstractmethod
    def rank(
        self,
        profile: PreferenceProfile,
        candidates: Sequence[MediaItemRecord],
        limit: int = 10,
    ) -> list[RecommendationResult]:
        """Return at most ``limit`` candidates, best first."""
        ...
