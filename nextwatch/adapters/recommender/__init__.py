from nextwatch.adapters.recommender.heuristic import HeuristicRecommenderAdapter

__all__ = ["HeuristicRecommenderAdapter"]
