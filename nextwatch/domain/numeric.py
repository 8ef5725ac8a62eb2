"""Fixed-precision codec for numeric columns.

Ratings, popularity and scores are stored as NUMERIC with a fixed scale and
handed to the rest of the application as floats. Repositories are the only
callers; nothing else should touch ``Decimal``.
"""

from decimal import ROUND_HALF_UP, Decimal

RATING_PLACES = 1
POPULARITY_PLACES = 3
SCORE_PLACES = 4


def encode(value: float, places: int) -> Decimal:
    quantum = Decimal(1).scaleb(-places)
    return Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)


def decode(value: Decimal | float | None) -> float | None:
    if value is None:
        return None
    return float(value)


def encode_rating(value: float) -> Decimal:
    return encode(value, RATING_PLACES)


def encode_popularity(value: float) -> Decimal:
    return encode(value, POPULARITY_PLACES)


def encode_score(value: float) -> Decimal:
    return encode(value, SCORE_PLACES)


def round_score(value: float) -> float:
    """Round a computed score to the precision it will be stored with."""
    return float(encode_score(value))
