"""Contest rating adjustment.

A simplified Elo-style update: contests have no head-to-head opponent, so
the delta comes from the absolute score. The score ratio picks a tier, a
random integer is drawn from that tier's range, and a flat regression term
pulls ratings toward the 1000-1500 band.
"""

from __future__ import annotations
import random
from typing import List, Optional, Tuple

from .grading import MAX_TOTAL_SCORE
from .settings import settings


# (minimum ratio, lowest delta, highest delta), both ends inclusive
DELTA_TIERS: List[Tuple[float, int, int]] = [
	(0.90, 30, 44),
	(0.75, 15, 29),
	(0.50, 5, 14),
	(0.30, -15, -5),
	(0.0, -30, -15),
]

REGRESSION_HIGH = 1500
REGRESSION_LOW = 1000
REGRESSION_STEP = 200


def performance_ratio(total_score: int) -> float:
	return total_score / MAX_TOTAL_SCORE


def delta_range(ratio: float) -> Tuple[int, int]:
	for threshold, low, high in DELTA_TIERS:
		if ratio >= threshold:
			return low, high
	_, low, high = DELTA_TIERS[-1]
	return low, high


def base_delta(ratio: float, rng: Optional[random.Random] = None) -> int:
	low, high = delta_range(ratio)
	return (rng or random).randint(low, high)


def regression_adjustment(current_rating: int) -> int:
	if current_rating > REGRESSION_HIGH:
		return -((current_rating - REGRESSION_HIGH) // REGRESSION_STEP)
	if current_rating < REGRESSION_LOW:
		return (REGRESSION_LOW - current_rating) // REGRESSION_STEP
	return 0


def compute_delta(current_rating: int, total_score: int, rng: Optional[random.Random] = None) -> int:
	return base_delta(performance_ratio(total_score), rng) + regression_adjustment(current_rating)


def apply_delta(current_rating: int, delta: int) -> int:
	return max(settings.min_contest_rating, current_rating + delta)
