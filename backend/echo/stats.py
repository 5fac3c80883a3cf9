from __future__ import annotations
from typing import Any, Dict, List, Tuple

from sqlalchemy.orm import Session

from .models import ContestSubmission, RatingHistoryEntry, UserAccount
from .settings import settings


# Inclusive lower bounds, highest first
RATING_TIERS: List[Tuple[int, str, str]] = [
	(2500, "Dracarys", "red"),
	(2000, "Targaryen", "purple"),
	(1700, "Lannister", "yellow"),
	(1500, "Stark", "blue"),
	(1250, "Baratheon", "amber"),
]
UNRANKED = ("Unranked", "gray")


def tier_for(rating: int) -> Tuple[str, str]:
	for threshold, name, color in RATING_TIERS:
		if rating >= threshold:
			return name, color
	return UNRANKED


def history_entry_payload(entry: RatingHistoryEntry) -> Dict[str, Any]:
	return {
		"contestNumber": entry.contest_number,
		"rating": entry.rating,
		"ratingChange": entry.rating_change,
		"date": entry.date,
	}


def contest_stats(db: Session, username: str) -> Dict[str, Any]:
	account = db.get(UserAccount, username)
	if account is not None:
		rating = account.contest_rating
		attended = account.contests_attended
		history = [history_entry_payload(e) for e in account.rating_history]
	else:
		rating = settings.default_contest_rating
		attended = 0
		history = []
	submissions = (
		db.query(ContestSubmission)
		.filter(ContestSubmission.username == username)
		.order_by(ContestSubmission.contest_number.asc())
		.all()
	)
	tier, tier_color = tier_for(rating)
	return {
		"contestRating": rating,
		"contestsAttended": attended,
		"tier": tier,
		"tierColor": tier_color,
		"ratingHistory": history,
		"submissions": [
			{
				"contestNumber": s.contest_number,
				"grammarScore": s.grammar_score,
				"speakingScore": s.speaking_score,
				"readingScore": s.reading_score,
				"totalScore": s.total_score,
				"ratingChange": s.rating_change,
			}
			for s in submissions
		],
	}
