"""Contest catalog: seeding, next-contest creation and read projections.

Contests are created once per weekly slot and never deleted. Question content
comes from ``CONTEST_TEMPLATES``; contest ``n`` uses template
``(n - 1) % len(templates)``, so content repeats once the seed set is used up.
Status is never stored, it is derived from the date on every read.
"""

from __future__ import annotations
import copy
import logging
import random
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from . import schedule
from .contest_data import CONTEST_TEMPLATES, DISCUSSIONS
from .errors import ContestNotFound
from .models import Contest, ContestSubmission
from .settings import settings


logger = logging.getLogger(__name__)

SEED_PARTICIPANTS_MIN = 10
SEED_PARTICIPANTS_MAX = 59


def contest_title(contest_number: int) -> str:
	return f"ECHO Weekly Contest #{contest_number}"


def template_for(contest_number: int) -> Dict[str, Any]:
	return CONTEST_TEMPLATES[(contest_number - 1) % len(CONTEST_TEMPLATES)]


def _new_contest(contest_number: int, date_str: str, participant_count: int = 0) -> Contest:
	template = template_for(contest_number)
	return Contest(
		contest_number=contest_number,
		title=contest_title(contest_number),
		date=date_str,
		start_time=settings.contest_start_time,
		duration_minutes=settings.contest_duration_minutes,
		grammar_questions=copy.deepcopy(template["grammarQuestions"]),
		speaking_topic=copy.deepcopy(template["speakingTopic"]),
		reading_paragraph=copy.deepcopy(template["readingParagraph"]),
		participant_count=participant_count,
	)


def ensure_seeded(db: Session, now: Optional[datetime] = None, rng: Optional[random.Random] = None) -> int:
	"""Backfill one historical contest per template if the catalog is empty.

	Contests are numbered 1..N in date order, the last one on the most recent
	slot that has already closed. Returns the number of contests created.
	"""
	if db.query(func.count(Contest.id)).scalar():
		return 0
	rng = rng or random
	latest = schedule.last_closed_contest_date(now)
	total = len(CONTEST_TEMPLATES)
	for contest_number in range(1, total + 1):
		date_str = schedule.shift_weeks(latest, contest_number - total)
		participants = rng.randint(SEED_PARTICIPANTS_MIN, SEED_PARTICIPANTS_MAX)
		db.add(_new_contest(contest_number, date_str, participant_count=participants))
	try:
		db.commit()
	except IntegrityError:
		db.rollback()
		logger.info("Contest catalog was seeded concurrently; keeping existing contests")
		return 0
	logger.info("Seeded %d contests ending %s", total, latest)
	return total


def get_or_create_next(db: Session, now: Optional[datetime] = None) -> Contest:
	"""Return the contest for the next open slot, creating it if missing."""
	date_str = schedule.next_contest_date(now)
	existing = (
		db.query(Contest)
		.filter(Contest.date >= date_str)
		.order_by(Contest.date.asc())
		.first()
	)
	if existing is not None:
		return existing
	max_number = db.query(func.max(Contest.contest_number)).scalar() or 0
	contest = _new_contest(max_number + 1, date_str)
	db.add(contest)
	try:
		db.commit()
	except IntegrityError:
		db.rollback()
		winner = db.query(Contest).filter(Contest.date == date_str).first()
		if winner is None:
			raise
		return winner
	db.refresh(contest)
	logger.info("Created contest #%d for %s", contest.contest_number, date_str)
	return contest


def get_contest(db: Session, contest_id: int) -> Contest:
	contest = db.get(Contest, contest_id)
	if contest is None:
		raise ContestNotFound(contest_id)
	return contest


def find_submission(db: Session, username: str, contest_id: int) -> Optional[ContestSubmission]:
	return (
		db.query(ContestSubmission)
		.filter(ContestSubmission.username == username, ContestSubmission.contest_id == contest_id)
		.first()
	)


def submission_payload(sub: ContestSubmission) -> Dict[str, Any]:
	return {
		"id": sub.id,
		"username": sub.username,
		"contestId": sub.contest_id,
		"contestNumber": sub.contest_number,
		"grammarAnswers": sub.grammar_answers,
		"grammarScore": sub.grammar_score,
		"speakingCompleted": sub.speaking_completed,
		"speakingTranscript": sub.speaking_transcript,
		"speakingScore": sub.speaking_score,
		"speakingFeedback": sub.speaking_feedback,
		"readingCompleted": sub.reading_completed,
		"readingTranscript": sub.reading_transcript,
		"readingScore": sub.reading_score,
		"readingFeedback": sub.reading_feedback,
		"totalScore": sub.total_score,
		"ratingChange": sub.rating_change,
		"submittedAt": sub.submitted_at.isoformat() if sub.submitted_at else None,
	}


def _contest_header(contest: Contest, status: str) -> Dict[str, Any]:
	return {
		"id": contest.id,
		"contestNumber": contest.contest_number,
		"title": contest.title,
		"date": contest.date,
		"startTime": contest.start_time,
		"durationMinutes": contest.duration_minutes,
		"participantCount": contest.participant_count,
		"status": status,
	}


def list_contests(
	db: Session,
	username: str,
	now: Optional[datetime] = None,
	rng: Optional[random.Random] = None,
) -> List[Dict[str, Any]]:
	"""All contests newest first, with the caller's own result if any.

	Seeds the catalog and creates the next slot as a side effect.
	"""
	ensure_seeded(db, now, rng)
	get_or_create_next(db, now)
	contests = db.query(Contest).order_by(Contest.date.desc()).all()
	submissions = {
		s.contest_id: s
		for s in db.query(ContestSubmission).filter(ContestSubmission.username == username).all()
	}
	data: List[Dict[str, Any]] = []
	for contest in contests:
		sub = submissions.get(contest.id)
		item = _contest_header(contest, schedule.contest_status(contest.date, now))
		item.update({
			"userSubmitted": sub is not None,
			"userScore": sub.total_score if sub else None,
			"userRatingChange": sub.rating_change if sub else None,
		})
		data.append(item)
	return data


def contest_detail(db: Session, contest: Contest, username: str, now: Optional[datetime] = None) -> Dict[str, Any]:
	status = schedule.contest_status(contest.date, now)
	reveal = status == schedule.COMPLETED
	questions = []
	for index, q in enumerate(contest.grammar_questions or []):
		item = {"index": index, "question": q.get("question"), "options": list(q.get("options") or [])}
		if reveal:
			item["answer"] = q.get("answer")
			item["explanation"] = q.get("explanation")
		questions.append(item)
	existing = find_submission(db, username, contest.id)
	detail = _contest_header(contest, status)
	detail.update({
		"grammarQuestions": questions,
		"speakingTopic": contest.speaking_topic,
		"readingParagraph": contest.reading_paragraph,
		"userSubmitted": existing is not None,
		"existingSubmission": submission_payload(existing) if existing else None,
	})
	return detail


def list_discussions(contest: Contest) -> List[Dict[str, Any]]:
	closed_at = schedule.window_end(contest.date)
	threads = []
	for d in DISCUSSIONS:
		if d["contestNumber"] != contest.contest_number:
			continue
		thread = {k: v for k, v in d.items() if k != "minutesAfterEnd"}
		thread["timestamp"] = (closed_at + timedelta(minutes=d["minutesAfterEnd"])).isoformat()
		threads.append(thread)
	return threads
