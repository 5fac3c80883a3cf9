"""Submission ledger: one graded, immutable submission per (user, contest).

The duplicate pre-check avoids grading work for repeat submits; the unique
constraint on ``contest_submissions(username, contest_id)`` is what actually
guarantees a single submission when two requests race.
"""

from __future__ import annotations
import logging
import random
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from . import rating
from .catalog import find_submission, get_contest, submission_payload
from .errors import AlreadySubmitted
from .grading import composite_score, grade_grammar, grade_reading, grade_speaking
from .models import Contest, ContestSubmission, RatingHistoryEntry, UserAccount
from .settings import settings


logger = logging.getLogger(__name__)


class GrammarAnswer(BaseModel):
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

	question_index: Optional[int] = None
	selected_answer: Optional[str] = None


class SubmitRequest(BaseModel):
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

	grammar_answers: Optional[List[GrammarAnswer]] = None
	speaking_transcript: Optional[str] = ""
	reading_transcript: Optional[str] = ""


def _get_or_create_account(db: Session, username: str) -> UserAccount:
	account = db.get(UserAccount, username)
	if account is None:
		account = UserAccount(
			username=username,
			contest_rating=settings.default_contest_rating,
			contests_attended=0,
		)
		db.add(account)
	return account


def _submission_committed(db: Session, username: str, contest_id: int) -> bool:
	# only a committed row for this pair means the unique constraint fired
	row = (
		db.query(ContestSubmission.id)
		.filter(ContestSubmission.username == username, ContestSubmission.contest_id == contest_id)
		.first()
	)
	return row is not None


def submit_contest(
	db: Session,
	username: str,
	contest_id: int,
	req: SubmitRequest,
	rng: Optional[random.Random] = None,
) -> Dict[str, Any]:
	contest = get_contest(db, contest_id)
	contest_number = contest.contest_number
	if find_submission(db, username, contest.id) is not None:
		logger.warning("Rejected duplicate submission by %s for contest #%d", username, contest_number)
		raise AlreadySubmitted(username, contest_id)

	answers = [{"questionIndex": a.question_index, "selectedAnswer": a.selected_answer} for a in req.grammar_answers or []]
	grammar = grade_grammar(contest.grammar_questions, answers)
	speaking = grade_speaking(req.speaking_transcript)
	reading = grade_reading(req.reading_transcript, (contest.reading_paragraph or {}).get("text"))
	total_score = composite_score(grammar.score, speaking.score, reading.score)

	try:
		account = _get_or_create_account(db, username)
		current_rating = account.contest_rating if account.contest_rating is not None else settings.default_contest_rating
		rating_change = rating.compute_delta(current_rating, total_score, rng)
		new_rating = rating.apply_delta(current_rating, rating_change)

		submission = ContestSubmission(
			username=username,
			contest_id=contest.id,
			contest_number=contest_number,
			grammar_answers=[a.model_dump() for a in grammar.answers],
			grammar_score=grammar.score,
			speaking_completed=speaking.score > 0,
			speaking_transcript=req.speaking_transcript or "",
			speaking_score=speaking.score,
			speaking_feedback=speaking.feedback,
			reading_completed=reading.score > 0,
			reading_transcript=req.reading_transcript or "",
			reading_score=reading.score,
			reading_feedback=reading.feedback,
			total_score=total_score,
			rating_change=rating_change,
		)
		db.add(submission)
		account.contest_rating = new_rating
		account.contests_attended = (account.contests_attended or 0) + 1
		account.rating_history.append(RatingHistoryEntry(
			contest_number=contest_number,
			rating=new_rating,
			rating_change=rating_change,
			date=contest.date,
		))
		contest.participant_count = Contest.participant_count + 1
		db.commit()
	except IntegrityError:
		db.rollback()
		if not _submission_committed(db, username, contest_id):
			logger.exception("Submission by %s for contest #%d hit an unrelated constraint", username, contest_number)
			raise
		logger.warning("Concurrent duplicate submission by %s for contest #%d", username, contest_number)
		raise AlreadySubmitted(username, contest_id)
	except Exception:
		db.rollback()
		raise
	db.refresh(submission)

	logger.info(
		"Contest #%d submission by %s: total=%d rating %d -> %d",
		contest_number, username, total_score, current_rating, new_rating,
	)
	return {
		"grammarScore": grammar.score,
		"speakingScore": speaking.score,
		"speakingFeedback": speaking.feedback,
		"readingScore": reading.score,
		"readingFeedback": reading.feedback,
		"totalScore": total_score,
		"ratingChange": rating_change,
		"newRating": new_rating,
		"submission": submission_payload(submission),
	}
