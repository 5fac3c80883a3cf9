import random

import pytest
from sqlalchemy.exc import IntegrityError

from echo import catalog, ledger
from echo.errors import AlreadySubmitted, ContestNotFound
from echo.ledger import SubmitRequest
from echo.models import Contest, ContestSubmission, UserAccount

from conftest import WEDNESDAY


@pytest.fixture
def contest(db):
	catalog.ensure_seeded(db, WEDNESDAY, random.Random(1))
	return db.query(Contest).filter(Contest.contest_number == 1).one()


def perfect_request(contest):
	return SubmitRequest(
		grammarAnswers=[{"questionIndex": i, "selectedAnswer": q["answer"]} for i, q in enumerate(contest.grammar_questions)],
		speakingTranscript=" ".join(["word"] * 125),
		readingTranscript=contest.reading_paragraph["text"],
	)


def test_submit_grades_and_updates_rating(db, contest):
	participants = contest.participant_count
	result = ledger.submit_contest(db, "alice", contest.id, perfect_request(contest), random.Random(5))

	assert result["grammarScore"] == 10
	assert result["speakingScore"] == 100
	assert result["readingScore"] == 100
	assert result["totalScore"] == 300
	assert 30 <= result["ratingChange"] <= 44
	assert result["newRating"] == 1000 + result["ratingChange"]

	account = db.get(UserAccount, "alice")
	assert account.contest_rating == result["newRating"]
	assert account.contests_attended == 1
	assert len(account.rating_history) == 1
	assert account.rating_history[0].contest_number == contest.contest_number
	assert account.rating_history[0].date == contest.date

	db.refresh(contest)
	assert contest.participant_count == participants + 1
	assert result["submission"]["totalScore"] == 300


def test_total_score_matches_formula_for_partial_submission(db, contest):
	req = SubmitRequest(
		grammarAnswers=[{"selectedAnswer": contest.grammar_questions[0]["answer"]}, {"selectedAnswer": "nope"}],
		speakingTranscript="I like my city very much",
		readingTranscript="",
	)
	result = ledger.submit_contest(db, "bob", contest.id, req, random.Random(5))
	assert result["grammarScore"] == 1
	assert result["speakingScore"] == 24
	assert result["readingScore"] == 0
	assert result["totalScore"] == 1 * 10 + 24 + 0
	sub = result["submission"]
	assert len(sub["grammarAnswers"]) == len(contest.grammar_questions)
	assert sub["speakingCompleted"] is True
	assert sub["readingCompleted"] is False


def test_high_rated_user_keeps_top_tier_gain(db, contest):
	db.add(UserAccount(username="carol", contest_rating=1600, contests_attended=3))
	db.commit()
	result = ledger.submit_contest(db, "carol", contest.id, perfect_request(contest), random.Random(9))
	assert 30 <= result["ratingChange"] <= 44
	assert result["newRating"] == 1600 + result["ratingChange"]


def test_rating_never_drops_below_floor(db, contest):
	db.add(UserAccount(username="dan", contest_rating=510, contests_attended=0))
	db.commit()
	result = ledger.submit_contest(db, "dan", contest.id, SubmitRequest(), random.Random(2))
	assert result["totalScore"] == 0
	assert result["newRating"] == max(500, 510 + result["ratingChange"])
	assert result["newRating"] >= 500


def test_second_submission_is_rejected_without_side_effects(db, contest):
	first = ledger.submit_contest(db, "alice", contest.id, perfect_request(contest), random.Random(5))
	with pytest.raises(AlreadySubmitted):
		ledger.submit_contest(db, "alice", contest.id, SubmitRequest(), random.Random(5))

	account = db.get(UserAccount, "alice")
	assert account.contest_rating == first["newRating"]
	assert account.contests_attended == 1
	assert len(account.rating_history) == 1
	assert db.query(ContestSubmission).filter(ContestSubmission.username == "alice").count() == 1


def test_unique_constraint_backs_the_precheck(db, contest, monkeypatch):
	ledger.submit_contest(db, "alice", contest.id, perfect_request(contest), random.Random(5))
	before = db.get(UserAccount, "alice").contest_rating
	participants = db.get(Contest, contest.id).participant_count

	# simulate a racing request that passed the pre-check
	monkeypatch.setattr(ledger, "find_submission", lambda *args, **kwargs: None)
	with pytest.raises(AlreadySubmitted):
		ledger.submit_contest(db, "alice", contest.id, perfect_request(contest), random.Random(6))

	db.expire_all()
	account = db.get(UserAccount, "alice")
	assert account.contest_rating == before
	assert account.contests_attended == 1
	assert len(account.rating_history) == 1
	assert db.get(Contest, contest.id).participant_count == participants


def test_unrelated_integrity_error_is_not_reported_as_duplicate(db, contest, monkeypatch):
	account = UserAccount(username="zoe", contest_rating=1000, contests_attended=0)
	db.add(account)
	db.commit()
	db.expunge(account)
	participants = contest.participant_count

	# a racing first submission to another contest created the account meanwhile
	def insert_account(db, username):
		fresh = UserAccount(username=username, contest_rating=1000, contests_attended=0)
		db.add(fresh)
		return fresh

	monkeypatch.setattr(ledger, "_get_or_create_account", insert_account)
	with pytest.raises(IntegrityError):
		ledger.submit_contest(db, "zoe", contest.id, perfect_request(contest), random.Random(3))

	db.expire_all()
	assert db.query(ContestSubmission).filter(ContestSubmission.username == "zoe").count() == 0
	assert db.get(UserAccount, "zoe").contests_attended == 0
	assert db.get(Contest, contest.id).participant_count == participants


def test_duplicate_rows_rejected_by_database(db, contest):
	for _ in range(2):
		db.add(ContestSubmission(
			username="eve",
			contest_id=contest.id,
			contest_number=contest.contest_number,
			grammar_answers=[],
		))
	with pytest.raises(IntegrityError):
		db.commit()
	db.rollback()


def test_unknown_contest(db):
	with pytest.raises(ContestNotFound):
		ledger.submit_contest(db, "alice", 404, SubmitRequest(), random.Random(1))


def test_history_grows_by_one_per_contest(db, contest):
	second = db.query(Contest).filter(Contest.contest_number == 2).one()
	ledger.submit_contest(db, "alice", contest.id, perfect_request(contest), random.Random(1))
	ledger.submit_contest(db, "alice", second.id, perfect_request(second), random.Random(2))
	account = db.get(UserAccount, "alice")
	assert account.contests_attended == 2
	assert [e.contest_number for e in account.rating_history] == [1, 2]
	assert account.rating_history[-1].rating == account.contest_rating
