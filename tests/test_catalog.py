import random
from datetime import date, datetime, timedelta

import pytest
from sqlalchemy.exc import IntegrityError

from echo import catalog, schedule
from echo.contest_data import CONTEST_TEMPLATES
from echo.models import Contest

from conftest import WEDNESDAY


SEED_COUNT = len(CONTEST_TEMPLATES)


def test_seed_from_empty_on_wednesday(db):
	created = catalog.ensure_seeded(db, WEDNESDAY, random.Random(1))
	assert created == SEED_COUNT

	contests = db.query(Contest).order_by(Contest.contest_number).all()
	assert [c.contest_number for c in contests] == list(range(1, SEED_COUNT + 1))
	assert contests[-1].date == "2025-03-02"
	for prev, cur in zip(contests, contests[1:]):
		assert date.fromisoformat(cur.date) - date.fromisoformat(prev.date) == timedelta(days=7)
	for c in contests:
		assert date.fromisoformat(c.date).weekday() == 6
		assert schedule.contest_status(c.date, WEDNESDAY) == schedule.COMPLETED
		assert 10 <= c.participant_count <= 59


def test_seeding_is_idempotent(db):
	catalog.ensure_seeded(db, WEDNESDAY, random.Random(1))
	assert catalog.ensure_seeded(db, WEDNESDAY, random.Random(2)) == 0
	assert db.query(Contest).count() == SEED_COUNT


def test_seeding_on_contest_day_skips_the_open_slot(db):
	sunday_morning = WEDNESDAY + timedelta(days=4)
	catalog.ensure_seeded(db, sunday_morning, random.Random(1))
	latest = db.query(Contest).order_by(Contest.date.desc()).first()
	assert latest.date == "2025-03-02"


def test_next_contest_created_once(db):
	catalog.ensure_seeded(db, WEDNESDAY, random.Random(1))
	nxt = catalog.get_or_create_next(db, WEDNESDAY)
	assert nxt.contest_number == SEED_COUNT + 1
	assert nxt.date == "2025-03-09"
	assert nxt.participant_count == 0
	assert nxt.title == f"ECHO Weekly Contest #{SEED_COUNT + 1}"
	assert schedule.contest_status(nxt.date, WEDNESDAY) == schedule.UPCOMING

	again = catalog.get_or_create_next(db, WEDNESDAY)
	assert again.id == nxt.id
	assert db.query(Contest).count() == SEED_COUNT + 1


def test_generated_contests_cycle_through_templates(db):
	catalog.ensure_seeded(db, WEDNESDAY, random.Random(1))
	for week in range(SEED_COUNT + 2):
		contest = catalog.get_or_create_next(db, WEDNESDAY + timedelta(weeks=week))
		template = CONTEST_TEMPLATES[(contest.contest_number - 1) % SEED_COUNT]
		assert contest.grammar_questions == template["grammarQuestions"]
		assert contest.reading_paragraph == template["readingParagraph"]
	numbers = [n for (n,) in db.query(Contest.contest_number).order_by(Contest.contest_number)]
	assert numbers == list(range(1, 2 * SEED_COUNT + 3))


def test_one_contest_per_date(db):
	catalog.ensure_seeded(db, WEDNESDAY, random.Random(1))
	existing = db.query(Contest).first()
	dup = catalog._new_contest(999, existing.date)
	db.add(dup)
	with pytest.raises(IntegrityError):
		db.commit()
	db.rollback()


def test_list_contests_newest_first_without_answers(db):
	data = catalog.list_contests(db, "alice", WEDNESDAY, random.Random(1))
	assert len(data) == SEED_COUNT + 1
	assert data[0]["date"] == "2025-03-09"
	assert data[0]["status"] == "upcoming"
	assert all(item["status"] == "completed" for item in data[1:])
	assert [item["date"] for item in data] == sorted((item["date"] for item in data), reverse=True)
	for item in data:
		assert "grammarQuestions" not in item
		assert item["userSubmitted"] is False
		assert item["userScore"] is None


def test_detail_reveals_answers_only_when_completed(db):
	catalog.list_contests(db, "alice", WEDNESDAY, random.Random(1))
	upcoming = catalog.get_or_create_next(db, WEDNESDAY)
	past = db.query(Contest).filter(Contest.contest_number == 1).one()

	hidden = catalog.contest_detail(db, upcoming, "alice", WEDNESDAY)
	assert hidden["status"] == "upcoming"
	assert all("answer" not in q and "explanation" not in q for q in hidden["grammarQuestions"])

	shown = catalog.contest_detail(db, past, "alice", WEDNESDAY)
	assert shown["status"] == "completed"
	assert shown["grammarQuestions"][0]["answer"] == past.grammar_questions[0]["answer"]
	assert shown["existingSubmission"] is None


def test_get_contest_unknown_id(db):
	from echo.errors import ContestNotFound

	with pytest.raises(ContestNotFound):
		catalog.get_contest(db, 12345)


def test_discussions_for_seeded_and_cycled_contests(db):
	catalog.ensure_seeded(db, WEDNESDAY, random.Random(1))
	first = db.query(Contest).filter(Contest.contest_number == 1).one()
	threads = catalog.list_discussions(first)
	assert threads
	assert all(t["contestNumber"] == 1 for t in threads)
	assert catalog.list_discussions(catalog.get_or_create_next(db, WEDNESDAY)) == []


def test_discussion_timestamps_follow_the_contest_date(db):
	catalog.ensure_seeded(db, WEDNESDAY, random.Random(1))
	for contest in db.query(Contest).all():
		closed_at = schedule.window_end(contest.date)
		for thread in catalog.list_discussions(contest):
			assert "minutesAfterEnd" not in thread
			assert thread["timestamp"].startswith(f"{contest.date}T")
			assert thread["timestamp"].endswith("+05:30")
			assert datetime.fromisoformat(thread["timestamp"]) > closed_at
