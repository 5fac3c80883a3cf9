from __future__ import annotations
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Integer, Text, Boolean, JSON, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from .db import Base


class AuthUser(Base):
	__tablename__ = "auth_users"
	# Primary key is username
	username = Column(String(128), primary_key=True, index=True)
	password_hash = Column(String(256), nullable=False)
	email = Column(String(256), nullable=True)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
	updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class AuthSession(Base):
	__tablename__ = "auth_sessions"
	# Session id is the JWT "jti" claim
	session_id = Column(String(64), primary_key=True)
	username = Column(String(128), nullable=False, index=True)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
	last_activity_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class UserAccount(Base):
	__tablename__ = "user_accounts"
	# Holds the contest rating facts; created on first submission
	username = Column(String(128), primary_key=True, index=True)
	contest_rating = Column(Integer, default=1000, nullable=False)
	contests_attended = Column(Integer, default=0, nullable=False)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
	updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

	rating_history = relationship(
		"RatingHistoryEntry",
		order_by="RatingHistoryEntry.id",
		cascade="all, delete-orphan",
	)


class RatingHistoryEntry(Base):
	__tablename__ = "rating_history"
	# Append-only; insertion order (id) is the history order
	id = Column(Integer, primary_key=True, autoincrement=True)
	username = Column(String(128), ForeignKey("user_accounts.username"), nullable=False, index=True)
	contest_number = Column(Integer, nullable=False)
	rating = Column(Integer, nullable=False)
	rating_change = Column(Integer, nullable=False)
	date = Column(String(10), nullable=False)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class Contest(Base):
	__tablename__ = "contests"
	id = Column(Integer, primary_key=True, autoincrement=True)
	contest_number = Column(Integer, unique=True, nullable=False)
	title = Column(String(128), nullable=False)
	# Contest weekday in the contest time zone, YYYY-MM-DD; one contest per slot
	date = Column(String(10), unique=True, nullable=False, index=True)
	start_time = Column(String(5), default="20:00", nullable=False)
	duration_minutes = Column(Integer, default=70, nullable=False)
	grammar_questions = Column(JSON, nullable=False)  # [{question, options, answer, explanation}]
	speaking_topic = Column(JSON, nullable=False)  # {topic, description, minDurationSec, maxDurationSec}
	reading_paragraph = Column(JSON, nullable=False)  # {title, text, wordCount}
	participant_count = Column(Integer, default=0, nullable=False)
	created_at = Column(DateTime, default=datetime.utcnow, nullable=False)


class ContestSubmission(Base):
	__tablename__ = "contest_submissions"
	__table_args__ = (UniqueConstraint("username", "contest_id", name="uq_submission_user_contest"),)
	id = Column(Integer, primary_key=True, autoincrement=True)
	username = Column(String(128), nullable=False, index=True)
	contest_id = Column(Integer, ForeignKey("contests.id"), nullable=False, index=True)
	contest_number = Column(Integer, nullable=False)
	grammar_answers = Column(JSON, nullable=False)  # [{questionIndex, selectedAnswer, isCorrect}]
	grammar_score = Column(Integer, default=0, nullable=False)
	speaking_completed = Column(Boolean, default=False, nullable=False)
	speaking_transcript = Column(Text, default="", nullable=False)
	speaking_score = Column(Integer, default=0, nullable=False)
	speaking_feedback = Column(Text, default="", nullable=False)
	reading_completed = Column(Boolean, default=False, nullable=False)
	reading_transcript = Column(Text, default="", nullable=False)
	reading_score = Column(Integer, default=0, nullable=False)
	reading_feedback = Column(Text, default="", nullable=False)
	total_score = Column(Integer, default=0, nullable=False)  # grammar*10 + speaking + reading
	rating_change = Column(Integer, default=0, nullable=False)
	submitted_at = Column(DateTime, default=datetime.utcnow, nullable=False)
