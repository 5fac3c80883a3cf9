"""Weekly contest calendar.

Every date and status computation happens in the fixed contest offset
(UTC+5:30 unless configured otherwise), never in the host's local zone.
All functions take an explicit ``now``; naive datetimes are read as UTC.
"""

from __future__ import annotations
from datetime import date, datetime, timedelta, timezone
from typing import Optional

from .settings import settings


UPCOMING = "upcoming"
LIVE = "live"
COMPLETED = "completed"

CONTEST_TZ = timezone(timedelta(minutes=settings.contest_utc_offset_minutes))


def _parse_hhmm(value: str) -> int:
	hours, minutes = value.strip().split(":")
	return int(hours) * 60 + int(minutes)


START_MINUTE = _parse_hhmm(settings.contest_start_time)
END_MINUTE = START_MINUTE + settings.contest_duration_minutes


def utcnow() -> datetime:
	return datetime.now(timezone.utc)


def local_now(now: Optional[datetime] = None) -> datetime:
	if now is None:
		now = utcnow()
	if now.tzinfo is None:
		now = now.replace(tzinfo=timezone.utc)
	return now.astimezone(CONTEST_TZ)


def minutes_of_day(local: datetime) -> int:
	return local.hour * 60 + local.minute


def today_str(now: Optional[datetime] = None) -> str:
	return local_now(now).date().isoformat()


def _days_since_contest_weekday(day: date) -> int:
	return (day.weekday() - settings.contest_weekday) % 7


def previous_contest_date(now: Optional[datetime] = None) -> str:
	"""Most recent contest weekday on or before today."""
	today = local_now(now).date()
	return (today - timedelta(days=_days_since_contest_weekday(today))).isoformat()


def last_closed_contest_date(now: Optional[datetime] = None) -> str:
	"""Most recent contest date whose window has fully closed."""
	local = local_now(now)
	today = local.date()
	back = _days_since_contest_weekday(today)
	if back == 0 and minutes_of_day(local) < END_MINUTE:
		back = 7
	return (today - timedelta(days=back)).isoformat()


def next_contest_date(now: Optional[datetime] = None) -> str:
	"""Date of the next contest that has not finished yet.

	On the contest weekday this is today until the window closes, then the
	following week.
	"""
	local = local_now(now)
	today = local.date()
	ahead = (settings.contest_weekday - today.weekday()) % 7
	if ahead == 0 and minutes_of_day(local) >= END_MINUTE:
		ahead = 7
	return (today + timedelta(days=ahead)).isoformat()


def shift_weeks(date_str: str, weeks: int) -> str:
	return (date.fromisoformat(date_str) + timedelta(weeks=weeks)).isoformat()


def contest_status(date_str: str, now: Optional[datetime] = None) -> str:
	local = local_now(now)
	today = local.date().isoformat()
	if date_str < today:
		return COMPLETED
	if date_str > today:
		return UPCOMING
	current = minutes_of_day(local)
	if START_MINUTE <= current < END_MINUTE:
		return LIVE
	if current >= END_MINUTE:
		return COMPLETED
	return UPCOMING


def window_end(date_str: str) -> datetime:
	"""Moment the contest on ``date_str`` closes, in contest-local time."""
	day = datetime.combine(date.fromisoformat(date_str), datetime.min.time(), tzinfo=CONTEST_TZ)
	return day + timedelta(minutes=END_MINUTE)
