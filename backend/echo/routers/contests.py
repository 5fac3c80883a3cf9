from __future__ import annotations
import random
from datetime import datetime
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import catalog, ledger, schedule, stats
from ..db import get_db
from ..errors import EchoError
from ..ledger import SubmitRequest
from .auth import User, get_current_user


router = APIRouter(prefix="/contests", tags=["contests"])

_rng = random.Random()


def get_clock() -> Callable[[], datetime]:
	return schedule.utcnow


def get_rng() -> random.Random:
	return _rng


def _http_error(err: EchoError) -> HTTPException:
	return HTTPException(status_code=err.status_code, detail=err.message)


@router.get("")
def get_contests(
	user: User = Depends(get_current_user),
	db: Session = Depends(get_db),
	clock: Callable[[], datetime] = Depends(get_clock),
	rng: random.Random = Depends(get_rng),
):
	data = catalog.list_contests(db, user.username, now=clock(), rng=rng)
	return {"success": True, "data": data}


@router.get("/stats")
def get_contest_stats(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
	return {"success": True, "data": stats.contest_stats(db, user.username)}


@router.get("/{contest_id}")
def get_contest(
	contest_id: int,
	user: User = Depends(get_current_user),
	db: Session = Depends(get_db),
	clock: Callable[[], datetime] = Depends(get_clock),
):
	try:
		contest = catalog.get_contest(db, contest_id)
	except EchoError as err:
		raise _http_error(err)
	return {"success": True, "data": catalog.contest_detail(db, contest, user.username, now=clock())}


@router.post("/{contest_id}/submit")
def submit_contest(
	contest_id: int,
	req: SubmitRequest,
	user: User = Depends(get_current_user),
	db: Session = Depends(get_db),
	rng: random.Random = Depends(get_rng),
):
	try:
		result = ledger.submit_contest(db, user.username, contest_id, req, rng=rng)
	except EchoError as err:
		raise _http_error(err)
	return {"success": True, "data": result}


@router.get("/{contest_id}/discussions")
def get_discussions(contest_id: int, user: User = Depends(get_current_user), db: Session = Depends(get_db)):
	try:
		contest = catalog.get_contest(db, contest_id)
	except EchoError as err:
		raise _http_error(err)
	return {"success": True, "data": catalog.list_discussions(contest)}
