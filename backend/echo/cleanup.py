from __future__ import annotations
from datetime import datetime, timedelta
from typing import Optional
import logging

from sqlalchemy import delete
from sqlalchemy.orm import Session

from .models import AuthSession
from .settings import settings


logger = logging.getLogger(__name__)


def purge_stale_sessions(db: Session, now: Optional[datetime] = None) -> int:
	# Sessions idle past the retention window are dropped; their tokens stop working
	now = now or datetime.utcnow()
	threshold = now - timedelta(days=settings.session_retention_days)
	res = db.execute(delete(AuthSession).where(AuthSession.last_activity_at < threshold))
	db.commit()
	removed = res.rowcount or 0
	if removed:
		logger.info("Purged %d stale auth sessions", removed)
	return removed
