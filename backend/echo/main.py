import asyncio
import logging

from fastapi import FastAPI

from .db import Base, engine, SessionLocal
from .cleanup import purge_stale_sessions
from .settings import settings
from .routers import auth
from .routers import contests

logging.basicConfig(
	level=getattr(logging, settings.log_level.upper(), logging.INFO),
	format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="ECHO Contest API")
app.include_router(auth.router)
app.include_router(contests.router)


@app.get("/info")
def root():
	return {"status": "ok", "contest_weekday": settings.contest_weekday, "contest_start_time": settings.contest_start_time}


def _run_cleanup() -> None:
	db = SessionLocal()
	try:
		purge_stale_sessions(db)
	except Exception:
		logger.exception("Session cleanup failed")
	finally:
		db.close()


async def _cleanup_watcher():
	# Daily after the startup pass
	while True:
		await asyncio.sleep(24 * 60 * 60)
		_run_cleanup()


@app.on_event("startup")
async def startup_event():
	# Initialize DB schema
	Base.metadata.create_all(bind=engine)
	_run_cleanup()
	asyncio.create_task(_cleanup_watcher())
