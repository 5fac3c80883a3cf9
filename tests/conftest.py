import random
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from echo import models  # noqa: F401  registers tables on Base.metadata
from echo.db import Base, get_db
from echo.main import app
from echo.routers.auth import User, get_current_user
from echo.routers.contests import get_clock, get_rng


# 12:00 IST on Wednesday 2025-03-05; the previous Sunday is 2025-03-02
WEDNESDAY = datetime(2025, 3, 5, 6, 30, tzinfo=timezone.utc)


class FakeClock:
	def __init__(self, now: datetime) -> None:
		self.now = now

	def __call__(self) -> datetime:
		return self.now


@pytest.fixture
def engine():
	engine = create_engine(
		"sqlite://",
		connect_args={"check_same_thread": False},
		poolclass=StaticPool,
	)
	Base.metadata.create_all(bind=engine)
	yield engine
	engine.dispose()


@pytest.fixture
def session_factory(engine):
	return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
	session = session_factory()
	yield session
	session.close()


@pytest.fixture
def clock():
	return FakeClock(WEDNESDAY)


@pytest.fixture
def current_user():
	return {"username": "alice"}


@pytest.fixture
def app_client(session_factory, clock):
	def override_get_db():
		session = session_factory()
		try:
			yield session
		finally:
			session.close()

	app.dependency_overrides[get_db] = override_get_db
	app.dependency_overrides[get_clock] = lambda: clock
	app.dependency_overrides[get_rng] = lambda: random.Random(1234)
	yield TestClient(app)
	app.dependency_overrides.clear()


@pytest.fixture
def client(app_client, current_user):
	app.dependency_overrides[get_current_user] = lambda: User(username=current_user["username"])
	return app_client
