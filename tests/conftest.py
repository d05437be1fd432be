"""Pytest bootstrap for project imports and shared fixtures."""

from pathlib import Path
import os
import sys

# Settings are read at import time; give the test run its own values.
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("APP_ENV", "test")

# Ensure project root is on sys.path so `import mentormatch` works without installing
PROJECT_ROOT = Path(__file__).resolve().parents[1]
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from mentormatch.database import Base
from mentormatch.models.user import User, UserProfile, UserRole
from mentormatch.schemas.availability import Availability


# ======================
# TEST DATABASE SETUP
# ======================

@pytest.fixture
def db_session():
    """Fresh in-memory database per test"""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()

    yield session

    session.close()
    engine.dispose()


@pytest.fixture
def make_user(db_session):
    """Factory: create a user, optionally with a profile carrying availability."""

    def _make_user(name, role, availability=None, department=None):
        user = User(
            name=name,
            email=f"{name.lower().replace(' ', '.')}@test.com",
            password_hash="hash",
            role=role,
            is_active=True,
        )
        db_session.add(user)
        db_session.flush()

        first, _, last = name.partition(" ")
        profile = UserProfile(
            user_id=user.id,
            first_name=first,
            last_name=last or first,
            department=department,
            availability=Availability.model_validate(availability).to_storage() if availability else None,
        )
        db_session.add(profile)
        db_session.commit()
        return user

    return _make_user


WEEKDAYS_ALL_DAY = {
    "days": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"],
    "startTime": "08:00",
    "endTime": "18:00",
}


@pytest.fixture
def mentor(make_user):
    return make_user("Maya Mentor", UserRole.MENTOR, availability=WEEKDAYS_ALL_DAY, department="Computer Science")


@pytest.fixture
def mentee(make_user):
    return make_user("Eli Mentee", UserRole.MENTEE, availability=WEEKDAYS_ALL_DAY)
