"""
Pytest fixtures for DevConnector tests.

Each test gets a fresh in-memory SQLite database.
"""

import os

# Settings are cached on first use; configure the environment before any app import
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("GITHUB_TOKEN", "test-github-token")

import pytest  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from devconnector.db import Base, build_engine  # noqa: E402
from devconnector.models import Profile, User  # noqa: E402


@pytest.fixture(scope="function")
def test_db():
    """Create a fresh test database for each test using ORM."""
    db_url = "sqlite://"
    engine = build_engine(db_url)

    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    yield db_url, TestingSessionLocal, engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def test_session(test_db):
    """Get a test session from the test database."""
    _, TestingSessionLocal, _ = test_db
    session = TestingSessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture
def sample_user(test_session):
    """A persisted user without a profile."""
    user = User(
        name="Ada Lovelace",
        email="ada@example.com",
        avatar="https://example.com/ada.png",
    )
    test_session.add(user)
    test_session.flush()
    return user


@pytest.fixture
def sample_profile(test_session, sample_user):
    """A persisted profile with one experience and one education entry."""
    profile = Profile(
        user_id=sample_user.id,
        status="Developer",
        company="Analytical Engines Ltd",
        skills=["python", "sql"],
        social={"twitter": "https://twitter.com/ada"},
        experience=[
            {
                "id": "exp1",
                "title": "Engineer",
                "company": "Babbage & Co",
                "location": "London",
                "from": "1842-01-01",
                "to": None,
                "current": True,
                "description": None,
            }
        ],
        education=[
            {
                "id": "edu1",
                "school": "Home",
                "degree": "Tutoring",
                "fieldofstudy": "Mathematics",
                "from": "1830-01-01",
                "to": "1835-01-01",
                "current": False,
                "description": None,
            }
        ],
    )
    test_session.add(profile)
    test_session.flush()
    return profile


@pytest.fixture
def sample_github_repos():
    """Sample GitHub repository listing payload."""
    return [
        {
            "id": 1,
            "name": "difference-engine",
            "html_url": "https://github.com/ada/difference-engine",
            "description": "First program",
            "stargazers_count": 42,
            "watchers_count": 42,
            "forks_count": 3,
            "created_at": "2011-01-26T19:01:12Z",
        },
        {
            "id": 2,
            "name": "notes",
            "html_url": "https://github.com/ada/notes",
            "description": None,
            "stargazers_count": 1,
            "watchers_count": 1,
            "forks_count": 0,
            "created_at": "2012-03-02T10:00:00Z",
        },
    ]
