"""
Pytest configuration and fixtures for testing.

Provides an in-memory SQLite database seeded with the member/team data
used across repository tests, plus helpers for building entities.
"""

import os
import tempfile

# Set environment variables for testing before importing querypage modules
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault(
    "LOG_FILE_PATH", os.path.join(tempfile.gettempdir(), "querypage-test.log")
)

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from querypage.models.member import Member  # noqa: E402
from querypage.models.team import Team  # noqa: E402
from querypage.repositories.member_repository import (  # noqa: E402
    MemberRepository,
)
from querypage.repositories.team_repository import TeamRepository  # noqa: E402
from querypage.storage.db import init_db  # noqa: E402


@pytest_asyncio.fixture
async def db_engine():
    """
    Provides a fresh in-memory SQLite engine with all tables created.

    StaticPool keeps the single in-memory connection alive for the whole
    test, so every session sees the same database.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_db(bind=engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(db_engine):
    """Provides an AsyncSession bound to the in-memory engine."""
    async with AsyncSession(db_engine, expire_on_commit=False) as s:
        yield s


@pytest_asyncio.fixture
async def seeded_session(session):
    """
    Provides a session over two teams and four members.

    teamA: member1 (10), member2 (20)
    teamB: member3 (30), member4 (40)
    """
    team_a, team_b = await TeamRepository(session).create_many(
        [Team(name="teamA"), Team(name="teamB")]
    )
    await MemberRepository(session).create_many(
        [
            create_member_fixture("member1", 10, team_a),
            create_member_fixture("member2", 20, team_a),
            create_member_fixture("member3", 30, team_b),
            create_member_fixture("member4", 40, team_b),
        ]
    )
    await session.commit()
    return session


def create_member_fixture(
    username: str = "member", age: int = 0, team: Team | None = None
) -> Member:
    """
    Factory function to create a Member instance for testing.

    Args:
        username: Member username.
        age: Member age.
        team: Optional team the member belongs to.

    Returns:
        Member: Member instance (not persisted)
    """
    return Member(
        username=username,
        age=age,
        team_id=team.id if team is not None else None,
    )


@pytest.fixture
def member_rows():
    """Provides four detached members, ordered by username."""
    return [
        Member(id=i, username=f"member{i}", age=i * 10) for i in range(1, 5)
    ]
