"""Shared pytest fixtures for the outliner test suite."""

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio


# ---------------------------------------------------------------------------
# Database fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_db_path(tmp_path):
    """Return a temporary SQLite database path."""
    return tmp_path / "test_outliner.db"


@pytest.fixture
def db(tmp_db_path):
    """Return an initialized Database instance backed by a temp file."""
    from models.database import Database
    database = Database(tmp_db_path)
    yield database
    database.close()


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings(tmp_path):
    """Return a Settings instance with all paths pointing to tmp_path."""
    from config.settings import Settings
    return Settings(
        _env_file=None,
        sqlite_db_path=tmp_path / "outliner.db",
        log_dir=tmp_path / "logs",
        cli_user_id="writer-1",
    )


# ---------------------------------------------------------------------------
# Context fixtures
# ---------------------------------------------------------------------------

class FakeClock:
    """Deterministic clock: every call is one second after the previous one."""

    def __init__(self, start: datetime | None = None):
        self.current = start or datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ctx(db, clock):
    """Context authenticated as the owner of every sample entity."""
    from actions.context import ActionContext, UserIdentity
    return ActionContext(db=db, user=UserIdentity("alice"), clock=clock)


@pytest.fixture
def stranger_ctx(db, clock):
    """Context authenticated as a different user sharing the same store."""
    from actions.context import ActionContext, UserIdentity
    return ActionContext(db=db, user=UserIdentity("mallory"), clock=clock)


@pytest.fixture
def anon_ctx(db, clock):
    """Context with no resolved identity."""
    from actions.context import ActionContext
    return ActionContext(db=db, user=None, clock=clock)


# ---------------------------------------------------------------------------
# Sample data fixtures
# ---------------------------------------------------------------------------

@pytest_asyncio.fixture
async def sample_novel(ctx):
    """Insert and return a sample Novel owned by alice."""
    from actions import create_novel
    result = await create_novel(ctx, title="Dune Redux", genre="Science fiction", status="outlining")
    return result["data"]["novel"]


@pytest_asyncio.fixture
async def other_novel(ctx):
    """A second novel owned by alice, used for cross-novel checks."""
    from actions import create_novel
    result = await create_novel(ctx, title="The Other Book")
    return result["data"]["novel"]


@pytest_asyncio.fixture
async def sample_part(ctx, sample_novel):
    """Insert and return Part I of the sample novel."""
    from actions import create_novel_part
    result = await create_novel_part(ctx, novelId=sample_novel.id, orderIndex=1, title="Part I")
    return result["data"]["part"]


@pytest_asyncio.fixture
async def sample_chapter(ctx, sample_novel, sample_part):
    """Insert and return a chapter filed under Part I."""
    from actions import create_novel_chapter
    result = await create_novel_chapter(
        ctx,
        novelId=sample_novel.id,
        partId=sample_part.id,
        orderIndex=1,
        title="Arrival",
        povCharacter="Paul",
        summary="The family lands on Arrakis.",
        wordCountGoal=4000,
    )
    return result["data"]["chapter"]


@pytest_asyncio.fixture
async def sample_beat(ctx, sample_novel, sample_chapter):
    """Insert and return a beat inside the sample chapter."""
    from actions import create_novel_beat
    result = await create_novel_beat(
        ctx,
        novelId=sample_novel.id,
        chapterId=sample_chapter.id,
        description="Paul meets the Fremen",
        beatType="inciting-incident",
    )
    return result["data"]["beat"]
