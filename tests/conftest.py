import pytest
from httpx import ASGITransport, AsyncClient

from resume_learning.core.config import Settings
from resume_learning.db.base import Base
from resume_learning.db.session import create_engine, make_sessionmaker
from resume_learning.main import create_app
from resume_learning.services.seeding import seed_chapters


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        store_timeout_seconds=5.0,
        seed_on_startup=True,
    )


@pytest.fixture
async def engine(settings):
    engine = create_engine(settings)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def sessionmaker(engine):
    return make_sessionmaker(engine)


@pytest.fixture
async def db(sessionmaker):
    async with sessionmaker() as session:
        yield session


@pytest.fixture
async def seeded_db(db):
    await seed_chapters(db)
    return db


@pytest.fixture
async def client(settings):
    """HTTP client against a fully started app (lifespan entered: tables created, chapters seeded)."""
    app = create_app(settings)
    async with app.router.lifespan_context(app):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
            yield c
