import pytest
from sqlalchemy.exc import OperationalError

from resume_learning.db.session import create_engine, ping, sync_database_url
from resume_learning.main import create_app


@pytest.mark.parametrize(
    "url,expected",
    [
        ("sqlite+aiosqlite:///./resume_learning.db", "sqlite:///./resume_learning.db"),
        ("postgresql+asyncpg://u:p@db/learn", "postgresql+psycopg2://u:p@db/learn"),
        ("mysql://u:p@db/learn", "mysql://u:p@db/learn"),
    ],
)
def test_sync_database_url(url, expected):
    assert sync_database_url(url) == expected


async def test_ping_reaches_store(settings):
    engine = create_engine(settings)
    try:
        await ping(engine)
    finally:
        await engine.dispose()


async def test_startup_fails_when_store_unreachable(settings, tmp_path):
    settings.database_url = f"sqlite+aiosqlite:///{tmp_path / 'missing_dir' / 'x.db'}"
    app = create_app(settings)
    with pytest.raises(OperationalError):
        async with app.router.lifespan_context(app):
            pass
