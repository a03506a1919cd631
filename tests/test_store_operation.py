import asyncio

import pytest
from sqlalchemy.exc import OperationalError

from resume_learning.core.errors import NotFoundError, StoreError
from resume_learning.services.base import StoreService, store_operation


class FlakyStore(StoreService):

    @store_operation("Failed to sleep")
    async def slow(self):
        await asyncio.sleep(1)

    @store_operation("Failed to query")
    async def broken(self):
        raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    @store_operation("Failed to find")
    async def missing(self):
        raise NotFoundError("Chapter not found")

    @store_operation("Failed to add")
    async def ok(self, a, b=0):
        return a + b


async def test_timeout_becomes_store_error(db):
    with pytest.raises(StoreError) as exc:
        await FlakyStore(db, timeout=0.01).slow()
    assert exc.value.message == "Failed to sleep"
    assert exc.value.status_code == 500
    assert isinstance(exc.value.__cause__, asyncio.TimeoutError)


async def test_store_failure_becomes_store_error(db):
    with pytest.raises(StoreError) as exc:
        await FlakyStore(db).broken()
    assert exc.value.message == "Failed to query"
    assert isinstance(exc.value.__cause__, OperationalError)


async def test_application_errors_pass_through(db):
    with pytest.raises(NotFoundError):
        await FlakyStore(db).missing()


async def test_result_is_returned(db):
    assert await FlakyStore(db).ok(2, b=3) == 5
