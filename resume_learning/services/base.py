"""Shared plumbing for services that talk to the record store."""
import asyncio
import functools
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from resume_learning.core.config import DEFAULT_STORE_TIMEOUT
from resume_learning.core.errors import StoreError

logger = logging.getLogger(__name__)

def store_operation(message: str):
    """Bound a service coroutine by the store timeout and map store failures to StoreError(message).

    Application errors (validation, not-found) raised inside pass through untouched.
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(self, *args, **kwargs):
            try:
                return await asyncio.wait_for(func(self, *args, **kwargs), timeout=self.timeout)
            except asyncio.TimeoutError as exc:
                logger.error("%s: timed out after %.1fs", message, self.timeout)
                raise StoreError(message) from exc
            except SQLAlchemyError as exc:
                logger.error("%s: %s", message, exc)
                raise StoreError(message) from exc

        return wrapper

    return decorator


class StoreService:
    """Holds the per-request session and the store timeout."""

    def __init__(self, db: AsyncSession, timeout: float = DEFAULT_STORE_TIMEOUT):
        self.db = db
        self.timeout = timeout
