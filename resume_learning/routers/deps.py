"""Per-request service construction. Services get the request's session and the app's settings."""
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from resume_learning.core.config import Settings
from resume_learning.db.session import get_db
from resume_learning.services.catalog import ChapterCatalog
from resume_learning.services.identity import IdentityService
from resume_learning.services.progress import ProgressService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


DbSession = Annotated[AsyncSession, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_app_settings)]


def get_identity_service(db: DbSession, settings: AppSettings) -> IdentityService:
    return IdentityService(db, timeout=settings.store_timeout_seconds)


def get_catalog(db: DbSession, settings: AppSettings) -> ChapterCatalog:
    return ChapterCatalog(db, timeout=settings.store_timeout_seconds)


def get_progress_service(db: DbSession, settings: AppSettings) -> ProgressService:
    return ProgressService(
        db,
        timeout=settings.store_timeout_seconds,
        default_quiz_length=settings.default_quiz_length,
    )
