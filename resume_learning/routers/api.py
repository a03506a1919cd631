"""API routes: health and the chapter catalog."""
from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends

from resume_learning.routers.deps import get_catalog
from resume_learning.schemas.chapter import ChapterListResponse, ChapterResponse
from resume_learning.schemas.common import HealthData, HealthResponse
from resume_learning.services.catalog import ChapterCatalog

router = APIRouter(prefix="/api", tags=["api"])


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        message="Server is running",
        data=HealthData(status="healthy", time=datetime.now(timezone.utc)),
    )


@router.get("/chapters", response_model=ChapterListResponse)
async def list_chapters(catalog: Annotated[ChapterCatalog, Depends(get_catalog)]):
    """All chapters in display order."""
    chapters = await catalog.list_chapters()
    return ChapterListResponse(message="Chapters fetched successfully", data=chapters)


@router.get("/chapters/{chapter_id}", response_model=ChapterResponse)
async def get_chapter(
    chapter_id: str,
    catalog: Annotated[ChapterCatalog, Depends(get_catalog)],
):
    chapter = await catalog.get_chapter(chapter_id)
    return ChapterResponse(message="Chapter fetched successfully", data=chapter)
