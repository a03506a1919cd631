"""Progress routes: resume positions for video and quiz, per user and chapter."""
from typing import Annotated

from fastapi import APIRouter, Depends

from resume_learning.routers.deps import get_progress_service
from resume_learning.schemas.progress import (
    ContinueResponse,
    ProgressListResponse,
    ProgressResponse,
    QuizProgressRequest,
    ResetResponse,
    ResetResult,
    UpsertResponse,
    VideoProgressRequest,
)
from resume_learning.services.progress import ProgressService

router = APIRouter(prefix="/api", tags=["progress"])

ProgressDep = Annotated[ProgressService, Depends(get_progress_service)]


@router.post("/progress/video", response_model=UpsertResponse)
async def update_video_progress(body: VideoProgressRequest, service: ProgressDep):
    counts = await service.update_video(body.user_id, body.chapter_id, body.progress, body.completed)
    return UpsertResponse(message="Video progress updated successfully", data=counts)


@router.post("/progress/quiz", response_model=UpsertResponse)
async def update_quiz_progress(body: QuizProgressRequest, service: ProgressDep):
    counts = await service.update_quiz(
        body.user_id, body.chapter_id, body.question_index, body.answer, body.completed
    )
    return UpsertResponse(message="Quiz progress updated successfully", data=counts)


@router.get("/progress/{user_id}", response_model=ProgressListResponse)
async def get_user_progress(user_id: str, service: ProgressDep):
    """Every stored record for the user; empty list when there is none."""
    return ProgressListResponse(progress=await service.get_all_progress(user_id))


@router.get("/progress/{user_id}/{chapter_id}", response_model=ProgressResponse)
async def get_chapter_progress(user_id: str, chapter_id: str, service: ProgressDep):
    progress = await service.get_progress(user_id, chapter_id)
    return ProgressResponse(message="Progress fetched successfully", data=progress)


@router.delete("/progress/{user_id}/reset", response_model=ResetResponse)
async def reset_progress(user_id: str, service: ProgressDep):
    deleted = await service.reset(user_id)
    return ResetResponse(
        message=f"Progress reset successfully. Deleted {deleted} records",
        data=ResetResult(deleted=deleted),
    )


@router.get("/users/{user_id}/continue", response_model=ContinueResponse)
async def continue_learning(user_id: str, service: ProgressDep):
    """Chapter to resume for the "Continue" card, or null data when nothing is in progress."""
    current = await service.continue_chapter(user_id)
    message = "Nothing to continue" if current is None else "Continue chapter fetched successfully"
    return ContinueResponse(message=message, data=current)
