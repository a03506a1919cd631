"""Pydantic schemas for progress reads, updates and results."""
from pydantic import BaseModel, computed_field

from resume_learning.schemas.chapter import ChapterOut
from resume_learning.schemas.common import CamelModel, Envelope, Int32, UtcDateTime
from resume_learning.services.summary import progress_percentage, progress_status


class VideoProgressRequest(CamelModel):
    user_id: str | None = ""
    chapter_id: str | None = ""
    progress: Int32 = 0  # seconds
    completed: bool = False


class QuizProgressRequest(CamelModel):
    user_id: str | None = ""
    chapter_id: str | None = ""
    question_index: Int32 = 0
    answer: Int32 = 0
    completed: bool = False


class ProgressOut(CamelModel):
    id: int | None = None  # None for a record that was never stored
    user_id: str
    chapter_id: str
    video_progress: int = 0
    video_completed: bool = False
    quiz_progress: int = 0
    quiz_answers: list[int] = []  # -1 = unanswered
    quiz_completed: bool = False
    chapter_completed: bool = False
    last_accessed_at: UtcDateTime
    updated_at: UtcDateTime

    @computed_field
    @property
    def percentage(self) -> float:
        return progress_percentage(self.video_completed, self.quiz_completed)

    @computed_field
    @property
    def status(self) -> str:
        return progress_status(self)


class UpsertCounts(BaseModel):
    matched: int
    modified: int
    upserted: int


class ResetResult(BaseModel):
    deleted: int


class ContinueOut(CamelModel):
    chapter: ChapterOut | None
    progress: ProgressOut


class ProgressResponse(Envelope):
    data: ProgressOut


class ProgressListResponse(CamelModel):
    success: bool = True
    progress: list[ProgressOut]


class UpsertResponse(Envelope):
    data: UpsertCounts


class ResetResponse(Envelope):
    data: ResetResult


class ContinueResponse(Envelope):
    data: ContinueOut | None = None
