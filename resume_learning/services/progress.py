"""Progress synchronization: partial video / quiz updates merged into one record per (user, chapter).

Both update paths are single upserts keyed on (user_id, chapter_id), so either one
can create the record. Quiz answers are stored one row per slot; recording an
answer touches only that slot and never rewrites the whole sequence.
"""
import logging
from collections import defaultdict
from datetime import datetime, timezone

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from resume_learning.core.config import DEFAULT_QUIZ_LENGTH, DEFAULT_STORE_TIMEOUT
from resume_learning.core.errors import NotFoundError, StoreError, ValidationError
from resume_learning.models.progress import Progress, QuizAnswer
from resume_learning.schemas.progress import ContinueOut, ProgressOut, UpsertCounts
from resume_learning.services.base import StoreService, store_operation
from resume_learning.services.catalog import ChapterCatalog
from resume_learning.services.summary import pick_continue

logger = logging.getLogger(__name__)

UNANSWERED = -1

PROGRESS_KEY = ["user_id", "chapter_id"]
ANSWER_KEY = ["user_id", "chapter_id", "question_index"]

# Dialect-specific INSERT constructs that support ON CONFLICT
_UPSERT_INSERTS = {
    "sqlite": sqlite_insert,
    "postgresql": pg_insert,
}


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _require_keys(user_id: str, chapter_id: str) -> None:
    if not (user_id or "").strip() or not (chapter_id or "").strip():
        raise ValidationError("User ID and Chapter ID are required")


def _counts(inserted: bool) -> UpsertCounts:
    if inserted:
        return UpsertCounts(matched=0, modified=0, upserted=1)
    return UpsertCounts(matched=1, modified=1, upserted=0)


def _to_progress_out(progress: Progress, answered: dict[int, int]) -> ProgressOut:
    answers = [answered.get(i, UNANSWERED) for i in range(progress.quiz_answer_slots or 0)]
    return ProgressOut(
        id=progress.id,
        user_id=progress.user_id,
        chapter_id=progress.chapter_id,
        video_progress=progress.video_progress,
        video_completed=progress.video_completed,
        quiz_progress=progress.quiz_progress,
        quiz_answers=answers,
        quiz_completed=progress.quiz_completed,
        chapter_completed=progress.chapter_completed,
        last_accessed_at=progress.last_accessed_at,
        updated_at=progress.updated_at,
    )


class ProgressService(StoreService):

    def __init__(
        self,
        db: AsyncSession,
        timeout: float = DEFAULT_STORE_TIMEOUT,
        default_quiz_length: int = DEFAULT_QUIZ_LENGTH,
    ):
        super().__init__(db, timeout)
        self.catalog = ChapterCatalog(db, timeout)
        self.default_quiz_length = default_quiz_length

    def _insert(self, model):
        dialect = self.db.get_bind().dialect.name
        try:
            return _UPSERT_INSERTS[dialect](model)
        except KeyError:
            raise StoreError(f"Upsert not supported on {dialect}") from None

    @store_operation("Failed to update progress")
    async def update_video(
        self, user_id: str, chapter_id: str, position_seconds: int, completed: bool
    ) -> UpsertCounts:
        """Record the video resume position.

        Never touches chapter_completed on an existing record; only the quiz path sets it.
        """
        _require_keys(user_id, chapter_id)
        position = max(0, position_seconds)
        now = _now()

        progress = Progress.__table__
        stmt = self._insert(Progress).values(
            user_id=user_id,
            chapter_id=chapter_id,
            video_progress=position,
            video_completed=completed,
            quiz_progress=0,
            quiz_answer_slots=0,
            quiz_completed=False,
            chapter_completed=False,
            write_count=1,
            created_at=now,
            last_accessed_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=PROGRESS_KEY,
            set_={
                "video_progress": stmt.excluded.video_progress,
                "video_completed": stmt.excluded.video_completed,
                "write_count": progress.c.write_count + 1,
                "last_accessed_at": stmt.excluded.last_accessed_at,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(Progress.write_count)

        row = (await self.db.execute(stmt)).one()
        await self.db.commit()

        logger.info(
            "Video progress updated: user=%s, chapter=%s, progress=%d, completed=%s",
            user_id, chapter_id, position, completed,
        )
        return _counts(inserted=row.write_count == 1)

    @store_operation("Failed to update progress")
    async def update_quiz(
        self, user_id: str, chapter_id: str, question_index: int, answer: int, completed: bool
    ) -> UpsertCounts:
        """Record one quiz answer and the quiz resume position.

        chapter_completed becomes the stored video_completed AND the incoming completed flag.
        """
        _require_keys(user_id, chapter_id)

        slots = await self.catalog.question_count(chapter_id)
        if slots is None:
            slots = self.default_quiz_length
        now = _now()

        progress = Progress.__table__
        stmt = self._insert(Progress).values(
            user_id=user_id,
            chapter_id=chapter_id,
            video_progress=0,
            video_completed=False,
            quiz_progress=question_index,
            quiz_answer_slots=slots,
            quiz_completed=completed,
            chapter_completed=False,
            write_count=1,
            created_at=now,
            last_accessed_at=now,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=PROGRESS_KEY,
            set_={
                "quiz_progress": stmt.excluded.quiz_progress,
                "quiz_answer_slots": stmt.excluded.quiz_answer_slots,
                "quiz_completed": stmt.excluded.quiz_completed,
                "write_count": progress.c.write_count + 1,
                # evaluated against the row as stored before this write
                "chapter_completed": progress.c.video_completed if completed else False,
                "last_accessed_at": stmt.excluded.last_accessed_at,
                "updated_at": stmt.excluded.updated_at,
            },
        ).returning(Progress.write_count)
        row = (await self.db.execute(stmt)).one()

        # out-of-range indices move quiz_progress but record no answer
        if 0 <= question_index < slots:
            answer_stmt = self._insert(QuizAnswer).values(
                user_id=user_id,
                chapter_id=chapter_id,
                question_index=question_index,
                answer=answer,
                answered_at=now,
            )
            answer_stmt = answer_stmt.on_conflict_do_update(
                index_elements=ANSWER_KEY,
                set_={
                    "answer": answer_stmt.excluded.answer,
                    "answered_at": answer_stmt.excluded.answered_at,
                },
            )
            await self.db.execute(answer_stmt)

        await self.db.commit()

        logger.info(
            "Quiz progress updated: user=%s, chapter=%s, question=%d, completed=%s",
            user_id, chapter_id, question_index, completed,
        )
        return _counts(inserted=row.write_count == 1)

    @store_operation("Database error")
    async def get_progress(self, user_id: str, chapter_id: str) -> ProgressOut:
        """Stored progress, or a zero-value record if nothing was ever written."""
        result = await self.db.execute(
            select(Progress)
            .where(Progress.user_id == user_id, Progress.chapter_id == chapter_id)
            .execution_options(populate_existing=True)
        )
        progress = result.scalar_one_or_none()
        if progress is None:
            now = _now()
            return ProgressOut(user_id=user_id, chapter_id=chapter_id, last_accessed_at=now, updated_at=now)

        answers = await self._answers(user_id, chapter_id)
        return _to_progress_out(progress, answers[chapter_id])

    @store_operation("Failed to fetch progress")
    async def get_all_progress(self, user_id: str) -> list[ProgressOut]:
        result = await self.db.execute(
            select(Progress)
            .where(Progress.user_id == user_id)
            .order_by(Progress.id.asc())
            .execution_options(populate_existing=True)
        )
        records = result.scalars().all()
        if not records:
            return []

        answers = await self._answers(user_id)
        return [_to_progress_out(p, answers[p.chapter_id]) for p in records]

    @store_operation("Failed to reset progress")
    async def reset(self, user_id: str) -> int:
        """Delete every progress record (and answer slot) for the user. Returns records deleted."""
        await self.db.execute(
            delete(QuizAnswer)
            .where(QuizAnswer.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(
            delete(Progress)
            .where(Progress.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        await self.db.commit()

        deleted = result.rowcount or 0
        logger.info("Progress reset for user: %s (deleted %d records)", user_id, deleted)
        return deleted

    async def continue_chapter(self, user_id: str) -> ContinueOut | None:
        """The chapter to resume: most recently accessed, not yet completed."""
        current = pick_continue(await self.get_all_progress(user_id))
        if current is None:
            return None
        try:
            chapter = await self.catalog.get_chapter(current.chapter_id)
        except NotFoundError:
            chapter = None
        return ContinueOut(chapter=chapter, progress=current)

    async def _answers(self, user_id: str, chapter_id: str | None = None) -> dict[str, dict[int, int]]:
        """Answered slots grouped by chapter: {chapter_id: {question_index: answer}}."""
        stmt = select(QuizAnswer.chapter_id, QuizAnswer.question_index, QuizAnswer.answer).where(
            QuizAnswer.user_id == user_id
        )
        if chapter_id is not None:
            stmt = stmt.where(QuizAnswer.chapter_id == chapter_id)

        by_chapter: dict[str, dict[int, int]] = defaultdict(dict)
        for chapter, index, answer in (await self.db.execute(stmt)).all():
            by_chapter[chapter][index] = answer
        return by_chapter
