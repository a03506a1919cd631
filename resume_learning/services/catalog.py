"""Content catalog: read-only chapter listing and lookup."""
import json

from sqlalchemy import select

from resume_learning.core.errors import NotFoundError
from resume_learning.models.chapter import Chapter
from resume_learning.schemas.chapter import ChapterOut, QuestionSchema, QuizSchema
from resume_learning.services.base import StoreService, store_operation


def to_chapter_out(chapter: Chapter) -> ChapterOut:
    questions = [QuestionSchema(**q) for q in json.loads(chapter.quiz_json or "[]")]
    return ChapterOut(
        id=chapter.id,
        chapter_id=chapter.chapter_id,
        title=chapter.title,
        description=chapter.description,
        video_url=chapter.video_url,
        duration=chapter.duration,
        order=chapter.order,
        quiz=QuizSchema(questions=questions),
    )


class ChapterCatalog(StoreService):

    @store_operation("Failed to fetch chapters")
    async def list_chapters(self) -> list[ChapterOut]:
        """All chapters, ascending by order."""
        result = await self.db.execute(select(Chapter).order_by(Chapter.order.asc(), Chapter.id.asc()))
        return [to_chapter_out(c) for c in result.scalars().all()]

    @store_operation("Database error")
    async def get_chapter(self, chapter_id: str) -> ChapterOut:
        chapter = await self._find(chapter_id)
        if chapter is None:
            raise NotFoundError("Chapter not found")
        return to_chapter_out(chapter)

    @store_operation("Database error")
    async def question_count(self, chapter_id: str) -> int | None:
        """Number of quiz questions, or None when the chapter is not in the catalog."""
        chapter = await self._find(chapter_id)
        if chapter is None:
            return None
        return len(json.loads(chapter.quiz_json or "[]"))

    async def _find(self, chapter_id: str) -> Chapter | None:
        result = await self.db.execute(select(Chapter).where(Chapter.chapter_id == chapter_id))
        return result.scalar_one_or_none()
