import pytest

from resume_learning.core.errors import NotFoundError
from resume_learning.services.catalog import ChapterCatalog
from resume_learning.services.seeding import SEED_CHAPTERS, seed_chapters


def _entry(chapter_id: str, order: int, questions: int = 2) -> dict:
    return {
        "chapter_id": chapter_id,
        "title": chapter_id.title(),
        "description": "",
        "video_url": f"http://example.test/{chapter_id}.mp4",
        "duration": 60,
        "order": order,
        "questions": [
            {"id": f"{chapter_id}_q{i}", "question_text": f"Q{i}?", "options": ["a", "b"], "correct_answer": 0}
            for i in range(questions)
        ],
    }


async def test_seed_is_a_noop_once_catalog_has_chapters(db):
    assert await seed_chapters(db) == len(SEED_CHAPTERS)
    assert await seed_chapters(db) == 0

    chapters = await ChapterCatalog(db).list_chapters()
    assert [c.chapter_id for c in chapters] == ["chapter_1", "chapter_2", "chapter_3"]


async def test_seeded_chapters_have_five_questions(seeded_db):
    for chapter in await ChapterCatalog(seeded_db).list_chapters():
        assert len(chapter.quiz.questions) == 5


async def test_list_is_sorted_by_order_not_insertion(db):
    await seed_chapters(db, [_entry("late", 3), _entry("early", 1), _entry("middle", 2)])

    chapters = await ChapterCatalog(db).list_chapters()
    assert [c.order for c in chapters] == [1, 2, 3]
    assert [c.chapter_id for c in chapters] == ["early", "middle", "late"]


async def test_get_chapter_serializes_camel_case(seeded_db):
    chapter = await ChapterCatalog(seeded_db).get_chapter("chapter_2")

    assert chapter.title == "Data Structures Basics"
    assert chapter.duration == 653
    wire = chapter.model_dump(by_alias=True)
    assert wire["chapterId"] == "chapter_2"
    assert wire["videoUrl"].endswith("ElephantsDream.mp4")
    assert wire["quiz"]["questions"][1]["questionText"].startswith("What is the time complexity")
    assert wire["quiz"]["questions"][1]["correctAnswer"] == 2


async def test_get_missing_chapter_raises_not_found(seeded_db):
    with pytest.raises(NotFoundError) as exc:
        await ChapterCatalog(seeded_db).get_chapter("chapter_99")
    assert exc.value.message == "Chapter not found"


async def test_question_count(db):
    await seed_chapters(db, [_entry("short", 1, questions=3)])
    catalog = ChapterCatalog(db)

    assert await catalog.question_count("short") == 3
    assert await catalog.question_count("missing") is None
