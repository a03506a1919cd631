from datetime import datetime, timedelta, timezone

import pytest

from resume_learning.core.errors import ValidationError
from resume_learning.services.progress import ProgressService
from resume_learning.services.seeding import seed_chapters


@pytest.fixture
def service(seeded_db):
    return ProgressService(seeded_db)


async def test_video_update_is_read_back(service):
    await service.update_video("u1", "chapter_1", 120, False)

    progress = await service.get_progress("u1", "chapter_1")
    assert progress.id is not None
    assert progress.video_progress == 120
    assert progress.video_completed is False
    # insert-only defaults
    assert progress.quiz_progress == 0
    assert progress.quiz_answers == []
    assert progress.quiz_completed is False
    assert progress.chapter_completed is False


async def test_video_update_overwrites_position(service):
    await service.update_video("u1", "chapter_1", 120, False)
    await service.get_progress("u1", "chapter_1")
    await service.update_video("u1", "chapter_1", 596, True)

    progress = await service.get_progress("u1", "chapter_1")
    assert progress.video_progress == 596
    assert progress.video_completed is True


async def test_negative_video_position_is_clamped(service):
    await service.update_video("u1", "chapter_1", -50, False)

    progress = await service.get_progress("u1", "chapter_1")
    assert progress.video_progress == 0


async def test_upsert_counts_distinguish_insert_from_update(service):
    first = await service.update_video("u1", "chapter_1", 10, False)
    second = await service.update_video("u1", "chapter_1", 20, False)
    quiz = await service.update_quiz("u1", "chapter_1", 0, 1, False)
    fresh_quiz = await service.update_quiz("u1", "chapter_2", 0, 1, False)

    assert (first.matched, first.modified, first.upserted) == (0, 0, 1)
    assert (second.matched, second.modified, second.upserted) == (1, 1, 0)
    assert quiz.upserted == 0 and quiz.matched == 1
    assert fresh_quiz.upserted == 1


@pytest.mark.parametrize("user_id,chapter_id", [("", "chapter_1"), ("u1", ""), ("  ", "chapter_1")])
async def test_updates_require_both_identifiers(service, user_id, chapter_id):
    with pytest.raises(ValidationError) as exc:
        await service.update_video(user_id, chapter_id, 10, False)
    assert exc.value.message == "User ID and Chapter ID are required"

    with pytest.raises(ValidationError):
        await service.update_quiz(user_id, chapter_id, 0, 1, False)


async def test_first_quiz_answer_initialises_unanswered_slots(service):
    await service.update_quiz("u1", "chapter_1", 2, 1, False)

    progress = await service.get_progress("u1", "chapter_1")
    assert progress.quiz_answers == [-1, -1, 1, -1, -1]
    assert progress.quiz_progress == 2
    assert progress.video_progress == 0
    assert progress.video_completed is False


async def test_answers_accumulate_and_can_be_changed(service):
    await service.update_quiz("u1", "chapter_1", 0, 3, False)
    await service.update_quiz("u1", "chapter_1", 1, 2, False)
    await service.update_quiz("u1", "chapter_1", 0, 0, False)

    progress = await service.get_progress("u1", "chapter_1")
    assert progress.quiz_answers == [0, 2, -1, -1, -1]
    assert progress.quiz_progress == 0


async def test_quiz_after_video_insert_still_records_answers(service):
    await service.update_video("u1", "chapter_1", 30, False)
    await service.update_quiz("u1", "chapter_1", 4, 2, False)

    progress = await service.get_progress("u1", "chapter_1")
    assert progress.quiz_answers == [-1, -1, -1, -1, 2]
    assert progress.video_progress == 30


async def test_out_of_range_question_index_is_ignored(service):
    await service.update_quiz("u1", "chapter_1", 1, 2, False)
    await service.update_quiz("u1", "chapter_1", 7, 3, False)
    await service.update_quiz("u1", "chapter_1", -1, 3, False)

    progress = await service.get_progress("u1", "chapter_1")
    assert progress.quiz_answers == [-1, 2, -1, -1, -1]
    # position still follows the submitted index
    assert progress.quiz_progress == -1


async def test_answers_length_follows_chapter_question_count(db):
    await seed_chapters(db, [{
        "chapter_id": "short",
        "title": "Short",
        "description": "",
        "video_url": "http://example.test/short.mp4",
        "duration": 30,
        "order": 1,
        "questions": [
            {"id": f"s{i}", "question_text": "?", "options": ["a", "b"], "correct_answer": 0}
            for i in range(3)
        ],
    }])
    service = ProgressService(db)

    await service.update_quiz("u1", "short", 1, 1, False)
    await service.update_quiz("u1", "short", 4, 1, False)

    progress = await service.get_progress("u1", "short")
    assert progress.quiz_answers == [-1, 1, -1]


async def test_unknown_chapter_uses_default_quiz_length(seeded_db):
    service = ProgressService(seeded_db, default_quiz_length=4)
    await service.update_quiz("u1", "not_in_catalog", 3, 1, False)

    progress = await service.get_progress("u1", "not_in_catalog")
    assert progress.quiz_answers == [-1, -1, -1, 1]


async def test_chapter_completes_when_video_done_before_quiz(service):
    await service.update_video("u1", "chapter_1", 596, True)
    await service.update_quiz("u1", "chapter_1", 4, 1, True)

    progress = await service.get_progress("u1", "chapter_1")
    assert progress.video_completed is True
    assert progress.quiz_completed is True
    assert progress.chapter_completed is True


async def test_chapter_stays_incomplete_when_video_finished_after_quiz(service):
    await service.update_quiz("u1", "chapter_1", 4, 1, True)
    await service.update_video("u1", "chapter_1", 596, True)

    progress = await service.get_progress("u1", "chapter_1")
    assert progress.video_completed is True
    assert progress.quiz_completed is True
    assert progress.chapter_completed is False


async def test_incomplete_quiz_clears_chapter_completed(service):
    await service.update_video("u1", "chapter_1", 596, True)
    await service.update_quiz("u1", "chapter_1", 4, 1, True)
    await service.update_quiz("u1", "chapter_1", 2, 0, False)

    progress = await service.get_progress("u1", "chapter_1")
    assert progress.chapter_completed is False


async def test_missing_progress_is_a_zero_value_record(service):
    progress = await service.get_progress("nobody", "chapter_1")

    assert progress.id is None
    assert progress.user_id == "nobody"
    assert progress.chapter_id == "chapter_1"
    assert progress.video_progress == 0
    assert progress.quiz_progress == 0
    assert progress.quiz_answers == []
    assert not (progress.video_completed or progress.quiz_completed or progress.chapter_completed)
    assert progress.last_accessed_at is not None


async def test_all_progress_is_scoped_to_user(service):
    assert await service.get_all_progress("u1") == []

    await service.update_video("u1", "chapter_1", 10, False)
    await service.update_quiz("u1", "chapter_2", 1, 3, False)
    await service.update_video("u2", "chapter_1", 99, False)

    records = {p.chapter_id: p for p in await service.get_all_progress("u1")}
    assert set(records) == {"chapter_1", "chapter_2"}
    assert records["chapter_1"].video_progress == 10
    assert records["chapter_2"].quiz_answers == [-1, 3, -1, -1, -1]


async def test_reset_deletes_all_progress_for_user(service):
    await service.update_video("u1", "chapter_1", 10, False)
    await service.update_quiz("u1", "chapter_2", 1, 3, False)
    await service.update_video("u2", "chapter_1", 99, False)

    assert await service.reset("u1") == 2
    assert await service.get_all_progress("u1") == []
    assert len(await service.get_all_progress("u2")) == 1

    # answers do not leak into a fresh record
    await service.update_quiz("u1", "chapter_2", 0, 1, False)
    progress = await service.get_progress("u1", "chapter_2")
    assert progress.quiz_answers == [1, -1, -1, -1, -1]


async def test_reset_without_progress_deletes_nothing(service):
    assert await service.reset("ghost") == 0


async def test_answers_from_separate_sessions_do_not_overwrite_each_other(seeded_db, sessionmaker):
    async with sessionmaker() as first, sessionmaker() as second:
        await ProgressService(first).update_quiz("u1", "chapter_1", 0, 2, False)
        await ProgressService(second).update_quiz("u1", "chapter_1", 3, 1, False)

    progress = await ProgressService(seeded_db).get_progress("u1", "chapter_1")
    assert progress.quiz_answers == [2, -1, -1, 1, -1]


async def test_continue_picks_latest_unfinished_chapter(service):
    assert await service.continue_chapter("u1") is None

    await service.update_video("u1", "chapter_1", 10, False)
    await service.update_video("u1", "chapter_2", 20, False)

    current = await service.continue_chapter("u1")
    assert current.progress.chapter_id == "chapter_2"
    assert current.chapter.title == "Data Structures Basics"

    await service.update_video("u1", "chapter_2", 653, True)
    await service.update_quiz("u1", "chapter_2", 4, 1, True)

    current = await service.continue_chapter("u1")
    assert current.progress.chapter_id == "chapter_1"


async def test_continue_with_chapter_missing_from_catalog(service):
    await service.update_video("u1", "retired_chapter", 10, False)

    current = await service.continue_chapter("u1")
    assert current.chapter is None
    assert current.progress.chapter_id == "retired_chapter"


async def test_writes_within_one_clock_tick_still_count_as_updates(service, monkeypatch):
    frozen = datetime(2026, 1, 1, tzinfo=timezone.utc)
    monkeypatch.setattr("resume_learning.services.progress._now", lambda: frozen)

    first = await service.update_video("u1", "chapter_1", 10, False)
    second = await service.update_video("u1", "chapter_1", 20, False)
    quiz = await service.update_quiz("u1", "chapter_1", 0, 1, False)

    assert first.upserted == 1
    assert (second.matched, second.modified, second.upserted) == (1, 1, 0)
    assert (quiz.matched, quiz.modified, quiz.upserted) == (1, 1, 0)


async def test_timestamps_are_utc_for_stored_and_missing_records(service):
    await service.update_video("u1", "chapter_1", 10, False)

    stored = await service.get_progress("u1", "chapter_1")
    missing = await service.get_progress("u1", "chapter_2")

    for progress in (stored, missing):
        assert progress.last_accessed_at.utcoffset() == timedelta(0)
        assert progress.updated_at.utcoffset() == timedelta(0)
