"""Progress model: one row per (user, chapter); quiz answers live one row per answered slot."""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, UniqueConstraint, Index

from resume_learning.db.session import Base


class Progress(Base):
    __tablename__ = "progress"
    __table_args__ = (
        UniqueConstraint("user_id", "chapter_id", name="uq_progress_user_chapter"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(128), nullable=False, index=True)
    chapter_id = Column(String(128), nullable=False)

    video_progress = Column(Integer, nullable=False, default=0)  # seconds watched
    video_completed = Column(Boolean, nullable=False, default=False)
    quiz_progress = Column(Integer, nullable=False, default=0)  # current / last answered question
    # Length of the answers sequence; 0 until the first quiz write
    quiz_answer_slots = Column(Integer, nullable=False, default=0)
    quiz_completed = Column(Boolean, nullable=False, default=False)
    chapter_completed = Column(Boolean, nullable=False, default=False)
    # 1 on insert, bumped by every later upsert
    write_count = Column(Integer, nullable=False, default=1)

    created_at = Column(DateTime(timezone=True), nullable=False)
    last_accessed_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)


class QuizAnswer(Base):
    __tablename__ = "quiz_answers"
    __table_args__ = (
        UniqueConstraint("user_id", "chapter_id", "question_index", name="uq_quiz_answer_slot"),
        Index("ix_quiz_answers_user_chapter", "user_id", "chapter_id"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(128), nullable=False)
    chapter_id = Column(String(128), nullable=False)
    question_index = Column(Integer, nullable=False)
    answer = Column(Integer, nullable=False)
    answered_at = Column(DateTime(timezone=True), nullable=False)
