"""Pydantic schemas for chapters and their quizzes."""
from resume_learning.schemas.common import CamelModel, Envelope


class QuestionSchema(CamelModel):
    id: str
    question_text: str
    options: list[str]
    correct_answer: int  # index into options


class QuizSchema(CamelModel):
    questions: list[QuestionSchema] = []


class ChapterOut(CamelModel):
    id: int
    chapter_id: str
    title: str
    description: str
    video_url: str
    duration: int  # seconds
    order: int
    quiz: QuizSchema


class ChapterResponse(Envelope):
    data: ChapterOut


class ChapterListResponse(Envelope):
    data: list[ChapterOut]
