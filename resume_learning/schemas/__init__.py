from resume_learning.schemas.chapter import ChapterOut, QuestionSchema, QuizSchema
from resume_learning.schemas.common import Envelope, ErrorResponse
from resume_learning.schemas.progress import ProgressOut, UpsertCounts
from resume_learning.schemas.user import UserOut

__all__ = [
    "ChapterOut",
    "Envelope",
    "ErrorResponse",
    "ProgressOut",
    "QuestionSchema",
    "QuizSchema",
    "UpsertCounts",
    "UserOut",
]
