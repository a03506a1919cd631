from resume_learning.models.user import User
from resume_learning.models.chapter import Chapter
from resume_learning.models.progress import Progress, QuizAnswer

__all__ = ["User", "Chapter", "Progress", "QuizAnswer"]
