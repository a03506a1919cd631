"""SQLAlchemy declarative base and model imports for Alembic."""
from resume_learning.db.session import Base

# Import all models so Alembic can see them
from resume_learning.models.chapter import Chapter  # noqa: F401
from resume_learning.models.progress import Progress, QuizAnswer  # noqa: F401
from resume_learning.models.user import User  # noqa: F401

__all__ = ["Base", "User", "Chapter", "Progress", "QuizAnswer"]
