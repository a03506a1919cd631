"""Chapter model: video + embedded quiz (JSON). Seeded once, read-only afterwards."""
from sqlalchemy import Column, Integer, String, Text

from resume_learning.db.session import Base

# Quiz is stored as a JSON string so the same schema works on SQLite and PostgreSQL


class Chapter(Base):
    __tablename__ = "chapters"

    id = Column(Integer, primary_key=True, autoincrement=True)
    chapter_id = Column(String(128), unique=True, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    video_url = Column(String(1024), nullable=False)
    duration = Column(Integer, nullable=False, default=0)  # seconds
    order = Column(Integer, nullable=False, index=True)
    # quiz_json: JSON array of {id, question_text, options, correct_answer}
    quiz_json = Column(Text, nullable=False, default="[]")
