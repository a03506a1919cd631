"""User model: created on first login, keyed by the externally supplied identifier."""
from sqlalchemy import Column, Integer, String, DateTime

from resume_learning.db.session import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(128), unique=True, nullable=False, index=True)  # external identifier
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)  # bumped on every login
