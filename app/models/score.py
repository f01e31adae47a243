"""
Score model - aggregated per-lesson score for a learner
"""
from sqlalchemy import Column, String, Integer, TIMESTAMP, ForeignKey, UniqueConstraint, Uuid, func
from app.database import Base
import uuid


class Score(Base):
    """
    Scores table - at most one row per (user_id, lesson_id), updated in place
    """
    __tablename__ = "scores"
    __table_args__ = (
        UniqueConstraint("user_id", "lesson_id", name="uq_scores_user_lesson"),
    )
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    lesson_id = Column(Uuid, ForeignKey("lessons.id"), nullable=False)
    score = Column(Integer, nullable=False)  # 0 to 100
    status = Column(String(10), nullable=False)
    updated_at = Column(TIMESTAMP, server_default=func.now(), onupdate=func.now())
    
    def __repr__(self):
        return f"<Score(user_id={self.user_id}, lesson_id={self.lesson_id}, score={self.score})>"
