"""
QuizSubmission model - one graded attempt at a section's quiz bank
"""
from sqlalchemy import Column, String, Integer, TIMESTAMP, ForeignKey, Uuid, func
from sqlalchemy.orm import relationship
from app.database import Base
import uuid


class QuizSubmission(Base):
    """
    Quiz submissions table - insert-only, never mutated after grading
    """
    __tablename__ = "quiz_submissions"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, nullable=False, index=True)
    section_id = Column(Uuid, ForeignKey("lesson_sections.id"), nullable=False, index=True)
    total_questions = Column(Integer, nullable=False)
    correct_count = Column(Integer, nullable=False)
    score = Column(Integer, nullable=False)  # 0 to 100
    status = Column(String(10), nullable=False)  # passed / failed
    attempt_number = Column(Integer, nullable=False)  # caller supplied, not unique
    duration_seconds = Column(Integer)
    created_at = Column(TIMESTAMP, server_default=func.now())
    
    attempts = relationship("QuestionAttempt", back_populates="submission")
    
    def __repr__(self):
        return f"<QuizSubmission(user_id={self.user_id}, section_id={self.section_id}, score={self.score})>"
