"""
QuestionAttempt model - one answered question within a submission
"""
from sqlalchemy import Column, String, Boolean, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from app.database import Base
import uuid


class QuestionAttempt(Base):
    """
    Question attempts table - written in the same transaction as its submission
    """
    __tablename__ = "question_attempts"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    submission_id = Column(Uuid, ForeignKey("quiz_submissions.id"), nullable=False, index=True)
    quiz_id = Column(Uuid, ForeignKey("quizzes.id"), nullable=False)
    selected_option = Column(String(64))
    is_correct = Column(Boolean, nullable=False, default=False)
    
    submission = relationship("QuizSubmission", back_populates="attempts")
    
    def __repr__(self):
        return f"<QuestionAttempt(submission_id={self.submission_id}, quiz_id={self.quiz_id}, correct={self.is_correct})>"
