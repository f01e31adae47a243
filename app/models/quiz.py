"""
Quiz model - one multiple-choice question within a section
"""
from sqlalchemy import Column, String, Integer, Text, JSON, ForeignKey, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from app.database import Base
import uuid


class Quiz(Base):
    """
    Quizzes table - read-only input to grading
    """
    __tablename__ = "quizzes"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    section_id = Column(Uuid, ForeignKey("lesson_sections.id"), nullable=False, index=True)
    order_index = Column(Integer, nullable=False, default=0)
    question = Column(Text)
    options = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False)  # {"a": "...", "b": "..."}
    correct_answer = Column(String(64), nullable=False)  # option key
    
    def __repr__(self):
        return f"<Quiz(id={self.id}, section_id={self.section_id}, order={self.order_index})>"
