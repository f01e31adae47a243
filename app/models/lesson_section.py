"""
LessonSection model - a subdivision of a lesson holding an ordered quiz bank
"""
from sqlalchemy import Column, String, Integer, ForeignKey, Uuid
from app.database import Base
import uuid


class LessonSection(Base):
    """
    Lesson sections table - grading and aggregation only need id and lesson_id
    """
    __tablename__ = "lesson_sections"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    lesson_id = Column(Uuid, ForeignKey("lessons.id"), nullable=False, index=True)
    title = Column(String(255))
    order_index = Column(Integer, default=0)
    
    def __repr__(self):
        return f"<LessonSection(id={self.id}, lesson_id={self.lesson_id})>"
