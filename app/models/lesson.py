"""
Lesson model - parent of one or more sections
"""
from sqlalchemy import Column, String, TIMESTAMP, Uuid, func
from app.database import Base
import uuid


class Lesson(Base):
    """
    Lessons table - scopes lesson score aggregation
    """
    __tablename__ = "lessons"
    
    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    title = Column(String(255))
    created_at = Column(TIMESTAMP, server_default=func.now())
    
    def __repr__(self):
        return f"<Lesson(id={self.id}, title={self.title})>"
