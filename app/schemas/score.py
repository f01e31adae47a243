"""
Pydantic schemas for lesson score computation
"""
from pydantic import BaseModel, ConfigDict, Field
from uuid import UUID


class ComputeScoreRequest(BaseModel):
    """Request schema for lesson score computation"""
    model_config = ConfigDict(populate_by_name=True)
    
    section_id: UUID = Field(..., alias="sectionId", description="Any section of the lesson")


class LessonScoreSummary(BaseModel):
    """Aggregated lesson score"""
    lesson_id: UUID
    score: int
    status: str
