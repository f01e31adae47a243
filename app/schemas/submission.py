"""
Pydantic schemas for quiz submission requests and responses
"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
from uuid import UUID
from datetime import datetime


class AnswerIn(BaseModel):
    """One answered question"""
    model_config = ConfigDict(populate_by_name=True)
    
    quiz_id: str = Field(..., alias="quizId", max_length=64)
    selected: str = Field(..., max_length=64, description="Selected option key")


class QuizSubmissionRequest(BaseModel):
    """Schema for submitting a section's quiz"""
    model_config = ConfigDict(populate_by_name=True)
    
    section_id: UUID = Field(..., alias="sectionId")
    attempt_number: int = Field(..., alias="attemptNumber", description="Caller-supplied attempt counter")
    duration_seconds: int = Field(0, alias="durationSeconds", ge=0)
    answers: List[AnswerIn] = Field(default_factory=list)


class SubmissionSummary(BaseModel):
    """Result of grading one submission"""
    model_config = ConfigDict(from_attributes=True)
    
    id: UUID
    section_id: UUID
    total_questions: int
    correct_count: int
    score: int
    status: str
    attempt_number: int
    duration_seconds: Optional[int] = None


class SubmissionRecord(SubmissionSummary):
    """Stored submission, as listed in a learner's history"""
    created_at: Optional[datetime] = None


class SubmissionListResponse(BaseModel):
    """All submissions of the current learner, newest first"""
    count: int
    submissions: List[SubmissionRecord]
