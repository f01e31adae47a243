"""
Quiz submission API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from uuid import UUID
import logging

from app.database import get_db
from app.dependencies import get_current_user_id
from app.errors import NotFound, InvalidState, StoreFailure
from app.schemas.submission import (
    QuizSubmissionRequest,
    SubmissionSummary,
    SubmissionRecord,
    SubmissionListResponse,
)
from app.services.grading_service import grading_service


router = APIRouter(prefix="/quiz_submission", tags=["quiz submissions"])
logger = logging.getLogger(__name__)


@router.post("/submit_quiz", response_model=SubmissionSummary, status_code=201)
def submit_quiz(
    submission: QuizSubmissionRequest,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Submit and grade a section's quiz

    - Scores against every quiz in the section (unanswered = wrong)
    - Ignores answers for quizzes outside the section
    - Passed at 50% or more
    - Stores the submission and one attempt per answered question
    """

    logger.info(
        f"Grading section {submission.section_id} for user {user_id} "
        f"(attempt {submission.attempt_number})"
    )

    try:
        summary = grading_service.submit_quiz(
            db,
            user_id=user_id,
            section_id=submission.section_id,
            attempt_number=submission.attempt_number,
            duration_seconds=submission.duration_seconds,
            answers=[answer.model_dump() for answer in submission.answers],
        )
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    except InvalidState as e:
        raise HTTPException(status_code=400, detail=e.message)
    except StoreFailure:
        raise HTTPException(status_code=500, detail="Database error")

    return SubmissionSummary(**summary)


@router.get("/", response_model=SubmissionListResponse)
def get_user_submissions(
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """Get the current learner's submissions, newest first"""

    try:
        submissions = grading_service.list_user_submissions(db, user_id)
    except StoreFailure:
        raise HTTPException(status_code=500, detail="Database error")

    return SubmissionListResponse(
        count=len(submissions),
        submissions=[SubmissionRecord.model_validate(s) for s in submissions],
    )
