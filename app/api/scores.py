"""
Lesson score API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from uuid import UUID
import logging

from app.database import get_db
from app.dependencies import get_current_user_id
from app.errors import NotFound, InvalidState, StoreFailure
from app.schemas.score import ComputeScoreRequest, LessonScoreSummary
from app.services.scoring_service import scoring_service

router = APIRouter(prefix="/scores", tags=["scores"])
logger = logging.getLogger(__name__)


@router.post("/compute_score", response_model=LessonScoreSummary)
def compute_score(
    request: ComputeScoreRequest,
    user_id: UUID = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    """
    Compute the learner's score for the lesson owning a section

    Returns:
    - Lesson id
    - Average of the best score per section, rounded
    - passed / failed
    """

    try:
        result = scoring_service.compute_lesson_score(db, user_id, request.section_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    except InvalidState as e:
        raise HTTPException(status_code=400, detail=e.message)
    except StoreFailure:
        raise HTTPException(status_code=500, detail="Database error")

    return LessonScoreSummary(**result)
