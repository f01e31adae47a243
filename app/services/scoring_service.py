"""
Lesson score aggregation service
Averages a learner's best score per section into one score per lesson
"""
import logging
from fractions import Fraction
from typing import Dict, Any, Optional
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import NotFound, InvalidState, StoreFailure
from app.models import LessonSection, QuizSubmission, Score
from app.services.grading_service import round_half_up, pass_status

logger = logging.getLogger(__name__)


class ScoringService:
    """
    Service for computing per-lesson scores

    Algorithm:
    - Best score per section of the lesson (MAX over all submissions)
    - Lesson score = unweighted mean of those bests, rounded half up
    - Sections the learner never submitted are left out of the mean
    - One Score row per (learner, lesson), updated in place
    """

    def compute_lesson_score(
        self,
        db: Session,
        user_id: UUID,
        section_id: UUID
    ) -> Dict[str, Any]:
        """
        Recompute and store a learner's lesson score

        Args:
            db: Database session
            user_id: Learner UUID
            section_id: Any section of the lesson

        Returns:
            {"lesson_id", "score", "status"}

        Raises:
            NotFound: section does not exist
            InvalidState: lesson has no sections or learner has no submissions
            StoreFailure: database error
        """
        try:
            section = db.query(LessonSection).filter(LessonSection.id == section_id).first()
            if not section:
                raise NotFound("Section not found")

            lesson_id = section.lesson_id

            section_ids = [
                row.id for row in
                db.query(LessonSection.id).filter(LessonSection.lesson_id == lesson_id).all()
            ]
            if not section_ids:
                raise InvalidState("No sections found for this lesson")

            best_scores = (
                db.query(
                    QuizSubmission.section_id,
                    func.max(QuizSubmission.score).label("best_score")
                )
                .filter(
                    QuizSubmission.user_id == user_id,
                    QuizSubmission.section_id.in_(section_ids)
                )
                .group_by(QuizSubmission.section_id)
                .all()
            )
            if not best_scores:
                raise InvalidState("No quiz submissions found for this lesson")

            total = sum(int(row.best_score) for row in best_scores)
            lesson_score = round_half_up(Fraction(total, len(best_scores)))
            status = pass_status(lesson_score)

            self._upsert_score(db, user_id, lesson_id, lesson_score, status)
            db.commit()

        except SQLAlchemyError as e:
            db.rollback()
            logger.error(
                f"Failed to compute lesson score: user={user_id}, section={section_id}: {str(e)}",
                exc_info=True
            )
            raise StoreFailure("Failed to compute lesson score") from e

        logger.info(
            f"Lesson score computed: user={user_id}, lesson={lesson_id}, "
            f"sections graded={len(best_scores)}/{len(section_ids)}, score={lesson_score} ({status})"
        )

        return {
            "lesson_id": lesson_id,
            "score": lesson_score,
            "status": status,
        }

    def _find_score(self, db: Session, user_id: UUID, lesson_id: UUID) -> Optional[Score]:
        return (
            db.query(Score)
            .filter(Score.user_id == user_id, Score.lesson_id == lesson_id)
            .first()
        )

    def _upsert_score(
        self,
        db: Session,
        user_id: UUID,
        lesson_id: UUID,
        score: int,
        status: str
    ) -> Score:
        """
        Insert or update the Score row for (user_id, lesson_id)

        The insert runs in a savepoint. If a concurrent request inserted the
        row after our lookup, the unique constraint rejects ours and the
        winner's row is updated instead.
        """
        existing = self._find_score(db, user_id, lesson_id)

        if existing is None:
            row = Score(user_id=user_id, lesson_id=lesson_id, score=score, status=status)
            try:
                with db.begin_nested():
                    db.add(row)
                return row
            except IntegrityError:
                logger.info(
                    f"Score for user={user_id}, lesson={lesson_id} inserted concurrently, updating instead"
                )
                existing = self._find_score(db, user_id, lesson_id)
                if existing is None:
                    raise

        existing.score = score
        existing.status = status
        existing.updated_at = func.now()
        return existing


# Global instance
scoring_service = ScoringService()
