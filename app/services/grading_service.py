"""
Quiz grading service
Exact-match grading of a section's multiple-choice quiz bank
"""
import json
import logging
from fractions import Fraction
from typing import Dict, Any, List, Optional, Tuple
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.config import settings
from app.errors import NotFound, InvalidState, StoreFailure
from app.models import LessonSection, Quiz, QuizSubmission, QuestionAttempt

logger = logging.getLogger(__name__)

STATUS_PASSED = "passed"
STATUS_FAILED = "failed"


def round_half_up(value: Fraction) -> int:
    """Round a non-negative fraction to the nearest integer, halves going up"""
    return int(value + Fraction(1, 2))


def percent_score(correct: int, total: int) -> int:
    """Integer percentage 0-100"""
    return round_half_up(Fraction(correct * 100, total))


def pass_status(score: int) -> str:
    return STATUS_PASSED if score >= settings.PASS_THRESHOLD else STATUS_FAILED


def decode_options(raw: Any) -> Dict[str, Any]:
    """
    Decode a quiz option set

    Options are stored as JSON; rows written by the legacy backend hold
    a serialized string instead of a structured value.
    """
    if raw is None:
        return {}
    if isinstance(raw, str):
        raw = json.loads(raw)
    if isinstance(raw, list):
        return {str(index): text for index, text in enumerate(raw)}
    return dict(raw)


def parse_quiz_id(value: Any) -> Optional[UUID]:
    """Normalize a submitted quiz id; None when it is not a UUID"""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


class GradingService:
    """
    Service for grading quiz submissions

    Strategy:
    - Score against the full question bank of the section, so unanswered
      questions count as wrong
    - Answers for quizzes outside the section are dropped
    - Submission and question attempts are committed together
    """

    def submit_quiz(
        self,
        db: Session,
        user_id: UUID,
        section_id: UUID,
        attempt_number: int,
        duration_seconds: int,
        answers: List[Dict[str, Any]]
    ) -> Dict[str, Any]:
        """
        Grade and persist a quiz submission

        Args:
            db: Database session
            user_id: Learner UUID
            section_id: Section the quiz bank belongs to
            attempt_number: Caller-supplied attempt counter
            duration_seconds: Time spent on the quiz
            answers: [{"quiz_id": str, "selected": str}]

        Returns:
            Submission summary dictionary

        Raises:
            NotFound: section does not exist
            InvalidState: section has no quizzes
            StoreFailure: database error, nothing persisted
        """
        try:
            section = db.query(LessonSection).filter(LessonSection.id == section_id).first()
            if not section:
                raise NotFound("Section not found")

            answer_key = self._load_answer_key(db, section_id)
            if not answer_key:
                raise InvalidState("No quizzes found for this section")

            correct_count, graded = self._grade_answers(answer_key, answers)
            total_questions = len(answer_key)
            score = percent_score(correct_count, total_questions)
            status = pass_status(score)

            submission = QuizSubmission(
                user_id=user_id,
                section_id=section_id,
                total_questions=total_questions,
                correct_count=correct_count,
                score=score,
                status=status,
                attempt_number=attempt_number,
                duration_seconds=duration_seconds,
            )
            submission.attempts = [
                QuestionAttempt(
                    quiz_id=item["quiz_id"],
                    selected_option=item["selected"],
                    is_correct=item["is_correct"],
                )
                for item in graded
            ]

            db.add(submission)
            db.commit()

        except SQLAlchemyError as e:
            db.rollback()
            logger.error(
                f"Failed to save quiz submission: user={user_id}, section={section_id}, "
                f"attempt={attempt_number}: {str(e)}",
                exc_info=True
            )
            raise StoreFailure("Failed to save quiz submission") from e

        logger.info(
            f"Quiz graded: submission={submission.id}, section={section_id}, "
            f"{correct_count}/{total_questions} correct, score={score} ({status})"
        )

        return {
            "id": submission.id,
            "section_id": section_id,
            "total_questions": total_questions,
            "correct_count": correct_count,
            "score": score,
            "status": status,
            "attempt_number": attempt_number,
            "duration_seconds": duration_seconds,
        }

    def _load_answer_key(self, db: Session, section_id: UUID) -> List[Dict[str, Any]]:
        """
        Load the section's quizzes ordered by order_index

        Read on every submission so edits to the quiz bank apply immediately.

        Returns:
            [{"quiz_id": UUID, "correct": str}]
        """
        quizzes = (
            db.query(Quiz)
            .filter(Quiz.section_id == section_id)
            .order_by(Quiz.order_index.asc())
            .all()
        )

        answer_key = []
        for quiz in quizzes:
            # Grading only needs the correct key; decoding rejects corrupt option rows
            decode_options(quiz.options)
            answer_key.append({"quiz_id": quiz.id, "correct": quiz.correct_answer})

        return answer_key

    def _grade_answers(
        self,
        answer_key: List[Dict[str, Any]],
        answers: List[Dict[str, Any]]
    ) -> Tuple[int, List[Dict[str, Any]]]:
        """
        Compare submitted answers with the answer key

        Returns:
            Tuple of (correct_count, graded answers to store as attempts)
        """
        correct_by_quiz = {item["quiz_id"]: item["correct"] for item in answer_key}

        correct_count = 0
        graded = []
        seen = set()

        for answer in answers:
            quiz_id = parse_quiz_id(answer["quiz_id"])

            if quiz_id not in correct_by_quiz:
                logger.debug(f"Dropping answer for quiz {answer['quiz_id']!r} outside the section")
                continue

            # First answer per question counts
            if quiz_id in seen:
                logger.debug(f"Dropping repeated answer for quiz {quiz_id}")
                continue
            seen.add(quiz_id)

            is_correct = answer["selected"] == correct_by_quiz[quiz_id]
            if is_correct:
                correct_count += 1

            graded.append({
                "quiz_id": quiz_id,
                "selected": answer["selected"],
                "is_correct": is_correct,
            })

        return correct_count, graded

    def list_user_submissions(self, db: Session, user_id: UUID) -> List[QuizSubmission]:
        """Get all submissions of a learner, newest first"""
        try:
            return (
                db.query(QuizSubmission)
                .filter(QuizSubmission.user_id == user_id)
                .order_by(QuizSubmission.created_at.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch submissions for user {user_id}: {str(e)}", exc_info=True)
            raise StoreFailure("Failed to fetch quiz submissions") from e


# Global instance
grading_service = GradingService()
