"""
Database models package
"""
from app.models.lesson import Lesson
from app.models.lesson_section import LessonSection
from app.models.quiz import Quiz
from app.models.quiz_submission import QuizSubmission
from app.models.question_attempt import QuestionAttempt
from app.models.score import Score

__all__ = ["Lesson", "LessonSection", "Quiz", "QuizSubmission", "QuestionAttempt", "Score"]
