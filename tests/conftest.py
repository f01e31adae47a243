"""
Shared fixtures: in-memory SQLite database, seeded content and an API client
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("RATE_LIMIT_PER_MINUTE", "10000")
os.environ.setdefault("RATE_LIMIT_PER_HOUR", "100000")

import uuid
from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import Lesson, LessonSection, Quiz, QuizSubmission


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user_id():
    return uuid.uuid4()


@pytest.fixture
def content(db):
    """Factory for lessons, sections and quizzes"""

    class Content:
        def lesson(self, title="Fractions"):
            lesson = Lesson(title=title)
            db.add(lesson)
            db.commit()
            return lesson

        def section(self, lesson, title="Section", order_index=0):
            section = LessonSection(lesson_id=lesson.id, title=title, order_index=order_index)
            db.add(section)
            db.commit()
            return section

        def quizzes(self, section, correct_answers):
            """One quiz per correct answer, in order"""
            quizzes = []
            for index, correct in enumerate(correct_answers):
                quiz = Quiz(
                    section_id=section.id,
                    order_index=index,
                    question=f"Question {index + 1}",
                    options={"A": "first", "B": "second", "C": "third", "X": "wrong"},
                    correct_answer=correct,
                )
                db.add(quiz)
                quizzes.append(quiz)
            db.commit()
            return quizzes

        def submission(self, user_id, section, score, attempt_number=1, created_at=None):
            submission = QuizSubmission(
                user_id=user_id,
                section_id=section.id,
                total_questions=10,
                correct_count=score // 10,
                score=score,
                status="passed" if score >= 50 else "failed",
                attempt_number=attempt_number,
                duration_seconds=60,
                created_at=created_at or datetime(2024, 1, 1) + timedelta(minutes=attempt_number),
            )
            db.add(submission)
            db.commit()
            return submission

    return Content()
