import os
import tempfile
from pathlib import Path

TEST_DB_PATH = Path(tempfile.gettempdir()) / "exam_prep_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["PRODUCTION"] = "false"
os.environ["DEBUG"] = "false"
os.environ["RATE_LIMIT_STORAGE_URI"] = "memory://"

import pytest
from fastapi.testclient import TestClient

from app.core.database import Base, SessionLocal, engine
from app.core.security import jwt_manager
from app.models import QuestionPaper


def mcq(correct_answer, pos_marks=2, neg_marks=0.5):
    return {
        "type": "mcq",
        "pos_marks": pos_marks,
        "neg_marks": neg_marks,
        "skip_marks": 0,
        "correct_answer": correct_answer,
    }


def section(title, questions, duration=30):
    return {
        "id": title.lower().replace(" ", "-"),
        "title": title,
        "duration": duration,
        "max_marks": sum(q.get("pos_marks", 1) for q in questions),
        "questions": questions,
    }


@pytest.fixture
def db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def paper_factory(db):
    def create(sections=None, title="Mock Paper 1"):
        if sections is None:
            sections = [section("Quantitative Aptitude", [mcq(1), mcq(3)])]
        paper = QuestionPaper(title=title, sections=sections, attempts=0)
        db.add(paper)
        db.commit()
        db.refresh(paper)
        return paper

    return create


@pytest.fixture
def client(db):
    from main import app

    return TestClient(app)


@pytest.fixture
def auth_headers():
    token = jwt_manager.create_access_token(42)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_user_headers():
    token = jwt_manager.create_access_token(43)
    return {"Authorization": f"Bearer {token}"}
