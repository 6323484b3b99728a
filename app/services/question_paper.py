# app/services/question_paper.py
import logging
from typing import Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from app.core.decorator import db_exception
from app.core.exceptions import NotFoundError
from app.models.question_paper import QuestionPaper
from app.schemas.question_paper import QuestionPaperCreate

logger = logging.getLogger(__name__)


class QuestionPaperService:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, paper_id: int) -> Optional[QuestionPaper]:
        return self.db.query(QuestionPaper).filter(QuestionPaper.id == paper_id).first()

    def increment_attempt_count(self, paper_id: int) -> None:
        """Bump the paper's attempt counter with a single atomic UPDATE and commit."""
        self.db.execute(
            update(QuestionPaper)
            .where(QuestionPaper.id == paper_id)
            .values(attempts=QuestionPaper.attempts + 1)
        )
        self.db.commit()

    @db_exception
    def create_paper(self, paper_in: QuestionPaperCreate) -> QuestionPaper:
        paper = QuestionPaper(
            title=paper_in.title,
            test_series_id=paper_in.test_series_id,
            sections=[section.model_dump() for section in paper_in.sections],
            attempts=0,
        )
        self.db.add(paper)
        self.db.commit()
        self.db.refresh(paper)

        logger.info(f"Question paper {paper.id} created with {len(paper.sections)} section(s)")
        return paper

    @db_exception
    def get_paper(self, paper_id: int) -> QuestionPaper:
        paper = self.find_by_id(paper_id)
        if not paper:
            raise NotFoundError("Question paper not found")
        return paper

    @staticmethod
    def public_view(paper: QuestionPaper) -> dict:
        """Paper without answer keys, safe to show to candidates."""
        sections = []
        for section in paper.sections or []:
            questions = section.get("questions") or []
            sections.append(
                {
                    "id": section.get("id"),
                    "title": section.get("title"),
                    "duration": section.get("duration", section.get("time")),
                    "max_marks": section.get("max_marks"),
                    "instructions": section.get("instructions") or [],
                    "question_count": len(questions),
                    "questions": [
                        {
                            key: value
                            for key, value in question.items()
                            if key not in ("correct_answer", "correctAnswer")
                        }
                        for question in questions
                    ],
                }
            )

        return {
            "id": paper.id,
            "title": paper.title,
            "test_series_id": paper.test_series_id,
            "attempts": paper.attempts,
            "sections": sections,
            "created_at": paper.created_at,
            "updated_at": paper.updated_at,
        }
