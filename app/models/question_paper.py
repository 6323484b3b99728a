# app/models/question_paper.py
from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.sql import func

from app.core.database import Base, JSONDocument


class QuestionPaper(Base):
    __tablename__ = "question_papers"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String(255), nullable=False)
    test_series_id = Column(Integer, nullable=True, index=True)

    # Sections with their questions and answer keys:
    # [{"id": "...", "title": "...", "duration": 30, "max_marks": 40,
    #   "questions": [{"type": "mcq", "pos_marks": 2, "neg_marks": 0.5,
    #                  "skip_marks": 0, "correct_answer": 1}, ...]}, ...]
    sections = Column(JSONDocument, nullable=False, default=list)

    # Number of attempts started against this paper
    attempts = Column(Integer, default=0, server_default="0", nullable=False)

    # Timestamps
    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self):
        return f"<QuestionPaper(id={self.id}, title='{self.title}', attempts={self.attempts})>"
