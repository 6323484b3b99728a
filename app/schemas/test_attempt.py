# app/schemas/test_attempt.py
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

# ==================== Attempt Document Schemas ====================


class QuestionResponse(BaseModel):
    question_index: int
    selected_option: Optional[Any] = None
    is_marked_for_review: bool = False
    time_spent: float = 0
    is_correct: bool = False
    marks_awarded: float = 0


class SectionAttempt(BaseModel):
    section_id: Optional[str] = None
    section_title: Optional[str] = None
    responses: List[QuestionResponse] = Field(default_factory=list)
    time_spent: float = 0
    score: float = 0
    max_score: float = 0


class AttemptProgress(BaseModel):
    current_section: int = 0
    current_question: int = 0
    visited_questions: Dict[str, bool] = Field(default_factory=dict)


class AttemptTiming(BaseModel):
    started_at: datetime
    last_active_at: datetime
    submitted_at: Optional[datetime] = None
    total_time_spent: float = 0
    remaining_time: float = 0


class AttemptSummary(BaseModel):
    total_score: float = 0
    max_score: float = 0
    percentage: float = 0
    accuracy: float = 0
    questions_attempted: int = 0
    questions_correct: int = 0
    questions_incorrect: int = 0
    questions_skipped: int = 0


class TestAttemptResponse(BaseModel):
    __test__ = False

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    test_series_id: int
    paper_id: int
    paper_title: Optional[str] = None
    status: str
    progress: AttemptProgress
    timing: AttemptTiming
    sections: List[SectionAttempt]
    summary: AttemptSummary
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_attempt(cls, attempt, paper_title: Optional[str] = None):
        return cls(
            id=attempt.id,
            user_id=attempt.user_id,
            test_series_id=attempt.test_series_id,
            paper_id=attempt.paper_id,
            paper_title=paper_title,
            status=attempt.status,
            progress=attempt.progress,
            timing=AttemptTiming(
                started_at=attempt.started_at,
                last_active_at=attempt.last_active_at,
                submitted_at=attempt.submitted_at,
                total_time_spent=attempt.total_time_spent or 0,
                remaining_time=attempt.remaining_time or 0,
            ),
            sections=attempt.sections,
            summary=attempt.summary,
            created_at=attempt.created_at,
            updated_at=attempt.updated_at,
        )


# ==================== Request Schemas ====================


class ProgressUpdate(BaseModel):
    """
    Partial progress patch.

    Fields are deliberately loose: values of the wrong type are ignored by
    the service instead of rejecting the whole heartbeat.
    """

    current_section: Optional[Any] = None
    current_question: Optional[Any] = None
    visited_questions: Optional[Any] = None
    time_spent: Optional[Any] = Field(None, description="Cumulative seconds spent")
    remaining_time: Optional[Any] = Field(None, description="Seconds left on the clock")
    selected_options: Optional[Any] = Field(
        None, description='Answers keyed by "sectionIndex-questionIndex"'
    )
    marked_for_review: Optional[Any] = Field(
        None, description='Review flags keyed by "sectionIndex-questionIndex"'
    )


class SubmitAttempt(BaseModel):
    selected_options: Optional[Any] = None
    time_spent: Optional[Any] = None
    remaining_time: Optional[Any] = None


# ==================== Envelope Schemas ====================


class TestAttemptEnvelope(BaseModel):
    __test__ = False

    success: bool = True
    message: Optional[str] = None
    test_attempt: Optional[TestAttemptResponse] = None


class Pagination(BaseModel):
    total: int
    page: int
    size: int
    total_pages: int


class TestAttemptListEnvelope(BaseModel):
    __test__ = False

    success: bool = True
    attempts: List[TestAttemptResponse]
    pagination: Pagination
