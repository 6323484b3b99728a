# app/schemas/question_paper.py
import math
import uuid
from datetime import datetime
from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
)

# ==================== Question Schemas ====================


class QuestionBase(BaseModel):
    """Marking scheme shared by every question type"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    pos_marks: float = Field(
        default=1, ge=0, validation_alias=AliasChoices("pos_marks", "posMarks")
    )
    neg_marks: float = Field(
        default=0, ge=0, validation_alias=AliasChoices("neg_marks", "negMarks")
    )
    skip_marks: float = Field(
        default=0, validation_alias=AliasChoices("skip_marks", "skipMarks")
    )
    content: Optional[Any] = Field(
        None, description="Prompt/options payload, opaque to scoring"
    )

    @field_validator("pos_marks", "neg_marks", "skip_marks")
    @classmethod
    def marks_must_be_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("Marks must be a valid number")
        return v


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class McqQuestion(QuestionBase):
    type: Literal["mcq"]
    correct_answer: int = Field(
        ...,
        ge=0,
        strict=True,
        validation_alias=AliasChoices("correct_answer", "correctAnswer"),
        description="Index of the correct option",
    )

    def is_correct(self, selected: Any) -> bool:
        return (
            isinstance(selected, int)
            and not isinstance(selected, bool)
            and selected == self.correct_answer
        )


class NumericalQuestion(QuestionBase):
    type: Literal["numerical"]
    correct_answer: float = Field(
        ...,
        strict=True,
        validation_alias=AliasChoices("correct_answer", "correctAnswer"),
    )

    @field_validator("correct_answer")
    @classmethod
    def answer_must_be_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError("Numerical answer must be a finite number")
        return v

    def is_correct(self, selected: Any) -> bool:
        return _is_number(selected) and selected == self.correct_answer


class DescriptiveQuestion(QuestionBase):
    type: Literal["descriptive"]
    correct_answer: str = Field(
        ...,
        strict=True,
        validation_alias=AliasChoices("correct_answer", "correctAnswer"),
    )

    @field_validator("correct_answer")
    @classmethod
    def answer_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Descriptive answer cannot be empty")
        return v

    def is_correct(self, selected: Any) -> bool:
        return isinstance(selected, str) and selected == self.correct_answer


Question = Annotated[
    Union[McqQuestion, NumericalQuestion, DescriptiveQuestion],
    Field(discriminator="type"),
]

QuestionListAdapter = TypeAdapter(List[Question])


# ==================== Section Schemas ====================


class SectionBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    title: str = Field(..., min_length=1, max_length=255)
    duration: float = Field(
        ...,
        ge=1,
        validation_alias=AliasChoices("duration", "time"),
        description="Section time allocation in minutes",
    )
    max_marks: float = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("max_marks", "maxMarks", "maxM"),
    )
    instructions: List[str] = Field(default_factory=list)


class SectionCreate(SectionBase):
    questions: List[Question] = Field(default_factory=list)


class SectionPublic(BaseModel):
    """Section as shown to candidates, answer keys removed"""

    id: Optional[str] = None
    title: Optional[str] = None
    duration: Optional[float] = None
    max_marks: Optional[float] = None
    instructions: List[str] = Field(default_factory=list)
    question_count: int
    questions: List[dict] = Field(default_factory=list)


# ==================== Question Paper Schemas ====================


class QuestionPaperCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    test_series_id: Optional[int] = Field(None, gt=0)
    sections: List[SectionCreate] = Field(..., min_length=1)


class QuestionPaperResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    test_series_id: Optional[int] = None
    attempts: int
    sections: List[SectionPublic]
    created_at: datetime
    updated_at: datetime
