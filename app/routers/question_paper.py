# app/routers/question_paper.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.dependencies import get_current_user_id
from app.schemas.question_paper import QuestionPaperCreate, QuestionPaperResponse
from app.services.question_paper import QuestionPaperService

router = APIRouter(
    prefix="/question-papers",
    tags=["Question Papers"],
    responses={404: {"description": "Not found"}},
)


@router.post("/", response_model=QuestionPaperResponse, status_code=201)
def create_question_paper(
    paper_in: QuestionPaperCreate,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Register a question paper with its sections and answer keys."""
    service = QuestionPaperService(db)
    paper = service.create_paper(paper_in)
    return service.public_view(paper)


@router.get("/{paper_id}", response_model=QuestionPaperResponse)
def get_question_paper(
    paper_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Get a question paper without its answer keys."""
    service = QuestionPaperService(db)
    paper = service.get_paper(paper_id)
    return service.public_view(paper)
