# app/services/scoring.py
"""
Scoring engine for test attempts.

Everything here is a pure function of its arguments: no database access, no
clock, no mutation of the inputs. Scoring the same attempt against the same
paper twice yields identical documents.
"""

import copy
import logging
from typing import Any, List, Optional

from pydantic import ValidationError as PydanticValidationError

from app.schemas.question_paper import QuestionListAdapter

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _round2(value: float) -> float:
    return round(value, 2)


def _positive_marks(question: Any) -> float:
    if not isinstance(question, dict):
        return 0
    marks = question.get("pos_marks", question.get("posMarks", 1))
    return marks if _is_number(marks) else 0


def build_section_snapshot(paper_sections: List[dict]) -> List[dict]:
    """Pre-allocate one blank response per question for every paper section."""
    snapshot = []
    for index, section in enumerate(paper_sections):
        questions = section.get("questions") or []
        snapshot.append(
            {
                "section_id": str(section.get("id", index)),
                "section_title": section.get("title"),
                "responses": [
                    {
                        "question_index": question_index,
                        "selected_option": None,
                        "is_marked_for_review": False,
                        "time_spent": 0,
                        "is_correct": False,
                        "marks_awarded": 0,
                    }
                    for question_index in range(len(questions))
                ],
                "time_spent": 0,
                "score": 0,
                "max_score": sum(_positive_marks(q) for q in questions),
            }
        )
    return snapshot


def total_time_budget(paper_sections: List[dict], default_seconds: int) -> float:
    """
    Allowed time in seconds: the sum of section durations (minutes) times 60.

    Falls back to ``default_seconds`` when the sum is non-positive or no
    section carries a usable duration, so a malformed paper never blocks an
    attempt from starting.
    """
    minutes = 0
    for section in paper_sections or []:
        duration = section.get("duration")
        if not _is_number(duration):
            duration = section.get("time")
        if _is_number(duration):
            minutes += duration
    return minutes * 60 if minutes > 0 else default_seconds


def _parse_questions(paper_section: dict, section_index: int) -> Optional[list]:
    try:
        return QuestionListAdapter.validate_python(paper_section.get("questions") or [])
    except PydanticValidationError as e:
        logger.warning(
            f"Skipping section {section_index} while scoring: "
            f"{e.error_count()} invalid question(s)"
        )
        return None


def score_sections(attempt_sections: List[dict], paper_sections: List[dict]) -> List[dict]:
    """
    Score every answered response against the paper's answer key.

    Sections pair up by index. A paper section without a counterpart in the
    attempt, or whose questions cannot be read, is left as it was. Unanswered
    responses keep ``is_correct = False`` and ``marks_awarded = 0``; skip
    marks are never applied.

    Returns new section documents; ``attempt_sections`` is not modified.
    """
    scored = copy.deepcopy(attempt_sections)

    for section_index, paper_section in enumerate(paper_sections):
        if section_index >= len(scored):
            continue

        questions = _parse_questions(paper_section, section_index)
        if questions is None:
            continue

        attempt_section = scored[section_index]
        responses = attempt_section.get("responses") or []
        section_score = 0

        for question_index, question in enumerate(questions):
            if question_index >= len(responses):
                break
            response = responses[question_index]
            selected = response.get("selected_option")

            if selected is None:
                response["is_correct"] = False
                response["marks_awarded"] = 0
                continue

            if question.is_correct(selected):
                response["is_correct"] = True
                response["marks_awarded"] = question.pos_marks
                section_score += question.pos_marks
            else:
                response["is_correct"] = False
                response["marks_awarded"] = -question.neg_marks
                section_score -= question.neg_marks

        attempt_section["score"] = section_score

    return scored


def summarize(sections: List[dict]) -> dict:
    """Recompute the attempt summary from scored sections."""
    total_score = 0
    max_score = 0
    attempted = 0
    correct = 0
    incorrect = 0
    skipped = 0

    for section in sections:
        total_score += section.get("score") or 0
        max_score += section.get("max_score") or 0

        for response in section.get("responses") or []:
            if response.get("selected_option") is not None:
                attempted += 1
                if response.get("is_correct"):
                    correct += 1
                else:
                    incorrect += 1
            else:
                skipped += 1

    accuracy = _round2(correct / attempted * 100) if attempted > 0 else 0
    percentage = _round2(total_score / max_score * 100) if max_score > 0 else 0

    return {
        "total_score": total_score,
        "max_score": max_score,
        "percentage": percentage,
        "accuracy": accuracy,
        "questions_attempted": attempted,
        "questions_correct": correct,
        "questions_incorrect": incorrect,
        "questions_skipped": skipped,
    }
