"""
Models package initialization
Import all models so they register with the declarative Base
"""

from .question_paper import QuestionPaper
from .test_attempt import AttemptStatus, TestAttempt

# Make models available at package level
__all__ = [
    "AttemptStatus",
    "QuestionPaper",
    "TestAttempt",
]
