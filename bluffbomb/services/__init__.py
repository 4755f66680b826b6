"""Service layer for questioning resolution and the bomb mechanic."""

from .question_service import QuestionService
from .survival_service import SurvivalTracker

__all__ = [
    "QuestionService",
    "SurvivalTracker",
]
