from app.scoring.base import BaseScorer
from app.scoring.factory import ScorerFactory
from app.scoring.feedback import normalize_feedback
from app.scoring.prompt_loader import prepare_instructions
from app.scoring.scorer import Scorer

__all__ = [
    "BaseScorer",
    "Scorer",
    "ScorerFactory",
    "normalize_feedback",
    "prepare_instructions",
]
