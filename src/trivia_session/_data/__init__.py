# Area: Data
"""
Session content: players, questions, categories and datasets.

This package contains:
- The in-memory model consumed by the session core
- Pydantic schemas enforcing the question-file contract
- Loaders for JSON, CSV and XML question files
"""

from .models import OPTION_LABELS, Player, Question, Category, Dataset
from .schemas import QuestionSchema, CategorySchema, DatasetSchema
from .loader import load_dataset

__all__ = [
    "OPTION_LABELS",
    "Player",
    "Question",
    "Category",
    "Dataset",
    "QuestionSchema",
    "CategorySchema",
    "DatasetSchema",
    "load_dataset",
]
