# Area: Data
"""
trivia_session._data.schemas — Question file validation
=======================================================

Pydantic models enforcing the dataset contract before anything reaches
the session core: four non-blank options A-D, a correct label among
them, positive values unique within a category, and category names
unique ignoring case.
"""

from __future__ import annotations
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator, model_validator

from .models import OPTION_LABELS, Category, Dataset, Question


class QuestionSchema(BaseModel):
    """One question row as read from a question file."""

    category: str = Field(min_length=1)
    value: int = Field(gt=0)
    question: str = Field(min_length=1)
    options: Dict[str, str]
    correct_answer: str

    @field_validator("category", "question", mode="before")
    @classmethod
    def _strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("options")
    @classmethod
    def _check_options(cls, options: Dict[str, str]) -> Dict[str, str]:
        normalised = {str(k).strip().upper(): (v or "").strip() for k, v in options.items()}
        missing = [label for label in OPTION_LABELS if label not in normalised]
        if missing:
            raise ValueError(f"must have options A, B, C and D (missing {', '.join(missing)})")
        extra = sorted(set(normalised) - set(OPTION_LABELS))
        if extra:
            raise ValueError(f"unexpected option labels: {', '.join(extra)}")
        for label in OPTION_LABELS:
            if not normalised[label]:
                raise ValueError(f"option {label} cannot be empty")
        return {label: normalised[label] for label in OPTION_LABELS}

    @field_validator("correct_answer")
    @classmethod
    def _check_correct_answer(cls, value: str) -> str:
        label = value.strip().upper()
        if label not in OPTION_LABELS:
            raise ValueError("must be A, B, C, or D")
        return label

    def to_question(self) -> Question:
        return Question(
            category=self.category,
            value=self.value,
            text=self.question,
            options=self.options,
            correct_answer=self.correct_answer,
        )


class CategorySchema(BaseModel):
    """A named group of questions with distinct point values."""

    name: str = Field(min_length=1)
    questions: List[QuestionSchema] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_values_unique(self) -> "CategorySchema":
        seen = set()
        for q in self.questions:
            if q.value in seen:
                raise ValueError(
                    f"Category '{self.name}' has repeated question value: {q.value}"
                )
            seen.add(q.value)
        return self

    def to_category(self) -> Category:
        return Category(self.name, [q.to_question() for q in self.questions])


class DatasetSchema(BaseModel):
    """Every category of a question file."""

    categories: List[CategorySchema] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_names_unique(self) -> "DatasetSchema":
        seen = set()
        for category in self.categories:
            key = category.name.lower()
            if key in seen:
                raise ValueError(f"Duplicate category name: {category.name}")
            seen.add(key)
        return self

    @classmethod
    def from_rows(cls, rows: List[QuestionSchema]) -> "DatasetSchema":
        """Group flat question rows into categories, keeping first-seen order."""
        names: Dict[str, str] = {}
        grouped: Dict[str, List[QuestionSchema]] = {}
        for row in rows:
            key = row.category.lower()
            names.setdefault(key, row.category)
            grouped.setdefault(key, []).append(row)
        return cls(
            categories=[
                CategorySchema(name=names[key], questions=questions)
                for key, questions in grouped.items()
            ]
        )

    def to_dataset(self) -> Dataset:
        return Dataset([c.to_category() for c in self.categories])
