# Area: Data
"""
trivia_session._data.models — Players, questions, categories, datasets
======================================================================

Plain in-memory model of one session's content. A Dataset is built once
(usually by the loader) and then shared read-mostly by the session; the
only mutation during play is a question's answered flag and a player's
score.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from ..errors import InvalidArgumentError

OPTION_LABELS = ("A", "B", "C", "D")


@dataclass
class Player:
    """
    A participant in the session.

    The score is never negative: additions apply unconditionally,
    subtractions clamp at zero.
    """
    player_id: str
    name: str
    score: int = 0

    def add_points(self, points: int) -> None:
        if points > 0:
            self.score += points

    def subtract_points(self, points: int) -> None:
        if points > 0:
            self.score = max(0, self.score - points)

    def apply_delta(self, delta: int) -> None:
        """Route a signed score delta through the clamped add/subtract."""
        if delta > 0:
            self.add_points(delta)
        elif delta < 0:
            self.subtract_points(-delta)

    def reset_score(self) -> None:
        self.score = 0


class Question:
    """Multiple-choice question worth a positive number of points."""

    def __init__(
        self,
        category: str,
        value: int,
        text: str,
        options: Dict[str, str],
        correct_answer: str,
    ):
        self._category = category
        self._value = value
        self._text = text
        self._options = {label.strip().upper(): option for label, option in options.items()}
        self._correct_answer = (correct_answer or "").strip().upper()
        self.answered = False
        self._validate()

    def _validate(self) -> None:
        if self._value <= 0:
            raise InvalidArgumentError("Question value must be positive")
        if len(self._options) > len(OPTION_LABELS) or any(
            label not in OPTION_LABELS for label in self._options
        ):
            raise InvalidArgumentError("Question options must be labelled A, B, C or D")
        if self._correct_answer not in self._options:
            raise InvalidArgumentError(
                f"Correct answer '{self._correct_answer}' is not one of the options"
            )

    @property
    def category(self) -> str:
        return self._category

    @property
    def value(self) -> int:
        return self._value

    @property
    def text(self) -> str:
        return self._text

    @property
    def options(self) -> Dict[str, str]:
        return dict(self._options)

    @property
    def correct_answer(self) -> str:
        return self._correct_answer

    @property
    def correct_answer_text(self) -> str:
        return self._options[self._correct_answer]

    def is_correct(self, answer: Optional[str]) -> bool:
        if answer is None:
            return False
        return answer.strip().upper() == self._correct_answer

    def option_text(self, label: str) -> Optional[str]:
        return self._options.get(label.strip().upper())

    def __repr__(self) -> str:
        return (
            f"Question(category={self._category!r}, value={self._value}, "
            f"answered={self.answered})"
        )


class Category:
    """Questions of one category, ordered by point value."""

    def __init__(self, name: str, questions: Iterable[Question] = ()):
        self._name = name
        self._questions: Dict[int, Question] = {}
        for question in questions:
            self.add_question(question)

    @property
    def name(self) -> str:
        return self._name

    def add_question(self, question: Question) -> None:
        if question.category.lower() != self._name.lower():
            raise InvalidArgumentError(
                f"Question category '{question.category}' does not match '{self._name}'"
            )
        if question.value in self._questions:
            raise InvalidArgumentError(
                f"Category '{self._name}' already has a question worth {question.value}"
            )
        self._questions[question.value] = question
        self._questions = dict(sorted(self._questions.items()))

    @property
    def questions(self) -> List[Question]:
        return list(self._questions.values())

    @property
    def values(self) -> List[int]:
        return list(self._questions)

    def question(self, value: int) -> Optional[Question]:
        return self._questions.get(value)

    def all_answered(self) -> bool:
        return all(q.answered for q in self._questions.values())

    def has_available_questions(self) -> bool:
        return any(not q.answered for q in self._questions.values())

    def available_questions(self) -> List[Question]:
        return [q for q in self._questions.values() if not q.answered]

    def __len__(self) -> int:
        return len(self._questions)

    def __repr__(self) -> str:
        return f"Category(name={self._name!r}, questions={len(self._questions)})"


@dataclass
class Dataset:
    """
    Every category of one session.

    Category names are unique ignoring case and the dataset is never
    empty.
    """
    categories: List[Category] = field(default_factory=list)

    def __post_init__(self):
        if not self.categories:
            raise InvalidArgumentError("Dataset must contain at least one category")
        seen = set()
        for category in self.categories:
            key = category.name.lower()
            if key in seen:
                raise InvalidArgumentError(f"Duplicate category name: {category.name}")
            seen.add(key)

    def category(self, name: str) -> Optional[Category]:
        wanted = (name or "").strip().lower()
        for category in self.categories:
            if category.name.lower() == wanted:
                return category
        return None

    def question(self, category_name: str, value: int) -> Optional[Question]:
        category = self.category(category_name)
        if category is None:
            return None
        return category.question(value)

    @property
    def total_questions(self) -> int:
        return sum(len(c) for c in self.categories)

    def all_answered(self) -> bool:
        return all(c.all_answered() for c in self.categories)

    def available_categories(self) -> List[Category]:
        return [c for c in self.categories if c.has_available_questions()]
