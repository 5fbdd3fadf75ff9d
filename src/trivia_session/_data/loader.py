# Area: Data
"""
trivia_session._data.loader — Question file loading
===================================================

Reads a question file into a validated Dataset. The file type is chosen
from the extension:

    .json  array of {Category, Value, Question, Options{A..D}, CorrectAnswer}
    .csv   Category,Value,Question,OptionA,OptionB,OptionC,OptionD,CorrectAnswer
    .xml   <Questions><Question>...</Question></Questions>

Every failure (missing file, bad syntax, validation) surfaces as a
DatasetLoadError.
"""

from __future__ import annotations
import csv
import io
import json
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Callable, Dict, List, Union

from pydantic import ValidationError

from ..errors import DatasetLoadError
from .models import OPTION_LABELS, Dataset
from .schemas import DatasetSchema, QuestionSchema

logger = logging.getLogger("trivia_session.data.loader")

CSV_COLUMNS = [
    "Category", "Value", "Question",
    "OptionA", "OptionB", "OptionC", "OptionD",
    "CorrectAnswer",
]


def load_dataset(path: Union[str, Path]) -> Dataset:
    """
    Load and validate a question file.

    Args:
        path: Path to a .json, .csv or .xml question file

    Returns:
        The validated Dataset

    Raises:
        DatasetLoadError: If the file is missing, malformed or invalid
    """
    file_path = Path(path)
    source = str(file_path)
    parser = _PARSERS.get(file_path.suffix.lower())
    if parser is None:
        raise DatasetLoadError(source, f"Unsupported file type: {file_path.name}")
    if not file_path.exists():
        raise DatasetLoadError(source, "File does not exist")

    content = file_path.read_text(encoding="utf-8-sig").strip()
    if not content:
        raise DatasetLoadError(source, "File is empty")

    raw_rows = parser(content, source)
    rows: List[QuestionSchema] = []
    errors: List[str] = []
    for index, raw in enumerate(raw_rows):
        try:
            rows.append(QuestionSchema.model_validate(raw))
        except ValidationError as e:
            errors.extend(f"question {index}: {msg}" for msg in _error_messages(e))
    if errors:
        raise DatasetLoadError(source, "Invalid question data", errors)

    try:
        dataset = DatasetSchema.from_rows(rows).to_dataset()
    except ValidationError as e:
        raise DatasetLoadError(source, "Invalid question data", _error_messages(e)) from e

    logger.info(
        f"Loaded {dataset.total_questions} questions in "
        f"{len(dataset.categories)} categories from {source}"
    )
    return dataset


def _parse_json(content: str, source: str) -> List[Dict[str, Any]]:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise DatasetLoadError(source, f"Invalid JSON format: {e}") from e
    if not isinstance(data, list):
        raise DatasetLoadError(source, "Expected a JSON array of questions")

    rows = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise DatasetLoadError(source, f"Question at index {index} is not an object")
        rows.append({
            "category": item.get("Category"),
            "value": item.get("Value"),
            "question": item.get("Question"),
            "options": item.get("Options"),
            "correct_answer": item.get("CorrectAnswer"),
        })
    return rows


def _parse_csv(content: str, source: str) -> List[Dict[str, Any]]:
    reader = csv.DictReader(io.StringIO(content))
    header = [name.strip() for name in (reader.fieldnames or [])]
    missing = [col for col in CSV_COLUMNS if col not in header]
    if missing:
        raise DatasetLoadError(source, f"Missing CSV columns: {', '.join(missing)}")

    rows = []
    for record in reader:
        record = {(k or "").strip(): v for k, v in record.items()}
        rows.append({
            "category": record.get("Category"),
            "value": record.get("Value"),
            "question": record.get("Question"),
            "options": {label: record.get(f"Option{label}") for label in OPTION_LABELS},
            "correct_answer": record.get("CorrectAnswer"),
        })
    return rows


def _parse_xml(content: str, source: str) -> List[Dict[str, Any]]:
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise DatasetLoadError(source, f"Invalid XML format: {e}") from e

    rows = []
    for element in root.iter("Question"):
        options_el = element.find("Options")
        options = None
        if options_el is not None:
            options = {label: options_el.findtext(f"Option{label}") for label in OPTION_LABELS}
        rows.append({
            "category": element.findtext("Category"),
            "value": element.findtext("Value"),
            "question": element.findtext("QuestionText"),
            "options": options,
            "correct_answer": element.findtext("CorrectAnswer"),
        })
    return rows


def _error_messages(error: ValidationError) -> List[str]:
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        messages.append(f"{location}: {item['msg']}" if location else item["msg"])
    return messages


_PARSERS: Dict[str, Callable[[str, str], List[Dict[str, Any]]]] = {
    ".json": _parse_json,
    ".csv": _parse_csv,
    ".xml": _parse_xml,
}
