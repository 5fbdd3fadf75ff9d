# Area: Data Tests
"""Tests for loading question files (JSON, CSV, XML)."""

import json

import pytest
from trivia_session._data.loader import load_dataset
from trivia_session.errors import DatasetLoadError


def _json_item(category="Science", value=100, correct="A", **overrides):
    item = {
        "Category": category,
        "Value": value,
        "Question": "What is H2O?",
        "Options": {"A": "Water", "B": "Salt", "C": "Sugar", "D": "Oil"},
        "CorrectAnswer": correct,
    }
    item.update(overrides)
    return item


def _write_json(tmp_path, items, name="questions.json"):
    path = tmp_path / name
    path.write_text(json.dumps(items), encoding="utf-8")
    return path


CSV_TEXT = """Category,Value,Question,OptionA,OptionB,OptionC,OptionD,CorrectAnswer
Science,200,"Boiling point of water, in C?",90,100,110,120,B
Science,100,What is H2O?,Water,Salt,Sugar,Oil,a
History,100,First US president?,Washington,Lincoln,Adams,Jefferson,A
"""

XML_TEXT = """<?xml version="1.0" encoding="UTF-8"?>
<Questions>
  <Question>
    <Category>Science</Category>
    <Value>100</Value>
    <QuestionText>What is H2O?</QuestionText>
    <Options>
      <OptionA>Water</OptionA>
      <OptionB>Salt</OptionB>
      <OptionC>Sugar</OptionC>
      <OptionD>Oil</OptionD>
    </Options>
    <CorrectAnswer>A</CorrectAnswer>
  </Question>
  <Question>
    <Category>Literature</Category>
    <Value>300</Value>
    <QuestionText>Author of Hamlet?</QuestionText>
    <Options>
      <OptionA>Marlowe</OptionA>
      <OptionB>Shakespeare</OptionB>
      <OptionC>Jonson</OptionC>
      <OptionD>Kyd</OptionD>
    </Options>
    <CorrectAnswer>B</CorrectAnswer>
  </Question>
</Questions>
"""


class TestLoadJson:
    """Tests for JSON question files."""

    def test_loads_and_groups_categories(self, tmp_path):
        path = _write_json(tmp_path, [
            _json_item("Science", 200),
            _json_item("History", 100),
            _json_item("science", 100),
        ])
        dataset = load_dataset(path)
        assert [c.name for c in dataset.categories] == ["Science", "History"]
        assert dataset.category("Science").values == [100, 200]
        assert dataset.total_questions == 3

    def test_question_content(self, tmp_path):
        path = _write_json(tmp_path, [_json_item(correct="c")])
        question = load_dataset(path).question("Science", 100)
        assert question.text == "What is H2O?"
        assert question.correct_answer == "C"
        assert question.options["D"] == "Oil"
        assert question.answered is False

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("[{not json", encoding="utf-8")
        with pytest.raises(DatasetLoadError, match="Invalid JSON"):
            load_dataset(path)

    def test_not_an_array(self, tmp_path):
        path = tmp_path / "obj.json"
        path.write_text('{"Category": "Science"}', encoding="utf-8")
        with pytest.raises(DatasetLoadError, match="array"):
            load_dataset(path)

    def test_empty_array(self, tmp_path):
        path = _write_json(tmp_path, [])
        with pytest.raises(DatasetLoadError):
            load_dataset(path)

    def test_validation_errors_collected(self, tmp_path):
        """Every bad row is reported, not just the first."""
        path = _write_json(tmp_path, [
            _json_item(value=-5),
            _json_item(value=200, correct="E"),
            _json_item(value=300, Options={"A": "x", "B": "y"}),
        ])
        with pytest.raises(DatasetLoadError) as exc_info:
            load_dataset(path)
        errors = exc_info.value.validation_errors
        assert any(e.startswith("question 0: value") for e in errors)
        assert any(e.startswith("question 1: correct_answer") for e in errors)
        assert any(e.startswith("question 2: options") for e in errors)

    def test_duplicate_value_in_category(self, tmp_path):
        path = _write_json(tmp_path, [_json_item(value=100), _json_item(value=100)])
        with pytest.raises(DatasetLoadError) as exc_info:
            load_dataset(path)
        assert any("repeated question value" in e for e in exc_info.value.validation_errors)

    def test_blank_option_rejected(self, tmp_path):
        options = {"A": "Water", "B": "  ", "C": "Sugar", "D": "Oil"}
        path = _write_json(tmp_path, [_json_item(Options=options)])
        with pytest.raises(DatasetLoadError):
            load_dataset(path)


class TestLoadCsv:
    """Tests for CSV question files."""

    def test_loads_csv(self, tmp_path):
        path = tmp_path / "questions.csv"
        path.write_text(CSV_TEXT, encoding="utf-8")
        dataset = load_dataset(path)
        assert [c.name for c in dataset.categories] == ["Science", "History"]
        science = dataset.category("Science")
        assert science.values == [100, 200]
        assert science.question(200).text == "Boiling point of water, in C?"
        assert science.question(100).correct_answer == "A"

    def test_missing_columns(self, tmp_path):
        path = tmp_path / "questions.csv"
        path.write_text("Category,Value,Question\nScience,100,Q?\n", encoding="utf-8")
        with pytest.raises(DatasetLoadError, match="OptionA"):
            load_dataset(path)

    def test_non_numeric_value(self, tmp_path):
        path = tmp_path / "questions.csv"
        path.write_text(CSV_TEXT.replace("Science,200", "Science,lots"), encoding="utf-8")
        with pytest.raises(DatasetLoadError) as exc_info:
            load_dataset(path)
        assert any("value" in e for e in exc_info.value.validation_errors)


class TestLoadXml:
    """Tests for XML question files."""

    def test_loads_xml(self, tmp_path):
        path = tmp_path / "questions.xml"
        path.write_text(XML_TEXT, encoding="utf-8")
        dataset = load_dataset(path)
        assert [c.name for c in dataset.categories] == ["Science", "Literature"]
        assert dataset.question("Literature", 300).correct_answer_text == "Shakespeare"

    def test_malformed_xml(self, tmp_path):
        path = tmp_path / "questions.xml"
        path.write_text("<Questions><Question>", encoding="utf-8")
        with pytest.raises(DatasetLoadError, match="Invalid XML"):
            load_dataset(path)

    def test_missing_options_element(self, tmp_path):
        path = tmp_path / "questions.xml"
        start = XML_TEXT.index("<Options>")
        end = XML_TEXT.index("</Options>") + len("</Options>")
        path.write_text(XML_TEXT[:start] + XML_TEXT[end:], encoding="utf-8")
        with pytest.raises(DatasetLoadError) as exc_info:
            load_dataset(path)
        assert any(e.startswith("question 0: options") for e in exc_info.value.validation_errors)


class TestLoadFailures:
    """Tests for file-level failures."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatasetLoadError, match="does not exist"):
            load_dataset(tmp_path / "nope.json")

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "questions.yaml"
        path.write_text("- x", encoding="utf-8")
        with pytest.raises(DatasetLoadError, match="Unsupported"):
            load_dataset(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "questions.json"
        path.write_text("   \n", encoding="utf-8")
        with pytest.raises(DatasetLoadError, match="empty"):
            load_dataset(path)

    def test_error_block_lists_validation_errors(self, tmp_path):
        path = _write_json(tmp_path, [_json_item(value=0)])
        with pytest.raises(DatasetLoadError) as exc_info:
            load_dataset(path)
        block = exc_info.value.format_error_log()
        assert "QUESTION DATA ERROR" in block
        assert "DATASET_LOAD_FAILURE" in block
        assert str(path) in block
        assert "VALIDATION ERRORS" in block
