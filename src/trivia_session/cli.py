# Area: Shared
"""
trivia_session.cli — Command-line interface
===========================================

Plays a trivia session in the terminal.

Usage:
    python -m trivia_session --questions questions.json --players Alice Bob
    python -m trivia_session --config config.json
    TRIVIA_QUESTIONS_PATH=questions.csv python -m trivia_session

Every action is written to the CSV event log and a summary report is
written when the session ends. Enter q at the category prompt to end
early.
"""

import argparse
import sys
from typing import Any, Callable, Dict, List, Optional, TextIO

from ._config import load_config, validate_config
from ._data.loader import load_dataset
from ._data.models import OPTION_LABELS, Category, Question
from ._events.csv_sink import CsvEventSink
from ._events.record import Activity, Outcome
from ._reports.summary import write_summary_report
from ._session.controller import SessionController
from ._session.scoring import SCORING_POLICIES, get_scoring_policy
from ._shared.logging_config import (
    disable_quiet_mode,
    enable_quiet_mode,
    log_load_error,
    setup_logging,
)
from .errors import DatasetLoadError, InvalidArgumentError

QUIT_COMMANDS = {"q", "quit", "exit"}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="trivia-session",
        description="Play a turn-based multiple-choice trivia session",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  trivia-session --questions questions.json --players Alice Bob
  trivia-session --config config.json --scoring no-penalty
  TRIVIA_PLAYERS=Alice,Bob trivia-session --questions questions.csv
        """,
    )

    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument(
        "--questions", type=str,
        help="Question file (.json, .csv or .xml)",
    )
    parser.add_argument(
        "--players", nargs="+", metavar="NAME",
        help="Player names in turn order (prompted for when omitted)",
    )
    parser.add_argument(
        "--scoring", choices=sorted(SCORING_POLICIES),
        help="Scoring policy (default: standard)",
    )
    parser.add_argument("--event-log", type=str, help="CSV event log path")
    parser.add_argument("--report", type=str, help="Summary report path")
    parser.add_argument("--log-level", type=str, help="Logging level (default: INFO)")

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge file/env config with CLI flags and validate the result."""
    config = load_config(args.config)

    overrides = {
        "questions_path": args.questions,
        "players": args.players,
        "scoring": args.scoring,
        "event_log_path": args.event_log,
        "report_path": args.report,
        "log_level": args.log_level,
    }
    for key, value in overrides.items():
        if value is not None:
            config[key] = value

    validate_config(config)
    return config


class ConsoleIO:
    """Line-based terminal IO with injectable streams."""

    def __init__(
        self,
        read: Optional[Callable[[str], str]] = None,
        out: Optional[TextIO] = None,
    ):
        self._read = read if read is not None else input
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def ask(self, prompt: str) -> str:
        return self._read(prompt).strip()

    def say(self, text: str = "") -> None:
        print(text, file=self.out)


def prompt_players(
    controller: SessionController,
    io: ConsoleIO,
    max_players: int,
) -> List[str]:
    """Ask for the player count and names, recording both steps."""
    while True:
        raw = io.ask(f"Number of players (1-{max_players}): ")
        if raw.isdecimal() and 1 <= int(raw) <= max_players:
            count = int(raw)
            break
        io.say(f"Please enter a number between 1 and {max_players}.")
    controller.system_event(Activity.SELECT_PLAYER_COUNT, note=str(count))

    names: List[str] = []
    while len(names) < count:
        name = io.ask(f"Name of player {len(names) + 1}: ")
        if not name:
            io.say("Name cannot be empty.")
            continue
        names.append(name)
        controller.system_event(Activity.ENTER_PLAYER_NAME, note=name)
    return names


def show_board(controller: SessionController, io: ConsoleIO) -> None:
    io.say()
    io.say("Board:")
    for category in controller.available_categories():
        values = ", ".join(str(q.value) for q in category.available_questions())
        io.say(f"  {category.name}: {values}")
    scores = " | ".join(f"{p.name}: {p.score}" for p in controller.players)
    io.say(f"Scores: {scores}")


def _choose_category(controller: SessionController, io: ConsoleIO, name: str) -> Optional[Category]:
    category = controller.dataset.category(name)
    if category is None or not category.has_available_questions():
        io.say(f"No open questions in category '{name}'.")
        return None
    controller.system_event(Activity.SELECT_CATEGORY, category=category.name)
    return category


def _choose_question(
    controller: SessionController,
    io: ConsoleIO,
    category: Category,
) -> Optional[Question]:
    raw = io.ask(f"Value in {category.name}: ")
    question = category.question(int(raw)) if raw.isdecimal() else None
    if question is None or question.answered:
        io.say(f"No open question worth '{raw}' in {category.name}.")
        return None
    controller.system_event(Activity.SELECT_QUESTION, category=category.name, value=question.value)
    return question


def _ask_answer(io: ConsoleIO, question: Question) -> str:
    io.say()
    io.say(f"{question.category} for {question.value}: {question.text}")
    for label, text in question.options.items():
        io.say(f"  {label}) {text}")
    while True:
        answer = io.ask("Your answer (A-D): ").upper()
        if answer in OPTION_LABELS:
            return answer
        io.say("Please answer A, B, C or D.")


def play(controller: SessionController, io: ConsoleIO) -> None:
    """Run the turn loop until every question is answered or a player quits."""
    while not controller.is_finished:
        player = controller.current_player
        show_board(controller, io)
        try:
            choice = io.ask(f"{player.name}, choose a category (q to quit): ")
            if choice.lower() in QUIT_COMMANDS:
                controller.force_end_session()
                break
            category = _choose_category(controller, io, choice)
            if category is None:
                continue
            question = _choose_question(controller, io, category)
            if question is None:
                continue
            answer = _ask_answer(io, question)
        except EOFError:
            controller.force_end_session()
            break

        correct = controller.answer_question(category.name, question.value, answer)
        if correct:
            io.say(f"Correct! {player.name} now has {player.score} points.")
        else:
            io.say(
                f"Incorrect. The answer was {question.correct_answer}) "
                f"{question.correct_answer_text}. {player.name} now has {player.score} points."
            )

        if controller.check_and_end_session():
            break
        controller.advance_turn()


def finish(controller: SessionController, io: ConsoleIO, config: Dict[str, Any]) -> None:
    """Announce the result, write the report and close the event log."""
    io.say()
    io.say(controller.game_result_text())

    report_path = write_summary_report(controller, config["report_path"])
    controller.system_event(Activity.GENERATE_REPORT, note=Outcome.SUCCESS.value)
    io.say(f"Summary report written to {report_path}")

    controller.system_event(Activity.GENERATE_EVENT_LOG, note=Outcome.SUCCESS.value)
    controller.system_event(Activity.EXIT_SESSION, note=Outcome.SUCCESS.value)
    controller.close()
    io.say(f"Event log written to {config['event_log_path']}")


def main(
    argv: Optional[List[str]] = None,
    read: Optional[Callable[[str], str]] = None,
    out: Optional[TextIO] = None,
) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    io = ConsoleIO(read=read, out=out)

    try:
        config = build_config(args)
    except InvalidArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Set via --questions, a config file or TRIVIA_* environment variables.", file=sys.stderr)
        return 1

    setup_logging(config.get("log_file"), config.get("log_level", "INFO"))

    controller = SessionController(
        sink=CsvEventSink(config["event_log_path"]),
        scoring_policy=get_scoring_policy(config["scoring"]),
    )

    try:
        dataset = load_dataset(config["questions_path"])
    except DatasetLoadError as e:
        log_load_error(e)
        controller.system_event(Activity.LOAD_FILE, note="Failed")
        controller.close()
        return 1
    controller.system_event(Activity.LOAD_FILE, note=Outcome.SUCCESS.value)

    enable_quiet_mode()
    try:
        players = config["players"]
        if not players:
            players = prompt_players(controller, io, config["max_players"])
        controller.initialize(players, dataset)
        io.say(f"Session {controller.session_id} started ({controller.scoring_policy.name}).")
        play(controller, io)
    except (EOFError, KeyboardInterrupt):
        io.say()
        io.say("Session aborted.")
        if controller.dataset is not None:
            controller.force_end_session()
        else:
            controller.close()
            return 1
    except InvalidArgumentError as e:
        print(f"Error: {e}", file=sys.stderr)
        controller.close()
        return 1
    finally:
        disable_quiet_mode()

    finish(controller, io, config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
