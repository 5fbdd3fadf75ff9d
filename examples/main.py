"""
main.py — Drive a trivia session from code
==========================================

Plays a short scripted session against questions.json, printing every
event to the terminal and writing the CSV event log and summary report
next to this file.

    python main.py

The script will:
  1. Load the questions
  2. Play a few turns for two players
  3. Switch to a custom scoring policy halfway through
  4. Finish the session and write the report
"""

import logging
from pathlib import Path

from trivia_session import (
    Activity,
    ConsoleEventSink,
    ScoringPolicy,
    SessionController,
    load_dataset,
    write_summary_report,
)

HERE = Path(__file__).parent

# ── Setup logging (so you can see what's happening) ──
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    datefmt="%H:%M:%S",
)


class DoublePoints(ScoringPolicy):
    """Correct answers count twice, wrong ones cost the normal value."""

    name = "Double Points"

    def calculate_score(self, value, correct):
        return 2 * value if correct else -value


# ── Turns to play: (category, value, answer) ──
SCRIPT = [
    ("Science", 100, "A"),
    ("History", 100, "C"),
    ("Science", 200, "B"),
    ("History", 200, "B"),
]

controller = SessionController(sink=ConsoleEventSink())
dataset = load_dataset(HERE / "questions.json")
controller.system_event(Activity.LOAD_FILE, note="Success")
controller.initialize(["Alice", "Bob"], dataset)

for turn, (category, value, answer) in enumerate(SCRIPT):
    if turn == 2:
        controller.set_scoring_policy(DoublePoints())
    controller.answer_question(category, value, answer)
    if controller.check_and_end_session():
        break
    controller.advance_turn()

controller.force_end_session()
write_summary_report(controller, HERE / "summary_report.txt")
controller.system_event(Activity.GENERATE_REPORT, note="Success")
controller.close()

print(controller.game_result_text())
