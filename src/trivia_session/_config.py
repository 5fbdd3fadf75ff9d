# Area: Shared
"""
trivia_session._config — Runner Configuration
=============================================

Configuration loading and validation for the command-line runner.

Precedence, lowest first: defaults, JSON config file, environment
variables (a .env file is loaded first if present), CLI flags.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import find_dotenv, load_dotenv

from ._session.scoring import SCORING_POLICIES
from .errors import InvalidArgumentError

logger = logging.getLogger("trivia_session.config")

DEFAULT_CONFIG: Dict[str, Any] = {
    "players": [],
    "scoring": "standard",
    "event_log_path": "game_event_log.csv",
    "report_path": "summary_report.txt",
    "log_file": "trivia_session.log",
    "log_level": "INFO",
    "max_players": 4,
}

# Environment variable → config key
ENV_MAPPINGS = {
    "TRIVIA_QUESTIONS_PATH": "questions_path",
    "TRIVIA_PLAYERS": "players",
    "TRIVIA_SCORING": "scoring",
    "TRIVIA_EVENT_LOG": "event_log_path",
    "TRIVIA_REPORT_PATH": "report_path",
    "TRIVIA_LOG_FILE": "log_file",
    "TRIVIA_LOG_LEVEL": "log_level",
    "TRIVIA_MAX_PLAYERS": "max_players",
}

REQUIRED_CONFIG_KEYS = [
    "questions_path",
]


def split_players(raw: str) -> List[str]:
    """Split a comma separated player list, dropping blanks."""
    return [name.strip() for name in raw.split(",") if name.strip()]


def load_config(
    config_path: Optional[str] = None,
    env_file: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build the runner config from defaults, a JSON file and the environment.

    Args:
        config_path: Optional path to a JSON config file
        env_file: Optional .env file (defaults to searching the cwd)

    Returns:
        The merged config dict

    Raises:
        InvalidArgumentError: If the config file is missing or not JSON
    """
    config: Dict[str, Any] = dict(DEFAULT_CONFIG)

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise InvalidArgumentError(f"Config file not found: {config_path}")
        try:
            with open(path, encoding="utf-8") as f:
                config.update(json.load(f))
        except json.JSONDecodeError as e:
            raise InvalidArgumentError(f"Config file is not valid JSON: {e}") from e
        logger.debug(f"Loaded config file {path}")

    load_dotenv(dotenv_path=env_file or find_dotenv(usecwd=True), override=False)

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            value: Any = os.environ[env_key]
            if config_key == "players":
                value = split_players(value)
            config[config_key] = value

    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate and normalize the runner config in place.

    Args:
        config: Configuration dict

    Raises:
        InvalidArgumentError: If required keys are missing or values are invalid
    """
    missing = [k for k in REQUIRED_CONFIG_KEYS if not config.get(k)]
    if missing:
        raise InvalidArgumentError(f"Missing required config keys: {missing}")

    try:
        config["max_players"] = int(config.get("max_players", DEFAULT_CONFIG["max_players"]))
    except (TypeError, ValueError):
        raise InvalidArgumentError(
            f"max_players must be an integer, got {config.get('max_players')!r}"
        ) from None
    if config["max_players"] < 1:
        raise InvalidArgumentError("max_players must be at least 1")

    players = config.get("players") or []
    if isinstance(players, str):
        players = split_players(players)
    if not isinstance(players, (list, tuple)):
        raise InvalidArgumentError(f"players must be a list of names, got {players!r}")
    if any(not isinstance(name, str) or not name.strip() for name in players):
        raise InvalidArgumentError(f"Player names must be non-blank strings, got {list(players)!r}")
    config["players"] = [name.strip() for name in players]
    if len(config["players"]) > config["max_players"]:
        raise InvalidArgumentError(
            f"At most {config['max_players']} players allowed, got {len(config['players'])}"
        )

    scoring = str(config.get("scoring", "")).strip().lower()
    if scoring not in SCORING_POLICIES:
        raise InvalidArgumentError(
            f"Unknown scoring policy '{config.get('scoring')}'. "
            f"Choose from: {', '.join(SCORING_POLICIES)}"
        )
    config["scoring"] = scoring
