"""Environment configuration for the sample analysis driver.

Values are read from the process environment after loading a ``.env`` file
when one is present. Command-line flags take precedence over these values.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DEFAULT_SAMPLE_FILE = Path("sample_data/user_agents.json")
DEFAULT_REPORT_FILE = Path("sample_data/user_agents.txt")


def env_path(name: str, default: Path) -> Path:
    value = os.getenv(name)
    return Path(value).expanduser() if value else default


def env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Driver settings.

    Attributes
    ----------
    sample_file : Path
        JSON (optionally ``.bz2``) file of grouped header counts
    report_file : Path
        Text report written for every parsed header
    verbose : bool
        Log at INFO instead of WARNING
    progress : bool
        Show the Rich progress display
    """

    sample_file: Path = DEFAULT_SAMPLE_FILE
    report_file: Path = DEFAULT_REPORT_FILE
    verbose: bool = False
    progress: bool = False


def load_settings(dotenv: bool = True) -> Settings:
    """Build settings from ``UA_*`` environment variables."""
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    return Settings(
        sample_file=env_path("UA_SAMPLE_FILE", DEFAULT_SAMPLE_FILE),
        report_file=env_path("UA_REPORT_FILE", DEFAULT_REPORT_FILE),
        verbose=env_bool("UA_VERBOSE", False),
        progress=env_bool("UA_PROGRESS", False),
    )
