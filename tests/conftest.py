"""Pytest configuration and shared fixtures."""

import json
import os
import sys
from pathlib import Path

import pytest

# Allow running the suite from a checkout without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

GOOGLEBOT = "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"
FIREFOX = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:102.0) Gecko/20100101 Firefox/102.0"
)
FACEBOOK = "facebookexternalhit/1.1"


@pytest.fixture
def sample_groups_data():
    """Raw JSON content of a small grouped sample."""
    return [
        {
            "userAgent": "Googlebot",
            "count": 5,
            "versionCounts": {"2.1": 5},
            "stringCounts": {GOOGLEBOT: 5},
        },
        {
            "userAgent": "Firefox",
            "count": 4,
            "stringCounts": {FIREFOX: 3, f"'{FIREFOX}'": 1},
        },
        {
            "userAgent": "FacebookBot",
            "count": 1,
            "stringCounts": {FACEBOOK: 1},
        },
    ]


@pytest.fixture
def sample_file(tmp_path: Path, sample_groups_data) -> Path:
    """Sample written to a JSON file."""
    path = tmp_path / "user_agents.json"
    path.write_text(json.dumps(sample_groups_data), encoding="utf-8")
    return path


SETTINGS_VARIABLES = ("UA_SAMPLE_FILE", "UA_REPORT_FILE", "UA_VERBOSE", "UA_PROGRESS")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep UA_* settings out of tests, including values loaded from .env."""
    for name in SETTINGS_VARIABLES:
        monkeypatch.delenv(name, raising=False)
    yield
    for name in SETTINGS_VARIABLES:
        os.environ.pop(name, None)
