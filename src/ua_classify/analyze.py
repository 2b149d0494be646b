"""Classify a sample of observed User-Agent headers and summarize the result.

The sample is a JSON array of groups, each mapping header strings to the
number of times they were seen::

    [{"userAgent": "...", "count": 3, "stringCounts": {"<header>": 3}}]

Every header is parsed once. A text report lists each header with its
cleaned tokens, occurrence count and classification, and a percentage
breakdown per category is printed to the console.
"""

from __future__ import annotations

import argparse
import bz2
import json
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Sequence, TextIO

from loguru import logger
from rich.console import Console
from rich.table import Table

from .classifier import parse
from .config import Settings, load_settings
from .user_agent import UserAgent
from .utils.progress import ProgressTracker


@dataclass(frozen=True)
class SampleGroup:
    """Header strings observed for one group, with occurrence counts."""

    user_agent: str
    count: int
    string_counts: dict[str, int]


@dataclass
class Tally:
    """Occurrence counts accumulated per category."""

    groups: int = 0
    strings: int = 0
    views: int = 0
    client_types: Counter[str] = field(default_factory=Counter)
    client_names: Counter[str] = field(default_factory=Counter)
    device_types: Counter[str] = field(default_factory=Counter)
    os_names: Counter[str] = field(default_factory=Counter)
    urls: Counter[str] = field(default_factory=Counter)

    def add(self, user_agent: UserAgent, count: int) -> None:
        self.strings += 1
        self.views += count
        self.client_types[user_agent.client_type] += count
        self.client_names[user_agent.client_name] += count
        self.device_types[user_agent.device_type] += count
        self.os_names[user_agent.os_name] += count
        if user_agent.url:
            self.urls[user_agent.url] += count

    def categories(self) -> list[tuple[str, Counter[str]]]:
        return [
            ("Client Type", self.client_types),
            ("Client Name", self.client_names),
            ("Device Type", self.device_types),
            ("OS Name", self.os_names),
            ("URL", self.urls),
        ]


def _count(value: Any, where: str) -> int:
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Invalid count {value!r} in {where}")
    return value


def _parse_group(raw: Any, index: int) -> SampleGroup:
    if not isinstance(raw, dict):
        raise ValueError(f"Sample group #{index} is not an object")
    string_counts = raw.get("stringCounts")
    if not isinstance(string_counts, dict):
        raise ValueError(f"Sample group #{index} has no stringCounts object")
    return SampleGroup(
        user_agent=str(raw.get("userAgent", "")),
        count=_count(raw.get("count", 0), f"group #{index}"),
        string_counts={
            str(header): _count(count, f"group #{index}")
            for header, count in string_counts.items()
        },
    )


def load_samples(path: Path) -> list[SampleGroup]:
    """Load grouped header counts from a JSON file.

    Parameters
    ----------
    path : Path
        JSON file; a ``.bz2`` suffix is decompressed on the fly.

    Returns
    -------
    list[SampleGroup]
        Groups in file order.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ValueError
        If the content is not a JSON array of sample groups.
    RuntimeError
        If the file cannot be read.
    """
    if not path.exists():
        raise FileNotFoundError(f"Sample file not found: {path}")
    if not path.is_file():
        raise ValueError(f"Sample path is not a file: {path}")

    opener = bz2.open if path.suffix == ".bz2" else open
    try:
        with opener(path, "rt", encoding="utf-8") as fh:
            data = json.load(fh)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in sample file {path}: {e}") from e
    except OSError as e:
        raise RuntimeError(f"Failed to read sample file {path}: {e}") from e

    if not isinstance(data, list):
        raise ValueError(f"Sample file must contain a JSON array: {path}")
    return [_parse_group(raw, index) for index, raw in enumerate(data)]


def format_entry(user_agent: UserAgent, count: int) -> str:
    """Report entry: header, tokens with count, classification, blank line."""
    return (
        f"{user_agent.header}\n"
        f"{user_agent.cleaned}\t({count} occurrences)\n"
        f"{user_agent}\n\n"
    )


def analyze(groups: Iterable[SampleGroup], report: TextIO) -> Tally:
    """Parse every header in ``groups``, writing entries to ``report``."""
    tally = Tally()
    for group in groups:
        tally.groups += 1
        for header, count in group.string_counts.items():
            user_agent = parse(header)
            tally.add(user_agent, count)
            report.write(format_entry(user_agent, count))
    return tally


def write_report(groups: Sequence[SampleGroup], report_file: Path) -> Tally:
    """Run :func:`analyze` into ``report_file``, creating its directory."""
    try:
        report_file.parent.mkdir(parents=True, exist_ok=True)
        with report_file.open("w", encoding="utf-8") as report:
            return analyze(groups, report)
    except OSError as e:
        raise RuntimeError(f"Failed to write report {report_file}: {e}") from e


def render_counts(counts: Counter[str], title: str) -> Table:
    """Build a Views/Percent table for one category, sorted by key."""
    table = Table(title=title, title_justify="left")
    table.add_column("Views", justify="right")
    table.add_column("Percent", justify="right")
    table.add_column(title)

    total = sum(counts.values())
    for key in sorted(counts):
        percent = counts[key] / total * 100 if total else 0.0
        table.add_row(str(counts[key]), f"{percent:.2f}", key)
    table.add_row(str(total), "100.00" if total else "0.00", "Total", style="bold")
    return table


def print_summary(console: Console, tally: Tally) -> None:
    console.print(f"User-Agent Count: {tally.groups}")
    console.print(f"User-Agent String Count: {tally.strings}")
    console.print(f"User-Agent View Count: {tally.views}")
    for title, counts in tally.categories():
        console.print()
        console.print(render_counts(counts, title))


def parse_args(
    argv: Sequence[str] | None, settings: Settings
) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "sample_file",
        nargs="?",
        type=Path,
        default=settings.sample_file,
        help=f"Grouped header counts (default: {settings.sample_file})",
    )
    parser.add_argument(
        "-o",
        "--report",
        dest="report_file",
        type=Path,
        default=settings.report_file,
        help=f"Text report to write (default: {settings.report_file})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=settings.verbose,
        help="Log progress at INFO level",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        default=settings.progress,
        help="Show a progress display",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv, load_settings())
    console = Console()
    try:
        with ProgressTracker(
            total_steps=2,
            enabled=args.progress,
            verbose=args.verbose,
            console=console,
        ) as tracker:
            groups = load_samples(args.sample_file)
            tracker.step(f"Loaded {len(groups)} sample groups from {args.sample_file}")
            tally = write_report(groups, args.report_file)
            tracker.step(f"Wrote {tally.strings} entries to {args.report_file}")
        print_summary(console, tally)
    except (FileNotFoundError, ValueError, RuntimeError) as e:
        logger.error("Analysis failed: {}", e)
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
