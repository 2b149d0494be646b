"""Logging and progress display for the analysis driver.

Rich renders the progress bar at the bottom of the console while loguru
messages scroll above it.
"""

from __future__ import annotations

import sys

from loguru import logger
from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

LOG_FORMAT = (
    "<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | <level>{message}</level>"
)


def configure_logging(verbose: bool, console: Console | None = None) -> None:
    """Send loguru output to stderr, or through ``console`` when given."""
    logger.remove()
    level = "INFO" if verbose else "WARNING"
    if console is not None:
        logger.add(
            lambda msg: console.print(msg.rstrip()),
            level=level,
            format=LOG_FORMAT,
            colorize=True,
        )
    else:
        logger.add(sys.stderr, level=level, format=LOG_FORMAT)


class ProgressTracker:
    """Step counter for the driver, shown as a Rich progress bar.

    Parameters
    ----------
    total_steps : int
        Number of steps expected.
    enabled : bool
        Whether to show the progress display. When disabled, steps are only
        logged.
    verbose : bool, optional
        Whether to output INFO level logs. Defaults to False.
    description : str, optional
        Text shown next to the bar. Defaults to "Analyzing User-Agents".
    console : Console | None, optional
        Console to draw on. A new one is created when omitted.
    """

    def __init__(
        self,
        total_steps: int,
        enabled: bool,
        verbose: bool = False,
        description: str = "Analyzing User-Agents",
        console: Console | None = None,
    ):
        self.enabled = enabled
        self.verbose = verbose
        self.total_steps = total_steps
        self.current_step = 0
        self.description = description

        self.console = console or Console()
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(complete_style="green", finished_style="bold green"),
            MofNCompleteColumn(),
            TextColumn("•"),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
        )
        self.task_id: TaskID | None = None

    def __enter__(self) -> ProgressTracker:
        if self.enabled:
            self.progress.start()
            self.task_id = self.progress.add_task(
                self.description, total=self.total_steps
            )
        configure_logging(self.verbose, self.console if self.enabled else None)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> bool:
        if self.enabled:
            self.progress.stop()
        return False

    def step(self, message: str, advance: int = 1) -> None:
        """Advance progress and log the step."""
        self.current_step += advance
        if self.enabled and self.task_id is not None:
            self.progress.update(self.task_id, advance=advance, description=message)
        logger.info("[{}/{}] {}", self.current_step, self.total_steps, message)
