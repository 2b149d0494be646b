"""Utility modules for the sample analysis driver."""

from .progress import ProgressTracker, configure_logging

__all__ = ["ProgressTracker", "configure_logging"]
