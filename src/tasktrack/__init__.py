"""tasktrack - task tracking with timers and JSON storage."""

__version__ = "0.1.0"
