"""Terminal tracker for sports activities, statistics, charts and goals."""

__version__ = "1.0.0"