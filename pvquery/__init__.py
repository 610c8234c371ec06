"""SQL text analysis for the log-analytics query editor."""

__version__ = "0.1.0"
