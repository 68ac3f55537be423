"""ZenHub Export - Reconciles GitHub issues with ZenHub pipelines into Jira CSV files."""

__version__ = "0.1.0"
