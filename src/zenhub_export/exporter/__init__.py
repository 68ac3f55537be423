"""Exporter - Reconciles board pipelines with issues and writes Jira CSV files."""

from zenhub_export.exporter.exceptions import ExportError
from zenhub_export.exporter.exporter import BoardSource, Exporter, IssueSource
from zenhub_export.exporter.formatter import CSV_HEADERS, export_row, issue_type, padded_labels
from zenhub_export.exporter.models import ExportedFile, ExportResult
from zenhub_export.exporter.reconciler import bare_pipeline_name, priority_for, reconcile

__all__ = [
    "CSV_HEADERS",
    "BoardSource",
    "ExportError",
    "ExportResult",
    "ExportedFile",
    "Exporter",
    "IssueSource",
    "bare_pipeline_name",
    "export_row",
    "issue_type",
    "padded_labels",
    "priority_for",
    "reconcile",
]
