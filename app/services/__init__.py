"""
VISA STATS - Services __init__.py
app/services/__init__.py

Exporta todos los servicios para fácil importación
"""

from app.services.record_store import RecordStore
from app.services.submission import SubmissionService, compute_waiting_days
from app.services.aggregation import (
    StatsFilter,
    filter_records,
    summarize,
    series_by_date,
    distinct_values,
)
from app.services.dashboard import apply_filter, build_dashboard
from app.services.spreadsheet import build_workbook, write_snapshot, export_filename
from app.services.transfer import parse_csv, import_csv, write_csv, backup_csv

__all__ = [
    "RecordStore",
    "SubmissionService",
    "compute_waiting_days",
    "StatsFilter",
    "filter_records",
    "summarize",
    "series_by_date",
    "distinct_values",
    "apply_filter",
    "build_dashboard",
    "build_workbook",
    "write_snapshot",
    "export_filename",
    "parse_csv",
    "import_csv",
    "write_csv",
    "backup_csv",
]
