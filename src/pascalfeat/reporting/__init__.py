from __future__ import annotations

from pascalfeat.reporting.report import DEFAULT_REPORT_FILENAME, format_report, write_report
from pascalfeat.reporting.tables import breakdown_frame, breakdown_pivot, results_frame

__all__ = [
    "DEFAULT_REPORT_FILENAME",
    "breakdown_frame",
    "breakdown_pivot",
    "format_report",
    "results_frame",
    "write_report",
]
