from __future__ import annotations

from pascalfeat.pipeline.aggregate import build_aggregate, estimate
from pascalfeat.pipeline.contracts import DatasetResult, ReportAggregate

__all__ = [
    "DatasetResult",
    "ReportAggregate",
    "build_aggregate",
    "estimate",
]
