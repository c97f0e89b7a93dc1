from __future__ import annotations

from pascalfeat.metrics.contracts import DatasetMetrics, MetricsGenerator
from pascalfeat.metrics.simulated import SimulatedMetricsGenerator

__all__ = [
    "DatasetMetrics",
    "MetricsGenerator",
    "SimulatedMetricsGenerator",
]
