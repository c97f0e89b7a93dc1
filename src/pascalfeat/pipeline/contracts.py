from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pascalfeat.datasets.registry import DatasetSpec
from pascalfeat.features.contracts import FeatureEstimate
from pascalfeat.metrics.contracts import DatasetMetrics


@dataclass(frozen=True)
class DatasetResult:
    dataset: DatasetSpec
    estimate: FeatureEstimate
    metrics: DatasetMetrics

    @property
    def original_features(self) -> int:
        return self.dataset.n_features

    @property
    def generated_features(self) -> int:
        return self.estimate.total

    def to_dict(self) -> dict[str, Any]:
        return {
            "dataset": self.dataset.to_dict(),
            "original_features": self.original_features,
            "generated_features": self.generated_features,
            "breakdown": [b.to_dict() for b in self.estimate.breakdown],
            "metrics": self.metrics.to_dict(),
        }


@dataclass(frozen=True)
class ReportAggregate:
    """리포트 입력. DatasetResult 목록에서만 파생된다(독립적인 상태 없음)."""

    total_features: int
    results: tuple[DatasetResult, ...]
    avg_efficiency_gain: float
    avg_accuracy_improvement: float
    max_degree: int

    @property
    def n_datasets(self) -> int:
        return len(self.results)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_features": self.total_features,
            "n_datasets": self.n_datasets,
            "avg_efficiency_gain": self.avg_efficiency_gain,
            "avg_accuracy_improvement": self.avg_accuracy_improvement,
            "max_degree": self.max_degree,
            "results": [r.to_dict() for r in self.results],
        }
