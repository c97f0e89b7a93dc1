from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from pascalfeat.datasets.registry import DatasetSpec


@dataclass(frozen=True)
class DatasetMetrics:
    """데이터셋별 시뮬레이션 지표. 값은 생성기에서 이미 반올림되어 들어온다.

    - baseline_accuracy / improved_accuracy: % (소수 2자리)
    - efficiency_gain: % (소수 1자리)
    - training_speedup: 배수 (소수 2자리)
    """

    baseline_accuracy: float
    improved_accuracy: float
    efficiency_gain: float
    training_speedup: float

    @property
    def accuracy_improvement(self) -> float:
        return self.improved_accuracy - self.baseline_accuracy

    def to_dict(self) -> dict[str, Any]:
        return {
            "baseline_accuracy": self.baseline_accuracy,
            "improved_accuracy": self.improved_accuracy,
            "efficiency_gain": self.efficiency_gain,
            "training_speedup": self.training_speedup,
        }


class MetricsGenerator(Protocol):
    def generate(self, dataset: DatasetSpec) -> DatasetMetrics: ...
