from __future__ import annotations

import numpy as np

from pascalfeat.common.numbers import round_half_up
from pascalfeat.datasets.registry import DatasetSpec
from pascalfeat.metrics.contracts import DatasetMetrics


class SimulatedMetricsGenerator:
    """난수 기반 지표 생성기. 실제 학습/평가는 하지 않는다.

    seed를 주면 같은 순서의 호출에 대해 같은 값이 나온다.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def generate(self, dataset: DatasetSpec) -> DatasetMetrics:
        u = self._rng.random(4)

        baseline = 75.0 + float(u[0]) * 15.0
        improved = baseline + (3.0 + float(u[1]) * 7.0)
        efficiency = 15.0 + float(u[2]) * 25.0
        speedup = 1.2 + float(u[3]) * 1.8

        return DatasetMetrics(
            baseline_accuracy=round_half_up(baseline, 2),
            improved_accuracy=round_half_up(improved, 2),
            efficiency_gain=round_half_up(efficiency, 1),
            training_speedup=round_half_up(speedup, 2),
        )
