from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from pascalfeat.common.numbers import round_half_up
from pascalfeat.datasets.registry import DatasetSpec
from pascalfeat.features.estimator import (
    DEFAULT_MAX_DEGREE,
    check_max_degree,
    estimate_features,
)
from pascalfeat.metrics.contracts import MetricsGenerator
from pascalfeat.pipeline.contracts import DatasetResult, ReportAggregate

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]


def build_aggregate(
    results: Sequence[DatasetResult], *, max_degree: int = DEFAULT_MAX_DEGREE
) -> ReportAggregate:
    """DatasetResult 목록 -> ReportAggregate. 결과가 없으면 평균은 0.0."""
    n = len(results)
    total = sum(r.generated_features for r in results)

    if n:
        avg_eff = round_half_up(sum(r.metrics.efficiency_gain for r in results) / n, 1)
        avg_acc = round_half_up(sum(r.metrics.accuracy_improvement for r in results) / n, 2)
    else:
        avg_eff = 0.0
        avg_acc = 0.0

    return ReportAggregate(
        total_features=total,
        results=tuple(results),
        avg_efficiency_gain=avg_eff,
        avg_accuracy_improvement=avg_acc,
        max_degree=max_degree,
    )


def estimate(
    datasets: Sequence[DatasetSpec],
    max_degree: int = DEFAULT_MAX_DEGREE,
    *,
    metrics: MetricsGenerator,
    on_progress: ProgressCallback | None = None,
) -> ReportAggregate:
    """선택된 순서대로 데이터셋마다 추정기를 한 번씩 호출하고 같은 순서로 집계.

    on_progress에는 각 데이터셋 처리 전 (i + 0.5) / n * 100, 마지막에 100.0이 전달된다.
    """
    check_max_degree(max_degree)
    n = len(datasets)
    results: list[DatasetResult] = []

    for i, ds in enumerate(datasets):
        if on_progress is not None:
            on_progress((i + 0.5) / n * 100.0)

        est = estimate_features(ds.n_features, max_degree)
        m = metrics.generate(ds)
        logger.debug("estimated %s: %d features", ds.id, est.total)
        results.append(DatasetResult(dataset=ds, estimate=est, metrics=m))

    if on_progress is not None:
        on_progress(100.0)

    return build_aggregate(results, max_degree=max_degree)
