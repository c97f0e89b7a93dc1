from __future__ import annotations

import pandas as pd

from pascalfeat.common.numbers import round_half_up
from pascalfeat.pipeline.contracts import ReportAggregate

RESULT_COLUMNS = [
    "dataset_id",
    "dataset",
    "problem",
    "original_features",
    "generated_features",
    "baseline_accuracy",
    "improved_accuracy",
    "accuracy_improvement",
    "efficiency_gain",
    "training_speedup",
]


def results_frame(aggregate: ReportAggregate) -> pd.DataFrame:
    rows = []
    for r in aggregate.results:
        m = r.metrics
        rows.append(
            {
                "dataset_id": r.dataset.id,
                "dataset": r.dataset.name,
                "problem": r.dataset.problem,
                "original_features": r.original_features,
                "generated_features": r.generated_features,
                "baseline_accuracy": m.baseline_accuracy,
                "improved_accuracy": m.improved_accuracy,
                "accuracy_improvement": round_half_up(m.accuracy_improvement, 2),
                "efficiency_gain": m.efficiency_gain,
                "training_speedup": m.training_speedup,
            }
        )
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def breakdown_frame(aggregate: ReportAggregate) -> pd.DataFrame:
    """long format: 데이터셋 x 피처 유형. position은 breakdown 내 순서."""
    rows = [
        {
            "dataset_id": r.dataset.id,
            "position": pos,
            "feature_type": b.label,
            "count": b.count,
        }
        for r in aggregate.results
        for pos, b in enumerate(r.estimate.breakdown)
    ]
    df = pd.DataFrame(rows, columns=["dataset_id", "position", "feature_type", "count"])
    return df.astype({"position": "int64", "count": "int64"})


def breakdown_pivot(aggregate: ReportAggregate) -> pd.DataFrame:
    """feature_type(행, breakdown 순서 유지) x dataset_id(열) 카운트 표."""
    long = breakdown_frame(aggregate)
    if long.empty:
        return pd.DataFrame()

    order = list(dict.fromkeys(long.sort_values("position")["feature_type"]))
    wide = long.pivot(index="feature_type", columns="dataset_id", values="count")
    wide = wide.reindex(index=order, columns=[r.dataset.id for r in aggregate.results])
    return wide.fillna(0).astype("int64")
