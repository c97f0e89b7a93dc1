from __future__ import annotations

from pascalfeat.datasets import select_datasets
from pascalfeat.pipeline import build_aggregate, estimate
from pascalfeat.reporting import breakdown_frame, breakdown_pivot, results_frame
from pascalfeat.reporting.tables import RESULT_COLUMNS


def test_results_frame(fixed_metrics) -> None:
    agg = estimate(select_datasets(["iris", "credit"]), metrics=fixed_metrics)
    df = results_frame(agg)

    assert list(df.columns) == RESULT_COLUMNS
    assert df["dataset_id"].tolist() == ["iris", "credit"]
    assert df["generated_features"].tolist() == [542, 6870]
    assert df["accuracy_improvement"].tolist() == [5.25, 5.25]


def test_breakdown_frame_sums_match_totals(fixed_metrics) -> None:
    agg = estimate(select_datasets(["iris", "credit"]), metrics=fixed_metrics)
    df = breakdown_frame(agg)

    assert len(df) == 20
    sums = df.groupby("dataset_id")["count"].sum().to_dict()
    assert sums == {"iris": 542, "credit": 6870}


def test_breakdown_pivot_keeps_breakdown_order(fixed_metrics) -> None:
    agg = estimate(select_datasets(["wine", "iris"]), 3, metrics=fixed_metrics)
    wide = breakdown_pivot(agg)

    assert list(wide.columns) == ["wine", "iris"]
    assert list(wide.index) == [
        "Original",
        "Degree 2 Polynomial",
        "Degree 2 Interactions",
        "Degree 2 Binomial",
        "Degree 3 Polynomial",
        "Degree 3 Interactions",
        "Degree 3 Binomial",
    ]
    assert int(wide.loc["Degree 3 Interactions", "wine"]) == 1331


def test_empty_frames() -> None:
    agg = build_aggregate([])
    assert results_frame(agg).empty
    assert breakdown_frame(agg).empty
    assert breakdown_pivot(agg).empty
