from __future__ import annotations

from pathlib import Path

from pascalfeat.datasets import BUILTIN_DATASETS, select_datasets
from pascalfeat.pipeline import build_aggregate, estimate
from pascalfeat.reporting import format_report, write_report

EXPECTED_IRIS_REPORT = """\
PASCAL'S TRIANGLE FEATURE GENERATION PROJECT
============================================================

PROJECT SUMMARY
Generated 542+ Pascal's Triangle-derived features
Datasets Analyzed: 1
Average Efficiency Gain: 20.5%
Average Accuracy Improvement: 5.25%

METHODOLOGY
------------------------------------------------------------
Used Pascal's Triangle coefficients to generate:
1. Polynomial features with binomial coefficients
2. Weighted interaction terms using Pascal weights
3. Multi-degree combinatorial features
4. Binomial expansion-based transformations

DATASET RESULTS
------------------------------------------------------------

1. Iris Classification - Species classification
   Original Features: 4
   Generated Features: 542
   Baseline Accuracy: 80.00%
   Improved Accuracy: 85.25%
   Efficiency Gain: 20.5%
   Training Speedup: 1.50x


WORLD PROBLEMS ADDRESSED
------------------------------------------------------------
1. Species classification (Iris Classification)
"""


def test_single_dataset_report_is_exact(fixed_metrics) -> None:
    agg = estimate(select_datasets(["iris"]), metrics=fixed_metrics)
    assert format_report(agg) == EXPECTED_IRIS_REPORT


def test_report_uses_thousands_separators(fixed_metrics) -> None:
    agg = estimate(list(BUILTIN_DATASETS), metrics=fixed_metrics)
    text = format_report(agg)

    assert "Generated 35,594+ Pascal's Triangle-derived features" in text
    assert "Datasets Analyzed: 7" in text
    assert "   Generated Features: 9,955" in text
    assert "4. Cancer detection (Breast Cancer)" in text
    assert "7. Default prediction (Credit Risk)" in text


def test_report_sections_are_in_order(fixed_metrics) -> None:
    text = format_report(estimate(select_datasets(["wine", "heart"]), metrics=fixed_metrics))
    positions = [
        text.index(h)
        for h in ("PROJECT SUMMARY", "METHODOLOGY", "DATASET RESULTS", "WORLD PROBLEMS ADDRESSED")
    ]
    assert positions == sorted(positions)
    assert text.index("1. Wine Quality - Quality prediction") < text.index(
        "2. Heart Disease - Disease prediction"
    )


def test_empty_aggregate_report() -> None:
    text = format_report(build_aggregate([]))

    assert "Generated 0+ Pascal's Triangle-derived features" in text
    assert "Datasets Analyzed: 0" in text
    assert "Average Efficiency Gain: 0.0%" in text
    assert "Average Accuracy Improvement: 0.00%" in text
    assert text.endswith("WORLD PROBLEMS ADDRESSED\n" + "-" * 60 + "\n")


def test_write_report_is_utf8(tmp_path: Path, fixed_metrics) -> None:
    agg = estimate(select_datasets(["iris"]), metrics=fixed_metrics)
    p = write_report(agg, tmp_path / "out" / "report.txt")

    assert p.read_bytes() == EXPECTED_IRIS_REPORT.encode("utf-8")
