from __future__ import annotations

from pathlib import Path

from pascalfeat.pipeline.contracts import ReportAggregate

DEFAULT_REPORT_FILENAME = "pascal_feature_generation_report.txt"

TITLE = "PASCAL'S TRIANGLE FEATURE GENERATION PROJECT"
METHODOLOGY_STEPS = (
    "Polynomial features with binomial coefficients",
    "Weighted interaction terms using Pascal weights",
    "Multi-degree combinatorial features",
    "Binomial expansion-based transformations",
)

_RULE_HEAVY = "=" * 60
_RULE_LIGHT = "-" * 60


def format_report(aggregate: ReportAggregate) -> str:
    """ReportAggregate -> plain-text 리포트.

    값은 이미 반올림되어 있으므로 여기서는 고정 소수점 문자열로만 옮긴다.
    피처 수는 천 단위 구분자(,)를 붙인다.
    """
    lines: list[str] = [
        TITLE,
        _RULE_HEAVY,
        "",
        "PROJECT SUMMARY",
        f"Generated {aggregate.total_features:,}+ Pascal's Triangle-derived features",
        f"Datasets Analyzed: {aggregate.n_datasets}",
        f"Average Efficiency Gain: {aggregate.avg_efficiency_gain:.1f}%",
        f"Average Accuracy Improvement: {aggregate.avg_accuracy_improvement:.2f}%",
        "",
        "METHODOLOGY",
        _RULE_LIGHT,
        "Used Pascal's Triangle coefficients to generate:",
    ]
    lines += [f"{i}. {step}" for i, step in enumerate(METHODOLOGY_STEPS, start=1)]
    lines += ["", "DATASET RESULTS", _RULE_LIGHT]

    for i, r in enumerate(aggregate.results, start=1):
        m = r.metrics
        lines += [
            "",
            f"{i}. {r.dataset.name} - {r.dataset.problem}",
            f"   Original Features: {r.original_features:,}",
            f"   Generated Features: {r.generated_features:,}",
            f"   Baseline Accuracy: {m.baseline_accuracy:.2f}%",
            f"   Improved Accuracy: {m.improved_accuracy:.2f}%",
            f"   Efficiency Gain: {m.efficiency_gain:.1f}%",
            f"   Training Speedup: {m.training_speedup:.2f}x",
        ]

    lines += ["", "", "WORLD PROBLEMS ADDRESSED", _RULE_LIGHT]
    lines += [
        f"{i}. {r.dataset.problem} ({r.dataset.name})"
        for i, r in enumerate(aggregate.results, start=1)
    ]

    return "\n".join(lines) + "\n"


def write_report(aggregate: ReportAggregate, path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(format_report(aggregate), encoding="utf-8")
    return p
