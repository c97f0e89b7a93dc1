from __future__ import annotations

import sys
from pathlib import Path

import pytest

# repo root / src 를 pytest import 경로에 강제로 추가
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

root_str = str(ROOT)
src_str = str(SRC)

if root_str not in sys.path:
    sys.path.insert(0, root_str)

if src_str not in sys.path:
    sys.path.insert(0, src_str)

from pascalfeat.datasets.registry import DatasetSpec  # noqa: E402
from pascalfeat.metrics.contracts import DatasetMetrics  # noqa: E402


class FixedMetricsGenerator:
    """항상 같은 지표를 돌려주는 테스트용 생성기. 호출된 데이터셋 id를 기록."""

    def __init__(self, metrics: DatasetMetrics) -> None:
        self.metrics = metrics
        self.calls: list[str] = []

    def generate(self, dataset: DatasetSpec) -> DatasetMetrics:
        self.calls.append(dataset.id)
        return self.metrics


@pytest.fixture()
def fixed_metrics() -> FixedMetricsGenerator:
    return FixedMetricsGenerator(
        DatasetMetrics(
            baseline_accuracy=80.0,
            improved_accuracy=85.25,
            efficiency_gain=20.5,
            training_speedup=1.5,
        )
    )


@pytest.fixture()
def artifacts_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    artifacts = tmp_path / "artifacts"
    monkeypatch.setenv("PASCALFEAT_ARTIFACTS", str(artifacts))
    for name in (
        "PASCALFEAT_CATALOG",
        "PASCALFEAT_MAX_DEGREE",
        "PASCALFEAT_MIN_DATASETS",
        "PASCALFEAT_SEED",
        "PASCALFEAT_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return artifacts
