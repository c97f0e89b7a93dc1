from __future__ import annotations

from pascalfeat.datasets.registry import DatasetSpec, register_dataset

BUILTIN_DATASETS: tuple[DatasetSpec, ...] = (
    DatasetSpec("iris", "Iris Classification", "Species classification", 4, 150),
    DatasetSpec("wine", "Wine Quality", "Quality prediction", 11, 1599),
    DatasetSpec("diabetes", "Diabetes Prediction", "Disease diagnosis", 8, 768),
    DatasetSpec("breast_cancer", "Breast Cancer", "Cancer detection", 30, 569),
    DatasetSpec("housing", "Housing Prices", "Price prediction", 13, 506),
    DatasetSpec("heart", "Heart Disease", "Disease prediction", 13, 303),
    DatasetSpec("credit", "Credit Risk", "Default prediction", 20, 1000),
)


def register_builtin_datasets(*, overwrite: bool = True) -> None:
    for spec in BUILTIN_DATASETS:
        register_dataset(spec, overwrite=overwrite)


# built-in
register_builtin_datasets()
