from __future__ import annotations

# built-in catalog registration
from pascalfeat.datasets.catalog import BUILTIN_DATASETS, register_builtin_datasets
from pascalfeat.datasets.registry import (
    DatasetSpec,
    get_dataset,
    list_datasets,
    load_catalog,
    register_catalog,
    register_dataset,
    select_datasets,
    unregister_dataset,
)

__all__ = [
    "BUILTIN_DATASETS",
    "DatasetSpec",
    "get_dataset",
    "list_datasets",
    "load_catalog",
    "register_builtin_datasets",
    "register_catalog",
    "register_dataset",
    "select_datasets",
    "unregister_dataset",
]
