from __future__ import annotations

from pascalfeat.features.contracts import FeatureEstimate, FeatureTypeCount
from pascalfeat.features.estimator import (
    DEFAULT_MAX_DEGREE,
    INTERACTION_CAP,
    estimate_features,
)
from pascalfeat.features.pascal import pascal_row

__all__ = [
    "DEFAULT_MAX_DEGREE",
    "INTERACTION_CAP",
    "FeatureEstimate",
    "FeatureTypeCount",
    "estimate_features",
    "pascal_row",
]
