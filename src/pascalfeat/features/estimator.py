from __future__ import annotations

from pascalfeat.common.errors import InvalidArgumentError
from pascalfeat.features.contracts import FeatureEstimate, FeatureTypeCount
from pascalfeat.features.pascal import pascal_row

DEFAULT_MAX_DEGREE = 4
INTERACTION_CAP = 2000


def _check_int(name: str, value: int, *, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")
    if value < minimum:
        raise InvalidArgumentError(f"{name} must be >= {minimum}, got {value}")


def check_max_degree(max_degree: int) -> None:
    _check_int("max_degree", max_degree, minimum=1)


def estimate_features(n_features: int, max_degree: int = DEFAULT_MAX_DEGREE) -> FeatureEstimate:
    """원본 피처 수와 최대 차수로 합성 피처 수와 유형별 내역을 계산.

    degree 1은 원본 피처만 의미하므로 max_degree=1이면 "Original" 한 항목만 나온다.
    """
    _check_int("n_features", n_features, minimum=0)
    check_max_degree(max_degree)

    f = n_features
    breakdown: list[FeatureTypeCount] = [FeatureTypeCount("Original", f)]

    pairs = (f * (f + 1)) // 2
    for degree in range(2, max_degree + 1):
        row = pascal_row(degree)

        breakdown.append(FeatureTypeCount(f"Degree {degree} Polynomial", pairs * degree))
        breakdown.append(
            FeatureTypeCount(f"Degree {degree} Interactions", min(f**degree, INTERACTION_CAP))
        )
        breakdown.append(FeatureTypeCount(f"Degree {degree} Binomial", sum(row) * f))

    total = sum(b.count for b in breakdown)
    return FeatureEstimate(total=total, breakdown=tuple(breakdown))
