from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FeatureTypeCount:
    label: str
    count: int

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "count": self.count}


@dataclass(frozen=True)
class FeatureEstimate:
    """피처 수 추정 결과.

    - total: breakdown count의 합과 항상 같다
    - breakdown: Original, 그리고 degree별 Polynomial/Interactions/Binomial 순서
    """

    total: int
    breakdown: tuple[FeatureTypeCount, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "breakdown": [b.to_dict() for b in self.breakdown],
        }
