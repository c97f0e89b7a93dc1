from __future__ import annotations


class InvalidArgumentError(ValueError):
    """입력값이 계약 범위를 벗어난 경우(음수 피처 수, max_degree < 1 등)."""
