from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, ndigits: int) -> float:
    """소수점 ndigits 자리 반올림. 정확히 .5인 경우 0에서 먼 쪽으로 올린다.

    내장 round()는 짝수 쪽으로 맞추므로(20.25 -> 20.2) 리포트 수치에는 쓰지 않는다.
    """
    q = Decimal(1).scaleb(-ndigits)
    return float(Decimal(value).quantize(q, rounding=ROUND_HALF_UP))
