from __future__ import annotations

from pascalfeat.common.errors import InvalidArgumentError


def pascal_row(n: int) -> list[int]:
    """Row ``n`` of Pascal's triangle: ``[C(n, 0), ..., C(n, n)]``.

    C(n, i-1) * (n - i + 1) is always divisible by i, so the running product
    stays exact in integer arithmetic.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgumentError(f"degree must be an int, got {type(n).__name__}")
    if n < 0:
        raise InvalidArgumentError(f"degree must be >= 0, got {n}")

    row = [1]
    for i in range(1, n + 1):
        row.append(row[i - 1] * (n - i + 1) // i)
    return row
