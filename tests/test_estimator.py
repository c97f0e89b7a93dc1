from __future__ import annotations

import pytest

from pascalfeat.common.errors import InvalidArgumentError
from pascalfeat.features import INTERACTION_CAP, estimate_features


def _counts(est) -> dict[str, int]:
    return {b.label: b.count for b in est.breakdown}


def test_iris_like_case_matches_closed_form() -> None:
    est = estimate_features(4, 4)

    assert [(b.label, b.count) for b in est.breakdown] == [
        ("Original", 4),
        ("Degree 2 Polynomial", 20),
        ("Degree 2 Interactions", 16),
        ("Degree 2 Binomial", 16),
        ("Degree 3 Polynomial", 30),
        ("Degree 3 Interactions", 64),
        ("Degree 3 Binomial", 32),
        ("Degree 4 Polynomial", 40),
        ("Degree 4 Interactions", 256),
        ("Degree 4 Binomial", 64),
    ]
    assert est.total == 542


def test_default_max_degree_is_four() -> None:
    assert estimate_features(4) == estimate_features(4, 4)


@pytest.mark.parametrize(
    "n_features, expected_total",
    [(11, 4365), (8, 3132), (30, 9955), (13, 5365), (20, 6870)],
)
def test_catalog_totals(n_features: int, expected_total: int) -> None:
    assert estimate_features(n_features).total == expected_total


@pytest.mark.parametrize("f", [0, 1, 2, 4, 7, 13, 30, 100])
@pytest.mark.parametrize("m", [1, 2, 3, 4, 6])
def test_total_equals_breakdown_sum(f: int, m: int) -> None:
    est = estimate_features(f, m)

    assert est.total == sum(b.count for b in est.breakdown)
    assert len(est.breakdown) == 1 + 3 * (m - 1)
    assert all(b.count >= 0 for b in est.breakdown)


@pytest.mark.parametrize("f", [0, 3, 6, 12, 13, 44, 45, 100])
def test_interactions_are_capped(f: int) -> None:
    counts = _counts(estimate_features(f, 6))
    for d in range(2, 7):
        c = counts[f"Degree {d} Interactions"]
        assert c <= INTERACTION_CAP
        if f**d <= INTERACTION_CAP:
            assert c == f**d
        else:
            assert c == INTERACTION_CAP


def test_zero_features_yield_zero_counts() -> None:
    est = estimate_features(0, 4)
    assert est.total == 0
    assert all(b.count == 0 for b in est.breakdown)


def test_max_degree_one_is_original_only() -> None:
    est = estimate_features(9, 1)
    assert [(b.label, b.count) for b in est.breakdown] == [("Original", 9)]
    assert est.total == 9


def test_estimator_is_idempotent() -> None:
    a = estimate_features(17, 5)
    b = estimate_features(17, 5)
    assert a == b
    assert a.to_dict() == b.to_dict()


@pytest.mark.parametrize(
    "f, m",
    [(-1, 4), (4, 0), (4, -2), (True, 4), (4.0, 4), (4, 2.5)],
)
def test_out_of_contract_inputs_are_rejected(f, m) -> None:
    with pytest.raises(InvalidArgumentError):
        estimate_features(f, m)


def test_invalid_argument_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        estimate_features(-3)
