from __future__ import annotations

import pytest

from listing import shipping as SH
from listing.draft import Step5


def test_volumetric_weight_of_30cm_cube() -> None:
    w = SH.weights(Step5(package_weight=2, package_length=30, package_width=30, package_height=30))
    assert w.volumetric == pytest.approx(5.4)
    assert w.chargeable == pytest.approx(5.4)
    assert w.actual == 2


def test_actual_weight_wins_when_heavier() -> None:
    w = SH.weights(Step5(package_weight=8, package_length=30, package_width=30, package_height=30))
    assert w.chargeable == 8


def test_missing_dimension_means_no_volumetric_weight() -> None:
    assert SH.volumetric_weight(30, 0, 30) == 0
    w = SH.weights(Step5(package_weight=1.5, package_length=30, package_height=30))
    assert w.chargeable == 1.5


def test_custom_divisor() -> None:
    assert SH.volumetric_weight(10, 10, 10, divisor=1000) == pytest.approx(1.0)
