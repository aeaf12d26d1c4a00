"""
Unit tests for the distance metrics.
"""

import math

import pytest

from gridgraph.distance import METRICS, manhattan, octile, pythagoras


def test_pythagoras():
    assert pythagoras(3, 4) == 5.0
    assert pythagoras(-3, -4) == 5.0
    assert pythagoras(0, 0) == 0.0


def test_manhattan():
    assert manhattan(3, -4) == 7
    assert manhattan(0, 0) == 0


def test_octile_between_manhattan_and_pythagoras():
    assert octile(1, 1) == pytest.approx(math.sqrt(2))
    assert octile(3, 0) == 3
    assert pythagoras(2, 5) <= octile(2, 5) <= manhattan(2, 5)


def test_metric_table():
    assert set(METRICS) == {"pythagoras", "manhattan", "octile", "zero"}
    assert METRICS["zero"](10, 10) == 0.0
