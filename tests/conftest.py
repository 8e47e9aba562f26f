"""
Pytest configuration and fixtures for hilbert_geo tests.
"""

import random
from typing import List, Tuple

import pytest


@pytest.fixture
def chicago() -> Tuple[float, float]:
    """Longitude/latitude of Chicago."""
    return (-87.65, 41.85)


@pytest.fixture
def random_points() -> List[Tuple[float, float]]:
    """Reproducible sample of points spread over the whole globe."""
    rng = random.Random(4242)
    return [(rng.uniform(-180, 180), rng.uniform(-90, 90)) for _ in range(200)]
