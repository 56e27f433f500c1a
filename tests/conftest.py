"""Shared pytest fixtures."""

import os

import pytest
from hypothesis import HealthCheck, settings

from kruskal import Edge

settings.register_profile(
    "ci",
    max_examples=200,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def square_with_diagonal() -> list[Edge]:
    """Four vertices in a cycle 0-1-2-3 plus the 0-2 chord."""
    return [
        Edge(0, 1, 1),
        Edge(1, 2, 2),
        Edge(2, 3, 3),
        Edge(0, 3, 10),
        Edge(0, 2, 4),
    ]


@pytest.fixture
def two_components() -> list[Edge]:
    return [Edge(0, 1, 1), Edge(2, 3, 1)]


@pytest.fixture
def backyard_text() -> str:
    return (
        "3 3\n"
        "5\n"
        "(0,0) (0,1) 4\n"
        "(0,1) (1,1) 1\n"
        "(1,1) (2,2) 2\n"
        "(0,0) (2,2) 7\n"
        "(0,0) (1,1) 3\n"
    )
