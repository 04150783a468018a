"""Pytest configuration for tracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import matplotlib
import pytest
import taichi as ti

# Never open preview windows during tests
matplotlib.use("Agg")


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts.
    """
    ti.init(arch=ti.cpu)
    yield


@pytest.fixture
def default_world():
    """The canonical two-sphere, one-light world."""
    from src.tracer.scene.world import World

    return World.default()


@pytest.fixture
def axis_ray():
    """Ray from (0, 0, -5) along +z, through the origin."""
    from src.tracer.core.ray import Ray
    from src.tracer.core.tuple import point, vector

    return Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0))
