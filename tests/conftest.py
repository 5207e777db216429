"""Pytest configuration for aapc tests."""

from typing import Any

import numpy as np
import pytest


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: mark test as round-tripping megabyte sized buffers",
    )


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20240601)


@pytest.fixture
def noise(rng: np.random.Generator) -> bytes:
    """4 KiB of uniformly random bytes."""
    return rng.integers(0, 256, size=4096, dtype=np.uint8).tobytes()
