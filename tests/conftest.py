"""
Pytest configuration and fixtures for pysimrv.
"""

import pytest

from pysimrv.rng import MRG32k3aStream, RNStreamFactory, reset_default_factory


@pytest.fixture(autouse=True)
def _fresh_default_factory():
    """Every test starts from the first default stream."""
    reset_default_factory()
    yield
    reset_default_factory()


@pytest.fixture
def factory() -> RNStreamFactory:
    """A private stream factory with the default seed."""
    return RNStreamFactory()


@pytest.fixture
def stream(factory: RNStreamFactory) -> MRG32k3aStream:
    """The first stream of a private factory."""
    return factory.get_stream("test")
