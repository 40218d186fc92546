"""Pytest fixtures for expert router tests."""

import pytest
from expert_router.core.types import ExpertId
from expert_router.strategies.deterministic import DeterministicRouter
from expert_router.strategies.factory import StrategyFactory
from expert_router.strategies.gating import GatingRouter
from expert_router.strategies.round_robin import RoundRobinRouter


@pytest.fixture
def experts():
    """Create eight experts with indices 0..7."""
    return [ExpertId.from_index(i) for i in range(8)]


@pytest.fixture
def expert_a():
    return ExpertId.from_index(10)


@pytest.fixture
def expert_b():
    return ExpertId.from_index(11)


@pytest.fixture
def expert_c():
    return ExpertId.from_index(12)


@pytest.fixture
def deterministic_router():
    """Create deterministic router with the default 1024 experts."""
    return DeterministicRouter(expert_count=1024)


@pytest.fixture
def deterministic_router_small():
    """Create deterministic router over five experts."""
    return DeterministicRouter(expert_count=5)


@pytest.fixture
def gating_router(expert_a, expert_b, expert_c):
    """Create gating router with weights A=0.5, B=0.3, C=0.2."""
    router = GatingRouter(temperature=1.0)
    router.set_gate_weights({expert_a: 0.5, expert_b: 0.3, expert_c: 0.2})
    return router


@pytest.fixture
def gating_router_large(experts):
    """Create gating router with descending weights over eight experts."""
    return GatingRouter(
        temperature=1.0,
        gate_weights={e: 1.0 - i / 8 for i, e in enumerate(experts)},
    )


@pytest.fixture
def round_robin_router(experts):
    """Create round-robin router over the first three experts."""
    return RoundRobinRouter(experts[:3])


@pytest.fixture
def weights(experts):
    """Create sample routing weights."""
    values = [0.9, 0.7, 0.5, 0.3, 0.1, 0.8, 0.6, 0.4]
    return dict(zip(experts, values))


@pytest.fixture
def weights_uniform(experts):
    """Create uniform routing weights."""
    return {e: 0.5 for e in experts}


@pytest.fixture
def factory():
    """Reset the factory registry to the built-in strategies."""
    StrategyFactory.clear()
    StrategyFactory.register_defaults()
    yield StrategyFactory
    StrategyFactory.clear()
    StrategyFactory.register_defaults()
