"""Expert routing strategies package.

This module provides the routing interface, the built-in strategies,
the dispatcher that wraps them, and the factory that builds them.
"""

from expert_router.strategies.base import Router
from expert_router.strategies.deterministic import DeterministicRouter
from expert_router.strategies.dispatcher import RouterStrategy, route_sequence
from expert_router.strategies.factory import StrategyFactory
from expert_router.strategies.gating import GatingRouter
from expert_router.strategies.round_robin import RoundRobinRouter

__all__ = [
    "Router",
    "DeterministicRouter",
    "GatingRouter",
    "RoundRobinRouter",
    "RouterStrategy",
    "route_sequence",
    "StrategyFactory",
]
