"""Expert Router - tier-aware expert selection for sparse MoE inference.

This package decides which experts run for each inference step,
given a service tier and a token position:
- DeterministicRouter: fixed-modulo selection
- GatingRouter: temperature-gated softmax ranking
- RoundRobinRouter: counter-driven rotation over a fixed pool
- RouterStrategy: single value wrapping any of the above
"""

__version__ = "0.1.0"

from expert_router.core.errors import InvalidWeightsError, RoutingError
from expert_router.core.types import ExpertId, RoutingDecision, Tier
from expert_router.strategies.deterministic import DeterministicRouter
from expert_router.strategies.dispatcher import RouterStrategy
from expert_router.strategies.gating import GatingRouter
from expert_router.strategies.round_robin import RoundRobinRouter

__all__ = [
    "ExpertId",
    "Tier",
    "RoutingDecision",
    "RoutingError",
    "InvalidWeightsError",
    "DeterministicRouter",
    "GatingRouter",
    "RoundRobinRouter",
    "RouterStrategy",
]
