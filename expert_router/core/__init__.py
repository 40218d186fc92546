"""Core module for Expert Router.

Provides the data structures shared by every routing strategy:
- ExpertId, Tier, RoutingDecision: routing value types
- RoutingError, InvalidWeightsError: error kinds
- RouterConfig: construction-time parameters
- load_config, save_config: YAML/JSON config files
"""

from expert_router.core.config import RouterConfig, parse_expert_id
from expert_router.core.config_loader import load_config, save_config
from expert_router.core.errors import InvalidWeightsError, RoutingError
from expert_router.core.types import (
    TIER_WIDTHS,
    ExpertId,
    RoutingDecision,
    Tier,
    WeightMap,
)

__all__ = [
    "ExpertId",
    "Tier",
    "TIER_WIDTHS",
    "RoutingDecision",
    "WeightMap",
    "RoutingError",
    "InvalidWeightsError",
    "RouterConfig",
    "parse_expert_id",
    "load_config",
    "save_config",
]
