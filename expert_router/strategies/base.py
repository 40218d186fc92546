"""Abstract base class for expert routing strategies.

Defines the interface that all routing strategies must implement,
plus the weight ranking shared by the weight-driven strategies.
"""

import math
from abc import ABC, abstractmethod
from typing import Dict, List, Mapping

from expert_router.core.errors import InvalidWeightsError
from expert_router.core.types import ExpertId, RoutingDecision, Tier, WeightMap


class Router(ABC):
    """Abstract base class for expert routing strategies.

    A router picks which experts run for one inference step. Both
    operations are synchronous, and must not fail for well-formed
    input: degenerate configurations are clamped, not rejected.

    Attributes:
        name: Registry name of the routing strategy.
    """

    name: str = "base"

    @abstractmethod
    def route(self, tier: Tier, token_index: int) -> RoutingDecision:
        """Select experts for a token using only internal state.

        Args:
            tier: Service tier; sets the activation width ``tier.k``.
            token_index: Position of the token in the inference sequence.

        Returns:
            RoutingDecision with at most ``tier.k`` experts.
        """
        ...

    @abstractmethod
    def route_with_weights(
        self,
        tier: Tier,
        token_index: int,
        weights: WeightMap,
    ) -> RoutingDecision:
        """Select experts informed by an externally supplied weight map.

        Strategies may ignore ``token_index`` or ``weights`` when their
        selection does not depend on them.

        Args:
            tier: Service tier; sets the activation width ``tier.k``.
            token_index: Position of the token in the inference sequence.
            weights: Per-expert weights, not necessarily normalized.

        Returns:
            RoutingDecision with at most ``tier.k`` experts.
        """
        ...


def check_weights(weights: Mapping[ExpertId, float]) -> Dict[ExpertId, float]:
    """Copy a weight map, rejecting values that cannot be ranked.

    Args:
        weights: Mapping of expert to weight.

    Returns:
        New dict with float weights.

    Raises:
        InvalidWeightsError: If a weight is not a finite number.
    """
    checked: Dict[ExpertId, float] = {}
    for expert, weight in weights.items():
        try:
            value = float(weight)
        except (TypeError, ValueError):
            raise InvalidWeightsError(
                f"Weight for {expert!r} is not a number: {weight!r}"
            ) from None
        if not math.isfinite(value):
            raise InvalidWeightsError(f"Weight for {expert!r} is not finite: {value}")
        checked[expert] = value
    return checked


def rank_top_k(scores: Mapping[ExpertId, float], k: int) -> List[ExpertId]:
    """Return the ``k`` highest-scoring experts, highest first.

    Equal scores are ordered by ExpertId ascending so the result does
    not depend on mapping iteration order.
    """
    ranked = sorted(scores, key=lambda expert: (-scores[expert], expert))
    return ranked[:k]
