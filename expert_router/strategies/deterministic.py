"""Deterministic routing strategy.

Fixed-modulo selection: token ``t`` at tier width ``k`` activates the
candidates ``t, t+1, ..., t+k-1`` modulo the expert count. The weighted
variant ignores token position and ranks the supplied weights instead.
"""

import logging

from expert_router.core.types import ExpertId, RoutingDecision, Tier, WeightMap
from expert_router.strategies.base import Router, check_weights, rank_top_k

logger = logging.getLogger(__name__)

DEFAULT_EXPERT_COUNT = 1024


class DeterministicRouter(Router):
    """Fixed-modulo routing strategy.

    A pure function of ``(expert_count, tier, token_index)``: the router
    holds no mutable state, so concurrent calls need no locking.

    Attributes:
        expert_count: Size of the candidate pool. Values below 1 are
            treated as 1 when routing.
    """

    name: str = "deterministic"

    def __init__(self, expert_count: int = DEFAULT_EXPERT_COUNT) -> None:
        if expert_count < 1:
            logger.warning(
                "expert_count=%d is below 1, routing will use a single candidate",
                expert_count,
            )
        self._expert_count = expert_count

    @property
    def expert_count(self) -> int:
        return self._expert_count

    def route(self, tier: Tier, token_index: int) -> RoutingDecision:
        """Select ``tier.k`` consecutive candidates starting at the token index.

        Args:
            tier: Service tier.
            token_index: Position of the token in the sequence.

        Returns:
            RoutingDecision of exactly ``tier.k`` ids; candidates repeat
            cyclically when ``expert_count < tier.k``.
        """
        count = max(self._expert_count, 1)
        expert_ids = [
            ExpertId.from_index((token_index + i) % count) for i in range(tier.k)
        ]
        return RoutingDecision(expert_ids=expert_ids)

    def route_with_weights(
        self,
        tier: Tier,
        token_index: int,
        weights: WeightMap,
    ) -> RoutingDecision:
        """Select the ``tier.k`` heaviest experts from ``weights``.

        ``token_index`` is ignored. Ties are broken by ExpertId ascending.

        Raises:
            InvalidWeightsError: If a weight is NaN or infinite.
        """
        checked = check_weights(weights)
        if not checked:
            logger.debug("Empty weight map, returning empty decision")
        return RoutingDecision(expert_ids=rank_top_k(checked, tier.k))

    def __repr__(self) -> str:
        return f"DeterministicRouter(expert_count={self._expert_count})"
