"""Round-robin routing strategy.

Each call advances a shared cursor by one and reads ``k`` experts from
a fixed pool starting at the cursor's previous value, wrapping around
the pool. Weights are ignored.
"""

import logging
import threading
from typing import Iterable, Tuple

from expert_router.core.types import ExpertId, RoutingDecision, Tier, WeightMap
from expert_router.strategies.base import Router

logger = logging.getLogger(__name__)


class RoundRobinRouter(Router):
    """Counter-driven rotation over a fixed expert pool.

    The cursor is the only mutable state. The fetch-and-increment runs
    under a lock, so concurrent callers always get distinct, strictly
    increasing start offsets. Two concurrent decisions may still share
    experts.

    Attributes:
        experts: Ordered, immutable expert pool.
    """

    name: str = "round_robin"

    def __init__(self, experts: Iterable[ExpertId] = ()) -> None:
        self._experts: Tuple[ExpertId, ...] = tuple(experts)
        self._current = 0
        self._lock = threading.Lock()
        if not self._experts:
            logger.warning("Round-robin pool is empty, every decision will be empty")

    @property
    def experts(self) -> Tuple[ExpertId, ...]:
        return self._experts

    @property
    def cursor(self) -> int:
        """Number of ``route`` calls served so far."""
        with self._lock:
            return self._current

    def _fetch_add(self) -> int:
        """Advance the cursor and return its previous value."""
        with self._lock:
            start = self._current
            self._current += 1
        return start

    def route(self, tier: Tier, token_index: int) -> RoutingDecision:
        """Select ``tier.k`` experts starting at the next rotation offset.

        Args:
            tier: Service tier.
            token_index: Unused; rotation is driven by call order.

        Returns:
            RoutingDecision of ``tier.k`` experts (repeating when the pool
            is smaller than ``tier.k``), or empty for an empty pool.
        """
        start = self._fetch_add()
        size = len(self._experts)
        if size == 0:
            return RoutingDecision()
        expert_ids = [self._experts[(start + i) % size] for i in range(tier.k)]
        return RoutingDecision(expert_ids=expert_ids)

    def route_with_weights(
        self,
        tier: Tier,
        token_index: int,
        weights: WeightMap,
    ) -> RoutingDecision:
        """Same as ``route``; the supplied weights are ignored."""
        return self.route(tier, token_index)

    def __repr__(self) -> str:
        return f"RoundRobinRouter(experts={len(self._experts)})"
