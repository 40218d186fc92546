"""Strategy dispatcher.

``RouterStrategy`` wraps exactly one of the built-in strategies so a
caller can hold a single routing value chosen at configuration time.
It adds no state or behavior of its own.
"""

from typing import Iterable, List, Optional, Union

from expert_router.core.types import ExpertId, RoutingDecision, Tier, WeightMap
from expert_router.strategies.deterministic import (
    DEFAULT_EXPERT_COUNT,
    DeterministicRouter,
)
from expert_router.strategies.gating import GatingRouter
from expert_router.strategies.round_robin import RoundRobinRouter

StrategyVariant = Union[DeterministicRouter, GatingRouter, RoundRobinRouter]

_VARIANTS = (DeterministicRouter, GatingRouter, RoundRobinRouter)


class RouterStrategy:
    """Closed union over the three routing strategies.

    Example:
        >>> strategy = RouterStrategy.deterministic(expert_count=8)
        >>> strategy.kind
        'deterministic'
        >>> strategy.route(Tier.NANO, 7).indices()
        [7, 0]
    """

    __slots__ = ("_inner",)

    def __init__(self, inner: StrategyVariant) -> None:
        if not isinstance(inner, _VARIANTS):
            raise TypeError(
                f"{type(inner).__name__} is not one of "
                f"{[cls.__name__ for cls in _VARIANTS]}"
            )
        self._inner = inner

    @classmethod
    def deterministic(
        cls, expert_count: int = DEFAULT_EXPERT_COUNT
    ) -> "RouterStrategy":
        return cls(DeterministicRouter(expert_count))

    @classmethod
    def gating(
        cls,
        temperature: float = 1.0,
        gate_weights: Optional[WeightMap] = None,
    ) -> "RouterStrategy":
        return cls(GatingRouter(temperature, gate_weights))

    @classmethod
    def round_robin(cls, experts: Iterable[ExpertId] = ()) -> "RouterStrategy":
        return cls(RoundRobinRouter(experts))

    @property
    def kind(self) -> str:
        """Registry name of the active variant."""
        return self._inner.name

    @property
    def inner(self) -> StrategyVariant:
        """The wrapped strategy instance."""
        return self._inner

    def route(self, tier: Tier, token_index: int) -> RoutingDecision:
        return self._inner.route(tier, token_index)

    def route_with_weights(
        self,
        tier: Tier,
        token_index: int,
        weights: WeightMap,
    ) -> RoutingDecision:
        return self._inner.route_with_weights(tier, token_index, weights)

    def __repr__(self) -> str:
        return f"RouterStrategy({self._inner!r})"


def route_sequence(
    strategy: Union[RouterStrategy, StrategyVariant],
    tier: Tier,
    start_token: int = 0,
    count: int = 1,
) -> List[RoutingDecision]:
    """Route consecutive token indices.

    Args:
        strategy: Dispatcher or concrete strategy.
        tier: Service tier for every token.
        start_token: First token index.
        count: Number of tokens to route.

    Returns:
        One decision per token, in token order.
    """
    tokens = range(start_token, start_token + count)
    return [strategy.route(tier, token) for token in tokens]
