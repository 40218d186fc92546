"""Temperature-gated softmax routing strategy.

Ranks the experts of an internally held weight map by their softmax
probability and activates the top ``k``. Weights are consumed, never
trained: they are set from outside through ``set_gate_weight`` and
``set_gate_weights``.

The router does no internal locking. Callers that mutate weights
while other threads route must serialize the two themselves, for
example by holding a lock for the duration of a routing epoch or by
swapping in a new router between epochs.
"""

import logging
from typing import Dict, Optional

import numpy as np

from expert_router.core.types import ExpertId, RoutingDecision, Tier, WeightMap
from expert_router.strategies.base import Router, check_weights

logger = logging.getLogger(__name__)

MIN_TEMPERATURE = 0.01


class GatingRouter(Router):
    """Softmax top-k routing over internally held gate weights.

    ``token_index`` does not affect selection, and the weight map passed
    to ``route_with_weights`` is ignored: the router's own gate weights
    are the only input to ranking.

    Attributes:
        temperature: Softmax temperature, floored at ``MIN_TEMPERATURE``.
    """

    name: str = "gating"

    def __init__(
        self,
        temperature: float = 1.0,
        gate_weights: Optional[WeightMap] = None,
    ) -> None:
        if not temperature >= MIN_TEMPERATURE:
            logger.warning(
                "temperature=%s is below %s, clamping", temperature, MIN_TEMPERATURE
            )
            temperature = MIN_TEMPERATURE
        self._temperature = float(temperature)
        self._gate_weights: Dict[ExpertId, float] = {}
        if gate_weights is not None:
            self.set_gate_weights(gate_weights)

    @property
    def temperature(self) -> float:
        return self._temperature

    @property
    def gate_weights(self) -> Dict[ExpertId, float]:
        """Copy of the current gate weights."""
        return dict(self._gate_weights)

    def set_gate_weight(self, expert: ExpertId, weight: float) -> None:
        """Set or overwrite the gate weight of a single expert.

        Raises:
            InvalidWeightsError: If ``weight`` is NaN or infinite.
        """
        self._gate_weights.update(check_weights({expert: weight}))
        logger.debug("Gate weight for %r set to %s", expert, weight)

    def set_gate_weights(self, weights: WeightMap) -> None:
        """Replace the whole gate weight map.

        The map is validated before anything is replaced, so a rejected
        update leaves the previous weights in place.

        Raises:
            InvalidWeightsError: If any weight is NaN or infinite.
        """
        self._gate_weights = check_weights(weights)
        logger.debug("Gate weights replaced (%d experts)", len(self._gate_weights))

    def probabilities(self) -> Dict[ExpertId, float]:
        """Softmax distribution over the gate weights.

        Returns:
            Mapping of expert to probability, or an empty dict when no
            gate weights are set.
        """
        if not self._gate_weights:
            return {}
        experts = sorted(self._gate_weights)
        weights = np.array([self._gate_weights[e] for e in experts], dtype=np.float64)
        probs = self._softmax(weights)
        return dict(zip(experts, probs.tolist()))

    def route(self, tier: Tier, token_index: int) -> RoutingDecision:
        """Select the ``tier.k`` most probable experts.

        Args:
            tier: Service tier.
            token_index: Unused.

        Returns:
            RoutingDecision ordered by probability descending, ties by
            ExpertId ascending. Empty when no gate weights are set.
        """
        probs = self.probabilities()
        if not probs:
            logger.debug("No gate weights set, returning empty decision")
        # Probabilities underflow to 0.0 at low temperature; the raw weight
        # keeps the softmax order for them.
        ranked = sorted(
            probs,
            key=lambda expert: (-probs[expert], -self._gate_weights[expert], expert),
        )
        return RoutingDecision(expert_ids=ranked[: tier.k])

    def route_with_weights(
        self,
        tier: Tier,
        token_index: int,
        weights: WeightMap,
    ) -> RoutingDecision:
        """Same as ``route``; the supplied weights are ignored."""
        return self.route(tier, token_index)

    def _softmax(self, x: np.ndarray) -> np.ndarray:
        """Compute a numerically stable tempered softmax.

        Args:
            x: Non-empty array of finite weights.

        Returns:
            Probabilities summing to 1.
        """
        # Extreme finite weights overflow to -inf, which exp maps to 0.0
        with np.errstate(over="ignore", under="ignore"):
            exp_x = np.exp((x - np.max(x)) / self._temperature)
        return exp_x / np.sum(exp_x)

    def __repr__(self) -> str:
        return (
            f"GatingRouter(temperature={self._temperature}, "
            f"experts={len(self._gate_weights)})"
        )
