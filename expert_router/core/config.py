"""Router configuration dataclass.

Defines the construction-time parameters for every routing strategy.
"""

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Union

from expert_router.core.types import EXPERT_ID_SIZE, ExpertId

if TYPE_CHECKING:
    from expert_router.strategies.dispatcher import RouterStrategy

STRATEGY_NAMES = ("deterministic", "gating", "round_robin")

ExpertRef = Union[int, str]


def parse_expert_id(value: Union[ExpertRef, ExpertId]) -> ExpertId:
    """Resolve a config-file expert reference.

    Args:
        value: Integer index, 64-character hex id, or an ExpertId.

    Returns:
        The corresponding ExpertId.

    Raises:
        ValueError: If the reference cannot be parsed.
    """
    if isinstance(value, ExpertId):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid expert reference: {value!r}")
    if isinstance(value, int):
        return ExpertId.from_index(value)
    if isinstance(value, str):
        text = value.strip()
        # Full-width hex ids may consist of digits only
        if len(text) == 2 * EXPERT_ID_SIZE:
            try:
                return ExpertId.from_hex(text)
            except ValueError:
                raise ValueError(f"Invalid expert reference: {value!r}") from None
        if text.isdigit():
            return ExpertId.from_index(int(text))
    raise ValueError(f"Invalid expert reference: {value!r}")


@dataclass
class RouterConfig:
    """Configuration for building a routing strategy.

    Only the fields relevant to ``strategy`` are used. Degenerate
    numeric values (``expert_count`` below 1, tiny temperatures) are
    accepted here and clamped by the routers themselves.

    Attributes:
        strategy: One of ``STRATEGY_NAMES``.
        expert_count: Candidate pool size for the deterministic strategy.
        temperature: Softmax temperature for the gating strategy.
        experts: Ordered pool for the round-robin strategy.
        gate_weights: Initial gate weights for the gating strategy.
    """

    strategy: str = "deterministic"
    expert_count: int = 1024
    temperature: float = 1.0
    experts: List[ExpertRef] = field(default_factory=list)
    gate_weights: Dict[ExpertRef, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not isinstance(self.strategy, str):
            raise ValueError(f"strategy must be a string, got {self.strategy!r}")
        if isinstance(self.expert_count, bool) or not isinstance(
            self.expert_count, int
        ):
            raise ValueError(
                f"expert_count must be an integer, got {self.expert_count!r}"
            )
        if isinstance(self.temperature, bool) or not isinstance(
            self.temperature, (int, float)
        ):
            raise ValueError(
                f"temperature must be a number, got {self.temperature!r}"
            )
        if not isinstance(self.experts, list):
            raise ValueError("experts must be a list")
        if not isinstance(self.gate_weights, dict):
            raise ValueError("gate_weights must be a mapping")
        self.strategy = self.strategy.replace("-", "_")
        if self.strategy not in STRATEGY_NAMES:
            raise ValueError(
                f"Unknown strategy '{self.strategy}'. "
                f"Available: {list(STRATEGY_NAMES)}"
            )
        for expert, weight in self.gate_weights.items():
            if not isinstance(weight, (int, float)) or not math.isfinite(weight):
                raise ValueError(f"gate weight for {expert!r} must be a finite number")

    def expert_pool(self) -> List[ExpertId]:
        """Round-robin pool as ExpertId values, in configured order."""
        return [parse_expert_id(e) for e in self.experts]

    def weight_map(self) -> Dict[ExpertId, float]:
        """Gate weights keyed by ExpertId."""
        return {parse_expert_id(e): float(w) for e, w in self.gate_weights.items()}

    def to_strategy(self) -> "RouterStrategy":
        """Build the configured strategy.

        Returns:
            RouterStrategy wrapping the configured router.
        """
        from expert_router.strategies.factory import StrategyFactory

        StrategyFactory.register_defaults()
        return StrategyFactory.create(self.strategy, self)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation.
        """
        return {
            "strategy": self.strategy,
            "expert_count": self.expert_count,
            "temperature": self.temperature,
            "experts": list(self.experts),
            "gate_weights": dict(self.gate_weights),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RouterConfig":
        """Create from dictionary.

        Args:
            data: Dictionary with configuration values.

        Returns:
            RouterConfig instance.
        """
        return cls(
            strategy=data.get("strategy", "deterministic"),
            expert_count=data.get("expert_count", 1024),
            temperature=data.get("temperature", 1.0),
            experts=data.get("experts") or [],
            gate_weights=data.get("gate_weights") or {},
        )
