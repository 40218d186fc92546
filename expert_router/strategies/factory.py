"""Factory for creating routing strategies.

Provides a registry-based factory pattern for building a
``RouterStrategy`` from a strategy name and a ``RouterConfig``.
"""

from typing import Callable, Dict, List

from expert_router.core.config import RouterConfig
from expert_router.strategies.dispatcher import RouterStrategy

StrategyBuilder = Callable[[RouterConfig], RouterStrategy]


def _build_deterministic(config: RouterConfig) -> RouterStrategy:
    return RouterStrategy.deterministic(expert_count=config.expert_count)


def _build_gating(config: RouterConfig) -> RouterStrategy:
    return RouterStrategy.gating(
        temperature=config.temperature, gate_weights=config.weight_map()
    )


def _build_round_robin(config: RouterConfig) -> RouterStrategy:
    return RouterStrategy.round_robin(config.expert_pool())


_DEFAULT_BUILDERS: Dict[str, StrategyBuilder] = {
    "deterministic": _build_deterministic,
    "gating": _build_gating,
    "round_robin": _build_round_robin,
}


class StrategyFactory:
    """Factory for creating routing strategies.

    Implements a registry pattern where builders are registered by
    name and later invoked via the create method.

    Example:
        >>> from expert_router.core.config import RouterConfig
        >>> from expert_router.strategies.factory import StrategyFactory

        >>> StrategyFactory.register_defaults()
        >>> strategy = StrategyFactory.create("deterministic", RouterConfig())
        >>> strategy.kind
        'deterministic'
    """

    _registry: Dict[str, StrategyBuilder] = {}

    @classmethod
    def register(cls, name: str, builder: StrategyBuilder) -> None:
        """Register a strategy builder.

        Args:
            name: Unique identifier for the strategy.
            builder: Callable taking a RouterConfig and returning a
                RouterStrategy.

        Raises:
            TypeError: If builder is not callable.
            ValueError: If name is already registered.
        """
        if not callable(builder):
            raise TypeError(f"Builder for '{name}' must be callable")
        if name in cls._registry:
            raise ValueError(f"Strategy '{name}' is already registered")
        cls._registry[name] = builder

    @classmethod
    def register_defaults(cls) -> None:
        """Register the built-in strategies that are not yet registered."""
        for name, builder in _DEFAULT_BUILDERS.items():
            if name not in cls._registry:
                cls._registry[name] = builder

    @classmethod
    def create(cls, name: str, config: RouterConfig) -> RouterStrategy:
        """Create a strategy by name.

        Args:
            name: Identifier of the strategy to create.
            config: Construction parameters.

        Returns:
            New RouterStrategy.

        Raises:
            KeyError: If no strategy is registered under the given name.
        """
        if name not in cls._registry:
            available = list(cls._registry.keys())
            raise KeyError(f"Strategy '{name}' not found. Available: {available}")
        return cls._registry[name](config)

    @classmethod
    def list_strategies(cls) -> List[str]:
        """List all registered strategy names.

        Returns:
            List of registered strategy identifiers.
        """
        return list(cls._registry.keys())

    @classmethod
    def clear(cls) -> None:
        """Clear all registered strategies.

        Useful for testing or resetting the registry.
        """
        cls._registry.clear()
