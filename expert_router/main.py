"""Main entry point for Expert Router CLI.

Provides a command-line interface for inspecting routing decisions
of a configured strategy over a range of token indices.
"""

import argparse
import json
import logging
import sys

from expert_router.core import RouterConfig, Tier, load_config
from expert_router.core.errors import RoutingError
from expert_router.strategies.dispatcher import route_sequence

logger = logging.getLogger(__name__)


def parse_args(args=None):
    """Parse command-line arguments.

    Args:
        args: Arguments to parse. If None, uses sys.argv.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        description="Expert Router - Show expert routing decisions per token",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Route token 0 with the default deterministic strategy
  expert-router

  # Route 8 tokens at the max tier over 5 experts
  expert-router --tier max --num-tokens 8 --expert-count 5

  # Use a config file and emit JSON
  expert-router --config router.yaml --format json
        """,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to YAML or JSON config file",
    )

    parser.add_argument(
        "--strategy",
        type=str,
        help="Routing strategy: deterministic, gating or round_robin "
        "(overrides config)",
    )

    parser.add_argument(
        "--tier",
        type=str,
        default="standard",
        help="Service tier: nano, standard, pro or max (default: standard)",
    )

    parser.add_argument(
        "--start-token",
        type=int,
        default=0,
        help="First token index (default: 0)",
    )

    parser.add_argument(
        "--num-tokens",
        type=int,
        default=1,
        help="Number of consecutive tokens to route (default: 1)",
    )

    parser.add_argument(
        "--expert-count",
        type=int,
        help="Expert count for the deterministic strategy (overrides config)",
    )

    parser.add_argument(
        "--temperature",
        type=float,
        help="Softmax temperature for the gating strategy (overrides config)",
    )

    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress the configuration banner",
    )

    return parser.parse_args(args)


def main(args=None):
    """Main entry point.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success).
    """
    parsed = parse_args(args)
    logging.basicConfig(
        level=getattr(logging, parsed.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Load configuration
    try:
        if parsed.config:
            config = load_config(parsed.config)
        else:
            config = RouterConfig()

        # Override config with command-line arguments
        if parsed.strategy is not None:
            config.strategy = parsed.strategy
        if parsed.expert_count is not None:
            config.expert_count = parsed.expert_count
        if parsed.temperature is not None:
            config.temperature = parsed.temperature
        config = RouterConfig.from_dict(config.to_dict())

        tier = Tier.from_name(parsed.tier)
        strategy = config.to_strategy()
    except FileNotFoundError:
        print(f"Error: Config file not found: {parsed.config}", file=sys.stderr)
        return 1
    except (ValueError, KeyError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if not parsed.quiet and parsed.format == "text":
        print("=" * 60)
        print("Expert Router")
        print("=" * 60)
        print(f"Strategy: {strategy.kind}")
        print(f"Tier: {tier.name.lower()} (k={tier.k})")
        last_token = parsed.start_token + parsed.num_tokens - 1
        print(f"Tokens: {parsed.start_token}..{last_token}")
        print("=" * 60)

    try:
        decisions = route_sequence(
            strategy, tier, start_token=parsed.start_token, count=parsed.num_tokens
        )
    except RoutingError as e:
        print(f"Error routing: {e}", file=sys.stderr)
        return 1

    if parsed.format == "json":
        payload = [
            {"token": parsed.start_token + offset, **decision.to_dict()}
            for offset, decision in enumerate(decisions)
        ]
        print(json.dumps(payload, indent=2))
    else:
        for offset, decision in enumerate(decisions):
            indices = ", ".join(str(i) for i in decision.indices())
            print(f"token {parsed.start_token + offset}: [{indices}]")

    logger.info("Routed %d tokens with %s", len(decisions), strategy.kind)
    return 0


if __name__ == "__main__":
    sys.exit(main())
