"""Error types raised by the routing strategies."""


class RoutingError(Exception):
    """Base class for expert routing errors."""


class InvalidWeightsError(RoutingError, ValueError):
    """Raised when a weight map holds a value that cannot be ranked.

    NaN and infinite weights would poison the softmax and the
    descending sort, so they are rejected instead of ranked.
    """
