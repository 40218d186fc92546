"""Shared value types for expert routing.

Defines the identity, tier and decision types passed between the
routing strategies and their callers:
- ExpertId: opaque 32-byte expert identity
- Tier: service tier controlling activation width
- RoutingDecision: ordered list of experts to activate
"""

import struct
from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Any, Dict, Iterator, List, Mapping

EXPERT_ID_SIZE = 32


@total_ordering
@dataclass(frozen=True)
class ExpertId:
    """Opaque fixed-width expert identity.

    Used only as an equality, ordering and hash key. Ids are ordered by
    their encoded index first, then by the full payload bytes, so ids
    built with ``from_index`` sort numerically.

    Attributes:
        payload: Exactly 32 identifying bytes.
    """

    payload: bytes

    def __post_init__(self) -> None:
        """Validate payload width."""
        if not isinstance(self.payload, (bytes, bytearray)):
            raise TypeError("ExpertId payload must be bytes")
        if len(self.payload) != EXPERT_ID_SIZE:
            raise ValueError(
                f"ExpertId payload must be {EXPERT_ID_SIZE} bytes, "
                f"got {len(self.payload)}"
            )
        object.__setattr__(self, "payload", bytes(self.payload))

    @classmethod
    def from_index(cls, index: int) -> "ExpertId":
        """Build an id whose first 4 bytes encode ``index`` (little-endian).

        Args:
            index: Candidate index. Reduced modulo 2**32.

        Returns:
            ExpertId with the remaining 28 bytes zero.
        """
        head = struct.pack("<I", index & 0xFFFFFFFF)
        return cls(head + bytes(EXPERT_ID_SIZE - len(head)))

    @classmethod
    def from_hex(cls, value: str) -> "ExpertId":
        """Parse the 64-character hex form produced by ``hex()``."""
        return cls(bytes.fromhex(value))

    @property
    def index(self) -> int:
        """Integer encoded in the first 4 bytes."""
        return struct.unpack("<I", self.payload[:4])[0]

    def hex(self) -> str:
        return self.payload.hex()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ExpertId):
            return NotImplemented
        return (self.index, self.payload) < (other.index, other.payload)

    def __repr__(self) -> str:
        return f"ExpertId({self.payload[:4].hex()}..)"


class Tier(int, Enum):
    """Service tier, ordered by activation width."""

    NANO = 0
    STANDARD = 1
    PRO = 2
    MAX = 3

    @property
    def k(self) -> int:
        """Number of experts activated for this tier."""
        return TIER_WIDTHS[self]

    @classmethod
    def from_name(cls, name: str) -> "Tier":
        """Parse a tier name case-insensitively.

        Raises:
            ValueError: If the name is not a known tier.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            available = [t.name.lower() for t in cls]
            raise ValueError(f"Unknown tier '{name}'. Available: {available}") from None


TIER_WIDTHS: Dict[Tier, int] = {
    Tier.NANO: 2,
    Tier.STANDARD: 4,
    Tier.PRO: 8,
    Tier.MAX: 16,
}

WeightMap = Mapping[ExpertId, float]


@dataclass
class RoutingDecision:
    """Experts to activate for one inference step, in priority order.

    Duplicates are possible when the candidate pool is smaller than
    the tier width.

    Attributes:
        expert_ids: Selected experts, highest priority first.
    """

    expert_ids: List[ExpertId] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.expert_ids)

    def __iter__(self) -> Iterator[ExpertId]:
        return iter(self.expert_ids)

    def indices(self) -> List[int]:
        """Integer index encoded by each selected expert."""
        return [expert.index for expert in self.expert_ids]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary.

        Returns:
            Dictionary representation with hex expert ids.
        """
        return {"expert_ids": [expert.hex() for expert in self.expert_ids]}
