"""
Artificial latency.

Generation and storage calls pause for a random interval before resolving,
so callers see the same await points a remote service would give them.
"""

import asyncio
import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Latency:
    """Uniform delay range in seconds."""

    low: float = 0.0
    high: float = 0.0

    def __post_init__(self) -> None:
        if self.low < 0 or self.high < self.low:
            raise ValueError(f"Invalid latency range: {self.low}..{self.high}")

    @classmethod
    def none(cls) -> "Latency":
        return cls(0.0, 0.0)

    def sample(self, rng: random.Random) -> float:
        if self.high == 0:
            return 0.0
        return rng.uniform(self.low, self.high)

    async def wait(self, rng: random.Random) -> None:
        await asyncio.sleep(self.sample(rng))
