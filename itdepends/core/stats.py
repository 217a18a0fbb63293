import time
from dataclasses import dataclass
from dataclasses import field


@dataclass
class BaseStats:
    total: int = 0
    start_time: float = field(default_factory=time.time)

    @property
    def elapsed_time(self) -> float:
        return time.time() - self.start_time


@dataclass
class EnrichStats(BaseStats):
    requests: int = 0
    found: int = 0
    missing: int = 0
