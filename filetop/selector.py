from __future__ import annotations
from typing import List, Tuple

from .models import Entry, Totals
from .ordering import OrderingPolicy

DEFAULT_COUNT = 10


class TopKSelector:
    """Keeps the best `count` entries seen so far, sorted best first.

    Totals cover every inserted entry, including the ones that did not make
    the cut. `count <= 0` keeps the ranked list empty.
    """

    def __init__(self, policy: OrderingPolicy, count: int = DEFAULT_COUNT):
        self.policy = policy
        self.count = count
        self.totals = Totals()
        self._ranked: List[Entry] = []

    def __len__(self) -> int:
        return len(self._ranked)

    def _position(self, entry: Entry) -> int:
        # первый индекс, который entry строго обгоняет; равные остаются раньше
        lo, hi = 0, len(self._ranked)
        while lo < hi:
            mid = (lo + hi) // 2
            if self.policy.ranks_before(entry, self._ranked[mid]):
                hi = mid
            else:
                lo = mid + 1
        return lo

    def insert(self, entry: Entry):
        self.totals.add(entry)

        n = len(self._ranked)
        i = self._position(entry)
        if i == n and n >= self.count:
            return

        self._ranked.insert(i, entry)
        if len(self._ranked) > self.count:
            del self._ranked[max(self.count, 0):]

    def results(self) -> Tuple[Entry, ...]:
        return tuple(self._ranked)

    def totals_snapshot(self) -> Tuple[int, int]:
        return (self.totals.num_entries, self.totals.sum_size)
