# crucible_lab/core/frontiers.py
# Work queues for the relaxation engine. Both remember their peak length for metrics.
from __future__ import annotations
import heapq
from collections import deque


class FIFOQueue:
    def __init__(self):
        self.q = deque()
        self.peak = 0
    def push(self, x):
        self.q.append(x)
        self.peak = max(self.peak, len(self.q))
    def pop(self): return self.q.popleft()
    def __len__(self): return len(self.q)
    def peek(self): return self.q[0]


class PriorityQueue:
    """Min-heap by key(x); FIFO among equal keys."""
    def __init__(self, key):
        self.key = key
        self.h = []
        self.counter = 0  # tie-breaker for stability
        self.peak = 0
    def push(self, x):
        self.counter += 1
        heapq.heappush(self.h, (self.key(x), self.counter, x))
        self.peak = max(self.peak, len(self.h))
    def pop(self):
        return heapq.heappop(self.h)[2]
    def __len__(self): return len(self.h)
    def peek(self):
        return self.h[0][2]


def make_frontier(strategy: str):
    """'fifo' gives label-correcting order; 'heap' pops the cheapest entry first."""
    if strategy == "fifo":
        return FIFOQueue()
    if strategy == "heap":
        return PriorityQueue(key=lambda entry: entry[1])
    raise ValueError(f"unknown strategy {strategy!r}; expected 'fifo' or 'heap'")
