"""Open-addressed hash index from canonical signatures to anagram groups."""

from typing import NamedTuple

import numpy as np
from bitarray.util import zeros

DJB2_SEED = 5381
HASH_MASK = (1 << 64) - 1
"""Hash values are kept to 64 bits, as for an unsigned long."""


class AnagramGroup(NamedTuple):
    """A run of dictionary entries sharing one canonical signature."""

    canonical: str
    """The shared signature."""

    start: int
    """Index of the first entry of the run in the sorted dictionary table."""

    size: int
    """Number of entries in the run."""


class IndexStats(NamedTuple):
    """Occupancy statistics for an AnagramIndex."""

    capacity: int
    groups: int
    load_factor: float
    largest_group: int
    mean_probe_length: float


def djb2_hash(signature: str) -> int:
    """Multiplicative, order-sensitive string hash (DJB2)."""
    h = DJB2_SEED
    for ch in signature:
        h = (h * 33 + ord(ch)) & HASH_MASK
    return h


class AnagramIndex:
    """Fixed-capacity hash map with linear probing.

    Slots are never deleted or overwritten: the index is built once and read-only after that.
    The capacity must be chosen larger than the number of distinct signatures (see
    `SolverConfig.index_capacity`).
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("Index capacity must be positive.")
        self.capacity = capacity
        self.occupied = zeros(capacity)
        """Bit `i` is set if slot `i` holds a group."""

        self._keys: list[str | None] = [None] * capacity
        self._starts = np.zeros(capacity, dtype=np.int64)
        self._sizes = np.zeros(capacity, dtype=np.int64)
        self._probes = np.zeros(capacity, dtype=np.int32)
        self.n_groups = 0

    def __len__(self) -> int:
        return self.n_groups

    def _home_slot(self, signature: str) -> int:
        return djb2_hash(signature) % self.capacity

    def insert(self, signature: str, start: int, size: int) -> None:
        """Insert a group, probing forward from its home slot to the first empty slot.

        Raises:
            KeyError: If the signature is already present.
            RuntimeError: If the table is full.
        """
        slot = self._home_slot(signature)
        for probe in range(self.capacity):
            if not self.occupied[slot]:
                self.occupied[slot] = 1
                self._keys[slot] = signature
                self._starts[slot] = start
                self._sizes[slot] = size
                self._probes[slot] = probe
                self.n_groups += 1
                return
            if self._keys[slot] == signature:
                raise KeyError(f"Signature {signature!r} is already indexed.")
            slot = (slot + 1) % self.capacity
        raise RuntimeError(f"Anagram index is full (capacity {self.capacity}).")

    def lookup(self, signature: str) -> AnagramGroup | None:
        """Return the group for a signature, or None if it is not indexed."""
        slot = self._home_slot(signature)
        # An empty slot terminates the probe sequence; a full table is bounded by the capacity.
        for _ in range(self.capacity):
            if not self.occupied[slot]:
                return None
            if self._keys[slot] == signature:
                return AnagramGroup(signature, int(self._starts[slot]), int(self._sizes[slot]))
            slot = (slot + 1) % self.capacity
        return None

    def __contains__(self, signature: str) -> bool:
        return self.lookup(signature) is not None

    def groups(self) -> list[AnagramGroup]:
        """Return all indexed groups, ordered by their start index."""
        slots = np.array(list(self.occupied.search(1)), dtype=np.int64)
        if len(slots) == 0:
            return []
        order = slots[np.argsort(self._starts[slots], kind="stable")]
        return [
            AnagramGroup(self._keys[i], int(self._starts[i]), int(self._sizes[i]))  # type: ignore[arg-type]
            for i in order
        ]

    def stats(self) -> IndexStats:
        """Summarize occupancy and clustering of the table."""
        if self.n_groups == 0:
            return IndexStats(self.capacity, 0, 0.0, 0, 0.0)
        slots = np.array(list(self.occupied.search(1)), dtype=np.int64)
        return IndexStats(
            capacity=self.capacity,
            groups=self.n_groups,
            load_factor=self.n_groups / self.capacity,
            largest_group=int(self._sizes[slots].max()),
            mean_probe_length=float(self._probes[slots].mean()),
        )
