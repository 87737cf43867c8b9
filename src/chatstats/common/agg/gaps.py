from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import List, Optional


@dataclass(frozen=True)
class GapRecord:
    """
    Silence between two consecutive accepted messages.

    start is the earlier message, end the message that closed the gap.
    """
    duration: int
    start: datetime
    end: datetime

    @classmethod
    def between(cls, start: datetime, end: datetime) -> GapRecord:
        if end < start:
            raise ValueError(f"gap end {end} precedes start {start}")
        return cls(duration=int((end - start).total_seconds()), start=start, end=end)


class EvictionPolicy(Enum):
    # Only the leaf level is scanned for an eviction candidate
    LEAF = "leaf"
    # The whole container is scanned, giving exact top-K
    EXACT = "exact"


class GapTracker:
    """
    Keeps the largest gaps seen so far in a fixed number of slots laid out as a max-heap.

    Until the slots are full every gap is kept. Once full, a new gap replaces the
    smallest eviction candidate only if it is strictly longer, so an earlier gap
    wins a tie against a later one.

    With EvictionPolicy.LEAF the candidates are the slots from size // 2 onwards
    and the heap is repaired by sifting down every index from slot // 2 - 1 to
    the root. That sweep skips the parent of a left child, so an internal slot
    can end up holding the smallest gap and is then never evicted.
    EvictionPolicy.EXACT scans every slot and sifts the replacement up.
    """

    def __init__(self, capacity: int, policy: EvictionPolicy = EvictionPolicy.LEAF):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.__capacity = capacity
        self.__policy = policy
        self.__slots: List[Optional[GapRecord]] = [None] * capacity
        self.__size = 0

    @classmethod
    def with_levels(cls, levels: int, policy: EvictionPolicy = EvictionPolicy.LEAF) -> GapTracker:
        if levels < 0:
            raise ValueError(f"levels must be non-negative, got {levels}")
        return cls((1 << levels) - 1, policy)

    @property
    def capacity(self) -> int:
        return self.__capacity

    @property
    def policy(self) -> EvictionPolicy:
        return self.__policy

    def __len__(self) -> int:
        return self.__size

    def observe(self, gap: GapRecord) -> bool:
        """
        Offers a gap to the tracker. Returns True when the gap was stored.
        """
        if self.__capacity == 0:
            return False

        if self.__size < self.__capacity:
            self.__slots[self.__size] = gap
            self.__size += 1
            for index in range(self.__size // 2 - 1, -1, -1):
                self.__sift_down(index)
            return True

        slot = self.__min_candidate()
        if gap.duration <= self.__slots[slot].duration:
            return False

        self.__slots[slot] = gap
        if self.__policy is EvictionPolicy.EXACT:
            self.__sift_up(slot)
        else:
            for index in range(slot // 2 - 1, -1, -1):
                self.__sift_down(index)
        return True

    def snapshot(self) -> List[GapRecord]:
        """
        Held gaps in slot order, which is heap order and not sorted.
        """
        return list(self.__slots[:self.__size])

    def __min_candidate(self) -> int:
        first = self.__size // 2 if self.__policy is EvictionPolicy.LEAF else 0
        min_index = first
        min_value = self.__slots[first].duration
        for i in range(first + 1, self.__size):
            if self.__slots[i].duration < min_value:
                min_value = self.__slots[i].duration
                min_index = i
        return min_index

    def __sift_down(self, start: int) -> None:
        slots = self.__slots
        size = self.__size
        index = start
        while True:
            largest = index
            left = 2 * index + 1
            right = 2 * index + 2

            if left < size and slots[left].duration > slots[largest].duration:
                largest = left
            if right < size and slots[right].duration > slots[largest].duration:
                largest = right

            if largest == index:
                return
            slots[index], slots[largest] = slots[largest], slots[index]
            index = largest

    def __sift_up(self, index: int) -> None:
        slots = self.__slots
        while index > 0:
            parent = (index - 1) // 2
            if slots[parent].duration >= slots[index].duration:
                return
            slots[parent], slots[index] = slots[index], slots[parent]
            index = parent
