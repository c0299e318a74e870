"""A 1-indexed binary min-heap with top-N selection.

The backing list keeps slot 0 unused so that the children of slot ``i``
are at ``2*i`` and ``2*i + 1``.
"""

from __future__ import annotations

from dataclasses import dataclass, field


def heapify(nums: list[int], i: int, n: int) -> None:
    """Sift ``nums[i]`` down within the 1-indexed min-heap ``nums[1..n]``."""
    while True:
        smallest = i
        left, right = 2 * i, 2 * i + 1
        if left <= n and nums[left] < nums[smallest]:
            smallest = left
        if right <= n and nums[right] < nums[smallest]:
            smallest = right
        if smallest == i:
            return
        nums[smallest], nums[i] = nums[i], nums[smallest]
        i = smallest


@dataclass
class Heap:
    """Min-heap stored in ``data[1..size]``; ``data[0]`` is a placeholder."""

    data: list[int] = field(default_factory=lambda: [0])
    size: int = 0

    @property
    def values(self) -> list[int]:
        """The elements currently in the heap, in storage order."""
        return self.data[1 : self.size + 1]

    def insert(self, node: int) -> None:
        """Append ``node`` and sift it up towards the root."""
        self.data.append(node)
        self.size += 1
        i = self.size
        while i // 2 > 0 and self.data[i // 2] > self.data[i]:
            self.data[i // 2], self.data[i] = self.data[i], self.data[i // 2]
            i //= 2

    def delete(self) -> int:
        """Remove and return the smallest element.

        Raises IndexError when the heap is empty.
        """
        if self.size == 0:
            raise IndexError("empty")
        root = self.data[1]
        self.data[1] = self.data[self.size]
        del self.data[self.size]
        self.size -= 1
        heapify(self.data, 1, self.size)
        return root

    def top_n(self, n: int) -> list[int]:
        """Return the ``n`` largest stored values.

        The first ``n`` slots must already form a min-heap (see ``build_heap``).
        Every later value larger than the heap top replaces it. The backing
        list is rearranged in place.
        """
        if n >= len(self.data):
            return self.data[1:]
        for i in range(n + 1, len(self.data)):
            if self.data[1] < self.data[i]:
                self.data[1], self.data[i] = self.data[i], self.data[1]
                heapify(self.data, 1, n)
        return self.data[1 : n + 1]


def build_heap_array(nodes: list[int], n: int) -> list[int]:
    """Return a 1-indexed list whose first ``n`` values form a min-heap."""
    m = [0, *nodes]
    for i in range(n // 2, 0, -1):
        heapify(m, i, n)
    return m


def build_heap(nodes: list[int], n: int) -> Heap:
    """Build a ``Heap`` over ``nodes`` whose first ``n`` values are heap-ordered."""
    return Heap(build_heap_array(nodes, n), n)


def find_kth_largest(m: list[int], k: int) -> list[int]:
    """Keep the ``k`` largest values of a 1-indexed list in ``m[1..k]``.

    ``m`` must come from ``build_heap_array(nodes, k)``; afterwards ``m[1]``
    is the k-th largest value. The list is modified in place and returned.
    """
    for i in range(k + 1, len(m)):
        if m[1] < m[i]:
            m[1], m[i] = m[i], m[1]
            heapify(m, 1, k)
    return m