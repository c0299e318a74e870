"""Classic in-place sorts, searches and a few array puzzles."""

from __future__ import annotations

import heapq
from collections import Counter


def bubble_sort(nums: list[int]) -> None:
    """Sort ``nums`` in place, stopping early once a pass makes no swap."""
    for i in range(len(nums)):
        swapped = False
        for j in range(len(nums) - i - 1):
            if nums[j] > nums[j + 1]:
                nums[j], nums[j + 1] = nums[j + 1], nums[j]
                swapped = True
        if not swapped:
            return


def select_sort(nums: list[int]) -> None:
    """Sort ``nums`` in place by repeatedly selecting the smallest remaining value."""
    for i in range(len(nums)):
        smallest = min(range(i, len(nums)), key=nums.__getitem__)
        nums[i], nums[smallest] = nums[smallest], nums[i]


def insert_sort(nums: list[int]) -> None:
    """Sort ``nums`` in place by insertion."""
    for j in range(1, len(nums)):
        current = nums[j]
        k = j - 1
        while k >= 0 and nums[k] > current:
            nums[k + 1] = nums[k]
            k -= 1
        nums[k + 1] = current


def partition(nums: list[int], start: int, end: int) -> int:
    """Partition ``nums[start:end]`` around ``nums[start]`` by moving a hole.

    Returns the pivot's final index. The values in the range must be distinct.
    """
    pivot = nums[start]
    p, q = start, end - 1
    while p < q:
        while nums[q] > pivot and p != q:
            q -= 1
        nums[p] = nums[q]
        while nums[p] < pivot and p != q:
            p += 1
        nums[q] = nums[p]
    nums[p] = pivot
    return p


def partition2(nums: list[int], start: int, end: int) -> int:
    """Partition ``nums[start:end]`` around ``nums[start]`` by swapping pairs.

    Returns the pivot's final index; duplicates are allowed.
    """
    pivot = nums[start]
    p, q = start, end - 1
    while p < q:
        while nums[q] >= pivot and p != q:
            q -= 1
        while nums[p] <= pivot and p != q:
            p += 1
        nums[p], nums[q] = nums[q], nums[p]
    nums[start], nums[p] = nums[p], pivot
    return p


def quick_sort(nums: list[int], start: int, end: int) -> None:
    """Sort ``nums[start:end]`` in place with quicksort."""
    if start >= end:
        return
    part = partition2(nums, start, end)
    quick_sort(nums, start, part)
    quick_sort(nums, part + 1, end)


def merge(nums: list[int], start1: int, end1: int, start2: int, end2: int) -> None:
    """Merge the sorted runs ``nums[start1:end1]`` and ``nums[start2:end2]``.

    The merged run is written back from ``start1``. Nothing happens when
    either run starts past the end of ``nums``.
    """
    if start1 >= len(nums) or start2 >= len(nums):
        return
    merged = list(heapq.merge(nums[start1:end1], nums[start2:end2]))
    nums[start1 : start1 + len(merged)] = merged


def merge_sort_loop(nums: list[int]) -> None:
    """Sort ``nums`` in place with bottom-up merge sort."""
    n = len(nums)
    width = 1
    while width < n:
        i = 0
        while i < n - 2 * width:
            merge(nums, i, i + width, i + width, i + 2 * width)
            i += 2 * width
        if i + width < n:
            merge(nums, i, i + width, i + width, n)
        width *= 2


def merge_sort_recursive(nums: list[int], left: int, right: int) -> None:
    """Sort ``nums[left:right]`` in place with top-down merge sort."""
    if right - left > 1:
        mid = left + ((right - left) >> 1)
        merge_sort_recursive(nums, left, mid)
        merge_sort_recursive(nums, mid, right)
        merge(nums, left, mid, mid, right)


def search(nums: list[int], target: int) -> bool:
    """Binary-search a possibly rotated sorted list for ``target``."""
    low, high = 0, len(nums) - 1
    while low < high:
        mid = (high + low) >> 1
        if target == nums[mid]:
            return True
        if nums[low] >= nums[high]:
            if nums[high] < target < nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif target < nums[mid]:
            high = mid - 1
        else:
            low = mid + 1
    return False


def longest_consecutive(nums: list[int]) -> int:
    """Length of the longest run of consecutive values, counting repeats."""
    counts = Counter(nums)
    longest = 0
    for start, count in counts.items():
        if start - 1 in counts:
            continue
        current = start
        while current + 1 in counts:
            current += 1
            count += counts[current]
        longest = max(longest, count)
    return longest


def binary_search(
    nums: list[int], left: int, right: int, target: int, flag: bool
) -> int:
    """Look for a boundary occurrence of ``target`` in ``nums[left..right]``.

    With ``flag`` set it looks for the first occurrence, otherwise the last.
    Returns -1 when none is found.
    """
    if left > right:
        return -1
    mid = (left + right) >> 1
    if mid == 0 or (mid == left and mid == right):
        return mid if nums[mid] == target else -1

    if flag:
        if nums[mid] == target and nums[mid - 1] != nums[mid]:
            return mid
        if nums[mid] != target:
            return binary_search(nums, mid + 1, right, target, False)
        return binary_search(nums, left, mid - 1, target, True)

    if nums[mid] == target and nums[mid + 1] != nums[mid]:
        return mid
    if nums[mid] != target:
        return binary_search(nums, left, mid - 1, target, True)
    return binary_search(nums, mid + 1, right, target, False)


def search_range(nums: list[int], target: int) -> list[int]:
    """Return ``[first, last]`` positions found for ``target``, or ``[-1, -1]``."""
    left, right = 0, len(nums) - 1
    result = [-1, -1]
    while left < right:
        mid = (left + right) >> 1
        if nums[mid] == target:
            result[0] = binary_search(nums, left, mid - 1, target, True)
            result[1] = binary_search(nums, mid + 1, right, target, False)
            return result
        if nums[mid] > target:
            right = mid - 1
        else:
            left = mid + 1
    return result


def nth_ugly_number(n: int) -> int:
    """Return the n-th number whose only prime factors are 2, 3 and 5."""
    if n < 1:
        raise ValueError("n must be at least 1")
    heap = [1]
    seen = {1}
    for _ in range(n - 1):
        x = heapq.heappop(heap)
        for factor in (2, 3, 5):
            candidate = x * factor
            if candidate not in seen:
                seen.add(candidate)
                heapq.heappush(heap, candidate)
    return heap[0]


def decode_string(s: str) -> str:
    """Expand ``k[text]`` groups, e.g. a count followed by bracketed letters.

    Only lowercase ASCII letters are kept; other characters are skipped.
    A count of zero keeps the group once. Raises ValueError on an unmatched ``]``.
    """
    stack: list[tuple[int, str]] = []
    digits = ""
    current = ""
    for ch in s:
        if "0" <= ch <= "9":
            digits += ch
        elif digits and ch == "[":
            stack.append((int(digits), current))
            digits = ""
            current = ""
        elif "a" <= ch <= "z":
            current += ch
        elif ch == "]":
            if not stack:
                raise ValueError("unmatched ']' in encoded string")
            times, prefix = stack.pop()
            current = prefix + current * max(times, 1)
    return current


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` right by ``k`` places in place."""
    if k == 0 or len(nums) == k:
        return
    shift = k % len(nums)
    nums[:] = nums[len(nums) - shift :] + nums[: len(nums) - shift]