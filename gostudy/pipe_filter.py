"""Pipe-and-filter processing: filters chained into a straight pipeline."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN, _INT_MAX = -(2**63), 2**63 - 1


class FilterFormatError(TypeError):
    """A filter received data of a type it cannot process."""


class Filter(ABC):
    """A data-processing component of a pipeline."""

    @abstractmethod
    def process(self, data: Any) -> Any:
        """Transform ``data`` and return the result."""


class SplitFilter(Filter):
    """Split a string into parts on a delimiter."""

    def __init__(self, delimiter: str) -> None:
        self.delimiter = delimiter

    def process(self, data: Any) -> list[str]:
        if not isinstance(data, str):
            raise FilterFormatError("input data should be String.")
        if not self.delimiter:
            return list(data)
        return data.split(self.delimiter)


class ToIntFilter(Filter):
    """Convert a list of decimal strings to integers."""

    def process(self, data: Any) -> list[int]:
        if not isinstance(data, list) or not all(isinstance(p, str) for p in data):
            raise FilterFormatError("input data should be []string")
        return [self._to_int(part) for part in data]

    @staticmethod
    def _to_int(part: str) -> int:
        if not _INT_PATTERN.fullmatch(part):
            raise ValueError(f'parsing "{part}": invalid syntax')
        value = int(part)
        if not _INT_MIN <= value <= _INT_MAX:
            raise ValueError(f'parsing "{part}": value out of range')
        return value


class SumFilter(Filter):
    """Sum a list of integers."""

    def process(self, data: Any) -> int:
        if not isinstance(data, list) or not all(
            isinstance(e, int) and not isinstance(e, bool) for e in data
        ):
            raise FilterFormatError("input data should be []int")
        return sum(data)


class StraightPipeline(Filter):
    """Run filters one after another, feeding each the previous result."""

    def __init__(self, name: str, *filters: Filter) -> None:
        self.name = name
        self.filters = list(filters)

    def process(self, data: Any) -> Any:
        """Return the last filter's output, or None when there are no filters."""
        result = None
        for step in self.filters:
            result = step.process(data)
            data = result
        return result