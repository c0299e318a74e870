"""Employee records with nested JSON objects."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _fields(obj: Any, context: str) -> dict[str, Any]:
    if not isinstance(obj, dict):
        raise ValueError(f"cannot unmarshal {type(obj).__name__} into {context}")
    return obj


def _matching(obj: dict[str, Any], key: str):
    """Yield values whose key matches ``key`` case-insensitively, in order."""
    folded = key.casefold()
    for name, value in obj.items():
        if name == key or name.casefold() == folded:
            yield value


@dataclass
class BasicInfo:
    """An employee's name and age."""

    name: str = ""
    age: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "age": self.age}

    def _update(self, obj: dict[str, Any]) -> None:
        for value in _matching(obj, "name"):
            if value is None:
                continue
            if not isinstance(value, str):
                raise ValueError("cannot unmarshal into field name of type string")
            self.name = value
        for value in _matching(obj, "age"):
            if value is None:
                continue
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError("cannot unmarshal into field age of type int")
            self.age = value


@dataclass
class JobInfo:
    """An employee's skills; None when never set."""

    skills: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"skills": None if self.skills is None else list(self.skills)}

    def _update(self, obj: dict[str, Any]) -> None:
        for value in _matching(obj, "skills"):
            if value is None:
                self.skills = None
                continue
            if not isinstance(value, list) or not all(
                s is None or isinstance(s, str) for s in value
            ):
                raise ValueError("cannot unmarshal into field skills of type []string")
            self.skills = ["" if s is None else s for s in value]


@dataclass
class Employee:
    """An employee made of basic and job information."""

    basic_info: BasicInfo = field(default_factory=BasicInfo)
    job_info: JobInfo = field(default_factory=JobInfo)

    @classmethod
    def from_json(cls, text: str | bytes) -> Employee:
        """Parse an employee; missing or null fields keep their defaults.

        Raises ValueError on malformed JSON or on a value of the wrong type.
        """
        employee = cls()
        data = json.loads(text)
        if data is None:
            return employee
        obj = _fields(data, "Employee")
        for value in _matching(obj, "basic_info"):
            if value is not None:
                employee.basic_info._update(_fields(value, "BasicInfo"))
        for value in _matching(obj, "job_info"):
            if value is not None:
                employee.job_info._update(_fields(value, "JobInfo"))
        return employee

    def to_dict(self) -> dict[str, Any]:
        return {
            "basic_info": self.basic_info.to_dict(),
            "job_info": self.job_info.to_dict(),
        }

    def to_json(self) -> str:
        """Serialise to compact JSON with HTML-sensitive characters escaped."""
        text = json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))
        return "".join(_HTML_ESCAPES.get(ch, ch) for ch in text)