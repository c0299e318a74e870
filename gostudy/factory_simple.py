"""Simple factory: one function picks a rule-config parser by format name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class RuleConfigParser:
    """A parser for rule configuration in one format."""

    format: ClassVar[str] = ""


@dataclass(frozen=True)
class JsonRuleConfigParser(RuleConfigParser):
    """Rule-config parser for JSON."""

    format: ClassVar[str] = "json"


@dataclass(frozen=True)
class YamlRuleConfigParser(RuleConfigParser):
    """Rule-config parser for YAML."""

    format: ClassVar[str] = "yaml"


_PARSERS: dict[str, type[RuleConfigParser]] = {
    "json": JsonRuleConfigParser,
    "yaml": YamlRuleConfigParser,
}


def new_rule_config_parser(kind: str) -> RuleConfigParser:
    """Return a parser for ``kind`` ("json" or "yaml").

    Raises ValueError for any other kind.
    """
    try:
        return _PARSERS[kind]()
    except KeyError:
        raise ValueError(f"unknown rule config format: {kind!r}") from None