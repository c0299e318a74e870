"""Factory method: one factory class per product, for parsers and phones."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

__all__ = [
    "RuleConfigParser",
    "JsonRuleConfigParser",
    "YamlRuleConfigParser",
    "XmlRuleConfigParser",
    "RuleConfigParserFactory",
    "JsonRuleConfigParserFactory",
    "YamlRuleConfigParserFactory",
    "XmlRuleConfigParserFactory",
    "Phone",
    "HuaWeiPhone",
    "XiaomiPhone",
    "ApplePhone",
    "PhoneFactory",
    "HuaWeiPhoneFactory",
    "XiaomiPhoneFactory",
    "ApplePhoneFactory",
    "new_rule_config_parser_factory",
    "new_phone_factory",
]


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


@dataclass(frozen=True)
class XmlRuleConfigParser(RuleConfigParser):
    """Rule-config parser for XML."""

    format: ClassVar[str] = "xml"


class RuleConfigParserFactory(ABC):
    """Creates one kind of rule-config parser."""

    @abstractmethod
    def create_parser(self) -> RuleConfigParser:
        """Return a new parser."""


class JsonRuleConfigParserFactory(RuleConfigParserFactory):
    def create_parser(self) -> RuleConfigParser:
        return JsonRuleConfigParser()


class YamlRuleConfigParserFactory(RuleConfigParserFactory):
    def create_parser(self) -> RuleConfigParser:
        return YamlRuleConfigParser()


class XmlRuleConfigParserFactory(RuleConfigParserFactory):
    def create_parser(self) -> RuleConfigParser:
        return XmlRuleConfigParser()


@dataclass(frozen=True)
class Phone:
    """A phone that can place calls."""

    brand: ClassVar[str] = ""

    def call(self, phone_number: str) -> str:
        """Place a call, print the dialling line and return it."""
        line = f"{self.brand}手机拨打电话： {phone_number}"
        print(line)
        return line


@dataclass(frozen=True)
class HuaWeiPhone(Phone):
    brand: ClassVar[str] = "华为"


@dataclass(frozen=True)
class XiaomiPhone(Phone):
    brand: ClassVar[str] = "小米"


@dataclass(frozen=True)
class ApplePhone(Phone):
    brand: ClassVar[str] = "苹果"


class PhoneFactory(ABC):
    """Produces one brand of phone."""

    @abstractmethod
    def produce(self) -> Phone:
        """Return a new phone."""


class HuaWeiPhoneFactory(PhoneFactory):
    def produce(self) -> Phone:
        return HuaWeiPhone()


class XiaomiPhoneFactory(PhoneFactory):
    def produce(self) -> Phone:
        return XiaomiPhone()


class ApplePhoneFactory(PhoneFactory):
    def produce(self) -> Phone:
        return ApplePhone()


_PARSER_FACTORIES: dict[str, type[RuleConfigParserFactory]] = {
    "json": JsonRuleConfigParserFactory,
    "yaml": YamlRuleConfigParserFactory,
    "xml": XmlRuleConfigParserFactory,
}

_PHONE_FACTORIES: dict[str, type[PhoneFactory]] = {
    "HuaWei": HuaWeiPhoneFactory,
    "Xiaomi": XiaomiPhoneFactory,
    "Iphone": ApplePhoneFactory,
}


def new_rule_config_parser_factory(kind: str) -> RuleConfigParserFactory:
    """Return the parser factory for "json", "yaml" or "xml"; ValueError otherwise."""
    try:
        return _PARSER_FACTORIES[kind]()
    except KeyError:
        raise ValueError(f"unknown rule config format: {kind!r}") from None


def new_phone_factory(kind: str) -> PhoneFactory:
    """Return the phone factory for "HuaWei", "Xiaomi" or "Iphone"; ValueError otherwise."""
    try:
        return _PHONE_FACTORIES[kind]()
    except KeyError:
        raise ValueError(f"unknown phone brand: {kind!r}") from None