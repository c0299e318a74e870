"""Abstract factory: each factory makes a matching family of products."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

__all__ = [
    "RuleConfigParser",
    "SystemConfigParser",
    "ConfigParserFactory",
    "JsonConfigParserFactory",
    "XmlConfigParserFactory",
    "JsonRuleConfigParser",
    "JsonSystemConfigParser",
    "XmlRuleConfigParser",
    "XmlSystemConfigParser",
    "Phone",
    "Charger",
    "DeviceFactory",
    "XiaomiPhone",
    "XiaomiCharger",
    "XiaomiPhoneFactory",
    "HuaWeiPhone",
    "HuaWeiCharger",
    "HuaWeiPhoneFactory",
    "new_phone_and_charger_factory",
]


@dataclass(frozen=True)
class RuleConfigParser:
    """A parser for rule configuration in one format."""

    format: ClassVar[str] = ""


@dataclass(frozen=True)
class JsonRuleConfigParser(RuleConfigParser):
    format: ClassVar[str] = "json"


@dataclass(frozen=True)
class XmlRuleConfigParser(RuleConfigParser):
    format: ClassVar[str] = "xml"


@dataclass(frozen=True)
class SystemConfigParser:
    """A parser for system configuration in one format."""

    format: ClassVar[str] = ""


@dataclass(frozen=True)
class JsonSystemConfigParser(SystemConfigParser):
    format: ClassVar[str] = "json"


@dataclass(frozen=True)
class XmlSystemConfigParser(SystemConfigParser):
    format: ClassVar[str] = "xml"


class ConfigParserFactory(ABC):
    """Creates the rule and system parsers of one format."""

    @abstractmethod
    def create_rule_config_parser(self) -> RuleConfigParser:
        """Return a new rule-config parser."""

    @abstractmethod
    def create_system_config_parser(self) -> SystemConfigParser:
        """Return a new system-config parser."""


class JsonConfigParserFactory(ConfigParserFactory):
    def create_rule_config_parser(self) -> RuleConfigParser:
        return JsonRuleConfigParser()

    def create_system_config_parser(self) -> SystemConfigParser:
        return JsonSystemConfigParser()


class XmlConfigParserFactory(ConfigParserFactory):
    def create_rule_config_parser(self) -> RuleConfigParser:
        return XmlRuleConfigParser()

    def create_system_config_parser(self) -> SystemConfigParser:
        return XmlSystemConfigParser()


@dataclass
class Phone:
    """A named phone that can place calls."""

    name: str
    brand: ClassVar[str] = ""

    def call(self, phone_number: str) -> str:
        """Place a call, print the dialling line and return it."""
        line = f"{self.brand}手机拨打电话： {phone_number}"
        print(line)
        return line


@dataclass(frozen=True)
class Charger:
    """A charger for phones."""

    brand: ClassVar[str] = ""

    def charge(self, phone: Phone) -> str:
        """Charge ``phone``, print what happened and return it."""
        line = f"{self.brand}充电器给 {phone.name} 充电"
        print(line)
        return line


@dataclass
class XiaomiPhone(Phone):
    name: str = "小米手机"
    brand: ClassVar[str] = "小米"


@dataclass(frozen=True)
class XiaomiCharger(Charger):
    brand: ClassVar[str] = "小米"


@dataclass
class HuaWeiPhone(Phone):
    name: str = "华为手机"
    brand: ClassVar[str] = "华为"


@dataclass(frozen=True)
class HuaWeiCharger(Charger):
    brand: ClassVar[str] = "华为"


class DeviceFactory(ABC):
    """Produces a phone and a charger of the same brand."""

    @abstractmethod
    def produce_phone(self) -> Phone:
        """Return a new phone."""

    @abstractmethod
    def produce_charger(self) -> Charger:
        """Return a new charger."""


class XiaomiPhoneFactory(DeviceFactory):
    def produce_phone(self) -> Phone:
        return XiaomiPhone()

    def produce_charger(self) -> Charger:
        return XiaomiCharger()


class HuaWeiPhoneFactory(DeviceFactory):
    def produce_phone(self) -> Phone:
        return HuaWeiPhone()

    def produce_charger(self) -> Charger:
        return HuaWeiCharger()


_DEVICE_FACTORIES: dict[str, type[DeviceFactory]] = {
    "HuaWei": HuaWeiPhoneFactory,
    "Xiaomi": XiaomiPhoneFactory,
}


def new_phone_and_charger_factory(kind: str) -> DeviceFactory:
    """Return the device factory for "HuaWei" or "Xiaomi"; ValueError otherwise."""
    try:
        return _DEVICE_FACTORIES[kind]()
    except KeyError:
        raise ValueError(f"unknown phone brand: {kind!r}") from None