"""Builder pattern: builders assemble phones step by step, a manager drives them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar


@dataclass
class Phone:
    """A phone as assembled by a builder."""

    name: str
    processor: str = ""
    camera: str = ""
    screen: str = ""


class Builder(ABC):
    """Assembles a phone one part at a time."""

    phone_name: ClassVar[str]
    assembly_message: ClassVar[str]

    @abstractmethod
    def add_processor(self, phone: Phone) -> None:
        """Fit the processor."""

    @abstractmethod
    def add_camera(self, phone: Phone) -> None:
        """Fit the camera."""

    @abstractmethod
    def add_screen(self, phone: Phone) -> None:
        """Fit the screen."""

    def produce(self) -> Phone:
        """Assemble and return a complete phone."""
        phone = Phone(name=self.phone_name)
        self.add_processor(phone)
        self.add_camera(phone)
        self.add_screen(phone)
        print(self.assembly_message)
        return phone


class HuaWeiBuilder(Builder):
    """Builds HuaWei phones."""

    phone_name = "HuaWeiPhone"
    assembly_message = "华为生产线的工人组装了一台华为手机"

    def add_processor(self, phone: Phone) -> None:
        phone.processor = "海思麒麟处理器"

    def add_camera(self, phone: Phone) -> None:
        phone.camera = "莱卡摄像头"

    def add_screen(self, phone: Phone) -> None:
        phone.screen = "OLED"


class XiaomiBuilder(Builder):
    """Builds Xiaomi phones."""

    phone_name = "XiaomiPhone"
    assembly_message = "小米生产线的工人组装了一台小米手机"

    def add_processor(self, phone: Phone) -> None:
        phone.processor = "高通骁龙处理器"

    def add_camera(self, phone: Phone) -> None:
        phone.camera = "索尼摄像头"

    def add_screen(self, phone: Phone) -> None:
        phone.screen = "OLED"


@dataclass
class Manager:
    """Directs a builder to produce phones."""

    builder: Builder

    def produce(self) -> Phone:
        """Have the builder produce one phone."""
        return self.builder.produce()