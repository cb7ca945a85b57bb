from datetime import datetime
from typing import Callable

import numpy as np
import pytest
from numpy.typing import NDArray
from PIL import Image

from oled_status.common.errors import ProviderError
from oled_status.config.settings import Settings
from oled_status.display.abstract import AbstractDisplay
from oled_status.providers.abstract import (Clock, MetricsProvider,
                                            NetworkChecker, Providers,
                                            TemperatureSensor)


class RecordingDisplay(AbstractDisplay):
    def __init__(self, config: Settings | None=None) -> None:
        super().__init__(config=config or Settings())

        self.frames: list[Image.Image] = []
        self.contrasts: list[int] = []
        self.inversions: list[bool] = []
        self.is_shut_down: bool = False
        self.on_show: Callable[[int], None] | None = None

    def show(self) -> None:
        self.frames.append(self.frame_buffer.copy())
        if self.on_show is not None:
            self.on_show(len(self.frames))

    def set_contrast(self, contrast: int) -> None:
        self.contrasts.append(contrast)

    def set_inverted(self, inverted: bool) -> None:
        self.inversions.append(inverted)

    def shutdown(self) -> None:
        self.is_shut_down = True


class StaticNetworkChecker(NetworkChecker):
    def __init__(self, addresses: dict[str, str]) -> None:
        self.addresses: dict[str, str] = addresses

    def get_ipv4_address(self, interface_name: str) -> str:
        return self.addresses.get(interface_name, f"No {interface_name}")


class StaticMetrics(MetricsProvider):
    def __init__(self, cpu: float=0., memory: float=0., disk: float=0.) -> None:
        self.cpu: float = cpu
        self.memory: float = memory
        self.disk: float = disk
        self.failing: bool = False

    def __value(self, value: float) -> float:
        if self.failing:
            raise ProviderError("metrics unavailable")
        return value

    def cpu_percent(self) -> float:
        return self.__value(self.cpu)

    def memory_percent(self) -> float:
        return self.__value(self.memory)

    def disk_percent(self) -> float:
        return self.__value(self.disk)


class StaticTemperature(TemperatureSensor):
    def __init__(self, celsius: float) -> None:
        self.value: float = celsius

    def celsius(self) -> float:
        return self.value


class FixedClock(Clock):
    def __init__(self, current: datetime) -> None:
        self.current: datetime = current

    def now(self) -> datetime:
        return self.current


def to_pixels(image: Image.Image) -> NDArray[np.bool_]:
    return np.array(image, dtype=np.bool_)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2024, 5, 17, 12, 34, 56))


@pytest.fixture
def metrics() -> StaticMetrics:
    return StaticMetrics(cpu=42.5, memory=63.25, disk=80.)


@pytest.fixture
def providers(clock: FixedClock, metrics: StaticMetrics) -> Providers:
    return Providers(network=StaticNetworkChecker({"eth0": "192.168.1.20"}),
                     metrics=metrics,
                     temperature=StaticTemperature(45.2),
                     clock=clock)


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()
