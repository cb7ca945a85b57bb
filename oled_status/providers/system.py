"""
Providers that read the values from the running system.
"""
import socket
from datetime import datetime
from pathlib import Path

import psutil

from oled_status.common.errors import ProviderError
from oled_status.config.settings import Settings
from oled_status.providers.abstract import (Clock, MetricsProvider,
                                            NetworkChecker, Providers,
                                            TemperatureSensor)


class PsutilNetworkChecker(NetworkChecker):
    def get_ipv4_address(self, interface_name: str) -> str:
        try:
            addresses: dict[str, list] = psutil.net_if_addrs()
        except OSError:
            return "No IP"

        if interface_name not in addresses:
            return f"No {interface_name}"

        for address in addresses[interface_name]:
            if address.family == socket.AF_INET:
                return address.address

        return "No IPv4"


class PsutilMetricsProvider(MetricsProvider):
    def __init__(self, disk_path: str="/") -> None:
        self.__disk_path: str = disk_path

    def cpu_percent(self) -> float:
        try:
            # utilization since the last call, does not block
            return float(psutil.cpu_percent(interval=None))
        except (OSError, psutil.Error) as e:
            raise ProviderError(f"Failed to read the CPU usage: {e}") from e

    def memory_percent(self) -> float:
        try:
            return float(psutil.virtual_memory().percent)
        except (OSError, psutil.Error) as e:
            raise ProviderError(f"Failed to read the memory usage: {e}") from e

    def disk_percent(self) -> float:
        try:
            return float(psutil.disk_usage(self.__disk_path).percent)
        except (OSError, psutil.Error) as e:
            raise ProviderError(f"Failed to read the usage of '{self.__disk_path}': {e}") from e


class ThermalZoneSensor(TemperatureSensor):
    """
    Reads a file that contains the temperature in millidegrees Celsius,
    like '/sys/class/thermal/thermal_zone0/temp'.
    """

    def __init__(self, file_path: Path) -> None:
        self.__file_path: Path = file_path

    def celsius(self) -> float:
        try:
            raw: str = self.__file_path.read_text(encoding="ascii")
        except (OSError, UnicodeDecodeError) as e:
            raise ProviderError(f"Failed to read temperature: {e}") from e

        try:
            millidegrees: int = int(raw.strip())
        except ValueError as e:
            raise ProviderError(f"Failed to parse temperature: {raw!r}") from e

        return millidegrees / 1000.


class SystemClock(Clock):
    def now(self) -> datetime:
        return datetime.now()


def create_system_providers(config: Settings) -> Providers:
    return Providers(network=PsutilNetworkChecker(),
                     metrics=PsutilMetricsProvider(disk_path=config.disk_path),
                     temperature=ThermalZoneSensor(Path(config.temperature_file)),
                     clock=SystemClock())
