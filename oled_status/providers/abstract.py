"""
The capabilities that supply live values to the components.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


class NetworkChecker(ABC):
    @abstractmethod
    def get_ipv4_address(self, interface_name: str) -> str:
        """
        @param interface_name: The name of the network interface, e.g. 'eth0'.
        @return: The first IPv4 address of the interface in dotted-decimal notation.
                 If the interface does not exist or has no IPv4 address, a descriptive fallback text.
        """
        raise NotImplementedError


class MetricsProvider(ABC):
    """
    All values are percentages from 0 to 100.
    Failures are raised as ProviderError.
    """

    @abstractmethod
    def cpu_percent(self) -> float:
        raise NotImplementedError

    @abstractmethod
    def memory_percent(self) -> float:
        raise NotImplementedError

    @abstractmethod
    def disk_percent(self) -> float:
        raise NotImplementedError


class TemperatureSensor(ABC):
    @abstractmethod
    def celsius(self) -> float:
        """
        @return: The current temperature in degrees Celsius.
        @raise ProviderError: If the value can't be read or parsed.
        """
        raise NotImplementedError


class Clock(ABC):
    @abstractmethod
    def now(self) -> datetime:
        """The current local time."""
        raise NotImplementedError


@dataclass(frozen=True)
class Providers:
    network: NetworkChecker
    metrics: MetricsProvider
    temperature: TemperatureSensor
    clock: Clock
