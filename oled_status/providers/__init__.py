from oled_status.providers.abstract import (Clock, MetricsProvider,
                                            NetworkChecker, Providers,
                                            TemperatureSensor)

__all__ = ["Clock", "MetricsProvider", "NetworkChecker", "Providers", "TemperatureSensor"]
