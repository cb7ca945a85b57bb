from dataclasses import dataclass, field
from typing import Final

from oled_status.common.errors import ConfigurationError
from oled_status.common.timeformat import DEFAULT_TIME_FORMAT
from oled_status.config.types import Hardware

_LOG_LEVELS: Final[tuple[str, ...]] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(kw_only=True)
class Component:
    type: str
    x: int = 0
    y: int = 0
    label: str = ""
    show_bar: bool = False
    bar_width: int = 0
    time_format: str = ""

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)


@dataclass(kw_only=True)
class Screen:
    name: str = ""
    components: list[Component] = field(default_factory=list)


def _default_screens() -> list[Screen]:
    return [
        Screen(name="status",
               components=[Component(type="time", x=0, y=12, time_format=DEFAULT_TIME_FORMAT),
                           Component(type="ip", x=0, y=30, label="IP"),
                           Component(type="temperature", x=0, y=48, label="Temp")]),
        Screen(name="resources",
               components=[Component(type="cpu", x=0, y=10, label="CPU", show_bar=True, bar_width=127),
                           Component(type="memory", x=0, y=31, label="MEM", show_bar=True, bar_width=127),
                           Component(type="disk", x=0, y=52, label="DSK", show_bar=True, bar_width=127)]),
    ]


@dataclass(kw_only=True)
class SSD1306:
    i2c_port: int = 1
    i2c_address: int = 0x3C
    # 0..3 => 0, 90, 180, 270 degrees
    rotate: int = 0


@dataclass(kw_only=True)
class Computer:
    pixel_size: int = 4
    margin: int = 1


@dataclass(kw_only=True)
class Settings:
    hardware: Hardware = Hardware.SSD1306

    display_width: int = 128
    display_height: int = 64

    screen_duration: int = 5
    invert_duration: int = 0

    day_start_hour: int = 7
    night_start_hour: int = 22
    bright_contrast: int = 255
    dim_contrast: int = 1

    network_interface: str = "eth0"
    temperature_file: str = "/sys/class/thermal/thermal_zone0/temp"
    disk_path: str = "/"

    log_level: str = "INFO"

    ssd1306: SSD1306 = field(default_factory=SSD1306)
    computer: Computer = field(default_factory=Computer)

    screens: list[Screen] = field(default_factory=_default_screens)

    def validate(self) -> None:
        """
        Check the value ranges of the settings.
        @raise ConfigurationError: On the first invalid value.
        """
        if self.display_width <= 0 or self.display_height <= 0:
            raise ConfigurationError("The display size must be positive.")
        if self.screen_duration <= 0:
            raise ConfigurationError("'screen_duration' must be greater than 0.")
        if self.invert_duration < 0:
            raise ConfigurationError("'invert_duration' must be 0 (disabled) or greater.")

        hour_name: str
        for hour_name in ("day_start_hour", "night_start_hour"):
            if not 0 <= getattr(self, hour_name) <= 23:
                raise ConfigurationError(f"'{hour_name}' must be between 0 and 23.")

        contrast_name: str
        for contrast_name in ("bright_contrast", "dim_contrast"):
            if not 0 <= getattr(self, contrast_name) <= 255:
                raise ConfigurationError(f"'{contrast_name}' must be between 0 and 255.")

        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(f"'log_level' must be one of {', '.join(_LOG_LEVELS)}.")

        if not 0 <= self.ssd1306.rotate <= 3:
            raise ConfigurationError("'rotate' must be between 0 and 3.")

        # the screen rotation needs at least one screen
        if not self.screens:
            raise ConfigurationError("At least one screen must be configured.")

        screen: Screen
        for screen in self.screens:
            component: Component
            for component in screen.components:
                if component.bar_width < 0:
                    raise ConfigurationError(f"Negative 'bar_width' on screen '{screen.name}'.")

    @property
    def frame_size(self) -> tuple[int, int]:
        """
        @return: The (width, height) of the image that is drawn. A SSD1306 rotated by 90 or 270 degrees
                  shows it with width and height swapped.
        """
        if self.hardware is Hardware.SSD1306 and self.ssd1306.rotate % 2 == 1:
            return (self.display_height, self.display_width)

        return (self.display_width, self.display_height)

    def is_daytime(self, hour: int) -> bool:
        return self.day_start_hour <= hour < self.night_start_hour

    def contrast_for(self, hour: int) -> int:
        """
        @param hour: The hour of the day (0-23).
        @return: The contrast level that should be applied at this hour.
        """
        if self.is_daytime(hour):
            return self.bright_contrast

        return self.dim_contrast
