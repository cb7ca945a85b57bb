from typing import Final


class _Meta:
    SECTION_NAME: str | None


class _MainSettingsMeta(_Meta):
    # the main settings are on the top level of the file
    SECTION_NAME = None

    HARDWARE: Final[str] = "hardware"

    DISPLAY_WIDTH: Final[str] = "display_width"
    DISPLAY_HEIGHT: Final[str] = "display_height"

    SCREEN_DURATION: Final[str] = "screen_duration"
    INVERT_DURATION: Final[str] = "invert_duration"

    DAY_START_HOUR: Final[str] = "day_start_hour"
    NIGHT_START_HOUR: Final[str] = "night_start_hour"
    BRIGHT_CONTRAST: Final[str] = "bright_contrast"
    DIM_CONTRAST: Final[str] = "dim_contrast"

    NETWORK_INTERFACE: Final[str] = "network_interface"
    TEMPERATURE_FILE: Final[str] = "temperature_file"
    DISK_PATH: Final[str] = "disk_path"

    LOG_LEVEL: Final[str] = "log_level"


class _SSD1306Meta(_Meta):
    SECTION_NAME = "ssd1306"

    I2C_PORT: Final[str] = "i2c_port"
    I2C_ADDRESS: Final[str] = "i2c_address"
    ROTATE: Final[str] = "rotate"


class _ComputerMeta(_Meta):
    SECTION_NAME = "computer"

    PIXEL_SIZE: Final[str] = "pixel_size"
    MARGIN: Final[str] = "margin"


class _ScreensMeta(_Meta):
    SECTION_NAME = "screens"
