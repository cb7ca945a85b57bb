from collections.abc import Generator
from contextlib import contextmanager
from logging import Logger
from pathlib import Path
from typing import Any, Final, TypeVar

import jsons
import yaml

from oled_status.common.errors import ConfigurationError
from oled_status.common.log import LOG
from oled_status.config.meta import (
    _ComputerMeta,
    _MainSettingsMeta,
    _ScreensMeta,
    _SSD1306Meta,
)
from oled_status.config.settings import (
    SSD1306,
    Computer,
    Screen,
    Settings,
)
from oled_status.config.types import Hardware


V = TypeVar("V", str, int, bool)


class _ConfigReader:
    VALUE_NOT_FOUND: Final[object] = object()

    def __init__(self, file_path: Path) -> None:
        self.__log: Logger = LOG.create(_ConfigReader.__name__)

        try:
            content: str = file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Error reading config file '{file_path}': {e}") from e

        try:
            data: Any = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing config file '{file_path}': {e}") from e

        if data is None:
            # empty file
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"The config file '{file_path}' must contain a mapping on the top level.")

        self.__root: dict[str, Any] = data
        self.__current_section: dict[str, Any] | None = None
        self.__current_section_name: str = "<top level>"

    @contextmanager
    def __section(self, section: str | None) -> Generator[None, None, None]:
        if section is None:
            self.__current_section = self.__root
            self.__current_section_name = "<top level>"
        else:
            values: Any = self.__root.get(section, {})
            if values is None:
                values = {}
            if not isinstance(values, dict):
                raise ConfigurationError(f"Section '{section}' must be a mapping.")
            self.__current_section = values
            self.__current_section_name = section

        # return to execution
        yield

        # reset it
        self.__current_section = None

    def __get_value(self, key: str, target_type: type[V], default_value: V) -> V:
        if self.__current_section is None:
            raise RuntimeError("The __get_value method was not called inside __section context manager.")

        value: Any = self.__current_section.get(key, _ConfigReader.VALUE_NOT_FOUND)

        if value is None or value is _ConfigReader.VALUE_NOT_FOUND:
            self.__log.info("Setting '%s' in section '%s' not found. Using default value '%s'",
                            key, self.__current_section_name, str(default_value))
            return default_value

        # YAML already knows booleans, do not accept them as numbers or vice versa
        if (target_type is bool) != isinstance(value, bool):
            self.__log.error("Setting '%s' in section '%s' is invalid.",
                             key, self.__current_section_name)
            raise ConfigurationError(f"Setting '{key}' must be of type '{target_type.__name__}', "
                                     f"got '{value}'.")

        try:
            r_val: V = target_type(value)
        except (ValueError, TypeError) as e:
            self.__log.error("Setting '%s' in section '%s' is invalid.",
                             key, self.__current_section_name)
            raise ConfigurationError(f"Setting '{key}' must be of type '{target_type.__name__}', "
                                     f"got '{value}'.") from e

        return r_val

    def __read_main(self) -> dict[str, Any]:
        with self.__section(_MainSettingsMeta.SECTION_NAME):
            hardware_name: str = self.__get_value(_MainSettingsMeta.HARDWARE,
                                                  target_type=str,
                                                  default_value=Settings.hardware.value)
            try:
                hardware: Hardware = Hardware(hardware_name.upper())
            except ValueError as e:
                raise ConfigurationError(f"Display hardware '{hardware_name}' not known.") from e

            main_settings: dict[str, Any] = {
                "hardware": hardware,
                "display_width": self.__get_value(_MainSettingsMeta.DISPLAY_WIDTH,
                                                  target_type=int,
                                                  default_value=Settings.display_width),
                "display_height": self.__get_value(_MainSettingsMeta.DISPLAY_HEIGHT,
                                                   target_type=int,
                                                   default_value=Settings.display_height),
                "screen_duration": self.__get_value(_MainSettingsMeta.SCREEN_DURATION,
                                                    target_type=int,
                                                    default_value=Settings.screen_duration),
                "invert_duration": self.__get_value(_MainSettingsMeta.INVERT_DURATION,
                                                    target_type=int,
                                                    default_value=Settings.invert_duration),
                "day_start_hour": self.__get_value(_MainSettingsMeta.DAY_START_HOUR,
                                                   target_type=int,
                                                   default_value=Settings.day_start_hour),
                "night_start_hour": self.__get_value(_MainSettingsMeta.NIGHT_START_HOUR,
                                                     target_type=int,
                                                     default_value=Settings.night_start_hour),
                "bright_contrast": self.__get_value(_MainSettingsMeta.BRIGHT_CONTRAST,
                                                    target_type=int,
                                                    default_value=Settings.bright_contrast),
                "dim_contrast": self.__get_value(_MainSettingsMeta.DIM_CONTRAST,
                                                 target_type=int,
                                                 default_value=Settings.dim_contrast),
                "network_interface": self.__get_value(_MainSettingsMeta.NETWORK_INTERFACE,
                                                      target_type=str,
                                                      default_value=Settings.network_interface),
                "temperature_file": self.__get_value(_MainSettingsMeta.TEMPERATURE_FILE,
                                                     target_type=str,
                                                     default_value=Settings.temperature_file),
                "disk_path": self.__get_value(_MainSettingsMeta.DISK_PATH,
                                              target_type=str,
                                              default_value=Settings.disk_path),
                "log_level": self.__get_value(_MainSettingsMeta.LOG_LEVEL,
                                              target_type=str,
                                              default_value=Settings.log_level).upper(),
            }

        return main_settings

    def __read_ssd1306(self) -> SSD1306:
        with self.__section(_SSD1306Meta.SECTION_NAME):
            i2c_port: int = self.__get_value(_SSD1306Meta.I2C_PORT,
                                             target_type=int,
                                             default_value=SSD1306.i2c_port)
            i2c_address: int = self.__get_value(_SSD1306Meta.I2C_ADDRESS,
                                                target_type=int,
                                                default_value=SSD1306.i2c_address)
            rotate: int = self.__get_value(_SSD1306Meta.ROTATE,
                                           target_type=int,
                                           default_value=SSD1306.rotate)

        return SSD1306(i2c_port=i2c_port,
                       i2c_address=i2c_address,
                       rotate=rotate)

    def __read_computer(self) -> Computer:
        with self.__section(_ComputerMeta.SECTION_NAME):
            pixel_size: int = self.__get_value(_ComputerMeta.PIXEL_SIZE,
                                               target_type=int,
                                               default_value=Computer.pixel_size)
            margin: int = self.__get_value(_ComputerMeta.MARGIN,
                                           target_type=int,
                                           default_value=Computer.margin)

        return Computer(pixel_size=pixel_size,
                        margin=margin)

    def __read_screens(self) -> list[Screen] | None:
        raw_screens: Any = self.__root.get(_ScreensMeta.SECTION_NAME)
        if raw_screens is None:
            self.__log.warning("No screens configured. Using the default screens.")
            return None

        if not isinstance(raw_screens, list):
            raise ConfigurationError(f"'{_ScreensMeta.SECTION_NAME}' must be a list of screens.")

        try:
            return jsons.load(raw_screens, cls=list[Screen])
        except jsons.exceptions.JsonsError as e:
            self.__log.error("The screen definitions are invalid.")
            raise ConfigurationError(f"Invalid screen definition: {e}") from e

    def read(self) -> Settings:
        main_settings: dict[str, Any] = self.__read_main()
        ssd1306: SSD1306 = self.__read_ssd1306()
        computer: Computer = self.__read_computer()
        screens: list[Screen] | None = self.__read_screens()

        settings: Settings
        if screens is None:
            settings = Settings(ssd1306=ssd1306, computer=computer, **main_settings)
        else:
            settings = Settings(ssd1306=ssd1306, computer=computer, screens=screens, **main_settings)

        try:
            settings.validate()
        except ConfigurationError as e:
            self.__log.error(e)
            raise e

        return settings


class _ConfigWriter:
    def __init__(self, file_path: Path) -> None:
        self.__log: Logger = LOG.create(_ConfigWriter.__name__)

        self.__file_path: Path = file_path
        self.__lines: list[str] = []

    def __comment(self, text: str="") -> None:
        self.__lines.append(f"# {text}".rstrip())

    def __key(self, name: str, value: Any) -> None:
        self.__lines.append(yaml.safe_dump({name: value}, default_flow_style=False, sort_keys=False).rstrip())

    def __section(self, name: str, values: dict[str, Any]) -> None:
        self.__lines.append(yaml.safe_dump({name: values}, default_flow_style=False, sort_keys=False).rstrip())

    def __write_main(self, config: Settings) -> None:
        self.__comment("The display that shows the screens.")
        self.__comment("There are two possible values here:")
        self.__comment("    - 'SSD1306'  [Default]")
        self.__comment("      The OLED hardware addressed via I2C.")
        self.__comment("    - 'COMPUTER'")
        self.__comment("      This is for developing on a PC. It opens a virtual display via 'pygame'.")
        self.__key(_MainSettingsMeta.HARDWARE, config.hardware.value)

        self.__comment()
        self.__comment("The size of the display in pixels.")
        self.__key(_MainSettingsMeta.DISPLAY_WIDTH, config.display_width)
        self.__key(_MainSettingsMeta.DISPLAY_HEIGHT, config.display_height)

        self.__comment()
        self.__comment("Seconds between two screen switches (> 0).")
        self.__key(_MainSettingsMeta.SCREEN_DURATION, config.screen_duration)
        self.__comment("Seconds between toggling the display inversion. 0 disables the inversion.")
        self.__key(_MainSettingsMeta.INVERT_DURATION, config.invert_duration)

        self.__comment()
        self.__comment("The display is bright from 'day_start_hour' until (excluding) 'night_start_hour'.")
        self.__comment("Possible values: 0 <= x <= 23")
        self.__key(_MainSettingsMeta.DAY_START_HOUR, config.day_start_hour)
        self.__key(_MainSettingsMeta.NIGHT_START_HOUR, config.night_start_hour)
        self.__comment("The contrast levels for day and night. Possible values: 0 <= x <= 255")
        self.__key(_MainSettingsMeta.BRIGHT_CONTRAST, config.bright_contrast)
        self.__key(_MainSettingsMeta.DIM_CONTRAST, config.dim_contrast)

        self.__comment()
        self.__comment("The network interface whose IPv4 address is shown by 'ip' components.")
        self.__key(_MainSettingsMeta.NETWORK_INTERFACE, config.network_interface)
        self.__comment("The file that contains the temperature in millidegrees Celsius.")
        self.__key(_MainSettingsMeta.TEMPERATURE_FILE, config.temperature_file)
        self.__comment("The mount point whose usage is shown by 'disk' components.")
        self.__key(_MainSettingsMeta.DISK_PATH, config.disk_path)

        self.__comment()
        self.__comment("Logging threshold: DEBUG, INFO, WARNING, ERROR or CRITICAL")
        self.__key(_MainSettingsMeta.LOG_LEVEL, config.log_level)

    def __write_ssd1306(self, ssd1306_config: SSD1306) -> None:
        self.__comment("This section contains variables for the SSD1306 display.")
        self.__comment("'i2c_address' is decimal, the common address 0x3C is 60.")
        self.__comment("'rotate': 0, 1, 2, 3 => 0, 90, 180, 270 degrees")
        self.__section(_SSD1306Meta.SECTION_NAME, {
            _SSD1306Meta.I2C_PORT: ssd1306_config.i2c_port,
            _SSD1306Meta.I2C_ADDRESS: ssd1306_config.i2c_address,
            _SSD1306Meta.ROTATE: ssd1306_config.rotate,
        })

    def __write_computer(self, computer_config: Computer) -> None:
        self.__comment("This section contains variables for the computer display.")
        self.__comment("'pixel_size': size of the square that represents one display pixel")
        self.__comment("'margin': space between two (virtual) pixels")
        self.__section(_ComputerMeta.SECTION_NAME, {
            _ComputerMeta.PIXEL_SIZE: computer_config.pixel_size,
            _ComputerMeta.MARGIN: computer_config.margin,
        })

    def __write_screens(self, screens: list[Screen]) -> None:
        self.__comment("The screens are shown one after another.")
        self.__comment("Component types: time, ip, cpu, memory, disk, temperature")
        self.__comment("The position (x, y) is the baseline of the text, (0, 0) is the top left corner.")
        self.__comment("'time_format' takes a strftime pattern like '%H:%M:%S' or a layout like '15:04:05'.")
        self.__lines.append(yaml.safe_dump({_ScreensMeta.SECTION_NAME: jsons.dump(screens, strip_properties=True)},
                                           default_flow_style=False, sort_keys=False).rstrip())

    def write(self, config: Settings) -> None:
        self.__lines = []

        self.__write_main(config)

        self.__comment()
        self.__write_ssd1306(config.ssd1306)

        self.__comment()
        self.__write_computer(config.computer)

        self.__comment()
        self.__write_screens(config.screens)

        try:
            with open(self.__file_path, "w", encoding="utf-8") as f:
                f.write("\n".join(self.__lines) + "\n")
        except OSError as e:
            self.__log.error(e)
            raise e
