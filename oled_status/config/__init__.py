import sys
from argparse import ArgumentParser, Namespace
from dataclasses import InitVar, dataclass, fields
from pathlib import Path

from oled_status.common.errors import ConfigurationError
from oled_status.config.file import _ConfigReader, _ConfigWriter
from oled_status.config.settings import Settings


@dataclass(kw_only=True)
class Configuration(Settings):
    config_file_path: InitVar[Path]

    def __post_init__(self, config_file_path: Path) -> None:
        self.__writer: _ConfigWriter = _ConfigWriter(config_file_path)

        if not config_file_path.is_file():
            raise ConfigurationError(f"Config file '{config_file_path}' not found.")

        # load the configuration
        reader: _ConfigReader = _ConfigReader(config_file_path)
        saved_settings: Settings = reader.read()
        for f in fields(Settings):
            setattr(self, f.name, getattr(saved_settings, f.name))

    def save(self) -> None:
        self.__writer.write(config=self)


def create_initial_config() -> None:
    # cli parser
    parser: ArgumentParser = ArgumentParser(description="Create or Update the configuration file.")
    parser.add_argument("CONFIG_FILE_PATH", type=Path,
                        help="The path of the configuration file.")

    # get config path
    args: Namespace = parser.parse_args(sys.argv[1:])
    config_file_path: Path = args.CONFIG_FILE_PATH

    if config_file_path.exists() and not config_file_path.is_file():
        raise ValueError(f"'{config_file_path}' is not the path of a file!")

    if config_file_path.exists():
        # rewrite the existing settings with the current layout and comments
        config: Configuration = Configuration(config_file_path=config_file_path)
        config.save()
    else:
        _ConfigWriter(config_file_path).write(config=Settings())
