import signal
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path

from oled_status.common.log import LOG
from oled_status.config import Configuration
from oled_status.display.abstract import AbstractDisplay
from oled_status.main import DisplayManager, initialize_display
from oled_status.providers.system import create_system_providers


def run() -> None:
    # cli parser
    parser: ArgumentParser = ArgumentParser(description="Show system status screens on a small OLED display.")
    parser.add_argument("config_file", type=Path, nargs="?", default=Path("config.yaml"),
                        metavar="config-file",
                        help="The path of the configuration file [Default: config.yaml].")

    # get config path
    args: Namespace = parser.parse_args(sys.argv[1:])

    # load config
    config: Configuration = Configuration(config_file_path=args.config_file)
    LOG.set_level(config.log_level)

    # catch SIGINT and SIGTERM
    signal.signal(signal.SIGINT, DisplayManager.quit)
    signal.signal(signal.SIGTERM, DisplayManager.quit)

    display: AbstractDisplay = initialize_display(config)

    # load the main application
    app: DisplayManager = DisplayManager(config=config,
                                         display=display,
                                         providers=create_system_providers(config))
    app.mainloop()
