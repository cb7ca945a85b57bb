"""
This module implements a SSD1306 OLED display connected via I2C.
"""
from logging import Logger
from typing import Final

from luma.core.interface.serial import i2c
from luma.oled.device import ssd1306

from oled_status.common.log import LOG
from oled_status.config.settings import Settings
from oled_status.display.abstract import AbstractDisplay

# SSD1306 commands
_NORMAL_DISPLAY: Final[int] = 0xA6
_INVERT_DISPLAY: Final[int] = 0xA7


class Ssd1306(AbstractDisplay):
    def __init__(self, config: Settings) -> None:
        super().__init__(config=config)

        self.__log: Logger = LOG.create(Ssd1306.__name__)

        serial = i2c(port=config.ssd1306.i2c_port,
                     address=config.ssd1306.i2c_address)
        self.__device: ssd1306 = ssd1306(serial,
                                         width=config.display_width,
                                         height=config.display_height,
                                         rotate=config.ssd1306.rotate)

        self.__log.info("SSD1306 %dx%d on I2C port %d, address 0x%02X",
                        self.__device.width, self.__device.height,
                        config.ssd1306.i2c_port, config.ssd1306.i2c_address)

    def show(self) -> None:
        self.__device.display(self.frame_buffer)

    def set_contrast(self, contrast: int) -> None:
        self.__device.contrast(contrast)

    def set_inverted(self, inverted: bool) -> None:
        self.__device.command(_INVERT_DISPLAY if inverted else _NORMAL_DISPLAY)

    def shutdown(self) -> None:
        # luma clears the panel and releases the bus on exit
        self.__device.hide()
