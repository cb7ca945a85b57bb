"""
This module is the abstract representation of a monochrome pixel display.
"""
from abc import ABC, abstractmethod
from typing import final

from PIL import Image

from oled_status.config.settings import Settings


class AbstractDisplay(ABC):
    def __init__(self, config: Settings) -> None:
        self.__config: Settings = config

        # the last frame that was sent to the display
        self.__buffer: Image.Image = Image.new("1", config.frame_size, 0)

    @property
    def frame_buffer(self) -> Image.Image:
        """The buffer contains the monochrome data that is displayed."""
        return self.__buffer

    @property
    def _config(self) -> Settings:
        return self.__config

    @final
    def draw_frame(self,
                   bounds: tuple[int, int, int, int],
                   frame: Image.Image,
                   origin: tuple[int, int]) -> None:
        """
        Copy a frame onto the display and show it.
        @param bounds: The target area on the display (left, top, right, bottom).
        @param frame: The source bitmap.
        @param origin: The point in the source bitmap that is placed on the top left corner of bounds.
        """
        left, top, right, bottom = bounds
        region: Image.Image = frame.crop((origin[0], origin[1],
                                          origin[0] + right - left,
                                          origin[1] + bottom - top))
        if region.mode != "1":
            region = region.convert("1")

        self.__buffer.paste(region, (left, top))
        self.show()

    @final
    def clear(self) -> None:
        """Clear display"""
        self.__buffer = Image.new("1", self.__buffer.size, 0)
        self.show()

    @abstractmethod
    def show(self) -> None:
        """Display the contents of the frame buffer."""
        raise NotImplementedError

    @abstractmethod
    def set_contrast(self, contrast: int) -> None:
        """Set the contrast 0 to 255 value"""
        raise NotImplementedError

    @abstractmethod
    def set_inverted(self, inverted: bool) -> None:
        """Show lit pixels dark and vice versa."""
        raise NotImplementedError

    @abstractmethod
    def shutdown(self) -> None:
        """Switch the display off and release the hardware."""
        raise NotImplementedError
