"""
The single monochrome bitmap that gets repainted on every render cycle.
"""
import math
from typing import Final

import numpy as np
from numpy.typing import NDArray
from PIL import Image, ImageDraw, ImageFont

BACKGROUND: Final[int] = 0
FOREGROUND: Final[int] = 1


class FrameBuffer:
    def __init__(self, width: int, height: int) -> None:
        self.__image: Image.Image = Image.new("1", (width, height), BACKGROUND)
        self.__draw: ImageDraw.ImageDraw = ImageDraw.Draw(self.__image)

        # fixed-width bitmap glyphs
        self.__font: ImageFont.ImageFont = ImageFont.load_default_imagefont()
        # the glyph cells sit on the baseline
        self.__ascent: int = self.__font.getbbox("M")[3]

    @property
    def image(self) -> Image.Image:
        return self.__image

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """(left, top, right, bottom) of the whole buffer."""
        return (0, 0, self.__image.width, self.__image.height)

    @property
    def pixels(self) -> NDArray[np.bool_]:
        """A copy of the buffer, indexed [row, column]. True means lit."""
        return np.array(self.__image, dtype=np.bool_)

    def clear(self) -> None:
        self.__image.paste(BACKGROUND, self.bounds)

    def draw_bar(self, x: int, y: int, width: int, height: int, fraction: float) -> None:
        """
        Draw a horizontal progress bar.
        The border occupies [x, x + width] x [y, y + height],
        the filling starts at (x + 1, y + 1) and is floor((width - 2) * fraction) pixels wide.
        """
        self.__draw.rectangle((x, y, x + width, y + height), outline=FOREGROUND)

        fill_width: int = math.floor((width - 2) * fraction)
        if fill_width > 0 and height > 1:
            self.__draw.rectangle((x + 1, y + 1, x + fill_width, y + height - 1), fill=FOREGROUND)

    def add_label(self, x: int, y: int, text: str) -> None:
        """
        Stamp a single line of text with its baseline at (x, y).
        Everything outside the buffer gets clipped.
        """
        if not text:
            return

        self.__draw.text((x, y - self.__ascent), text, font=self.__font, fill=FOREGROUND)
