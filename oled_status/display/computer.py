import queue
from queue import Queue
from threading import Thread
from typing import Final

import numpy as np
import pygame
from numpy.typing import NDArray
from pygame.event import Event
from pygame.surface import Surface
from pygame.time import Clock

from oled_status.config.settings import Settings
from oled_status.display.abstract import AbstractDisplay
from oled_status.main import DisplayManager

# color of a lit OLED pixel
_PIXEL_COLOR: Final[tuple[int, int, int]] = (120, 200, 255)
# even with the lowest contrast the pixels stay visible
_MIN_BRIGHTNESS: Final[float] = 0.25


class _PygameDisplayThread(Thread):
    MAX_FPS: Final[float] = 30.

    def __init__(self, width: int, height: int, margin: int, size: int) -> None:
        super().__init__(daemon=True)

        self.__width: int = width
        self.__height: int = height
        self.__margin: int = margin
        self.__size: int = size

        self.__display_queue: Queue[NDArray[np.bool_]] = Queue()
        self.__last_frame: NDArray[np.bool_] | None = None

        self.__brightness: float = 1.
        self.__inverted: bool = False

        self.__window_size: tuple[int, int] = (width * size + (width + 1) * margin,
                                               height * size + (height + 1) * margin)

        # clock to handle fps
        self.__clock: Clock = Clock()
        self.__running: bool = True

    def __draw_frame(self, surface: Surface, frame: NDArray[np.bool_]) -> None:
        surface.fill(color=(0, 0, 0))

        lit: NDArray[np.bool_] = np.logical_not(frame) if self.__inverted else frame
        color: tuple[int, int, int] = tuple(int(c * self.__brightness) for c in _PIXEL_COLOR)  # type: ignore

        row: int
        column: int
        for row, column in zip(*np.nonzero(lit)):
            surface.fill(color, ((self.__margin + self.__size) * column + self.__margin,
                                 (self.__margin + self.__size) * row + self.__margin,
                                 self.__size,
                                 self.__size))

    def __redraw(self) -> None:
        # re-add the last frame to the display queue, this triggers an immediate redraw
        if self.__last_frame is not None:
            self.__display_queue.put(self.__last_frame)

    def display_frame(self, frame: NDArray[np.bool_]) -> None:
        self.__display_queue.put(frame)

    def set_brightness(self, brightness: float) -> None:
        self.__brightness = brightness
        self.__redraw()

    def set_inverted(self, inverted: bool) -> None:
        self.__inverted = inverted
        self.__redraw()

    def stop(self) -> None:
        self.__running = False

    def run(self) -> None:
        # pygame must be initialized in the thread that updates the display
        pygame.init()
        surface: Surface = pygame.display.set_mode(self.__window_size)
        pygame.display.set_caption(f"OLED-Status {self.__width}x{self.__height}")

        while self.__running:
            event: Event
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    # stop everything
                    DisplayManager.quit()

            try:
                # preserve the last frame to be able to redraw it
                self.__last_frame = self.__display_queue.get(block=False)
            except queue.Empty:
                pass
            else:
                self.__draw_frame(surface=surface, frame=self.__last_frame)
                self.__display_queue.task_done()

            pygame.display.update()

            # limit the FPS by sleeping for the remainder of the frame time
            self.__clock.tick(_PygameDisplayThread.MAX_FPS)

        pygame.quit()


class Computer(AbstractDisplay):
    def __init__(self, config: Settings) -> None:
        super().__init__(config=config)

        self.__pygame_thread: _PygameDisplayThread = _PygameDisplayThread(width=config.display_width,
                                                                          height=config.display_height,
                                                                          margin=config.computer.margin,
                                                                          size=config.computer.pixel_size)

        # start the pygame thread
        self.__pygame_thread.start()

    def show(self) -> None:
        self.__pygame_thread.display_frame(frame=np.array(self.frame_buffer, dtype=np.bool_))

    def set_contrast(self, contrast: int) -> None:
        self.__pygame_thread.set_brightness(max(_MIN_BRIGHTNESS, contrast / 255))

    def set_inverted(self, inverted: bool) -> None:
        self.__pygame_thread.set_inverted(inverted)

    def shutdown(self) -> None:
        self.__pygame_thread.stop()
        self.__pygame_thread.join(timeout=2.0)
