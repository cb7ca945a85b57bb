from logging import Logger

from oled_status.common.log import LOG
from oled_status.config.settings import Screen
from oled_status.display.abstract import AbstractDisplay
from oled_status.screen.component import ComponentRenderer
from oled_status.screen.framebuffer import FrameBuffer


class ScreenCompositor:
    def __init__(self, frame_buffer: FrameBuffer, renderer: ComponentRenderer, display: AbstractDisplay) -> None:
        self.__log: Logger = LOG.create(ScreenCompositor.__name__)

        self.__frame_buffer: FrameBuffer = frame_buffer
        self.__renderer: ComponentRenderer = renderer
        self.__display: AbstractDisplay = display

    def render(self, screen: Screen) -> None:
        """
        Repaint the whole frame buffer with the components of the screen and send it to the display.
        If a component fails, the RenderError is raised and nothing is sent.
        """
        self.__frame_buffer.clear()

        for component in screen.components:
            self.__renderer.render(component)

        self.__log.debug("Flushing screen '%s'", screen.name)
        self.__display.draw_frame(self.__frame_buffer.bounds, self.__frame_buffer.image, (0, 0))
