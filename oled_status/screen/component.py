from collections.abc import Callable
from logging import Logger
from typing import Final

from oled_status.common.errors import ProviderError, RenderError
from oled_status.common.log import LOG
from oled_status.common.timeformat import to_strftime
from oled_status.config.settings import Component
from oled_status.config.types import ComponentType
from oled_status.providers.abstract import Providers
from oled_status.screen.framebuffer import FrameBuffer

BAR_HEIGHT: Final[int] = 7
# distance between the text baseline and the top of the bar
BAR_OFFSET: Final[int] = 5


class ComponentRenderer:
    """
    Draws a single component onto the frame buffer.
    The live values are fetched from the providers.
    """

    def __init__(self, frame_buffer: FrameBuffer, providers: Providers, network_interface: str) -> None:
        self.__log: Logger = LOG.create(ComponentRenderer.__name__)

        self.__frame_buffer: FrameBuffer = frame_buffer
        self.__providers: Providers = providers
        self.__network_interface: str = network_interface

        self.__renderers: dict[ComponentType, Callable[[Component], None]] = {
            ComponentType.TIME: self.__render_time,
            ComponentType.IP: self.__render_ip,
            ComponentType.CPU: self.__render_cpu,
            ComponentType.MEMORY: self.__render_memory,
            ComponentType.DISK: self.__render_disk,
            ComponentType.TEMPERATURE: self.__render_temperature,
        }

    def render(self, component: Component) -> None:
        """
        @raise RenderError: If the value of the component could not be fetched.
        """
        component_type: ComponentType | None = ComponentType.lookup(component.type)
        if component_type is None:
            self.__log.debug("Ignoring component of unknown type '%s'", component.type)
            return

        try:
            self.__renderers[component_type](component)
        except ProviderError as e:
            raise RenderError(component.type, component.position, str(e)) from e

    def __render_time(self, component: Component) -> None:
        current_time: str = self.__providers.clock.now().strftime(to_strftime(component.time_format))
        prefix: str = f"{component.label}: " if component.label else ""

        self.__frame_buffer.add_label(component.x, component.y, f"{prefix}{current_time}")

    def __render_ip(self, component: Component) -> None:
        ip_address: str = self.__providers.network.get_ipv4_address(self.__network_interface)

        self.__frame_buffer.add_label(component.x, component.y, f"{component.label}: {ip_address}")

    def __render_gauge(self, component: Component, text: str, fraction: float) -> None:
        self.__frame_buffer.add_label(component.x, component.y, text)

        if component.show_bar:
            self.__frame_buffer.draw_bar(component.x, component.y + BAR_OFFSET,
                                         component.bar_width, BAR_HEIGHT,
                                         fraction)

    def __render_percentage(self, component: Component, percent: float) -> None:
        self.__render_gauge(component, f"{component.label}: {percent:.1f}%", percent / 100.)

    def __render_cpu(self, component: Component) -> None:
        self.__render_percentage(component, self.__providers.metrics.cpu_percent())

    def __render_memory(self, component: Component) -> None:
        self.__render_percentage(component, self.__providers.metrics.memory_percent())

    def __render_disk(self, component: Component) -> None:
        self.__render_percentage(component, self.__providers.metrics.disk_percent())

    def __render_temperature(self, component: Component) -> None:
        celsius: float = self.__providers.temperature.celsius()

        # the bar shows the degrees on a 0 to 100 scale
        self.__render_gauge(component, f"{component.label}: {celsius:.1f} C", celsius / 100.)
