from importlib import resources
from logging import Logger
from queue import Empty
from threading import Event
from typing import Callable, Final

from simple_plugin_loader import Loader

from oled_status.common.errors import ConfigurationError
from oled_status.common.log import LOG
from oled_status.config.settings import Screen, Settings
from oled_status.control.event import Stimulus, StimulusQueue
from oled_status.control.timers import TimerSet
from oled_status.display.abstract import AbstractDisplay
from oled_status.providers.abstract import Providers
from oled_status.screen.component import ComponentRenderer
from oled_status.screen.compositor import ScreenCompositor
from oled_status.screen.framebuffer import FrameBuffer

_log: Logger = LOG.create("Main")

UPDATE_INTERVAL: Final[float] = 1.
BRIGHTNESS_INTERVAL: Final[float] = 60.
# how often the main loop checks for a quit request while no stimulus arrives
_QUIT_POLL_INTERVAL: Final[float] = 0.2


def initialize_display(config: Settings) -> AbstractDisplay:
    _log.info("Initialize display")

    with resources.as_file(resources.files("oled_status.display")) as displays_dir:
        # load display plugins
        display_loader: Loader = Loader()
        display_loader.load_plugins(str(displays_dir.resolve()), plugin_base_class=AbstractDisplay)

    # create it
    try:
        display: AbstractDisplay = display_loader.plugins[config.hardware.name.casefold()](
            config=config
        )
    except KeyError as e:
        raise RuntimeError(f"Display hardware '{config.hardware.name}' not known.") from e

    display.clear()

    return display


class DisplayManager:
    """
    Rotates the configured screens on the display.

    All timers feed one queue. The main loop takes one stimulus at a time and handles it completely
    before the next one, so the frame buffer and the display are never accessed concurrently.
    """
    __quit_signal: Event = Event()

    def __init__(self, config: Settings, display: AbstractDisplay, providers: Providers) -> None:
        if not config.screens:
            raise ConfigurationError("At least one screen must be configured.")

        self.__config: Settings = config
        self.__display: AbstractDisplay = display
        self.__providers: Providers = providers

        self.__current_screen_index: int = 0
        self.__is_inverted: bool = False
        self.__contrast: int | None = None

        self.__frame_buffer: FrameBuffer = FrameBuffer(*config.frame_size)
        self.__compositor: ScreenCompositor = ScreenCompositor(
            frame_buffer=self.__frame_buffer,
            renderer=ComponentRenderer(frame_buffer=self.__frame_buffer,
                                       providers=providers,
                                       network_interface=config.network_interface),
            display=display
        )

        self.__stimuli: StimulusQueue = StimulusQueue()
        self.__timers: TimerSet = self.__create_timers()

        self.__handlers: dict[Stimulus, Callable[[], None]] = {
            Stimulus.UPDATE: self.render_current_screen,
            Stimulus.SCREEN_SWITCH: self.next_screen,
            Stimulus.INVERT: self.toggle_invert,
            Stimulus.BRIGHTNESS: self.update_brightness,
        }

    def __create_timers(self) -> TimerSet:
        timers: TimerSet = TimerSet(self.__stimuli)

        timers.add("update", UPDATE_INTERVAL, Stimulus.UPDATE)
        timers.add("screen", self.__config.screen_duration, Stimulus.SCREEN_SWITCH)
        # no timer at all if the inversion is disabled
        if self.__config.invert_duration > 0:
            timers.add("invert", self.__config.invert_duration, Stimulus.INVERT)
        timers.add("brightness", BRIGHTNESS_INTERVAL, Stimulus.BRIGHTNESS)

        return timers

    @classmethod
    def quit(cls, *_) -> None:
        _log.info("Exit request received. Start cleaning up...")
        DisplayManager.__quit_signal.set()

    @property
    def current_screen_index(self) -> int:
        return self.__current_screen_index

    @property
    def current_screen(self) -> Screen:
        return self.__config.screens[self.__current_screen_index]

    @property
    def is_inverted(self) -> bool:
        return self.__is_inverted

    @property
    def frame_buffer(self) -> FrameBuffer:
        return self.__frame_buffer

    @property
    def timers(self) -> TimerSet:
        return self.__timers

    @property
    def stimuli(self) -> StimulusQueue:
        """The queue that the timers feed. Stimuli can also be injected here."""
        return self.__stimuli

    def handle(self, stimulus: Stimulus) -> None:
        """Process a single stimulus completely."""
        self.__handlers[stimulus]()

    def render_current_screen(self) -> None:
        self.__compositor.render(self.current_screen)

    def next_screen(self) -> None:
        self.__current_screen_index = (self.__current_screen_index + 1) % len(self.__config.screens)
        _log.info("Switch to screen '%s'", self.current_screen.name)

        self.render_current_screen()

    def toggle_invert(self) -> None:
        self.__is_inverted = not self.__is_inverted
        _log.debug("Display inverted: %s", self.__is_inverted)

        self.__display.set_inverted(self.__is_inverted)

    def update_brightness(self) -> None:
        hour: int = self.__providers.clock.now().hour
        contrast: int = self.__config.contrast_for(hour)

        if contrast != self.__contrast:
            _log.info("Change display contrast to %d (%s)",
                      contrast, "day" if self.__config.is_daytime(hour) else "night")
        self.__contrast = contrast

        self.__display.set_contrast(contrast)

    def mainloop(self) -> None:
        _log.info("Starting with %d screen(s)", len(self.__config.screens))

        try:
            # apply the contrast and show the first screen before the first timer is due
            self.update_brightness()
            self.render_current_screen()

            self.__timers.start()

            # run until 'quit' method was called
            while not DisplayManager.__quit_signal.is_set():
                try:
                    stimulus: Stimulus = self.__stimuli.get(timeout=_QUIT_POLL_INTERVAL)
                except Empty:
                    continue

                self.handle(stimulus)
        except Exception:
            _log.exception("Fatal error, stopping the display")
            raise
        finally:
            self.__timers.shutdown()
            self.__display.shutdown()

        # clear quit signal
        DisplayManager.__quit_signal.clear()

        _log.info("Cleanup finished. Exiting now")
