from enum import Enum, auto
from queue import Queue


class Stimulus(Enum):
    # re-render the current screen
    UPDATE = auto()
    # advance to the next screen
    SCREEN_SWITCH = auto()
    # toggle the display inversion
    INVERT = auto()
    # re-evaluate the day/night contrast
    BRIGHTNESS = auto()


class StimulusQueue(Queue[Stimulus]):
    """
    FIFO of due stimuli. A stimulus that is still waiting in the queue is not added a second time.
    """

    def _put(self, item: Stimulus) -> None:
        if item in self.queue:
            return

        super()._put(item)

    @property
    def pending(self) -> list[Stimulus]:
        with self.mutex:
            return list(self.queue)
