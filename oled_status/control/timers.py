from logging import Logger

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from oled_status.common.log import LOG
from oled_status.control.event import Stimulus, StimulusQueue


class TimerSet:
    """
    Named periodic timers. A due timer only puts its stimulus into the queue,
    the work is done by whoever consumes the queue.
    """

    def __init__(self, stimuli: StimulusQueue) -> None:
        self.__log: Logger = LOG.create(TimerSet.__name__)

        self.__stimuli: StimulusQueue = stimuli
        self.__scheduler: BackgroundScheduler = BackgroundScheduler()
        self.__timers: dict[str, tuple[float, Stimulus]] = {}

    def add(self, name: str, interval: float, stimulus: Stimulus) -> None:
        """
        @param name: Unique name of the timer.
        @param interval: Seconds between two stimuli.
        @param stimulus: The stimulus that is queued when the timer is due.
        """
        self.__scheduler.add_job(func=self.__stimuli.put,
                                 trigger=IntervalTrigger(seconds=interval),
                                 args=(stimulus,),
                                 id=name,
                                 name=name,
                                 # a late timer fires once, not once per missed interval
                                 coalesce=True,
                                 max_instances=1)
        self.__timers[name] = (interval, stimulus)

        self.__log.debug("Timer '%s' every %ss -> %s", name, interval, stimulus.name)

    @property
    def timers(self) -> dict[str, tuple[float, Stimulus]]:
        """
        @return: Key: the timer name
                 Value: (interval in seconds, stimulus)
        """
        return dict(self.__timers)

    @property
    def running(self) -> bool:
        return self.__scheduler.running

    def start(self) -> None:
        self.__scheduler.start()

    def shutdown(self) -> None:
        if self.__scheduler.running:
            self.__scheduler.shutdown(wait=False)
