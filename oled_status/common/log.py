import logging
import sys
from logging import Formatter, Logger, StreamHandler
from typing import Any


class _LOGMeta(type):
    def __init__(cls, name: str, bases: tuple[type, ...], classdict: dict[str, Any]) -> None:
        super().__init__(name, bases, classdict)

        cls.__handler: StreamHandler = StreamHandler(stream=sys.stdout)
        cls.__handler.setFormatter(
            Formatter(fmt="%(asctime)s - %(levelname)-8s :: %(name)s :: %(message)s")
        )

    @property
    def handler(cls) -> StreamHandler:
        return cls.__handler


class LOG(metaclass=_LOGMeta):
    @classmethod
    def create(cls, name: str, level: int=logging.NOTSET) -> Logger:
        logger: Logger = Logger(name, level)
        logger.addHandler(cls.handler)

        return logger

    @classmethod
    def set_level(cls, level: int | str) -> None:
        """
        Set the threshold of the shared handler.
        All loggers created by this class are affected.
        """
        cls.handler.setLevel(level)
