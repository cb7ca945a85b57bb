from enum import Enum


class Hardware(Enum):
    SSD1306 = "SSD1306"
    COMPUTER = "COMPUTER"


class ComponentType(Enum):
    TIME = "time"
    IP = "ip"
    CPU = "cpu"
    MEMORY = "memory"
    DISK = "disk"
    TEMPERATURE = "temperature"

    @classmethod
    def lookup(cls, value: str) -> "ComponentType | None":
        """
        @return: The matching component type or None if the value is not a known type.
        """
        try:
            return cls(value)
        except ValueError:
            return None
