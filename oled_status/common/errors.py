class ConfigurationError(ValueError):
    """The configuration file is missing, unreadable or contains invalid values."""


class ProviderError(RuntimeError):
    """A live value (metric, temperature) could not be read."""


class RenderError(RuntimeError):
    """A component could not be drawn. The current frame is discarded."""

    def __init__(self, component_type: str, position: tuple[int, int], reason: str) -> None:
        super().__init__(f"Error rendering '{component_type}' component at {position}: {reason}")

        self.component_type: str = component_type
        self.position: tuple[int, int] = position
