import numpy as np
import pytest

from conftest import StaticMetrics
from oled_status.common.errors import ProviderError, RenderError
from oled_status.config.settings import Component
from oled_status.providers.abstract import Providers
from oled_status.screen.component import BAR_HEIGHT, ComponentRenderer
from oled_status.screen.framebuffer import FrameBuffer


def render(component: Component, providers: Providers, interface: str="eth0") -> FrameBuffer:
    frame_buffer = FrameBuffer(128, 64)
    ComponentRenderer(frame_buffer, providers, interface).render(component)
    return frame_buffer


def expected_label(x: int, y: int, text: str) -> FrameBuffer:
    frame_buffer = FrameBuffer(128, 64)
    frame_buffer.add_label(x, y, text)
    return frame_buffer


def test_time_uses_reference_layout(providers: Providers) -> None:
    result = render(Component(type="time", x=0, y=12, time_format="15:04:05"), providers)

    assert np.array_equal(result.pixels, expected_label(0, 12, "12:34:56").pixels)


def test_time_defaults_to_24_hour_format_and_prefixes_label(providers: Providers) -> None:
    result = render(Component(type="time", x=4, y=20, label="Time"), providers)

    assert np.array_equal(result.pixels, expected_label(4, 20, "Time: 12:34:56").pixels)


def test_ip_shows_address_of_configured_interface(providers: Providers) -> None:
    result = render(Component(type="ip", x=0, y=30, label="IP"), providers)

    assert np.array_equal(result.pixels, expected_label(0, 30, "IP: 192.168.1.20").pixels)


def test_ip_shows_fallback_for_missing_interface(providers: Providers) -> None:
    result = render(Component(type="ip", x=0, y=30, label="IP"), providers, interface="wlan9")

    assert result.pixels.any()
    assert np.array_equal(result.pixels, expected_label(0, 30, "IP: No wlan9").pixels)


@pytest.mark.parametrize("component_type,value", [("cpu", 42.5), ("memory", 63.25), ("disk", 80.)])
def test_percentage_gauges_draw_text_and_bar(providers: Providers, component_type: str, value: float) -> None:
    component = Component(type=component_type, x=2, y=10, label="Use", show_bar=True, bar_width=100)

    result = render(component, providers)

    expected = expected_label(2, 10, f"Use: {value:.1f}%")
    expected.draw_bar(2, 15, 100, BAR_HEIGHT, value / 100)
    assert np.array_equal(result.pixels, expected.pixels)


def test_gauge_without_bar_draws_text_only(providers: Providers) -> None:
    result = render(Component(type="cpu", x=0, y=10, label="CPU", bar_width=100), providers)

    assert np.array_equal(result.pixels, expected_label(0, 10, "CPU: 42.5%").pixels)


def test_temperature_bar_uses_degrees_as_fraction(providers: Providers) -> None:
    component = Component(type="temperature", x=0, y=10, label="Temp", show_bar=True, bar_width=100)

    result = render(component, providers)

    expected = expected_label(0, 10, "Temp: 45.2 C")
    expected.draw_bar(0, 15, 100, BAR_HEIGHT, 0.452)
    assert np.array_equal(result.pixels, expected.pixels)


def test_unknown_component_type_draws_nothing(providers: Providers) -> None:
    result = render(Component(type="weather", x=0, y=10, label="Sky", show_bar=True, bar_width=50), providers)

    assert not result.pixels.any()


def test_provider_failure_is_raised_as_render_error(providers: Providers, metrics: StaticMetrics) -> None:
    metrics.failing = True

    with pytest.raises(RenderError) as exc_info:
        render(Component(type="cpu", x=3, y=10, label="CPU"), providers)

    assert exc_info.value.component_type == "cpu"
    assert exc_info.value.position == (3, 10)
    assert isinstance(exc_info.value.__cause__, ProviderError)

