import sys
from dataclasses import fields
from pathlib import Path

import pytest

from oled_status.common.errors import ConfigurationError
from oled_status.config import Configuration, create_initial_config
from oled_status.config.settings import Component, Settings
from oled_status.config.types import ComponentType, Hardware

FULL_CONFIG = """
screen_duration: 10
invert_duration: 300
day_start_hour: 7
night_start_hour: 18
network_interface: wlan0
hardware: computer
computer:
  pixel_size: 6
screens:
  - name: system
    components:
      - type: time
        x: 0
        y: 12
        time_format: "15:04"
      - type: ip
        x: 0
        y: 30
        label: IP
  - name: load
    components:
      - type: cpu
        x: 0
        y: 10
        label: CPU
        show_bar: true
        bar_width: 100
      - type: fan
        x: 0
        y: 40
"""


def write_config(tmp_path: Path, content: str) -> Path:
    config_file = tmp_path / "config.yaml"
    config_file.write_text(content, encoding="utf-8")
    return config_file


def test_load_full_config(tmp_path: Path) -> None:
    config = Configuration(config_file_path=write_config(tmp_path, FULL_CONFIG))

    assert config.screen_duration == 10
    assert config.invert_duration == 300
    assert config.network_interface == "wlan0"
    assert config.hardware == Hardware.COMPUTER
    assert config.computer.pixel_size == 6
    assert config.computer.margin == 1
    assert [screen.name for screen in config.screens] == ["system", "load"]
    assert config.screens[0].components[0] == Component(type="time", x=0, y=12, time_format="15:04")
    assert config.screens[1].components[0].show_bar
    assert config.screens[1].components[0].bar_width == 100


def test_unknown_component_type_is_kept(tmp_path: Path) -> None:
    config = Configuration(config_file_path=write_config(tmp_path, FULL_CONFIG))

    unknown = config.screens[1].components[1]
    assert unknown.type == "fan"
    assert ComponentType.lookup(unknown.type) is None


def test_missing_keys_use_defaults(tmp_path: Path) -> None:
    config = Configuration(config_file_path=write_config(tmp_path, "screen_duration: 3\n"))

    assert config.screen_duration == 3
    assert config.invert_duration == Settings.invert_duration
    assert config.hardware == Hardware.SSD1306
    assert config.ssd1306.i2c_address == 0x3C
    assert config.screens == Settings().screens


def test_missing_file_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        Configuration(config_file_path=tmp_path / "missing.yaml")


@pytest.mark.parametrize("content", [
    "screens: [unclosed",
    "- just\n- a list\n",
    "screen_duration: soon\n",
    "screen_duration: true\n",
    "screen_duration: 0\n",
    "invert_duration: -1\n",
    "day_start_hour: 24\n",
    "hardware: crt\n",
    "screens: []\n",
    "screens:\n  - name: x\n    components:\n      - x: 1\n",
    "log_level: LOUD\n",
])
def test_invalid_config_is_rejected(tmp_path: Path, content: str) -> None:
    with pytest.raises(ConfigurationError):
        Configuration(config_file_path=write_config(tmp_path, content))


def test_daytime_boundaries() -> None:
    settings = Settings(day_start_hour=7, night_start_hour=18, bright_contrast=200, dim_contrast=10)

    assert settings.contrast_for(7) == 200
    assert settings.contrast_for(17) == 200
    assert settings.contrast_for(18) == 10
    assert settings.contrast_for(3) == 10


def test_created_config_loads_as_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_file = tmp_path / "config.yaml"
    monkeypatch.setattr(sys, "argv", ["oled-status-create-config", str(config_file)])

    create_initial_config()

    config = Configuration(config_file_path=config_file)
    defaults = Settings()
    for f in fields(Settings):
        assert getattr(config, f.name) == getattr(defaults, f.name), f.name
    assert config_file.read_text(encoding="utf-8").startswith("# ")
