import pytest

from oled_status.screen.framebuffer import FrameBuffer


@pytest.fixture
def frame_buffer() -> FrameBuffer:
    return FrameBuffer(128, 64)


@pytest.mark.parametrize("fraction", [0.0, 0.5, 1.0])
def test_bar_border_is_always_drawn(frame_buffer: FrameBuffer, fraction: float) -> None:
    frame_buffer.draw_bar(10, 20, 50, 7, fraction)
    pixels = frame_buffer.pixels

    # edge midpoints: top, bottom, left, right
    assert pixels[20, 35]
    assert pixels[27, 35]
    assert pixels[23, 10]
    assert pixels[23, 60]


@pytest.mark.parametrize("fraction,filled", [(0.0, False), (0.5, True), (1.0, True)])
def test_bar_interior_is_filled_only_above_zero(frame_buffer: FrameBuffer, fraction: float, filled: bool) -> None:
    frame_buffer.draw_bar(10, 20, 50, 7, fraction)

    interior = frame_buffer.pixels[21:27, 11:60]
    assert interior.any() == filled


def test_bar_fill_width_is_floored(frame_buffer: FrameBuffer) -> None:
    # (50 - 2) * 0.5 = 24 columns starting at x + 1
    frame_buffer.draw_bar(10, 20, 50, 7, 0.5)
    pixels = frame_buffer.pixels

    assert pixels[21:27, 11:35].all()
    assert not pixels[21:27, 35:60].any()


def test_empty_label_touches_no_pixels(frame_buffer: FrameBuffer) -> None:
    frame_buffer.add_label(10, 20, "")

    assert not frame_buffer.pixels.any()


def test_label_sets_pixels_above_baseline(frame_buffer: FrameBuffer) -> None:
    frame_buffer.add_label(0, 12, "CPU")
    pixels = frame_buffer.pixels

    assert pixels.any()
    assert not pixels[13:].any()


def test_label_outside_of_buffer_is_clipped(frame_buffer: FrameBuffer) -> None:
    frame_buffer.add_label(120, 12, "a label that is much too long")

    assert frame_buffer.pixels.shape == (64, 128)
    assert frame_buffer.pixels[:, 120:].any()


def test_clear_resets_every_pixel(frame_buffer: FrameBuffer) -> None:
    frame_buffer.add_label(0, 12, "text")
    frame_buffer.draw_bar(0, 30, 127, 7, 1.0)

    frame_buffer.clear()

    assert not frame_buffer.pixels.any()
    assert frame_buffer.bounds == (0, 0, 128, 64)
