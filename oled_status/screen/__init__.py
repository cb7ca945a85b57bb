from oled_status.screen.component import ComponentRenderer
from oled_status.screen.compositor import ScreenCompositor
from oled_status.screen.framebuffer import FrameBuffer

__all__ = ["ComponentRenderer", "ScreenCompositor", "FrameBuffer"]
