"""A short notice shown at the bottom of the window that fades out."""

from __future__ import annotations

from dataclasses import dataclass

FPS_TARGET = 60

MAX_MESSAGE_LEN = 25
RENDER_WIDTH = 100
RENDER_HEIGHT = 25

TOO_LONG_MESSAGE = "ERROR_MAX_LEN"


@dataclass
class Toast:
    """A message visible for a number of frames."""

    text: str = ""
    duration: int = 0
    visible: bool = False

    def message(self, text: str, duration: int) -> None:
        """Show text for the given number of frames."""
        if len(text.encode("utf-8")) >= MAX_MESSAGE_LEN:
            text = TOO_LONG_MESSAGE
        self.text = text
        self.visible = True
        self.duration = duration

    def update(self) -> None:
        """Advance one frame, hiding the toast once its time has run out."""
        if self.duration == 0:
            self.visible = False
        self.duration -= 1

    def alpha(self) -> int:
        """Opacity 0-255: full, then fading during the last second."""
        if self.duration >= FPS_TARGET:
            return 255
        return int(max(self.duration, 0) / FPS_TARGET * 255)