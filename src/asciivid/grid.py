from dataclasses import dataclass

from asciivid.exceptions import GridError


@dataclass(frozen=True)
class TextGrid:
    """Fixed character grid laid over a frame's pixel space.

    Each cell samples a ``window_width`` x ``window_height`` pixel window.
    Pixels past ``cols * window_width`` or ``rows * window_height`` are not sampled.
    """

    cols: int
    rows: int
    window_width: int
    window_height: int

    @classmethod
    def for_frame(cls, frame_width: int, frame_height: int, cols: int, rows: int) -> "TextGrid":
        window_width = frame_width // cols
        window_height = frame_height // rows
        if window_width == 0 or window_height == 0:
            raise GridError(f"Frame of {frame_width}x{frame_height} is too small for a {cols}x{rows} text grid")
        return cls(cols=cols, rows=rows, window_width=window_width, window_height=window_height)

    @property
    def cell_count(self) -> int:
        return self.cols * self.rows

    @property
    def sampled_size(self) -> tuple[int, int]:
        """(width, height) of the pixel area covered by windows."""
        return self.cols * self.window_width, self.rows * self.window_height

    def window(self, row: int, col: int) -> tuple[int, int, int, int]:
        """Pixel rectangle (x, y, width, height) sampled by a cell."""
        return col * self.window_width, row * self.window_height, self.window_width, self.window_height
