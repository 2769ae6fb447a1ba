import logging
from dataclasses import dataclass
from pathlib import Path

import cv2
import numpy as np

from asciivid.exceptions import EndOfStream, RenderError, SinkOpenError, SourceOpenError

logger = logging.getLogger(__name__)

DEFAULT_FPS = 30.0


@dataclass(frozen=True)
class VideoStats:
    frame_count: int  # as reported by the container; <= 0 when unknown
    width: int
    height: int
    fps: float


def output_path(path: str | Path, suffix: str = "_out", ext: str = ".mp4") -> Path:
    """Output file for ``path``: extension dropped, ``suffix`` and ``ext`` appended (clip.mov -> clip_out.mp4)."""
    path = Path(path)
    return path.with_name(path.stem + suffix + ext)


class VideoSource:
    """Decoded frames of a video file, in presentation order."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._capture = cv2.VideoCapture(str(self.path))
        if not self._capture.isOpened():
            self._capture.release()
            raise SourceOpenError(f"Failed to read {self.path}")
        fps = self._capture.get(cv2.CAP_PROP_FPS)
        self.stats = VideoStats(
            frame_count=int(self._capture.get(cv2.CAP_PROP_FRAME_COUNT)),
            width=int(self._capture.get(cv2.CAP_PROP_FRAME_WIDTH)),
            height=int(self._capture.get(cv2.CAP_PROP_FRAME_HEIGHT)),
            fps=fps if fps and fps > 0 else DEFAULT_FPS,
        )

    def read(self) -> np.ndarray | None:
        """Next BGR frame, or None if the decoder produced an empty frame for this position.

        Raises EndOfStream once the container has no more frames to grab.
        """
        if not self._capture.grab():
            raise EndOfStream(f"No more frames in {self.path}")
        ok, frame = self._capture.retrieve()
        if not ok or frame is None or frame.size == 0:
            return None
        return frame

    def close(self) -> None:
        self._capture.release()

    def __enter__(self) -> "VideoSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class VideoSink:
    """Encodes fixed-size BGR frames into a video file. Must be closed to flush trailing data."""

    def __init__(self, path: str | Path, frame_size: tuple[int, int], fps: float, fourcc: str = "mp4v"):
        self.path = Path(path)
        self.frame_size = frame_size
        self.frames_written = 0
        self._writer = cv2.VideoWriter(str(self.path), cv2.VideoWriter_fourcc(*fourcc), fps, frame_size, True)
        if not self._writer.isOpened():
            self._writer.release()
            raise SinkOpenError(f"File {self.path} could not be opened for writing")

    def write(self, frame: np.ndarray) -> None:
        size = (frame.shape[1], frame.shape[0])
        if size != self.frame_size:
            raise RenderError(f"Frame of {size[0]}x{size[1]} does not match output size {self.frame_size}")
        self._writer.write(frame)
        self.frames_written += 1

    def close(self) -> None:
        self._writer.release()
        logger.debug("Closed %s after %d frames", self.path, self.frames_written)

    def __enter__(self) -> "VideoSink":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
