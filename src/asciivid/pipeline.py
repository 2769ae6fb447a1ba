import logging
import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from tqdm import tqdm

from asciivid.config import RenderConfig
from asciivid.engine import AsciiEngine, FrameObserver
from asciivid.exceptions import EndOfStream
from asciivid.grid import TextGrid
from asciivid.video import VideoSink, VideoSource, output_path

logger = logging.getLogger(__name__)


class PipelineState(Enum):
    OPENING = "opening"
    STATS_COMPUTED = "stats_computed"
    RENDERING = "rendering"
    CLOSED = "closed"


@dataclass
class RunReport:
    source: Path
    destination: Path
    frames_read: int
    frames_written: int
    frames_skipped: int
    elapsed: float  # seconds


def format_elapsed(seconds: float) -> str:
    return f"{seconds:.3f}s"


class FramePipeline:
    """Converts video files to ASCII-art videos, one frame at a time.

    ``open_source`` and ``open_sink`` default to the OpenCV-backed
    :class:`VideoSource` and :class:`VideoSink`; both are used as context
    managers so their handles are released on every exit path.
    """

    def __init__(
        self,
        config: RenderConfig | None = None,
        engine: AsciiEngine | None = None,
        observer: FrameObserver | None = None,
        open_source: Callable[[Path], VideoSource] = VideoSource,
        open_sink: Callable[[Path, tuple[int, int], float, str], VideoSink] = VideoSink,
    ):
        self.config = config or RenderConfig()
        self.engine = engine or AsciiEngine(self.config)
        self.observer = observer
        self.open_source = open_source
        self.open_sink = open_sink
        self.state = PipelineState.CLOSED

    def output_for(self, path: str | Path) -> Path:
        return output_path(path, self.config.out_suffix, self.config.out_ext)

    def process(self, path: str | Path) -> RunReport:
        """Convert one file. Raises SourceOpenError/SinkOpenError if either end cannot be opened."""
        source_path = Path(path)
        destination = self.output_for(source_path)
        self.state = PipelineState.OPENING
        logger.info("Reading in %s...", source_path)
        try:
            with self.open_source(source_path) as source:
                stats = source.stats
                self.state = PipelineState.STATS_COMPUTED
                logger.info(
                    "%s stats: %d frames, %dx%d at %.2f fps",
                    source_path,
                    stats.frame_count,
                    stats.width,
                    stats.height,
                    stats.fps,
                )
                grid = self.engine.grid_for(stats.width, stats.height)
                canvas_size = self.engine.canvas_size(grid)
                logger.debug(
                    "Grid %dx%d, %dx%d px windows, output %dx%d",
                    grid.cols,
                    grid.rows,
                    grid.window_width,
                    grid.window_height,
                    *canvas_size,
                )

                start = time.perf_counter()
                with self.open_sink(destination, canvas_size, stats.fps, self.config.fourcc) as sink:
                    read, written, skipped = self._render_frames(source, sink, grid, stats.frame_count)
                elapsed = time.perf_counter() - start
        finally:
            self.state = PipelineState.CLOSED

        logger.info("Video processing time: %s", format_elapsed(elapsed))
        if skipped:
            logger.warning("%s: skipped %d empty frame(s)", source_path, skipped)
        return RunReport(
            source=source_path,
            destination=destination,
            frames_read=read,
            frames_written=written,
            frames_skipped=skipped,
            elapsed=elapsed,
        )

    def process_all(self, paths: Iterable[str | Path]) -> list[RunReport]:
        """Convert files in order, stopping at the first one that cannot be opened."""
        return [self.process(path) for path in paths]

    def _render_frames(
        self, source: VideoSource, sink: VideoSink, grid: TextGrid, frame_count: int
    ) -> tuple[int, int, int]:
        # Without a reported count, read until the decoder runs dry
        total = frame_count if frame_count > 0 else None
        index = written = skipped = 0
        with tqdm(total=total, unit="frame", desc=source.path.name, disable=not self.config.show_progress) as bar:
            while total is None or index < total:
                self.state = PipelineState.RENDERING
                try:
                    frame = source.read()
                except EndOfStream:
                    if total is None:
                        break
                    logger.warning("Missing frame %d/%d in %s, stream ended early", index, total, source.path)
                    frame = None
                else:
                    if frame is None:
                        logger.warning("Empty frame %d/%s in %s, skipping", index, total or "?", source.path)
                if frame is None:
                    skipped += 1
                else:
                    rendered = self.engine.render(frame, grid)
                    sink.write(rendered.canvas)
                    written += 1
                    if self.observer is not None:
                        self.observer(index, frame, rendered)
                index += 1
                bar.update()
        return index, written, skipped
