import argparse
import logging
from pathlib import Path

from asciivid.config import RenderConfig
from asciivid.exceptions import AsciividError
from asciivid.log import setup_logging
from asciivid.pipeline import FramePipeline

logger = logging.getLogger("asciivid.cli")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Re-render videos as coloured ASCII art")
    parser.add_argument("files", nargs="+", help="Input video file(s); each writes <name>_out.mp4 alongside it")
    args = parser.parse_args(argv)

    setup_logging()

    paths = [Path(name) for name in args.files]
    for path in paths:
        if not path.exists():
            logger.error("File not found: %s", path)
            return 1

    try:
        reports = FramePipeline(RenderConfig()).process_all(paths)
    except AsciividError as exc:
        logger.error("%s. Exiting.", exc)
        return 1
    for report in reports:
        logger.info("Wrote %d frames to %s", report.frames_written, report.destination)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
