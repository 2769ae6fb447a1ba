from dataclasses import dataclass

from asciivid.exceptions import ConfigError

CANNY_APERTURES = (3, 5, 7)


@dataclass(frozen=True)
class RenderConfig:
    """Tunables for one conversion run. Fixed for every frame of every input."""

    text_width: int = 120
    text_height: int = 48
    blur_kernel: int = 7
    low_threshold: float = 30.0
    threshold_ratio: float = 3.0
    aperture_size: int = 3
    char_thresh: int = 10
    glyph_char: str = "#"
    font_path: str | None = None
    font_size: int = 12
    out_suffix: str = "_out"
    out_ext: str = ".mp4"
    fourcc: str = "mp4v"
    show_progress: bool = True

    def __post_init__(self):
        if self.text_width < 1 or self.text_height < 1:
            raise ConfigError(f"Text grid must be at least 1x1, got {self.text_width}x{self.text_height}")
        if self.blur_kernel < 1 or self.blur_kernel % 2 == 0:
            raise ConfigError(f"Blur kernel must be a positive odd number, got {self.blur_kernel}")
        if self.aperture_size not in CANNY_APERTURES:
            raise ConfigError(f"Aperture size must be one of {CANNY_APERTURES}, got {self.aperture_size}")
        if self.low_threshold <= 0:
            raise ConfigError(f"Low threshold must be positive, got {self.low_threshold}")
        if self.threshold_ratio < 1:
            raise ConfigError(f"Threshold ratio must be >= 1, got {self.threshold_ratio}")
        if self.char_thresh < 0:
            raise ConfigError(f"Character threshold must be >= 0, got {self.char_thresh}")
        if len(self.glyph_char) != 1:
            raise ConfigError(f"Glyph must be a single character, got {self.glyph_char!r}")
        if self.font_size < 1:
            raise ConfigError(f"Font size must be positive, got {self.font_size}")
        if not self.out_ext.startswith("."):
            raise ConfigError(f"Output extension must start with '.', got {self.out_ext!r}")
        if len(self.fourcc) != 4:
            raise ConfigError(f"FourCC must be 4 characters, got {self.fourcc!r}")

    @property
    def high_threshold(self) -> float:
        return self.low_threshold * self.threshold_ratio
