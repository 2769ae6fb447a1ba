class AsciividError(Exception):
    """Base exception for asciivid."""


class ConfigError(AsciividError):
    """Invalid render configuration."""


class SourceOpenError(AsciividError):
    """Input video could not be opened for reading."""


class SinkOpenError(AsciividError):
    """Output video could not be opened for writing."""


class GridError(AsciividError):
    """Frame is too small to host the text grid."""


class RenderError(AsciividError):
    """Rendered frame does not fit the output stream."""


class EndOfStream(AsciividError):
    """The decoder has no further frames."""
