"""cuescan: cuesheet track and timing extraction for media library scanners."""

__version__ = "0.1.0"
